from setuptools import setup, find_packages

setup(
    name="lookup3",
    version="0.1.0",
    description="Bob Jenkins' lookup3 hashlittle for Python: a fast, non-cryptographic 32-bit hash with a write-once streaming interface, key helpers and columnar hashing.",
    long_description=open("Readme.md", encoding="utf-8").read(),
    long_description_content_type="text/markdown",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    include_package_data=True,
    install_requires=["structlog"],
    extras_require={
        "numpy": ["numpy"],
        "dataframes": ["pandas"],
        "arrow": ["pyarrow"],
        "polars": ["polars"],
        "test": ["pytest"],
    },
    python_requires=">=3.7",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: Public Domain",
        "Operating System :: OS Independent",
    ],
    zip_safe=False,
)
