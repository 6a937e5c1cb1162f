"""
Bob Jenkins' lookup3 hashlittle: a fast, non-cryptographic 32-bit hash.
"""

from .jenkins import (
    AlreadyWrittenError,
    HashLittle32,
    Lookup3Error,
    hashlittle,
    new,
)
from .keys import Lookup3Digest, bucket_for, hash_key, key_to_bytes
from .vectorized import (
    hash_arrow_array,
    hash_pandas_series,
    hash_polars_series,
)

__all__ = [
    "AlreadyWrittenError",
    "HashLittle32",
    "Lookup3Digest",
    "Lookup3Error",
    "bucket_for",
    "hash_arrow_array",
    "hash_key",
    "hash_pandas_series",
    "hash_polars_series",
    "hashlittle",
    "key_to_bytes",
    "new",
]
