from __future__ import annotations

from typing import Any, Iterable, List

import structlog

from .keys import hash_key

logger = structlog.get_logger()


def _hash_values(values: Iterable[Any], seed: int, backend: str) -> List[int]:
    hashes = [hash_key(val, seed=seed).intdigest() for val in values]
    logger.debug("column_hashed", backend=backend, rows=len(hashes))
    return hashes


def hash_pandas_series(series: Any, seed: int = 0):
    """
    Hash a pandas Series into a uint32 Series, keeping its index.
    """
    try:
        import pandas as pd  # type: ignore
    except ModuleNotFoundError as exc:
        raise ImportError(
            "Install pandas to use hash_pandas_series: pip install pandas"
        ) from exc

    hashes = _hash_values(series, seed, "pandas")
    return pd.Series(hashes, index=getattr(series, "index", None), dtype="uint32")


def hash_arrow_array(array: Any, seed: int = 0):
    """
    Hash a pyarrow Array (or values coercible to one) into a uint32 Array.
    """
    try:
        import pyarrow as pa  # type: ignore
    except ModuleNotFoundError as exc:
        raise ImportError(
            "Install pyarrow to use hash_arrow_array: pip install pyarrow"
        ) from exc

    arr = array if hasattr(array, "to_pylist") else pa.array(array)
    values = (val.as_py() if hasattr(val, "as_py") else val for val in arr)
    return pa.array(_hash_values(values, seed, "pyarrow"), type=pa.uint32())


def hash_polars_series(series: Any, seed: int = 0):
    """
    Hash a polars Series into a UInt32 Series named after the input.
    """
    try:
        import polars as pl  # type: ignore
    except ModuleNotFoundError as exc:
        raise ImportError(
            "Install polars to use hash_polars_series: pip install polars"
        ) from exc

    ser = series if hasattr(series, "dtype") else pl.Series(series)
    name = getattr(ser, "name", None) or "hash"
    return pl.Series(name=name, values=_hash_values(ser, seed, "polars"), dtype=pl.UInt32)


__all__ = ["hash_arrow_array", "hash_pandas_series", "hash_polars_series"]
