from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .jenkins import hashlittle

try:
    import numpy as _np  # type: ignore

    _NUMPY_GENERIC = _np.generic  # type: ignore[attr-defined]
except ImportError:  # pragma: no cover - numpy is optional
    _NUMPY_GENERIC = ()  # type: ignore[assignment]


def _encode_int(value: int) -> bytes:
    if value == 0:
        return b"\x00"
    # one spare bit for the sign
    if value < 0:
        length = max(1, ((-value - 1).bit_length() + 8) // 8)
    else:
        length = max(1, (value.bit_length() + 8) // 8)
    return value.to_bytes(length, byteorder="big", signed=True)


def _normalize_scalar(value: Any) -> Any:
    if _NUMPY_GENERIC and isinstance(value, _NUMPY_GENERIC):
        return value.item()
    return value


def key_to_bytes(value: Any) -> bytes:
    """
    Convert a key value to the bytes that get hashed.

    - bytes, bytearray and memoryview are used as-is
    - str is encoded as UTF-8
    - int is encoded as minimal two's-complement big-endian bytes
    - numpy scalars are converted to Python scalars first

    Raises:
        TypeError: If value is of any other type (including bool and None)
    """
    value = _normalize_scalar(value)

    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    if isinstance(value, int) and not isinstance(value, bool):
        return _encode_int(value)
    raise TypeError(f"Unsupported key type for hashing: {type(value)!r}")


@dataclass(frozen=True)
class Lookup3Digest:
    _value: int

    def digest(self) -> bytes:
        return self._value.to_bytes(4, byteorder="big")

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return self._value


def hash_key(value: Any, seed: int = 0) -> Lookup3Digest:
    """
    Hash a single key value.

    Args:
        value: bytes-like, str, int or numpy scalar
        seed: Optional 32-bit seed passed to hashlittle

    Returns:
        Lookup3Digest with digest(), hexdigest() and intdigest() methods.

    Raises:
        TypeError: If value has an unsupported type
    """
    return Lookup3Digest(hashlittle(key_to_bytes(value), seed))


def bucket_for(value: Any, buckets: int, seed: int = 0) -> int:
    """Pick a bucket in ``range(buckets)`` for a key, e.g. a shard index."""
    if not isinstance(buckets, int) or isinstance(buckets, bool) or buckets <= 0:
        raise ValueError("buckets must be a positive int")
    return hash_key(value, seed).intdigest() % buckets


__all__ = ["Lookup3Digest", "bucket_for", "hash_key", "key_to_bytes"]
