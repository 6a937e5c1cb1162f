from __future__ import annotations

import structlog

_MASK_32 = 0xFFFFFFFF

logger = structlog.get_logger()


class Lookup3Error(Exception):
    """Base class for errors raised by lookup3."""


class AlreadyWrittenError(Lookup3Error):
    """Raised when a HashLittle32 is written to twice without a reset."""


def _check_seed(seed: int) -> int:
    if not isinstance(seed, int) or isinstance(seed, bool):
        raise TypeError("seed must be an int")
    return seed & _MASK_32


def _rotl(x: int, k: int) -> int:
    """Rotate left for 32-bit values."""
    return ((x << k) | (x >> (32 - k))) & _MASK_32


def _mix(a: int, b: int, c: int) -> tuple[int, int, int]:
    a = (a - c) & _MASK_32
    a ^= _rotl(c, 4)
    c = (c + b) & _MASK_32

    b = (b - a) & _MASK_32
    b ^= _rotl(a, 6)
    a = (a + c) & _MASK_32

    c = (c - b) & _MASK_32
    c ^= _rotl(b, 8)
    b = (b + a) & _MASK_32

    a = (a - c) & _MASK_32
    a ^= _rotl(c, 16)
    c = (c + b) & _MASK_32

    b = (b - a) & _MASK_32
    b ^= _rotl(a, 19)
    a = (a + c) & _MASK_32

    c = (c - b) & _MASK_32
    c ^= _rotl(b, 4)
    b = (b + a) & _MASK_32

    return a, b, c


def _final(a: int, b: int, c: int) -> tuple[int, int, int]:
    c ^= b
    c = (c - _rotl(b, 14)) & _MASK_32

    a ^= c
    a = (a - _rotl(c, 11)) & _MASK_32

    b ^= a
    b = (b - _rotl(a, 25)) & _MASK_32

    c ^= b
    c = (c - _rotl(b, 16)) & _MASK_32

    a ^= c
    a = (a - _rotl(c, 4)) & _MASK_32

    b ^= a
    b = (b - _rotl(a, 14)) & _MASK_32

    c ^= b
    c = (c - _rotl(b, 24)) & _MASK_32

    return a, b, c


def hashlittle(data: bytes, initval: int = 0) -> int:
    """
    Hash a byte sequence into a 32-bit value with lookup3 ``hashlittle``.

    Input is always read as little-endian 32-bit words, so the result does not
    depend on the host byte order.

    Args:
        data: Bytes-like object to hash
        initval: Optional 32-bit seed (default 0)

    Returns:
        The 32-bit hash as an unsigned int

    Raises:
        TypeError: If data is not bytes-like or initval is not an int
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError("data must be bytes-like")
    raw = bytes(data)
    length = len(raw)
    a = b = c = (0xDEADBEEF + length + _check_seed(initval)) & _MASK_32

    offset = 0
    while length - offset > 12:
        a = (a + int.from_bytes(raw[offset : offset + 4], "little")) & _MASK_32
        b = (b + int.from_bytes(raw[offset + 4 : offset + 8], "little")) & _MASK_32
        c = (c + int.from_bytes(raw[offset + 8 : offset + 12], "little")) & _MASK_32
        a, b, c = _mix(a, b, c)
        offset += 12

    tail = raw[offset:]
    if not tail:
        # only the empty key gets here; the block loop always leaves 1-12 bytes
        return c

    regs = [a, b, c]
    for idx, value in enumerate(tail):
        regs[idx // 4] += value << (8 * (idx % 4))
    a, b, c = (reg & _MASK_32 for reg in regs)

    _, _, c = _final(a, b, c)
    return c


class HashLittle32:
    """
    lookup3 ``hashlittle`` behind a streaming-hash interface.

    The hash depends on the total key length, so all bytes must be written in
    a single call. A second write before ``reset()`` raises
    ``AlreadyWrittenError`` instead of silently producing a wrong hash.

    The result is serialized big-endian by ``sum()``/``digest()`` even though
    input words are loaded little-endian.
    """

    name = "hashlittle"
    digest_size = 4

    def __init__(self, seed: int = 0):
        self._seed = _check_seed(seed)
        self._value = 0
        self._written = False

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def written(self) -> bool:
        return self._written

    def copy(self) -> "HashLittle32":
        dup = self.__class__.__new__(self.__class__)
        dup._seed = self._seed
        dup._value = self._value
        dup._written = self._written
        return dup

    def reset(self) -> None:
        self._value = 0
        self._written = False

    def write(self, data: bytes) -> int:
        """
        Hash ``data`` and store the result.

        Returns:
            Number of bytes consumed, always ``len(data)``

        Raises:
            TypeError: If data is not bytes-like
            AlreadyWrittenError: If the hash was already written since the last reset
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError("data must be bytes-like")
        if self._written:
            logger.warning("hash_write_rejected", value=f"{self._value:08x}")
            raise AlreadyWrittenError("HashLittle32 can only be written to once")

        raw = bytes(data)
        self._value = hashlittle(raw, self._seed)
        self._written = True
        return len(raw)

    def update(self, data: bytes) -> "HashLittle32":
        self.write(data)
        return self

    def sum32(self) -> int:
        return self._value

    def sum(self, prefix: bytes = b"") -> bytes:
        return bytes(prefix) + self._value.to_bytes(4, byteorder="big")

    def size(self) -> int:
        return self.digest_size

    def block_size(self) -> int:
        return 1

    # hashlib-style accessors ------------------------------------------
    def digest(self) -> bytes:
        return self.sum()

    def hexdigest(self) -> str:
        return self.digest().hex()

    def intdigest(self) -> int:
        return self._value


def new(seed: int = 0) -> HashLittle32:
    """Convenience constructor matching hashlib-style usage."""
    return HashLittle32(seed)


__all__ = [
    "AlreadyWrittenError",
    "HashLittle32",
    "Lookup3Error",
    "hashlittle",
    "new",
]
