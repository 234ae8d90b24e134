"""Random sources for key generation.

`CryptoRng` is the interface the key-generation routine consumes.
`SystemRng` is the real thing (``os.urandom``); `SeededRng` replays a fixed
seed so a mnemonic always produces the same key. `SeededRng` is for
derivation and tests only: never use it to mint fresh, non-reproducible keys.
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod

from common.errors import InsufficientSeedError


class CryptoRng(ABC):
    """Cryptographically secure random byte source."""

    @abstractmethod
    def random_bytes(self, n: int) -> bytes:
        """Return exactly ``n`` random bytes or raise."""
        ...

    def fill_bytes(self, buf: bytearray) -> None:
        buf[:] = self.random_bytes(len(buf))

    def next_u32(self) -> int:
        return int.from_bytes(self.random_bytes(4), "little")

    def next_u64(self) -> int:
        return int.from_bytes(self.random_bytes(8), "little")


class SystemRng(CryptoRng):
    """Operating system CSPRNG."""

    def random_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {n}")
        return os.urandom(n)


class SeededRng(CryptoRng):
    """Deterministic CryptoRng that hands out the bytes of a fixed seed in order.

    Two instances built from the same seed produce the same stream. Asking
    for more bytes than remain raises `InsufficientSeedError` and consumes
    nothing; the seed is never wrapped, repeated or padded.
    """

    def __init__(self, seed: bytes):
        if not isinstance(seed, (bytes, bytearray)):
            raise TypeError(f"Seed must be bytes, got {type(seed).__name__}")
        self._seed = bytes(seed)
        self._offset = 0

    @property
    def remaining(self) -> int:
        return len(self._seed) - self._offset

    def random_bytes(self, n: int) -> bytes:
        if n < 0:
            raise ValueError(f"Cannot read a negative number of bytes: {n}")
        if n > self.remaining:
            raise InsufficientSeedError(n, self.remaining)
        out = self._seed[self._offset : self._offset + n]
        self._offset += n
        return out

    def __repr__(self) -> str:
        # never render the seed itself
        return f"SeededRng(length={len(self._seed)}, remaining={self.remaining})"
