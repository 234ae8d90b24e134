"""Account address: a fixed-size identifier derived from a public key."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from typing import Any

ADDRESS_LENGTH = 20


@dataclass(frozen=True, order=True)
class Address:
    """20-byte account address, ordered by its raw bytes.

    Derived as ``sha3_256(scheme_flag || public_key_bytes)[:20]`` so keys of
    different schemes never share an address.
    """

    value: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.value, (bytes, bytearray)):
            raise TypeError(f"Address value must be bytes, got {type(self.value).__name__}")
        if len(self.value) != ADDRESS_LENGTH:
            raise ValueError(
                f"Invalid address length: expected {ADDRESS_LENGTH}, got {len(self.value)}"
            )
        object.__setattr__(self, "value", bytes(self.value))

    @classmethod
    def from_public_key(cls, public_key: Any) -> "Address":
        """Derive the address of a public key (anything exposing ``to_bytes()`` with its flag)."""
        digest = hashlib.sha3_256(public_key.to_bytes()).digest()
        return cls(digest[:ADDRESS_LENGTH])

    @classmethod
    def from_hex(cls, text: str) -> "Address":
        raw = text.strip()
        if raw[:2].lower() == "0x":
            raw = raw[2:]
        try:
            value = bytes.fromhex(raw)
        except ValueError:
            raise ValueError(f"Invalid address hex: {text!r}") from None
        return cls(value)

    def hex(self) -> str:
        return "0x" + self.value.hex()

    def __str__(self) -> str:
        return self.hex()

    def __repr__(self) -> str:
        return f"Address({self.hex()})"
