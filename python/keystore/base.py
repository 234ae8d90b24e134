"""Keystore backend base class (abstract).

The account facade depends on this type only, so alternative backends
(remote signer, memory/db, etc.) can be swapped in without changing callers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from keys.address import Address
from keys.keypair import KeyPair, PublicKey, Signature


class KeystoreBackend(ABC):
    @abstractmethod
    def get_path(self) -> Optional[str]:
        """Get the path/identifier of the keystore (None when memory-only)."""
        ...

    @abstractmethod
    def sign(self, address: Address, message: bytes) -> Signature:
        """Sign with the key held for ``address``; raises KeyNotFoundError if absent."""
        ...

    @abstractmethod
    def add_key(self, keypair: KeyPair) -> None:
        """Store (or overwrite) a key pair under its derived address and persist."""
        ...

    @abstractmethod
    def keys(self) -> list[PublicKey]:
        """List public keys, ordered by address."""
        ...
