"""Exceptions raised by the keystore and key derivation layers."""

from __future__ import annotations

from typing import Any


class KeystoreError(Exception):
    """Base exception for keystore-related errors."""

    pass


class KeyNotFoundError(KeystoreError):
    """Raised when signing is requested for an address the keystore does not hold."""

    def __init__(self, address: Any):
        self.address = address
        super().__init__(f"Cannot find key for address: [{address}]")


class CorruptedKeystoreError(KeystoreError):
    """Raised when a keystore file exists but cannot be parsed or decoded."""

    pass


class KeystoreIOError(KeystoreError):
    """Raised when reading or writing the keystore file fails."""

    pass


class InvalidMnemonicError(KeystoreError):
    """Raised when a phrase fails BIP-39 wordlist or checksum validation."""

    pass


class SigningError(KeystoreError):
    """Raised when the underlying signature engine fails."""

    pass


class InsufficientSeedError(KeystoreError):
    """Raised when a seeded RNG is asked for more bytes than its seed holds."""

    def __init__(self, requested: int, remaining: int):
        self.requested = requested
        self.remaining = remaining
        super().__init__(
            f"Seed exhausted: requested {requested} bytes, {remaining} remaining"
        )
