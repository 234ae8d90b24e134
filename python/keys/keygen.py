"""Key generation from an injectable random source."""

from __future__ import annotations

from typing import Optional, Tuple

from keys.address import Address
from keys.keypair import (
    PRIVATE_KEY_LENGTH,
    Ed25519KeyPair,
    KeyPair,
    Secp256k1KeyPair,
    SignatureScheme,
    is_valid_secp256k1_scalar,
)
from keys.rng import CryptoRng, SystemRng


def generate_keypair(
    rng: CryptoRng,
    scheme: SignatureScheme = SignatureScheme.ED25519,
) -> Tuple[Address, KeyPair]:
    """Generate a key pair whose private key is read from ``rng``.

    The result is a pure function of the bytes the RNG yields:
    Ed25519 consumes exactly 32 bytes; secp256k1 draws 32-byte candidates
    until one is a valid scalar. Exhausting a `SeededRng` propagates
    `InsufficientSeedError`.
    """
    if scheme == SignatureScheme.ED25519:
        kp: KeyPair = Ed25519KeyPair(rng.random_bytes(PRIVATE_KEY_LENGTH))
    else:
        candidate = rng.random_bytes(PRIVATE_KEY_LENGTH)
        while not is_valid_secp256k1_scalar(candidate):
            candidate = rng.random_bytes(PRIVATE_KEY_LENGTH)
        kp = Secp256k1KeyPair(candidate)
    return kp.address(), kp


def generate_new_keypair(
    scheme: SignatureScheme = SignatureScheme.ED25519,
    rng: Optional[CryptoRng] = None,
) -> Tuple[Address, KeyPair]:
    """Fresh key pair from the system CSPRNG (or ``rng`` if given)."""
    return generate_keypair(rng or SystemRng(), scheme)
