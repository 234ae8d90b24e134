from keys.address import ADDRESS_LENGTH, Address
from keys.keygen import generate_keypair, generate_new_keypair
from keys.keypair import (
    Ed25519KeyPair,
    KeyPair,
    PublicKey,
    Secp256k1KeyPair,
    Signature,
    SignatureScheme,
)
from keys.mnemonic import (
    entropy_from_phrase,
    phrase_from_entropy,
    seed_from_phrase,
    validate_phrase,
)
from keys.rng import CryptoRng, SeededRng, SystemRng

__all__ = [
    "ADDRESS_LENGTH",
    "Address",
    "SignatureScheme",
    "PublicKey",
    "Signature",
    "KeyPair",
    "Ed25519KeyPair",
    "Secp256k1KeyPair",
    "CryptoRng",
    "SystemRng",
    "SeededRng",
    "generate_keypair",
    "generate_new_keypair",
    "phrase_from_entropy",
    "entropy_from_phrase",
    "seed_from_phrase",
    "validate_phrase",
]
