"""BIP-39 mnemonic codec (python-mnemonic, English wordlist).

Phrases are secrets: they are never logged and never part of error messages.
"""

from __future__ import annotations

from functools import lru_cache

from mnemonic import Mnemonic

from common.errors import InvalidMnemonicError

MNEMONIC_LANGUAGE = "english"


@lru_cache(maxsize=1)
def _codec() -> Mnemonic:
    return Mnemonic(MNEMONIC_LANGUAGE)


def normalize_phrase(phrase: str) -> str:
    return " ".join(phrase.lower().split())


def validate_phrase(phrase: str) -> str:
    """Return the normalized phrase, or raise `InvalidMnemonicError`."""
    if not isinstance(phrase, str):
        raise InvalidMnemonicError(f"Mnemonic must be a string, got {type(phrase).__name__}")
    normalized = normalize_phrase(phrase)
    if not _codec().check(normalized):
        raise InvalidMnemonicError(
            f"Invalid mnemonic phrase ({len(normalized.split())} words): "
            "unknown word or bad checksum"
        )
    return normalized


def phrase_from_entropy(entropy: bytes) -> str:
    """Encode 16/20/24/28/32 bytes of entropy as a 12-24 word phrase."""
    return _codec().to_mnemonic(bytes(entropy))


def entropy_from_phrase(phrase: str) -> bytes:
    return bytes(_codec().to_entropy(validate_phrase(phrase)))


def seed_from_phrase(phrase: str, passphrase: str = "") -> bytes:
    """64-byte BIP-39 seed (PBKDF2-HMAC-SHA512, 2048 rounds)."""
    return bytes(Mnemonic.to_seed(validate_phrase(phrase), passphrase=passphrase))
