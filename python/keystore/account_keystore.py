"""Account keystore facade: the one entry point the application uses for keys.

Owns a single `KeystoreBackend` and adds mnemonic handling on top of it.
"""

from __future__ import annotations

from common.logger import get_logger
from keys.address import Address
from keys.keygen import generate_keypair
from keys.keypair import KeyPair, PublicKey, Signature, SignatureScheme
from keys.mnemonic import phrase_from_entropy, seed_from_phrase
from keys.rng import SeededRng
from keystore.base import KeystoreBackend


class AccountKeystore:
    def __init__(self, backend: KeystoreBackend):
        self._backend = backend

    @classmethod
    def from_backend(cls, backend: KeystoreBackend) -> "AccountKeystore":
        return cls(backend)

    @property
    def backend(self) -> KeystoreBackend:
        return self._backend

    def add_key(self, keypair: KeyPair) -> str:
        """Store ``keypair`` and return the mnemonic encoding its private key.

        The phrase is the BIP-39 encoding of the raw private key bytes, so the
        same key always yields the same phrase. It is returned once and is
        never persisted by the keystore.
        """
        private_key = keypair.private_key_bytes
        phrase = phrase_from_entropy(private_key)
        normalized = KeyPair.from_private_key(keypair.scheme, private_key)
        self._backend.add_key(normalized)
        get_logger(__name__).info(
            "account keystore: key added address=%s scheme=%s",
            normalized.address(),
            normalized.scheme.label,
        )
        return phrase

    def import_from_mnemonic(
        self,
        phrase: str,
        scheme: SignatureScheme = SignatureScheme.ED25519,
    ) -> Address:
        """Derive one key pair from ``phrase`` (empty passphrase), store it, return its address.

        Deterministic: the key-generation routine only ever reads from a
        `SeededRng` over the BIP-39 seed. An invalid phrase raises
        `InvalidMnemonicError` before the backend is touched.
        """
        seed = seed_from_phrase(phrase, passphrase="")
        address, keypair = generate_keypair(SeededRng(seed), scheme)
        self._backend.add_key(keypair)
        get_logger(__name__).info(
            "account keystore: key imported from mnemonic address=%s scheme=%s",
            address,
            scheme.label,
        )
        return address

    def keys(self) -> list[PublicKey]:
        return self._backend.keys()

    def addresses(self) -> list[Address]:
        return [pk.address() for pk in self.keys()]

    def signer(self, address: Address) -> "KeystoreSigner":
        return KeystoreSigner(self._backend, address)

    def sign(self, address: Address, message: bytes) -> Signature:
        return self._backend.sign(address, message)


class KeystoreSigner:
    """Signing handle for one address.

    Holds no key material: every `try_sign` goes back to the backend, so a
    key removed after the handle was created is reported as missing.
    """

    __slots__ = ("_backend", "address")

    def __init__(self, backend: KeystoreBackend, address: Address):
        self._backend = backend
        self.address = address

    def try_sign(self, message: bytes) -> Signature:
        return self._backend.sign(self.address, message)

    sign = try_sign

    def __repr__(self) -> str:
        return f"KeystoreSigner(address={self.address})"
