"""Key pairs, public keys and signatures for the supported signature schemes.

Serialized forms all start with the scheme flag byte:

- key pair:   flag || private key (32 bytes)
- public key: flag || public key (Ed25519: 32 raw bytes, secp256k1: 33 byte compressed point)
- signature:  flag || signature || public key

A key pair's base64 form is the keystore record stored on disk.
"""

from __future__ import annotations

import base64
import binascii
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)
from tronpy.keys import PrivateKey as TronPrivateKey
from tronpy.keys import PublicKey as TronPublicKey
from tronpy.keys import Signature as TronSignature

from common.errors import SigningError
from keys.address import Address

PRIVATE_KEY_LENGTH = 32

# secp256k1 field prime and group order
SECP256K1_P = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F
SECP256K1_N = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141


class SignatureScheme(IntEnum):
    ED25519 = 0x00
    SECP256K1 = 0x01

    @classmethod
    def from_name(cls, name: str) -> "SignatureScheme":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown signature scheme: {name}") from None

    @classmethod
    def from_flag(cls, flag: int) -> "SignatureScheme":
        try:
            return cls(flag)
        except ValueError:
            raise ValueError(f"Unknown signature scheme flag: {flag:#04x}") from None

    @property
    def label(self) -> str:
        return self.name.lower()


def is_valid_secp256k1_scalar(raw: bytes) -> bool:
    return 0 < int.from_bytes(raw, "big") < SECP256K1_N


def _compress_point(raw64: bytes) -> bytes:
    x, y = raw64[:32], raw64[32:]
    prefix = b"\x03" if y[-1] & 1 else b"\x02"
    return prefix + x


def _decompress_point(compressed: bytes) -> bytes:
    if len(compressed) != 33 or compressed[0] not in (2, 3):
        raise ValueError("Invalid compressed secp256k1 point")
    x = int.from_bytes(compressed[1:], "big")
    if x >= SECP256K1_P:
        raise ValueError("Invalid compressed secp256k1 point")
    y_sq = (pow(x, 3, SECP256K1_P) + 7) % SECP256K1_P
    y = pow(y_sq, (SECP256K1_P + 1) // 4, SECP256K1_P)
    if (y * y) % SECP256K1_P != y_sq:
        raise ValueError("Point is not on the secp256k1 curve")
    if (y & 1) != (compressed[0] & 1):
        y = SECP256K1_P - y
    return x.to_bytes(32, "big") + y.to_bytes(32, "big")


@dataclass(frozen=True, order=True)
class PublicKey:
    scheme: SignatureScheme
    key_bytes: bytes

    def to_bytes(self) -> bytes:
        return bytes([self.scheme]) + self.key_bytes

    def encode_base64(self) -> str:
        return base64.b64encode(self.to_bytes()).decode("ascii")

    def address(self) -> Address:
        return Address.from_public_key(self)

    def verify(self, message: bytes, signature: bytes) -> bool:
        if self.scheme == SignatureScheme.ED25519:
            try:
                Ed25519PublicKey.from_public_bytes(self.key_bytes).verify(signature, message)
            except InvalidSignature:
                return False
            return True
        tron_pub = TronPublicKey(_decompress_point(self.key_bytes))
        return bool(TronSignature(signature).verify_msg(message, tron_pub))

    def __repr__(self) -> str:
        return f"PublicKey({self.scheme.label}, {self.encode_base64()})"


@dataclass(frozen=True)
class Signature:
    scheme: SignatureScheme
    signature: bytes
    public_key: PublicKey

    def to_bytes(self) -> bytes:
        return bytes([self.scheme]) + self.signature + self.public_key.key_bytes

    def encode_base64(self) -> str:
        return base64.b64encode(self.to_bytes()).decode("ascii")

    def verify(self, message: bytes) -> bool:
        return self.public_key.verify(message, self.signature)


class KeyPair(ABC):
    """Private/public key pair for one signature scheme.

    The private key never shows up in ``repr()``; it only leaves the object
    through `to_bytes` / `encode_base64` (the keystore record encoding).
    """

    scheme: SignatureScheme

    def __init__(self, private_key: bytes):
        if len(private_key) != PRIVATE_KEY_LENGTH:
            raise ValueError(
                f"Invalid private key length: expected {PRIVATE_KEY_LENGTH}, got {len(private_key)}"
            )
        self._private_key = bytes(private_key)

    @property
    def private_key_bytes(self) -> bytes:
        return self._private_key

    @property
    @abstractmethod
    def public_key(self) -> PublicKey:
        ...

    @abstractmethod
    def _sign(self, message: bytes) -> bytes:
        ...

    def address(self) -> Address:
        return self.public_key.address()

    def try_sign(self, message: bytes) -> Signature:
        """Sign ``message``; engine failures surface as `SigningError`."""
        if not isinstance(message, (bytes, bytearray)):
            raise SigningError(f"Message must be bytes, got {type(message).__name__}")
        try:
            sig = self._sign(bytes(message))
        except (ValueError, TypeError) as exc:
            raise SigningError(f"{self.scheme.label} signing failed: {exc}") from exc
        return Signature(scheme=self.scheme, signature=sig, public_key=self.public_key)

    def to_bytes(self) -> bytes:
        return bytes([self.scheme]) + self._private_key

    def encode_base64(self) -> str:
        return base64.b64encode(self.to_bytes()).decode("ascii")

    @staticmethod
    def from_private_key(scheme: SignatureScheme, private_key: bytes) -> "KeyPair":
        if scheme == SignatureScheme.ED25519:
            return Ed25519KeyPair(private_key)
        return Secp256k1KeyPair(private_key)

    @staticmethod
    def from_bytes(data: bytes) -> "KeyPair":
        if not data:
            raise ValueError("Empty key pair encoding")
        scheme = SignatureScheme.from_flag(data[0])
        return KeyPair.from_private_key(scheme, data[1:])

    @staticmethod
    def decode_base64(text: str) -> "KeyPair":
        try:
            raw = base64.b64decode(text, validate=True)
        except binascii.Error as exc:
            raise ValueError(f"Invalid base64 key pair: {exc}") from exc
        return KeyPair.from_bytes(raw)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyPair):
            return NotImplemented
        return self.to_bytes() == other.to_bytes()

    def __hash__(self) -> int:
        return hash(self.public_key)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(address={self.address()})"


class Ed25519KeyPair(KeyPair):
    scheme = SignatureScheme.ED25519

    def __init__(self, private_key: bytes):
        super().__init__(private_key)
        self._key = Ed25519PrivateKey.from_private_bytes(self._private_key)
        # normalise through the engine's own serialization
        self._private_key = self._key.private_bytes(
            Encoding.Raw, PrivateFormat.Raw, NoEncryption()
        )
        self._public_key = PublicKey(
            self.scheme, self._key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
        )

    @property
    def public_key(self) -> PublicKey:
        return self._public_key

    def _sign(self, message: bytes) -> bytes:
        return self._key.sign(message)


class Secp256k1KeyPair(KeyPair):
    scheme = SignatureScheme.SECP256K1

    def __init__(self, private_key: bytes):
        super().__init__(private_key)
        if not is_valid_secp256k1_scalar(self._private_key):
            raise ValueError("Invalid secp256k1 private key: scalar out of range")
        self._key = TronPrivateKey(self._private_key)
        self._public_key = PublicKey(
            self.scheme, _compress_point(self._key.public_key.to_bytes())
        )

    @property
    def public_key(self) -> PublicKey:
        return self._public_key

    def _sign(self, message: bytes) -> bytes:
        return self._key.sign_msg(message).to_bytes()
