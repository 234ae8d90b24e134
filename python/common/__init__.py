from common.errors import (
    CorruptedKeystoreError,
    InsufficientSeedError,
    InvalidMnemonicError,
    KeyNotFoundError,
    KeystoreError,
    KeystoreIOError,
    SigningError,
)
from common.logger import configure_logging, get_logger

__all__ = [
    "KeystoreError",
    "KeyNotFoundError",
    "CorruptedKeystoreError",
    "KeystoreIOError",
    "InvalidMnemonicError",
    "SigningError",
    "InsufficientSeedError",
    "configure_logging",
    "get_logger",
]
