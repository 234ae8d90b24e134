from keystore.account_keystore import AccountKeystore, KeystoreSigner
from keystore.base import KeystoreBackend
from keystore.file_keystore import FileKeystore
from keystore.keystore_type import KeystoreType

__all__ = [
    "KeystoreBackend",
    "FileKeystore",
    "AccountKeystore",
    "KeystoreSigner",
    "KeystoreType",
]
