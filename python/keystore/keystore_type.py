"""Keystore selection at startup."""

from __future__ import annotations

from dataclasses import dataclass

from keystore.account_keystore import AccountKeystore
from keystore.file_keystore import FileKeystore


@dataclass(frozen=True)
class KeystoreType:
    """Which backend to build. Only file-based keystores exist today."""

    kind: str
    path: str

    FILE = "File"

    @classmethod
    def file(cls, path: str) -> "KeystoreType":
        return cls(kind=cls.FILE, path=str(path))

    def init(self) -> AccountKeystore:
        if self.kind == self.FILE:
            return AccountKeystore(FileKeystore.load_or_create(self.path))
        raise ValueError(f"Unsupported keystore type: {self.kind}")

    def __str__(self) -> str:
        return f"Keystore Type : {self.kind}\nKeystore Path : {self.path}"
