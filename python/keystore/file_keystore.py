"""File-based keystore: JSON array of base64-encoded key pairs."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable, Optional

from common.errors import CorruptedKeystoreError, KeyNotFoundError, KeystoreIOError
from common.logger import get_logger
from keys.address import Address
from keys.keypair import KeyPair, PublicKey, Signature
from keystore.base import KeystoreBackend


class FileKeystore(KeystoreBackend):
    """Keystore backend persisting every key pair to a single JSON file.

    Without a path the store is memory-only: `add_key` keeps the key in
    memory and skips the save (logged as a warning). Attach a path later
    with `set_path`. There is no file locking; one writer per path.
    """

    def __init__(
        self,
        keypairs: Iterable[KeyPair] = (),
        path: Optional[str] = None,
    ):
        # always keyed by derived address; later duplicates win
        self._keys: dict[Address, KeyPair] = {kp.address(): kp for kp in keypairs}
        self._path: Optional[str] = str(path) if path is not None else None

    @classmethod
    def load_or_create(cls, path: str) -> "FileKeystore":
        """Load the keystore at ``path``, or start empty if no file exists.

        Any malformed content aborts the whole load with
        `CorruptedKeystoreError`; nothing is partially loaded.
        """
        log = get_logger(__name__)
        path = str(path)
        log.debug("file keystore: load start path=%s", path)

        if not os.path.isfile(path):
            log.debug("file keystore: file missing, starting empty path=%s", path)
            return cls(path=path)

        try:
            with open(path, "rb") as f:
                raw = f.read()
        except OSError as exc:
            raise KeystoreIOError(f"Cannot read keystore file {path}: {exc}") from exc

        keypairs = _decode_records(raw, path)
        ks = cls(keypairs, path=path)
        log.info("file keystore: load ok path=%s keys=%d", path, len(ks))
        return ks

    def get_path(self) -> Optional[str]:
        return self._path

    def set_path(self, path: str) -> None:
        self._path = str(path)

    def sign(self, address: Address, message: bytes) -> Signature:
        keypair = self._keys.get(address)
        if keypair is None:
            raise KeyNotFoundError(address)
        return keypair.try_sign(message)

    def add_key(self, keypair: KeyPair) -> None:
        """Insert or overwrite, then save.

        A failed save raises `KeystoreIOError` but the in-memory entry stays:
        memory is then ahead of disk until the next successful save.
        """
        address = keypair.address()
        self._keys[address] = keypair
        get_logger(__name__).debug(
            "file keystore: key set address=%s scheme=%s", address, keypair.scheme.label
        )
        self.save()

    def keys(self) -> list[PublicKey]:
        return [kp.public_key for kp in self.key_pairs()]

    def key_pairs(self) -> list[KeyPair]:
        return [self._keys[address] for address in sorted(self._keys)]

    def __contains__(self, address: object) -> bool:
        return address in self._keys

    def __len__(self) -> int:
        return len(self._keys)

    def save(self) -> None:
        """Write every key pair to file. Atomic via tmp+rename."""
        log = get_logger(__name__)
        if self._path is None:
            log.warning(
                "file keystore: no path set, keeping %d keys in memory only", len(self._keys)
            )
            return

        records = [kp.encode_base64() for kp in self.key_pairs()]
        tmp_path = self._path + ".tmp"
        try:
            Path(self._path).parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2)
            os.replace(tmp_path, self._path)
        except OSError as exc:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise KeystoreIOError(f"Cannot write keystore file {self._path}: {exc}") from exc
        log.info("file keystore: write ok path=%s keys=%d", self._path, len(records))


def _decode_records(raw: bytes, path: str) -> list[KeyPair]:
    try:
        records = json.loads(raw.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise CorruptedKeystoreError(f"Invalid keystore file {path}: {exc}") from exc
    if not isinstance(records, list):
        raise CorruptedKeystoreError(
            f"Invalid keystore file {path}: expected a JSON array, got {type(records).__name__}"
        )

    keypairs: list[KeyPair] = []
    for index, record in enumerate(records):
        if not isinstance(record, str):
            raise CorruptedKeystoreError(
                f"Invalid keystore file {path}: record {index} is not a string"
            )
        try:
            keypair = KeyPair.decode_base64(record)
        except ValueError as exc:
            # exc text never carries key material
            raise CorruptedKeystoreError(
                f"Invalid keystore file {path}: record {index}: {exc}"
            ) from exc
        keypairs.append(keypair)
    return keypairs
