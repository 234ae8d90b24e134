"""Environment-driven configuration.

`.env` files are honoured through python-dotenv, then the process
environment is consulted.

Env:
- KEYSTORE_PATH: keystore file (default: ~/.account_keystore/account.keystore)
- KEYSTORE_SCHEME: scheme for freshly generated keys (default: ed25519)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_KEYSTORE_DIR = ".account_keystore"
DEFAULT_KEYSTORE_FILENAME = "account.keystore"
DEFAULT_SCHEME = "ed25519"


def default_keystore_path() -> str:
    return str(Path.home() / DEFAULT_KEYSTORE_DIR / DEFAULT_KEYSTORE_FILENAME)


def keystore_path(explicit: Optional[str] = None) -> str:
    """Resolve the keystore path: explicit argument, then KEYSTORE_PATH, then default."""
    return explicit or os.getenv("KEYSTORE_PATH") or default_keystore_path()


def keystore_scheme(explicit: Optional[str] = None) -> str:
    return (explicit or os.getenv("KEYSTORE_SCHEME") or DEFAULT_SCHEME).strip().lower()
