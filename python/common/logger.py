"""Logging setup for the keystore packages (standard library `logging`).

Env:
- LOG_LEVEL: DEBUG|INFO|WARNING|ERROR|CRITICAL (default: INFO)

Only addresses, schemes, paths and counts are logged. Private keys,
seeds and mnemonic phrases never are.
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

DEFAULT_LOGGER_NAME = "account_keystore"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"

_CONFIGURED_FLAG = "_account_keystore_configured"


def resolve_level(level: Union[int, str, None] = None) -> int:
    """Map an explicit level, or LOG_LEVEL, to a `logging` constant (INFO if unknown)."""
    if isinstance(level, int):
        return level
    raw = (level or os.getenv("LOG_LEVEL") or "INFO").upper().strip()
    resolved = logging.getLevelName(raw)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: Union[int, str, None] = None) -> int:
    """Install the root handler once and (re)apply the level. Returns the level used."""
    resolved = resolve_level(level)
    root = logging.getLogger()
    if not getattr(root, _CONFIGURED_FLAG, False):
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
        setattr(root, _CONFIGURED_FLAG, True)
    root.setLevel(resolved)
    return resolved


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Named logger; configures the root from LOG_LEVEL on first use only."""
    if not getattr(logging.getLogger(), _CONFIGURED_FLAG, False):
        configure_logging()
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)
