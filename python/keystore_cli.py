#!/usr/bin/env python3
"""
Keystore CLI: manage account keys in a file keystore.

Usage:
  python -m keystore_cli new
  python -m keystore_cli import <word> <word> ...
  python -m keystore_cli list
  python -m keystore_cli sign <address> <message> [--hex]
  python -m keystore_cli info

Options:
  --path <file>      Keystore file path (default: KEYSTORE_PATH or ~/.account_keystore/account.keystore)
  --scheme <name>    ed25519 | secp256k1 for new/import (default: KEYSTORE_SCHEME or ed25519)
  --log-level <lvl>  Logging level (default: LOG_LEVEL or INFO)
"""
import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

# Allow running from repo root or from python/
sys.path.insert(0, str(Path(__file__).resolve().parent))

from common.config import keystore_path, keystore_scheme
from common.errors import KeystoreError
from common.logger import configure_logging
from keys import Address, SignatureScheme, generate_new_keypair
from keystore import KeystoreType


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Keystore CLI - manage account keys",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Commands:
  new                      Generate a key, store it, print address and phrase
  import <words...>        Import a key from a mnemonic phrase
  list                     List stored addresses and public keys
  sign <address> <message> Sign a message (utf8, or hex with --hex)
  info                     Show keystore type and path
        """,
    )
    parser.add_argument("--path", default=None, help="Keystore file path")
    parser.add_argument("--scheme", default=None, help="Signature scheme for new/import")
    parser.add_argument("--hex", action="store_true", help="Treat the sign message as hex")
    parser.add_argument(
        "--log-level", default=None, help="DEBUG|INFO|WARNING|ERROR (default: LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "command", nargs="?", choices=["new", "import", "list", "sign", "info"], help="Command"
    )
    parser.add_argument("args", nargs="*", help="Command arguments")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    parsed = parser.parse_args(argv)

    configure_logging(parsed.log_level)
    cmd = (parsed.command or "").lower()
    args = parsed.args or []

    if not cmd:
        parser.print_help()
        return 0

    try:
        ks_type = KeystoreType.file(keystore_path(parsed.path))
        scheme = SignatureScheme.from_name(keystore_scheme(parsed.scheme))

        if cmd == "info":
            print(ks_type)
            return 0

        ks = ks_type.init()

        if cmd == "new":
            address, keypair = generate_new_keypair(scheme)
            phrase = ks.add_key(keypair)
            print(f"Created: {address}")
            print(f"Secret recovery phrase: {phrase}")

        elif cmd == "import":
            if not args:
                print("Usage: import <word> <word> ...", file=sys.stderr)
                return 1
            address = ks.import_from_mnemonic(" ".join(args), scheme)
            print(f"Imported: {address}")

        elif cmd == "list":
            for public_key in ks.keys():
                print(f"{public_key.address()}  {public_key.scheme.label}  {public_key.encode_base64()}")

        elif cmd == "sign":
            if len(args) < 2:
                print("Usage: sign <address> <message>", file=sys.stderr)
                return 1
            address = Address.from_hex(args[0])
            message = " ".join(args[1:])
            msg_bytes = bytes.fromhex(message) if parsed.hex else message.encode("utf-8")
            signature = ks.signer(address).try_sign(msg_bytes)
            print(signature.encode_base64())

    except (KeystoreError, ValueError) as e:
        print(str(e), file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
