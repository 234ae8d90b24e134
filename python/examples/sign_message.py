import os
import sys
from pathlib import Path

# Ensure `python/` directory is on sys.path when running as a script:
# `python examples/sign_message.py ...` sets sys.path[0] to `python/examples`.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from common.config import keystore_path
from keys import Address
from keystore import KeystoreType


def usage() -> None:
    print(
        "\n".join(
            [
                "Usage:",
                '  LOG_LEVEL=INFO KEYSTORE_PATH=... .venv/bin/python examples/sign_message.py <address> "hello" [utf8|hex]',
                "",
                "Notes:",
                "  - If KEYSTORE_PATH is not set, ~/.account_keystore/account.keystore is used.",
                "  - For encoding=hex, the message must be a hex string (no 0x prefix).",
            ]
        )
    )


def main() -> int:
    if len(sys.argv) < 3:
        usage()
        return 2

    address = Address.from_hex(sys.argv[1])
    message = sys.argv[2]
    parse_as = sys.argv[3] if len(sys.argv) >= 4 else "utf8"
    if parse_as not in ("utf8", "hex"):
        usage()
        return 2

    message_bytes = bytes.fromhex(message) if parse_as == "hex" else message.encode("utf-8")

    ks = KeystoreType.file(keystore_path(os.getenv("KEYSTORE_PATH"))).init()
    sig = ks.signer(address).try_sign(message_bytes)
    print(sig.encode_base64())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
