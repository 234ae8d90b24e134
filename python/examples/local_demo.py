import os
import sys
import tempfile
from pathlib import Path

# Ensure `python/` directory is on sys.path when running as a script.
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from keys import SignatureScheme, generate_new_keypair
from keystore import FileKeystore, KeystoreType

# demo-only phrase, do not use in production
DEMO_PHRASE = (
    "abandon abandon abandon abandon abandon abandon "
    "abandon abandon abandon abandon abandon about"
)


def main() -> int:
    tmp_path = os.path.join(tempfile.gettempdir(), f"account-keystore-{os.getpid()}.keystore")

    # ===== Keystore type / facade =====
    ks_type = KeystoreType.file(tmp_path)
    print(ks_type)
    ks = ks_type.init()

    # ===== add_key: fresh key, phrase returned once =====
    address, keypair = generate_new_keypair(SignatureScheme.ED25519)
    phrase = ks.add_key(keypair)
    print("[add_key] address:", address)
    print("[add_key] phrase words:", len(phrase.split()))

    # ===== import_from_mnemonic: deterministic =====
    imported = ks.import_from_mnemonic(DEMO_PHRASE)
    again = KeystoreType.file(tmp_path + ".copy").init().import_from_mnemonic(DEMO_PHRASE)
    print("[import] address:", imported, "deterministic:", imported == again)
    secp = ks.import_from_mnemonic(DEMO_PHRASE, SignatureScheme.SECP256K1)
    print("[import] secp256k1 address:", secp)

    # ===== listing =====
    for public_key in ks.keys():
        print("[keys]", public_key.address(), public_key.scheme.label)

    # ===== signing =====
    sig = ks.sign(imported, b"hello")
    print("[sign] signature:", sig.encode_base64(), "valid:", sig.verify(b"hello"))
    handle = ks.signer(secp)
    print("[signer] valid:", handle.try_sign(b"hello").verify(b"hello"))

    # ===== reopen from disk =====
    reopened = FileKeystore.load_or_create(tmp_path)
    print("[reopen] keys:", len(reopened))

    for p in (tmp_path, tmp_path + ".copy"):
        os.remove(p)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
