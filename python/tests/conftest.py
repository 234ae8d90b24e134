import shutil
import tempfile

import pytest

from keys import Ed25519KeyPair, Secp256k1KeyPair


@pytest.fixture
def tmp_dir():
    d = tempfile.mkdtemp(prefix="ks-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)

@pytest.fixture
def zero_phrase():
    # BIP-39 reference vector: all-zero 128-bit entropy
    return (
        "abandon abandon abandon abandon abandon abandon "
        "abandon abandon abandon abandon abandon about"
    )

@pytest.fixture
def ed25519_keypair():
    return Ed25519KeyPair(bytes(range(32)))

@pytest.fixture
def secp256k1_keypair():
    return Secp256k1KeyPair(bytes([0x11] * 32))
