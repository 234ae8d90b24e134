import base64
import hashlib

import pytest

from common.errors import InsufficientSeedError, InvalidMnemonicError, SigningError
from keys import (
    Address,
    Ed25519KeyPair,
    KeyPair,
    PublicKey,
    Secp256k1KeyPair,
    SeededRng,
    SignatureScheme,
    SystemRng,
    entropy_from_phrase,
    generate_keypair,
    generate_new_keypair,
    phrase_from_entropy,
    seed_from_phrase,
    validate_phrase,
)
from keys.keypair import SECP256K1_N


# ============================================================
# Address
# ============================================================

class TestAddress:
    def test_derived_from_flag_and_public_key(self, ed25519_keypair):
        pk = ed25519_keypair.public_key
        expected = hashlib.sha3_256(b"\x00" + pk.key_bytes).digest()[:20]
        assert ed25519_keypair.address().value == expected

    def test_hex_roundtrip(self):
        addr = Address(bytes(range(20)))
        assert str(addr) == "0x" + bytes(range(20)).hex()
        assert Address.from_hex(addr.hex()) == addr
        assert Address.from_hex(addr.hex()[2:]) == addr

    def test_invalid_length_rejected(self):
        with pytest.raises(ValueError, match="Invalid address length"):
            Address(b"\x01" * 19)

    def test_invalid_hex_rejected(self):
        with pytest.raises(ValueError):
            Address.from_hex("0xnothex")

    def test_ordering_follows_bytes(self):
        low = Address(b"\x00" * 20)
        high = Address(b"\xff" * 20)
        assert sorted([high, low]) == [low, high]

    def test_scheme_flag_changes_address(self):
        key = b"\x02" * 33
        a = PublicKey(SignatureScheme.ED25519, key).address()
        b = PublicKey(SignatureScheme.SECP256K1, key).address()
        assert a != b


# ============================================================
# Key pairs
# ============================================================

class TestKeyPair:
    def test_ed25519_sign_and_verify(self, ed25519_keypair):
        sig = ed25519_keypair.try_sign(b"hello")
        assert sig.scheme == SignatureScheme.ED25519
        assert len(sig.signature) == 64
        assert sig.verify(b"hello")
        assert not sig.verify(b"other")

    def test_secp256k1_sign_and_verify(self, secp256k1_keypair):
        pk = secp256k1_keypair.public_key
        assert len(pk.key_bytes) == 33
        assert pk.key_bytes[0] in (2, 3)
        sig = secp256k1_keypair.try_sign(b"hello")
        assert sig.scheme == SignatureScheme.SECP256K1
        assert sig.verify(b"hello")

    def test_base64_record_roundtrip(self, ed25519_keypair, secp256k1_keypair):
        for kp in (ed25519_keypair, secp256k1_keypair):
            record = kp.encode_base64()
            raw = base64.b64decode(record)
            assert raw[0] == kp.scheme
            assert len(raw) == 33
            restored = KeyPair.decode_base64(record)
            assert restored == kp
            assert restored.address() == kp.address()

    def test_decode_rejects_garbage(self):
        with pytest.raises(ValueError):
            KeyPair.decode_base64("not base64!!")
        with pytest.raises(ValueError):
            KeyPair.decode_base64(base64.b64encode(b"\x00" + b"\x01" * 5).decode())
        with pytest.raises(ValueError, match="Unknown signature scheme flag"):
            KeyPair.decode_base64(base64.b64encode(b"\x09" + b"\x01" * 32).decode())

    def test_secp256k1_rejects_out_of_range_scalar(self):
        with pytest.raises(ValueError, match="out of range"):
            Secp256k1KeyPair(b"\x00" * 32)
        with pytest.raises(ValueError, match="out of range"):
            Secp256k1KeyPair(SECP256K1_N.to_bytes(32, "big"))

    def test_repr_hides_private_key(self, ed25519_keypair):
        text = repr(ed25519_keypair)
        assert ed25519_keypair.private_key_bytes.hex() not in text
        assert ed25519_keypair.encode_base64() not in text
        assert str(ed25519_keypair.address()) in text

    def test_sign_requires_bytes(self, ed25519_keypair):
        with pytest.raises(SigningError):
            ed25519_keypair.try_sign("text")

    def test_scheme_from_name(self):
        assert SignatureScheme.from_name("ED25519") is SignatureScheme.ED25519
        assert SignatureScheme.from_name(" secp256k1 ") is SignatureScheme.SECP256K1
        with pytest.raises(ValueError, match="Unknown signature scheme"):
            SignatureScheme.from_name("rsa")


# ============================================================
# Random sources
# ============================================================

class TestSeededRng:
    def test_same_seed_same_stream(self):
        a = SeededRng(bytes(range(64)))
        b = SeededRng(bytes(range(64)))
        assert a.random_bytes(10) == b.random_bytes(10)
        assert a.next_u32() == b.next_u32()
        assert a.next_u64() == b.next_u64()

    def test_reads_seed_in_order(self):
        rng = SeededRng(b"\x01\x00\x00\x00abcdef")
        assert rng.next_u32() == 1
        buf = bytearray(3)
        rng.fill_bytes(buf)
        assert bytes(buf) == b"abc"
        assert rng.remaining == 3

    def test_exhaustion_raises_without_consuming(self):
        rng = SeededRng(b"\xaa" * 8)
        rng.random_bytes(6)
        with pytest.raises(InsufficientSeedError) as info:
            rng.random_bytes(4)
        assert info.value.requested == 4
        assert info.value.remaining == 2
        assert rng.random_bytes(2) == b"\xaa\xaa"

    def test_repr_hides_seed(self):
        rng = SeededRng(b"\xde\xad\xbe\xef" * 8)
        assert "dead" not in repr(rng)

    def test_system_rng_length(self):
        assert len(SystemRng().random_bytes(32)) == 32
        with pytest.raises(ValueError):
            SystemRng().random_bytes(-1)


class TestKeygen:
    def test_ed25519_consumes_32_bytes(self):
        rng = SeededRng(bytes(range(64)))
        address, kp = generate_keypair(rng)
        assert rng.remaining == 32
        assert kp.private_key_bytes == bytes(range(32))
        assert address == kp.address()

    def test_short_seed_fails(self):
        with pytest.raises(InsufficientSeedError):
            generate_keypair(SeededRng(b"\x01" * 16))

    def test_secp256k1_rejection_sampling(self):
        # first candidate is zero, an invalid scalar
        seed = b"\x00" * 32 + b"\x07" * 32
        address, kp = generate_keypair(SeededRng(seed), SignatureScheme.SECP256K1)
        assert kp.private_key_bytes == b"\x07" * 32
        assert address == kp.address()

    def test_secp256k1_exhaustion_propagates(self):
        with pytest.raises(InsufficientSeedError):
            generate_keypair(SeededRng(b"\x00" * 64), SignatureScheme.SECP256K1)

    def test_fresh_keys_differ(self):
        a, _ = generate_new_keypair()
        b, _ = generate_new_keypair()
        assert a != b


# ============================================================
# Mnemonic codec
# ============================================================

class TestMnemonic:
    def test_entropy_roundtrip_24_words(self):
        entropy = bytes(range(32))
        phrase = phrase_from_entropy(entropy)
        assert len(phrase.split()) == 24
        assert entropy_from_phrase(phrase) == entropy

    def test_reference_seed(self, zero_phrase):
        seed = seed_from_phrase(zero_phrase)
        assert len(seed) == 64
        assert seed.hex().startswith("5eb00bbddcf069084889a8ab9155568165f5c453")

    def test_normalizes_whitespace_and_case(self, zero_phrase):
        messy = "  " + zero_phrase.upper().replace(" ", "   ") + "\n"
        assert validate_phrase(messy) == zero_phrase

    def test_bad_checksum(self):
        bad = " ".join(["abandon"] * 12)
        with pytest.raises(InvalidMnemonicError):
            validate_phrase(bad)

    def test_unknown_word(self, zero_phrase):
        bad = zero_phrase.replace("about", "aboot")
        with pytest.raises(InvalidMnemonicError):
            seed_from_phrase(bad)

    def test_error_does_not_echo_phrase(self, zero_phrase):
        bad = zero_phrase.replace("about", "zebra")
        with pytest.raises(InvalidMnemonicError) as info:
            validate_phrase(bad)
        assert "abandon" not in str(info.value)
