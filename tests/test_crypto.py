"""Tests for hashing and the address cipher."""

import pytest
from osculate.config import CIPHER_ALPHABET, CIPHER_LENGTH
from osculate.crypto import (
    address_cipher,
    address_key,
    address_to_bytes,
    is_hex_address,
    same_address,
    sha256,
)
from osculate.errors import InvalidAddressError

from conftest import ADDR1, ADDR2, ADDR3, DEPLOYER


class TestHashing:
    def test_sha256_deterministic(self):
        h1 = sha256(b"osculate")
        h2 = sha256(b"osculate")
        assert h1 == h2
        assert len(h1) == 32

    def test_sha256_different_inputs(self):
        assert sha256(b"hello") != sha256(b"world")


class TestAddresses:
    def test_hex_address_detected(self):
        assert is_hex_address(ADDR1)
        assert not is_hex_address("alice")
        assert not is_hex_address("0x1234")

    def test_hex_address_to_raw_bytes(self):
        raw = address_to_bytes(ADDR1)
        assert len(raw) == 20
        assert raw.hex() == ADDR1[2:].lower()

    def test_label_address_to_utf8(self):
        assert address_to_bytes("alice") == b"alice"

    def test_empty_address_rejected(self):
        with pytest.raises(ValueError):
            address_to_bytes("")

    def test_case_insensitive_hex(self):
        assert same_address(ADDR1, ADDR1.lower())
        assert not same_address(ADDR1, ADDR2)

    def test_labels_are_case_sensitive(self):
        assert not same_address("alice", "Alice")

    def test_invalid_address_is_typed(self):
        with pytest.raises(InvalidAddressError, match="Invalid address"):
            address_to_bytes("")
        with pytest.raises(InvalidAddressError):
            address_key(None)

    def test_label_never_matches_hex_address(self):
        label = "a" * 20
        hex_address = "0x" + "61" * 20
        assert address_to_bytes(label) == address_to_bytes(hex_address)
        assert address_key(label) != address_key(hex_address)
        assert not same_address(label, hex_address)

    def test_key_ignores_hex_case(self):
        assert address_key(ADDR3) == address_key(ADDR3.lower())


class TestAddressCipher:
    def test_length_and_alphabet(self):
        for addr in (DEPLOYER, ADDR1, ADDR2, ADDR3, "alice"):
            cipher = address_cipher(addr)
            assert len(cipher) == CIPHER_LENGTH
            assert all(c in CIPHER_ALPHABET for c in cipher)

    def test_deterministic(self):
        assert address_cipher(ADDR1) == address_cipher(ADDR1)

    def test_known_values(self):
        assert address_cipher(DEPLOYER) == "gokcb81h"
        assert address_cipher(ADDR1) == "j3v35los"
        assert address_cipher(ADDR2) == "sz003qil"
        assert address_cipher(ADDR3) == "mnsfo8zr"

    def test_known_label_values(self):
        assert address_cipher("alice") == "hagvtoa5"
        assert address_cipher("bob") == "vctaa4sc"

    def test_checksum_spelling_irrelevant(self):
        assert address_cipher(ADDR2) == address_cipher(ADDR2.lower())

    def test_different_addresses_differ(self):
        ciphers = {address_cipher(a) for a in (DEPLOYER, ADDR1, ADDR2, ADDR3)}
        assert len(ciphers) == 4

    def test_not_cleartext(self):
        cipher = address_cipher(ADDR1)
        assert cipher not in ADDR1.lower()
