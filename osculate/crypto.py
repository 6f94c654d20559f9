"""
Hashing and address utilities for Osculate.

Addresses are plain strings.  Ethereum-style addresses (``0x`` followed by
40 hex digits) are reduced to their raw 20 bytes, so checksummed and
lower-case spellings name the same identity.  Anything else is treated as
an opaque UTF-8 label.
"""

import hashlib
import re

from osculate.config import CIPHER_ALPHABET, CIPHER_LENGTH
from osculate.errors import InvalidAddressError


_HEX_ADDRESS = re.compile(r"^0x[0-9a-fA-F]{40}$")
_HEX_KEY_TAG = b"\x00"
_LABEL_KEY_TAG = b"\x01"


# ---------------------------------------------------------------------------
# Hashing helpers
# ---------------------------------------------------------------------------

def sha256(data: bytes) -> bytes:
    """Single SHA-256 hash."""
    return hashlib.sha256(data).digest()


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------

def is_hex_address(address: str) -> bool:
    return bool(_HEX_ADDRESS.match(address))


def address_to_bytes(address: str) -> bytes:
    """Normalise an address to the bytes its cipher is hashed from."""
    if not isinstance(address, str) or not address:
        raise InvalidAddressError(address)
    if is_hex_address(address):
        return bytes.fromhex(address[2:])
    return address.encode("utf-8")


def address_key(address: str) -> bytes:
    """
    Identity key used for ownership lookups and the self-kiss check.

    Hex addresses and labels live in separate key spaces, so a 20-character
    label never matches the hex address spelling the same bytes.
    """
    raw = address_to_bytes(address)
    tag = _HEX_KEY_TAG if is_hex_address(address) else _LABEL_KEY_TAG
    return tag + raw


def same_address(a: str, b: str) -> bool:
    return address_key(a) == address_key(b)


# ---------------------------------------------------------------------------
# Address cipher
# ---------------------------------------------------------------------------

def address_cipher(address: str) -> str:
    """
    Obfuscate an address into a short display string.

    Each of the first CIPHER_LENGTH bytes of SHA-256(address bytes) picks
    one character of CIPHER_ALPHABET.  Deterministic and collision-tolerant;
    this is a nickname, not encryption.
    """
    digest = sha256(address_to_bytes(address))
    return "".join(
        CIPHER_ALPHABET[byte % len(CIPHER_ALPHABET)]
        for byte in digest[:CIPHER_LENGTH]
    )
