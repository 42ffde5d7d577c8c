"""Base58 text <-> bytes for Solana addresses (Bitcoin alphabet, no 0/O/I/l)."""

import base58
from solders.pubkey import Pubkey

from .errors import InvalidAddress, InvalidCharacter

ALPHABET = base58.BITCOIN_ALPHABET.decode("ascii")
PUBKEY_SIZE = 32


def b58encode(data: bytes) -> str:
    return base58.b58encode(bytes(data)).decode("ascii")


def b58decode(text: str) -> bytes:
    for pos, ch in enumerate(text):
        if ch not in ALPHABET:
            raise InvalidCharacter(ch, pos)
    return base58.b58decode(text)


def pubkey_from_text(text: str) -> Pubkey:
    raw = b58decode(text)
    if len(raw) != PUBKEY_SIZE:
        raise InvalidAddress(f"{text!r} decodes to {len(raw)} bytes, expected {PUBKEY_SIZE}")
    return Pubkey.from_bytes(raw)


def pubkey_to_text(key: Pubkey) -> str:
    return b58encode(bytes(key))
