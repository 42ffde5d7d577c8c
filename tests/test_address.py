import random

import pytest
from solders.pubkey import Pubkey

from seeker_verify.address import ALPHABET, b58decode, b58encode, pubkey_from_text, pubkey_to_text
from seeker_verify.errors import InvalidAddress, InvalidCharacter
from seeker_verify.sgt_constants import (
    EXPECTED_METADATA_ADDRESS,
    EXPECTED_MINT_AUTHORITY,
    SGT_METADATA_ADDRESS,
    SGT_MINT_AUTHORITY,
    TOKEN_2022_PROGRAM_ID,
)

VECTORS = [
    ("", ""),
    ("61", "2g"),
    ("626262", "a3gV"),
    ("636363", "aPEr"),
    ("516b6fcd0f", "ABnLTmg"),
    ("572e4794", "3EFU7m"),
    ("10c8511e", "Rt5zm"),
    ("00000000000000000000", "1111111111"),
    ("00eb15231dfceb60925886b67d065299925915aeb172c06647", "1NS17iag9jJgTHD1VXjvLCEnZuQ3rJDE9L"),
]


@pytest.mark.parametrize("hex_bytes,text", VECTORS)
def test_known_vectors(hex_bytes: str, text: str) -> None:
    raw = bytes.fromhex(hex_bytes)
    assert b58encode(raw) == text
    assert b58decode(text) == raw


def test_roundtrip_random_lengths() -> None:
    rng = random.Random(58)
    for n in range(0, 65):
        raw = bytes(rng.randrange(256) for _ in range(n))
        assert b58decode(b58encode(raw)) == raw
        # same with a zero prefix
        padded = b"\x00" * (n % 4) + raw
        assert b58decode(b58encode(padded)) == padded


def test_leading_zero_bytes_become_leading_ones() -> None:
    text = b58encode(bytes([0, 0, 7, 1, 2]))
    assert text.startswith("11")
    assert not text.startswith("111")


def test_all_zero_bytes() -> None:
    assert b58encode(bytes(32)) == "1" * 32
    assert b58decode("1" * 32) == bytes(32)


def test_text_roundtrip() -> None:
    for text in (SGT_MINT_AUTHORITY, SGT_METADATA_ADDRESS, TOKEN_2022_PROGRAM_ID, "1112", "z"):
        assert b58encode(b58decode(text)) == text


@pytest.mark.parametrize("bad", ["0", "O", "I", "l", "abc0", "GT2z-", "é"])
def test_rejects_characters_outside_alphabet(bad: str) -> None:
    with pytest.raises(InvalidCharacter):
        b58decode(bad)


def test_invalid_character_reports_position() -> None:
    with pytest.raises(InvalidCharacter) as excinfo:
        b58decode("abc0def")
    assert excinfo.value.char == "0"
    assert excinfo.value.position == 3
    assert isinstance(excinfo.value, ValueError)


def test_alphabet_is_visually_unambiguous() -> None:
    assert len(ALPHABET) == 58
    assert not set("0OIl") & set(ALPHABET)


def test_matches_solders_pubkey_text() -> None:
    rng = random.Random(7)
    for _ in range(20):
        raw = bytes(rng.randrange(256) for _ in range(32))
        assert b58encode(raw) == str(Pubkey.from_bytes(raw))


def test_pubkey_from_text() -> None:
    assert str(EXPECTED_MINT_AUTHORITY) == SGT_MINT_AUTHORITY
    assert str(EXPECTED_METADATA_ADDRESS) == SGT_METADATA_ADDRESS
    assert pubkey_to_text(EXPECTED_MINT_AUTHORITY) == SGT_MINT_AUTHORITY
    assert len(bytes(pubkey_from_text(TOKEN_2022_PROGRAM_ID))) == 32


def test_pubkey_from_text_rejects_wrong_length() -> None:
    with pytest.raises(InvalidAddress):
        pubkey_from_text("2g")
