"""
Token-2022 account parsing for SGT verification.

Mint account layout (Token-2022):

    0..4      mint_authority_option (u32 LE, 1 = Some)
    4..36     mint_authority
    36..44    supply (u64 LE)
    44        decimals
    45        is_initialized
    46..50    freeze_authority_option (u32 LE)
    50..82    freeze_authority
    82..165   padding up to the token account size
    165       AccountType (1 = Mint, 2 = Account)
    166..     TLV extensions: type (u16 LE), length (u16 LE), value

Only the fields needed to recognise an SGT are extracted.
"""

import base64
import binascii
import logging
import struct
from dataclasses import dataclass
from typing import Optional, Tuple, Union

from solders.pubkey import Pubkey

logger = logging.getLogger("seeker_verify.token2022")

AccountData = Union[bytes, bytearray, memoryview, str]

PUBKEY_SIZE = 32
MINT_AUTHORITY_OPTION_OFFSET = 0
MINT_AUTHORITY_OFFSET = 4
ACCOUNT_TYPE_OFFSET = 165
TLV_START_OFFSET = 166
TLV_HEADER_SIZE = 4

ACCOUNT_TYPE_MINT = 1

EXT_UNINITIALIZED = 0
EXT_METADATA_POINTER = 18
EXT_TOKEN_GROUP_MEMBER = 23

# authority + metadata address
METADATA_POINTER_SIZE = PUBKEY_SIZE * 2
# mint + group, then u64 member number
GROUP_MEMBER_KEYS_SIZE = PUBKEY_SIZE * 2
GROUP_MEMBER_SIZE = GROUP_MEMBER_KEYS_SIZE + 8


@dataclass(frozen=True)
class MintRecord:
    mint_authority: Optional[Pubkey] = None
    metadata_pointer_authority: Optional[Pubkey] = None
    metadata_pointer_address: Optional[Pubkey] = None
    group_member_mint: Optional[Pubkey] = None
    group_member_group: Optional[Pubkey] = None


@dataclass(frozen=True)
class ParsedMint:
    """A decoded mint plus the TokenGroupMember serial, which is not part of the record."""

    record: MintRecord
    member_number: Optional[int] = None


def decode_account_data(data: AccountData) -> Optional[bytes]:
    """Return raw account bytes, base64-decoding text. Malformed base64 gives None."""
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    try:
        return base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError):
        logger.debug("account_data_bad_base64 length=%s", len(data))
        return None


def _read_pubkey(data: bytes, offset: int) -> Pubkey:
    return Pubkey.from_bytes(data[offset : offset + PUBKEY_SIZE])


def _scan_mint(data: bytes) -> Optional[Tuple[MintRecord, Optional[int]]]:
    if len(data) < TLV_START_OFFSET:
        return None

    mint_auth_opt = struct.unpack_from("<I", data, MINT_AUTHORITY_OPTION_OFFSET)[0]
    mint_authority: Optional[Pubkey] = None
    if mint_auth_opt == 1:
        mint_authority = _read_pubkey(data, MINT_AUTHORITY_OFFSET)

    if data[ACCOUNT_TYPE_OFFSET] != ACCOUNT_TYPE_MINT:
        return None

    meta_authority: Optional[Pubkey] = None
    meta_address: Optional[Pubkey] = None
    member_mint: Optional[Pubkey] = None
    member_group: Optional[Pubkey] = None
    member_number: Optional[int] = None

    o = TLV_START_OFFSET
    while o + TLV_HEADER_SIZE <= len(data):
        ext_type, ext_len = struct.unpack_from("<HH", data, o)
        if ext_type == EXT_UNINITIALIZED:
            break
        o += TLV_HEADER_SIZE
        if o + ext_len > len(data):
            # truncated entry: treat as end of extensions
            logger.debug("tlv_truncated type=%s length=%s offset=%s size=%s", ext_type, ext_len, o, len(data))
            break

        if ext_type == EXT_METADATA_POINTER:
            if ext_len >= METADATA_POINTER_SIZE:
                meta_authority = _read_pubkey(data, o)
                meta_address = _read_pubkey(data, o + PUBKEY_SIZE)
        elif ext_type == EXT_TOKEN_GROUP_MEMBER:
            if ext_len >= GROUP_MEMBER_KEYS_SIZE:
                member_mint = _read_pubkey(data, o)
                member_group = _read_pubkey(data, o + PUBKEY_SIZE)
                member_number = None
                if ext_len >= GROUP_MEMBER_SIZE:
                    member_number = struct.unpack_from("<Q", data, o + GROUP_MEMBER_KEYS_SIZE)[0]

        o += ext_len

    record = MintRecord(
        mint_authority=mint_authority,
        metadata_pointer_authority=meta_authority,
        metadata_pointer_address=meta_address,
        group_member_mint=member_mint,
        group_member_group=member_group,
    )
    return record, member_number


def parse_mint_account(data: AccountData) -> Optional[ParsedMint]:
    """Decode a Token-2022 mint account (raw bytes or base64 text).

    Returns None when the data cannot be decoded, is shorter than the fixed
    mint region, or is not a mint (AccountType byte != 1).
    """
    raw = decode_account_data(data)
    if raw is None:
        return None
    scanned = _scan_mint(raw)
    if scanned is None:
        return None
    record, member_number = scanned
    return ParsedMint(record=record, member_number=member_number)


def decode_mint(data: AccountData) -> Optional[MintRecord]:
    parsed = parse_mint_account(data)
    return parsed.record if parsed else None


def extract_mint_address(data: AccountData) -> Optional[Pubkey]:
    """The mint of a token account is always its first 32 bytes."""
    raw = decode_account_data(data)
    if raw is None or len(raw) < PUBKEY_SIZE:
        return None
    return _read_pubkey(raw, 0)
