"""
Seeker Genesis Token (SGT) verification.

A wallet holds an SGT when one of its Token-2022 mints passes every check:

1. mint authority == SGT_MINT_AUTHORITY
2. MetadataPointer authority == SGT_MINT_AUTHORITY
3. MetadataPointer address == SGT_METADATA_ADDRESS
4. TokenGroupMember group == SGT_METADATA_ADDRESS

Everything is read from public chain state; two RPC round trips per wallet
(getTokenAccountsByOwner, then getMultipleAccounts).
"""

import logging
from dataclasses import asdict, dataclass
from typing import Dict, Iterable, Mapping, Optional, Tuple

from solders.pubkey import Pubkey

from .address import b58encode, pubkey_from_text
from .sgt_constants import EXPECTED_METADATA_ADDRESS, EXPECTED_MINT_AUTHORITY
from .token2022 import AccountData, MintRecord, ParsedMint, extract_mint_address, parse_mint_account

logger = logging.getLogger("seeker_verify.sgt_checker")


@dataclass(frozen=True)
class SgtInfo:
    has_sgt: bool
    member_number: Optional[int] = None
    sgt_mint_address: Optional[str] = None
    sgt_token_account_address: Optional[str] = None

    @classmethod
    def none(cls) -> "SgtInfo":
        return cls(has_sgt=False)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class MintVerification:
    verified: bool
    member_number: Optional[int] = None


def is_valid_sgt(
    record: MintRecord,
    authority: Pubkey = EXPECTED_MINT_AUTHORITY,
    metadata_address: Pubkey = EXPECTED_METADATA_ADDRESS,
) -> bool:
    if record.mint_authority is None or record.mint_authority != authority:
        return False
    if record.metadata_pointer_authority is None or record.metadata_pointer_authority != authority:
        return False
    if record.metadata_pointer_address is None or record.metadata_pointer_address != metadata_address:
        return False
    if record.group_member_group is None or record.group_member_group != metadata_address:
        return False
    return True


def verify_mint(
    parsed: ParsedMint,
    authority: Pubkey = EXPECTED_MINT_AUTHORITY,
    metadata_address: Pubkey = EXPECTED_METADATA_ADDRESS,
) -> MintVerification:
    """Run the SGT checks; the member number is only exposed on success."""
    if not is_valid_sgt(parsed.record, authority, metadata_address):
        return MintVerification(verified=False)
    return MintVerification(verified=True, member_number=parsed.member_number)


def map_mints_to_token_accounts(token_accounts: Iterable[Tuple[str, AccountData]]) -> Dict[str, str]:
    """mint address -> first token account seen holding it.

    Keys are unique and keep wallet order, so they double as the mint request list.
    Token accounts whose mint cannot be read are skipped.
    """
    mint_to_token_account: Dict[str, str] = {}
    for token_account, data in token_accounts:
        mint = extract_mint_address(data)
        if mint is None:
            logger.debug("token_account_unreadable token_account=%s", token_account)
            continue
        mint_to_token_account.setdefault(b58encode(bytes(mint)), token_account)
    return mint_to_token_account


def find_sgt(mint_data: Mapping[str, AccountData], mint_to_token_account: Mapping[str, str]) -> SgtInfo:
    """First mint in `mint_data` order that passes verification, or SgtInfo.none()."""
    for mint_address, data in mint_data.items():
        parsed = parse_mint_account(data)
        if parsed is None:
            logger.debug("mint_unreadable mint=%s", mint_address)
            continue
        result = verify_mint(parsed)
        if result.verified:
            return SgtInfo(
                has_sgt=True,
                member_number=result.member_number,
                sgt_mint_address=mint_address,
                sgt_token_account_address=mint_to_token_account.get(mint_address),
            )
    return SgtInfo.none()


def get_wallet_sgt_info(wallet_address: str, client) -> SgtInfo:
    """Check a wallet through `client` (see rpc.SolanaRpcClient).

    Raises InvalidAddress/InvalidCharacter for a malformed wallet and RpcError for
    transport failures. A wallet without an SGT is a normal SgtInfo.none().
    """
    pubkey_from_text(wallet_address)

    token_accounts = client.get_token_accounts_by_owner(wallet_address)
    if not token_accounts:
        logger.info("sgt_check_complete wallet=%s has_sgt=False token_accounts=0", wallet_address)
        return SgtInfo.none()

    mint_to_token_account = map_mints_to_token_accounts(token_accounts)
    if not mint_to_token_account:
        logger.info(
            "sgt_check_complete wallet=%s has_sgt=False token_accounts=%s mints=0",
            wallet_address,
            len(token_accounts),
        )
        return SgtInfo.none()

    mint_data = client.get_multiple_accounts_info(list(mint_to_token_account))
    info = find_sgt(mint_data, mint_to_token_account)
    logger.info(
        "sgt_check_complete wallet=%s has_sgt=%s mints=%s member_number=%s",
        wallet_address,
        info.has_sgt,
        len(mint_to_token_account),
        info.member_number,
    )
    return info


def check_wallet(wallet_address: str, client) -> bool:
    return get_wallet_sgt_info(wallet_address, client).has_sgt
