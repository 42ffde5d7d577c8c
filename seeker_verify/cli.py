"""
Command-line SGT checks.

    seeker-verify check <wallet> [--rpc URL] [--json]
    seeker-verify inspect-mint <mint> [--rpc URL]
"""

import argparse
import base64
import json
import sys
from typing import Optional, Sequence

from solana.exceptions import SolanaRpcException
from solana.rpc.api import Client
from solana.rpc.core import RPCException

from .address import pubkey_from_text, pubkey_to_text
from .config import Settings
from .errors import InvalidAddress, InvalidCharacter, RpcError
from .rpc import SolanaRpcClient
from .sgt_checker import get_wallet_sgt_info, verify_mint
from .token2022 import parse_mint_account

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def _fmt_key(key) -> str:
    return pubkey_to_text(key) if key is not None else "None"


def cmd_check(args, settings: Settings) -> int:
    client = SolanaRpcClient(
        args.rpc or settings.rpc_url,
        timeout=settings.rpc_timeout_seconds,
        max_batch_size=settings.max_batch_size,
    )
    try:
        info = get_wallet_sgt_info(args.wallet, client)
    except (InvalidAddress, InvalidCharacter) as exc:
        print(f"Invalid wallet address: {exc}", file=sys.stderr)
        return EXIT_USAGE
    except RpcError as exc:
        print(f"RPC error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    if args.json:
        print(json.dumps({"wallet": args.wallet, **info.to_dict()}))
    elif info.has_sgt:
        print(f"Wallet {args.wallet} holds an SGT")
        print(f"  mint:          {info.sgt_mint_address}")
        print(f"  token account: {info.sgt_token_account_address}")
        print(f"  member number: {info.member_number}")
    else:
        print(f"Wallet {args.wallet} does not hold an SGT")
    return EXIT_OK


def cmd_inspect_mint(args, settings: Settings) -> int:
    try:
        mint_pub = pubkey_from_text(args.mint)
    except (InvalidAddress, InvalidCharacter) as exc:
        print(f"Invalid mint address: {exc}", file=sys.stderr)
        return EXIT_USAGE

    rpc = args.rpc or settings.rpc_url
    client = Client(rpc)
    try:
        resp = client.get_account_info(mint_pub)
    except (SolanaRpcException, RPCException) as exc:
        print(f"RPC error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    value = resp.value
    if value is None or value.data is None:
        print("Mint account not found on-chain or has no data", file=sys.stderr)
        return EXIT_FAILURE
    raw_data = value.data
    if isinstance(raw_data, (bytes, bytearray)):
        raw = bytes(raw_data)
    else:
        # (data, encoding) tuple/list shape
        data_b64 = raw_data[0] if isinstance(raw_data, (list, tuple)) else raw_data
        raw = base64.b64decode(data_b64)

    parsed = parse_mint_account(raw)
    if parsed is None:
        print(f"{args.mint} is not a decodable Token-2022 mint ({len(raw)} bytes)", file=sys.stderr)
        return EXIT_FAILURE

    record = parsed.record
    print(f"Mint: {args.mint}")
    print(f"  mint authority:             {_fmt_key(record.mint_authority)}")
    print(f"  metadata pointer authority: {_fmt_key(record.metadata_pointer_authority)}")
    print(f"  metadata pointer address:   {_fmt_key(record.metadata_pointer_address)}")
    print(f"  group member mint:          {_fmt_key(record.group_member_mint)}")
    print(f"  group member group:         {_fmt_key(record.group_member_group)}")
    print(f"  member number:              {parsed.member_number}")
    print(f"  valid SGT:                  {verify_mint(parsed).verified}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="seeker-verify", description="Seeker Genesis Token checks")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="Check whether a wallet holds an SGT")
    check.add_argument("wallet")
    check.add_argument("--rpc", help="Solana JSON-RPC URL (defaults to settings)")
    check.add_argument("--json", action="store_true", help="Print the result as JSON")
    check.set_defaults(func=cmd_check)

    inspect = sub.add_parser("inspect-mint", help="Decode one mint account and show its SGT fields")
    inspect.add_argument("mint")
    inspect.add_argument("--rpc", help="Solana JSON-RPC URL (defaults to settings)")
    inspect.set_defaults(func=cmd_inspect_mint)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args, Settings())


if __name__ == "__main__":
    sys.exit(main())
