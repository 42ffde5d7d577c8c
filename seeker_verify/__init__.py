from .address import b58decode, b58encode
from .errors import InvalidAddress, InvalidCharacter, RpcError, SgtError
from .rpc import SolanaRpcClient
from .sgt_checker import SgtInfo, check_wallet, get_wallet_sgt_info
from .token2022 import MintRecord, ParsedMint, decode_mint, extract_mint_address, parse_mint_account

__version__ = "1.0.0"
