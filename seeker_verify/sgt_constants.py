"""Known on-chain values that identify a genuine Seeker Genesis Token (SGT).

Defined by Solana Mobile. The decoded keys are built once at import time and
are read-only afterwards.
"""

from .address import pubkey_from_text

SGT_MINT_AUTHORITY = "GT2zuHVaZQYZSyQMgJPLzvkmyztfyXg2NJunqFp4p3A4"
# Metadata address and token group mint are the same account.
SGT_METADATA_ADDRESS = "GT22s89nU4iWFkNXj1Bw6uYhJJWDRPpShHt4Bk8f99Te"

TOKEN_2022_PROGRAM_ID = "TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"
DEFAULT_RPC_URL = "https://api.mainnet-beta.solana.com"
MAX_BATCH_SIZE = 100

EXPECTED_MINT_AUTHORITY = pubkey_from_text(SGT_MINT_AUTHORITY)
EXPECTED_METADATA_ADDRESS = pubkey_from_text(SGT_METADATA_ADDRESS)
