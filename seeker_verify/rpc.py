"""
Minimal Solana JSON-RPC client for SGT checks.

Standard RPC methods only (getTokenAccountsByOwner, getMultipleAccounts), so any
provider works: the public endpoint, Helius, QuickNode, etc.
"""

import itertools
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

import requests

from .errors import RpcError
from .sgt_constants import DEFAULT_RPC_URL, MAX_BATCH_SIZE, TOKEN_2022_PROGRAM_ID

logger = logging.getLogger("seeker_verify.rpc")


def _first_data_field(account: Any) -> Optional[str]:
    # account.data is ["<base64>", "base64"]
    if not isinstance(account, dict):
        return None
    data = account.get("data")
    if isinstance(data, (list, tuple)) and data and isinstance(data[0], str):
        return data[0]
    return None


def _result_values(method: str, result: Any) -> list:
    # result is {"context": {...}, "value": [...]}
    if result is None:
        return []
    if not isinstance(result, dict):
        raise RpcError(f"{method} returned an unexpected result")
    value = result.get("value")
    if value is None:
        return []
    if not isinstance(value, list):
        raise RpcError(f"{method} returned an unexpected result")
    return value


class SolanaRpcClient:
    def __init__(
        self,
        rpc_url: str = DEFAULT_RPC_URL,
        timeout: float = 30,
        session=None,
        max_batch_size: int = MAX_BATCH_SIZE,
    ):
        if max_batch_size < 1:
            raise ValueError("max_batch_size must be >= 1")
        self.rpc_url = rpc_url
        self.timeout = timeout
        self.session = session or requests.Session()
        self.max_batch_size = max_batch_size
        self._ids = itertools.count(1)

    def _call(self, method: str, params: list) -> Any:
        body = {"jsonrpc": "2.0", "id": next(self._ids), "method": method, "params": params}
        try:
            resp = self.session.post(self.rpc_url, json=body, timeout=self.timeout)
        except requests.RequestException as exc:
            raise RpcError(f"{method} request failed: {exc}") from exc

        if resp.status_code >= 400:
            raise RpcError(f"HTTP {resp.status_code}: {resp.reason}", code=resp.status_code)
        if not resp.content:
            raise RpcError(f"Empty response body from RPC ({method})")
        try:
            payload = resp.json()
        except ValueError as exc:
            raise RpcError(f"{method} returned a non-JSON body") from exc
        if not isinstance(payload, dict):
            raise RpcError(f"{method} returned an unexpected payload")

        err = payload.get("error")
        if err:
            code = err.get("code") if isinstance(err, dict) else None
            message = err.get("message") if isinstance(err, dict) else err
            raise RpcError(f"RPC error {code}: {message}", code=code)
        return payload.get("result")

    def get_token_accounts_by_owner(self, wallet_address: str) -> List[Tuple[str, str]]:
        """All Token-2022 accounts owned by the wallet as (token_account, base64_data)."""
        result = self._call(
            "getTokenAccountsByOwner",
            [wallet_address, {"programId": TOKEN_2022_PROGRAM_ID}, {"encoding": "base64"}],
        )
        accounts: List[Tuple[str, str]] = []
        for item in _result_values("getTokenAccountsByOwner", result):
            pubkey = item.get("pubkey") if isinstance(item, dict) else None
            data = _first_data_field(item.get("account")) if isinstance(item, dict) else None
            if not pubkey or data is None:
                logger.debug("token_account_skipped wallet=%s entry=%r", wallet_address, item)
                continue
            accounts.append((pubkey, data))
        return accounts

    def get_multiple_accounts_info(self, addresses: Sequence[str]) -> Dict[str, str]:
        """Map address -> base64 data, in request order. Missing accounts are left out."""
        found: Dict[str, str] = {}
        addresses = list(addresses)
        for start in range(0, len(addresses), self.max_batch_size):
            batch = addresses[start : start + self.max_batch_size]
            result = self._call("getMultipleAccounts", [batch, {"encoding": "base64"}])
            values = _result_values("getMultipleAccounts", result)
            for address, account in zip(batch, values):
                if account is None:
                    continue
                data = _first_data_field(account)
                if data is None:
                    logger.debug("mint_account_skipped address=%s", address)
                    continue
                found[address] = data
        return found
