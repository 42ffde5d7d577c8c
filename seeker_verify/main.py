from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from .config import Settings
from .errors import InvalidAddress, InvalidCharacter, RpcError
from .rpc import SolanaRpcClient
from .sgt_checker import get_wallet_sgt_info

settings = Settings()
logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger("seeker_verify")

app = FastAPI(title="seeker-verify")


class SgtInfoResponse(BaseModel):
    wallet: str
    has_sgt: bool
    member_number: Optional[int] = None
    sgt_mint_address: Optional[str] = None
    sgt_token_account_address: Optional[str] = None


class SgtCheckResponse(BaseModel):
    wallet: str
    has_sgt: bool


@lru_cache(maxsize=1)
def get_rpc_client() -> SolanaRpcClient:
    return SolanaRpcClient(
        settings.rpc_url,
        timeout=settings.rpc_timeout_seconds,
        max_batch_size=settings.max_batch_size,
    )


def lookup_sgt(wallet: str, client: SolanaRpcClient):
    try:
        return get_wallet_sgt_info(wallet, client)
    except (InvalidAddress, InvalidCharacter) as exc:
        raise HTTPException(status_code=400, detail=f"Invalid wallet address: {exc}") from exc
    except RpcError as exc:
        logger.warning("sgt_lookup_rpc_failed wallet=%s error=%s", wallet, exc, exc_info=True)
        raise HTTPException(status_code=502, detail=f"RPC failure: {exc}") from exc


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/sgt/{wallet}", response_model=SgtInfoResponse)
def sgt_info(wallet: str, client: SolanaRpcClient = Depends(get_rpc_client)):
    info = lookup_sgt(wallet, client)
    return SgtInfoResponse(wallet=wallet, **info.to_dict())


@app.get("/sgt/{wallet}/check", response_model=SgtCheckResponse)
def sgt_check(wallet: str, client: SolanaRpcClient = Depends(get_rpc_client)):
    info = lookup_sgt(wallet, client)
    return SgtCheckResponse(wallet=wallet, has_sgt=info.has_sgt)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("seeker_verify.main:app", host="0.0.0.0", port=4000, reload=True)
