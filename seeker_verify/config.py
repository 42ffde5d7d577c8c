from typing import Optional

from pydantic_settings import BaseSettings

from .sgt_constants import DEFAULT_RPC_URL, MAX_BATCH_SIZE


class Settings(BaseSettings):
    solana_rpc: str = DEFAULT_RPC_URL
    helius_rpc_url: Optional[str] = None
    rpc_timeout_seconds: float = 30.0
    max_batch_size: int = MAX_BATCH_SIZE  # addresses per getMultipleAccounts call
    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def rpc_url(self) -> str:
        return self.helius_rpc_url or self.solana_rpc
