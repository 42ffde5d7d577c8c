"""Exception types for SGT verification.

Structural problems with on-chain data never raise; decoders return None instead.
These exceptions cover caller-supplied text and the transport layer only.
"""


class SgtError(Exception):
    """Base error for seeker-verify."""


class InvalidCharacter(SgtError, ValueError):
    def __init__(self, char: str, position: int):
        super().__init__(f"Invalid Base58 character {char!r} at position {position}")
        self.char = char
        self.position = position


class InvalidAddress(SgtError, ValueError):
    pass


class RpcError(SgtError):
    """HTTP failure, JSON-RPC error payload, or unusable response body."""

    def __init__(self, message: str, code=None):
        super().__init__(message)
        self.code = code
