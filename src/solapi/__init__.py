"""solapi: keypairs, message signing and Solana instruction building over HTTP."""

__version__ = "0.1.0"

from solapi.errors import ErrorKind, SolapiError
from solapi.types import ApiResponse, InstructionPayload

__all__ = [
    "__version__",
    "ApiResponse",
    "ErrorKind",
    "InstructionPayload",
    "SolapiError",
]
