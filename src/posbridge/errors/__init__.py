"""
posbridge exception hierarchy.

BridgeError
├── ValidationError        (option is not a record)
├── ProtocolMismatchError  (dynamic fees on a side without support)
├── UpstreamError          (RPC / ABI service failure)
└── UsageError             (side-restricted operation misuse)
"""

from posbridge.errors.base import BridgeError
from posbridge.errors.transaction import (
    ErrorType,
    ProtocolMismatchError,
    UpstreamError,
    UsageError,
    ValidationError,
)

__all__ = [
    "BridgeError",
    "ErrorType",
    "ValidationError",
    "ProtocolMismatchError",
    "UpstreamError",
    "UsageError",
]
