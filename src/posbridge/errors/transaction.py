"""
Transaction pipeline exceptions.

Raised while validating transaction options, building transaction
configs, talking to a chain client, or calling a side-restricted
token operation.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional

from posbridge.errors.base import BridgeError


class ErrorType(str, Enum):
    """Error codes understood by the diagnostic sink."""

    TRANSACTION_OPTION_NOT_OBJECT = "TRANSACTION_OPTION_NOT_OBJECT"
    INVALID_TRANSACTION_OPTION = "INVALID_TRANSACTION_OPTION"
    EIP1559_NOT_SUPPORTED = "EIP1559_NOT_SUPPORTED"
    ALLOWED_ON_ROOT = "ALLOWED_ON_ROOT"
    ALLOWED_ON_CHILD = "ALLOWED_ON_CHILD"
    UPSTREAM_ERROR = "UPSTREAM_ERROR"


class ValidationError(BridgeError):
    """
    Raised when a transaction option is not a plain key-value record, or
    when one of its fields is unknown or malformed.

    Example:
        >>> raise ValidationError("Transaction option should be an object")
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = ErrorType.TRANSACTION_OPTION_NOT_OBJECT.value,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message,
            code=code,
            details=details,
        )


class ProtocolMismatchError(BridgeError):
    """
    Raised when dynamic fee fields target a chain side without fee-market support.

    Example:
        >>> raise ProtocolMismatchError("child")
    """

    def __init__(
        self,
        side: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        details["side"] = side
        super().__init__(
            f"The {side} chain doesn't support eip-1559 fee fields "
            "(maxFeePerGas, maxPriorityFeePerGas)",
            code=ErrorType.EIP1559_NOT_SUPPORTED.value,
            details=details,
        )
        self.side = side


class UpstreamError(BridgeError):
    """
    Raised when an RPC endpoint or ABI service request fails.

    The original exception is kept as ``__cause__``.

    Example:
        >>> raise UpstreamError("eth_estimateGas failed", operation="estimate_gas")
    """

    def __init__(
        self,
        message: str,
        *,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(
            message,
            code=ErrorType.UPSTREAM_ERROR.value,
            details=details,
        )
        self.operation = operation


class UsageError(BridgeError):
    """
    Raised when a parent-only operation runs on a child token, or vice versa.

    Example:
        >>> raise UsageError("withdrawStart", allowed_on="child")
    """

    def __init__(
        self,
        method_name: str,
        *,
        allowed_on: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        details = details or {}
        details["method"] = method_name
        details["allowed_on"] = allowed_on
        code = (
            ErrorType.ALLOWED_ON_ROOT
            if allowed_on == "parent"
            else ErrorType.ALLOWED_ON_CHILD
        )
        super().__init__(
            f"The method '{method_name}' is allowed only on {allowed_on} tokens",
            code=code.value,
            details=details,
        )
        self.method_name = method_name
        self.allowed_on = allowed_on
