"""
Base exception class for the posbridge SDK.

Every bridge-specific exception inherits from BridgeError, which carries a
machine-readable code and a details dictionary alongside the message.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class BridgeError(Exception):
    """
    Base exception for all bridge client errors.

    Attributes:
        message: Human-readable error description.
        code: Machine-readable error code (e.g., "ALLOWED_ON_ROOT").
        details: Optional dictionary with additional error context.

    Example:
        >>> raise BridgeError(
        ...     "Gas estimate failed",
        ...     code="UPSTREAM_ERROR",
        ...     details={"side": "parent"}
        ... )
    """

    def __init__(
        self,
        message: str,
        *,
        code: str = "BRIDGE_ERROR",
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"code={self.code!r}, "
            f"details={self.details!r})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to a dictionary for JSON serialization.

        Returns:
            Dictionary representation of the error.
        """
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }
