"""
Diagnostic sink used by the transaction pipeline.

The bridge client owns one sink. ``log`` records checkpoints while a
transaction config is being built; ``error`` turns an :class:`ErrorType`
code into the matching exception so the caller can raise it.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Protocol, runtime_checkable

from posbridge.errors import (
    BridgeError,
    ErrorType,
    ProtocolMismatchError,
    UpstreamError,
    UsageError,
    ValidationError,
)
from posbridge.utils.logging import get_logger


@runtime_checkable
class DiagnosticSink(Protocol):
    """Reporting capability injected into the bridge client."""

    def log(self, *args: Any) -> None:
        ...

    def error(self, code: ErrorType, *args: Any) -> BridgeError:
        ...


def build_error(code: ErrorType, *args: Any) -> BridgeError:
    """
    Build the exception for an error code.

    Args:
        code: Error code
        *args: Code specific arguments (method name, side, message)

    Returns:
        Exception instance (not raised)
    """
    if code is ErrorType.TRANSACTION_OPTION_NOT_OBJECT:
        received = type(args[0]).__name__ if args else "unknown"
        return ValidationError(
            f"Transaction option should be an object, got {received}",
            details={"received": received},
        )
    if code is ErrorType.INVALID_TRANSACTION_OPTION:
        return ValidationError(
            " ".join(str(a) for a in args) or "Invalid transaction option",
            code=code.value,
        )
    if code is ErrorType.EIP1559_NOT_SUPPORTED:
        return ProtocolMismatchError(str(args[0]) if args else "child")
    if code is ErrorType.ALLOWED_ON_ROOT:
        return UsageError(str(args[0]) if args else "", allowed_on="parent")
    if code is ErrorType.ALLOWED_ON_CHILD:
        return UsageError(str(args[0]) if args else "", allowed_on="child")
    return UpstreamError(" ".join(str(a) for a in args) or "upstream call failed")


class Logger:
    """
    Diagnostic sink writing to the ``posbridge`` logger.

    Disabled sinks drop ``log`` calls; ``error`` always works.

    Example:
        >>> sink = Logger(enabled=True)
        >>> sink.log("txConfig", {"from": "0x..."})
        >>> raise sink.error(ErrorType.ALLOWED_ON_ROOT, "deposit")
    """

    def __init__(
        self,
        enabled: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.enabled = enabled
        self._logger = logger or get_logger("posbridge.diagnostics")

    def enable(self, value: bool = True) -> None:
        self.enabled = value

    def log(self, *args: Any) -> None:
        if not self.enabled:
            return
        self._logger.debug(" ".join(str(a) for a in args))

    def error(self, code: ErrorType, *args: Any) -> BridgeError:
        err = build_error(code, *args)
        self._logger.warning("%s", err, extra={"code": err.code})
        return err


def safe_log(sink: DiagnosticSink, *args: Any) -> None:
    """Emit a checkpoint through ``sink``; a failing sink never interrupts the caller."""
    try:
        sink.log(*args)
    except Exception:
        get_logger(__name__).debug("Diagnostic sink failed", exc_info=True)


def signal_error(sink: DiagnosticSink, code: ErrorType, *args: Any) -> BridgeError:
    """
    Ask ``sink`` for the exception matching ``code``.

    Falls back to :func:`build_error` when the sink raises or hands back
    something that is not a BridgeError, so callers always raise the
    documented exception type.
    """
    try:
        err = sink.error(code, *args)
    except Exception:
        get_logger(__name__).debug("Diagnostic sink failed", exc_info=True)
        return build_error(code, *args)
    if not isinstance(err, BridgeError):
        return build_error(code, *args)
    return err
