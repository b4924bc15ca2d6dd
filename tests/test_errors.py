"""
Tests for the exception hierarchy.
"""

import pytest

from posbridge import (
    BridgeError,
    ErrorType,
    ProtocolMismatchError,
    UpstreamError,
    UsageError,
    ValidationError,
)


class TestBridgeError:
    def test_str_includes_code(self) -> None:
        err = BridgeError("boom", code="X")

        assert str(err) == "[X] boom"
        assert err.details == {}

    def test_to_dict(self) -> None:
        err = UpstreamError("rpc down", operation="get_chain_id")

        assert err.to_dict() == {
            "error": "UpstreamError",
            "code": "UPSTREAM_ERROR",
            "message": "rpc down",
            "details": {"operation": "get_chain_id"},
        }

    def test_repr(self) -> None:
        assert "ValidationError(" in repr(ValidationError("bad"))

    @pytest.mark.parametrize(
        "err",
        [
            ValidationError("bad"),
            ProtocolMismatchError("child"),
            UpstreamError("down"),
            UsageError("deposit", allowed_on="parent"),
        ],
    )
    def test_hierarchy(self, err) -> None:
        assert isinstance(err, BridgeError)


class TestProtocolMismatchError:
    def test_message_and_side(self) -> None:
        err = ProtocolMismatchError("child")

        assert err.code == ErrorType.EIP1559_NOT_SUPPORTED.value
        assert err.side == "child"
        assert err.details == {"side": "child"}
        assert "eip-1559" in err.message


class TestUsageError:
    def test_parent_only(self) -> None:
        err = UsageError("deposit", allowed_on="parent")

        assert err.code == "ALLOWED_ON_ROOT"
        assert err.message == "The method 'deposit' is allowed only on parent tokens"

    def test_child_only(self) -> None:
        err = UsageError("withdrawStart", allowed_on="child")

        assert err.code == "ALLOWED_ON_CHILD"
        assert err.details == {"method": "withdrawStart", "allowed_on": "child"}
