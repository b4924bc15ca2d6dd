"""Result wrapper for submitted writes."""

from __future__ import annotations

from typing import Any

from posbridge.chain.base import TransactionWriteResult


class ContractWriteResult:
    """
    Outcome of a write sent through a token.

    Example:
        >>> result = await token.send_transaction({"to": "0x...", "value": 1})
        >>> tx_hash = await result.get_transaction_hash()
        >>> receipt = await result.get_receipt()
    """

    def __init__(self, result: TransactionWriteResult) -> None:
        self._result = result

    @property
    def transaction_hash(self) -> str:
        return self._result.transaction_hash

    async def get_transaction_hash(self) -> str:
        return self._result.transaction_hash

    async def get_receipt(self) -> Any:
        """Wait for and return the transaction receipt."""
        return await self._result.get_receipt()

    def __repr__(self) -> str:
        return f"ContractWriteResult(transaction_hash={self.transaction_hash!r})"
