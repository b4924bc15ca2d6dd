"""
Chain client interfaces.

The transaction pipeline only talks to these protocols. The web3.py
implementation lives in :mod:`posbridge.chain.web3_client`; tests plug in
stubs.
"""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, runtime_checkable

from web3.types import TxParams

from posbridge.types import TransactionConfig


@runtime_checkable
class TransactionWriteResult(Protocol):
    """Outcome of a submitted transaction."""

    transaction_hash: str

    async def get_receipt(self) -> Any:
        ...


@runtime_checkable
class ContractMethod(Protocol):
    """A contract method bound to its arguments."""

    @property
    def address(self) -> str:
        ...

    def encode_abi(self) -> str:
        ...

    async def estimate_gas(self, tx: TxParams) -> int:
        ...

    async def read(self, config: Optional[TransactionConfig] = None) -> Any:
        ...

    async def write(self, config: TransactionConfig) -> TransactionWriteResult:
        ...


@runtime_checkable
class Contract(Protocol):
    """A deployed contract with a loaded ABI."""

    @property
    def address(self) -> str:
        ...

    def method(self, name: str, *args: Any) -> ContractMethod:
        ...


@runtime_checkable
class ChainClient(Protocol):
    """Network capabilities for one side of the bridge."""

    async def estimate_gas(self, tx: TxParams) -> int:
        ...

    async def get_gas_price(self) -> int:
        ...

    async def get_transaction_count(self, address: str, block_identifier: str) -> int:
        ...

    async def get_chain_id(self) -> int:
        ...

    async def read(self, config: TransactionConfig) -> Any:
        ...

    async def write(self, config: TransactionConfig) -> TransactionWriteResult:
        ...

    def get_contract(self, address: str, abi: List[dict]) -> Contract:
        ...
