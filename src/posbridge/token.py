"""
Base class for bridge tokens.

A token is one contract on one chain side. BaseToken gives subclasses the
lazily loaded contract, the four transaction shapes of
:class:`TransactionExecutor`, and guards for side-restricted operations.

Example:
    >>> class ChildERC20(BaseToken):
    ...     async def withdraw_start(self, amount, option=None):
    ...         self.check_for_child("withdraw_start")
    ...         contract = await self.get_contract()
    ...         return await self.process_write(contract.method("withdraw", amount), option)
"""

from __future__ import annotations

from typing import Any, Union

from posbridge.chain.base import ChainClient, Contract, ContractMethod
from posbridge.client import BridgeClient
from posbridge.contract.loader import ContractLazyLoader
from posbridge.errors import ErrorType
from posbridge.transaction.executor import TransactionExecutor
from posbridge.transaction.result import ContractWriteResult
from posbridge.types import ChainSide, ContractInitParam, TransactionConfig, TransactionOption
from posbridge.utils.logger import signal_error


class BaseToken:
    """Contract-bound token on one side of the bridge."""

    def __init__(self, contract_param: ContractInitParam, client: BridgeClient) -> None:
        self.contract_param = contract_param
        self.client = client
        self._loader = ContractLazyLoader(client, contract_param)
        self._executor = TransactionExecutor(client, contract_param.side)

    @property
    def side(self) -> ChainSide:
        return self.contract_param.side

    @property
    def is_parent(self) -> bool:
        return self.contract_param.side is ChainSide.PARENT

    @property
    def parent_default_config(self) -> TransactionOption:
        return self.client.default_config(ChainSide.PARENT)

    @property
    def child_default_config(self) -> TransactionOption:
        return self.client.default_config(ChainSide.CHILD)

    async def get_contract(self) -> Contract:
        return await self._loader.get_contract()

    def get_client(self, side: ChainSide) -> ChainClient:
        return self.client.get_client(side)

    async def process_write(
        self, method: ContractMethod, option: Any = None
    ) -> Union[ContractWriteResult, TransactionConfig]:
        return await self._executor.process_write(method, option)

    async def send_transaction(self, option: Any = None) -> Union[ContractWriteResult, TransactionConfig]:
        return await self._executor.send_transaction(option)

    async def read_transaction(self, option: Any = None) -> Any:
        return await self._executor.read_transaction(option)

    async def process_read(self, method: ContractMethod, option: Any = None) -> Any:
        return await self._executor.process_read(method, option)

    def check_for_root(self, method_name: str) -> None:
        """
        Raise UsageError unless the token lives on the parent chain.
        """
        if not self.is_parent:
            raise signal_error(self.client.logger, ErrorType.ALLOWED_ON_ROOT, method_name)

    def check_for_child(self, method_name: str) -> None:
        """
        Raise UsageError unless the token lives on the child chain.
        """
        if self.is_parent:
            raise signal_error(self.client.logger, ErrorType.ALLOWED_ON_CHILD, method_name)
