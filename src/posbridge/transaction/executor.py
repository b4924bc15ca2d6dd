"""
Transaction executor.

Runs the four transaction shapes a token supports:

- ``process_write``: write through a bound contract method
- ``send_transaction``: write directly through the chain client
- ``read_transaction``: read directly through the chain client
- ``process_read``: read through a bound contract method

Each shape validates the option, builds a config for the executor's chain
side and, when ``returnTransaction`` is set, returns that config instead
of executing it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from posbridge.chain.base import ContractMethod
from posbridge.transaction.builder import TransactionConfigBuilder
from posbridge.transaction.result import ContractWriteResult
from posbridge.types import ChainSide, TransactionConfig, parse_option
from posbridge.utils.logger import safe_log

if TYPE_CHECKING:
    from posbridge.client import BridgeClient


class TransactionExecutor:
    """
    Executes reads and writes for one chain side.

    Holds no per-call state; concurrent calls build independent configs
    (nonces are not serialized between them).
    """

    def __init__(self, client: "BridgeClient", side: ChainSide) -> None:
        self._client = client
        self._side = side
        self._builder = TransactionConfigBuilder(client)

    @property
    def side(self) -> ChainSide:
        return self._side

    @property
    def builder(self) -> TransactionConfigBuilder:
        return self._builder

    def _log(self, *args: Any) -> None:
        safe_log(self._client.logger, *args)

    async def process_write(
        self,
        method: ContractMethod,
        option: Any = None,
    ) -> Union[ContractWriteResult, TransactionConfig]:
        """
        Write through a contract method.

        Returns:
            ContractWriteResult, or the config with call data and target
            address when ``returnTransaction`` is set
        """
        option = parse_option(option)
        self._log("process write")
        config = await self._builder.build(option, method, self._side, is_write=True)
        self._log("process write config")
        if option.return_transaction:
            return config.with_call(method.encode_abi(), method.address)
        return ContractWriteResult(await method.write(config))

    async def send_transaction(
        self,
        option: Any = None,
    ) -> Union[ContractWriteResult, TransactionConfig]:
        """
        Write directly through the chain client of this side.

        Returns:
            ContractWriteResult, or the bare config when ``returnTransaction``
            is set
        """
        option = parse_option(option)
        self._log("process write")
        config = await self._builder.build(option, None, self._side, is_write=True)
        self._log("process write config")
        if option.return_transaction:
            return config
        chain = self._client.get_client(self._side)
        return ContractWriteResult(await chain.write(config))

    async def read_transaction(self, option: Any = None) -> Any:
        """
        Read directly through the chain client of this side.

        Gas, fee, nonce and chain id are resolved like a write unless
        ``BridgeClientConfig.resolve_read_fields`` is off.

        Returns:
            Raw call result, or the config when ``returnTransaction`` is set
        """
        option = parse_option(option)
        self._log("process read")
        config = await self._builder.build(
            option,
            None,
            self._side,
            is_write=self._client.config.resolve_read_fields,
        )
        self._log("write tx config created")
        if option.return_transaction:
            return config
        chain = self._client.get_client(self._side)
        return await chain.read(config)

    async def process_read(self, method: ContractMethod, option: Any = None) -> Any:
        """
        Read through a contract method.

        Only the merged option is used; nothing is fetched from the network
        before the call.

        Returns:
            Decoded method result, or the config with call data and the
            contract address when ``returnTransaction`` is set
        """
        option = parse_option(option)
        self._log("process read")
        config = await self._builder.build(option, method, self._side, is_write=False)
        self._log("read tx config created")
        if option.return_transaction:
            return config.with_call(method.encode_abi(), method.address)
        return await method.read(config)
