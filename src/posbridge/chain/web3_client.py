"""
web3.py implementation of the chain client interfaces.

Wraps an ``AsyncWeb3`` instance per chain side. Provider and RPC failures
are re-raised as :class:`UpstreamError` with the original exception
chained; nothing is retried here.
"""

from __future__ import annotations

from typing import Any, Awaitable, List, Optional, Sequence, TypeVar

from aiohttp import ClientTimeout
from web3 import AsyncHTTPProvider, AsyncWeb3, Web3
from web3.contract import AsyncContract
from web3.types import TxParams

from posbridge.constants import PENDING_BLOCK, PROVIDER_TIMEOUT_SECONDS
from posbridge.errors import UpstreamError
from posbridge.types import ChainSide, TransactionConfig
from posbridge.utils.logging import get_logger

T = TypeVar("T")

_logger = get_logger(__name__)

# fields forwarded to eth_call
_CALL_KEYS = ("from", "to", "value", "data", "gas")


async def _upstream(operation: str, aw: Awaitable[T], **context: Any) -> T:
    try:
        return await aw
    except UpstreamError:
        raise
    except Exception as e:
        _logger.debug(
            "Upstream call failed",
            extra={"operation": operation, "error": str(e), **context},
        )
        raise UpstreamError(
            f"{operation} failed: {e}",
            operation=operation,
            details=dict(context),
        ) from e


def _call_params(config: Optional[TransactionConfig]) -> Optional[TxParams]:
    if config is None:
        return None
    params = config.to_tx_params()
    return {k: v for k, v in params.items() if k in _CALL_KEYS}  # type: ignore[return-value]


class Web3WriteResult:
    """Hash of a sent transaction plus lazy receipt lookup."""

    def __init__(self, w3: AsyncWeb3, tx_hash: Any) -> None:
        self._w3 = w3
        self._tx_hash = tx_hash
        self.transaction_hash: str = Web3.to_hex(tx_hash)

    async def get_receipt(self) -> Any:
        return await _upstream(
            "wait_for_transaction_receipt",
            self._w3.eth.wait_for_transaction_receipt(self._tx_hash),
            tx_hash=self.transaction_hash,
        )


class Web3ContractMethod:
    """Contract function bound to its arguments."""

    def __init__(self, w3: AsyncWeb3, contract: AsyncContract, name: str, args: Sequence[Any]) -> None:
        self._w3 = w3
        self._contract = contract
        self._name = name
        self._args = list(args)
        self._function = contract.functions[name](*self._args)

    @property
    def address(self) -> str:
        return self._contract.address

    @property
    def name(self) -> str:
        return self._name

    def encode_abi(self) -> str:
        return self._contract.encode_abi(self._name, args=self._args)

    async def estimate_gas(self, tx: TxParams) -> int:
        gas = await _upstream(
            "estimate_gas", self._function.estimate_gas(tx), method=self._name
        )
        return int(gas)

    async def read(self, config: Optional[TransactionConfig] = None) -> Any:
        return await _upstream(
            "call", self._function.call(_call_params(config)), method=self._name
        )

    async def write(self, config: TransactionConfig) -> Web3WriteResult:
        tx_hash = await _upstream(
            "transact", self._function.transact(config.to_tx_params()), method=self._name
        )
        _logger.info(
            "Transaction sent",
            extra={"method": self._name, "tx_hash": Web3.to_hex(tx_hash)},
        )
        return Web3WriteResult(self._w3, tx_hash)


class Web3Contract:
    """Deployed contract with its ABI loaded."""

    def __init__(self, w3: AsyncWeb3, address: str, abi: List[dict]) -> None:
        self._w3 = w3
        self._contract: AsyncContract = w3.eth.contract(
            address=Web3.to_checksum_address(address),
            abi=abi,
        )

    @property
    def address(self) -> str:
        return self._contract.address

    def method(self, name: str, *args: Any) -> Web3ContractMethod:
        return Web3ContractMethod(self._w3, self._contract, name, args)


class Web3ChainClient:
    """
    Chain client for one bridge side backed by ``AsyncWeb3``.

    Example:
        >>> parent = Web3ChainClient.from_rpc_url("https://rpc.sepolia.org", ChainSide.PARENT)
        >>> await parent.get_chain_id()
        11155111
    """

    def __init__(self, w3: AsyncWeb3, side: ChainSide) -> None:
        self.w3 = w3
        self.side = side

    @classmethod
    def from_rpc_url(
        cls,
        rpc_url: str,
        side: ChainSide,
        timeout: int = PROVIDER_TIMEOUT_SECONDS,
    ) -> "Web3ChainClient":
        w3 = AsyncWeb3(
            AsyncHTTPProvider(
                rpc_url,
                request_kwargs={"timeout": ClientTimeout(total=timeout)},
            )
        )
        return cls(w3, side)

    async def estimate_gas(self, tx: TxParams) -> int:
        gas = await _upstream("estimate_gas", self.w3.eth.estimate_gas(tx), side=self.side.value)
        return int(gas)

    async def get_gas_price(self) -> int:
        price = await _upstream("gas_price", self.w3.eth.gas_price, side=self.side.value)
        return int(price)

    async def get_transaction_count(self, address: str, block_identifier: str = PENDING_BLOCK) -> int:
        count = await _upstream(
            "get_transaction_count",
            self.w3.eth.get_transaction_count(address, block_identifier),
            side=self.side.value,
        )
        return int(count)

    async def get_chain_id(self) -> int:
        chain_id = await _upstream("chain_id", self.w3.eth.chain_id, side=self.side.value)
        return int(chain_id)

    async def read(self, config: TransactionConfig) -> Any:
        return await _upstream(
            "call", self.w3.eth.call(_call_params(config)), side=self.side.value
        )

    async def write(self, config: TransactionConfig) -> Web3WriteResult:
        tx_hash = await _upstream(
            "send_transaction",
            self.w3.eth.send_transaction(config.to_tx_params()),
            side=self.side.value,
        )
        return Web3WriteResult(self.w3, tx_hash)

    def get_contract(self, address: str, abi: List[dict]) -> Web3Contract:
        return Web3Contract(self.w3, address, abi)
