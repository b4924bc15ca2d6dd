"""
Transaction config builder.

Every field is resolved through three tiers: the caller's option, then the
chain side's default option, then (write mode only) the network. The four
network-derived fields are fetched concurrently and the build fails as a
whole if any of them fails.

The fee representation is decided by the chain side alone: sides with
EIP-1559 support get a DynamicFee built from the merged fee pair, the
others get a LegacyFee carrying the resolved gas price.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Awaitable, Callable, Dict, Optional

from posbridge.chain.base import ChainClient, ContractMethod
from posbridge.constants import PENDING_BLOCK
from posbridge.errors import ErrorType
from posbridge.types import (
    ChainSide,
    DynamicFee,
    LegacyFee,
    TransactionConfig,
    TransactionOption,
    parse_option,
)
from posbridge.utils.concurrency import gather_all, resolved
from posbridge.utils.converter import to_int
from posbridge.utils.logger import safe_log, signal_error

if TYPE_CHECKING:
    from posbridge.client import BridgeClient

# Fields the network can fill in, in resolution order
NETWORK_FIELDS = ("gas_limit", "gas_price", "nonce", "chain_id")


def merge_option(default: TransactionOption, option: TransactionOption) -> TransactionOption:
    """
    Lay the caller option over the side default.

    Caller values win; fields the caller left as ``None`` fall back to the
    default. ``return_transaction`` is never inherited from the default.
    """
    values: Dict[str, Any] = {}
    for name in TransactionOption.model_fields:
        if name == "return_transaction":
            continue
        caller_value = getattr(option, name)
        values[name] = caller_value if caller_value is not None else getattr(default, name)
    return option.model_copy(update=values)


def _fee_from_option(option: TransactionOption):
    if option.has_dynamic_fee:
        return DynamicFee(
            max_fee_per_gas=option.max_fee_per_gas,
            max_priority_fee_per_gas=option.max_priority_fee_per_gas,
        )
    if option.gas_price is not None:
        return LegacyFee(gas_price=option.gas_price)
    return None


def _config(merged: TransactionOption, **resolved_fields: Any) -> TransactionConfig:
    return TransactionConfig(
        from_=merged.from_,
        to=merged.to,
        value=merged.value,
        data=merged.data,
        tx_type=merged.tx_type,
        access_list=merged.access_list,
        **resolved_fields,
    )


class TransactionConfigBuilder:
    """
    Builds TransactionConfig instances for one bridge client.

    Example:
        >>> builder = TransactionConfigBuilder(client)
        >>> config = await builder.build({"from": "0xabc..."}, side=ChainSide.PARENT)
        >>> config.to_tx_params()
        {'from': '0xabc...', 'gas': 21000, 'maxFeePerGas': ..., 'nonce': 5, 'chainId': 1}
    """

    def __init__(self, client: "BridgeClient") -> None:
        self._client = client

    async def build(
        self,
        option: Any = None,
        method: Optional[ContractMethod] = None,
        side: ChainSide = ChainSide.PARENT,
        is_write: bool = True,
    ) -> TransactionConfig:
        """
        Build a transaction config.

        Args:
            option: Caller option (TransactionOption, mapping or None)
            method: Bound contract method used for gas estimation, if any
            side: Chain side the transaction targets
            is_write: Resolve gas, fee, nonce and chain id from the network

        Returns:
            Immutable TransactionConfig

        Raises:
            ValidationError: If option is not a key-value record
            ProtocolMismatchError: If dynamic fee fields target a child chain
                without EIP-1559 support
            Exception: Any chain client failure, unchanged
        """
        option = parse_option(option)
        merged = merge_option(self._client.default_config(side), option)
        safe_log(
            self._client.logger,
            "txConfig", merged.model_dump(by_alias=True, exclude_none=True),
            "onRoot", side.is_parent,
            "isWrite", is_write,
        )

        if not is_write:
            return _config(
                merged,
                gas_limit=merged.gas_limit,
                fee=_fee_from_option(merged),
                nonce=merged.nonce,
                chain_id=merged.chain_id,
            )

        dynamic_fees = self._client.supports_dynamic_fees(side)
        if side is ChainSide.CHILD and not dynamic_fees and merged.has_dynamic_fee:
            raise signal_error(self._client.logger, ErrorType.EIP1559_NOT_SUPPORTED, side.value)

        chain = self._client.get_client(side)
        resolvers = self._resolvers(chain, method, merged)
        values = await gather_all(*(
            resolved(getattr(merged, name))
            if getattr(merged, name) is not None
            else resolvers[name]()
            for name in NETWORK_FIELDS
        ))
        fields = dict(zip(NETWORK_FIELDS, values))
        safe_log(self._client.logger, "options filled")

        if dynamic_fees:
            fee = DynamicFee(
                max_fee_per_gas=merged.max_fee_per_gas,
                max_priority_fee_per_gas=merged.max_priority_fee_per_gas,
            )
        else:
            fee = LegacyFee(gas_price=to_int(fields["gas_price"]))

        return _config(
            merged,
            gas_limit=to_int(fields["gas_limit"]),
            fee=fee,
            nonce=to_int(fields["nonce"]),
            chain_id=to_int(fields["chain_id"]),
        )

    @staticmethod
    def _resolvers(
        chain: ChainClient,
        method: Optional[ContractMethod],
        merged: TransactionOption,
    ) -> Dict[str, Callable[[], Awaitable[Any]]]:
        def estimate_gas() -> Awaitable[int]:
            tx: Dict[str, Any] = {
                key: value
                for key, value in (("from", merged.from_), ("value", merged.value))
                if value is not None
            }
            if method is not None:
                return method.estimate_gas(tx)  # type: ignore[arg-type]
            return chain.estimate_gas(tx)  # type: ignore[arg-type]

        return {
            "gas_limit": estimate_gas,
            "gas_price": chain.get_gas_price,
            "nonce": lambda: chain.get_transaction_count(merged.from_, PENDING_BLOCK),  # type: ignore[arg-type]
            "chain_id": chain.get_chain_id,
        }
