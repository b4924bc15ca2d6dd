"""
Bridge client for the parent/child chain pair.

The BridgeClient holds one chain client per side, the configuration with
each side's default transaction option, the ABI manager and the
diagnostic sink. Tokens receive it at construction.

Example:
    >>> from posbridge import BridgeClient, BridgeClientConfig, ChainConfig, Network
    >>> client = BridgeClient.from_config(BridgeClientConfig(
    ...     network=Network.TESTNET,
    ...     version="amoy",
    ...     parent=ChainConfig(rpc_url="https://rpc.sepolia.org", dynamic_fees=True),
    ...     child=ChainConfig(rpc_url="https://rpc-amoy.polygon.technology"),
    ... ))
    >>> abi = await client.get_abi("ChildERC20", "pos")
"""

from __future__ import annotations

from typing import List, Optional

from posbridge.abi import AbiManager
from posbridge.chain.base import ChainClient
from posbridge.chain.web3_client import Web3ChainClient
from posbridge.config import BridgeClientConfig
from posbridge.errors import ValidationError
from posbridge.types import ChainSide, TransactionOption
from posbridge.utils.logger import DiagnosticSink, Logger


class BridgeClient:
    """Two-sided client shared by every token of one bridge."""

    def __init__(
        self,
        config: BridgeClientConfig,
        parent: ChainClient,
        child: ChainClient,
        *,
        logger: Optional[DiagnosticSink] = None,
        abi_manager: Optional[AbiManager] = None,
    ) -> None:
        self.config = config
        self.parent = parent
        self.child = child
        self.logger: DiagnosticSink = logger or Logger(enabled=config.log)
        self.abi_manager = abi_manager or AbiManager(
            config.abi_base_url,
            config.network.value,
            config.version,
        )

    @classmethod
    def from_config(cls, config: BridgeClientConfig, **kwargs) -> "BridgeClient":
        """
        Build a client with web3 chain clients for both configured RPC URLs.

        Raises:
            ValidationError: If either side has no ``rpc_url``
        """
        clients = {}
        for side in ChainSide:
            chain = config.chain(side)
            if not chain.rpc_url:
                raise ValidationError(
                    f"{side.value}.rpc_url is required",
                    details={"side": side.value},
                )
            clients[side] = Web3ChainClient.from_rpc_url(
                chain.rpc_url, side, timeout=chain.request_timeout
            )
        return cls(config, clients[ChainSide.PARENT], clients[ChainSide.CHILD], **kwargs)

    def get_client(self, side: ChainSide) -> ChainClient:
        return self.parent if side is ChainSide.PARENT else self.child

    def default_config(self, side: ChainSide) -> TransactionOption:
        return self.config.chain(side).default_config

    def supports_dynamic_fees(self, side: ChainSide) -> bool:
        """Whether the side accepts EIP-1559 fee fields (configuration only, no I/O)."""
        return self.config.chain(side).dynamic_fees

    async def get_abi(self, name: str, bridge_type: str) -> List[dict]:
        return await self.abi_manager.get_abi(name, bridge_type)
