"""
Bridge client configuration.

Each chain side carries its own RPC endpoint, default transaction option
and fee-market flag. The parent chain supports EIP-1559 fees by default;
the child chain does not.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from posbridge.constants import (
    ABI_BASE_URL,
    DEFAULT_NETWORK_VERSION,
    PROVIDER_TIMEOUT_SECONDS,
)
from posbridge.types import ChainSide, TransactionOption

__all__ = ["Network", "ChainConfig", "BridgeClientConfig"]


class Network(str, Enum):
    MAINNET = "mainnet"
    TESTNET = "testnet"


class ChainConfig(BaseModel):
    """
    Configuration for one side of the bridge.

    Example:
        ```python
        parent = ChainConfig(
            rpc_url=os.environ["PARENT_RPC"],
            default_config=TransactionOption(from_="0xabc..."),
        )
        ```
    """

    model_config = ConfigDict(frozen=True)

    rpc_url: Optional[str] = Field(
        default=None,
        description="HTTP JSON-RPC endpoint (only needed by BridgeClient.from_config)",
    )
    default_config: TransactionOption = Field(
        default_factory=TransactionOption,
        description="Defaults applied under every caller option on this side",
    )
    dynamic_fees: bool = Field(
        default=False,
        description="Whether the chain accepts maxFeePerGas/maxPriorityFeePerGas",
    )
    request_timeout: int = Field(
        default=PROVIDER_TIMEOUT_SECONDS,
        ge=1,
        description="RPC request timeout in seconds",
    )


class BridgeClientConfig(BaseModel):
    """
    Top-level bridge client configuration.

    Example:
        ```python
        config = BridgeClientConfig(
            network=Network.TESTNET,
            version="amoy",
            parent=ChainConfig(rpc_url="https://rpc.sepolia.org", dynamic_fees=True),
            child=ChainConfig(rpc_url="https://rpc-amoy.polygon.technology"),
            log=True,
        )
        ```
    """

    model_config = ConfigDict(frozen=True)

    network: Network = Network.MAINNET
    version: str = DEFAULT_NETWORK_VERSION
    parent: ChainConfig = Field(
        default_factory=lambda: ChainConfig(dynamic_fees=True),
    )
    child: ChainConfig = Field(default_factory=ChainConfig)
    log: bool = Field(default=False, description="Enable diagnostic checkpoints")
    abi_base_url: str = ABI_BASE_URL
    resolve_read_fields: bool = Field(
        default=True,
        description=(
            "Resolve gas limit, gas price, nonce and chain id for client reads "
            "the same way writes do"
        ),
    )

    def chain(self, side: ChainSide) -> ChainConfig:
        return self.parent if side is ChainSide.PARENT else self.child
