"""
posbridge - transaction preparation for parent/child token bridges.

Builds protocol-correct transaction configs (gas limit, fee fields, nonce,
chain id) for contract calls on either side of a bridge, merging caller
overrides with per-side defaults and values fetched from the chain.

Quick Start:
    >>> from posbridge import (
    ...     BaseToken, BridgeClient, BridgeClientConfig, ChainConfig,
    ...     ChainSide, ContractInitParam,
    ... )
    >>>
    >>> client = BridgeClient.from_config(BridgeClientConfig(
    ...     parent=ChainConfig(rpc_url="https://eth.llamarpc.com", dynamic_fees=True),
    ...     child=ChainConfig(rpc_url="https://polygon-rpc.com"),
    ... ))
    >>> token = BaseToken(
    ...     ContractInitParam(address="0x...", name="ChildERC20", side=ChainSide.CHILD),
    ...     client,
    ... )
    >>> contract = await token.get_contract()
    >>> balance = await token.process_read(contract.method("balanceOf", "0x..."))

Modules:
- `types`: ChainSide, TransactionOption, TransactionConfig, fee model
- `config`: BridgeClientConfig, ChainConfig, Network
- `client`: BridgeClient
- `transaction`: TransactionConfigBuilder, TransactionExecutor, ContractWriteResult
- `contract`: ContractLazyLoader
- `chain`: chain client interfaces and the web3.py implementation
- `errors`: exception hierarchy
- `utils`: logging, diagnostics, retry and concurrency helpers
"""

from posbridge.version import __version__, __version_info__

# Types
from posbridge.types import (
    ChainSide,
    ContractInitParam,
    DynamicFee,
    FeeModel,
    LegacyFee,
    TransactionConfig,
    TransactionOption,
    parse_option,
)

# Configuration
from posbridge.config import BridgeClientConfig, ChainConfig, Network

# Client
from posbridge.abi import AbiManager
from posbridge.client import BridgeClient

# Chain interfaces
from posbridge.chain import (
    ChainClient,
    Contract,
    ContractMethod,
    TransactionWriteResult,
    Web3ChainClient,
)

# Transaction pipeline
from posbridge.contract import ContractLazyLoader
from posbridge.token import BaseToken
from posbridge.transaction import (
    ContractWriteResult,
    TransactionConfigBuilder,
    TransactionExecutor,
)

# Errors
from posbridge.errors import (
    BridgeError,
    ErrorType,
    ProtocolMismatchError,
    UpstreamError,
    UsageError,
    ValidationError,
)

# Diagnostics
from posbridge.utils import DiagnosticSink, Logger, configure_logging, get_logger

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    # Types
    "ChainSide",
    "ContractInitParam",
    "DynamicFee",
    "FeeModel",
    "LegacyFee",
    "TransactionConfig",
    "TransactionOption",
    "parse_option",
    # Configuration
    "BridgeClientConfig",
    "ChainConfig",
    "Network",
    # Client
    "AbiManager",
    "BridgeClient",
    # Chain
    "ChainClient",
    "Contract",
    "ContractMethod",
    "TransactionWriteResult",
    "Web3ChainClient",
    # Pipeline
    "BaseToken",
    "ContractLazyLoader",
    "ContractWriteResult",
    "TransactionConfigBuilder",
    "TransactionExecutor",
    # Errors
    "BridgeError",
    "ErrorType",
    "ProtocolMismatchError",
    "UpstreamError",
    "UsageError",
    "ValidationError",
    # Diagnostics
    "DiagnosticSink",
    "Logger",
    "configure_logging",
    "get_logger",
]
