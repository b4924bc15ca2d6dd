"""
Chain client interfaces and their web3.py implementation.
"""

from posbridge.chain.base import (
    ChainClient,
    Contract,
    ContractMethod,
    TransactionWriteResult,
)
from posbridge.chain.web3_client import (
    Web3ChainClient,
    Web3Contract,
    Web3ContractMethod,
    Web3WriteResult,
)

__all__ = [
    # Interfaces
    "ChainClient",
    "Contract",
    "ContractMethod",
    "TransactionWriteResult",
    # web3.py
    "Web3ChainClient",
    "Web3Contract",
    "Web3ContractMethod",
    "Web3WriteResult",
]
