"""
Transaction pipeline: config building, execution and write results.
"""

from posbridge.transaction.builder import (
    NETWORK_FIELDS,
    TransactionConfigBuilder,
    merge_option,
)
from posbridge.transaction.executor import TransactionExecutor
from posbridge.transaction.result import ContractWriteResult

__all__ = [
    "NETWORK_FIELDS",
    "TransactionConfigBuilder",
    "merge_option",
    "TransactionExecutor",
    "ContractWriteResult",
]
