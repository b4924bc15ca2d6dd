"""
Shared stubs and fixtures for posbridge tests.

The chain client and contract method stubs count every call so tests can
assert that no network call happened.
"""

from collections import Counter
from typing import Any, Dict, List, Optional

import pytest

from posbridge import (
    BridgeClient,
    BridgeClientConfig,
    ChainConfig,
    ChainSide,
    ContractInitParam,
    TransactionOption,
)


# =============================================================================
# Test Constants
# =============================================================================

SENDER = "0x1234567890123456789012345678901234567890"
TOKEN_ADDRESS = "0xabcdefABCDEFabcdefABCDEFabcdefABCDEFabcd"
RECIPIENT = "0x9876543210987654321098765432109876543210"
TX_HASH = "0x" + "ab" * 32
ENCODED_CALL = "0xa9059cbb" + "00" * 64
ERC20_ABI: List[dict] = [
    {
        "type": "function",
        "name": "balanceOf",
        "stateMutability": "view",
        "inputs": [{"name": "account", "type": "address"}],
        "outputs": [{"name": "", "type": "uint256"}],
    }
]


# =============================================================================
# Stubs
# =============================================================================


class StubWriteResult:
    def __init__(self, transaction_hash: str = TX_HASH, receipt: Any = None) -> None:
        self.transaction_hash = transaction_hash
        self.receipt = receipt if receipt is not None else {"status": 1}
        self.receipt_calls = 0

    async def get_receipt(self) -> Any:
        self.receipt_calls += 1
        return self.receipt


class _Counting:
    """Records every call by name with its arguments."""

    def __init__(self, fail: Optional[Dict[str, Exception]] = None) -> None:
        self.calls: Counter = Counter()
        self.args: Dict[str, List[tuple]] = {}
        self.fail = fail or {}

    def _record(self, name: str, *args: Any) -> None:
        self.calls[name] += 1
        self.args.setdefault(name, []).append(args)
        if name in self.fail:
            raise self.fail[name]

    @property
    def total_calls(self) -> int:
        return sum(self.calls.values())


class StubContract:
    def __init__(self, address: str, abi: List[dict]) -> None:
        self.address = address
        self.abi = abi

    def method(self, name: str, *args: Any) -> "StubMethod":
        return StubMethod(address=self.address, name=name)


class CountingChainClient(_Counting):
    """Chain client stub with fixed answers."""

    def __init__(
        self,
        *,
        gas: Any = 21_000,
        gas_price: Any = 30_000_000_000,
        nonce: Any = 5,
        chain_id: Any = 137,
        read_result: Any = b"\x00" * 31 + b"\x01",
        fail: Optional[Dict[str, Exception]] = None,
    ) -> None:
        super().__init__(fail)
        self.gas = gas
        self.gas_price = gas_price
        self.nonce = nonce
        self.chain_id = chain_id
        self.read_result = read_result
        self.write_result = StubWriteResult()

    async def estimate_gas(self, tx):
        self._record("estimate_gas", tx)
        return self.gas

    async def get_gas_price(self):
        self._record("get_gas_price")
        return self.gas_price

    async def get_transaction_count(self, address, block_identifier):
        self._record("get_transaction_count", address, block_identifier)
        return self.nonce

    async def get_chain_id(self):
        self._record("get_chain_id")
        return self.chain_id

    async def read(self, config):
        self._record("read", config)
        return self.read_result

    async def write(self, config):
        self._record("write", config)
        return self.write_result

    def get_contract(self, address, abi):
        self._record("get_contract", address, abi)
        return StubContract(address, abi)


class StubMethod(_Counting):
    """Bound contract method stub."""

    def __init__(
        self,
        *,
        address: str = TOKEN_ADDRESS,
        name: str = "transfer",
        gas: Any = 65_000,
        read_result: Any = 1_000,
        fail: Optional[Dict[str, Exception]] = None,
    ) -> None:
        super().__init__(fail)
        self.address = address
        self.name = name
        self.gas = gas
        self.read_result = read_result
        self.write_result = StubWriteResult()

    def encode_abi(self) -> str:
        return ENCODED_CALL

    async def estimate_gas(self, tx):
        self._record("estimate_gas", tx)
        return self.gas

    async def read(self, config=None):
        self._record("read", config)
        return self.read_result

    async def write(self, config):
        self._record("write", config)
        return self.write_result


class StubAbiManager(_Counting):
    def __init__(self, abi: Optional[List[dict]] = None, fail=None) -> None:
        super().__init__(fail)
        self.abi = abi if abi is not None else ERC20_ABI

    async def get_abi(self, name, bridge_type):
        self._record("get_abi", name, bridge_type)
        return self.abi


class RecordingSink:
    """Diagnostic sink keeping every checkpoint."""

    def __init__(self) -> None:
        self.entries: List[tuple] = []

    def log(self, *args: Any) -> None:
        self.entries.append(args)

    def error(self, code, *args):
        from posbridge.utils.logger import build_error

        return build_error(code, *args)


class BrokenSink(RecordingSink):
    def log(self, *args: Any) -> None:
        raise RuntimeError("sink unavailable")


class FailingErrorSink(RecordingSink):
    def error(self, code, *args):
        raise RuntimeError("error sink unavailable")


class SilentErrorSink(RecordingSink):
    """Sink whose error() forgets to return the exception."""

    def error(self, code, *args):
        return None


# =============================================================================
# Fixtures
# =============================================================================


def build_client(
    *,
    parent_defaults: Optional[dict] = None,
    child_defaults: Optional[dict] = None,
    parent_dynamic: bool = True,
    child_dynamic: bool = False,
    resolve_read_fields: bool = True,
    parent: Optional[CountingChainClient] = None,
    child: Optional[CountingChainClient] = None,
    logger: Any = None,
    abi_manager: Any = None,
) -> BridgeClient:
    config = BridgeClientConfig(
        parent=ChainConfig(
            default_config=TransactionOption.model_validate(parent_defaults or {}),
            dynamic_fees=parent_dynamic,
        ),
        child=ChainConfig(
            default_config=TransactionOption.model_validate(child_defaults or {}),
            dynamic_fees=child_dynamic,
        ),
        resolve_read_fields=resolve_read_fields,
    )
    return BridgeClient(
        config,
        parent or CountingChainClient(),
        child or CountingChainClient(chain_id=80002),
        logger=logger or RecordingSink(),
        abi_manager=abi_manager or StubAbiManager(),
    )


@pytest.fixture
def client() -> BridgeClient:
    """Bridge client with a dynamic-fee parent and a legacy child."""
    return build_client()


@pytest.fixture
def parent_param() -> ContractInitParam:
    return ContractInitParam(address=TOKEN_ADDRESS, name="RootERC20", side=ChainSide.PARENT)


@pytest.fixture
def child_param() -> ContractInitParam:
    return ContractInitParam(address=TOKEN_ADDRESS, name="ChildERC20", side=ChainSide.CHILD)


@pytest.fixture
def method() -> StubMethod:
    return StubMethod()


NON_RECORD_OPTIONS = [
    ["from", SENDER],
    ("from", SENDER),
    "from=0x1234",
    42,
    3.5,
    True,
    {SENDER},
]
