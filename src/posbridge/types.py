"""
Transaction types for the posbridge SDK.

- ChainSide: which of the two bridged chains a call targets
- TransactionOption: caller overrides, every field optional
- LegacyFee / DynamicFee: the two mutually exclusive fee representations
- TransactionConfig: resolved, immutable config handed to a chain client
- ContractInitParam: address/ABI/side tuple identifying a token contract
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Union, cast

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from web3.types import TxParams

from posbridge.constants import DEFAULT_BRIDGE_TYPE
from posbridge.errors import ErrorType, ValidationError
from posbridge.utils.converter import to_int
from posbridge.utils.logger import build_error

IntLike = Annotated[int, BeforeValidator(to_int)]
"""Integer accepting ``0x`` hex and decimal strings."""


class ChainSide(str, Enum):
    """The two bridged chains."""

    PARENT = "parent"
    CHILD = "child"

    @property
    def is_parent(self) -> bool:
        return self is ChainSide.PARENT


# ============================================================================
# Caller options
# ============================================================================

class TransactionOption(BaseModel):
    """
    Caller-supplied transaction overrides.

    Fields accept either their Python names or the web3 ``TxParams`` keys
    (``from``, ``gas``, ``gasPrice``, ``maxFeePerGas``, ``type``, ...). ``None`` means
    "not supplied".

    Example:
        ```python
        option = TransactionOption.model_validate({
            "from": "0xabc...",
            "maxFeePerGas": 30_000_000_000,
            "returnTransaction": True,
        })
        ```
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    value: Optional[Union[int, str]] = None
    data: Optional[str] = None
    gas_limit: Optional[IntLike] = Field(
        default=None,
        alias="gas",
        validation_alias=AliasChoices("gas", "gasLimit", "gas_limit"),
    )
    gas_price: Optional[IntLike] = Field(default=None, alias="gasPrice")
    max_fee_per_gas: Optional[IntLike] = Field(default=None, alias="maxFeePerGas")
    max_priority_fee_per_gas: Optional[IntLike] = Field(
        default=None, alias="maxPriorityFeePerGas"
    )
    nonce: Optional[IntLike] = None
    chain_id: Optional[IntLike] = Field(default=None, alias="chainId")
    tx_type: Optional[IntLike] = Field(default=None, alias="type")
    access_list: Optional[List[Any]] = Field(default=None, alias="accessList")
    return_transaction: bool = Field(default=False, alias="returnTransaction")

    @property
    def has_dynamic_fee(self) -> bool:
        return self.max_fee_per_gas is not None or self.max_priority_fee_per_gas is not None


def parse_option(option: Any) -> TransactionOption:
    """
    Validate a caller option and return it as a TransactionOption.

    Args:
        option: TransactionOption, mapping, or None (empty option)

    Raises:
        ValidationError: If option is not a key-value record
            (``TRANSACTION_OPTION_NOT_OBJECT``) or has unknown or malformed
            fields (``INVALID_TRANSACTION_OPTION``)
    """
    if option is None:
        return TransactionOption()
    if isinstance(option, TransactionOption):
        return option
    if not isinstance(option, Mapping):
        raise build_error(ErrorType.TRANSACTION_OPTION_NOT_OBJECT, option)
    try:
        return TransactionOption.model_validate(dict(option))
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid transaction option ({e.error_count()} error(s))",
            code=ErrorType.INVALID_TRANSACTION_OPTION.value,
            details={"errors": [err["msg"] for err in e.errors()]},
        ) from None


# ============================================================================
# Fee model
# ============================================================================

class LegacyFee(BaseModel):
    """Single gas price (pre EIP-1559 transactions)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["legacy"] = "legacy"
    gas_price: IntLike


class DynamicFee(BaseModel):
    """
    EIP-1559 fee pair.

    Either member may be absent: a dynamic-fee side with no pair in the
    option or the side defaults yields an empty pair, and the node picks
    the fees when the transaction is sent.
    """

    model_config = ConfigDict(frozen=True)

    kind: Literal["dynamic"] = "dynamic"
    max_fee_per_gas: Optional[IntLike] = None
    max_priority_fee_per_gas: Optional[IntLike] = None


FeeModel = Annotated[Union[LegacyFee, DynamicFee], Field(discriminator="kind")]


# ============================================================================
# Resolved config
# ============================================================================

class TransactionConfig(BaseModel):
    """
    Resolved transaction config for one chain side.

    Carries at most one fee representation. Instances are immutable;
    :meth:`with_call` returns an augmented copy.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: Optional[str] = Field(default=None, alias="from")
    to: Optional[str] = None
    value: Optional[Union[int, str]] = None
    data: Optional[str] = None
    gas_limit: Optional[IntLike] = None
    fee: Optional[FeeModel] = None
    nonce: Optional[IntLike] = None
    chain_id: Optional[IntLike] = None
    tx_type: Optional[IntLike] = None
    access_list: Optional[List[Any]] = None

    @property
    def gas_price(self) -> Optional[int]:
        return self.fee.gas_price if isinstance(self.fee, LegacyFee) else None

    @property
    def max_fee_per_gas(self) -> Optional[int]:
        return self.fee.max_fee_per_gas if isinstance(self.fee, DynamicFee) else None

    @property
    def max_priority_fee_per_gas(self) -> Optional[int]:
        if isinstance(self.fee, DynamicFee):
            return self.fee.max_priority_fee_per_gas
        return None

    def with_call(self, data: str, to: str) -> "TransactionConfig":
        """Return a copy carrying encoded call data and the target address."""
        return self.model_copy(update={"data": data, "to": to})

    def to_tx_params(self) -> TxParams:
        """Render as a web3 ``TxParams`` dict, omitting absent fields."""
        params: Dict[str, Any] = {}
        pairs: List[tuple] = [
            ("from", self.from_),
            ("to", self.to),
            ("value", self.value),
            ("data", self.data),
            ("gas", self.gas_limit),
        ]
        if isinstance(self.fee, LegacyFee):
            pairs.append(("gasPrice", self.fee.gas_price))
        elif isinstance(self.fee, DynamicFee):
            pairs.append(("maxFeePerGas", self.fee.max_fee_per_gas))
            pairs.append(("maxPriorityFeePerGas", self.fee.max_priority_fee_per_gas))
        pairs.append(("nonce", self.nonce))
        pairs.append(("chainId", self.chain_id))
        pairs.append(("type", self.tx_type))
        pairs.append(("accessList", self.access_list))
        for key, value in pairs:
            if value is not None:
                params[key] = value
        return cast(TxParams, params)


@dataclass(frozen=True)
class ContractInitParam:
    """
    Identifies a token contract on one chain side.

    Attributes:
        address: Contract address
        name: ABI name served by the ABI service (e.g. "ChildERC20")
        side: Chain side the contract lives on
        bridge_type: ABI artifact group (e.g. "pos")
    """

    address: str
    name: str
    side: ChainSide
    bridge_type: str = DEFAULT_BRIDGE_TYPE
