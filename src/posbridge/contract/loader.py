"""Lazy contract resolution for tokens."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from posbridge.chain.base import Contract
from posbridge.types import ContractInitParam
from posbridge.utils.logging import get_logger

if TYPE_CHECKING:
    from posbridge.client import BridgeClient

_logger = get_logger(__name__)


class ContractLazyLoader:
    """
    Builds a token's contract on first use and keeps it.

    The first ``get_contract()`` fetches the ABI and builds the contract
    on the token's chain side; later calls return the same instance. Two
    overlapping first calls may both fetch, and whichever finishes last is
    kept.
    """

    def __init__(self, client: "BridgeClient", param: ContractInitParam) -> None:
        self._client = client
        self._param = param
        self._contract: Optional[Contract] = None

    @property
    def loaded(self) -> bool:
        return self._contract is not None

    async def get_contract(self) -> Contract:
        if self._contract is not None:
            return self._contract

        param = self._param
        abi = await self._client.get_abi(param.name, param.bridge_type)
        self._contract = self._client.get_client(param.side).get_contract(param.address, abi)
        _logger.debug(
            "Contract loaded",
            extra={"abi_name": param.name, "address": param.address, "side": param.side.value},
        )
        return self._contract
