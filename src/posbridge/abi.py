"""
ABI Manager - contract ABI retrieval for bridge tokens.

ABIs are served as JSON artifacts by the network metadata service:

    {base_url}/{network}/{version}/artifacts/{bridge_type}/{name}.json

Each artifact holds an ``"abi"`` list. Fetched ABIs are cached per
``(bridge_type, name)`` for the lifetime of the manager.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import httpx

from posbridge.constants import ABI_REQUEST_TIMEOUT_SECONDS
from posbridge.errors import UpstreamError
from posbridge.utils.logging import get_logger
from posbridge.utils.retry import RetryConfig, retry_async

_logger = get_logger(__name__)


class AbiManager:
    """
    Fetches and caches contract ABIs.

    Example:
        ```python
        manager = AbiManager("https://static.polygon.technology/network", "mainnet", "v1")
        abi = await manager.get_abi("ChildERC20", "pos")
        ```
    """

    def __init__(
        self,
        base_url: str,
        network: str,
        version: str,
        timeout: int = ABI_REQUEST_TIMEOUT_SECONDS,
        retry_config: Optional[RetryConfig] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._network = network
        self._version = version
        self._timeout = timeout
        self._cache: Dict[Tuple[str, str], List[dict]] = {}
        self._retry_config = retry_config or RetryConfig(
            retryable_errors=(httpx.TransportError,),
        )

    def url_for(self, name: str, bridge_type: str) -> str:
        return (
            f"{self._base_url}/{self._network}/{self._version}"
            f"/artifacts/{bridge_type}/{name}.json"
        )

    def cache_abi(self, name: str, bridge_type: str, abi: List[dict]) -> None:
        """Seed the cache, e.g. with an ABI bundled by the application."""
        self._cache[(bridge_type, name)] = abi

    def is_cached(self, name: str, bridge_type: str) -> bool:
        return (bridge_type, name) in self._cache

    async def get_abi(self, name: str, bridge_type: str) -> List[dict]:
        """
        Return the ABI for a contract, fetching it on first use.

        Args:
            name: Contract artifact name (e.g. "RootChainManager")
            bridge_type: Artifact group (e.g. "pos", "plasma")

        Returns:
            ABI as a list of entries

        Raises:
            UpstreamError: If the service is unreachable, answers with a
                non-200 status, or returns an artifact without an ABI list
        """
        key = (bridge_type, name)
        if key in self._cache:
            return self._cache[key]

        url = self.url_for(name, bridge_type)

        async def do_fetch() -> httpx.Response:
            async with httpx.AsyncClient(timeout=httpx.Timeout(self._timeout)) as client:
                return await client.get(url)

        try:
            response = await retry_async(do_fetch, self._retry_config)
        except httpx.HTTPError as e:
            raise UpstreamError(
                f"Failed to fetch ABI {bridge_type}/{name}: {e}",
                operation="get_abi",
                details={"url": url},
            ) from e

        if response.status_code != 200:
            raise UpstreamError(
                f"Failed to fetch ABI {bridge_type}/{name}: HTTP {response.status_code}",
                operation="get_abi",
                details={"url": url, "status_code": response.status_code},
            )

        try:
            abi = response.json()["abi"]
        except (ValueError, KeyError, TypeError) as e:
            raise UpstreamError(
                f"Malformed ABI artifact for {bridge_type}/{name}",
                operation="get_abi",
                details={"url": url},
            ) from e
        if not isinstance(abi, list):
            raise UpstreamError(
                f"Malformed ABI artifact for {bridge_type}/{name}",
                operation="get_abi",
                details={"url": url},
            )

        _logger.debug("ABI fetched", extra={"abi_name": name, "bridge_type": bridge_type})
        self._cache[key] = abi
        return abi
