"""Constants for the posbridge SDK.

Defaults for ABI retrieval, RPC timeouts, retry behaviour and the block
tag used for nonce lookups.
"""

# ABI service
ABI_BASE_URL = "https://static.polygon.technology/network"
DEFAULT_NETWORK_VERSION = "v1"
DEFAULT_BRIDGE_TYPE = "pos"
ABI_REQUEST_TIMEOUT_SECONDS = 30

# RPC
PROVIDER_TIMEOUT_SECONDS = 30
PENDING_BLOCK = "pending"  # nonce lookups count queued transactions

# Retry (ABI fetches only)
RETRY_MAX_ATTEMPTS = 3
RETRY_BASE_DELAY_MS = 500
RETRY_MAX_DELAY_MS = 8000

__all__ = [
    "ABI_BASE_URL",
    "DEFAULT_NETWORK_VERSION",
    "DEFAULT_BRIDGE_TYPE",
    "ABI_REQUEST_TIMEOUT_SECONDS",
    "PROVIDER_TIMEOUT_SECONDS",
    "PENDING_BLOCK",
    "RETRY_MAX_ATTEMPTS",
    "RETRY_BASE_DELAY_MS",
    "RETRY_MAX_DELAY_MS",
]
