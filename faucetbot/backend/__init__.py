"""
Faucet Backend Layer.

Thin async HTTP client for the faucet backend's two endpoints:

    GET  /balance       ->  BalanceResponse
    POST /bot-endpoint  ->  DripResponse

Transport failures, timeouts, non-2xx statuses and malformed payloads are all
raised as BackendError so callers only have one failure type to handle.
"""

from faucetbot.backend.client import DEFAULT_TIMEOUT, FaucetBackendClient
from faucetbot.backend.models import BalanceResponse, DripRequest, DripResponse

__all__ = [
    "DEFAULT_TIMEOUT",
    "BalanceResponse",
    "DripRequest",
    "DripResponse",
    "FaucetBackendClient",
]
