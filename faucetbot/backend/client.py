"""
FaucetBackendClient - async HTTP client for the faucet backend.

One httpx.AsyncClient is created per process, bound to BACKEND_URL with a
fixed per-request timeout. Requests are never retried.
"""

from __future__ import annotations

from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from faucetbot.backend.models import BalanceResponse, DripRequest, DripResponse
from faucetbot.config.logging import get_logger
from faucetbot.errors import BackendError

logger = get_logger(__name__)

# Seconds, applied to connect, read, write and pool acquisition alike
DEFAULT_TIMEOUT = 10.0


class FaucetBackendClient:
    """
    Client for the faucet backend's HTTP API.

    Use as an async context manager, or call aclose() when done.

    Args:
        base_url: Backend base URL (BACKEND_URL)
        timeout: Per-request timeout in seconds
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )

    async def __aenter__(self) -> FaucetBackendClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def get_balance(self) -> BalanceResponse:
        """
        Fetch the faucet's remaining balance.

        Raises:
            BackendError: On any transport, status or payload problem
        """
        data = await self._request("GET", "/balance")
        return self._parse(BalanceResponse, data)

    async def drip(self, request: DripRequest) -> DripResponse:
        """
        Ask the backend to send tokens.

        A returned DripResponse may still describe a failed drip; check
        ``is_success``.

        Raises:
            BackendError: On any transport, status or payload problem
        """
        data = await self._request("POST", "/bot-endpoint", json=request.model_dump())
        return self._parse(DripResponse, data)

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            response = await self._client.request(method, path, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise BackendError(f"Request to {path} timed out") from e
        except httpx.HTTPStatusError as e:
            raise BackendError(_status_error_message(e.response)) from e
        except httpx.HTTPError as e:
            raise BackendError(f"Could not reach the faucet backend: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            raise BackendError(f"Backend returned invalid JSON for {path}") from e

    @staticmethod
    def _parse(model: type[BaseModel], data: Any) -> Any:
        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.debug(f"Unexpected {model.__name__} payload: {data!r}")
            raise BackendError(f"Backend returned an unexpected {model.__name__}") from e


def _status_error_message(response: httpx.Response) -> str:
    """
    Build the message for a non-2xx answer.

    The backend reports drip failures as ``{"error": "..."}``; that text is
    more useful to the chat user than the status line, so prefer it.
    """
    try:
        data = response.json()
    except ValueError:
        data = None
    if isinstance(data, dict) and isinstance(data.get("error"), str) and data["error"]:
        return data["error"]
    return f"Request failed with status code {response.status_code}"
