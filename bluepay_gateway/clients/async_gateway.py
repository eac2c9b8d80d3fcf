"""Asynchronous gateway client over httpx.AsyncClient."""

from typing import Optional

import httpx

from .base import BaseGatewayClient
from ..core.codec import encode_form
from ..types import (
    DEFAULT_TIMEOUT_SECONDS,
    FieldSet,
    GatewayCredentials,
    TransportError
)


class AsyncGatewayClient(BaseGatewayClient):
    """Same contract as GatewayClient for code running in an event loop.

    ``submit`` and the ``process_*`` helpers return coroutines. Concurrent
    submits share nothing but the immutable credentials and the HTTP client.
    """

    def __init__(
        self,
        credentials: GatewayCredentials,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        test_mode: bool = False,
        http_client: Optional[httpx.AsyncClient] = None
    ):
        super().__init__(credentials, timeout=timeout, test_mode=test_mode)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=timeout)

    async def submit(self, fields: FieldSet) -> FieldSet:
        """Signs, posts and decodes one request without raising on failures."""
        request = self.prepare_request(fields)
        self._log_request(request)

        try:
            result = await self._post(request)
        except Exception as e:
            result = self._failed_result(e)

        return self._decode(result)

    async def _post(self, request: FieldSet) -> str:
        try:
            response = await self._client.post(
                self.gateway_url,
                content=encode_form(request),
                headers=self.request_headers(),
                timeout=self.timeout
            )
            return self._result_text(response.status_code, response.text)
        except httpx.HTTPError as e:
            raise TransportError(f"POST to {self.gateway_url} failed", cause=e) from e

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncGatewayClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
