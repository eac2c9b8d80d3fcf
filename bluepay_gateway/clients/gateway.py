"""Synchronous gateway client over httpx."""

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


class GatewayClient(BaseGatewayClient):
    """Blocking client: one POST per ``submit``, no retries.

    Retrying a failed transaction is up to the caller. Instances hold no
    per-request state and may be shared across threads.
    """

    def __init__(
        self,
        credentials: GatewayCredentials,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        test_mode: bool = False,
        http_client: Optional[httpx.Client] = None
    ):
        """Initialize client.

        Args:
            credentials: Account id, secret key and gateway URL
            timeout: Seconds allowed for one HTTP exchange
            test_mode: Default MODE for requests that do not set one
            http_client: Optional shared httpx.Client; one is created (and
                closed by ``close``) when omitted
        """
        super().__init__(credentials, timeout=timeout, test_mode=test_mode)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=timeout)

    def submit(self, fields: FieldSet) -> FieldSet:
        """Signs, posts and decodes one request.

        Never raises for gateway or network failures: those are returned as
        fields (``STATUS=E`` for failed exchanges). RAW_RESULT always holds
        the unparsed text.

        Args:
            fields: Request fields; left unmodified

        Returns:
            Decoded response fields
        """
        request = self.prepare_request(fields)
        self._log_request(request)

        try:
            result = self._post(request)
        except Exception as e:
            result = self._failed_result(e)

        return self._decode(result)

    def _post(self, request: FieldSet) -> str:
        try:
            response = self._client.post(
                self.gateway_url,
                content=encode_form(request),
                headers=self.request_headers(),
                timeout=self.timeout
            )
            return self._result_text(response.status_code, response.text)
        except httpx.HTTPError as e:
            raise TransportError(f"POST to {self.gateway_url} failed", cause=e) from e

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "GatewayClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
