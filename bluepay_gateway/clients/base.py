"""Base client shared by the synchronous and asynchronous gateway clients."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..core.builders import (
    Amount,
    CreditCardRequest,
    SaleOptions,
    build_credit_card_auth,
    build_credit_card_sale,
    build_follow_on_transaction
)
from ..core.codec import FORM_CONTENT_TYPE, decode_response, error_result_from_exception
from ..core.seal import compute_seal
from ..types import (
    ConfigurationError,
    DEFAULT_GATEWAY_URL,
    DEFAULT_TIMEOUT_SECONDS,
    FieldSet,
    GatewayConfig,
    GatewayCredentials,
    GatewayField,
    TransactionType,
    map_error_to_message
)


logger = logging.getLogger(__name__)


class BaseGatewayClient(ABC):
    """Signs requests and turns any exchange outcome into a decoded FieldSet.

    Subclasses provide ``submit`` on top of an HTTP client. Every ``submit``
    returns a FieldSet carrying RAW_RESULT; transport failures come back as
    ``STATUS=E`` with the failure in MESSAGE instead of being raised, so
    callers only ever inspect the returned fields.

    Example:
        with GatewayClient.create("100200300400", "SECRET") as client:
            result = client.process_credit_card_sale(CreditCardRequest(
                amount="10.00",
                card_number="4111111111111111",
                cvv="123",
                expiration="1225",
                test_mode=True
            ))
            if is_approved(result):
                ...
    """

    def __init__(
        self,
        credentials: GatewayCredentials,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        test_mode: bool = False
    ):
        """Initialize base client.

        Args:
            credentials: Account id, secret key and gateway URL
            timeout: Seconds allowed for one HTTP exchange
            test_mode: Default MODE for requests that do not set one

        Raises:
            ConfigurationError: If credentials are missing or timeout is not positive
        """
        if not isinstance(credentials, GatewayCredentials):
            raise ConfigurationError(
                f"GatewayCredentials required, got {type(credentials).__name__}"
            )
        if timeout is None or timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {timeout!r}")
        self._credentials = credentials
        self._timeout = timeout
        self._test_mode = test_mode

    @classmethod
    def create(
        cls,
        account_id: str,
        secret_key: str,
        gateway_url: Optional[str] = DEFAULT_GATEWAY_URL,
        **kwargs: Any
    ):
        """Builds a client from the three gateway parameters.

        An empty or None ``gateway_url`` selects the production endpoint.
        """
        credentials = GatewayCredentials(
            account_id=account_id or "",
            secret_key=secret_key or "",
            gateway_url=gateway_url or DEFAULT_GATEWAY_URL
        )
        return cls(credentials, **kwargs)

    @classmethod
    def from_config(cls, config: GatewayConfig, **kwargs: Any):
        if config is None:
            raise ConfigurationError("GatewayConfig required, got None")
        return cls(
            config.credentials,
            timeout=config.timeout,
            test_mode=config.test_mode,
            **kwargs
        )

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **kwargs: Any):
        return cls.from_config(GatewayConfig.from_env(env_file), **kwargs)

    @property
    def account_id(self) -> str:
        return self._credentials.account_id

    @property
    def gateway_url(self) -> str:
        return self._credentials.gateway_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def test_mode(self) -> bool:
        return self._test_mode

    def prepare_request(self, fields: FieldSet) -> FieldSet:
        """Copies ``fields`` and appends a seal unless one is already present.

        An existing TAMPER_PROOF_SEAL is kept untouched. The seal honours a
        TPS_DEF field when the request carries one.
        """
        if fields is None:
            raise TypeError("fields must be a FieldSet, got None")
        request = FieldSet(fields)
        if GatewayField.SEAL not in request:
            request.add(
                GatewayField.SEAL,
                compute_seal(self._credentials.secret_key.get_secret_value(), request)
            )
        return request

    def request_headers(self) -> Dict[str, str]:
        return {"Content-Type": FORM_CONTENT_TYPE}

    def _log_request(self, request: FieldSet) -> None:
        logger.info(
            "Submitting %s transaction to %s",
            request.get(GatewayField.TRANS_TYPE, "unknown"),
            self.gateway_url
        )
        logger.debug("Request fields: %r", request)

    def _result_text(self, status_code: int, text: str) -> str:
        # Declined and invalid transactions come back as 4xx with the
        # gateway's own STATUS/MESSAGE in the body.
        if not 200 <= status_code < 300:
            logger.warning("Gateway returned HTTP %s, parsing body", status_code)
        return text

    def _failed_result(self, error: BaseException) -> str:
        logger.error(
            "Gateway exchange with %s failed: %s",
            self.gateway_url,
            map_error_to_message(error)
        )
        return error_result_from_exception(error)

    def _decode(self, result: str) -> FieldSet:
        decoded = decode_response(result)
        logger.info(
            "Gateway responded STATUS=%s MESSAGE=%s",
            decoded.get(GatewayField.STATUS),
            decoded.get(GatewayField.MESSAGE)
        )
        return decoded

    def _with_default_mode(self, request: CreditCardRequest) -> CreditCardRequest:
        if request.test_mode is None:
            return request.model_copy(update={"test_mode": self._test_mode})
        return request

    @abstractmethod
    def submit(self, fields: FieldSet):
        """Signs, posts and decodes one request.

        Args:
            fields: Request fields

        Returns:
            Decoded response FieldSet (awaitable on the async client)
        """
        ...

    # Convenience operations. Each returns whatever ``submit`` returns, so
    # the async client's results are awaited by the caller.

    def process_credit_card_sale(self, request: CreditCardRequest):
        return self.submit(build_credit_card_sale(self.account_id, self._with_default_mode(request)))

    def process_credit_card_auth(self, request: CreditCardRequest):
        return self.submit(build_credit_card_auth(self.account_id, self._with_default_mode(request)))

    def process_capture(
        self,
        master_id: str,
        amount: Optional[Amount] = None,
        options: Optional[SaleOptions] = None
    ):
        return self._process_follow_on(TransactionType.CAPTURE, master_id, amount, options)

    def process_refund(
        self,
        master_id: str,
        amount: Optional[Amount] = None,
        options: Optional[SaleOptions] = None
    ):
        """Refunds a settled transaction, in full when ``amount`` is omitted."""
        return self._process_follow_on(TransactionType.REFUND, master_id, amount, options)

    def process_void(self, master_id: str, options: Optional[SaleOptions] = None):
        return self._process_follow_on(TransactionType.VOID, master_id, None, options)

    def _process_follow_on(
        self,
        trans_type: TransactionType,
        master_id: str,
        amount: Optional[Amount],
        options: Optional[SaleOptions]
    ):
        return self.submit(build_follow_on_transaction(
            self.account_id,
            trans_type,
            master_id,
            amount=amount,
            test_mode=self._test_mode,
            options=options
        ))
