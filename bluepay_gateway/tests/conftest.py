"""Shared pytest fixtures for bluepay_gateway tests."""

from urllib.parse import parse_qsl

import httpx
import pytest

from bluepay_gateway.clients import GatewayClient
from bluepay_gateway.core.builders import CreditCardRequest, SaleOptions
from bluepay_gateway.types import FieldSet, GatewayCredentials


TEST_ACCOUNT_ID = "100200300400"
TEST_SECRET_KEY = "ABCDEFGHIJKLMNOPQRSTUVWXYZ012345"
TEST_GATEWAY_URL = "https://gateway.test/interfaces/bp20post"

APPROVED_BODY = "TRANS_ID=100123456789&STATUS=1&AVS=_&CVV2=M&MESSAGE=Approved%20Sale&AUTH_CODE=123456"
DECLINED_BODY = "TRANS_ID=100123456790&STATUS=0&MESSAGE=DECLINED"
ERROR_BODY = "STATUS=E&MESSAGE=CARD%20ACCOUNT%20NOT%20VALID"


class RecordingHandler:
    """MockTransport handler that answers with a fixed body and keeps every request."""

    def __init__(self, body: str = APPROVED_BODY, status_code: int = 200):
        self.body = body
        self.status_code = status_code
        self.requests = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_form(self) -> list:
        """Decoded form pairs of the last request, repeats included."""
        return parse_qsl(self.last_request.content.decode("ascii"), keep_blank_values=True)


@pytest.fixture
def credentials():
    """Credentials pointing at a fake gateway."""
    return GatewayCredentials(
        account_id=TEST_ACCOUNT_ID,
        secret_key=TEST_SECRET_KEY,
        gateway_url=TEST_GATEWAY_URL
    )


@pytest.fixture
def approved_handler():
    return RecordingHandler(APPROVED_BODY)


@pytest.fixture
def sale_fields():
    """Unsealed sale request fields."""
    return FieldSet([
        ("ACCOUNT_ID", TEST_ACCOUNT_ID),
        ("TRANS_TYPE", "SALE"),
        ("PAYMENT_TYPE", "CREDIT"),
        ("MODE", "TEST"),
        ("AMOUNT", "10.00"),
        ("PAYMENT_ACCOUNT", "4111111111111111"),
        ("CARD_CVV2", "123"),
        ("CARD_EXPIRE", "1225"),
        ("NAME1", "Bob"),
    ])


@pytest.fixture
def sale_request():
    """Card sale request in test mode."""
    return CreditCardRequest(
        amount=10.00,
        card_number="4111111111111111",
        cvv="123",
        expiration="1225",
        test_mode=True,
        options=SaleOptions(first_name="Bob", last_name="Tester", zip_code="84101")
    )


@pytest.fixture
def make_handler():
    """Factory for recording handlers with a chosen body and status."""
    def _make(body: str = APPROVED_BODY, status_code: int = 200) -> RecordingHandler:
        return RecordingHandler(body, status_code)
    return _make


@pytest.fixture
def make_client(credentials):
    """Factory for a GatewayClient whose HTTP traffic goes to ``handler``."""
    opened = []

    def _make(handler, **kwargs) -> GatewayClient:
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        opened.append(http_client)
        return GatewayClient(credentials, http_client=http_client, **kwargs)

    yield _make
    for http_client in opened:
        http_client.close()
