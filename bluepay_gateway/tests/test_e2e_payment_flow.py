"""End-to-end tests for the sale, refund and failure flows against a fake gateway."""

from urllib.parse import parse_qsl

import httpx
import pytest

from bluepay_gateway import (
    CreditCardRequest,
    FieldSet,
    GatewayClient,
    SaleOptions,
    TransactionStatus,
    create_seal_definition,
    get_transaction_id,
    get_transaction_status,
    is_approved,
    is_error,
    verify_seal
)


class FakeGateway:
    """Checks the seal like the real gateway and answers in its format."""

    def __init__(self, secret_key: str):
        self.secret_key = secret_key
        self.next_id = 100000000001
        self.received = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        fields = FieldSet(parse_qsl(request.content.decode("ascii"), keep_blank_values=True))
        self.received.append(fields)

        if not verify_seal(self.secret_key, fields):
            return httpx.Response(400, text="STATUS=E&MESSAGE=SECURITY%20ERROR")
        if fields.get("PAYMENT_ACCOUNT", "").endswith("0002"):
            return httpx.Response(400, text=f"TRANS_ID={self._id()}&STATUS=0&MESSAGE=DECLINED")
        return httpx.Response(
            200,
            text=f"TRANS_ID={self._id()}&STATUS=1&MESSAGE=Approved%20{fields.get('TRANS_TYPE')}"
        )

    def _id(self) -> str:
        self.next_id += 1
        return str(self.next_id)


@pytest.fixture
def gateway(credentials):
    return FakeGateway(credentials.secret_key.get_secret_value())


@pytest.fixture
def client(credentials, gateway):
    http_client = httpx.Client(transport=httpx.MockTransport(gateway))
    yield GatewayClient(credentials, http_client=http_client)
    http_client.close()


class TestE2EPaymentFlow:
    """Complete flows through builders, sealing, transport and decoding."""

    @pytest.mark.integration
    def test_sale_then_refund(self, client, gateway, sale_request):
        sale = client.process_credit_card_sale(sale_request)

        assert is_approved(sale)
        assert sale.get("MESSAGE") == "Approved SALE"
        sent = gateway.received[0]
        assert sent.get("TRANS_TYPE") == "SALE"
        assert sent.get("PAYMENT_TYPE") == "CREDIT"
        assert sent.get("MODE") == "TEST"
        assert len(sent.get("TAMPER_PROOF_SEAL")) == 32

        refund = client.process_refund(get_transaction_id(sale), amount="5.00")

        assert is_approved(refund)
        assert gateway.received[1].get("MASTER_ID") == get_transaction_id(sale)

    @pytest.mark.integration
    def test_declined_sale_is_reported_not_raised(self, client):
        request = CreditCardRequest(
            amount="10.00", card_number="4000000000000002", cvv="123", expiration="1225", test_mode=True
        )
        result = client.process_credit_card_sale(request)

        assert get_transaction_status(result) == TransactionStatus.DECLINED
        assert result.get("RAW_RESULT").startswith("TRANS_ID=")

    @pytest.mark.integration
    def test_custom_seal_definition(self, client, gateway):
        request = CreditCardRequest(
            amount="1.00",
            card_number="4111111111111111",
            cvv="123",
            expiration="1225",
            options=SaleOptions(
                custom_id1="INV-7",
                extra={"TPS_DEF": create_seal_definition(["ACCOUNT_ID", "AMOUNT", "CUSTOM_ID1"])}
            )
        )
        result = client.process_credit_card_sale(request)

        assert is_approved(result)
        assert gateway.received[0].get("TPS_DEF") == "ACCOUNT_ID AMOUNT CUSTOM_ID1"

    @pytest.mark.integration
    def test_wrong_caller_seal_is_rejected_by_gateway(self, client):
        fields = FieldSet({"ACCOUNT_ID": "100200300400", "TRANS_TYPE": "SALE", "TAMPER_PROOF_SEAL": "f" * 32})

        result = client.submit(fields)

        assert is_error(result)
        assert result.get("MESSAGE") == "SECURITY ERROR"

    @pytest.mark.integration
    def test_unreachable_gateway(self, credentials, sale_request):
        def unreachable(request):
            raise httpx.ConnectError("Name or service not known", request=request)

        with httpx.Client(transport=httpx.MockTransport(unreachable)) as http_client:
            result = GatewayClient(credentials, http_client=http_client).process_credit_card_sale(sale_request)

        assert is_error(result)
        assert result.get("MESSAGE") == "Name or service not known"
        assert result.get("RAW_RESULT") == "STATUS=E&MESSAGE=Name or service not known"
