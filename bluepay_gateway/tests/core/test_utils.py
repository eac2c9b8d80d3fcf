"""Unit tests for bluepay_gateway.core.utils module."""

from bluepay_gateway.core.codec import decode_response
from bluepay_gateway.core.utils import (
    get_message,
    get_transaction_id,
    get_transaction_status,
    is_approved,
    is_error
)
from bluepay_gateway.types import FieldSet, TransactionStatus


class TestResponseAccessors:
    """Test reading decoded responses."""

    def test_approved(self):
        result = decode_response("TRANS_ID=100123456789&STATUS=1&MESSAGE=Approved%20Sale")

        assert get_transaction_status(result) == TransactionStatus.APPROVED
        assert is_approved(result) is True
        assert is_error(result) is False
        assert get_message(result) == "Approved Sale"
        assert get_transaction_id(result) == "100123456789"

    def test_declined(self):
        result = decode_response("STATUS=0&MESSAGE=DECLINED")

        assert get_transaction_status(result) == TransactionStatus.DECLINED
        assert is_approved(result) is False
        assert is_error(result) is False

    def test_error(self):
        result = decode_response("STATUS=E&MESSAGE=timed out")

        assert is_error(result) is True
        assert get_message(result) == "timed out"

    def test_status_none_cases(self):
        assert get_transaction_status(None) is None
        assert get_transaction_status(FieldSet()) is None
        assert get_transaction_status(decode_response("MESSAGE=no status")) is None

    def test_unknown_status_value(self):
        assert get_transaction_status(decode_response("STATUS=A&MESSAGE=Success")) is None

    def test_missing_fields(self):
        result = decode_response("")

        assert get_message(result) is None
        assert get_transaction_id(result) is None
