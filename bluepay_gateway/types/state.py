"""Transaction state definitions and reserved gateway field names."""

from enum import Enum
from typing import Optional


class TransactionStatus(str, Enum):
    """Values of the gateway's STATUS response field"""
    DECLINED = "0"
    APPROVED = "1"
    ERROR = "E"


class TransactionType(str, Enum):
    """Values accepted in the TRANS_TYPE request field"""
    SALE = "SALE"
    AUTH = "AUTH"
    CAPTURE = "CAPTURE"
    REFUND = "REFUND"
    VOID = "VOID"


class PaymentType(str, Enum):
    CREDIT = "CREDIT"
    ACH = "ACH"


class TransactionMode(str, Enum):
    TEST = "TEST"
    LIVE = "LIVE"

    @classmethod
    def from_flag(cls, test_mode: Optional[bool]) -> "TransactionMode":
        return cls.TEST if test_mode else cls.LIVE


class GatewayField:
    """Field names with a fixed meaning on the wire"""
    ACCOUNT_ID = "ACCOUNT_ID"
    TRANS_TYPE = "TRANS_TYPE"
    PAYMENT_TYPE = "PAYMENT_TYPE"
    MODE = "MODE"
    AMOUNT = "AMOUNT"
    MASTER_ID = "MASTER_ID"
    NAME1 = "NAME1"
    PAYMENT_ACCOUNT = "PAYMENT_ACCOUNT"
    CARD_CVV2 = "CARD_CVV2"
    CARD_EXPIRE = "CARD_EXPIRE"

    SEAL = "TAMPER_PROOF_SEAL"           # Inserted by the client when absent
    SEAL_DEFINITION = "TPS_DEF"          # Space-delimited list of sealed fields
    RAW_RESULT = "RAW_RESULT"            # Response only, unparsed body
    STATUS = "STATUS"
    MESSAGE = "MESSAGE"
    TRANS_ID = "TRANS_ID"
