"""Request builders for common transaction shapes.

Builders only assemble fields. Nothing is validated here: amounts, card
numbers and dates are sent as given and the gateway decides whether they are
acceptable.
"""

from decimal import Decimal
from typing import Dict, Optional, Union

from pydantic import BaseModel, Field

from ..types import (
    FieldSet,
    GatewayField,
    PaymentType,
    TransactionMode,
    TransactionType
)


Amount = Union[str, int, float, Decimal]


class SaleOptions(BaseModel):
    """Optional customer, billing and reference fields.

    Only fields that are set are added to the request. ``extra`` carries any
    other gateway field verbatim, keyed by its wire name.
    """
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    company_name: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    memo: Optional[str] = Field(default=None, description="Statement memo, 128 characters max")
    custom_id1: Optional[str] = Field(default=None, description="Internal reference, 16 characters max")
    custom_id2: Optional[str] = Field(default=None, description="Internal reference, 64 characters max")
    tax_amount: Optional[Amount] = None
    misc_amount: Optional[Amount] = None
    extra: Dict[str, str] = Field(default_factory=dict)


# SaleOptions attribute -> gateway field name
OPTION_FIELDS = {
    "company_name": "COMPANY_NAME",
    "first_name": "NAME1",
    "last_name": "NAME2",
    "address_line1": "ADDR1",
    "address_line2": "ADDR2",
    "city": "CITY",
    "state": "STATE",
    "zip_code": "ZIP",
    "country": "COUNTRY",
    "email": "EMAIL",
    "phone": "PHONE",
    "memo": "MEMO",
    "custom_id1": "CUSTOM_ID1",
    "custom_id2": "CUSTOM_ID2",
    "tax_amount": "AMOUNT_TAX",
    "misc_amount": "AMOUNT_MISC",
}

_AMOUNT_OPTIONS = ("tax_amount", "misc_amount")


class CreditCardRequest(BaseModel):
    """Card details and options for a sale or authorization."""
    amount: Amount
    card_number: str
    cvv: str = ""
    expiration: str = Field(description="Card expiration as MMYY")
    test_mode: Optional[bool] = Field(default=None, description="None defers to the client default")
    options: SaleOptions = Field(default_factory=SaleOptions)


def format_amount(amount: Amount) -> str:
    """Formats numeric amounts with two decimals; strings pass through."""
    if isinstance(amount, str):
        return amount
    return f"{Decimal(str(amount)):.2f}"


def add_options(fields: FieldSet, options: Optional[SaleOptions]) -> FieldSet:
    if options is None:
        return fields
    for attribute, name in OPTION_FIELDS.items():
        value = getattr(options, attribute)
        if value is None:
            continue
        if attribute in _AMOUNT_OPTIONS:
            value = format_amount(value)
        fields.add(name, value)
    for name, value in options.extra.items():
        fields.add(name, value)
    return fields


def build_credit_card_transaction(
    account_id: str,
    request: CreditCardRequest,
    trans_type: TransactionType = TransactionType.SALE
) -> FieldSet:
    """Builds the fields of a card-present style transaction.

    Args:
        account_id: Merchant account identifier
        request: Card details and options
        trans_type: SALE or AUTH

    Returns:
        Unsealed FieldSet ready for ``submit``
    """
    fields = FieldSet()
    fields.add(GatewayField.ACCOUNT_ID, account_id)
    fields.add(GatewayField.TRANS_TYPE, trans_type)
    fields.add(GatewayField.PAYMENT_TYPE, PaymentType.CREDIT)
    fields.add(GatewayField.MODE, TransactionMode.from_flag(request.test_mode))

    # credit card required fields
    fields.add(GatewayField.AMOUNT, format_amount(request.amount))
    fields.add(GatewayField.PAYMENT_ACCOUNT, request.card_number)
    fields.add(GatewayField.CARD_CVV2, request.cvv)
    fields.add(GatewayField.CARD_EXPIRE, request.expiration)

    return add_options(fields, request.options)


def build_credit_card_sale(account_id: str, request: CreditCardRequest) -> FieldSet:
    return build_credit_card_transaction(account_id, request, TransactionType.SALE)


def build_credit_card_auth(account_id: str, request: CreditCardRequest) -> FieldSet:
    return build_credit_card_transaction(account_id, request, TransactionType.AUTH)


def build_follow_on_transaction(
    account_id: str,
    trans_type: TransactionType,
    master_id: str,
    amount: Optional[Amount] = None,
    test_mode: bool = False,
    options: Optional[SaleOptions] = None
) -> FieldSet:
    """Builds a transaction that refers to an earlier one.

    Used for CAPTURE of an authorization, REFUND and VOID. The earlier
    transaction's TRANS_ID goes in MASTER_ID; the gateway reuses its card
    details.

    Args:
        account_id: Merchant account identifier
        trans_type: CAPTURE, REFUND or VOID
        master_id: TRANS_ID of the original transaction
        amount: Optional amount; omitted means the full original amount
        test_mode: Send with MODE=TEST
        options: Optional additional fields

    Returns:
        Unsealed FieldSet ready for ``submit``
    """
    fields = FieldSet()
    fields.add(GatewayField.ACCOUNT_ID, account_id)
    fields.add(GatewayField.TRANS_TYPE, trans_type)
    fields.add(GatewayField.MODE, TransactionMode.from_flag(test_mode))
    fields.add(GatewayField.MASTER_ID, master_id)
    if amount is not None:
        fields.add(GatewayField.AMOUNT, format_amount(amount))
    return add_options(fields, options)
