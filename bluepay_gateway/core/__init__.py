"""Core package exports for bluepay_gateway."""

from .seal import (
    DEFAULT_SEAL_FIELDS,
    create_seal_definition,
    resolve_seal_definition,
    compute_seal,
    verify_seal
)
from .codec import (
    FORM_CONTENT_TYPE,
    encode_form,
    decode_response,
    error_result,
    error_result_from_exception
)
from .builders import (
    SaleOptions,
    CreditCardRequest,
    format_amount,
    build_credit_card_transaction,
    build_credit_card_sale,
    build_credit_card_auth,
    build_follow_on_transaction
)
from .utils import (
    get_transaction_status,
    is_approved,
    is_error,
    get_message,
    get_transaction_id
)

__all__ = [
    # Seal
    "DEFAULT_SEAL_FIELDS",
    "create_seal_definition",
    "resolve_seal_definition",
    "compute_seal",
    "verify_seal",

    # Wire codec
    "FORM_CONTENT_TYPE",
    "encode_form",
    "decode_response",
    "error_result",
    "error_result_from_exception",

    # Request builders
    "SaleOptions",
    "CreditCardRequest",
    "format_amount",
    "build_credit_card_transaction",
    "build_credit_card_sale",
    "build_credit_card_auth",
    "build_follow_on_transaction",

    # Response accessors
    "get_transaction_status",
    "is_approved",
    "is_error",
    "get_message",
    "get_transaction_id"
]
