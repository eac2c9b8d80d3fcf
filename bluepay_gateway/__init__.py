"""bluepay_gateway - client for the BluePay 2.0 payment gateway."""

# Types
from .types import (
    FieldSet,

    # States and reserved fields
    TransactionStatus,
    TransactionType,
    PaymentType,
    TransactionMode,
    GatewayField,

    # Configuration
    DEFAULT_GATEWAY_URL,
    DEFAULT_TIMEOUT_SECONDS,
    GatewayCredentials,
    GatewayConfig,

    # Error Types
    BluePayError,
    ConfigurationError,
    TransportError
)

# Core Functions
from .core import (
    # Tamper-proof seal
    DEFAULT_SEAL_FIELDS,
    create_seal_definition,
    compute_seal,
    verify_seal,

    # Wire codec
    encode_form,
    decode_response,

    # Request builders
    SaleOptions,
    CreditCardRequest,
    build_credit_card_sale,
    build_credit_card_auth,
    build_follow_on_transaction,

    # Response accessors
    get_transaction_status,
    is_approved,
    is_error,
    get_message,
    get_transaction_id
)

# Clients
from .clients import (
    BaseGatewayClient,
    GatewayClient,
    AsyncGatewayClient
)

__version__ = "1.0.0"

__all__ = [
    "FieldSet",

    "TransactionStatus",
    "TransactionType",
    "PaymentType",
    "TransactionMode",
    "GatewayField",

    "DEFAULT_GATEWAY_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "GatewayCredentials",
    "GatewayConfig",

    "BluePayError",
    "ConfigurationError",
    "TransportError",

    "DEFAULT_SEAL_FIELDS",
    "create_seal_definition",
    "compute_seal",
    "verify_seal",

    "encode_form",
    "decode_response",

    "SaleOptions",
    "CreditCardRequest",
    "build_credit_card_sale",
    "build_credit_card_auth",
    "build_follow_on_transaction",

    "get_transaction_status",
    "is_approved",
    "is_error",
    "get_message",
    "get_transaction_id",

    "BaseGatewayClient",
    "GatewayClient",
    "AsyncGatewayClient"
]
