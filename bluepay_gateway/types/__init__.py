"""Types package for bluepay_gateway - field collections, configuration, states and errors."""

from .fields import FieldSet

from .state import (
    TransactionStatus,
    TransactionType,
    PaymentType,
    TransactionMode,
    GatewayField
)

from .errors import (
    BluePayError,
    ConfigurationError,
    TransportError,
    map_error_to_message
)

from .config import (
    DEFAULT_GATEWAY_URL,
    DEFAULT_TIMEOUT_SECONDS,
    GatewayCredentials,
    GatewayConfig
)

__all__ = [
    "FieldSet",

    "TransactionStatus",
    "TransactionType",
    "PaymentType",
    "TransactionMode",
    "GatewayField",

    "BluePayError",
    "ConfigurationError",
    "TransportError",
    "map_error_to_message",

    "DEFAULT_GATEWAY_URL",
    "DEFAULT_TIMEOUT_SECONDS",
    "GatewayCredentials",
    "GatewayConfig"
]
