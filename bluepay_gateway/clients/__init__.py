"""Gateway clients for bluepay_gateway."""

from .base import BaseGatewayClient
from .gateway import GatewayClient
from .async_gateway import AsyncGatewayClient

__all__ = [
    "BaseGatewayClient",
    "GatewayClient",
    "AsyncGatewayClient"
]
