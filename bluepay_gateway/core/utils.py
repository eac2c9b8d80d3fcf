"""Accessors for decoded gateway responses."""

from typing import Optional

from ..types import FieldSet, GatewayField, TransactionStatus


def get_transaction_status(result: FieldSet) -> Optional[TransactionStatus]:
    """Extract the gateway STATUS from a decoded response.

    Returns None when the field is missing or holds an unknown value.
    """
    if not result:
        return None

    status_value = result.get(GatewayField.STATUS)
    if status_value:
        try:
            return TransactionStatus(status_value)
        except ValueError:
            return None
    return None


def is_approved(result: FieldSet) -> bool:
    return get_transaction_status(result) == TransactionStatus.APPROVED


def is_error(result: FieldSet) -> bool:
    """True for gateway errors and for failed exchanges reported as STATUS=E."""
    return get_transaction_status(result) == TransactionStatus.ERROR


def get_message(result: FieldSet) -> Optional[str]:
    return result.get(GatewayField.MESSAGE) if result else None


def get_transaction_id(result: FieldSet) -> Optional[str]:
    """TRANS_ID of the processed transaction, used as MASTER_ID later on."""
    return result.get(GatewayField.TRANS_ID) if result else None
