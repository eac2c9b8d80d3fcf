"""Tamper-proof seal creation and verification.

The gateway recomputes an MD5 digest over the secret key followed by the
values of an agreed, ordered list of fields and rejects requests whose
TAMPER_PROOF_SEAL does not match. The list is either named by the request
itself in TPS_DEF or is the default sequence below.
"""

import hashlib
import hmac
from typing import List, Optional, Sequence, Union

from ..types import FieldSet, GatewayField


DEFAULT_SEAL_FIELDS = (
    GatewayField.ACCOUNT_ID,
    GatewayField.TRANS_TYPE,
    GatewayField.AMOUNT,
    GatewayField.MASTER_ID,
    GatewayField.NAME1,
    GatewayField.PAYMENT_ACCOUNT,
)

SealDefinition = Union[str, Sequence[str]]


def create_seal_definition(field_names: Sequence[str]) -> str:
    """Creates a space-delimited definition suitable for a TPS_DEF field.

    Args:
        field_names: Field names to include, in digest order

    Returns:
        Names separated by single spaces, e.g. ``"ACCOUNT_ID AMOUNT"``
    """
    return "".join(f" {name}" for name in field_names).strip()


def resolve_seal_definition(
    fields: FieldSet,
    seal_definition: Optional[SealDefinition] = None
) -> List[str]:
    """Determines the ordered field names that make up the seal.

    An explicit ``seal_definition`` wins, then the TPS_DEF field of
    ``fields``, then ``DEFAULT_SEAL_FIELDS``.
    """
    if seal_definition is None:
        seal_definition = fields.get(GatewayField.SEAL_DEFINITION)
        if seal_definition is None:
            return list(DEFAULT_SEAL_FIELDS)
    if isinstance(seal_definition, str):
        return seal_definition.split(" ")
    return list(seal_definition)


def compute_seal(
    secret_key: Optional[str],
    fields: FieldSet,
    seal_definition: Optional[SealDefinition] = None
) -> str:
    """Computes the tamper-proof seal for a request.

    Missing fields contribute an empty string, so an absent field and an
    empty one produce the same seal. Characters outside ASCII are replaced
    with ``?`` before hashing.

    Args:
        secret_key: Merchant secret key; None is treated as empty
        fields: Request fields
        seal_definition: Optional field list (sequence or space-delimited
            string) overriding TPS_DEF and the default list

    Returns:
        32 lowercase hex characters
    """
    names = resolve_seal_definition(fields, seal_definition)
    buffer = (secret_key or "") + "".join(fields.get(name) or "" for name in names)
    return hashlib.md5(buffer.encode("ascii", errors="replace")).hexdigest()


def verify_seal(
    secret_key: Optional[str],
    fields: FieldSet,
    seal_definition: Optional[SealDefinition] = None
) -> bool:
    """Checks the TAMPER_PROOF_SEAL carried by ``fields``.

    Returns:
        False when the seal field is missing or does not match
    """
    seal = fields.get(GatewayField.SEAL)
    if not seal:
        return False
    expected = compute_seal(secret_key, fields, seal_definition)
    return hmac.compare_digest(
        expected.encode("ascii"),
        seal.lower().encode("ascii", errors="replace")
    )
