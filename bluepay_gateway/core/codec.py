"""Form encoding for requests and lenient decoding of gateway responses."""

from typing import Optional
from urllib.parse import unquote_plus, urlencode

from ..types import FieldSet, GatewayField, map_error_to_message


FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def encode_form(fields: FieldSet) -> str:
    """Encodes fields as a form body; repeated names become repeated pairs."""
    return urlencode(fields.items())


def error_result(message: str) -> str:
    """Builds the response text reported for a failed exchange."""
    return f"{GatewayField.STATUS}=E&{GatewayField.MESSAGE}={message}"


def error_result_from_exception(error: BaseException) -> str:
    return error_result(map_error_to_message(error))


def decode_response(result: Optional[str]) -> FieldSet:
    """Decodes gateway response text into fields.

    The returned set starts with RAW_RESULT holding ``result`` unchanged.
    The text is URL-decoded as a whole, split on ``&`` and each segment on
    ``=``. Segments without ``=`` are dropped. Only the text between the
    first and second ``=`` is kept as the value, so a value that itself
    contains ``=`` comes back truncated.

    Args:
        result: Response body or synthetic error text

    Returns:
        FieldSet with RAW_RESULT followed by the decoded pairs
    """
    result = result or ""
    decoded = FieldSet()
    decoded.add(GatewayField.RAW_RESULT, result)

    for segment in unquote_plus(result).split("&"):
        parts = segment.split("=")
        if len(parts) > 1:
            decoded.add(parts[0], parts[1])

    return decoded
