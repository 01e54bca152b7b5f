"""
API-wide exception handler.

Reshapes DRF's own exceptions into the error envelope every endpoint uses:

    {"message": str, "statusCode": int, "errors": {field: message}}

Anything DRF does not recognise is left alone so Django reports it as a 500.
"""

from rest_framework import exceptions
from rest_framework.views import exception_handler


def _first_message(value):
    """Collapse DRF's nested error lists to a single message per field."""
    if isinstance(value, dict):
        return flatten_errors(value)
    if isinstance(value, (list, tuple)):
        return _first_message(value[0]) if value else ""
    return str(value)


def flatten_errors(detail) -> dict:
    """
    Turn serializer errors into a flat ``field -> message`` map.

    Args:
        detail: ``ValidationError.detail`` (dict or list)

    Returns:
        dict: One message per failing field
    """
    if isinstance(detail, dict):
        return {field: _first_message(messages) for field, messages in detail.items()}
    return {"non_field_errors": _first_message(detail)}


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.ValidationError):
        response.data = {
            "message": "Validation error",
            "statusCode": response.status_code,
            "errors": flatten_errors(exc.detail),
        }
    else:
        detail = getattr(exc, "detail", None)
        response.data = {
            "message": str(detail) if detail is not None else str(exc),
            "statusCode": response.status_code,
        }
    return response
