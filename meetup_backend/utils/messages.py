"""
Serializer error-message helpers.

The API reports exactly one human readable message per failing field, no
matter which built-in check tripped (missing, blank, too long, bad choice...).
"""

# Keys used by the DRF fields this project relies on.
FIELD_ERROR_KEYS = (
    'required',
    'null',
    'blank',
    'invalid',
    'invalid_choice',
    'max_length',
    'min_length',
    'max_value',
    'min_value',
    'max_digits',
    'max_decimal_places',
    'max_whole_digits',
    'max_string_length',
    'date',
    'datetime',
    'make_aware',
    'overflow',
)


def uniform_errors(message: str) -> dict:
    """
    Build an ``error_messages`` dict mapping every check to the same message.

    Args:
        message: Message shown for any failure of the field

    Returns:
        dict: Suitable for a serializer field's ``error_messages`` argument
    """
    return {key: message for key in FIELD_ERROR_KEYS}
