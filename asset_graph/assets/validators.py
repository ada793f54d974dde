"""
Input Validators

Reject malformed request values before they reach query text.

Required fields and optional search filters are checked by two separate
entry points: an empty required field is an error, an empty search
filter simply means "not supplied".
"""

import re

from asset_graph.shared.exceptions import (
    IllegalCharactersError,
    MissingFieldError,
    TooLongError,
)

# Relationship-type names are interpolated verbatim into Cypher.
# Keep this pattern and the limit below as strict as they are.
TOKEN_PATTERN = re.compile(r"[A-Za-z0-9_]+")
TOKEN_MAX_LENGTH = 20


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def require_non_empty(value: str | None, field_name: str) -> str:
    """Return ``value`` unchanged, or raise MissingFieldError if it is absent or blank."""
    if _is_blank(value):
        raise MissingFieldError("This parameter cannot be empty.", field=field_name)
    return value


def optional_value(value: str | None) -> str | None:
    """Return ``value`` when supplied, ``None`` when absent or blank."""
    if _is_blank(value):
        return None
    return value


def require_token(
    value: str | None, field_name: str, max_length: int = TOKEN_MAX_LENGTH
) -> str:
    """Validate a relationship-type token.

    Args:
        value: Raw token from the request.
        field_name: Parameter name reported in the error.
        max_length: Exclusive upper bound on the token length.

    Returns:
        The token, unmodified.

    Raises:
        MissingFieldError: If the token is absent, empty or whitespace only.
        TooLongError: If ``len(value) >= max_length``.
        IllegalCharactersError: If any character is outside ``[A-Za-z0-9_]``.
    """
    if _is_blank(value):
        raise MissingFieldError("This parameter cannot be empty.", field=field_name)
    if len(value) >= max_length:
        raise TooLongError(
            f"The value must be shorter than {max_length} characters.",
            field=field_name,
        )
    if TOKEN_PATTERN.fullmatch(value) is None:
        raise IllegalCharactersError(
            "The value contains illegal characters "
            "(only letters, digits and _ are allowed).",
            field=field_name,
        )
    return value
