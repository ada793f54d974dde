"""
Value parsers for validated request strings.

Amounts become ``Decimal`` and timestamps become naive ``datetime``.
Both parsers are strict: anything that does not match the documented
format is a BadFormatError, nothing is reinterpreted.
"""

import math
import re
import sys
from datetime import datetime
from decimal import Decimal, InvalidOperation

from asset_graph.shared.exceptions import BadFormatError

_AMOUNT_RE = re.compile(r"-?\d+(?:\.\d+)?", re.ASCII)

# Stored prices are 64-bit floats, which hold 15 significant digits exactly.
MAX_AMOUNT_DIGITS = 15

_TIMESTAMP_RE = re.compile(r"\d{2}/\d{2}/\d{4}(?: \d{2}:\d{2})?", re.ASCII)
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M"
DATE_FORMAT = "%d/%m/%Y"


def parse_amount(text: str | None, field_name: str = "price") -> Decimal:
    """Parse a plain decimal literal such as ``12.47``.

    Raises:
        BadFormatError: On empty text, exponents, separators, whitespace,
            more significant digits than can be stored exactly, or a
            magnitude outside the range of a normal 64-bit float.
    """
    if text is None or _AMOUNT_RE.fullmatch(text) is None:
        raise BadFormatError(
            "The price has to be provided in a number form, e.g. 12.47.",
            field=field_name,
        )
    try:
        amount = Decimal(text)
    except InvalidOperation as exc:
        raise BadFormatError(
            "The price has to be provided in a number form, e.g. 12.47.",
            field=field_name,
        ) from exc

    digits = amount.normalize().as_tuple().digits
    if len(digits) > MAX_AMOUNT_DIGITS:
        raise BadFormatError(
            f"The price cannot have more than {MAX_AMOUNT_DIGITS} significant digits.",
            field=field_name,
        )

    # Few digits are not enough: the magnitude must also fit a normal float
    stored = float(amount)
    if (
        not math.isfinite(stored)
        or 0 < abs(stored) < sys.float_info.min
        or Decimal(repr(stored)) != amount
    ):
        raise BadFormatError(
            "The price is too large or too small to be stored exactly.",
            field=field_name,
        )
    return amount


def parse_timestamp(text: str | None, field_name: str = "date") -> datetime:
    """Parse ``dd/MM/yyyy`` or ``dd/MM/yyyy HH:mm`` into a naive datetime.

    A date without a time means midnight.
    """
    if text is None or _TIMESTAMP_RE.fullmatch(text) is None:
        raise BadFormatError(
            "The date has to follow the format of dd/MM/yyyy HH:mm.",
            field=field_name,
        )
    fmt = TIMESTAMP_FORMAT if " " in text else DATE_FORMAT
    try:
        return datetime.strptime(text, fmt)
    except ValueError as exc:
        # Shape matched but the calendar did not, e.g. 31/02/2023 or 25:00
        raise BadFormatError(
            f"'{text}' is not a valid calendar date and time.",
            field=field_name,
        ) from exc
