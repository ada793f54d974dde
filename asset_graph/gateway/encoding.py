"""JSON rendering of service results (Assets, Links, outcomes)."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from fastapi.encoders import jsonable_encoder


def _to_payload(value: Any) -> Any:
    if hasattr(value, "to_payload"):
        return _to_payload(value.to_payload())
    if isinstance(value, dict):
        return {key: _to_payload(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_payload(item) for item in value]
    return value


def plain_decimal(value: Decimal) -> str:
    """Exact decimal text in positional notation, never ``1E+16``."""
    return format(value, "f")


def to_json(value: Any) -> Any:
    """Render models with their wire names; decimals as exact strings."""
    return jsonable_encoder(
        _to_payload(value),
        custom_encoder={Decimal: plain_decimal, datetime: datetime.isoformat},
    )
