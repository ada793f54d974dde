"""
Result Shaper

Maps values returned by the driver (nodes, relationships, temporal and
numeric properties) to the plain models of ``asset_graph.assets.models``.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any

from asset_graph.assets.models import Asset, Link, LinkOutcome, LinkStatus

_ASSET_KEYS = ("id", "name", "price", "purchaseDate")


def decode_amount(value: Any) -> Decimal | None:
    """Stored prices come back as floats; their shortest repr is the decimal that was stored."""
    if value is None or isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # Whole amounts decode without a fraction, e.g. 100 rather than 100.0
        if value.is_integer() and abs(value) < 2 ** 53:
            return Decimal(int(value))
        return Decimal(repr(value))
    return Decimal(value)


def decode_timestamp(value: Any) -> datetime | None:
    """Convert a neo4j temporal value to a native datetime."""
    if value is None or isinstance(value, datetime):
        return value
    to_native = getattr(value, "to_native", None)
    if to_native is None:
        raise TypeError(f"Unexpected purchaseDate value: {value!r}")
    return to_native()


def _is_relationship(value: Any) -> bool:
    return hasattr(value, "type") and hasattr(value, "start_node")


def _is_node(value: Any) -> bool:
    return hasattr(value, "labels") and hasattr(value, "items")


class ResultShaper:
    """Turns raw first-column rows into Assets, Links and plain lists."""

    def shape_node(self, node: Any) -> Asset | dict[str, Any]:
        """Shape a node as an Asset; nodes without asset properties stay dicts."""
        props = dict(node.items())
        if not all(key in props for key in _ASSET_KEYS):
            return props
        return Asset(
            id=props["id"],
            name=props["name"],
            price=decode_amount(props["price"]),
            purchase_date=decode_timestamp(props["purchaseDate"]),
        )

    def shape_value(self, value: Any) -> Any:
        if value is None:
            return None
        if _is_relationship(value):
            start, end = value.start_node, value.end_node
            return Link(
                from_id=start.get("id") if start is not None else None,
                to_id=end.get("id") if end is not None else None,
                type=value.type,
            )
        if _is_node(value):
            return self.shape_node(value)
        if isinstance(value, (list, tuple)):
            return [self.shape_value(item) for item in value]
        return value

    def shape_asset(self, rows: list[Any]) -> Asset:
        """Shape the single row returned by an asset insert."""
        if not rows:
            raise RuntimeError("Asset insert returned no row")
        return self.shape_node(rows[0])

    def shape_rows(self, rows: list[Any]) -> list[list[Any]]:
        """Shape search rows; every row is a list whose length follows the link selector."""
        return [self.shape_value(row) for row in rows]

    def shape_link_row(self, row: list[Any]) -> list[Any]:
        """Shape ``[a, b, r]``, taking the link endpoints from ``a`` and ``b``."""
        start, end, rel = row
        from_asset = self.shape_node(start)
        to_asset = self.shape_node(end)
        link = Link(
            from_id=from_asset.id if isinstance(from_asset, Asset) else None,
            to_id=to_asset.id if isinstance(to_asset, Asset) else None,
            type=rel.type,
        )
        return [from_asset, to_asset, link]

    def shape_link_rows(self, rows: list[Any], noop_message: str) -> LinkOutcome:
        """An empty result is a valid no-op, reported apart from success."""
        if not rows:
            return LinkOutcome(status=LinkStatus.NOOP, message=noop_message)
        return LinkOutcome(
            status=LinkStatus.APPLIED,
            rows=[self.shape_link_row(row) for row in rows],
        )
