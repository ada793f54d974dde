"""
Asset Graph Models

Data classes for stored entities (Asset, Link), the per-request search
criterion, built queries and link operation outcomes.
"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from asset_graph.assets.catalog import SearchField
from asset_graph.shared.exceptions import BadFormatError


class AccessMode(str, Enum):
    """Transaction kind a query must run in."""

    READ = "read"
    WRITE = "write"


class LinkSelector(str, Enum):
    """Which neighbours a search returns next to each matched asset."""

    NONE = "none"
    IN = "in"
    OUT = "out"
    BOTH = "both"

    @classmethod
    def parse(cls, raw: str | None) -> "LinkSelector":
        """Parse the ``whichLinks`` request value; absent or empty means NONE."""
        if raw is None or not raw.strip():
            return cls.NONE
        try:
            return cls(raw.strip().lower())
        except ValueError as exc:
            raise BadFormatError(
                "whichLinks must be one of: in, out, both.", field="whichLinks"
            ) from exc

    @property
    def includes_inbound(self) -> bool:
        return self in (LinkSelector.IN, LinkSelector.BOTH)

    @property
    def includes_outbound(self) -> bool:
        return self in (LinkSelector.OUT, LinkSelector.BOTH)


class LinkStatus(str, Enum):
    APPLIED = "applied"
    NOOP = "noop"


@dataclass(frozen=True)
class Asset:
    """A stored item: name, purchase price and purchase date."""

    id: str
    name: str
    price: Decimal
    purchase_date: datetime

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "purchaseDate": self.purchase_date,
        }


@dataclass(frozen=True)
class Link:
    """A directed, typed relationship between two assets."""

    from_id: str | None
    to_id: str | None
    type: str

    def to_payload(self) -> dict[str, Any]:
        return {"from": self.from_id, "to": self.to_id, "type": self.type}


@dataclass(frozen=True)
class SearchCriterion:
    """One constraint of a search: catalog field, its predicate and the parsed value."""

    field: SearchField
    template: str
    value: Any


@dataclass(frozen=True)
class BuiltQuery:
    """Cypher text plus its bound parameters and required transaction kind."""

    text: str
    params: dict[str, Any] = field(default_factory=dict)
    access_mode: AccessMode = AccessMode.READ


@dataclass
class LinkOutcome:
    """Result of a link create/delete: the matched rows, or a no-op message."""

    status: LinkStatus
    rows: list[list[Any]] = field(default_factory=list)
    message: str | None = None

    @property
    def applied(self) -> bool:
        return self.status is LinkStatus.APPLIED
