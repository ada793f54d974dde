"""
Predicate Catalog

The one place that maps a search field to its Cypher comparison and to the
kind of value it takes. A search only ever emits fragments from this table,
and every fragment binds its value through a ``$`` placeholder named after
the field. Adding a search field means one SearchField member and one row.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Mapping

from asset_graph.assets.parsers import parse_amount, parse_timestamp


class SearchField(str, Enum):
    """Optional search parameters, valued by their request names."""

    ID = "id"
    NAME = "name"
    PRICE_EQUAL = "priceEqual"
    PRICE_GREATER_THAN = "priceGreaterThan"
    PRICE_LESSER_THAN = "priceLesserThan"
    DATE_ON = "dateOn"
    DATE_AFTER = "dateAfter"
    DATE_BEFORE = "dateBefore"

    @property
    def param_name(self) -> str:
        return self.value


class ValueKind(Enum):
    STRING = "string"
    AMOUNT = "amount"
    TIMESTAMP = "timestamp"


@dataclass(frozen=True)
class Predicate:
    template: str
    kind: ValueKind


PREDICATE_CATALOG: Mapping[SearchField, Predicate] = MappingProxyType({
    SearchField.ID: Predicate("n.id = $id", ValueKind.STRING),
    SearchField.NAME: Predicate(
        "toLower(n.name) CONTAINS toLower($name)", ValueKind.STRING
    ),
    SearchField.PRICE_EQUAL: Predicate("n.price = $priceEqual", ValueKind.AMOUNT),
    SearchField.PRICE_GREATER_THAN: Predicate(
        "n.price > $priceGreaterThan", ValueKind.AMOUNT
    ),
    SearchField.PRICE_LESSER_THAN: Predicate(
        "n.price < $priceLesserThan", ValueKind.AMOUNT
    ),
    SearchField.DATE_ON: Predicate("n.purchaseDate = $dateOn", ValueKind.TIMESTAMP),
    SearchField.DATE_AFTER: Predicate(
        "n.purchaseDate > $dateAfter", ValueKind.TIMESTAMP
    ),
    SearchField.DATE_BEFORE: Predicate(
        "n.purchaseDate < $dateBefore", ValueKind.TIMESTAMP
    ),
})


def _keep_string(text: str, field_name: str) -> str:
    return text


VALUE_PARSERS: Mapping[ValueKind, Callable[[str, str], Any]] = MappingProxyType({
    ValueKind.STRING: _keep_string,
    ValueKind.AMOUNT: parse_amount,
    ValueKind.TIMESTAMP: parse_timestamp,
})


def parse_field_value(search_field: SearchField, text: str) -> Any:
    """Parse ``text`` with the parser the catalog assigns to ``search_field``."""
    kind = PREDICATE_CATALOG[search_field].kind
    return VALUE_PARSERS[kind](text, search_field.value)
