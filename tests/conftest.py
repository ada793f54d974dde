"""
Shared fixtures: an in-memory stand-in for the Neo4j executor.

FakeGraphExecutor interprets the few query shapes AssetQueryBuilder emits,
stores nodes with driver-converted values (prices as floats) and returns
rows the way QueryExecutor does (first column of each record).
"""

import itertools
import re
from typing import Any, Callable

import pytest

from asset_graph.assets.executor import to_driver_value
from asset_graph.assets.models import BuiltQuery
from asset_graph.assets.service import AssetService


class FakeNode:
    """Mimics neo4j.graph.Node for the shaper (labels, items, get)."""

    def __init__(self, props: dict[str, Any]):
        self._props = dict(props)
        self.labels = frozenset({"Asset"})

    def items(self):
        return self._props.items()

    def get(self, key: str, default: Any = None) -> Any:
        return self._props.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self._props[key]


class FakeRelationship:
    """Mimics neo4j.graph.Relationship (type, start_node, end_node)."""

    def __init__(self, start: FakeNode, end: FakeNode, rel_type: str):
        self.start_node = start
        self.end_node = end
        self.type = rel_type

    def items(self):
        return {}.items()


_REL_TYPE_RE = re.compile(r"\[r:`(\w+)`\]")

_PREDICATES: dict[str, Callable[[FakeNode, Any], bool]] = {
    "id": lambda node, v: node["id"] == v,
    "name": lambda node, v: v.lower() in node["name"].lower(),
    "priceEqual": lambda node, v: node["price"] == v,
    "priceGreaterThan": lambda node, v: node["price"] > v,
    "priceLesserThan": lambda node, v: node["price"] < v,
    "dateOn": lambda node, v: node["purchaseDate"] == v,
    "dateAfter": lambda node, v: node["purchaseDate"] > v,
    "dateBefore": lambda node, v: node["purchaseDate"] < v,
}


class FakeGraphExecutor:
    """Drop-in for QueryExecutor backed by dicts."""

    def __init__(self):
        self.nodes: dict[str, FakeNode] = {}
        self.relationships: list[FakeRelationship] = []
        self.executed: list[BuiltQuery] = []

    async def execute(self, query: BuiltQuery) -> list[Any]:
        self.executed.append(query)
        params = {key: to_driver_value(value) for key, value in query.params.items()}
        text = query.text

        if text.startswith("CREATE (n:Asset"):
            node = FakeNode(params)
            self.nodes[params["id"]] = node
            return [node]
        if " MERGE " in text:
            return self._merge_link(text, params)
        if " DELETE r " in text:
            return self._delete_link(text, params)
        if text.startswith("MATCH (n:Asset) WHERE"):
            return self._search(text, params)
        raise AssertionError(f"Unexpected query: {text}")

    def _find_relationship(self, id_from: str, id_to: str, rel_type: str):
        for rel in self.relationships:
            if (
                rel.start_node["id"] == id_from
                and rel.end_node["id"] == id_to
                and rel.type == rel_type
            ):
                return rel
        return None

    def _merge_link(self, text: str, params: dict[str, Any]) -> list[Any]:
        rel_type = _REL_TYPE_RE.search(text).group(1)
        start = self.nodes.get(params["idFrom"])
        end = self.nodes.get(params["idTo"])
        if start is None or end is None:
            return []
        rel = self._find_relationship(params["idFrom"], params["idTo"], rel_type)
        if rel is None:
            rel = FakeRelationship(start, end, rel_type)
            self.relationships.append(rel)
        return [[start, end, rel]]

    def _delete_link(self, text: str, params: dict[str, Any]) -> list[Any]:
        rel_type = _REL_TYPE_RE.search(text).group(1)
        rel = self._find_relationship(params["idFrom"], params["idTo"], rel_type)
        if rel is None:
            return []
        self.relationships.remove(rel)
        return [[rel.start_node, rel.end_node, rel]]

    def _search(self, text: str, params: dict[str, Any]) -> list[Any]:
        rows: list[Any] = []
        for node in self.nodes.values():
            if not all(_PREDICATES[key](node, value) for key, value in params.items()):
                continue
            columns: list[list[Any]] = [[node]]
            if "OPTIONAL MATCH (n)<--(inLinks)" in text:
                inbound = [r.start_node for r in self.relationships if r.end_node is node]
                columns.append(inbound or [None])
            if "OPTIONAL MATCH (n)-->(outLinks)" in text:
                outbound = [r.end_node for r in self.relationships if r.start_node is node]
                columns.append(outbound or [None])
            rows.extend(list(combo) for combo in itertools.product(*columns))
        return rows


@pytest.fixture
def fake_graph() -> FakeGraphExecutor:
    return FakeGraphExecutor()


@pytest.fixture
def service(fake_graph) -> AssetService:
    return AssetService(fake_graph)


@pytest.fixture
def make_node():
    return FakeNode


@pytest.fixture
def make_relationship():
    return FakeRelationship
