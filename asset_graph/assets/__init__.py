"""Asset graph core: validation, query building, execution and result shaping."""

from asset_graph.assets.query_builder import AssetQueryBuilder
from asset_graph.assets.executor import QueryExecutor
from asset_graph.assets.service import AssetService

__all__ = [
    "AssetQueryBuilder",
    "QueryExecutor",
    "AssetService",
]
