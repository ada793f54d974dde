"""
Query Executor

Runs one BuiltQuery inside one managed transaction and returns the first
column of every record. The session is opened with ``async with`` so it
is closed exactly once, also when the query raises. Driver errors are
not caught here.
"""

import logging
from decimal import Decimal
from typing import Any

from neo4j import AsyncManagedTransaction

from asset_graph.assets.models import AccessMode, BuiltQuery
from asset_graph.shared.database import Neo4jHandler

logger = logging.getLogger("asset_graph.executor")


def to_driver_value(value: Any) -> Any:
    """Convert a bound value to a type the Bolt protocol can carry."""
    # Bolt has no decimal type; parse_amount caps precision so this is exact
    if isinstance(value, Decimal):
        return float(value)
    return value


async def _collect_first_column(
    tx: AsyncManagedTransaction, text: str, params: dict[str, Any]
) -> list[Any]:
    result = await tx.run(text, params)
    return [record[0] async for record in result]


class QueryExecutor:
    """Executes built queries through an explicitly passed Neo4jHandler."""

    def __init__(self, handler: Neo4jHandler):
        self._handler = handler

    async def execute(self, query: BuiltQuery) -> list[Any]:
        """Run ``query`` in a read or write transaction and return its rows."""
        params = {key: to_driver_value(value) for key, value in query.params.items()}
        async with self._handler.session() as session:
            if query.access_mode is AccessMode.WRITE:
                rows = await session.execute_write(
                    _collect_first_column, query.text, params
                )
            else:
                rows = await session.execute_read(
                    _collect_first_column, query.text, params
                )
        logger.debug("%s query returned %d row(s)", query.access_mode.value, len(rows))
        return rows
