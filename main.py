"""
Entry point: prepares the Neo4j database for the asset graph.

Connects with the configured credentials and creates the Asset.id
uniqueness constraint. Useful before the first gateway start, or when
the gateway runs with GATEWAY_ENSURE_CONSTRAINTS=false.

Usage:
    python main.py

To serve the HTTP API:
    python -m asset_graph.gateway.app
"""

import asyncio

from asset_graph.shared.config import BaseAppSettings
from asset_graph.shared.database import Neo4jHandler
from asset_graph.shared.logging import setup_logging


async def main() -> None:
    settings = BaseAppSettings()
    logger = setup_logging("bootstrap", level=settings.log_level)

    async with Neo4jHandler.from_settings(settings) as handler:
        await handler.ensure_constraints()
    logger.info("Database ready")


if __name__ == "__main__":
    asyncio.run(main())
