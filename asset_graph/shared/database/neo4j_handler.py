"""
Neo4j Connection Handler

Owns the single async Neo4j driver of the process.
Reads credentials from arguments or environment variables and hands out
one session per request through an async context manager.
"""

import os
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from dotenv import load_dotenv
from neo4j import AsyncDriver, AsyncGraphDatabase, AsyncSession

from asset_graph.shared.config import BaseAppSettings
from asset_graph.shared.exceptions import DatabaseConnectionError

load_dotenv()

logger = logging.getLogger("asset_graph.neo4j_handler")

ASSET_ID_CONSTRAINT = (
    "CREATE CONSTRAINT asset_id IF NOT EXISTS "
    "FOR (a:Asset) REQUIRE a.id IS UNIQUE"
)


class Neo4jHandler:
    """
    Manages one async Neo4j driver.

    Usage
    -----
    handler = Neo4jHandler()          # reads from .env
    await handler.connect()
    async with handler.session() as session:
        await session.execute_read(work)
    await handler.close()

    The handler can also be used as an async context-manager:

        async with Neo4jHandler() as handler:
            ...
    """

    def __init__(
        self,
        uri: str | None = None,
        username: str | None = None,
        password: str | None = None,
        database: str | None = None,
    ):
        self._uri = uri or os.getenv("NEO4J_URI")
        self._username = username or os.getenv("NEO4J_USERNAME")
        self._password = password or os.getenv("NEO4J_PASSWORD")
        self._database = database or os.getenv("NEO4J_DATABASE", "neo4j")
        self._driver: AsyncDriver | None = None

        if not self._uri:
            raise ValueError("NEO4J_URI is not set (env or argument)")
        if not self._username:
            raise ValueError("NEO4J_USERNAME is not set (env or argument)")
        if not self._password:
            raise ValueError("NEO4J_PASSWORD is not set (env or argument)")

    @classmethod
    def from_settings(cls, settings: BaseAppSettings) -> "Neo4jHandler":
        """Build a handler from application settings, empty values fall back to env."""
        return cls(
            uri=settings.neo4j_uri or None,
            username=settings.neo4j_username or None,
            password=settings.neo4j_password or None,
            database=settings.neo4j_database or None,
        )

    # ─── Lifecycle ──────────────────────────────────────────

    async def connect(self) -> "Neo4jHandler":
        """Create the async driver and verify connectivity.

        Returns:
            Self for method chaining.

        Raises:
            DatabaseConnectionError: If the connection cannot be verified.
        """
        if self._driver is not None:
            return self

        self._driver = AsyncGraphDatabase.driver(
            self._uri, auth=(self._username, self._password)
        )
        try:
            await self._driver.verify_connectivity()
            logger.info("Connected to Neo4j at %s (db=%s)", self._uri, self._database)
        except Exception as exc:
            logger.error("Failed to connect to Neo4j at %s", self._uri)
            await self._driver.close()
            self._driver = None
            raise DatabaseConnectionError(f"Cannot reach Neo4j at {self._uri}") from exc
        return self

    async def close(self) -> None:
        """Close the underlying driver."""
        if self._driver:
            await self._driver.close()
            self._driver = None
            logger.info("Neo4j connection closed")

    async def __aenter__(self) -> "Neo4jHandler":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    # ─── Properties ─────────────────────────────────────────

    @property
    def driver(self) -> AsyncDriver:
        """Return the raw async driver.

        Raises:
            RuntimeError: If handler is not connected (call connect() first).
        """
        if self._driver is None:
            raise RuntimeError("Neo4jHandler is not connected, call connect() first")
        return self._driver

    @property
    def database(self) -> str:
        """Return the configured database name."""
        return self._database

    @property
    def uri(self) -> str:
        """Return the configured Neo4j URI."""
        return self._uri

    # ─── Sessions ───────────────────────────────────────────

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open one session on the configured database.

        The session is closed when the block exits, whatever the outcome.
        """
        async with self.driver.session(database=self._database) as session:
            yield session

    async def ensure_constraints(self) -> None:
        """Create the Asset.id uniqueness constraint if it does not exist."""
        async with self.session() as session:
            result = await session.run(ASSET_ID_CONSTRAINT)
            await result.consume()
        logger.info("Asset.id uniqueness constraint ensured")

    async def verify(self) -> bool:
        """Quick health-check: returns True if the database is reachable."""
        if self._driver is None:
            return False
        try:
            await self._driver.verify_connectivity()
            return True
        except Exception as exc:
            logger.warning("Neo4j health check failed: %s", exc)
            return False
