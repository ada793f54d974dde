"""Request dependencies shared by the gateway routes."""

from fastapi import Request

from asset_graph.assets import AssetService
from asset_graph.shared.database import Neo4jHandler


def get_asset_service(request: Request) -> AssetService:
    """Return the service built by the app lifespan."""
    return request.app.state.asset_service


def get_neo4j_handler(request: Request) -> Neo4jHandler:
    """Return the process-wide Neo4j handler."""
    return request.app.state.neo4j_handler
