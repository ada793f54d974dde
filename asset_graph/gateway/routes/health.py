"""
Health route: GET /api/health.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from asset_graph.gateway.dependencies import get_neo4j_handler
from asset_graph.shared.database import Neo4jHandler

logger = logging.getLogger("asset_graph.gateway.health")

router = APIRouter()


class HealthResponse(BaseModel):
    """Response model for GET /api/health."""

    status: str = Field(..., description="healthy or unhealthy")
    database: str = Field(..., description="Configured Neo4j database name")


@router.get("/health", response_model=HealthResponse)
async def get_health(handler: Neo4jHandler = Depends(get_neo4j_handler)):
    """Report whether Neo4j is reachable; 503 when it is not."""
    if await handler.verify():
        return HealthResponse(status="healthy", database=handler.database)

    logger.error("Health check failed: Neo4j unreachable")
    return JSONResponse(
        status_code=503,
        content=HealthResponse(status="unhealthy", database=handler.database).model_dump(),
    )
