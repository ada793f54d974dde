"""
Link routes: POST /api/link/create and POST /api/link/delete.

201 with ``[[from, to, link], ...]`` when the link was written or removed,
200 with a message when the request was valid but matched nothing.
"""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from asset_graph.assets import AssetService
from asset_graph.assets.models import LinkOutcome
from asset_graph.gateway.dependencies import get_asset_service
from asset_graph.gateway.encoding import to_json

logger = logging.getLogger("asset_graph.gateway.links")

router = APIRouter()


def _outcome_response(outcome: LinkOutcome) -> JSONResponse:
    if outcome.applied:
        return JSONResponse(status_code=201, content=to_json(outcome.rows))
    logger.info("No-op link request: %s", outcome.message)
    return JSONResponse(status_code=200, content={"detail": outcome.message})


@router.post("/link/create")
async def create_link(
    idFrom: str | None = Query(None, description="Id of the asset the link starts at"),
    idTo: str | None = Query(None, description="Id of the asset the link points to"),
    linkType: str | None = Query(
        None, description="Link type: letters, digits and _, under 20 characters"
    ),
    service: AssetService = Depends(get_asset_service),
) -> JSONResponse:
    """Create a typed link between two existing assets."""
    return _outcome_response(await service.create_link(idFrom, idTo, linkType))


@router.post("/link/delete")
async def delete_link(
    idFrom: str | None = Query(None),
    idTo: str | None = Query(None),
    linkType: str | None = Query(None),
    service: AssetService = Depends(get_asset_service),
) -> JSONResponse:
    """Delete a typed link between two assets."""
    return _outcome_response(await service.delete_link(idFrom, idTo, linkType))
