"""
Asset routes: POST /api/asset/create and POST /api/asset/find.

Parameters arrive as query-string values and are passed to the service
as raw strings; all parsing happens there.
"""

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from asset_graph.assets import AssetService
from asset_graph.gateway.dependencies import get_asset_service
from asset_graph.gateway.encoding import to_json

router = APIRouter()


@router.post("/asset/create", status_code=201)
async def create_asset(
    name: str | None = Query(None, description="Name of the new asset"),
    price: str | None = Query(None, description="Purchase price, e.g. 12.47"),
    date: str | None = Query(None, description="Purchase date, dd/MM/yyyy HH:mm"),
    service: AssetService = Depends(get_asset_service),
) -> JSONResponse:
    """Create a new asset and return it with status 201."""
    asset = await service.create_asset(name, price, date)
    return JSONResponse(status_code=201, content=to_json(asset))


@router.post("/asset/find")
async def find_assets(
    id: str | None = Query(None, description="Exact id match"),
    name: str | None = Query(None, description="Case-insensitive partial name match"),
    priceEqual: str | None = Query(None),
    priceGreaterThan: str | None = Query(None),
    priceLesserThan: str | None = Query(None),
    dateOn: str | None = Query(None, description="dd/MM/yyyy HH:mm"),
    dateAfter: str | None = Query(None, description="dd/MM/yyyy HH:mm"),
    dateBefore: str | None = Query(None, description="dd/MM/yyyy HH:mm"),
    whichLinks: str | None = Query(None, description="in, out or both"),
    service: AssetService = Depends(get_asset_service),
) -> JSONResponse:
    """Search assets; empty parameters are treated as not provided.

    Each row is ``[asset]``, or ``[asset, inbound?, outbound?]`` when
    ``whichLinks`` is set.
    """
    rows = await service.find_assets(
        id=id,
        name=name,
        price_equal=priceEqual,
        price_greater_than=priceGreaterThan,
        price_lesser_than=priceLesserThan,
        date_on=dateOn,
        date_after=dateAfter,
        date_before=dateBefore,
        which_links=whichLinks,
    )
    return JSONResponse(status_code=200, content=to_json(rows))
