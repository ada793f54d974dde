"""
FastAPI Gateway: HTTP API layer.

External interface for the asset graph: asset creation and search,
link creation and deletion, and a health check.
"""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from asset_graph.assets import AssetService, QueryExecutor
from asset_graph.gateway.config import GatewaySettings
from asset_graph.gateway.routes import assets, health, links
from asset_graph.shared.database import Neo4jHandler
from asset_graph.shared.exceptions import InputValidationError
from asset_graph.shared.logging import generate_correlation_id, setup_logging

# Global settings
settings = GatewaySettings()

logger = setup_logging("gateway.app", level=settings.log_level)

# Status returned for every rejected request parameter
INPUT_ERROR_STATUS = 403


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifecycle manager for the FastAPI app.

    Connects the Neo4j handler and builds the asset service on startup,
    closes the driver on shutdown.
    """
    logger.info("Starting asset graph gateway")

    handler = Neo4jHandler.from_settings(settings)
    await handler.connect()
    if settings.ensure_constraints:
        await handler.ensure_constraints()

    app.state.neo4j_handler = handler
    app.state.asset_service = AssetService(QueryExecutor(handler))

    logger.info("Gateway initialized successfully")

    yield

    # Cleanup
    logger.info("Shutting down asset graph gateway")
    await handler.close()


# Create FastAPI app
app = FastAPI(
    title="Asset Graph API",
    description="Create, search and link assets stored in Neo4j",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def correlation_id_middleware(request: Request, call_next):
    """Tag each request with a correlation id and log its outcome."""
    correlation_id = request.headers.get("X-Correlation-ID") or generate_correlation_id()
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    response.headers["X-Correlation-ID"] = correlation_id
    logger.info(
        "[%s] %s %s -> %d (%.1f ms)",
        correlation_id,
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


@app.exception_handler(InputValidationError)
async def input_validation_error_handler(
    request: Request, exc: InputValidationError
) -> JSONResponse:
    """Report rejected request parameters; nothing was executed."""
    logger.info("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(
        status_code=INPUT_ERROR_STATUS,
        content={"error": exc.code, "field": exc.field, "detail": exc.message},
    )


# Register routers
app.include_router(assets.router, prefix="/api", tags=["Assets"])
app.include_router(links.router, prefix="/api", tags=["Links"])
app.include_router(health.router, prefix="/api", tags=["Health"])

# Root endpoint
@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with basic info."""
    return {
        "name": "Asset Graph API",
        "version": "0.1.0",
        "status": "operational",
        "endpoints": {
            "create_asset": "/api/asset/create",
            "find_assets": "/api/asset/find",
            "create_link": "/api/link/create",
            "delete_link": "/api/link/delete",
            "health": "/api/health",
        }
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "asset_graph.gateway.app:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level="info",
    )
