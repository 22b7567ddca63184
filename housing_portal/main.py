"""
Main FastAPI application entry point.
Housing Portal - beneficiary construction progress tracking
"""
import logging

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from housing_portal.config import LOG_DATE_FORMAT, LOG_FORMAT, LOG_LEVEL
from housing_portal.database import init_database
from housing_portal.dependencies import get_services
from housing_portal.exceptions import PortalError, StoreUnavailable
from housing_portal.routes import house_routes, officer_routes, pending_routes, progress_routes
from housing_portal.services import PortalServices

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    # Reduce noise from libraries
    logging.getLogger('uvicorn.access').setLevel(logging.WARNING)


configure_logging()

# Create FastAPI app
app = FastAPI(
    title="Housing Portal",
    description="Beneficiary construction progress tracking with admin approval",
    version="1.0.0"
)


# Initialize database on startup
@app.on_event("startup")
async def startup_event():
    init_database()


# Include route modules
app.include_router(pending_routes.router, prefix="/api/pending-entries", tags=["Pending Entries"])
app.include_router(house_routes.router, prefix="/api/houses", tags=["Beneficiaries"])
app.include_router(officer_routes.router, prefix="/api/officers", tags=["Officers"])
app.include_router(progress_routes.router, prefix="/api/progress", tags=["Progress"])


@app.get("/health")
async def health(services: PortalServices = Depends(get_services)):
    """Liveness plus a read against the pending queue store."""
    try:
        services.pending.store.ids()
    except StoreUnavailable:
        return JSONResponse({"status": "degraded"})
    return JSONResponse({"status": "ok"})


# Error handlers
@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse({"error": exc.message}, status_code=exc.status_code)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("housing_portal.main:app", host="127.0.0.1", port=8000, reload=True)
