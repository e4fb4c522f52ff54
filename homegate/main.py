import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, APIRouter, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from homegate.core.settings import settings
from homegate.core.exceptions import DashboardError, InvalidDateError, MalformedRecordError, PolicyParseError
from homegate.api_v1.endpoints import day as day_router
from homegate.api_v1.endpoints import dashboard as dashboard_router

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(levelname)s - [%(name)s] - %(message)s"
)
logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting up Home Gate API...")
    yield
    logger.info("Shutting down Home Gate API...")

app = FastAPI(
    title="Home Gate API",
    description="Daily activity timeline and usage quota for a monitored device.",
    version="0.1.0",
    openapi_url=f"{settings.API_V1_STR}/openapi.json",
    docs_url=f"{settings.API_V1_STR}/docs",
    redoc_url=f"{settings.API_V1_STR}/redoc",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error state ---
# Any core failure is reported as an explicit error, never a partial timeline.
ERROR_STATUS_CODES = {
    InvalidDateError: status.HTTP_400_BAD_REQUEST,
    MalformedRecordError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    PolicyParseError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

@app.exception_handler(DashboardError)
async def dashboard_error_handler(request: Request, exc: DashboardError):
    status_code = ERROR_STATUS_CODES.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    if status_code >= 500:
        logger.error(f"Dashboard failure on {request.url.path}: {exc}")
    else:
        logger.warning(f"Rejected request on {request.url.path}: {exc}")
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "error": exc.kind})

# --- API Router for v1 ---
api_v1_router = APIRouter(prefix=settings.API_V1_STR)

# Include the day router
api_v1_router.include_router(day_router.router, prefix="/day", tags=["Daily Data"])
# Include the dashboard router
api_v1_router.include_router(dashboard_router.router, prefix="/dashboard", tags=["Dashboard"])

# Include the v1 router in the main app
app.include_router(api_v1_router)

# Basic root endpoint
@app.get("/", tags=["Root"])
async def read_root():
    return {"message": f"Welcome to the Home Gate API. See {settings.API_V1_STR}/docs for documentation."}

if __name__ == "__main__":
    import uvicorn
    # This is for development purposes. For production, use a process manager like Gunicorn.
    logger.info("Starting Uvicorn server for development...")
    uvicorn.run(app, host="0.0.0.0", port=8000, log_level="info")
