"""FastAPI application entry point for the Fitness Assessment API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from fitassess.config import get_settings
from fitassess.database import create_tables
from fitassess.errors import ServiceError
from fitassess.routers import athletes, dashboard, plans, results, sports

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup: Create database tables
    create_tables()
    yield
    # Shutdown: Cleanup if needed


app = FastAPI(
    title="Fitness Assessment API",
    description="Backend API for the fitness assessment app - athlete profiles, scored tests, leaderboards and adaptive training plans",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS - allow the app frontend and local development
cors_origins = [
    settings.FRONTEND_URL,
    "http://localhost:19006",
    "http://localhost:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Translate service errors into HTTP responses."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.reason}")
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.reason})


# Include routers
app.include_router(athletes.router, prefix="/api/athletes", tags=["Athletes"])
app.include_router(results.router, prefix="/api/tests", tags=["Test Results"])
app.include_router(plans.router, prefix="/api/plans", tags=["Training Plans"])
app.include_router(dashboard.router, prefix="/api/dashboard", tags=["Dashboard"])
app.include_router(sports.router, prefix="/api/sports", tags=["Sports"])


@app.get("/", tags=["Health"])
async def root():
    """Root endpoint - API information."""
    return {
        "name": "Fitness Assessment API",
        "version": "1.0.0",
        "status": "running",
    }


@app.get("/health", tags=["Health"])
@app.get("/api/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
