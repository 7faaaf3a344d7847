"""FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from sqlalchemy.exc import SQLAlchemyError

from jobboard.api.deps import clear_contexts
from jobboard.api.limiter import limiter
from jobboard.config import settings
from jobboard.db.base import init_db
from jobboard.errors import JobBoardError

logger = logging.getLogger(__name__)

STORE_ERROR_MESSAGE = "The job board is unavailable right now. Try again."

ALLOWED_ORIGINS = [origin.strip() for origin in settings.cors_origins.split(",") if origin.strip()]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and initialize the database on startup."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        init_db()
    except ValueError:
        logger.warning("DATABASE_URL not set, skipping database init")
    yield
    clear_contexts()


app = FastAPI(
    title="Industry Jobs API",
    description="Job board for skilled industry work: seekers, employers and applications",
    version="0.1.0",
    lifespan=lifespan,
)

app.state.limiter = limiter


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Return 429 with a clear message when rate limit is exceeded."""
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded: {exc.detail}"},
    )


@app.exception_handler(JobBoardError)
async def job_board_error_handler(request: Request, exc: JobBoardError):
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    """Report database failures as a retryable 503."""
    logger.error(f"Store failure on {request.method} {request.url.path}", exc_info=exc)
    return JSONResponse(status_code=503, content={"detail": STORE_ERROR_MESSAGE})


app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


# Import and include routers
from jobboard.api.routes import (  # noqa: E402
    applications,
    auth,
    dashboard,
    jobs,
    navigation,
    notifications,
    profile,
)

app.include_router(auth.router, prefix="/auth", tags=["Auth"])
app.include_router(profile.router, prefix="/profile", tags=["Profile"])
app.include_router(profile.skills_router, prefix="/skills", tags=["Profile"])
app.include_router(jobs.router, prefix="/jobs", tags=["Jobs"])
app.include_router(applications.router, prefix="/applications", tags=["Applications"])
app.include_router(applications.employer_router, prefix="/employer", tags=["Employer"])
app.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
app.include_router(notifications.router, prefix="/notifications", tags=["Notifications"])
app.include_router(navigation.router, prefix="/navigation", tags=["Navigation"])


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
