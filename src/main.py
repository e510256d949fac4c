import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from src.config.logging_config import configure_logging
from src.config.settings import settings
from src.database import client as db_client
from src.features.rules.router import router as rules_router
from src.features.rules.service import RuleService
from src.features.validation.router import router as validation_router

logger = logging.getLogger(__name__)


def create_limiter(default_limit: str, enabled: bool = True) -> Limiter:
    """Build a per-client-address limiter applying ``default_limit`` to every route."""
    return Limiter(key_func=get_remote_address, default_limits=[default_limit], enabled=enabled)


# Initialize rate limiter
limiter = create_limiter(settings.rate_limit_default, enabled=settings.rate_limit_enabled)


async def rate_limit_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle rate limit exceeded errors."""
    return JSONResponse(
        status_code=429,
        content={"detail": "Rate limit exceeded"},
    )


async def seed_validation_rules() -> None:
    """Publish the built-in rules to the rules store."""
    async with db_client.get_session() as session:
        inserted = await RuleService.seed_default_rules(session)
    logger.info(f"Validation rules store ready ({inserted} rule(s) inserted)")


@asynccontextmanager
async def lifespan(_: FastAPI):
    """Handle startup and shutdown events."""
    # Startup
    configure_logging()
    await db_client.init_db()
    try:
        if settings.seed_validation_rules:
            await seed_validation_rules()
        yield
    finally:
        # Shutdown
        await db_client.close_db()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    debug=settings.debug,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# Add rate limiting middleware
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
app.add_middleware(SlowAPIMiddleware)

# Configure CORS middleware
if settings.cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )

# Router Registration
routers: list[APIRouter] = [
    validation_router,
    rules_router,
]

for router in routers:
    app.include_router(router, prefix=settings.api_prefix)


@app.get("/")
async def root():
    return {"message": settings.app_name, "status": "running"}


@app.get("/health")
async def health():
    return {"status": "healthy"}
