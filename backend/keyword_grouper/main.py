import logging

from dotenv import load_dotenv

from keyword_grouper.core.config import Settings, get_settings

# Load .env BEFORE settings are read
load_dotenv(Settings.model_config["env_file"])

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from keyword_grouper.core.async_helpers import shutdown_executor
from keyword_grouper.routes.group import router as group_router

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# Rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.rate_limit_per_minute}/minute"],
    enabled=settings.rate_limit_enabled,
)

app = FastAPI(
    title="Keyword Grouper - Backend",
    version=settings.app_version,
    description="Groups near-duplicate keywords by textual similarity",
    debug=settings.debug,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# CORS middleware — restrict to known frontend origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(group_router, prefix="/api")


@app.on_event("shutdown")
async def shutdown_event():
    shutdown_executor()


@app.get("/api/health")
async def health():
    """Health check with the slider bounds the frontend should use."""
    return {
        "status": "ok",
        "version": settings.app_version,
        "default_threshold": settings.default_threshold,
        "threshold_range": [settings.threshold_min, settings.threshold_max],
        "grouping_mode": settings.grouping_mode,
    }
