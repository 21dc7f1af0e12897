import logging
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings

# ─── Logging setup (file + console) ───
_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_LOG_DIR.mkdir(exist_ok=True)

_log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

logging.basicConfig(
    level=_log_level,
    format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[
        logging.StreamHandler(),
        RotatingFileHandler(
            _LOG_DIR / "airports.log",
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        ),
    ],
)

# Quiet noisy libraries
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

from app.routers import airports, flights

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup — fail fast on a broken ranking config
    from app.services.ranking_config import get_ranking_config
    get_ranking_config()

    if settings.airport_directory == "database":
        try:
            from app.seed import seed
            await seed()
        except Exception as e:
            logger.warning(f"Airport seed skipped: {e}")

    yield

    # Shutdown
    from app.services.cache_service import cache_service
    from app.services.duffel_client import duffel_client
    await duffel_client.close()
    await cache_service.close()
    logger.info("Clients closed")


app = FastAPI(
    title="Airport Search",
    description="Airport autocomplete, relevance ranking and flight search",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(airports.router, prefix="/api/airports", tags=["airports"])
app.include_router(flights.router, prefix="/api", tags=["flights"])


@app.get("/api/health")
async def health_check():
    return {"status": "ok", "service": "airport-search"}
