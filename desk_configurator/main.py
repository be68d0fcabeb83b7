from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import configurator, pricing

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("desk_configurator")

app = FastAPI(
    title="Desk Configurator API",
    description="Dimension validation and standard pricing for the 3D desk configurator",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(pricing.router, prefix="/api")
app.include_router(configurator.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}


@app.on_event("startup")
def log_startup():
    logger.info("%s started (price cache ttl=%ss, max=%d)",
                settings.APP_NAME, settings.PRICE_CACHE_TTL_SECONDS, settings.PRICE_CACHE_MAX_SIZE)
