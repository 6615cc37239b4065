import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from soilsense.app.config import settings
from soilsense.app.errors import register_error_handlers
from soilsense.app.http import init_http, close_http
from soilsense.app.routers import advisory, records, soil, users, weather

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Single FastAPI instance
app = FastAPI(title="SoilSense", version="1.0.0")

# Single startup event
@app.on_event("startup")
async def startup_event():
    """Initialize the shared HTTP client on startup."""
    await init_http()
    if not settings.OPENWEATHER_API_KEY:
        logger.warning("OPENWEATHER_API_KEY not set; weather routes will fail")
    logger.info("HTTP client initialized")

# Single shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """Close HTTP client on shutdown."""
    await close_http()
    logger.info("HTTP client closed")

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

register_error_handlers(app)

app.include_router(weather.router)
app.include_router(soil.router)
app.include_router(advisory.router)
app.include_router(records.router)
app.include_router(users.router)

@app.get("/")
async def root():
    return {"ok": True, "service": "SoilSense", "version": app.version}

@app.get("/health")
async def health():
    return {
        "ok": True,
        "weather_provider": "OpenWeatherMap",
        "weather_key_configured": bool(settings.OPENWEATHER_API_KEY),
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=5000)
