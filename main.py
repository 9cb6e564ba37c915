# main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from engine.config import configure_logging, load_settings
from engine.routes.api_routes import router

settings = load_settings()
configure_logging(settings)
logger = logging.getLogger(__name__)

app = FastAPI(title="ArtAtlas Image Optimizer", version="1.0.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)
app.include_router(router)


@app.on_event("startup")
async def on_startup():
    """Application startup event: report the effective configuration."""
    logger.info(
        f"Application starting up (log level {settings.log_level}, "
        f"origins {settings.allowed_origins})..."
    )


@app.on_event("shutdown")
async def on_shutdown():
    logger.info("Application shutting down...")


@app.get("/", summary="Health Check")
async def health_check():
    """
    Simple health check endpoint to verify the API is running.
    """
    return {"status": "ok", "message": "ArtAtlas image optimizer is running."}
