"""
FastAPI application entry point.

Registers all API routers and handles application startup configuration.
"""

from fastapi import FastAPI
import logging

from duty_board.settings import (
    MODE,
    HIGHLIGHT_COLOR,
    ROSTER_TTL_SECONDS,
    setup_logging
)

# Import all routers
from duty_board.api.routers.upload_router import router as upload_router
from duty_board.api.routers.roster_router import router as roster_router
from duty_board.api.routers.duty_code_router import router as duty_code_router

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)

if MODE.upper() not in ("DEBUG", "PRODUCTION"):
    raise ValueError("Invalid MODE specified in config.")

# Initialize FastAPI application
app = FastAPI(
    title="Duty Board API",
    description="Upload a duty roster workbook and read back who holds which duty on each day",
    version="0.1.0",
)

# Register routers
app.include_router(upload_router, tags=["Roster Upload"])
app.include_router(roster_router, tags=["Roster"])
app.include_router(duty_code_router, tags=["Duty Codes"])

logger.info("[Startup] All routers registered successfully")
logger.info(
    "[Startup] Application started in %s mode (highlight color %s, roster TTL %ss)",
    MODE.upper(), HIGHLIGHT_COLOR, ROSTER_TTL_SECONDS
)
