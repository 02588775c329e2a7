import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.config import get_settings
from src.core.logging_config import setup_logging
from src.routers import quiz as quiz_router
from services.voter_type_engine.models import RESULT_TYPES
from services.voter_type_engine.result_images import validate_image_mapping

settings = get_settings()

# Configure logging VERY early
setup_logging(settings.log_level, json_logs=settings.json_logs)
logger = logging.getLogger(__name__)

if not validate_image_mapping(RESULT_TYPES):
    logger.error("Some voter types have no result illustration; their cards will use the default image.")

app = FastAPI(title="Voter Type Quiz API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

# --- Include Routers ---
app.include_router(quiz_router.router, prefix="/api/v1", tags=["quiz"])


@app.get("/", tags=["Health Check"])
async def read_root():
    """
    Root endpoint for basic health check.
    """
    return {"status": "ok", "message": "Voter Type Quiz API is running."}
