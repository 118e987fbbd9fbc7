from fastapi import FastAPI
from dotenv import load_dotenv
import os
import sys
import logging
from routers import summary

load_dotenv()

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

# Validate required environment variables
REQUIRED_ENV_VARS = ["BACKEND_API_URL", "OPENAI_API_KEY"]

def validate_environment():
    """Validate that all required environment variables are set."""
    missing = [var for var in REQUIRED_ENV_VARS if not os.getenv(var)]
    if missing:
        logger.error(f"Missing required environment variables: {missing}")
        sys.exit(1)
    logger.info("Environment validation passed")

def log_configuration():
    """Log the backend and model the service will talk to."""
    logger.info("=" * 60)
    logger.info("Summary webhook configuration")
    logger.info(f"  Backend API: {os.getenv('BACKEND_API_URL')}")
    logger.info(f"  OpenAI model: {os.getenv('OPENAI_MODEL') or 'gpt-4o'}")
    logger.info(f"  Backend timeout: {os.getenv('BACKEND_TIMEOUT_SECONDS', '30')}s")
    logger.info("=" * 60)

# Call validation at startup
validate_environment()
log_configuration()

app = FastAPI()

# Include routers
app.include_router(summary.router)


@app.get("/health")
def health():
    return {"status": "ok"}
