# english_coach/main.py
# Start backend using uvicorn english_coach.main:app --reload --port 8080
# or the `english-coach` console script, which honours HOST and PORT.
import logging
import logging.config
import json
import pathlib
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.routing import APIRoute

from english_coach.core.config import Settings, get_settings, settings
from english_coach.api import exercises as exercises_router
from english_coach.models.validation import HealthResponse


def configure_logging_from_file():
    """Loads logging configuration from the JSON file next to this module."""
    config_file = pathlib.Path(__file__).parent / "logging_config.json"
    try:
        with open(config_file) as f_in:
            config = json.load(f_in)
        config.setdefault("root", {})["level"] = settings.LOG_LEVEL.upper()
        logging.config.dictConfig(config)
    except FileNotFoundError:
        print(f"ERROR: Logging configuration file not found at {config_file}. Falling back to basic stdout logging.")
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("english_coach.main.logging_setup_fallback").error("Logging configuration file missing.", exc_info=True)
    except json.JSONDecodeError as e:
        print(f"ERROR: Failed to parse logging configuration file {config_file}: {e}. Falling back to basic stdout logging.")
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("english_coach.main.logging_setup_fallback").error("Logging configuration JSON error.", exc_info=True)
    except (ValueError, TypeError, AttributeError, ImportError) as e:
        # dictConfig rejected the file (bad level name, unknown class, ...)
        print(f"ERROR: Failed to configure logging from file: {e}. Falling back to basic stdout logging.")
        logging.basicConfig(level=logging.INFO, format='%(levelname)-8s [%(name)s] %(message)s')
        logging.getLogger("english_coach.main.logging_setup_fallback").error("General logging configuration failed.", exc_info=True)


configure_logging_from_file()
logger = logging.getLogger("english_coach.main")  # Logger for this module


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Application startup sequence initiated...")
    if not settings.gemini_configured:
        logger.warning("GEMINI_API_KEY is not set; exercise endpoints will report a server configuration error.")
    yield
    logger.info("Application shutdown sequence initiated...")


app = FastAPI(
    title=settings.PROJECT_NAME,
    lifespan=lifespan,
)

# Routes are served at the root; existing clients call /validate etc. directly
app.include_router(exercises_router.router, tags=["Exercises"])

logger.info("--- FastAPI Registered Routes ---")
for route in app.routes:
    if isinstance(route, APIRoute):
        logger.info(f"Path: {route.path}, Methods: {route.methods}, Name: {route.name}")
logger.info("--- End Registered Routes ---")


@app.get("/health", response_model=HealthResponse, tags=["Health Check"])
async def health_check(current_settings: Settings = Depends(get_settings)):
    return HealthResponse(project=current_settings.PROJECT_NAME, gemini_configured=current_settings.gemini_configured)


def run():
    """Entry point for the `english-coach` console script."""
    logger.info(f"Server starting on {settings.HOST}:{settings.PORT}...")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_config=None)


if __name__ == "__main__":
    run()
