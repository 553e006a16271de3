# app/main.py
from dotenv import load_dotenv

load_dotenv()

import logging
import logging.config
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from config.appconfig import AppSettings, settings

# Apply logging configuration
logging.config.dictConfig(settings.LOGGING_CONFIG)

# Import routers
from app.client_view.routes import router as client_router
from app.system_services.system_routes import router as system_router

from app.database.connection import Database
from app.shared.exceptions import ClinicalNotesError, clinical_notes_error_handler
from app.storage.storage_provider import get_storage_provider

logger = logging.getLogger(__name__)


def create_app(app_settings: Optional[AppSettings] = None) -> FastAPI:
    """Build the application around an explicit settings object."""
    app_settings = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        # Startup
        database = Database(app_settings.DATABASE_URL, echo=app_settings.DATABASE_ECHO)
        await database.create_tables()
        app.state.database = database
        app.state.storage = get_storage_provider(app_settings)

        logger.info(f"🚀 Starting {app_settings.APP_NAME} ({app_settings.ENVIRONMENT})")
        logger.info(f"✅ Database: {database.engine.url.render_as_string(hide_password=True)}")
        logger.info(f"✅ Audio storage: {app_settings.STORAGE_BACKEND}")
        yield
        # Shutdown
        await database.dispose()
        logger.info("👋 Shutting down")

    app = FastAPI(
        title=app_settings.APP_NAME,
        description="Clinical note taking with typed and voice-transcribed notes",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.settings = app_settings

    app.add_exception_handler(ClinicalNotesError, clinical_notes_error_handler)

    # Include routers with prefixes
    app.include_router(system_router, prefix=app_settings.API_PREFIX, tags=["Notes & Patients"])
    app.include_router(client_router, tags=["Client"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "environment": app_settings.ENVIRONMENT}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
