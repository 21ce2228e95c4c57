"""
Cookbook FastAPI Application
Main entry point: shared resources, middleware and routers.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
from datetime import datetime
import sys
import uvicorn
from contextlib import asynccontextmanager
import anyio
import httpx
from typing import Optional

from api.routes import auth, search, recipes, plans, ingredients, admin, health

from adapters import FacebookOAuthClient, MongoStore, SpoonacularClient, WelcomeMailer
from domain.models import create_db_engine, create_session_factory, init_database
from repositories import RecipeRepository

from app.config import settings

from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_exception_handler,
    general_exception_handler,
)
from app.exceptions import ServiceError

# Setup logging with configured level and format
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()), format=settings.log_format
)
_logger = logging.getLogger("cookbook.main")


async def _wait_for_stores(engine, mongo: MongoStore) -> None:
    """Ping the SQL database and MongoDB, retrying until both answer"""
    last_exc: Optional[Exception] = None
    for attempt in range(1, settings.db_init_attempts + 1):
        try:
            # Blocking drivers run in a thread to avoid blocking the event loop
            await anyio.to_thread.run_sync(init_database, engine)
            await anyio.to_thread.run_sync(mongo.ping)
            _logger.info("Database connectivity check succeeded")
            return
        except Exception as exc:
            last_exc = exc
            _logger.warning(
                "Database check attempt %d/%d failed: %s",
                attempt,
                settings.db_init_attempts,
                exc,
            )
            if attempt < settings.db_init_attempts:
                await anyio.sleep(settings.db_init_delay_sec)
    _logger.error("Cannot connect to database after %d attempts", settings.db_init_attempts)
    raise last_exc


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.

    Creates the process-wide clients, stores them on ``app.state`` for the
    dependencies in ``api.dependencies`` and closes them on shutdown.
    """
    _logger.info(f"Starting Cookbook in {settings.environment.value} mode")

    engine = create_db_engine(
        settings.database_url, echo=settings.db_echo, pool_size=settings.db_pool_size
    )
    mongo = MongoStore(settings.mongo_uri, settings.mongo_db_name)
    spoon_http = httpx.Client()
    facebook_http = httpx.Client()

    try:
        await _wait_for_stores(engine, mongo)

        try:
            await anyio.to_thread.run_sync(RecipeRepository(mongo.db).ensure_indexes)
        except Exception as e:
            _logger.warning("Could not create unique index on recipes.id: %s", e)

        app.state.engine = engine
        app.state.session_factory = create_session_factory(engine)
        app.state.mongo = mongo
        app.state.spoonacular = SpoonacularClient(
            settings.spoon_apikey, settings.spoon_url, spoon_http
        )
        app.state.facebook = FacebookOAuthClient(
            settings.facebook_app_id,
            settings.facebook_app_secret,
            settings.facebook_callback_url,
            facebook_http,
            graph_version=settings.facebook_graph_version,
        )
        app.state.mailer = WelcomeMailer(settings)

        _logger.info("Application started at %s", datetime.now().isoformat())
        yield
    finally:
        _logger.info("Shutting down Cookbook")
        spoon_http.close()
        facebook_http.close()
        mongo.close()
        engine.dispose()


# Create FastAPI application with enhanced configuration
app = FastAPI(
    title=settings.api_title,
    version=settings.app_version,
    description=settings.api_description,
    lifespan=lifespan,
    debug=settings.debug,
    openapi_url="/openapi.json" if not settings.is_production() else None,
    docs_url="/docs" if not settings.is_production() else None,
    redoc_url="/redoc" if not settings.is_production() else None,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=settings.cors_allow_credentials,
    allow_methods=settings.cors_allow_methods,
    allow_headers=settings.cors_allow_headers,
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Register exception handlers
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(ServiceError, service_exception_handler)
app.add_exception_handler(Exception, general_exception_handler)

app.include_router(auth.router)
app.include_router(search.router)
app.include_router(recipes.router)
app.include_router(plans.router)
app.include_router(ingredients.router)
app.include_router(admin.router)
app.include_router(health.router)


if __name__ == "__main__":
    # python main.py [PORT]
    port = int(sys.argv[1]) if len(sys.argv) > 1 else settings.port
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=port,
        reload=settings.is_development(),
        log_level=settings.log_level.lower(),
    )
