import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.health import router as health_router
from app.api.root import router as root_router
from app.api.employees import router as employees_router
from app.core.config import settings
from app.core.errors import register_error_handlers
from app.core.logging_config import setup_logging
from app.db.employee_store import EmployeeStore

logger = logging.getLogger(__name__)


def create_app(store: EmployeeStore | None = None) -> FastAPI:
    """
    Build the application around an explicit store. Without one, a store is
    created from DATABASE_URL.
    """
    setup_logging(settings.LOG_LEVEL)

    if store is None:
        store = EmployeeStore.from_url(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        store.create_schema()
        logger.info("Employee Directory started (env=%s)", settings.APP_ENV)
        yield
        store.engine.dispose()
        logger.info("Employee Directory shutting down")

    app = FastAPI(title="Employee Directory", lifespan=lifespan)
    app.state.store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(root_router)
    app.include_router(health_router)
    app.include_router(employees_router)
    return app


app = create_app()
