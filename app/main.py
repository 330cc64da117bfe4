import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.api.endpoints import categories, products, suppliers
from app.api.errors import register_exception_handlers
from app.core.config import Settings, get_settings
from app.db.init_tables import init_tables
from app.db.session import build_engine, build_sessionmaker
from app.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    engine = build_engine(settings)
    app.state.engine = engine
    app.state.sessionmaker = build_sessionmaker(engine)

    if settings.CREATE_TABLES_ON_STARTUP:
        await init_tables(engine, case_insensitive_names=settings.UNIQUE_NAMES_CASE_INSENSITIVE)

    logger.info("service_started", extra={"database": engine.url.render_as_string(hide_password=True)})
    yield
    await engine.dispose()
    logger.info("service_stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_DIR, settings.LOG_LEVEL)

    app = FastAPI(
        title="Inventory Management Service",
        lifespan=lifespan
    )
    app.state.settings = settings

    register_exception_handlers(app)

    app.include_router(products.router, prefix="/products", tags=["Products"])
    app.include_router(categories.router, prefix="/categories", tags=["Categories"])
    app.include_router(suppliers.router, prefix="/suppliers", tags=["Suppliers"])

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    return app
