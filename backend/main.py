# backend/main.py
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from config import settings
from utils.product_store import ProductStore, StorageError

# Import routerów
from routes.dashboard import router as dashboard_router
from routes.products import router as products_router
from routes.search import router as search_router
from routes.containers import router as containers_router

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def create_app(store: Optional[ProductStore] = None) -> FastAPI:
    """Build the application around a single product store.

    Tests pass their own store; otherwise one is opened from DATABASE_URL.
    """
    owns_store = store is None
    if store is None:
        store = ProductStore.from_url(settings.DATABASE_URL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Schema errors are logged inside ensure_schema and do not stop startup
        store.ensure_schema()
        logger.info("%s running on port %s", settings.APP_TITLE, settings.PORT)
        logger.info("Open: http://localhost:%s", settings.PORT)
        yield
        if owns_store:
            store.dispose()

    app = FastAPI(title=settings.APP_TITLE, version="1.0.0", lifespan=lifespan)
    app.state.store = store

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        return PlainTextResponse("Database error", status_code=500)

    # Rejestracja routerów
    app.include_router(dashboard_router)
    app.include_router(products_router)
    app.include_router(search_router)
    app.include_router(containers_router)

    # Static assets - upewniamy się, że katalog istnieje.
    # Mounted last so the routes above take precedence.
    Path(settings.STATIC_DIR).mkdir(parents=True, exist_ok=True)
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR), name="static")

    return app


configure_logging()
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())
