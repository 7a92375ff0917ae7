import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from core import db
from core.errors import register_error_handlers
from core.logging_setup import setup_logging
from core.middleware import json_content_type_middleware
from products import router as products_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # One pool per process; an unreachable DB aborts startup.
    try:
        app.state.pool = await db.create_pool()
    except Exception:
        logger.exception("db_pool_init_failed")
        raise
    logger.info("db_pool_ready")
    try:
        yield
    finally:
        await db.close_pool(app.state.pool)
        app.state.pool = None


# Every response is relabelled as JSON, so the HTML docs pages are off.
app = FastAPI(title="product-api", lifespan=lifespan, docs_url=None, redoc_url=None)

app.middleware("http")(json_content_type_middleware)
register_error_handlers(app)

app.include_router(products_router.router, tags=["products"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


if __name__ == "__main__":
    uvicorn.run(
        app,
        host=os.environ.get("HOST", "0.0.0.0").strip() or "0.0.0.0",
        port=int(os.environ.get("PORT", "8080").strip() or "8080"),
    )
