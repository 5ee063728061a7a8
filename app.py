from __future__ import annotations

import logging

from fastapi import FastAPI

from dotenv import load_dotenv

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    load_dotenv("local.env")

    from settings import get_settings

    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    from endpoints.document_endpoints import DOCUMENT_REPO, router as document_router

    app = FastAPI(title="docstore")

    @app.get("/healthz")
    async def healthz():
        return {
            "status": "ok",
            "backend": "disk" if settings.persist_to_disk else "memory",
            "backing_table": settings.backing_table,
        }

    app.include_router(document_router)
    logger.info("APP: document store ready (%s)", type(DOCUMENT_REPO.store).__name__)

    return app


app = create_app()
