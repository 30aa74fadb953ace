"""Application entrypoint: `uvicorn src.main:app`"""

import logging

from fastapi import FastAPI

from src.api.errors import register_error_handlers
from src.api.routes import router
from src.core.log_config import setup_logging
from src.db.database import init_db

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging()
    app = FastAPI(title="drop-token", version="0.1.0")
    app.include_router(router)
    register_error_handlers(app)

    @app.on_event("startup")
    def _startup() -> None:
        init_db()
        logger.info("Drop token service started")

    return app


app = create_app()
