"""
Game Deals - FastAPI Main Entry

LOCAL:
    cd backend
    python -m uvicorn gamedeals.main:app --reload --host 0.0.0.0 --port 8000

TEST:
    curl -i http://127.0.0.1:8000/
    curl -i http://127.0.0.1:8000/docs
    curl -i http://127.0.0.1:8000/health
    curl -i -X POST http://127.0.0.1:8000/v1/sessions
    curl -i http://127.0.0.1:8000/v1/stores

PRODUCTION:
    Start Command:
        python -m uvicorn gamedeals.main:app --host 0.0.0.0 --port $PORT
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gamedeals.api.routes_deals import router as deals_router
from gamedeals.api.routes_meta import router as meta_router
from gamedeals.api.routes_page import router as page_router
from gamedeals.core import cheapshark
from gamedeals.core.config import settings
from gamedeals.core.logging import configure_logging, logger
from gamedeals.core.session import SessionRegistry


@asynccontextmanager
async def lifespan(app: FastAPI):
    # one upstream client and one session registry per process
    app.state.http_client = cheapshark.new_client()
    app.state.sessions = SessionRegistry()
    logger.info("startup", base_url=settings.CHEAPSHARK_BASE_URL)
    try:
        yield
    finally:
        await app.state.http_client.aclose()
        logger.info("shutdown", sessions=len(app.state.sessions))


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="Game Deals",
        version=settings.APP_VERSION,
        description="Browse and search CheapShark video game deals",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(page_router)
    app.include_router(meta_router)
    app.include_router(deals_router)

    return app


app = create_app()
