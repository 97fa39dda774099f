"""
Report Studio API — application entry point.
"""

from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.middleware import register_exception_handlers, register_middleware
from api.routes import router as api_router
from auth.issuer import CredentialIssuer
from auth.middleware import TokenVerifier
from auth.routes import router as auth_router
from config.settings import Settings, config
from core.report_generator import ReportGenerator
from database.session import dispose_engine, get_engine, init_models

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("httpcore", "httpx", "openai", "urllib3"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or config

    app = FastAPI(
        title="Report Studio API",
        version="1.0.0",
        description="Accounts, JWT sessions and LLM-generated HTML reports.",
    )

    # The only process-wide state: built once here and injected via app.state
    app.state.settings = settings
    app.state.issuer = CredentialIssuer(settings)
    app.state.token_verifier = TokenVerifier(settings)
    app.state.report_generator = ReportGenerator(settings)

    # CORS (credentials allowed so the auth cookie travels cross-site)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app)

    # Routes
    app.include_router(auth_router)
    app.include_router(api_router)

    @app.on_event("startup")
    async def on_startup():
        # Binds the lazily-built engine to this app's database URL
        get_engine(settings.database_url)
        if settings.db_auto_create:
            logger.info("Ensuring database schema…")
            await init_models()
        logger.info("Application ready to accept requests.")

    @app.on_event("shutdown")
    async def on_shutdown():
        await dispose_engine()

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
