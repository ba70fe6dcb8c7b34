from typing import Optional
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from .config import Settings, settings as default_settings
from .error_handlers import generic_exception_handler, validation_exception_handler
from .routes.home import router as home_router
from .routes.receipts import router as receipts_router
from .rules.ruleset import build_rules
from .store.repository import InMemoryReceiptRepository, ReceiptRepository
from .utils.logging import logger

def create_app(repository: Optional[ReceiptRepository] = None,
               settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title=settings.APP_NAME,
                  description="Receipt submission and points scoring",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json")

    # one store per app instance, shared by every request thread
    app.state.repository = repository if repository is not None else InMemoryReceiptRepository()
    app.state.rules = build_rules(settings.RETAILER_POINTS_MODE)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    app.include_router(home_router)
    app.include_router(receipts_router)

    @app.get("/health")
    def health():
        return {"ok": True, "receipts": len(app.state.repository)}

    logger.info("%s ready (env=%s, retailer_points_mode=%s)",
                settings.APP_NAME, settings.ENV, settings.RETAILER_POINTS_MODE)
    return app

app = create_app()
