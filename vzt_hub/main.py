from typing import Optional

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import settings
from .errors import VztError
from .logging import setup_logging, RequestIdMiddleware
from .routes.attendance import router as attendance_router
from .routes.auth import router as auth_router
from .routes.calculators import router as calculators_router
from .routes.chat import router as chat_router
from .routes.projects import router as projects_router
from .routes.settings import router as settings_router
from .services.store import DomainStore, build_store


logger = structlog.get_logger(__name__)


async def _vzt_error(request: Request, exc: VztError):
    payload = {"error": type(exc).__name__, "detail": exc.message}
    if exc.status_code >= 500:
        logger.error("request_failed", path=request.url.path, **payload)
    return JSONResponse(status_code=exc.status_code, content=payload)


def create_app(store: Optional[DomainStore] = None) -> FastAPI:
    setup_logging()
    app = FastAPI(title=settings.app_name)
    app.state.store = store if store is not None else build_store()

    # Middlewares
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(VztError, _vzt_error)

    # Routers
    app.include_router(auth_router)
    app.include_router(attendance_router)
    app.include_router(chat_router)
    app.include_router(calculators_router)
    app.include_router(projects_router)
    app.include_router(settings_router)

    @app.get("/healthz")
    def healthz():
        return {"status": "ok"}

    return app


def run() -> None:
    import uvicorn

    uvicorn.run(create_app(), host=settings.host, port=settings.port)
