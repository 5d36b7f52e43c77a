from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from pdfbrief.config import AppConfig, load_config
from pdfbrief.domain.errors import InputError
from pdfbrief.features.documents.api import router as documents_router
from pdfbrief.features.summary.api import router as summary_router
from pdfbrief.infra.db import DbConfig, connect, migrate
from pdfbrief.logging_config import configure_logging
from pdfbrief.web.health import router as health_router


async def input_error_handler(request: Request, exc: InputError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.code})


def create_app(cfg: AppConfig | None = None) -> FastAPI:
    cfg = cfg or load_config()
    configure_logging(cfg.log_level)
    conn = connect(DbConfig(path=cfg.db_path))
    migrate(conn)

    app = FastAPI(title="PDF Brief", version="0.1.0")
    app.state.cfg = cfg
    app.state.db = conn
    app.add_exception_handler(InputError, input_error_handler)
    app.include_router(health_router)
    app.include_router(documents_router)
    app.include_router(summary_router)
    return app


app = create_app()
