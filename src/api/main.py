"""
FastAPI Application — Inscrições.

Architecture:
  - PostgreSQL (prod) / SQLite (dev) como tabela de inscrições
  - ViaCEP → BrasilAPI para consulta de endereço
  - MinIO (prod) / filesystem local (dev) para anexos
"""

import logging
from pathlib import Path

from fastapi import Depends, FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError

from src.api.dependencies import get_tabular_store
from src.api.routes.address import router as address_router
from src.api.routes.registrations import router as registrations_router
from src.api.schemas.responses import HealthResponse
from src.config.settings import get_settings
from src.core.errors import (
    SubmissionError,
    StorageError,
    PersistenceTargetMissing,
    AppendFailure,
)
from src.core.interfaces.tabular_store import ITabularStore
from src.infrastructure.db.database import init_db, get_database_url

logger = logging.getLogger(__name__)

VERSION = "1.0.0"

# Falhas de submissão → status HTTP (o detail carrega a mensagem de diagnóstico)
ERROR_STATUS = {
    StorageError: 502,
    PersistenceTargetMissing: 503,
    AppendFailure: 500,
}


def create_app() -> FastAPI:
    settings = get_settings()

    app = FastAPI(
        title="Inscrições",
        description="Intake de inscrições: checagem de CPF, consulta de CEP, anexo e registro.",
        version=VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ── Startup ──
    @app.on_event("startup")
    async def startup():
        logging.basicConfig(
            level=settings.log_level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
        init_db()
        logger.info("Registration intake started")

    # ── Errors ──
    @app.exception_handler(SubmissionError)
    async def submission_error_handler(request: Request, exc: SubmissionError):
        status = ERROR_STATUS.get(type(exc), 500)
        return JSONResponse(
            status_code=status,
            content={"detail": exc.message, "error": type(exc).__name__},
        )

    app.include_router(registrations_router, prefix="/api/v1", tags=["Registrations"])
    app.include_router(address_router, prefix="/api/v1", tags=["Address"])

    # ── Health ──
    @app.get("/health", response_model=HealthResponse)
    def health(store: ITabularStore = Depends(get_tabular_store)):
        db_url = get_database_url()
        table_present, stored = True, 0
        try:
            stored = store.count_rows()
        except PersistenceTargetMissing:
            table_present = False
        except SQLAlchemyError as e:
            logger.warning(f"Health check could not reach the database: {e}")
            table_present = False
        return HealthResponse(
            status="ok" if table_present else "degraded",
            version=VERSION,
            database="PostgreSQL" if "postgres" in db_url else "SQLite",
            registrations_table=settings.registrations_table,
            table_present=table_present,
            registrations_stored=stored,
            storage_backend=settings.storage_backend,
        )

    # ── Uploaded files (local backend) ──
    if settings.storage_backend == "local":
        upload_dir = Path(settings.storage_local_dir)
        upload_dir.mkdir(parents=True, exist_ok=True)
        app.mount("/files", StaticFiles(directory=str(upload_dir)), name="files")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run("src.api.main:app", host=settings.api_host, port=settings.api_port, reload=settings.debug)
