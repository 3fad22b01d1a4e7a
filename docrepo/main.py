from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docrepo.api.http.health import router as health_router
from docrepo.api.http.documents import router as documents_router
from docrepo.core.config import settings
from docrepo.core.logging import setup_logging
from docrepo.db.repositories.document_repository import DocumentStorage


def create_app(storage: Optional[DocumentStorage] = None) -> FastAPI:
    """Сборка приложения с хранилищем документов в памяти"""
    setup_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_title,
        description="Хранилище документов в памяти с upsert и поиском по фильтрам",
        version=settings.app_version
    )

    # Одно хранилище на все время жизни процесса
    app.state.storage = storage if storage is not None else DocumentStorage()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(documents_router)

    return app


app = create_app()
