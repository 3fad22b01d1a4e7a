from fastapi import APIRouter, Depends

from docrepo.core.config import settings
from docrepo.core.storage import get_storage
from docrepo.db.repositories.document_repository import DocumentStorage

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(storage: DocumentStorage = Depends(get_storage)):
    """Проверка состояния сервиса"""
    return {
        "status": "ok",
        "version": settings.app_version,
        "documents": storage.count()
    }
