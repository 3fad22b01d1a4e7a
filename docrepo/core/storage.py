from fastapi import Request

from docrepo.db.repositories.document_repository import DocumentStorage
from docrepo.domains.documents.services import DocumentManager


def get_storage(request: Request) -> DocumentStorage:
    return request.app.state.storage


# Функция для dependency injection в FastAPI
def get_document_manager(request: Request) -> DocumentManager:
    return DocumentManager(get_storage(request))
