from fastapi import APIRouter, Depends, HTTPException, status
import time

from docrepo.core.storage import get_document_manager
from docrepo.domains.documents.schemas import (
    DocumentSave, DocumentResponse, DocumentSearchResponse, SearchRequest
)
from docrepo.domains.documents.services import DocumentManager

router = APIRouter(prefix="/documents", tags=["documents"])


@router.post("/", response_model=DocumentResponse, status_code=status.HTTP_201_CREATED)
async def save_document(
    document_data: DocumentSave,
    manager: DocumentManager = Depends(get_document_manager)
):
    """Создание или обновление документа"""
    try:
        document = manager.save(document_data.to_entity())
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    return DocumentResponse.model_validate(document)


@router.post("/search", response_model=DocumentSearchResponse)
async def search_documents(
    search_request: SearchRequest,
    manager: DocumentManager = Depends(get_document_manager)
):
    """Поиск документов"""
    start_time = time.time()

    try:
        documents = manager.search(search_request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )

    search_time = int((time.time() - start_time) * 1000)  # в миллисекундах

    return DocumentSearchResponse(
        documents=[DocumentResponse.model_validate(doc) for doc in documents],
        total_found=len(documents),
        search_time_ms=search_time
    )


@router.get("/{document_id}", response_model=DocumentResponse)
async def get_document(
    document_id: str,
    manager: DocumentManager = Depends(get_document_manager)
):
    """Получение документа по id"""
    document = manager.find_by_id(document_id)

    if document is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Document not found"
        )

    return DocumentResponse.model_validate(document)
