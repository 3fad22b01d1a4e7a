from typing import Optional, List
from datetime import datetime, timezone
import logging

from docrepo.db.repositories.document_repository import DocumentStorage
from docrepo.domains.documents.entities import Document, as_utc
from docrepo.domains.documents.schemas import SearchRequest

logger = logging.getLogger(__name__)


class DocumentManager:
    """Сервис для работы с документами.

    Хранилище передается снаружи и не создается внутри сервиса.
    """

    def __init__(self, storage: DocumentStorage):
        self.storage = storage

    def save(self, document: Document) -> Document:
        """Upsert документа с сохранением исходной даты создания"""
        if document is None:
            raise ValueError("Document cannot be null")

        existing_document = self.storage.get_document_by_id(document.id)
        if existing_document is not None:
            document.created = existing_document.created
        elif document.created is None:
            document.created = datetime.now(timezone.utc)
        else:
            document.created = as_utc(document.created)

        saved_document = self.storage.save_document(document)
        logger.info(
            f"{'Updated' if existing_document is not None else 'Created'} document {saved_document.id}"
        )
        return saved_document

    def search(self, request: SearchRequest) -> List[Document]:
        """Поиск документов по фильтру"""
        if request is None:
            raise ValueError("SearchRequest must not be null")

        documents = self.storage.search_documents(request)
        logger.debug(f"Search matched {len(documents)} of {self.storage.count()} documents")
        return documents

    def find_by_id(self, document_id: Optional[str]) -> Optional[Document]:
        """Получение документа по id, None если не найден"""
        return self.storage.get_document_by_id(document_id)
