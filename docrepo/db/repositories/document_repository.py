from typing import Optional, List, Dict, TYPE_CHECKING
import logging
import uuid

if TYPE_CHECKING:
    from docrepo.domains.documents.entities import Document
    from docrepo.domains.documents.schemas import SearchRequest

logger = logging.getLogger(__name__)


class DocumentStorage:
    """Хранилище документов в памяти процесса"""

    def __init__(self, documents: Optional[Dict[str, "Document"]] = None):
        self.documents: Dict[str, "Document"] = documents if documents is not None else {}

    def save_document(self, document: "Document") -> "Document":
        """Сохранение документа (insert или полная замена по id)"""
        if not document.has_id():
            document.id = str(uuid.uuid4())
            logger.debug(f"Generated id {document.id} for new document")

        self.documents[document.id] = document
        return document

    def get_document_by_id(self, document_id: Optional[str]) -> Optional["Document"]:
        """Получение документа по id"""
        if document_id is None:
            return None
        return self.documents.get(document_id)

    def search_documents(self, request: "SearchRequest") -> List["Document"]:
        """Поиск документов полным перебором"""
        return [
            document for document in self.documents.values()
            if self._matches(request, document)
        ]

    def count(self) -> int:
        return len(self.documents)

    def __len__(self) -> int:
        return self.count()

    def _matches(self, request: "SearchRequest", document: "Document") -> bool:
        """Проверка документа на соответствие всем условиям запроса"""
        if request.has_date_range():
            if document.created is None:
                logger.warning(
                    f"Document {document.id} has no created timestamp, rejected by date filter"
                )
                return False
            if not document.is_created_between(request.created_from, request.created_to):
                return False

        if request.title_prefixes and not document.title_starts_with_any(request.title_prefixes):
            return False

        if request.contains_contents and not document.content_contains_any(request.contains_contents):
            return False

        if request.author_ids and not document.is_written_by_any(request.author_ids):
            return False

        return True
