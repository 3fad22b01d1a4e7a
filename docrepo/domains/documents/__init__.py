from docrepo.domains.documents.entities import Author, Document
from docrepo.domains.documents.schemas import (
    SearchRequest, AuthorSchema, DocumentSave, DocumentResponse,
    DocumentSearchResponse
)
from docrepo.domains.documents.services import DocumentManager

__all__ = [
    "Author", "Document",
    "SearchRequest", "AuthorSchema", "DocumentSave", "DocumentResponse",
    "DocumentSearchResponse",
    "DocumentManager"
]
