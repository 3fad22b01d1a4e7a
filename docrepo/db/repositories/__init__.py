from docrepo.db.repositories.document_repository import DocumentStorage

__all__ = [
    "DocumentStorage"
]
