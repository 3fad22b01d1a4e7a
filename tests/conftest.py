"""Shared fixtures for docrepo tests."""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from docrepo.db.repositories.document_repository import DocumentStorage
from docrepo.domains.documents.entities import Author, Document
from docrepo.domains.documents.services import DocumentManager
from docrepo.main import create_app

T1 = datetime(2024, 1, 10, 12, 0, tzinfo=timezone.utc)
T2 = datetime(2024, 3, 5, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def storage() -> DocumentStorage:
    return DocumentStorage()


@pytest.fixture
def manager(storage: DocumentStorage) -> DocumentManager:
    return DocumentManager(storage)


@pytest.fixture
def report_and_memo(manager: DocumentManager):
    """Two stored documents by different authors."""
    report = manager.save(Document(
        title="Report Q1",
        content="quarterly numbers, foo included",
        author=Author(id="x", name="Xavier"),
        created=T1,
    ))
    memo = manager.save(Document(
        title="Memo",
        content="short bar note",
        author=Author(id="y", name="Yana"),
        created=T2,
    ))
    return report, memo


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(DocumentStorage()))
