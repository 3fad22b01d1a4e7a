from pydantic import BaseModel, Field, field_validator, ConfigDict
from typing import Optional, List
from datetime import datetime

from docrepo.domains.documents.entities import Author, Document, as_utc


class SearchRequest(BaseModel):
    """Фильтр поиска документов.

    Поля объединяются через AND, значения внутри одного поля через OR.
    Пустое или незаданное поле не ограничивает выборку.
    """
    title_prefixes: Optional[List[str]] = None
    contains_contents: Optional[List[str]] = None
    author_ids: Optional[List[str]] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None

    @field_validator("created_from", "created_to")
    @classmethod
    def assume_utc(cls, v):
        return as_utc(v)

    def has_date_range(self) -> bool:
        return self.created_from is not None or self.created_to is not None


class AuthorSchema(BaseModel):
    """Схема автора документа"""
    id: Optional[str] = None
    name: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class DocumentSave(BaseModel):
    """Схема для сохранения (upsert) документа"""
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = Field(None, max_length=1000000)
    author: Optional[AuthorSchema] = None
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def assume_utc(cls, v):
        return as_utc(v)

    def to_entity(self) -> Document:
        """Преобразование схемы в доменную сущность"""
        author = None
        if self.author is not None:
            author = Author(id=self.author.id, name=self.author.name)

        return Document(
            id=self.id,
            title=self.title,
            content=self.content,
            author=author,
            created=self.created
        )


class DocumentResponse(BaseModel):
    """Схема для ответа с данными документа"""
    id: str
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[AuthorSchema] = None
    created: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class DocumentSearchResponse(BaseModel):
    """Схема для ответа с результатами поиска"""
    documents: List[DocumentResponse]
    total_found: int
    search_time_ms: int
