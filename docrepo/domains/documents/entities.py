from datetime import datetime, timezone
from typing import Optional


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Даты без часового пояса считаются UTC"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author:
    """Автор документа, хранится внутри документа по значению"""

    def __init__(self, id: Optional[str] = None, name: Optional[str] = None):
        self.id = id
        self.name = name

    def __eq__(self, other) -> bool:
        if not isinstance(other, Author):
            return False
        return self.id == other.id and self.name == other.name

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name={self.name})"


class Document:
    """Сущность документа хранилища"""

    def __init__(
        self,
        id: Optional[str] = None,
        title: Optional[str] = None,
        content: Optional[str] = None,
        author: Optional[Author] = None,
        created: Optional[datetime] = None
    ):
        self.id = id
        self.title = title
        self.content = content
        self.author = author
        self.created = created

    def has_id(self) -> bool:
        """Есть ли у документа непустой идентификатор"""
        return self.id is not None and bool(self.id.strip())

    def is_created_between(
        self,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None
    ) -> bool:
        """Попадает ли дата создания в диапазон (границы включительно)"""
        if created_from is None and created_to is None:
            return True
        if self.created is None:
            return False
        created = as_utc(self.created)
        if created_from is not None and created < as_utc(created_from):
            return False
        if created_to is not None and created > as_utc(created_to):
            return False
        return True

    def title_starts_with_any(self, prefixes: list) -> bool:
        if self.title is None:
            return False
        return any(self.title.startswith(prefix) for prefix in prefixes)

    def content_contains_any(self, fragments: list) -> bool:
        if self.content is None:
            return False
        return any(fragment in self.content for fragment in fragments)

    def is_written_by_any(self, author_ids: list) -> bool:
        if self.author is None:
            return False
        return self.author.id in author_ids

    def __eq__(self, other) -> bool:
        if not isinstance(other, Document):
            return False
        return (
            self.id == other.id
            and self.title == other.title
            and self.content == other.content
            and self.author == other.author
            and self.created == other.created
        )

    def __repr__(self) -> str:
        return f"Document(id={self.id}, title={self.title}, created={self.created})"
