from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from gitlab_api_models.application.models.note import Note


class Noteable(ABC):
    """A resource that carries a comment thread and an open/closed state."""

    @abstractmethod
    def add_comment(self, body: str) -> "Note":
        raise NotImplementedError

    @abstractmethod
    def show_comments(self) -> list["Note"]:
        raise NotImplementedError

    @abstractmethod
    def close(self, comment: Optional[str] = None) -> "Noteable":
        raise NotImplementedError

    @abstractmethod
    def open(self) -> "Noteable":
        raise NotImplementedError

    @abstractmethod
    def reopen(self) -> "Noteable":
        raise NotImplementedError

    @abstractmethod
    def is_closed(self) -> bool:
        raise NotImplementedError
