from __future__ import annotations
from abc import ABC, abstractmethod
from docstore.store.models import Document, SearchRequest

class DocumentRepo(ABC):
    @abstractmethod
    def save(self, doc: Document) -> Document:
        """Upsert doc, filling in id and created when absent. Returns the saved doc."""
        raise NotImplementedError

    @abstractmethod
    def search(self, request: SearchRequest) -> list[Document]:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, doc_id: str) -> Document | None:
        raise NotImplementedError
