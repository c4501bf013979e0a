"""Thread-safe in-memory document store: upsert, exact-id lookup and filtered search"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime

from docstore.config import Settings
from docstore.store.filters import matches
from docstore.store.ids import utc_now, uuid_id
from docstore.store.models import Document, SearchRequest
from docstore.store.repo import DocumentRepo


logger = logging.getLogger(__name__)

_MAX_ID_ATTEMPTS = 16


@dataclass(eq=False)
class MemoryRepo(DocumentRepo):
    """Owns a single id -> Document mapping guarded by a lock.

    Writes are serialized; reads take a snapshot under the lock and evaluate
    predicates outside it. Saved documents are kept by reference unless
    copy_documents is set.
    """
    id_factory: Callable[[], str] = uuid_id
    clock: Callable[[], datetime] = utc_now
    copy_documents: bool = False
    _docs: dict[str, Document] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs) -> MemoryRepo:
        """Build a store from loaded Settings; kwargs override (e.g. id_factory, clock)."""
        return cls(copy_documents=settings.copy_documents, **kwargs)

    def save(self, doc: Document) -> Document:
        """Upsert doc under its id.

        Assigns a fresh id when id is None or empty, and created when it is None.
        An existing id or created value is never overwritten. Last writer wins.
        Raises ValueError if doc is not a Document.
        """
        if not isinstance(doc, Document):
            raise ValueError(f"Expected a Document, got {type(doc).__name__}")

        with self._lock:
            if not doc.id:
                doc.id = self._new_id()
                logger.debug("Assigned id %s", doc.id)
            if doc.created is None:
                doc.created = self.clock()

            replaced = doc.id in self._docs
            self._docs[doc.id] = doc.model_copy(deep=True) if self.copy_documents else doc

        logger.debug("%s document %s", "Replaced" if replaced else "Inserted", doc.id)
        return doc

    def search(self, request: SearchRequest) -> list[Document]:
        """Return every stored document satisfying all populated filters of request.

        Results follow insertion order. Raises ValueError if request is not a SearchRequest.
        """
        if not isinstance(request, SearchRequest):
            raise ValueError(f"Expected a SearchRequest, got {type(request).__name__}")

        results = [doc for doc in self._snapshot() if matches(doc, request)]
        logger.debug("Search matched %d document(s)", len(results))
        return results

    def find_by_id(self, doc_id: str) -> Document | None:
        """Return the document stored under doc_id, or None. Raises ValueError for a non-str id."""
        if not isinstance(doc_id, str):
            raise ValueError(f"Expected a str id, got {type(doc_id).__name__}")
        with self._lock:
            return self._docs.get(doc_id)

    def all(self) -> list[Document]:
        """Return every stored document in insertion order."""
        return self._snapshot()

    def __len__(self) -> int:
        with self._lock:
            return len(self._docs)

    def __contains__(self, doc_id: object) -> bool:
        with self._lock:
            return doc_id in self._docs

    def _snapshot(self) -> list[Document]:
        with self._lock:
            return list(self._docs.values())

    def _new_id(self) -> str:
        # Caller holds the lock. Result is non-empty and not yet stored.
        for _ in range(_MAX_ID_ATTEMPTS):
            new_id = self.id_factory()
            if new_id and new_id not in self._docs:
                return new_id
        raise RuntimeError(f"id_factory produced no unused id in {_MAX_ID_ATTEMPTS} attempts")


DocumentStore = MemoryRepo
