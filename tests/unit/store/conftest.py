"""Shared fixtures for store unit tests"""

from datetime import datetime, timezone
from itertools import count

import pytest

from docstore.store.memory_repo import MemoryRepo
from docstore.store.models import Author, Document


FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture(name="store")
def store_fixture():
    """Empty store with default id generator and clock."""
    return MemoryRepo()


@pytest.fixture(name="fixed_now")
def fixed_now_fixture():
    return FIXED_NOW


@pytest.fixture(name="fixed_store")
def fixed_store_fixture():
    """Store with sequential ids (doc-1, doc-2, ...) and a frozen clock."""
    seq = count(1)
    return MemoryRepo(id_factory=lambda: f"doc-{next(seq)}", clock=lambda: FIXED_NOW)


@pytest.fixture(name="make_doc")
def make_doc_fixture():
    """Factory for Documents with an author id shortcut."""
    def _make(title=None, content=None, author_id=None, **kwargs) -> Document:
        author = Author(id=author_id, name=f"Name of {author_id}") if author_id else None
        return Document(title=title, content=content, author=author, **kwargs)
    return _make
