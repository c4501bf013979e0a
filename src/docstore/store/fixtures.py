"""Load documents from YAML/JSON fixture files into a store"""

import json
from pathlib import Path

import yaml
from pydantic import ValidationError

from docstore.store.models import Document
from docstore.store.repo import DocumentRepo


def load_documents(path: Path) -> list[Document]:
    """Parse a fixture file into Documents.

    The top level is either a list of document mappings or a mapping with a
    'documents' list. Files ending in .json are read as JSON, anything else as YAML.
    Raises ValueError for unreadable, malformed, or wrongly shaped files.
    """
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as e:
        raise ValueError(f"Cannot read {path}: {e}") from e

    try:
        raw = json.loads(text) if path.suffix == ".json" else yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Invalid fixture file {path}: {e}") from e

    if isinstance(raw, dict):
        raw = raw.get("documents")
    if raw is None:
        return []
    if not isinstance(raw, list):
        raise ValueError(f"Invalid fixture file {path}: expected a list of documents")

    try:
        return [Document.model_validate(item) for item in raw]
    except ValidationError as e:
        raise ValueError(f"Invalid document in {path}: {e}") from e


def seed(repo: DocumentRepo, path: Path) -> list[Document]:
    """Save every document from a fixture file into repo. Returns the saved documents."""
    return [repo.save(doc) for doc in load_documents(path)]
