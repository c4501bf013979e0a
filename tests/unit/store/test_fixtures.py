"""Unit tests for store/fixtures.py"""

import json

import pytest

from docstore.store.fixtures import load_documents, seed
from docstore.store.memory_repo import MemoryRepo


YAML_DOCS = """\
- id: "123"
  title: Test title 1
  content: This is a test document.
  author: {id: author1, name: Author One}
  created: 2024-01-01T00:00:00Z
- title: Other
  content: Content 2
"""


def test_load_documents_yaml_list(tmp_path):
    path = tmp_path / "docs.yaml"
    path.write_text(YAML_DOCS)
    docs = load_documents(path)
    assert [d.title for d in docs] == ["Test title 1", "Other"]
    assert docs[0].author.id == "author1"
    assert docs[1].id is None


def test_load_documents_json_mapping(tmp_path):
    """A mapping with a 'documents' key is accepted; .json files are parsed as JSON."""
    path = tmp_path / "docs.json"
    path.write_text(json.dumps({"documents": [{"id": "a", "title": "A"}]}))
    docs = load_documents(path)
    assert len(docs) == 1
    assert docs[0].id == "a"


def test_load_documents_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_documents(path) == []


def test_load_documents_missing_file(tmp_path):
    with pytest.raises(ValueError, match="Cannot read"):
        load_documents(tmp_path / "nope.yaml")


def test_load_documents_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- [unclosed\n")
    with pytest.raises(ValueError, match="Invalid fixture file"):
        load_documents(path)


def test_load_documents_wrong_shape(tmp_path):
    path = tmp_path / "scalar.yaml"
    path.write_text("just a string\n")
    with pytest.raises(ValueError, match="expected a list of documents"):
        load_documents(path)


def test_load_documents_invalid_document(tmp_path):
    path = tmp_path / "bad_doc.yaml"
    path.write_text("- title: [1, 2]\n")
    with pytest.raises(ValueError, match="Invalid document"):
        load_documents(path)


def test_seed_saves_every_document(tmp_path):
    """seed assigns ids to documents without one and keeps explicit ids."""
    path = tmp_path / "docs.yaml"
    path.write_text(YAML_DOCS)
    repo = MemoryRepo()
    saved = seed(repo, path)
    assert len(repo) == 2
    assert repo.find_by_id("123").title == "Test title 1"
    assert saved[1].id and saved[1].created is not None
