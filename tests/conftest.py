"""Root test configuration: isolate every test from ambient docstore configuration"""

import pytest

from docstore.config import Settings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Run each test in an empty directory with no DOCSTORE_* env vars set."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"DOCSTORE_{name.upper()}", raising=False)
    yield tmp_path
