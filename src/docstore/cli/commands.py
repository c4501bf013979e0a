"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from docstore.config import Settings, load_config
from docstore.store.fixtures import seed
from docstore.store.memory_repo import MemoryRepo
from docstore.store.models import SearchRequest


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then apply its log level."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _load_store(settings: Settings, path: Path) -> MemoryRepo:
    """Build a fresh store from settings and seed it from a fixture file."""
    repo = MemoryRepo.from_settings(settings)
    try:
        seed(repo, path)
    except ValueError as e:
        _fail(str(e))
    return repo


def search_cmd(
    path: Annotated[Path, typer.Argument(help="YAML or JSON file of documents")],
    title_prefixes: Annotated[Optional[list[str]], typer.Option("--title-prefix", help="Title starts with (repeatable)")] = None,
    contains: Annotated[Optional[list[str]], typer.Option("--contains", help="Content contains (repeatable)")] = None,
    author_ids: Annotated[Optional[list[str]], typer.Option("--author", help="Author id (repeatable)")] = None,
    created_from: Annotated[Optional[str], typer.Option("--created-from", help="Inclusive ISO-8601 lower bound")] = None,
    created_to: Annotated[Optional[str], typer.Option("--created-to", help="Inclusive ISO-8601 upper bound")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level")] = None,
    ):
    """Load documents into a fresh store and print those matching every given filter, one JSON object per line."""
    settings = _settings(overrides={"log_level": log_level})
    try:
        request = SearchRequest(
            title_prefixes=title_prefixes or None,
            contains_contents=contains or None,
            author_ids=author_ids or None,
            created_from=created_from,
            created_to=created_to,
        )
    except ValidationError as e:
        _fail("Invalid search filters", e)

    repo = _load_store(settings, path)
    results = repo.search(request)
    for doc in results:
        typer.echo(doc.model_dump_json())
    typer.echo(f"{len(results)} of {len(repo)} document(s) matched", err=True)


def get_cmd(
    path: Annotated[Path, typer.Argument(help="YAML or JSON file of documents")],
    doc_id: Annotated[str, typer.Argument(help="Document id")],
    ):
    """Load documents into a fresh store and print the one stored under DOC_ID."""
    settings = _settings()
    repo = _load_store(settings, path)
    doc = repo.find_by_id(doc_id)
    if doc is None:
        _fail(f"No document with id '{doc_id}'")
    typer.echo(doc.model_dump_json(indent=2))


def config_cmd():
    """Print the effective settings (config.yaml, DOCSTORE_* env vars) as JSON."""
    typer.echo(_settings().model_dump_json(indent=2))
