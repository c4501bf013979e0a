"""Search predicates: one per SearchRequest dimension, combined by matches()"""

from docstore.store.models import Document, SearchRequest


def title_matches(doc: Document, prefixes: list[str]) -> bool:
    """True if the title exists and starts with any prefix (case-sensitive)."""
    return doc.title is not None and any(doc.title.startswith(p) for p in prefixes)


def content_matches(doc: Document, needles: list[str]) -> bool:
    """True if the content exists and contains any needle (case-sensitive)."""
    return doc.content is not None and any(n in doc.content for n in needles)


def author_matches(doc: Document, author_ids: list[str]) -> bool:
    return doc.author is not None and doc.author.id in author_ids


def created_matches(doc: Document, created_from=None, created_to=None) -> bool:
    """Inclusive range check on created. A document without created never matches a bound."""
    if created_from is None and created_to is None:
        return True
    if doc.created is None:
        return False
    if created_from is not None and doc.created < created_from:
        return False
    if created_to is not None and doc.created > created_to:
        return False
    return True


def matches(doc: Document, request: SearchRequest) -> bool:
    """Return True if doc satisfies every populated dimension of request.

    A dimension whose field is None is skipped. An empty list is still a
    populated filter, and nothing satisfies it.
    """
    if request.title_prefixes is not None and not title_matches(doc, request.title_prefixes):
        return False
    if request.contains_contents is not None and not content_matches(doc, request.contains_contents):
        return False
    if request.author_ids is not None and not author_matches(doc, request.author_ids):
        return False
    return created_matches(doc, request.created_from, request.created_to)
