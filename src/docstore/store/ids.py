"""Default identity and clock sources for newly saved documents"""

import uuid
from datetime import datetime, timezone


def uuid_id() -> str:
    """Return a random UUID4 string (122 random bits, collisions negligible)."""
    return str(uuid.uuid4())


def utc_now() -> datetime:
    """Return the current wall-clock instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)
