"""Creation Timestamps: ISO-8601 strings assigned by the API, never by the client.

Invariants:
    - Always UTC, millisecond precision, "Z" suffix (2022-08-08T19:48:07.653Z)
    - Lexicographic order of two stamps equals chronological order
"""

from datetime import datetime, timezone


def format_creation_date(moment: datetime) -> str:
    """Render an aware datetime as a creation timestamp."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_creation_date() -> str:
    return format_creation_date(datetime.now(timezone.utc))
