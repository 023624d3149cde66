"""Helpers for case-insensitive substring search."""

ESCAPE_CHAR = "\\"


def contains_pattern(term: str) -> str:
    """Build an ILIKE pattern that matches ``term`` literally anywhere in a value."""
    escaped = (
        term.replace(ESCAPE_CHAR, ESCAPE_CHAR * 2)
        .replace("%", ESCAPE_CHAR + "%")
        .replace("_", ESCAPE_CHAR + "_")
    )
    return f"%{escaped}%"
