# src/etag/core/formatter.py
"""Wrap a body into the final ETag header value."""

WEAK_PREFIX = "W/"


def format_tag(body: str, *, weak: bool) -> str:
    """Quote body and prepend W/ when weak.

    No escaping: bodies are built from hex digits, base64 and "-", none of
    which is a double quote.
    """
    tag = f'"{body}"'
    return WEAK_PREFIX + tag if weak else tag
