# src/etag/core/tag.py
"""Public entry point: entity in, ETag header value out.

Usage:
    from etag import generate_tag

    generate_tag("hello world")            # '"b-Kq5sNclPz7QV2+lfQIuc6R7oRu0"'
    generate_tag(os.stat(path))            # 'W/"1a-18c2f0e4b10"'
    generate_tag(data, {"weak": True})     # 'W/"..."'
"""

from __future__ import annotations

from typing import Any

from etag.core.classifier import classify
from etag.core.formatter import format_tag
from etag.core.generator import generate_body


def generate_tag(entity: Any, options: Any = None) -> str:
    """Generate an entity tag for content or a stat descriptor.

    Pure and deterministic: the same entity and options always give the
    same tag. Safe to call from any thread.

    Args:
        entity: str, bytes, bytearray, memoryview, Content, os.stat_result,
            MetadataDescriptor, or any object or mapping with datetime
            ``ctime``/``mtime`` and integral ``ino``/``size``
        options: None, TagOptions, or a mapping; only a bool "weak" is read

    Returns:
        Quoted tag, prefixed with W/ when weak

    Raises:
        InvalidArgumentError: If entity is None or of an unsupported type

    Example:
        >>> generate_tag("")
        '"0-2jmj7l5rSw0yVb/vlWAYkK/YBwk"'
        >>> generate_tag(b"", {"weak": True})
        'W/"0-2jmj7l5rSw0yVb/vlWAYkK/YBwk"'
    """
    classification = classify(entity, options)
    body = generate_body(classification.entity)
    return format_tag(body, weak=classification.weak)
