# src/etag/core/__init__.py
"""Core pipeline: Classifier, Generator, Formatter, Configuration, Logging."""

from etag.core.classifier import Classification, classify
from etag.core.config import TagOptions
from etag.core.formatter import WEAK_PREFIX, format_tag
from etag.core.generator import (
    DIGEST_LENGTH,
    EMPTY_BODY,
    content_body,
    generate_body,
    metadata_body,
)
from etag.core.logging import configure_logging, get_logger
from etag.core.tag import generate_tag

__all__ = [
    "DIGEST_LENGTH",
    "EMPTY_BODY",
    "WEAK_PREFIX",
    "Classification",
    "TagOptions",
    "classify",
    "configure_logging",
    "content_body",
    "format_tag",
    "generate_body",
    "generate_tag",
    "get_logger",
    "metadata_body",
]
