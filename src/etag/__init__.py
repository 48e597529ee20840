"""
etag: HTTP entity tags from content or filesystem metadata.

Produces the quoted validator placed in an ETag response header. Content
is fingerprinted with a truncated SHA-1; stat descriptors use size and
modification time.
"""

import logging

from etag.contracts import Content, InvalidArgumentError, MetadataDescriptor
from etag.core import (
    EMPTY_BODY,
    TagOptions,
    classify,
    configure_logging,
    format_tag,
    generate_body,
    generate_tag,
    get_logger,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "EMPTY_BODY",
    "Content",
    "InvalidArgumentError",
    "MetadataDescriptor",
    "TagOptions",
    "__version__",
    "classify",
    "configure_logging",
    "format_tag",
    "generate_body",
    "generate_tag",
    "get_logger",
]
