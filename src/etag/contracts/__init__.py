"""Shared contracts: entity variants and the error taxonomy.

This package is a LEAF MODULE with no outbound dependencies to core, so
callers can build entities without pulling in logging or pydantic.

Import patterns:
    from etag.contracts import Content, MetadataDescriptor, InvalidArgumentError
"""

from etag.contracts.entities import (
    Content,
    MetadataDescriptor,
    datetime_to_ms,
    is_stat_like,
)
from etag.contracts.errors import (
    ENTITY_REQUIRED,
    ENTITY_UNSUPPORTED,
    InvalidArgumentError,
)

__all__ = [
    "ENTITY_REQUIRED",
    "ENTITY_UNSUPPORTED",
    "Content",
    "InvalidArgumentError",
    "MetadataDescriptor",
    "datetime_to_ms",
    "is_stat_like",
]
