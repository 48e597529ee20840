# src/etag/core/classifier.py
"""Input classification: which entity variant, and weak or strong.

Validation is eager. Anything that is not content or a stat descriptor is
rejected here, before any hashing work happens.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any

import structlog

from etag.contracts.entities import Content, MetadataDescriptor, is_stat_like
from etag.contracts.errors import ENTITY_REQUIRED, ENTITY_UNSUPPORTED, InvalidArgumentError
from etag.core.config import TagOptions

# Wraps the stdlib logger so events stay silent until the application
# configures logging (unconfigured structlog prints every level).
logger = structlog.wrap_logger(logging.getLogger(__name__))

_BINARY_TYPES = (bytes, bytearray, memoryview)


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of classify(): the normalised entity plus resolved weakness."""

    entity: Content | MetadataDescriptor
    weak: bool


def _as_metadata(entity: Any) -> MetadataDescriptor | None:
    if isinstance(entity, MetadataDescriptor):
        return entity
    if isinstance(entity, os.stat_result):
        return MetadataDescriptor.from_stat_result(entity)
    if is_stat_like(entity):
        return MetadataDescriptor.from_stat_like(entity)
    return None


def _as_content(entity: Any) -> Content | None:
    if isinstance(entity, Content):
        return entity
    if isinstance(entity, str):
        return Content.from_text(entity)
    if isinstance(entity, _BINARY_TYPES):
        return Content.from_bytes(entity)
    return None


def classify(entity: Any, options: Any = None) -> Classification:
    """Decide the entity variant and whether the tag is weak.

    Stat descriptors are checked first so a stat-like object that also
    happens to be iterable or buffer-ish is still tagged by metadata.

    Args:
        entity: str, bytes-like, Content, os.stat_result,
            MetadataDescriptor, or any stat-like object
        options: TagOptions, a mapping with an optional "weak" bool, or None

    Returns:
        Classification with the normalised entity and weak flag

    Raises:
        InvalidArgumentError: If entity is None or of an unsupported type
    """
    if entity is None:
        logger.debug("etag.entity_rejected", reason="missing")
        raise InvalidArgumentError(ENTITY_REQUIRED)

    normalised: Content | MetadataDescriptor | None = _as_metadata(entity)
    if normalised is None:
        normalised = _as_content(entity)
    if normalised is None:
        logger.debug("etag.entity_rejected", reason="unsupported", entity_type=type(entity).__name__)
        raise InvalidArgumentError(ENTITY_UNSUPPORTED)

    weak = TagOptions.coerce(options).resolve_weak(is_metadata=isinstance(normalised, MetadataDescriptor))
    return Classification(entity=normalised, weak=weak)
