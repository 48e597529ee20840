# src/etag/contracts/errors.py
"""Error contracts for entity tag generation.

There is exactly one failure mode: the caller handed us something we cannot
tag. Hashing and formatting are total over validated input, so nothing past
the classifier raises.
"""

ENTITY_REQUIRED = "argument entity is required"
ENTITY_UNSUPPORTED = "argument entity must be string, bytes, or stat-like descriptor"


class InvalidArgumentError(TypeError):
    """Raised when generate_tag() receives an entity it cannot tag.

    This is a usage error to fix at the call site, not a transient
    condition. Subclasses TypeError so callers that already guard
    against type misuse keep working.

    Messages:
    - ENTITY_REQUIRED: entity was None
    - ENTITY_UNSUPPORTED: entity is neither content nor a stat descriptor
    """

    pass
