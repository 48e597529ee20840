# src/etag/core/config.py
"""Caller options for tag generation.

Uses Pydantic for validation. Options are frozen (immutable) after
construction and recognise a single field, ``weak``.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, StrictBool


class TagOptions(BaseModel):
    """Options record for generate_tag().

    ``weak`` is tri-state:
    - True: always emit a weak tag (W/ prefix)
    - False: always emit a strong tag
    - None: let the entity decide (stat descriptors weak, content strong)

    Example:
        generate_tag(stat, TagOptions(weak=False))
        generate_tag(stat, {"weak": False})  # mapping form
    """

    model_config = {"frozen": True, "extra": "forbid"}

    weak: StrictBool | None = Field(
        default=None,
        description="Force weak (True) or strong (False); None derives from the entity",
    )

    @classmethod
    def coerce(cls, options: Any) -> "TagOptions":
        """Normalise the accepted option forms into a TagOptions.

        Mappings and other objects are read leniently: only a literal bool
        under "weak" is honoured, anything else (missing, None, "yes", 1)
        means unset. Other keys are ignored.
        """
        if options is None:
            return _DEFAULT_OPTIONS
        if isinstance(options, TagOptions):
            return options
        if isinstance(options, Mapping):
            weak = options.get("weak")
        else:
            weak = getattr(options, "weak", None)
        return cls(weak=weak) if isinstance(weak, bool) else _DEFAULT_OPTIONS

    def resolve_weak(self, *, is_metadata: bool) -> bool:
        """Explicit setting wins; otherwise stat descriptors are weak."""
        if self.weak is None:
            return is_metadata
        return self.weak


_DEFAULT_OPTIONS = TagOptions()
