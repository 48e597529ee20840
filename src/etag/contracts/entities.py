# src/etag/contracts/entities.py
"""Entity variants accepted by the tag generator.

Callers either hand over raw content (text or bytes) or a filesystem
metadata descriptor. Both are expressed as explicit frozen variants so the
choice is made at construction time rather than guessed from shape:

    from etag.contracts import Content, MetadataDescriptor

    Content.from_text("hello world")
    MetadataDescriptor.from_stat_result(os.stat(path))

Plain str/bytes and stat objects are still accepted by generate_tag(); the
classifier converts them into these variants.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_MS = timedelta(milliseconds=1)
_NS_PER_MS = 1_000_000


def _as_int(value: Any) -> int | None:
    """Integer value of a size or inode field, or None if it is not one.

    Integral floats (26.0) are accepted. bool is an int subclass but
    never a size or inode.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _is_strict_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _field(obj: Any, name: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def datetime_to_ms(value: datetime) -> int:
    """Milliseconds since the Unix epoch, floored.

    Naive datetimes are assumed UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    return (value - _EPOCH) // _ONE_MS


def is_stat_like(obj: Any) -> bool:
    """Check whether obj exposes the stat descriptor capability.

    The shape is: ``ctime`` and ``mtime`` as datetimes, ``ino`` and
    ``size`` as integral numbers. Fields are read as attributes, or as
    keys when obj is a mapping, so a hand-built dict record qualifies as
    well as an object from a filesystem library. Non-integral floats are
    rejected.
    """
    return (
        isinstance(_field(obj, "ctime"), datetime)
        and isinstance(_field(obj, "mtime"), datetime)
        and _as_int(_field(obj, "ino")) is not None
        and _as_int(_field(obj, "size")) is not None
    )


@dataclass(frozen=True, slots=True)
class Content:
    """Raw representation bytes to be hashed.

    Text is stored UTF-8 encoded so the length prefix counts bytes, not
    characters.
    """

    data: bytes

    def __post_init__(self) -> None:
        if not isinstance(self.data, bytes):
            raise TypeError(f"Content.data must be bytes, got {type(self.data).__name__}")

    def __len__(self) -> int:
        return len(self.data)

    @classmethod
    def from_text(cls, text: str) -> Content:
        return cls(text.encode("utf-8"))

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Content:
        return cls(bytes(data))


@dataclass(frozen=True, slots=True)
class MetadataDescriptor:
    """Filesystem metadata used as a cheap proxy for content identity.

    Only size and mtime_ms feed the tag. ino and ctime_ms are carried for
    callers that want them but are ignored by generation.

    Attributes:
        size: File size in bytes
        mtime_ms: Modification time in whole milliseconds since the epoch
        ino: Inode number, if known
        ctime_ms: Change time in whole milliseconds since the epoch, if known
    """

    size: int
    mtime_ms: int
    ino: int | None = None
    ctime_ms: int | None = None

    def __post_init__(self) -> None:
        if not _is_strict_int(self.size):
            raise TypeError(f"size must be int, got {type(self.size).__name__}")
        if not _is_strict_int(self.mtime_ms):
            raise TypeError(f"mtime_ms must be int, got {type(self.mtime_ms).__name__}")

    @classmethod
    def from_stat_result(cls, stat: os.stat_result) -> MetadataDescriptor:
        """Build from a native os.stat_result.

        Uses the nanosecond fields so no float rounding creeps into the
        millisecond value.
        """
        return cls(
            size=stat.st_size,
            mtime_ms=stat.st_mtime_ns // _NS_PER_MS,
            ino=stat.st_ino,
            ctime_ms=stat.st_ctime_ns // _NS_PER_MS,
        )

    @classmethod
    def from_stat_like(cls, obj: Any) -> MetadataDescriptor:
        """Build from any object passing is_stat_like().

        Raises:
            TypeError: If obj does not have the stat-like shape
        """
        if not is_stat_like(obj):
            raise TypeError(f"{type(obj).__name__} is not stat-like (needs ctime, mtime, ino, size)")
        return cls(
            size=_as_int(_field(obj, "size")),
            mtime_ms=datetime_to_ms(_field(obj, "mtime")),
            ino=_as_int(_field(obj, "ino")),
            ctime_ms=datetime_to_ms(_field(obj, "ctime")),
        )
