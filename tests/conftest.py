# tests/conftest.py
"""Shared test fixtures and helpers.

Fixtures:
- stat_like: factory for hand-built stat-shaped records
- real_stat: os.stat_result of a temporary file with known contents

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import os
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings


@dataclass
class StatRecord:
    """Hand-built stat-like record (the structural shape, not os.stat_result)."""

    size: int
    mtime: datetime
    ctime: datetime
    ino: int


@pytest.fixture
def stat_like() -> Callable[..., StatRecord]:
    """Factory for StatRecord with sensible defaults."""

    def _make(
        *,
        size: int = 26,
        mtime: datetime | None = None,
        ctime: datetime | None = None,
        ino: int = 1234,
    ) -> StatRecord:
        mtime = mtime or datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=UTC)
        return StatRecord(size=size, mtime=mtime, ctime=ctime or mtime, ino=ino)

    return _make


@pytest.fixture
def real_stat(tmp_path: Path) -> os.stat_result:
    path = tmp_path / "index.html"
    path.write_bytes(b"<html>hello</html>")
    return os.stat(path)


# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
