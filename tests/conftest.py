"""Pytest configuration for the simplelocalization test suite.

Single Source of Truth for Hypothesis max_examples:
- dev: Local development with 200 examples (thorough property testing)
- ci: CI runs with 50 examples (fast feedback)
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- CI=true environment variable -> "ci" profile
- HYPOTHESIS_PROFILE env var -> explicit override
- Otherwise -> "dev" profile (local development)

Override manually: HYPOTHESIS_PROFILE=verbose pytest tests/

Fuzzing Test Separation:
Tests marked with @pytest.mark.fuzz are excluded from normal test runs.
Run them via: pytest -m fuzz
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable
from typing import TypeAlias
from pathlib import Path
from xml.sax.saxutils import quoteattr

import pytest
from hypothesis import HealthCheck, Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES - SINGLE SOURCE OF TRUTH
# =============================================================================

# Filesystem-backed properties reuse one tmp_path per test function.
_SUPPRESSED = [HealthCheck.function_scoped_fixture]

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    suppress_health_check=_SUPPRESSED,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
    suppress_health_check=_SUPPRESSED,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
    suppress_health_check=_SUPPRESSED,
)


def _detect_profile() -> str:
    """Detect appropriate Hypothesis profile based on execution context.

    Priority:
    1. HYPOTHESIS_PROFILE env var (explicit override)
    2. CI=true env var
    3. Default to "dev" (local development)
    """
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# FUZZING TEST SEPARATION
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register the 'fuzz' marker for intensive property tests."""
    config.addinivalue_line(
        "markers",
        "fuzz: Intensive property tests for fuzzing (excluded from normal test runs)",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip fuzz-marked tests unless explicitly requested with -m fuzz."""
    marker_expr = config.getoption("-m", default="")
    if "fuzz" in str(marker_expr):
        return

    skip_fuzz = pytest.mark.skip(reason="Fuzzing test - run with: pytest -m fuzz")
    for item in items:
        if "fuzz" in item.keywords:
            item.add_marker(skip_fuzz)


# =============================================================================
# RESOURCE FILE FIXTURES
# =============================================================================

WriteResource: TypeAlias = Callable[..., Path]


@pytest.fixture
def languages_dir(tmp_path: Path) -> Path:
    """Empty resource directory."""
    directory = tmp_path / "Languages"
    directory.mkdir()
    return directory


@pytest.fixture
def write_resource(languages_dir: Path) -> WriteResource:
    """Write ``<locale>.xml`` with the given (key, value) entries.

    Usage: ``write_resource("ru", [("HelloSentence", "Привет!")])``
    """

    def _write(locale: str, entries: Iterable[tuple[str, str]] = ()) -> Path:
        lines = ['<?xml version="1.0" encoding="utf-8"?>', "<strings>"]
        lines.extend(
            f"  <string key={quoteattr(key)} value={quoteattr(value)}/>" for key, value in entries
        )
        lines.append("</strings>")
        path = languages_dir / f"{locale}.xml"
        path.write_bytes(("\n".join(lines) + "\n").encode("utf-8"))
        return path

    return _write
