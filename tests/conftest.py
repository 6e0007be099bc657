"""Shared pytest fixtures for triangle-path tests."""

from pathlib import Path

import pytest

from triangle_path import Triangle


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def small_triangle_file(fixtures_dir: Path) -> Path:
    """Four-row example triangle from the Project Euler problem statement."""
    return fixtures_dir / "small_triangle.txt"


@pytest.fixture
def euler18_triangle_file(fixtures_dir: Path) -> Path:
    """Published 15-row triangle (Project Euler 18)."""
    return fixtures_dir / "euler18_triangle.txt"


@pytest.fixture
def malformed_triangle_file(fixtures_dir: Path) -> Path:
    """Triangle whose third row has one value too many."""
    return fixtures_dir / "malformed_triangle.txt"


# =============================================================================
# Triangle Fixtures
# =============================================================================


@pytest.fixture
def small_triangle() -> Triangle:
    """The four-row example triangle, built in memory."""
    return Triangle.from_rows([[3], [7, 4], [2, 4, 6], [8, 5, 9, 3]])


# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Clear config env vars and run from an empty working directory."""
    for var in (
        "TRIANGLE_PATH_CONFIG_PATH",
        "TRIANGLE_PATH_INPUT",
        "TRIANGLE_PATH_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path
