"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Parser
from tree_sitter_language_pack import get_parser

from isucon_restruct.config import RestructureConfig
from isucon_restruct.fs import InMemoryFileSystem

_REPO_ROOT = Path(__file__).parent.parent

PROJECT_ROOT = Path("/project")
SOURCE_DIR = PROJECT_ROOT / "src"


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def rust_parser() -> Parser:
    """Return a tree-sitter parser for Rust."""
    return get_parser("rust")


@pytest.fixture
def config() -> RestructureConfig:
    return RestructureConfig()


@pytest.fixture
def make_project() -> Callable[[str], InMemoryFileSystem]:
    """Build an in-memory project whose src/main.rs holds the given source."""

    def _make(source: str) -> InMemoryFileSystem:
        return InMemoryFileSystem({SOURCE_DIR / "main.rs": source})

    return _make


@pytest.fixture
def project_root() -> Path:
    return PROJECT_ROOT


@pytest.fixture
def source_dir() -> Path:
    return SOURCE_DIR
