"""Shared fixtures and helpers for tests."""

from collections.abc import Callable
from pathlib import Path

import pytest
from tree_sitter import Parser

from solconv.core.ast import get_solidity_parser

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag every test as "unit"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------

ProjectFactory = Callable[[dict[str, str]], Path]


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the Solidity fixture files."""
    return _REPO_ROOT / "tests" / "fixtures"


@pytest.fixture
def solidity_parser() -> Parser:
    """Return a tree-sitter parser for Solidity."""
    return get_solidity_parser()


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """Write a Foundry-style project from a {relative path: source} mapping and return its root."""

    def _make(files: dict[str, str]) -> Path:
        for relative, source in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(source, encoding="utf-8")
        return tmp_path

    return _make
