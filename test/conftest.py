"""Pytest configuration and fixtures

Provides shared fixtures for all tests: a temporary template tree builder,
a storage stub that counts reads, and a pipeline wired to both.
"""

import sys
from collections import Counter
from pathlib import Path
from typing import Callable

import pytest

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from gofr_view.config import ViewConfig
from gofr_view.logger import ConsoleLogger
from gofr_view.rendering import ViewPipeline
from gofr_view.storage import LocalTemplateStorage


class CountingStorage(LocalTemplateStorage):
    """Local storage that records every read_text() call per path."""

    def __init__(self) -> None:
        super().__init__()
        self.reads: Counter = Counter()

    def read_text(self, path: Path) -> str:
        self.reads[path] += 1
        return super().read_text(path)


# ============================================================================
# TEMPLATE TREE
# ============================================================================


@pytest.fixture
def views_root(tmp_path) -> Path:
    """Empty template root directory for one test."""
    root = tmp_path / "views"
    root.mkdir()
    return root


@pytest.fixture
def write_view(views_root) -> Callable[[str, str], Path]:
    """
    Write a template file relative to views_root.

    Usage:
        write_view("en/page.html", "{% title 'Home' %}hello")
    """

    def _write(relative_path: str, content: str) -> Path:
        path = views_root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


# ============================================================================
# PIPELINE
# ============================================================================


@pytest.fixture
def logger():
    """Get a logger instance."""
    return ConsoleLogger()


@pytest.fixture
def view_config(views_root) -> ViewConfig:
    return ViewConfig(root=str(views_root))


@pytest.fixture
def counting_storage() -> CountingStorage:
    return CountingStorage()


@pytest.fixture
def pipeline(view_config, counting_storage, logger) -> ViewPipeline:
    return ViewPipeline(view_config, logger=logger, storage=counting_storage)
