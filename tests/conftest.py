from __future__ import annotations

from pathlib import Path

import pytest

from l10ncheck.models import SourceCorpus
from tests._fixtures.project_builder import ProjectBuilder


@pytest.fixture
def project_builder(tmp_path: Path) -> ProjectBuilder:
    """Provide a reusable project builder rooted at the pytest tmp_path."""
    return ProjectBuilder(tmp_path)


@pytest.fixture
def make_corpus():
    """Build an in-memory corpus from `(path, content)` pairs."""

    def _make(*pairs: tuple[str, str]) -> SourceCorpus:
        return SourceCorpus.from_pairs(pairs)

    return _make
