"""Extraction of message identifiers from Fluent (.ftl) catalogs."""

from __future__ import annotations

import re
from pathlib import Path
from typing import List

from .errors import CatalogReadError
from .logging import get_logger

# Declarations start at column 0; indented lines are continuations.
_DECLARATION_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9-]*)\s*=")

logger = get_logger("catalog")


def parse_catalog(text: str) -> List[str]:
    """Return declared message identifiers in order of appearance.

    Only unindented ``identifier =`` lines count. Comments, blank lines,
    attributes, terms and continuation lines are skipped without complaint.
    Duplicates are kept.
    """
    ids: List[str] = []
    for line in text.split("\n"):
        match = _DECLARATION_PATTERN.match(line)
        if match:
            ids.append(match.group(1))
    return ids


def load_catalog(path: Path) -> List[str]:
    """Read and parse the catalog at ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogReadError(f"Unable to read catalog {path}: {exc}") from exc
    ids = parse_catalog(text)
    logger.debug("Parsed %d message IDs from %s", len(ids), path)
    return ids


__all__ = ["load_catalog", "parse_catalog"]
