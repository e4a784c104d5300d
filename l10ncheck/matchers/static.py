"""Literal usage search for message identifiers."""

from __future__ import annotations

from typing import Tuple

from ..models import SourceCorpus

_QUOTES = ('"', "'", "`")


def quoted_forms(message_id: str) -> Tuple[str, ...]:
    """Return the identifier wrapped in double, single and back quotes."""
    return tuple(f"{quote}{message_id}{quote}" for quote in _QUOTES)


class StaticUsageMatcher:
    """Finds identifiers that appear as complete quoted string literals.

    Covers HTML attributes such as ``data-l10n-id="pdfjs-foo"`` as well as
    plain JavaScript string and template literals. This is a substring
    search, not a tokenizer.
    """

    def is_used(self, message_id: str, corpus: SourceCorpus) -> bool:
        needles = quoted_forms(message_id)
        return any(
            needle in source.content for source in corpus for needle in needles
        )
