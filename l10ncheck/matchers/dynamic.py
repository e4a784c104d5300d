"""Detection of message identifiers assembled at runtime.

An identifier such as ``pdfjs-editor-stamp-added-alert`` may never appear as
a literal because the source builds it with a template literal like
``pdfjs-editor-${editorType}-added-alert``. The matcher tries every way of
splitting the identifier's dash-separated components into a fixed prefix, a
variable gap of one or more components and a (possibly empty) fixed suffix,
then looks for a file where the prefix is immediately followed by the
interpolation marker and the suffix occurs anywhere in the same file.
"""

from __future__ import annotations

from typing import Iterator, Optional, Tuple

from ..config import DEFAULT_INTERPOLATION_MARKER, DEFAULT_MIN_FRAGMENT_LENGTH
from ..logging import get_logger
from ..models import Fragment, MatchLocation, SourceCorpus, SourceFile

logger = get_logger("matchers.dynamic")


def iter_fragments(message_id: str, min_length: int = DEFAULT_MIN_FRAGMENT_LENGTH) -> Iterator[Fragment]:
    """Yield decompositions ordered by prefix end, then suffix start.

    Fragments whose prefix, or non-empty suffix, is shorter than
    ``min_length`` are skipped. An empty suffix is always allowed.
    """
    parts = message_id.split("-")
    count = len(parts)
    # i = end of prefix (exclusive), j = start of suffix (inclusive)
    for i in range(1, count):
        prefix = "-".join(parts[:i]) + "-"
        if len(prefix) < min_length:
            continue
        for j in range(i + 1, count + 1):
            suffix = "-" + "-".join(parts[j:]) if j < count else ""
            if suffix and len(suffix) < min_length:
                continue
            yield Fragment(prefix=prefix, gap=tuple(parts[i:j]), suffix=suffix, start=i, end=j)


def line_number(content: str, offset: int) -> int:
    """Return the 1-based line containing ``offset``."""
    return content.count("\n", 0, offset) + 1


class DynamicUsageMatcher:
    """Looks for template-literal construction of identifiers missed literally."""

    def __init__(
        self,
        min_fragment_length: int = DEFAULT_MIN_FRAGMENT_LENGTH,
        marker: str = DEFAULT_INTERPOLATION_MARKER,
    ) -> None:
        if min_fragment_length < 1:
            raise ValueError("min_fragment_length must be positive")
        if not marker:
            raise ValueError("marker must be a non-empty string")
        self.min_fragment_length = min_fragment_length
        self.marker = marker

    def iter_candidates(
        self, message_id: str, corpus: SourceCorpus
    ) -> Iterator[Tuple[Fragment, SourceFile, int]]:
        """Yield ``(fragment, file, offset)`` for every satisfying pair, lazily.

        ``offset`` is the index of the first ``prefix + marker`` occurrence in
        the file. Suffix containment is file-wide and not tied to that offset.
        """
        for fragment in iter_fragments(message_id, self.min_fragment_length):
            needle = fragment.prefix + self.marker
            for source in corpus:
                offset = source.content.find(needle)
                if offset < 0:
                    continue
                if fragment.suffix and fragment.suffix not in source.content:
                    continue
                yield fragment, source, offset

    def find_location(self, message_id: str, corpus: SourceCorpus) -> Optional[MatchLocation]:
        """Return where the first satisfying candidate was found, if any."""
        for fragment, source, offset in self.iter_candidates(message_id, corpus):
            location = MatchLocation(path=source.path, line=line_number(source.content, offset))
            logger.debug(
                "%s matched prefix %r suffix %r at %s",
                message_id,
                fragment.prefix,
                fragment.suffix,
                location,
            )
            return location
        return None
