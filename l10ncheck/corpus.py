"""Loading of the source corpus searched for message identifier usages."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterator, List, Sequence

from .errors import CorpusReadError
from .logging import get_logger
from .models import SourceCorpus, SourceFile

_EXCLUDED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "node_modules",
    "__pycache__",
    ".pytest_cache",
    ".mypy_cache",
    ".idea",
}

logger = get_logger("corpus")


@dataclass
class IgnoreRule:
    """Represents a gitignore-style exclude pattern from .l10ncheck.yml."""

    pattern: str
    directory_only: bool
    anchored: bool
    negate: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            if self.directory_only and rel_path.startswith(f"{self.pattern}/"):
                return True
            return False

        for part in rel_path.split("/"):
            if fnmatchcase(part, self.pattern):
                return True
        return False


def build_ignore_rule(pattern: str) -> IgnoreRule | None:
    pattern = pattern.strip()
    if not pattern or pattern.startswith("#"):
        return None

    negate = pattern.startswith("!")
    if negate:
        pattern = pattern[1:]

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return IgnoreRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        negate=negate,
        has_slash="/" in pattern,
    )


def _should_ignore(rel_path: str, is_dir: bool, rules: Sequence[IgnoreRule]) -> bool:
    ignored = False
    for rule in rules:
        if rule.matches(rel_path, is_dir):
            ignored = not rule.negate
    return ignored


class CorpusLoader:
    """Walks search roots and reads matching files into a SourceCorpus.

    Roots are visited in the order given and each directory listing is
    sorted, so the resulting corpus order is stable across platforms.
    """

    def __init__(
        self,
        extensions: Sequence[str],
        exclude_paths: Sequence[str] = (),
    ) -> None:
        self.extensions = {ext.lower() for ext in extensions}
        self.rules: List[IgnoreRule] = [
            rule for rule in (build_ignore_rule(p) for p in exclude_paths) if rule is not None
        ]

    def load(self, root: Path, search_roots: Sequence[str]) -> SourceCorpus:
        """Return the corpus for ``search_roots`` resolved under ``root``."""
        root = root.resolve()
        files: List[SourceFile] = []
        # Repeated or nested roots must not load a file twice.
        seen: set[str] = set()
        for entry in search_roots:
            base = root / entry
            if not base.exists():
                raise CorpusReadError(f"Search root not found: {base}")
            if not base.is_dir():
                raise CorpusReadError(f"Search root is not a directory: {base}")
            for path in self._iter_files(base.resolve(), root):
                rel_path = _relativize(path, root)
                if rel_path in seen:
                    continue
                seen.add(rel_path)
                files.append(SourceFile(path=rel_path, content=_read(path)))
            logger.debug("Collected %d files after scanning %s", len(files), entry)
        return SourceCorpus(files)

    def _iter_files(self, base: Path, root: Path) -> Iterator[Path]:
        def _on_error(exc: OSError) -> None:
            raise CorpusReadError(f"Unable to list {exc.filename}: {exc.strerror}") from exc

        for dirpath, dirnames, filenames in os.walk(base, onerror=_on_error):
            current_dir = Path(dirpath)
            rel_dir = _relativize(current_dir, root)
            if rel_dir == ".":
                rel_dir = ""

            kept_dirs = []
            for name in sorted(dirnames):
                if name in _EXCLUDED_DIRS:
                    continue
                if _should_ignore(_join(rel_dir, name), True, self.rules):
                    continue
                kept_dirs.append(name)
            dirnames[:] = kept_dirs

            for filename in sorted(filenames):
                if Path(filename).suffix.lower() not in self.extensions:
                    continue
                if _should_ignore(_join(rel_dir, filename), False, self.rules):
                    continue
                yield current_dir / filename


def _relativize(path: Path, root: Path) -> str:
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def _join(rel_dir: str, name: str) -> str:
    return f"{rel_dir}/{name}" if rel_dir else name


def _read(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CorpusReadError(f"Unable to read source file {path}: {exc}") from exc


__all__ = ["CorpusLoader", "IgnoreRule", "build_ignore_rule"]
