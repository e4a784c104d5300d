"""Core data models shared across l10ncheck components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class SourceFile:
    """A scanned source file, keyed by its project-relative POSIX path."""

    path: str
    content: str


class SourceCorpus:
    """Immutable, ordered collection of source files searched for usages."""

    def __init__(self, files: Iterable[SourceFile] = ()) -> None:
        self._files: Tuple[SourceFile, ...] = tuple(files)

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[str, str]]) -> "SourceCorpus":
        return cls(SourceFile(path=path, content=content) for path, content in pairs)

    @property
    def files(self) -> Tuple[SourceFile, ...]:
        return self._files

    def __iter__(self) -> Iterator[SourceFile]:
        return iter(self._files)

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        return f"SourceCorpus({len(self._files)} files)"


@dataclass(frozen=True)
class Fragment:
    """One prefix/gap/suffix decomposition of a message identifier."""

    prefix: str
    gap: Tuple[str, ...]
    suffix: str
    start: int
    end: int


@dataclass(frozen=True)
class MatchLocation:
    """First place a dynamic construction pattern was confirmed."""

    path: str
    line: int

    def __str__(self) -> str:
        return f"{self.path}:{self.line}"


class UsageStatus(str, Enum):
    USED = "used"
    DYNAMIC = "dynamic"
    UNUSED = "unused"


@dataclass(frozen=True)
class Classification:
    """Outcome of checking a single message identifier."""

    message_id: str
    status: UsageStatus
    location: Optional[MatchLocation] = None


@dataclass
class CheckReport:
    """Partition of the declared identifiers into used, dynamic and unused."""

    catalog: str
    declared: List[str]
    files_scanned: int
    search_roots: List[str]
    used: List[str] = field(default_factory=list)
    dynamic: List[Classification] = field(default_factory=list)
    unused: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.unused

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1
