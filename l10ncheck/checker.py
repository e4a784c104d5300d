"""Check pipeline tying the catalog, corpus and matchers together."""

from __future__ import annotations

from typing import Iterable, List

from .catalog import load_catalog
from .config import CheckConfig
from .corpus import CorpusLoader
from .logging import get_logger
from .matchers import DynamicUsageMatcher, StaticUsageMatcher
from .models import CheckReport, Classification, SourceCorpus, UsageStatus
from .reporter import Reporter


class UsageChecker:
    """Classifies every catalog identifier as used, dynamic or unused."""

    def __init__(
        self,
        config: CheckConfig,
        loader: CorpusLoader | None = None,
        static_matcher: StaticUsageMatcher | None = None,
        dynamic_matcher: DynamicUsageMatcher | None = None,
        reporter: Reporter | None = None,
    ) -> None:
        self.config = config
        self.loader = loader or CorpusLoader(config.extensions, config.exclude_paths)
        self.static_matcher = static_matcher or StaticUsageMatcher()
        self.dynamic_matcher = dynamic_matcher or DynamicUsageMatcher(
            min_fragment_length=config.min_fragment_length,
            marker=config.interpolation_marker,
        )
        self.reporter = reporter or Reporter()
        self.logger = get_logger("checker")

    def run(self) -> CheckReport:
        """Load all inputs, classify every identifier and build the report."""
        self.logger.debug("Checking catalog %s", self.config.catalog_path)
        ids = load_catalog(self.config.catalog_path)
        corpus = self.loader.load(self.config.root, self.config.search_roots)
        self.logger.debug("Loaded %d message IDs and %d source files", len(ids), len(corpus))

        classifications = self.classify_all(ids, corpus)
        return self.reporter.partition(
            classifications,
            catalog=self.config.catalog_path.name,
            files_scanned=len(corpus),
            search_roots=self.config.search_roots,
        )

    def classify_all(self, ids: Iterable[str], corpus: SourceCorpus) -> List[Classification]:
        return [self.classify(message_id, corpus) for message_id in ids]

    def classify(self, message_id: str, corpus: SourceCorpus) -> Classification:
        if self.static_matcher.is_used(message_id, corpus):
            return Classification(message_id, UsageStatus.USED)
        location = self.dynamic_matcher.find_location(message_id, corpus)
        if location is not None:
            return Classification(message_id, UsageStatus.DYNAMIC, location)
        return Classification(message_id, UsageStatus.UNUSED)


__all__ = ["UsageChecker"]
