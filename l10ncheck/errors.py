"""Exception hierarchy for l10ncheck."""

from __future__ import annotations


class L10nCheckError(RuntimeError):
    """Base class for fatal errors that abort a check run."""


class ConfigError(L10nCheckError):
    """Raised when the configuration file cannot be parsed."""


class CatalogReadError(L10nCheckError):
    """Raised when the message catalog cannot be read."""


class CorpusReadError(L10nCheckError):
    """Raised when a search root or source file cannot be read."""


__all__ = ["L10nCheckError", "ConfigError", "CatalogReadError", "CorpusReadError"]
