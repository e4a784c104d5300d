"""Matchers that look for evidence of message identifier usage."""

from .dynamic import DynamicUsageMatcher, iter_fragments
from .static import StaticUsageMatcher, quoted_forms

__all__ = [
    "DynamicUsageMatcher",
    "StaticUsageMatcher",
    "iter_fragments",
    "quoted_forms",
]
