"""
Quality Module

Quality gates for generated blog content: structural, readability,
coherence and technical checks plus source liveness.
"""

from .content import BlogContent, BlogSection, Source, RealWorldExample, load_blog
from .checks import CheckResult
from .sources import SourceChecker, SourceValidation
from .gate import QualityGate, QualityReport

__all__ = [
    "BlogContent",
    "BlogSection",
    "Source",
    "RealWorldExample",
    "load_blog",
    "CheckResult",
    "SourceChecker",
    "SourceValidation",
    "QualityGate",
    "QualityReport",
]
