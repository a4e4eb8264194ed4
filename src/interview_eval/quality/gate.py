"""
Blog Quality Gate

Runs every quality check over a generated blog post, combines the scores
and decides whether the post may be published.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..core.config import QualityGateConfig
from ..utils.logging import get_logger, PerformanceTimer
from .checks import (
    CheckResult,
    extract_text_content,
    validate_citations,
    validate_coherence,
    validate_readability,
    validate_structure,
    validate_technical,
)
from .content import BlogContent
from .sources import SourceChecker, SourceValidation, structural_source_validation

logger = get_logger(__name__)


@dataclass
class QualityReport:
    """Outcome of the quality gate for one blog post."""
    passed: bool
    overall_score: float
    structure: CheckResult
    readability: CheckResult
    coherence: CheckResult
    technical: CheckResult
    citations: CheckResult
    sources: SourceValidation
    issues: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'passed': self.passed,
            'overall_score': self.overall_score,
            'structure': self.structure.to_dict(),
            'readability': self.readability.to_dict(),
            'coherence': self.coherence.to_dict(),
            'technical': self.technical.to_dict(),
            'citations': self.citations.to_dict(),
            'sources': self.sources.to_dict(),
            'issues': list(self.issues),
            'warnings': list(self.warnings),
        }


class QualityGate:
    """Validates blog content against configurable quality thresholds."""

    def __init__(self, config: Optional[QualityGateConfig] = None,
                 source_checker: Optional[SourceChecker] = None):
        """
        Initialize the quality gate.

        Args:
            config: Thresholds (defaults when None)
            source_checker: Checker used for source URLs; one is created
                from ``config.sources`` when None
        """
        self.config = config or QualityGateConfig()
        self.source_checker = source_checker

    async def validate(self, blog: BlogContent, question: str,
                       check_sources: Optional[bool] = None) -> QualityReport:
        """
        Validate a blog post.

        Args:
            blog: The generated content
            question: The interview question the post answers
            check_sources: Check source URLs over the network; defaults to
                ``config.sources.enabled``

        Returns:
            QualityReport
        """
        if check_sources is None:
            check_sources = self.config.sources.enabled

        with PerformanceTimer("blog quality gate", logger):
            structure = validate_structure(blog, self.config)
            readability = validate_readability(blog, self.config)
            coherence = validate_coherence(blog, question, self.config)
            technical = validate_technical(blog)
            citations = validate_citations(blog, self.config, extract_text_content(blog))

            if check_sources:
                sources = await self._check_sources(blog)
            else:
                sources = structural_source_validation(blog.sources)

        issues = []
        for check in (structure, readability, coherence, technical):
            issues.extend(check.issues)

        if len(sources.valid) < self.config.min_sources:
            issues.append(f"Insufficient valid sources: {len(sources.valid)} (need {self.config.min_sources})")
        if sources.valid_percentage < self.config.min_valid_source_percentage:
            issues.append(f"Too many invalid sources: {sources.valid_percentage * 100:.0f}% valid "
                          f"(need {self.config.min_valid_source_percentage * 100:g}%)")

        issues.extend(citations.issues)
        warnings = list(citations.details.get('warnings', []))

        scores = [structure.score, readability.score, coherence.score, technical.score]
        overall = sum(scores) / len(scores)

        passed = (
            overall >= self.config.min_overall_score
            and structure.score >= self.config.min_readability_score
            and readability.score >= self.config.min_readability_score
            and coherence.score >= self.config.min_coherence_score
            and technical.score >= self.config.min_technical_score
            and len(sources.valid) >= self.config.min_sources
        )

        report = QualityReport(
            passed=passed,
            overall_score=overall,
            structure=structure,
            readability=readability,
            coherence=coherence,
            technical=technical,
            citations=citations,
            sources=sources,
            issues=issues,
            warnings=warnings,
        )
        self._log_report(report)
        return report

    async def _check_sources(self, blog: BlogContent) -> SourceValidation:
        if self.source_checker is not None:
            return await self.source_checker.validate_sources(blog.sources)

        async with SourceChecker(self.config.sources) as checker:
            return await checker.validate_sources(blog.sources)

    def _log_report(self, report: QualityReport) -> None:
        logger.info(
            f"Quality gate {'passed' if report.passed else 'failed'}: overall={report.overall_score:.1f}, "
            f"structure={report.structure.score}, readability={report.readability.score}, "
            f"coherence={report.coherence.score}, technical={report.technical.score}, "
            f"sources={len(report.sources.valid)}/{report.sources.total}, "
            f"citations={report.citations.details.get('inline', 0)}"
        )
        for issue in report.issues:
            logger.debug(f"Quality issue: {issue}")
        for warning in report.warnings:
            logger.debug(f"Quality warning: {warning}")
