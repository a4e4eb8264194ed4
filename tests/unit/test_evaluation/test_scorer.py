"""
Unit tests for AnswerScorer.
"""

from unittest.mock import patch

import pytest

from interview_eval.core.config import EvaluationConfig
from interview_eval.evaluation.scorer import AnswerScorer, KeywordSource, Verdict, round_half_up


class TestShortAnswerPenalty:
    """Test cases for the short-answer dampener."""

    def setup_method(self):
        self.scorer = AnswerScorer()

    @pytest.mark.parametrize("words,factor", [
        (0, 0.2), (9, 0.2), (10, 0.5), (19, 0.5), (20, 0.8), (29, 0.8), (30, 1.0), (200, 1.0),
    ])
    def test_bands(self, words, factor):
        assert self.scorer.short_answer_penalty(words) == factor


class TestDetermineVerdict:
    """Test cases for verdict thresholds."""

    def setup_method(self):
        self.scorer = AnswerScorer()

    @pytest.mark.parametrize("score,keyword_percent,verdict", [
        (70, 70, Verdict.STRONG_HIRE),
        (100, 69, Verdict.HIRE),
        (55, 50, Verdict.HIRE),
        (54, 100, Verdict.LEAN_HIRE),
        (50, 40, Verdict.LEAN_HIRE),
        (40, 35, Verdict.LEAN_HIRE),
        (39, 100, Verdict.LEAN_NO_HIRE),
        (25, 20, Verdict.LEAN_NO_HIRE),
        (24, 100, Verdict.NO_HIRE),
        (100, 19, Verdict.NO_HIRE),
        (0, 0, Verdict.NO_HIRE),
    ])
    def test_thresholds(self, score, keyword_percent, verdict):
        assert self.scorer.determine_verdict(score, keyword_percent) == verdict

    def test_monotonic_in_score_and_coverage(self):
        for keyword_percent in range(0, 101, 5):
            ranks = [self.scorer.determine_verdict(s, keyword_percent).rank for s in range(101)]
            assert ranks == sorted(ranks, reverse=True)
        for score in range(0, 101, 5):
            ranks = [self.scorer.determine_verdict(score, k).rank for k in range(101)]
            assert ranks == sorted(ranks, reverse=True)

    def test_verdict_order(self):
        assert [v.rank for v in Verdict] == [0, 1, 2, 3, 4]
        assert Verdict.LEAN_NO_HIRE.label == "Lean No Hire"
        assert Verdict.HIRE.is_positive
        assert not Verdict.LEAN_HIRE.is_positive


class TestScore:
    """Test cases for the full scoring pass."""

    def setup_method(self):
        self.scorer = AnswerScorer()

    def test_round_half_up(self):
        assert round_half_up(49.5) == 50
        assert round_half_up(50.5) == 51
        assert round_half_up(0.49) == 0

    def test_empty_candidate_scores_zero(self, reference_answer):
        breakdown = self.scorer.score("", reference_answer, ["api", "rest"])
        assert breakdown.score == 0
        assert breakdown.verdict == Verdict.NO_HIRE
        assert breakdown.covered_terms == []
        assert breakdown.missed_terms == ["api", "rest"]

    def test_full_coverage_long_answer(self, strong_answer, reference_answer):
        breakdown = self.scorer.score(
            strong_answer, reference_answer, ["microservices", "scalability", "load balancer"]
        )
        assert breakdown.keyword_coverage == 1.0
        assert breakdown.length_score == 1.0
        assert breakdown.short_answer_penalty == 1.0
        assert breakdown.score >= 80
        assert breakdown.verdict in (Verdict.STRONG_HIRE, Verdict.HIRE)
        assert breakdown.keyword_source == KeywordSource.CURATED

    def test_partial_coverage_is_lean_hire(self):
        candidate = "kafka partitions " + " ".join(["lorem"] * 43)
        keywords = ["kafka", "partitions", "zookeeper", "idempotency", "backpressure"]

        with patch.object(self.scorer, 'word_overlap', return_value=0.3):
            breakdown = self.scorer.score(candidate, "reference", keywords)

        assert breakdown.candidate_word_count == 45
        assert breakdown.keyword_percent == pytest.approx(40.0)
        assert breakdown.score == 50
        assert breakdown.verdict == Verdict.LEAN_HIRE

    def test_short_answer_cannot_score_high(self, reference_answer):
        breakdown = self.scorer.score("Kubernetes Docker AWS", reference_answer, ["kubernetes", "docker", "aws"])
        assert breakdown.keyword_coverage == 1.0
        assert breakdown.score <= 20

    def test_keywords_derived_when_missing(self, strong_answer, reference_answer):
        for keywords in (None, []):
            breakdown = self.scorer.score(strong_answer, reference_answer, keywords)
            assert breakdown.keyword_source == KeywordSource.DERIVED
            assert breakdown.keyword_count > 0

    def test_no_keywords_at_all(self):
        breakdown = self.scorer.score("it depends on the situation really", "it depends", None)
        assert breakdown.keyword_coverage == 0.0
        assert breakdown.keyword_count == 0

    def test_score_bounds_and_determinism(self, strong_answer, reference_answer):
        first = self.scorer.score(strong_answer, reference_answer)
        second = self.scorer.score(strong_answer, reference_answer)
        assert 0 <= first.score <= 100
        assert first == second

    def test_word_overlap_capped(self):
        words = ["cache", "latency", "throughput"]
        assert self.scorer.word_overlap(words, words) == 1.0
        assert self.scorer.word_overlap([], words) == 0.0

    def test_overlap_target_is_fraction_of_reference(self):
        reference = [f"term{i}" for i in range(50)]
        # target is 10 words; a candidate word counts once however many reference words it resembles
        assert self.scorer.word_overlap(["term1"], reference) == pytest.approx(0.1)

    def test_custom_weights(self, strong_answer, reference_answer):
        scorer = AnswerScorer(EvaluationConfig(keyword_weight=100, overlap_weight=0, length_weight=0))
        breakdown = scorer.score(strong_answer, reference_answer, ["microservices", "kafka"])
        assert breakdown.score == 50

    def test_malformed_keywords_count_as_missed(self, strong_answer):
        breakdown = self.scorer.score(strong_answer, "", [None, 7, "microservices"])
        assert breakdown.covered_terms == ["microservices"]
        assert breakdown.missed_terms == [None, 7]

    def test_single_string_keyword(self, strong_answer):
        breakdown = self.scorer.score(strong_answer, "", "microservices")
        assert breakdown.covered_terms == ["microservices"]


class TestScoreProperties:
    """Test cases for properties that hold across inputs."""

    CANDIDATE = "kafka partitions replication consumer offsets " + " ".join(["blah"] * 40)
    COVERED = ["kafka", "partitions", "replication", "consumer", "offsets"]

    def setup_method(self):
        self.scorer = AnswerScorer()

    def test_more_covered_keywords_never_lower_score(self):
        scores = []
        for count in range(len(self.COVERED) + 1):
            keywords = ["zookeeper"] + self.COVERED[:count]
            breakdown = self.scorer.score(self.CANDIDATE, "kafka consumer groups", keywords)
            assert breakdown.candidate_word_count == 45
            assert breakdown.missed_terms == ["zookeeper"]
            scores.append(breakdown.score)

        assert scores == sorted(scores)
        assert scores[-1] > scores[0]

    def test_covering_fixed_keywords_never_lowers_score(self):
        keywords = self.COVERED
        scores = []
        for count in range(len(keywords) + 1):
            candidate = " ".join(keywords[:count] + ["blah"] * (45 - count))
            with patch.object(self.scorer, 'word_overlap', return_value=0.3):
                breakdown = self.scorer.score(candidate, "reference", keywords)
            assert len(breakdown.covered_terms) >= count
            scores.append(breakdown.score)

        assert scores == sorted(scores)

    @pytest.mark.parametrize("candidate", [
        "",
        "Kubernetes",
        "Kubernetes Docker AWS",
        "load balancer spreads traffic across healthy instances",
        "cache hot reads and shard the database by tenant",
    ])
    def test_fewer_than_ten_words_scores_at_most_twenty(self, candidate):
        keywords = candidate.lower().split() or ["kubernetes"]
        breakdown = self.scorer.score(candidate, candidate, keywords)

        assert breakdown.candidate_word_count < 10
        assert 0 <= breakdown.score <= 20

    @pytest.mark.parametrize("candidate,reference,keywords", [
        ("", "", None),
        ("api " * 500, "api", ["api"]),
        ("microservices " * 60, "microservices scale out", ["microservices", "kafka"]),
        ("completely unrelated words about gardening and cooking " * 8, "kubernetes docker", None),
    ])
    def test_score_within_bounds(self, candidate, reference, keywords):
        breakdown = self.scorer.score(candidate, reference, keywords)
        assert 0 <= breakdown.score <= 100
