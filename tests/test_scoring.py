"""Tests for the weighted score calculator and the risk classifier."""
from decimal import Decimal

import pytest

from pulse.errors import InvalidInput
from pulse.models import Question, RiskLevel, SurveyResponse
from pulse.scoring.risk_classifier import classify_risk
from pulse.scoring.utils import exact_decimal, mean, to_decimal
from pulse.scoring.weighted_score import WeightedScoreCalculator, calculate_total_score


def _responses(*pairs):
    return [SurveyResponse(question_id=qid, score=score) for qid, score in pairs]


class TestWeightedScore:
    """Tests for WeightedScoreCalculator."""

    calc = WeightedScoreCalculator()

    def test_equal_weights_low_risk(self, two_questions):
        result = self.calc.calculate(_responses(("q1", 5), ("q2", 3)), two_questions)
        assert result.total_score == Decimal("4.0")
        assert classify_risk(result.total_score) == RiskLevel.LOW

    def test_equal_weights_high_risk(self, two_questions):
        result = self.calc.calculate(_responses(("q1", 2), ("q2", 2)), two_questions)
        assert result.total_score == Decimal("2.0")
        assert classify_risk(result.total_score) == RiskLevel.HIGH

    def test_weights_scale_contribution(self):
        catalog = [
            Question(id="a", weight=3.0),
            Question(id="b", weight=1.0),
        ]
        # (5*3 + 1*1) / 4 = 4.0
        result = self.calc.calculate(_responses(("a", 5), ("b", 1)), catalog)
        assert result.total_score == Decimal("4.0")
        assert result.weighted_sum == Decimal("16.0")
        assert result.total_weight == Decimal("4.0")

    def test_rounds_half_up_to_one_decimal(self, two_questions):
        # 8.5 / 2 = 4.25
        result = self.calc.calculate(_responses(("q1", 4.5), ("q2", 4.0)), two_questions)
        assert result.total_score == Decimal("4.3")

    def test_unmatched_response_dropped_from_numerator(self, two_questions):
        result = self.calc.calculate(_responses(("q1", 5), ("q9", 5)), two_questions)
        assert result.total_score == Decimal("2.5")
        assert result.answered_count == 1
        assert result.unmatched_question_ids == ["q9"]

    def test_partial_submission_scores_lower(self, two_questions):
        full = self.calc.calculate(_responses(("q1", 4), ("q2", 4)), two_questions)
        partial = self.calc.calculate(_responses(("q1", 4)), two_questions)
        assert full.total_score == Decimal("4.0")
        assert partial.total_score == Decimal("2.0")

    def test_five_question_catalog(self):
        catalog = [
            Question(id=str(i), weight=w)
            for i, w in enumerate([1.2, 1.0, 1.1, 1.0, 1.3], start=1)
        ]
        result = self.calc.calculate(_responses(*[(str(i), 3) for i in range(1, 6)]), catalog)
        assert result.total_score == Decimal("3.0")

    def test_empty_responses_rejected(self, two_questions):
        with pytest.raises(InvalidInput):
            self.calc.calculate([], two_questions)

    def test_empty_catalog_rejected(self):
        with pytest.raises(InvalidInput):
            self.calc.calculate(_responses(("q1", 3)), [])

    def test_duplicate_catalog_ids_rejected(self):
        catalog = [Question(id="q1"), Question(id="q1")]
        with pytest.raises(InvalidInput, match="Duplicate"):
            self.calc.calculate(_responses(("q1", 3)), catalog)

    def test_non_positive_weight_rejected(self):
        catalog = [Question.model_construct(id="q1", text="", category="", weight=0.0, is_active=True)]
        with pytest.raises(InvalidInput, match="non-positive"):
            self.calc.calculate(_responses(("q1", 3)), catalog)

    def test_to_dict(self, two_questions):
        data = self.calc.calculate(_responses(("q1", 5), ("q2", 3)), two_questions).to_dict()
        assert data["total_score"] == 4.0
        assert data["answered_count"] == 2
        assert data["unmatched_question_ids"] == []

    def test_calculate_total_score_returns_float(self, two_questions):
        total = calculate_total_score(_responses(("q1", 5), ("q2", 3)), two_questions)
        assert total == 4.0
        assert isinstance(total, float)


class TestRiskClassifier:
    """Tests for classify_risk boundaries."""

    @pytest.mark.parametrize("score,expected", [
        (5.0, RiskLevel.LOW),
        (4.0, RiskLevel.LOW),
        (3.99, RiskLevel.MEDIUM),
        (2.5, RiskLevel.MEDIUM),
        (2.49, RiskLevel.HIGH),
        (0.0, RiskLevel.HIGH),
        (-1.0, RiskLevel.HIGH),
        (100.0, RiskLevel.LOW),
    ])
    def test_boundaries(self, score, expected):
        assert classify_risk(score) == expected

    def test_accepts_decimal_and_int(self):
        assert classify_risk(Decimal("4.0")) == RiskLevel.LOW
        assert classify_risk(3) == RiskLevel.MEDIUM


class TestDecimalUtils:
    """Tests for scoring utilities."""

    def test_to_decimal_half_up(self):
        assert to_decimal(2.45, 1) == Decimal("2.5")
        assert to_decimal(Decimal("2.35"), 1) == Decimal("2.4")

    def test_to_decimal_default_places(self):
        assert to_decimal(1) == Decimal("1.0000")

    def test_exact_decimal_keeps_float_repr(self):
        assert exact_decimal(1.1) == Decimal("1.1")

    def test_mean(self):
        assert mean([]) == 0.0
        assert mean([1.0, 2.0, 3.0]) == 2.0
