"""Weighted survey score calculator.

Formula
-------
  total = round( Σ score_i × weight(q_i) / Σ weight(q) for q in catalog , 1 )

The denominator is always the full catalog weight, independent of which
questions were answered, so partial submissions score proportionally
lower. Responses referencing a question missing from the catalog
contribute nothing to the numerator.

Arithmetic is Decimal throughout, so the result is invariant under
reordering of the responses.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Sequence

import structlog

from pulse.errors import InvalidInput
from pulse.models.survey import Question, SurveyResponse
from pulse.scoring.utils import exact_decimal, to_decimal

logger = structlog.get_logger(__name__)

SCORE_PLACES: int = 1


@dataclass
class WeightedScoreResult:
    """Weighted score with its intermediate sums."""

    total_score: Decimal
    weighted_sum: Decimal
    total_weight: Decimal
    answered_count: int
    unmatched_question_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "total_score": float(self.total_score),
            "weighted_sum": float(self.weighted_sum),
            "total_weight": float(self.total_weight),
            "answered_count": self.answered_count,
            "unmatched_question_ids": list(self.unmatched_question_ids),
        }


def _catalog_weights(catalog: Sequence[Question]) -> Dict[str, Decimal]:
    if not catalog:
        raise InvalidInput("Question catalog is empty")
    weights: Dict[str, Decimal] = {}
    for question in catalog:
        if question.id in weights:
            raise InvalidInput(f"Duplicate question id in catalog: {question.id}")
        weight = exact_decimal(question.weight)
        if weight <= 0:
            raise InvalidInput(
                f"Question {question.id} has non-positive weight {question.weight}"
            )
        weights[question.id] = weight
    return weights


class WeightedScoreCalculator:
    """Compute the normalized weighted score of one submission.

    Stateless; one instance may be shared across threads.
    """

    def calculate(
        self,
        responses: Sequence[SurveyResponse],
        catalog: Sequence[Question],
    ) -> WeightedScoreResult:
        """Calculate the weighted score.

        Args:
            responses: Non-empty answers of one submission.
            catalog: Full question catalog, all weights > 0.

        Returns:
            WeightedScoreResult rounded half-up to one decimal.

        Raises:
            InvalidInput: Empty responses, empty catalog or a non-positive weight.
        """
        if not responses:
            raise InvalidInput("Survey responses are empty")
        weights = _catalog_weights(catalog)

        numerator = Decimal(0)
        unmatched: List[str] = []
        answered = 0
        for response in responses:
            weight = weights.get(response.question_id)
            if weight is None:
                unmatched.append(response.question_id)
                continue
            numerator += exact_decimal(response.score) * weight
            answered += 1

        denominator = sum(weights.values(), Decimal(0))
        total = to_decimal(numerator / denominator, SCORE_PLACES)

        result = WeightedScoreResult(
            total_score=total,
            weighted_sum=numerator,
            total_weight=denominator,
            answered_count=answered,
            unmatched_question_ids=sorted(unmatched),
        )
        if unmatched:
            logger.warning("unmatched_responses_dropped", question_ids=result.unmatched_question_ids)
        logger.debug("weighted_score_calculated", **result.to_dict())
        return result


_default_calculator = WeightedScoreCalculator()


def calculate_total_score(
    responses: Sequence[SurveyResponse],
    catalog: Sequence[Question],
) -> float:
    """Convenience wrapper returning the rounded total as a float."""
    return float(_default_calculator.calculate(responses, catalog).total_score)
