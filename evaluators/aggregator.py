"""
Score Aggregator.

Sums answers per scale and subscale, converts sums to percentages and
resolves zones. Uses round_half_up so identical answers always produce
identical results.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from models.enums import ANSWER_MAX, ANSWER_MIN
from models.registry import Registry, get_registry
from models.schemas import Question, QuestionDetail, ScaleResult, Zone
from utils.answer_validator import validate_answer_map
from utils.rounding import compute_percentage, resolve_zone

logger = logging.getLogger(__name__)


class ScoreAggregator:
    """
    Aggregates an answer map into per-scale results.

    Scoring Model (deterministic):
    - Unanswered item: contributes 0 but stays in the maximum
    - Reverse-scored item: contributes 4 - value
    - Mirrored item (inconsistency scale): contributes |value - value of the
      item it restates|, with an unanswered partner counted as 0
    - Any other item: contributes its value

    Formula per scale and subscale:
        sum = Σ item contributions
        max = 4 × number of items
        percentage = round_half_up(100 × sum / max), clamped to 0-100
        zone = the scale zone containing percentage
    """

    def __init__(self, registry: Optional[Registry] = None):
        self.registry = registry or get_registry()

    def aggregate(self, answers: Mapping) -> Dict[str, ScaleResult]:
        """
        Aggregate answers into scale results.

        Args:
            answers: Question id -> answer value (0-4); may be partial

        Returns:
            Scale key -> ScaleResult, in registry order

        Raises:
            InvalidAnswerValue: If a known question has an out-of-range value
        """
        known = validate_answer_map(answers, self.registry.questions_by_id)

        results: Dict[str, ScaleResult] = {}
        for scale in self.registry.scales.values():
            questions = [self.registry.questions_by_id[qid] for qid in scale.question_ids]

            subscales = {}
            for sub in scale.subscales:
                sub_questions = [self.registry.questions_by_id[qid] for qid in sub.question_ids]
                subscales[sub.key] = self._score(
                    sub.key, sub.name, sub_questions, sub.max_score, scale.zones, known
                )

            results[scale.key] = self._score(
                scale.key, scale.name, questions, scale.max_score, scale.zones, known, subscales
            )

        logger.debug(
            f"Aggregated {len(results)} scales from {len(known)} answers: "
            + ", ".join(f"{key}={r.percentage}%" for key, r in results.items())
        )
        return results

    def _score(
        self,
        key: str,
        name: str,
        questions: Sequence[Question],
        max_score: int,
        zones: Sequence[Zone],
        answers: Mapping[int, int],
        subscales: Optional[Dict[str, ScaleResult]] = None,
    ) -> ScaleResult:
        """Score one scale or subscale."""
        total = sum(self._item_score(q, answers) for q in questions)
        percentage = compute_percentage(total, max_score)

        return ScaleResult(
            key=key,
            name=name,
            sum=total,
            max=max_score,
            percentage=percentage,
            zone=resolve_zone(percentage, zones),
            subscales=subscales or {},
            question_details=self._question_details(questions, answers),
        )

    def _item_score(self, question: Question, answers: Mapping[int, int]) -> int:
        """Contribution of one item to its scale sum."""
        value = answers.get(question.id)
        if value is None:
            return 0

        if question.mirror_of is not None:
            return abs(value - answers.get(question.mirror_of, ANSWER_MIN))

        if question.reverse_scored:
            return ANSWER_MAX + ANSWER_MIN - value

        return value

    def _question_details(
        self,
        questions: Sequence[Question],
        answers: Mapping[int, int],
    ) -> List[QuestionDetail]:
        """Answered items by raw value, highest first; ties keep registry order."""
        answered = [q for q in questions if q.id in answers]
        answered = sorted(answered, key=lambda q: answers[q.id], reverse=True)
        return [
            QuestionDetail(question_id=q.id, question_text=q.text, answer_value=answers[q.id])
            for q in answered
        ]


def aggregate(answers: Mapping, registry: Optional[Registry] = None) -> Dict[str, ScaleResult]:
    """Aggregate answers with the given (or default) registry."""
    return ScoreAggregator(registry).aggregate(answers)


# Example scoring walkthrough (for documentation):
#
# Scale C (emotional dysregulation) has 8 items, max = 8 × 4 = 32.
# Given answers 29=3, 30=2, 32=4, 33=3 and the other four items unanswered:
#   sum = 3 + 2 + 4 + 3 + 0 + 0 + 0 + 0 = 12
#   percentage = round_half_up(100 × 12 / 32) = round_half_up(37.5) = 38
#   zone = "low" (0-39)
#
# Scale K item 15 restates item 2. Given 2=4 and 15=1:
#   contribution of 15 = |1 - 4| = 3
