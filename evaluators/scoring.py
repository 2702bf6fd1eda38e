"""
Screening pipeline and response generation.

Runs aggregation, validity, interpretation, flags and recommendations over one
answer map and assembles the presentation-ready result.
All logic is deterministic with documented rules.
"""

import logging
from typing import Any, Mapping, Optional

from models.registry import Registry, get_registry
from models.schemas import ScreeningResult
from utils.answer_validator import validate_answer_map
from utils.cache import cache_result
from utils.codec import decode, encode

from evaluators.advice import build_flags, build_recommendations
from evaluators.aggregator import ScoreAggregator
from evaluators.interpretation import InterpretationEngine
from evaluators.validity import ValidityAssessor

logger = logging.getLogger(__name__)


def generate_screening_result(
    answers: Mapping[Any, Any],
    registry: Optional[Registry] = None,
) -> ScreeningResult:
    """
    Generate the complete screening result.

    Order:
        aggregate -> assess validity -> interpret -> flags -> recommendations -> encode

    Args:
        answers: Question id -> answer value (0-4); may be partial
        registry: Registry to score against (default: process-wide registry)

    Returns:
        ScreeningResult ready for JSON serialization

    Raises:
        InvalidAnswerValue: If a known question has an out-of-range value
    """
    registry = registry or get_registry()
    known = validate_answer_map(answers, registry.questions_by_id)

    scales = ScoreAggregator(registry).aggregate(known)
    validity = ValidityAssessor(registry).assess(scales)
    interpretation = InterpretationEngine(registry).interpret(scales, validity)
    flags = build_flags(scales, interpretation, validity)
    recommendations = build_recommendations(scales, interpretation, validity)

    present = [k for k, block in interpretation.condition_blocks.items() if block.present]
    logger.debug(
        f"Screening complete: answered={len(known)}, valid={validity.is_valid}, "
        f"present={present}, flags={len(flags)}"
    )

    return ScreeningResult(
        scales=scales,
        validity=validity,
        interpretation=interpretation,
        flags=flags,
        recommendations=recommendations,
        share_code=encode(known),
        answered_count=len(known),
        total_questions=registry.question_count,
    )


@cache_result("screening", key_prefix="code:")
def evaluate_share_code(code: str) -> ScreeningResult:
    """
    Decode a share code and run the pipeline on it.

    Results are cached by code; the default registry is fixed for the life of
    the process, so a cached result never goes stale.

    Raises:
        InvalidEncoding: If the code is malformed
    """
    return generate_screening_result(decode(code))
