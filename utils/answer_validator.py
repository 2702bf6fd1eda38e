"""
Answer map validation.

Shared by the aggregator and the codec so that both entry points reject the
same inputs: a value is valid only if it is an int (not bool) in 0-4.
"""

import logging
from typing import Any, Collection, Dict, Mapping

from models.enums import ANSWER_MAX, ANSWER_MIN
from models.errors import InvalidAnswerValue

logger = logging.getLogger(__name__)


def is_valid_answer_value(value: Any) -> bool:
    """
    Check if a value is a legal answer.

    Examples:
        >>> is_valid_answer_value(3)
        True
        >>> is_valid_answer_value(5)
        False
        >>> is_valid_answer_value(True)
        False
    """
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and ANSWER_MIN <= value <= ANSWER_MAX
    )


def validate_answer_map(
    answers: Mapping[Any, Any],
    question_ids: Collection[int],
) -> Dict[int, int]:
    """
    Keep answers for known question ids and check their values.

    Ids outside question_ids (including non-integer keys) are dropped without
    error so that answer maps survive registry changes.

    Args:
        answers: Raw answer map
        question_ids: Ids accepted by the caller

    Returns:
        New dict with known ids only

    Raises:
        InvalidAnswerValue: If a known id has an invalid value
    """
    known: Dict[int, int] = {}
    ignored = 0

    for question_id, value in answers.items():
        if isinstance(question_id, bool) or not isinstance(question_id, int) or question_id not in question_ids:
            ignored += 1
            continue
        if not is_valid_answer_value(value):
            raise InvalidAnswerValue(question_id, value)
        known[question_id] = value

    if ignored:
        logger.debug(f"Ignored {ignored} answers with unknown question ids")

    return known
