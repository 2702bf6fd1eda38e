"""
Compact answer codec.

Serializes an answer map into a fixed-length, URL-safe share code:
1. One character per question, in id order
2. Digits "0"-"4" hold the answer value, "-" marks an unanswered question
3. The code is exactly QUESTION_COUNT characters long

decode(encode(answers)) == answers for every valid answer map restricted to
ids 0..QUESTION_COUNT-1.
"""

from typing import Any, Dict, Mapping

from config import settings
from models.enums import ANSWER_MAX, ANSWER_MIN, QUESTION_COUNT
from models.errors import InvalidEncoding
from .answer_validator import validate_answer_map


ALPHABET = "".join(str(v) for v in range(ANSWER_MIN, ANSWER_MAX + 1))
UNANSWERED = "-"


def encode(answers: Mapping[Any, Any]) -> str:
    """
    Encode answers into a share code.

    Args:
        answers: Question id -> answer value; ids outside the questionnaire are ignored

    Returns:
        QUESTION_COUNT-character string

    Raises:
        InvalidAnswerValue: If a value is not an integer in the rating range

    Examples:
        >>> encode({0: 3, 2: 0})[:4]
        '3-0-'
    """
    known = validate_answer_map(answers, range(QUESTION_COUNT))
    return "".join(
        ALPHABET[known[qid] - ANSWER_MIN] if qid in known else UNANSWERED
        for qid in range(QUESTION_COUNT)
    )


def decode(code: Any) -> Dict[int, int]:
    """
    Decode a share code into an answer map.

    Args:
        code: String produced by encode()

    Returns:
        Answer map with only the answered questions

    Raises:
        InvalidEncoding: If the code is not a string of the right length or
            contains characters outside the alphabet
    """
    if not isinstance(code, str):
        raise InvalidEncoding(f"Share code must be a string, got {type(code).__name__}")

    if len(code) != QUESTION_COUNT:
        raise InvalidEncoding(
            f"Share code must be exactly {QUESTION_COUNT} characters, got {len(code)}",
            {"length": len(code)},
        )

    answers: Dict[int, int] = {}
    for qid, char in enumerate(code):
        if char == UNANSWERED:
            continue
        position = ALPHABET.find(char)
        if position < 0:
            raise InvalidEncoding(
                f"Invalid character {char!r} at position {qid}",
                {"position": qid},
            )
        answers[qid] = ANSWER_MIN + position

    return answers


def build_share_fragment(answers: Mapping[Any, Any]) -> str:
    """
    Build the URL fragment for a share link, e.g. "r=3-0-...".
    """
    return settings.share_marker + encode(answers)


def parse_share_fragment(fragment: str) -> Dict[int, int]:
    """
    Decode a share link fragment, with or without the leading "#".

    Raises:
        InvalidEncoding: If the marker is missing or the code is malformed
    """
    if not isinstance(fragment, str):
        raise InvalidEncoding(f"Share fragment must be a string, got {type(fragment).__name__}")

    value = fragment[1:] if fragment.startswith("#") else fragment
    if not value.startswith(settings.share_marker):
        raise InvalidEncoding(f"Share fragment must start with {settings.share_marker!r}")

    return decode(value[len(settings.share_marker):])
