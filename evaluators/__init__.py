"""Evaluators package for the SONV-112 screening engine."""

from .aggregator import ScoreAggregator, aggregate
from .validity import ValidityAssessor, assess_validity
from .interpretation import InterpretationEngine, interpret
from .advice import build_flags, build_recommendations
from .scoring import evaluate_share_code, generate_screening_result

__all__ = [
    "ScoreAggregator",
    "aggregate",
    "ValidityAssessor",
    "assess_validity",
    "InterpretationEngine",
    "interpret",
    "build_flags",
    "build_recommendations",
    "evaluate_share_code",
    "generate_screening_result",
]
