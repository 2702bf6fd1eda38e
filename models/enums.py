"""
Enumerations and constants for the SONV-112 screening engine.

This module defines all the fixed values used in the deterministic scoring model.
Threshold tables here are defaults; a thresholds file named in settings can
override them (see models/registry.py).
"""

from enum import Enum
from typing import Dict, List, Tuple


class ZoneKey(str, Enum):
    """Zone identifiers, lowest severity first."""
    LOW = "low"
    MODERATE = "moderate"
    ELEVATED = "elevated"
    HIGH = "high"


class Confidence(str, Enum):
    """Confidence of a condition conclusion."""
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class WarningType(str, Enum):
    """Severity of a validity warning."""
    CRITICAL = "critical"
    MODERATE = "moderate"


class ConditionKey(str, Enum):
    """Conditions evaluated by the interpretation engine, in report order."""
    ADHD = "adhd"
    ASD = "asd"
    DYSLEXIA = "dyslexia"
    DYSCALCULIA = "dyscalculia"
    DYSPRAXIA = "dyspraxia"


# Questionnaire shape - changing either breaks previously shared codes
QUESTION_COUNT: int = 112
ANSWER_MIN: int = 0
ANSWER_MAX: int = 4

# Answer scale descriptions
ANSWER_SCALE: Dict[int, str] = {
    0: "Never / Not about me at all",
    1: "Rarely",
    2: "Sometimes",
    3: "Often",
    4: "Almost always / Very much about me",
}

# Scale keys in registry order
SUBSTANTIVE_SCALE_KEYS: List[str] = ["A", "B", "C", "D", "E", "F", "G", "H", "I", "J"]
CONTROL_SCALE_KEYS: List[str] = ["L", "M", "K", "N"]
SCALE_KEYS: List[str] = SUBSTANTIVE_SCALE_KEYS + CONTROL_SCALE_KEYS

# Zone bands for substantive scales and their subscales (percentages)
TRAIT_ZONES: List[Tuple[int, int, ZoneKey, str, str, str]] = [
    (0, 39, ZoneKey.LOW, "Typical range", "🟢", "zone-green"),
    (40, 59, ZoneKey.MODERATE, "Mild traits", "🟡", "zone-yellow"),
    (60, 79, ZoneKey.ELEVATED, "Pronounced traits", "🟠", "zone-orange"),
    (80, 100, ZoneKey.HIGH, "Strongly pronounced", "🔴", "zone-red"),
]

# Control scale zone labels; bands are derived from VALIDITY_THRESHOLDS
CONTROL_ZONE_STYLES: List[Tuple[ZoneKey, str, str, str]] = [
    (ZoneKey.LOW, "Normal", "🟢", "zone-green"),
    (ZoneKey.MODERATE, "Elevated", "🟡", "zone-yellow"),
    (ZoneKey.HIGH, "High", "🔴", "zone-red"),
]

# Validity thresholds per control scale (percentage, inclusive lower bounds)
#
# L: 4 items, max 16  -> moderate from 8/16, critical from 12/16
# M: 3 items, max 12  -> moderate from 3/12, critical from 6/12
# K: 3 pairs, max 12  -> moderate from 5/12, critical from 8/12
# N: 4 items, max 16  -> moderate from 12/16, critical from 14/16
VALIDITY_THRESHOLDS: Dict[str, Dict[str, int]] = {
    "L": {"moderate": 50, "critical": 75},
    "M": {"moderate": 25, "critical": 50},
    "K": {"moderate": 40, "critical": 65},
    "N": {"moderate": 70, "critical": 85},
}

# Condition table: governing scales and presence cut-off (percentage)
CONDITION_SCALES: Dict[ConditionKey, Tuple[str, ...]] = {
    ConditionKey.ADHD: ("A", "B"),
    ConditionKey.ASD: ("D", "E", "F"),
    ConditionKey.DYSLEXIA: ("H",),
    ConditionKey.DYSCALCULIA: ("I",),
    ConditionKey.DYSPRAXIA: ("J",),
}

CONDITION_THRESHOLDS: Dict[str, Dict[str, int]] = {
    ConditionKey.ADHD.value: {"cut": 60, "borderline_band": 10},
    ConditionKey.ASD.value: {"cut": 60, "borderline_band": 10},
    ConditionKey.DYSLEXIA.value: {"cut": 60, "borderline_band": 10},
    ConditionKey.DYSCALCULIA.value: {"cut": 60, "borderline_band": 10},
    ConditionKey.DYSPRAXIA.value: {"cut": 60, "borderline_band": 10},
}

# Share of components at/above the cut needed for "uniform" agreement
HIGH_AGREEMENT_RATIO: float = 0.75

CONFIDENCE_LABELS: Dict[Confidence, str] = {
    Confidence.LOW: "low confidence",
    Confidence.MODERATE: "moderate confidence",
    Confidence.HIGH: "high confidence",
}
