"""
Flags and recommendations.

Both are rule tables in models/templates.py; this module matches rules against
scale results, the interpretation and validity, in table order.
"""

import logging
from typing import Dict, Iterable, List, Mapping

from models.enums import CONFIDENCE_LABELS, ConditionKey, WarningType
from models.schemas import (
    Flag,
    InterpretationResult,
    Recommendations,
    ScaleResult,
    ValidityResult,
)
from models.templates import (
    BASE_DO,
    BASE_DONT,
    COMORBIDITY_SPECIALIST_NOTE,
    CONDITION_DO,
    CONDITION_DONT,
    FLAG_RULES,
    INVALID_RECOMMENDATIONS,
    SPECIALIST_NOTE,
    SUMMARY_STATUS,
    VALIDITY_SPECIALIST_NOTE,
)

from evaluators.interpretation import lookup_result

logger = logging.getLogger(__name__)


def _dedupe(items: Iterable[str]) -> List[str]:
    """Drop repeats, keeping first occurrence order."""
    return list(dict.fromkeys(items))


def _rule_matches(
    rule: Dict,
    scale_results: Mapping[str, ScaleResult],
    present: List[str],
    validity: ValidityResult,
) -> bool:
    for source, minimum in rule.get("scales", {}).items():
        result = lookup_result(scale_results, source)
        if result is None or result.percentage < minimum:
            return False

    if any(condition.value not in present for condition in rule.get("present", [])):
        return False

    if any(condition.value in present for condition in rule.get("absent", [])):
        return False

    if len(present) < rule.get("min_present", 0):
        return False

    if rule.get("validity_moderate") and not any(
        w.type == WarningType.MODERATE for w in validity.warnings
    ):
        return False

    return True


def build_flags(
    scale_results: Mapping[str, ScaleResult],
    interpretation: InterpretationResult,
    validity: ValidityResult,
) -> List[Flag]:
    """
    Collect attention flags.

    Args:
        scale_results: Aggregator output
        interpretation: Interpretation of the same results
        validity: Validity assessment

    Returns:
        Matching flags in rule order; empty when validity failed
    """
    if not validity.is_valid:
        return []

    present = [key for key, block in interpretation.condition_blocks.items() if block.present]

    flags = []
    for rule in FLAG_RULES:
        if _rule_matches(rule, scale_results, present, validity):
            icon, title, text = rule["flag"]
            flags.append(Flag(icon=icon, title=title, text=text))

    logger.debug(f"Flags raised: {[f.title for f in flags]}")
    return flags


def build_recommendations(
    scale_results: Mapping[str, ScaleResult],
    interpretation: InterpretationResult,
    validity: ValidityResult,
) -> Recommendations:
    """
    Assemble do/don't lists and notes for a specialist.

    Do/don't lists start from the base advice and add per-condition advice for
    each present condition in condition order. Specialist notes: one per
    present condition, one per comorbidity block, one per moderate validity
    warning.

    Returns:
        Recommendations; retake advice only when validity failed
    """
    if not validity.is_valid:
        return Recommendations(
            do_list=list(INVALID_RECOMMENDATIONS["do_list"]),
            dont_list=list(INVALID_RECOMMENDATIONS["dont_list"]),
        )

    do_list = list(BASE_DO)
    dont_list = list(BASE_DONT)
    notes = []

    for key, block in interpretation.condition_blocks.items():
        if not block.present:
            continue
        condition = ConditionKey(key)
        do_list.extend(CONDITION_DO.get(condition, []))
        dont_list.extend(CONDITION_DONT.get(condition, []))
        notes.append(
            SPECIALIST_NOTE.format(
                title=block.title,
                percentage=block.percentage,
                status=SUMMARY_STATUS[True],
                confidence=CONFIDENCE_LABELS[block.confidence],
            )
        )

    for comorbidity in interpretation.comorbidity_blocks:
        notes.append(COMORBIDITY_SPECIALIST_NOTE.format(title=comorbidity.title))

    for warning in validity.warnings:
        if warning.type != WarningType.MODERATE:
            continue
        result = scale_results.get(warning.scale_key)
        notes.append(
            VALIDITY_SPECIALIST_NOTE.format(
                scale=result.name if result else warning.scale_key,
                percentage=result.percentage if result else 0,
                title=warning.title,
            )
        )

    return Recommendations(
        do_list=_dedupe(do_list),
        dont_list=_dedupe(dont_list),
        specialist_notes=_dedupe(notes),
    )
