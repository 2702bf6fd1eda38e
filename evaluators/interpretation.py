"""
Interpretation Engine.

Turns scale results into a structured narrative. All wording comes from the
tables in models/templates.py; this module only decides which rows apply.
"""

import logging
from typing import Dict, List, Mapping, Optional, Sequence

from models.enums import (
    ANSWER_MAX,
    CONFIDENCE_LABELS,
    HIGH_AGREEMENT_RATIO,
    Confidence,
    ConditionKey,
)
from models.errors import MissingScaleResult
from models.registry import ConditionThreshold, Registry, get_registry
from models.schemas import (
    ComorbidityBlock,
    ConditionBlock,
    DetailItem,
    Interaction,
    InterpretationResult,
    ScaleResult,
    ValidityResult,
)
from models.templates import (
    ABSENT_TEXTS,
    COMORBIDITY_NOTE,
    COMORBIDITY_TABLE,
    CONDITION_NOUNS,
    CONDITION_TITLES,
    DETAIL_RULES,
    INVALID_SUMMARY,
    PRESENT_TEXTS,
    SUMMARY_DISCLAIMER,
    SUMMARY_STATUS,
)
from utils.rounding import compute_percentage

logger = logging.getLogger(__name__)


def lookup_result(scale_results: Mapping[str, ScaleResult], source: str) -> Optional[ScaleResult]:
    """
    Find a scale or subscale result by reference.

    Args:
        scale_results: Aggregator output
        source: "A" for a scale or "A.A2" for a subscale

    Returns:
        The matching result, or None if it does not exist
    """
    scale_key, _, subscale_key = source.partition(".")
    result = scale_results.get(scale_key)
    if result is None or not subscale_key:
        return result
    return result.subscales.get(subscale_key)


def withheld_interpretation() -> InterpretationResult:
    """Early-exit result used when validity failed."""
    return InterpretationResult(summary=INVALID_SUMMARY)


class InterpretationEngine:
    """
    Evaluates conditions, comorbidity and the summary.

    Presence (per condition):
        governing = round_half_up(100 × Σsum / Σmax) over the governing scales
        present = governing >= cut

    Confidence:
        components = subscale percentages of the governing scales, plus item
                     percentages of items outside every subscale (all items
                     for scales without subscales)
        agreement  = share of components at or above the cut

        present: governing - cut < borderline_band -> low
                 agreement >= 0.75                 -> high
                 otherwise                         -> moderate
        absent:  cut - governing <= borderline_band -> low
                 any component at or above the cut -> moderate
                 otherwise                         -> high
    """

    def __init__(self, registry: Optional[Registry] = None):
        self.registry = registry or get_registry()

    def interpret(
        self,
        scale_results: Mapping[str, ScaleResult],
        validity: ValidityResult,
    ) -> InterpretationResult:
        """
        Build the interpretation.

        Args:
            scale_results: Aggregator output
            validity: Validity assessment of the same answers

        Returns:
            InterpretationResult; blocks are empty when validity failed

        Raises:
            MissingScaleResult: If a governing scale is absent from scale_results
        """
        if not validity.is_valid:
            logger.debug("Interpretation withheld: validity failed")
            return withheld_interpretation()

        blocks: Dict[str, ConditionBlock] = {}
        for condition, scale_keys in self.registry.condition_scales.items():
            blocks[condition.value] = self._evaluate_condition(condition, scale_keys, scale_results)

        present = [key for key, block in blocks.items() if block.present]
        comorbidity = self._comorbidity_blocks(present)
        summary = self._summary(blocks, present)

        logger.debug(f"Interpretation complete: present={present}, comorbidity={len(comorbidity)}")

        return InterpretationResult(
            summary=summary,
            condition_blocks=blocks,
            comorbidity_blocks=comorbidity,
        )

    def _evaluate_condition(
        self,
        condition: ConditionKey,
        scale_keys: Sequence[str],
        scale_results: Mapping[str, ScaleResult],
    ) -> ConditionBlock:
        missing = [key for key in scale_keys if key not in scale_results]
        if missing:
            raise MissingScaleResult(missing)

        threshold = self.registry.condition_thresholds[condition.value]
        results = [scale_results[key] for key in scale_keys]

        governing = compute_percentage(sum(r.sum for r in results), sum(r.max for r in results))
        present = governing >= threshold.cut
        components = self._components(results)
        confidence = self._confidence(governing, present, components, threshold)

        if present:
            text = PRESENT_TEXTS[(condition, confidence)]
        else:
            text = ABSENT_TEXTS[confidence].format(noun=CONDITION_NOUNS[condition])

        return ConditionBlock(
            key=condition.value,
            title=CONDITION_TITLES[condition],
            present=present,
            confidence=confidence,
            percentage=governing,
            text=text,
            details=self._details(condition, scale_results),
        )

    def _components(self, results: Sequence[ScaleResult]) -> List[int]:
        """Percentages that show how evenly a score is spread."""
        components: List[int] = []
        for result in results:
            scale = self.registry.get_scale(result.key)
            components.extend(sub.percentage for sub in result.subscales.values())

            in_subscales = {qid for sub in scale.subscales for qid in sub.question_ids}
            answered = {d.question_id: d.answer_value for d in result.question_details}
            for qid in scale.question_ids:
                if qid in in_subscales:
                    continue
                value = answered.get(qid, 0)
                if value and self.registry.questions_by_id[qid].reverse_scored:
                    value = ANSWER_MAX - value
                components.append(compute_percentage(value, ANSWER_MAX))
        return components

    def _confidence(
        self,
        governing: int,
        present: bool,
        components: Sequence[int],
        threshold: ConditionThreshold,
    ) -> Confidence:
        at_or_above = sum(1 for pct in components if pct >= threshold.cut)

        if present:
            if governing - threshold.cut < threshold.borderline_band:
                return Confidence.LOW
            if components and at_or_above / len(components) >= HIGH_AGREEMENT_RATIO:
                return Confidence.HIGH
            return Confidence.MODERATE

        if threshold.cut - governing <= threshold.borderline_band:
            return Confidence.LOW
        if at_or_above:
            return Confidence.MODERATE
        return Confidence.HIGH

    def _details(
        self,
        condition: ConditionKey,
        scale_results: Mapping[str, ScaleResult],
    ) -> List[DetailItem]:
        details = []
        for rule_condition, source, minimum, title, text in DETAIL_RULES:
            if rule_condition != condition:
                continue
            result = lookup_result(scale_results, source)
            if result is not None and result.percentage >= minimum:
                details.append(DetailItem(title=title, text=text))
        return details

    def _comorbidity_blocks(self, present: Sequence[str]) -> List[ComorbidityBlock]:
        blocks = []
        for row in COMORBIDITY_TABLE:
            keys = [condition.value for condition in row["conditions"]]
            if all(key in present for key in keys):
                blocks.append(
                    ComorbidityBlock(
                        key=row["key"],
                        conditions=keys,
                        title=row["title"],
                        text=row["text"],
                        interactions=[
                            Interaction(title=title, text=text)
                            for title, text in row["interactions"]
                        ],
                    )
                )
        return blocks

    def _summary(self, blocks: Mapping[str, ConditionBlock], present: Sequence[str]) -> str:
        lines = [SUMMARY_DISCLAIMER]
        for block in blocks.values():
            lines.append(
                f"{block.title}: {SUMMARY_STATUS[block.present]} "
                f"({CONFIDENCE_LABELS[block.confidence]})"
            )
        if len(present) >= 2:
            titles = " + ".join(blocks[key].title for key in present)
            lines.append(COMORBIDITY_NOTE.format(titles=titles))
        return "\n".join(lines)


def interpret(
    scale_results: Mapping[str, ScaleResult],
    validity: ValidityResult,
    registry: Optional[Registry] = None,
) -> InterpretationResult:
    """Interpret results with the given (or default) registry."""
    return InterpretationEngine(registry).interpret(scale_results, validity)
