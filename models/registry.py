"""
Question/scale registry.

Builds validated, read-only scale definitions from the static data in
models/questions.py and models/scales.py, applying threshold overrides from a
JSON file when one is configured. The default registry is built once per
process by get_registry() and never mutated afterwards.
"""

import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Sequence, Tuple

from pydantic import BaseModel, Field, ValidationError, model_validator

from config import settings
from .enums import (
    ANSWER_MAX,
    CONDITION_SCALES,
    CONDITION_THRESHOLDS,
    CONTROL_SCALE_KEYS,
    CONTROL_ZONE_STYLES,
    QUESTION_COUNT,
    TRAIT_ZONES,
    VALIDITY_THRESHOLDS,
    ConditionKey,
)
from .errors import RegistryError
from .questions import MIRRORED_ITEMS, QUESTIONS, REVERSE_SCORED_ITEMS, QuestionRow
from .scales import SCALE_METADATA
from .schemas import Question, ScaleDefinition, SubscaleDefinition, Zone

logger = logging.getLogger(__name__)


class ValidityThreshold(BaseModel):
    """Percentage thresholds of one control scale."""
    moderate: int = Field(..., ge=1, le=100)
    critical: int = Field(..., ge=1, le=100)

    @model_validator(mode="after")
    def check_order(self) -> "ValidityThreshold":
        if self.moderate >= self.critical:
            raise ValueError("moderate threshold must be lower than critical threshold")
        return self


class ConditionThreshold(BaseModel):
    """Presence cut-off of one condition."""
    cut: int = Field(..., ge=1, le=100)
    borderline_band: int = Field(10, ge=0, le=50)


class ThresholdOverrides(BaseModel):
    """Shape of the optional thresholds file."""
    validity: Dict[str, ValidityThreshold] = Field(default_factory=dict)
    conditions: Dict[str, ConditionThreshold] = Field(default_factory=dict)


class Registry:
    """
    Read-only view of questions, scale definitions and threshold tables.

    Attributes:
        questions: All questions in id order
        scales: Scale definitions in registry order
        control_keys: Control scale keys in registry order
        substantive_keys: Trait scale keys in registry order
        validity_thresholds: Control scale key -> ValidityThreshold
        condition_thresholds: Condition key -> ConditionThreshold
        condition_scales: Condition key -> governing scale keys
        thresholds_source: "default" or "file"
    """

    def __init__(
        self,
        questions: Sequence[Question],
        scales: Sequence[ScaleDefinition],
        validity_thresholds: Mapping[str, ValidityThreshold],
        condition_thresholds: Mapping[str, ConditionThreshold],
        condition_scales: Mapping[ConditionKey, Tuple[str, ...]],
        thresholds_source: str = "default",
    ):
        self.questions: Tuple[Question, ...] = tuple(questions)
        self.questions_by_id: Mapping[int, Question] = MappingProxyType(
            {q.id: q for q in self.questions}
        )
        self.scales: Mapping[str, ScaleDefinition] = MappingProxyType(
            {scale.key: scale for scale in scales}
        )
        self.control_keys: Tuple[str, ...] = tuple(s.key for s in scales if s.control)
        self.substantive_keys: Tuple[str, ...] = tuple(s.key for s in scales if not s.control)
        self.validity_thresholds = MappingProxyType(dict(validity_thresholds))
        self.condition_thresholds = MappingProxyType(dict(condition_thresholds))
        self.condition_scales = MappingProxyType(dict(condition_scales))
        self.thresholds_source = thresholds_source

    @property
    def question_count(self) -> int:
        return len(self.questions)

    def get_scale(self, key: str) -> ScaleDefinition:
        return self.scales[key]


def build_trait_zones() -> List[Zone]:
    """Zones shared by trait scales and their subscales."""
    return [
        Zone(key=key.value, low=low, high=high, label=label, icon=icon, color=color)
        for low, high, key, label, icon, color in TRAIT_ZONES
    ]


def build_control_zones(threshold: ValidityThreshold) -> List[Zone]:
    """
    Derive control scale zones from its validity thresholds.

    Example (moderate=50, critical=75):
        0-49 Normal, 50-74 Elevated, 75-100 High
    """
    bounds = [
        (0, threshold.moderate - 1),
        (threshold.moderate, threshold.critical - 1),
        (threshold.critical, 100),
    ]
    return [
        Zone(key=key.value, low=low, high=high, label=label, icon=icon, color=color)
        for (low, high), (key, label, icon, color) in zip(bounds, CONTROL_ZONE_STYLES)
    ]


def load_threshold_overrides(path: str) -> ThresholdOverrides:
    """
    Read a thresholds file.

    Raises:
        RegistryError: If the file is missing or does not match the expected shape
    """
    file_path = Path(path)
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise RegistryError(f"Cannot read thresholds file {path}: {e}") from e

    try:
        return ThresholdOverrides.model_validate_json(raw)
    except ValidationError as e:
        raise RegistryError(
            f"Invalid thresholds file {path}",
            {"errors": e.errors(include_url=False)},
        ) from e


def build_registry(
    overrides: Optional[ThresholdOverrides] = None,
    questions: Iterable[QuestionRow] = QUESTIONS,
    metadata: Mapping = SCALE_METADATA,
    mirrored_items: Mapping[int, int] = MIRRORED_ITEMS,
    reverse_scored_items: FrozenSet[int] = REVERSE_SCORED_ITEMS,
    control_keys: Sequence[str] = CONTROL_SCALE_KEYS,
    condition_scales: Mapping[ConditionKey, Tuple[str, ...]] = CONDITION_SCALES,
    question_count: int = QUESTION_COUNT,
) -> Registry:
    """
    Build and validate a registry.

    Checks that ids cover 0..question_count-1 exactly once, that every item
    belongs to a known scale and at most one of its subscales, that mirrored
    items point at trait items, that every control scale has thresholds and
    that threshold overrides only name known control scales and conditions.

    Raises:
        RegistryError: On any inconsistency
    """
    validity = {k: ValidityThreshold(**v) for k, v in VALIDITY_THRESHOLDS.items()}
    conditions = {k: ConditionThreshold(**v) for k, v in CONDITION_THRESHOLDS.items()}
    source = "default"
    if overrides is not None:
        unknown_validity = sorted(set(overrides.validity) - set(control_keys))
        if unknown_validity:
            raise RegistryError(f"Threshold overrides name unknown control scales: {unknown_validity}")
        unknown_conditions = sorted(set(overrides.conditions) - {c.value for c in condition_scales})
        if unknown_conditions:
            raise RegistryError(f"Threshold overrides name unknown conditions: {unknown_conditions}")
        validity.update(overrides.validity)
        conditions.update(overrides.conditions)
        source = "file"

    try:
        parsed = [
            Question(
                id=qid,
                scale_key=scale_key,
                subscale_key=subscale_key,
                text=text,
                reverse_scored=qid in reverse_scored_items,
                mirror_of=mirrored_items.get(qid),
            )
            for qid, scale_key, subscale_key, text in questions
        ]
    except ValidationError as e:
        raise RegistryError("Invalid question definition", {"errors": e.errors(include_url=False)}) from e

    parsed.sort(key=lambda q: q.id)
    ids = [q.id for q in parsed]
    if ids != list(range(question_count)):
        raise RegistryError(f"Question ids must cover 0..{question_count - 1} exactly once")

    by_id = {q.id: q for q in parsed}
    members: Dict[str, List[int]] = {key: [] for key in metadata}
    sub_members: Dict[Tuple[str, str], List[int]] = {}

    for q in parsed:
        if q.scale_key not in metadata:
            raise RegistryError(f"Question {q.id} refers to unknown scale {q.scale_key}")
        members[q.scale_key].append(q.id)

        if q.subscale_key is not None:
            declared = [sub_key for sub_key, _ in metadata[q.scale_key][3]]
            if q.subscale_key not in declared:
                raise RegistryError(
                    f"Question {q.id}: subscale {q.subscale_key} is not part of scale {q.scale_key}"
                )
            sub_members.setdefault((q.scale_key, q.subscale_key), []).append(q.id)

        if q.mirror_of is not None:
            target = by_id.get(q.mirror_of)
            if target is None or target.scale_key in control_keys or target.mirror_of is not None:
                raise RegistryError(f"Question {q.id} mirrors invalid item {q.mirror_of}")

    missing = [key for key in control_keys if key in metadata and key not in validity]
    if missing:
        raise RegistryError(f"No validity thresholds for control scales: {missing}")

    scales: List[ScaleDefinition] = []
    try:
        for key, (name, description, basis, subscale_meta) in metadata.items():
            question_ids = members[key]
            if not question_ids:
                raise RegistryError(f"Scale {key} has no questions")

            is_control = key in control_keys
            zones = build_control_zones(validity[key]) if is_control else build_trait_zones()
            subscales = [
                SubscaleDefinition(
                    key=sub_key,
                    name=sub_name,
                    question_ids=sub_members.get((key, sub_key), []),
                    max_score=len(sub_members.get((key, sub_key), [])) * ANSWER_MAX,
                )
                for sub_key, sub_name in subscale_meta
            ]
            scales.append(
                ScaleDefinition(
                    key=key,
                    name=name,
                    description=description,
                    basis=basis,
                    control=is_control,
                    question_ids=question_ids,
                    max_score=len(question_ids) * ANSWER_MAX,
                    zones=zones,
                    subscales=subscales,
                )
            )
    except ValidationError as e:
        raise RegistryError("Invalid scale definition", {"errors": e.errors(include_url=False)}) from e

    known = {scale.key for scale in scales}
    for condition, scale_keys in condition_scales.items():
        unknown = [key for key in scale_keys if key not in known]
        if unknown:
            raise RegistryError(f"Condition {condition.value} refers to unknown scales {unknown}")
        if condition.value not in conditions:
            raise RegistryError(f"No threshold for condition {condition.value}")

    return Registry(
        questions=parsed,
        scales=scales,
        validity_thresholds=validity,
        condition_thresholds=conditions,
        condition_scales=condition_scales,
        thresholds_source=source,
    )


@lru_cache(maxsize=1)
def get_registry() -> Registry:
    """Return the process-wide registry, building it on first use."""
    overrides = None
    if settings.thresholds_file:
        overrides = load_threshold_overrides(settings.thresholds_file)
        logger.info(f"Loaded threshold overrides from {settings.thresholds_file}")

    registry = build_registry(overrides=overrides)
    logger.debug(
        f"Registry ready: {registry.question_count} questions, {len(registry.scales)} scales "
        f"[thresholds={registry.thresholds_source}]"
    )
    return registry
