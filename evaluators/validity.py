"""
Validity Assessor.

Reads the control scales only and decides whether the answer set is reliable
enough to interpret.
"""

import logging
from typing import List, Mapping, Optional

from models.enums import WarningType
from models.errors import MissingScaleResult
from models.registry import Registry, get_registry
from models.schemas import ScaleResult, ValidityResult, ValidityWarning
from models.templates import VALIDITY_WARNINGS

logger = logging.getLogger(__name__)


class ValidityAssessor:
    """
    Evaluates control scales against their thresholds.

    Rules (deterministic, per control scale in registry order):
    - percentage >= critical: critical warning, then moderate warning
    - moderate <= percentage < critical: moderate warning
    - otherwise: no warning

    The result is valid iff no critical warning was raised.
    """

    def __init__(self, registry: Optional[Registry] = None):
        self.registry = registry or get_registry()

    def assess(self, scale_results: Mapping[str, ScaleResult]) -> ValidityResult:
        """
        Assess response validity.

        Args:
            scale_results: Output of the aggregator; only control scales are read

        Returns:
            ValidityResult with warnings in deterministic order

        Raises:
            MissingScaleResult: If any control scale is absent from scale_results
        """
        missing = [key for key in self.registry.control_keys if key not in scale_results]
        if missing:
            logger.warning(f"Control scales missing from scale results: {missing}")
            raise MissingScaleResult(missing)

        warnings: List[ValidityWarning] = []

        for key in self.registry.control_keys:
            result = scale_results[key]
            threshold = self.registry.validity_thresholds[key]
            if result.percentage >= threshold.critical:
                warnings.append(self._warning(key, WarningType.CRITICAL))
            if result.percentage >= threshold.moderate:
                warnings.append(self._warning(key, WarningType.MODERATE))

        is_valid = not any(w.type == WarningType.CRITICAL for w in warnings)
        logger.debug(f"Validity assessed: valid={is_valid}, warnings={len(warnings)}")

        return ValidityResult(is_valid=is_valid, warnings=warnings)

    def _warning(self, scale_key: str, warning_type: WarningType) -> ValidityWarning:
        icon, title, text = VALIDITY_WARNINGS[(scale_key, warning_type)]
        return ValidityWarning(
            type=warning_type,
            scale_key=scale_key,
            icon=icon,
            title=title,
            text=text,
        )


def assess_validity(
    scale_results: Mapping[str, ScaleResult],
    registry: Optional[Registry] = None,
) -> ValidityResult:
    """Assess validity with the given (or default) registry."""
    return ValidityAssessor(registry).assess(scale_results)
