"""Models package for the SONV-112 screening engine."""

from .schemas import (
    Question,
    Zone,
    ScaleDefinition,
    SubscaleDefinition,
    ScaleResult,
    ValidityWarning,
    ValidityResult,
    ConditionBlock,
    ComorbidityBlock,
    InterpretationResult,
    Flag,
    Recommendations,
    ScreeningResult,
    ScreeningRequest,
    ScreeningResponse,
    HealthResponse,
    ServiceStatus,
    ErrorResponse,
)
from .enums import (
    ZoneKey,
    Confidence,
    WarningType,
    ConditionKey,
    QUESTION_COUNT,
    SCALE_KEYS,
    CONTROL_SCALE_KEYS,
)
from .errors import ScreeningError, InvalidAnswerValue, InvalidEncoding, RegistryError, MissingScaleResult

__all__ = [
    "Question",
    "Zone",
    "ScaleDefinition",
    "SubscaleDefinition",
    "ScaleResult",
    "ValidityWarning",
    "ValidityResult",
    "ConditionBlock",
    "ComorbidityBlock",
    "InterpretationResult",
    "Flag",
    "Recommendations",
    "ScreeningResult",
    "ScreeningRequest",
    "ScreeningResponse",
    "HealthResponse",
    "ServiceStatus",
    "ErrorResponse",
    "ZoneKey",
    "Confidence",
    "WarningType",
    "ConditionKey",
    "QUESTION_COUNT",
    "SCALE_KEYS",
    "CONTROL_SCALE_KEYS",
    "ScreeningError",
    "InvalidAnswerValue",
    "InvalidEncoding",
    "RegistryError",
    "MissingScaleResult",
]
