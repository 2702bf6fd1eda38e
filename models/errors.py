"""Typed failures raised by the screening engine."""

from typing import Any, Dict, Optional


class ScreeningError(Exception):
    """Base class for local validation failures."""

    error_code = "SCREENING_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidAnswerValue(ScreeningError, ValueError):
    """An answer value is not an integer in the rating range."""

    error_code = "INVALID_ANSWER_VALUE"

    def __init__(self, question_id: Any, value: Any):
        super().__init__(
            f"Answer for question {question_id} must be an integer between 0 and 4, got {value!r}",
            {"question_id": question_id, "value": repr(value)},
        )
        self.question_id = question_id
        self.value = value


class InvalidEncoding(ScreeningError, ValueError):
    """A share code is malformed; no partial result is produced."""

    error_code = "INVALID_ENCODING"


class RegistryError(ScreeningError, ValueError):
    """The registry or a thresholds file is inconsistent."""

    error_code = "REGISTRY_ERROR"


class MissingScaleResult(ScreeningError, ValueError):
    """Scale results lack a scale the assessment depends on."""

    error_code = "MISSING_SCALE_RESULT"

    def __init__(self, scale_keys):
        keys = list(scale_keys)
        super().__init__(
            f"Scale results are missing required scales: {keys}",
            {"scale_keys": keys},
        )
        self.scale_keys = keys
