"""
Pydantic schemas for the SONV-112 screening engine.

Registry definitions are frozen and validated on construction; result models
are plain values computed fresh for every answer set.
"""

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import ANSWER_MAX, ANSWER_MIN, QUESTION_COUNT, Confidence, WarningType


# ---------------------------------------------------------------------------
# Registry definitions
# ---------------------------------------------------------------------------

class Question(BaseModel):
    """A single questionnaire item."""
    model_config = ConfigDict(frozen=True)

    id: int = Field(..., ge=0, lt=QUESTION_COUNT, description="Position of the item (0-111)")
    scale_key: str = Field(..., description="Scale the item belongs to")
    subscale_key: Optional[str] = Field(None, description="Subscale within the scale, if any")
    text: str = Field(..., min_length=1)
    reverse_scored: bool = Field(False, description="Invert the value before summing")
    mirror_of: Optional[int] = Field(
        None,
        ge=0,
        lt=QUESTION_COUNT,
        description="Item restated by this one; scored as the absolute difference of both answers",
    )


class Zone(BaseModel):
    """A percentage band mapped to a qualitative label."""
    model_config = ConfigDict(frozen=True)

    key: str
    low: int = Field(..., ge=0, le=100, description="Inclusive lower bound")
    high: int = Field(..., ge=0, le=100, description="Inclusive upper bound")
    label: str
    icon: str
    color: str = Field(..., description="Colour token for the presentation layer")

    def contains(self, percentage: int) -> bool:
        return self.low <= percentage <= self.high


class SubscaleDefinition(BaseModel):
    """A named subset of a scale's items."""
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    question_ids: List[int]
    max_score: int = Field(..., gt=0)


class ScaleDefinition(BaseModel):
    """
    A scored dimension of the questionnaire.

    Zones must partition 0-100: ordered, contiguous, no gaps or overlaps, so
    that every integer percentage resolves to exactly one zone.
    """
    model_config = ConfigDict(frozen=True)

    key: str
    name: str
    description: str = ""
    basis: str = ""
    control: bool = Field(False, description="Control scales only feed the validity assessor")
    question_ids: List[int]
    max_score: int = Field(..., gt=0)
    zones: List[Zone] = Field(..., min_length=1)
    subscales: List[SubscaleDefinition] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_zones_and_subscales(self) -> "ScaleDefinition":
        """Validate zone coverage and subscale membership."""
        expected_low = 0
        for zone in self.zones:
            if zone.low != expected_low or zone.high < zone.low:
                raise ValueError(
                    f"Scale {self.key}: zone '{zone.key}' must start at {expected_low} "
                    f"and end at or after its start"
                )
            expected_low = zone.high + 1
        if expected_low != 101:
            raise ValueError(f"Scale {self.key}: zones must end at 100")

        members = set(self.question_ids)
        for sub in self.subscales:
            outside = set(sub.question_ids) - members
            if outside:
                raise ValueError(
                    f"Subscale {sub.key} contains items outside scale {self.key}: {sorted(outside)}"
                )
        return self


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------

class QuestionDetail(BaseModel):
    """An answered item, used for the 'highest-scoring answers' listing."""
    question_id: int
    question_text: str
    answer_value: int = Field(..., ge=ANSWER_MIN, le=ANSWER_MAX)


class ScaleResult(BaseModel):
    """Aggregated score of a scale or subscale."""
    key: str
    name: str
    sum: int = Field(..., ge=0)
    max: int = Field(..., gt=0)
    percentage: int = Field(..., ge=0, le=100)
    zone: Zone
    subscales: Dict[str, "ScaleResult"] = Field(default_factory=dict)
    question_details: List[QuestionDetail] = Field(
        default_factory=list,
        description="Answered items sorted by raw value, highest first",
    )


ScaleResult.model_rebuild()


class ValidityWarning(BaseModel):
    """A data-quality warning raised by a control scale."""
    type: WarningType
    scale_key: str
    icon: str
    title: str
    text: str


class ValidityResult(BaseModel):
    """Outcome of the validity assessment."""
    is_valid: bool
    warnings: List[ValidityWarning] = Field(default_factory=list)


class DetailItem(BaseModel):
    title: str
    text: str


class ConditionBlock(BaseModel):
    """Interpretation of one condition."""
    key: str
    title: str
    present: bool
    confidence: Confidence
    percentage: int = Field(..., ge=0, le=100, description="Combined percentage of the governing scales")
    text: str
    details: List[DetailItem] = Field(default_factory=list)


class Interaction(BaseModel):
    title: str
    text: str


class ComorbidityBlock(BaseModel):
    """Narrative for a set of co-present conditions."""
    key: str
    conditions: List[str]
    title: str
    text: str
    interactions: List[Interaction] = Field(default_factory=list)


class InterpretationResult(BaseModel):
    """Structured narrative; blocks are empty when validity failed."""
    summary: str
    condition_blocks: Dict[str, ConditionBlock] = Field(default_factory=dict)
    comorbidity_blocks: List[ComorbidityBlock] = Field(default_factory=list)


class Flag(BaseModel):
    """Attention item not tied to a single scale."""
    icon: str
    title: str
    text: str


class Recommendations(BaseModel):
    do_list: List[str] = Field(default_factory=list)
    dont_list: List[str] = Field(default_factory=list)
    specialist_notes: List[str] = Field(default_factory=list)


class ScreeningResult(BaseModel):
    """Everything the presentation layer needs to render a completed test."""
    scales: Dict[str, ScaleResult]
    validity: ValidityResult
    interpretation: InterpretationResult
    flags: List[Flag] = Field(default_factory=list)
    recommendations: Recommendations
    share_code: str = Field(..., min_length=QUESTION_COUNT, max_length=QUESTION_COUNT)
    answered_count: int = Field(..., ge=0, le=QUESTION_COUNT)
    total_questions: int = QUESTION_COUNT


# ---------------------------------------------------------------------------
# API schemas
# ---------------------------------------------------------------------------

class ScreeningRequest(BaseModel):
    """
    Request schema for POST /screening/submit.

    Keys are question ids; missing ids count as unanswered. Values are checked
    by the engine, not coerced here, so that booleans, floats and out-of-range
    answers all surface as INVALID_ANSWER_VALUE.
    """
    answers: Dict[int, Any] = Field(
        default_factory=dict,
        description="Question id (0-111) -> answer value (0-4)",
    )


class ScreeningResponse(ScreeningResult):
    """Response schema for screening endpoints."""
    generated_at: str = Field(..., description="ISO 8601 timestamp of when the response was generated")


class EncodeResponse(BaseModel):
    code: str = Field(..., description="112-character share code")
    fragment: str = Field(..., description="URL fragment value, e.g. 'r=<code>'")


class QuestionOut(BaseModel):
    id: int
    scale_key: str
    text: str


class QuestionnaireResponse(BaseModel):
    """Response schema for GET /screening/questions."""
    total_questions: int
    answer_scale: Dict[int, str]
    questions: List[QuestionOut]


class ServiceStatus(BaseModel):
    thresholds: str = Field(..., description="Threshold source: default|file")
    cache: str = Field(..., description="Result cache configuration")


class HealthResponse(BaseModel):
    """Response schema for GET /screening/health."""
    status: str = Field(default="healthy", description="Overall health status")
    version: str = Field(..., description="API version")
    question_count: int
    services: ServiceStatus


class ErrorResponse(BaseModel):
    """Standardized error response."""
    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[Dict] = Field(None, description="Additional error details")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error_code": "INVALID_ENCODING",
                "message": "Share code must be exactly 112 characters, got 111",
                "details": {"length": 111},
            }
        }
    )
