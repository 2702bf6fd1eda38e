"""
SONV-112 Screening Engine - FastAPI Application

Thin HTTP surface over the screening engine:
- Questionnaire listing for the presentation layer
- Submission of answers and share-code lookups
- Share-code encoding

Environment Variables:
    See config.py for complete list and descriptions.
"""

import logging
import sys
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from config import settings, get_service_status
from models.enums import ANSWER_SCALE
from models.errors import ScreeningError
from models.registry import get_registry
from models.schemas import (
    EncodeResponse,
    ErrorResponse,
    HealthResponse,
    QuestionnaireResponse,
    QuestionOut,
    ScreeningRequest,
    ScreeningResponse,
    ScreeningResult,
    ServiceStatus,
)
from evaluators.scoring import evaluate_share_code, generate_screening_result
from utils.codec import build_share_fragment, encode

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    registry = get_registry()
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(
        f"Registry loaded: {registry.question_count} questions, {len(registry.scales)} scales"
    )
    logger.info(f"Service status: {get_service_status()}")
    yield
    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title="SONV-112 Screening Engine",
    version=settings.app_version,
    description="Scoring and interpretation of the SONV-112 adult self-screening questionnaire",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Error handlers
@app.exception_handler(ScreeningError)
async def screening_error_handler(request: Request, exc: ScreeningError):
    """Handle engine input errors (bad answers, malformed share codes)."""
    logger.warning(f"Rejected input [{exc.error_code}]: {exc.message}")
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error_code=exc.error_code,
            message=exc.message,
            details=exc.details or None,
        ).model_dump(),
    )


@app.exception_handler(RequestValidationError)
@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc):
    """Handle Pydantic validation errors."""
    return JSONResponse(
        status_code=400,
        content=ErrorResponse(
            error_code="VALIDATION_ERROR",
            message="Invalid input data",
            details={"errors": jsonable_encoder(exc.errors())},
        ).model_dump(),
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(
            error_code=f"HTTP_{exc.status_code}",
            message=str(exc.detail),
        ).model_dump(),
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(
            error_code="INTERNAL_ERROR",
            message="An unexpected error occurred. Please try again.",
        ).model_dump(),
    )


def _to_response(result: ScreeningResult) -> ScreeningResponse:
    return ScreeningResponse(
        **result.model_dump(),
        generated_at=datetime.now().astimezone().isoformat(),
    )


# Health endpoint
@app.get(
    "/screening/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check endpoint",
)
async def health_check() -> HealthResponse:
    """
    Check API health and engine configuration.

    Returns readiness information including the question count and where
    thresholds were loaded from.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        question_count=get_registry().question_count,
        services=ServiceStatus(**get_service_status()),
    )


@app.get(
    "/screening/questions",
    response_model=QuestionnaireResponse,
    tags=["Screening"],
    summary="List questionnaire items",
)
async def list_questions() -> QuestionnaireResponse:
    """Questions in id order with the answer scale labels."""
    registry = get_registry()
    return QuestionnaireResponse(
        total_questions=registry.question_count,
        answer_scale=ANSWER_SCALE,
        questions=[
            QuestionOut(id=q.id, scale_key=q.scale_key, text=q.text)
            for q in registry.questions
        ],
    )


# Main screening endpoint
@app.post(
    "/screening/submit",
    response_model=ScreeningResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
    tags=["Screening"],
    summary="Score a completed or partial questionnaire",
)
async def submit_screening(request: ScreeningRequest) -> ScreeningResponse:
    """
    Score answers and build the interpretation.

    **Answer scale:** 0 (never) to 4 (always); unanswered items count as 0.

    **Zones (trait scales):**
    - Typical range (0-39)
    - Mild traits (40-59)
    - Pronounced traits (60-79)
    - Strongly pronounced (80-100)

    When a control scale reaches its critical threshold the result is marked
    invalid and the interpretation is withheld.
    """
    logger.info(f"Screening request received [answers={len(request.answers)}]")

    result = generate_screening_result(request.answers)

    logger.info(
        f"Screening complete: valid={result.validity.is_valid}, "
        f"answered={result.answered_count}, flags={len(result.flags)}"
    )
    return _to_response(result)


@app.get(
    "/screening/results/{code}",
    response_model=ScreeningResponse,
    responses={400: {"model": ErrorResponse, "description": "Malformed share code"}},
    tags=["Screening"],
    summary="Rebuild a result from a share code",
)
async def get_shared_result(code: str) -> ScreeningResponse:
    """Decode a share code and return the same result as the original submission."""
    result = evaluate_share_code(code)
    logger.info(f"Shared result served: valid={result.validity.is_valid}")
    return _to_response(result)


@app.post(
    "/screening/encode",
    response_model=EncodeResponse,
    responses={400: {"model": ErrorResponse, "description": "Validation error"}},
    tags=["Screening"],
    summary="Encode answers into a share code",
)
async def encode_answers(request: ScreeningRequest) -> EncodeResponse:
    """Share code and URL fragment for an answer map."""
    return EncodeResponse(
        code=encode(request.answers),
        fragment=build_share_fragment(request.answers),
    )


# Root redirect
@app.get("/", include_in_schema=False)
async def root():
    """Root endpoint."""
    return {"message": "SONV-112 Screening Engine", "docs": "/docs", "health": "/screening/health"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
