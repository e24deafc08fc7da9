"""Scoring endpoints - category sub-scores, overall score and full assessment"""

import time
import logging
from dataclasses import asdict
from fastapi import APIRouter, HTTPException, Request

from store_credit.api.v1.schemas import (
    AssessmentRequest,
    AssessmentResponse,
    CategoryScoresSchema,
    OverallScoreResponse,
)
from store_credit.api.dependencies import get_request_id
from store_credit.domain.scoring import assess_store, calculate_category_scores, calculate_overall_score
from store_credit.infrastructure.observability.metrics import record_assessment, record_category_scores
from store_credit.infrastructure.observability.logging import log_assessment

router = APIRouter()


@router.post("/assessment", response_model=AssessmentResponse)
def create_assessment(request_body: AssessmentRequest, request: Request):
    """
    Score a store snapshot end to end.

    Flow:
    1. Convert the validated form steps into domain inputs
    2. Score each category
    3. Weight sub-scores into the total and rating
    4. Record metrics and log the outcome
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        assessment = assess_store(request_body.to_domain())
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    category_scores = asdict(assessment.category_scores)
    rating = assessment.result.rating.value

    duration_ms = (time.time() - start_time) * 1000
    record_category_scores(category_scores)
    record_assessment(assessment.result.total, rating)
    log_assessment(request_id, assessment.result.total, rating, category_scores, duration_ms)

    return AssessmentResponse(
        category_scores=CategoryScoresSchema.from_domain(assessment.category_scores),
        total=assessment.result.total,
        rating=assessment.result.rating,
    )


@router.post("/scores/categories", response_model=CategoryScoresSchema)
def score_categories(request_body: AssessmentRequest, request: Request):
    """Return the five category sub-scores without combining them"""
    request_id = get_request_id(request)

    try:
        scores = calculate_category_scores(request_body.to_domain())
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_category_scores(asdict(scores))
    return CategoryScoresSchema.from_domain(scores)


@router.post("/scores/overall", response_model=OverallScoreResponse)
def score_overall(request_body: CategoryScoresSchema, request: Request):
    """Weight previously computed sub-scores into the total and rating"""
    request_id = get_request_id(request)

    try:
        result = calculate_overall_score(request_body.to_domain())
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_assessment(result.total, result.rating.value)
    return OverallScoreResponse(total=result.total, rating=result.rating)
