"""Conversions from study DTOs to response schemas."""

from wordrecall.application.study.dtos import SessionProgress
from wordrecall.domain.study.services.study_session import ResultsSummary
from wordrecall.infrastructure.study.schemas import (
    StudyProgressResponse,
    StudyResultsResponse,
)


def to_progress_response(progress: SessionProgress) -> StudyProgressResponse:
    return StudyProgressResponse.model_validate(progress)


def to_results_response(summary: ResultsSummary) -> StudyResultsResponse:
    return StudyResultsResponse.model_validate(summary)
