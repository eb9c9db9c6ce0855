"""Pydantic schemas for study session API request/response validation."""

from pydantic import BaseModel, Field

from wordrecall.domain.study.services.study_session import FeedbackType, SessionStatus


class WordEntrySchema(BaseModel):
    word: str
    definition: str | None = None

    model_config = {"from_attributes": True}


class AttemptRequest(BaseModel):
    """One recalled word as typed."""

    input: str = Field(..., description="Word typed by the user")


class FeedbackSchema(BaseModel):
    type: FeedbackType
    word: str
    definition: str | None = None

    model_config = {"from_attributes": True}


class StudyProgressResponse(BaseModel):
    """Where an in-flight study session stands."""

    session_id: str
    word_list_id: int | None
    list_name: str
    status: SessionStatus
    remembered_count: int
    total_words: int
    progress_percent: float = Field(..., description="100 * remembered / total, unrounded")
    incorrect_count: int
    recently_remembered: list[WordEntrySchema] = Field(
        ..., description="Latest successes, newest first"
    )

    model_config = {"from_attributes": True}


class AttemptResponse(BaseModel):
    feedback: FeedbackSchema | None = Field(
        ..., description="Classification of the submission, null for blank input"
    )
    progress: StudyProgressResponse


class StudyResultsResponse(BaseModel):
    """Summary of a finished study session."""

    list_name: str
    total_words: int
    score: int = Field(..., description="Percentage remembered, rounded half up")
    remembered: list[WordEntrySchema] = Field(..., description="In the order they were recalled")
    missed: list[WordEntrySchema]
    incorrect: list[str] = Field(..., description="Words not in the list, first attempt order")

    model_config = {"from_attributes": True}
