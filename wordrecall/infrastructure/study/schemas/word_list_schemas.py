"""Pydantic schemas for word list API request/response validation."""

from datetime import datetime

from pydantic import BaseModel, Field

from wordrecall.infrastructure.study.schemas.study_schemas import WordEntrySchema


class WordListRequest(BaseModel):
    """Schema for creating or replacing a word list."""

    name: str = Field(..., description="List name, trimmed before saving")
    words_text: str = Field(
        ...,
        description="One entry per line: WORD, or WORD followed by a space and its definition",
    )


class WordListOwner(BaseModel):
    id: int
    display_name: str | None = None


class WordListSummary(BaseModel):
    """Schema for a word list when browsing (no words)."""

    id: int
    name: str
    word_count: int
    owner: WordListOwner
    created_at: datetime


class WordListsResponse(BaseModel):
    word_lists: list[WordListSummary] = Field(..., description="All word lists, newest first")


class WordsTextResponse(BaseModel):
    words_text: str = Field(..., description="The list in text format, in original order")


class WordListDetails(BaseModel):
    """Schema for a word list with its words."""

    id: int
    name: str
    owner: WordListOwner
    is_owner: bool = Field(..., description="Whether the current user may edit/delete the list")
    word_count: int
    words: list[WordEntrySchema] = Field(..., description="Words ordered alphabetically")
    created_at: datetime | None = None
    updated_at: datetime | None = None
