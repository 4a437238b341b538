# english_coach/models/validation.py
from typing import Any, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator, model_validator

# --- Requests ---
# Missing or null fields take zero values; wrong JSON types make the body malformed.

class ExerciseRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    @model_validator(mode="before")
    @classmethod
    def _null_fields_take_defaults(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data

class WordValidationRequest(ExerciseRequest):
    word: str = ""

class SentenceValidationRequest(ExerciseRequest):
    challenge: str = ""
    sentence: str = ""

class ConstrainedValidationRequest(ExerciseRequest):
    sentence: str = ""
    word_count: int = 0
    required_word: Optional[str] = None

class WritingPromptRequest(ExerciseRequest):
    word_count: int = 0

# --- Responses ---
# `None` fields are left out of the JSON body.

class ChallengeResponse(BaseModel):
    challenge: str = ""
    error: Optional[str] = None

class WordValidationResponse(BaseModel):
    valid: bool
    error: Optional[str] = None

class SentenceValidationResponse(BaseModel):
    valid: bool
    error: Optional[str] = None

class ConstrainedValidationResponse(BaseModel):
    valid: bool
    comment: str = ""
    next_prompt: Optional[str] = None
    error: Optional[str] = None

class WritingPromptResponse(BaseModel):
    prompt: str = ""
    error: Optional[str] = None

# --- Grader output ---

class GraderVerdict(BaseModel):
    """The JSON object the constrained-sentence grader is told to reply with."""
    model_config = ConfigDict(extra="ignore")

    valid: StrictBool
    comment: str = ""
    next_prompt: Optional[str] = None

    @field_validator("comment", mode="before")
    @classmethod
    def _null_comment_is_empty(cls, value):
        return "" if value is None else value

    @field_validator("next_prompt")
    @classmethod
    def _blank_next_prompt_is_absent(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value

class ParsedVerdict(BaseModel):
    kind: Literal["parsed"] = "parsed"
    verdict: GraderVerdict

class FallbackVerdict(BaseModel):
    kind: Literal["fallback"] = "fallback"
    raw_text: str
    reason: str

GraderOutcome = Union[ParsedVerdict, FallbackVerdict]

class HealthResponse(BaseModel):
    status: str = "healthy"
    project: str
    gemini_configured: bool = Field(description="Whether a Gemini API key is available to the exercise endpoints.")
