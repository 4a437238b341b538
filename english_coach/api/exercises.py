# english_coach/api/exercises.py
import logging
from typing import Dict

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from english_coach.api import deps
from english_coach.core.config import Settings, get_settings
from english_coach.models.validation import (
    ChallengeResponse,
    ConstrainedValidationRequest,
    ConstrainedValidationResponse,
    SentenceValidationRequest,
    SentenceValidationResponse,
    WordValidationRequest,
    WordValidationResponse,
    WritingPromptRequest,
    WritingPromptResponse,
)
from english_coach.services import exercise_service

logger = logging.getLogger("english_coach.api.exercises")  # Logger for this module
router = APIRouter()


def _cors_headers(settings: Settings) -> Dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.CORS_ALLOW_ORIGIN,
        "Access-Control-Allow-Methods": "POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


@router.get("/get-challenge", response_model=ChallengeResponse, response_model_exclude_none=True)
async def get_challenge(settings: Settings = Depends(get_settings)):
    """Ask Gemini for one intermediate-level word or idiom."""
    return await exercise_service.fetch_challenge(settings)


@router.options("/validate")
async def validate_preflight(settings: Settings = Depends(get_settings)):
    return Response(status_code=200, headers=_cors_headers(settings))


@router.post(
    "/validate",
    response_model=ConstrainedValidationResponse | WordValidationResponse,
    response_model_exclude_none=True,
)
async def validate(request: Request, settings: Settings = Depends(get_settings)):
    """
    Validates either a standalone word (`{word}`) or a sentence against a
    word count and optional required word (`{sentence, word_count, required_word?}`).

    A malformed body is still answered with HTTP 200 and `{valid: false, error}`;
    the variant cannot be told apart, so no comment is added.
    """
    data = await deps.read_json_object(request)

    if data is not None and "word" in data and "sentence" not in data:
        word_request = deps.parse_body(WordValidationRequest, data)
        if word_request is None:
            result = WordValidationResponse(valid=False, error=deps.INVALID_BODY_MESSAGE)
        else:
            result = await exercise_service.validate_word(word_request, settings)
    else:
        constrained_request = deps.parse_body(ConstrainedValidationRequest, data)
        if constrained_request is None:
            result = WordValidationResponse(valid=False, error=deps.INVALID_BODY_MESSAGE)
        else:
            result = await exercise_service.validate_constrained(constrained_request, settings)

    return JSONResponse(content=result.model_dump(exclude_none=True), headers=_cors_headers(settings))


@router.post("/validate-sentence", response_model=SentenceValidationResponse, response_model_exclude_none=True)
async def validate_sentence(request: Request, settings: Settings = Depends(get_settings)):
    """Checks that a sentence uses the challenge word or idiom correctly."""
    sentence_request = deps.parse_body(SentenceValidationRequest, await deps.read_json_object(request))
    if sentence_request is None:
        return SentenceValidationResponse(valid=False, error=deps.INVALID_BODY_MESSAGE)
    return await exercise_service.validate_sentence(sentence_request, settings)


@router.post("/get-prompt", response_model=WritingPromptResponse, response_model_exclude_none=True)
async def get_prompt(request: Request, settings: Settings = Depends(get_settings)):
    """Ask Rin for the next word-count writing challenge."""
    prompt_request = deps.parse_body(WritingPromptRequest, await deps.read_json_object(request))
    if prompt_request is None:
        return WritingPromptResponse(error=deps.INVALID_BODY_MESSAGE)
    return await exercise_service.fetch_writing_prompt(prompt_request, settings)
