# english_coach/services/exercise_service.py
"""
Exercise pipelines: render a prompt, ask Gemini once, normalize the reply.

Every function returns a response model. ConfigurationError and UpstreamError
are logged and turned into error-shaped responses here, so callers never see
an exception.
"""
import logging

from english_coach.core.config import Settings
from english_coach.core.errors import ConfigurationError, UpstreamError
from english_coach.models.validation import (
    ChallengeResponse,
    ConstrainedValidationRequest,
    ConstrainedValidationResponse,
    FallbackVerdict,
    SentenceValidationRequest,
    SentenceValidationResponse,
    WordValidationRequest,
    WordValidationResponse,
    WritingPromptRequest,
    WritingPromptResponse,
)
from english_coach.services import prompts
from english_coach.services.gemini_client import GeminiCompletionClient
from english_coach.services.response_normalizer import (
    MALFORMED_RESPONSE_COMMENT,
    UPSTREAM_FAILURE_COMMENT,
    apply_default_comment,
    is_affirmative,
    parse_grader_verdict,
)

logger = logging.getLogger("english_coach.services.exercise_service")  # Logger for this module

CONFIGURATION_ERROR_MESSAGE = "Server configuration error"


async def fetch_challenge(settings: Settings) -> ChallengeResponse:
    try:
        client = GeminiCompletionClient(settings)
    except ConfigurationError as e:
        logger.error(str(e))
        return ChallengeResponse(error=CONFIGURATION_ERROR_MESSAGE)

    try:
        challenge = await client.complete(prompts.render_challenge_prompt())
    except UpstreamError as e:
        logger.error(f"Failed to generate challenge: {e}")
        return ChallengeResponse(error="Failed to generate challenge")

    logger.info(f"Generated challenge: '{challenge}'")
    return ChallengeResponse(challenge=challenge)


async def validate_word(request: WordValidationRequest, settings: Settings) -> WordValidationResponse:
    try:
        client = GeminiCompletionClient(settings)
    except ConfigurationError as e:
        logger.error(str(e))
        return WordValidationResponse(valid=False, error=CONFIGURATION_ERROR_MESSAGE)

    try:
        answer = await client.complete(prompts.render_word_check_prompt(request.word))
    except UpstreamError as e:
        logger.error(f"Failed to validate word '{request.word}': {e}")
        return WordValidationResponse(valid=False, error="Failed to validate word")

    return WordValidationResponse(valid=is_affirmative(answer))


async def validate_sentence(request: SentenceValidationRequest, settings: Settings) -> SentenceValidationResponse:
    try:
        client = GeminiCompletionClient(settings)
    except ConfigurationError as e:
        logger.error(str(e))
        return SentenceValidationResponse(valid=False, error=CONFIGURATION_ERROR_MESSAGE)

    prompt = prompts.render_sentence_check_prompt(request.challenge, request.sentence)
    try:
        answer = await client.complete(prompt)
    except UpstreamError as e:
        logger.error(f"Failed to validate sentence: {e}")
        return SentenceValidationResponse(valid=False, error="Failed to validate sentence")

    return SentenceValidationResponse(valid=is_affirmative(answer))


async def validate_constrained(
    request: ConstrainedValidationRequest, settings: Settings
) -> ConstrainedValidationResponse:
    try:
        client = GeminiCompletionClient(settings)
    except ConfigurationError as e:
        logger.error(str(e))
        return ConstrainedValidationResponse(valid=False, error=CONFIGURATION_ERROR_MESSAGE)

    prompt = prompts.render_constrained_prompt(request.sentence, request.word_count, request.required_word)
    try:
        completion = await client.complete(prompt)
    except UpstreamError as e:
        logger.error(f"Failed to validate: {e}")
        return ConstrainedValidationResponse(valid=False, comment=UPSTREAM_FAILURE_COMMENT)

    logger.info(f"Gemini response: {completion}")

    outcome = parse_grader_verdict(completion)
    if isinstance(outcome, FallbackVerdict):
        return ConstrainedValidationResponse(valid=False, comment=MALFORMED_RESPONSE_COMMENT)

    verdict = apply_default_comment(outcome.verdict)
    result = ConstrainedValidationResponse(
        valid=verdict.valid,
        comment=verdict.comment,
        next_prompt=verdict.next_prompt,
    )
    logger.info(f"Sending response: {result.model_dump(exclude_none=True)}")
    return result


async def fetch_writing_prompt(request: WritingPromptRequest, settings: Settings) -> WritingPromptResponse:
    try:
        client = GeminiCompletionClient(settings)
    except ConfigurationError as e:
        logger.error(str(e))
        return WritingPromptResponse(error=CONFIGURATION_ERROR_MESSAGE)

    try:
        prompt_text = await client.complete(prompts.render_writing_prompt_prompt(request.word_count))
    except UpstreamError as e:
        logger.error(f"Failed to generate prompt for word_count={request.word_count}: {e}")
        return WritingPromptResponse(error="Failed to generate prompt")

    return WritingPromptResponse(prompt=prompt_text)
