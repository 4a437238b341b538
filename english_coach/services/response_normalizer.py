# english_coach/services/response_normalizer.py
import json
import logging
import re

from pydantic import ValidationError

from english_coach.core.errors import MalformedResponseError
from english_coach.models.validation import (
    FallbackVerdict,
    GraderOutcome,
    GraderVerdict,
    ParsedVerdict,
)

logger = logging.getLogger("english_coach.services.response_normalizer")  # Logger for this module

DEFAULT_VALID_COMMENT = "ふむ...なかなかやりますわね。"
DEFAULT_INVALID_COMMENT = "あら、その英語おかしいですわよ。"
MALFORMED_RESPONSE_COMMENT = "なんだか変な応答が返ってきたわ。もう一度やり直しなさい。"
UPSTREAM_FAILURE_COMMENT = "サーバーの調子が悪いようね。もう一度試しなさい。"

_OPENING_FENCE = re.compile(r"^```[a-zA-Z0-9_-]*[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?[ \t]*```$")


def is_affirmative(text: str) -> bool:
    return text.strip().lower() == "yes"


def strip_code_fence(text: str) -> str:
    """Removes a surrounding ```lang ... ``` markdown fence, if any."""
    s = text.strip()
    if s.startswith("```"):
        s = _OPENING_FENCE.sub("", s, count=1)
    if s.endswith("```"):
        s = _CLOSING_FENCE.sub("", s, count=1)
    return s.strip()


def _decode_verdict(text: str) -> GraderVerdict:
    payload = strip_code_fence(text)
    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"Completion is not JSON: {e}", raw_text=text) from e
    except RecursionError as e:
        raise MalformedResponseError("Completion JSON is nested too deeply to decode", raw_text=text) from e
    try:
        return GraderVerdict.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Completion does not match the grader shape: {e.error_count()} error(s)", raw_text=text
        ) from e


def parse_grader_verdict(text: str) -> GraderOutcome:
    """
    Parses the constrained grader's completion.

    Never raises: anything that is not a well-formed verdict comes back as a
    FallbackVerdict carrying the raw text.
    """
    try:
        verdict = _decode_verdict(text)
    except MalformedResponseError as e:
        logger.warning(f"Failed to parse response: {e}, raw response: {e.raw_text}")
        return FallbackVerdict(raw_text=text, reason=str(e))
    return ParsedVerdict(verdict=verdict)


def apply_default_comment(verdict: GraderVerdict) -> GraderVerdict:
    if verdict.comment:
        return verdict
    comment = DEFAULT_VALID_COMMENT if verdict.valid else DEFAULT_INVALID_COMMENT
    return verdict.model_copy(update={"comment": comment})
