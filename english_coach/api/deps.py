# english_coach/api/deps.py
import json
import logging
from typing import Any, Dict, Optional, Type, TypeVar

from fastapi import Request
from pydantic import BaseModel, ValidationError

logger = logging.getLogger("english_coach.api.deps")  # Logger for this module

INVALID_BODY_MESSAGE = "Invalid request body"

ModelT = TypeVar("ModelT", bound=BaseModel)


async def read_json_object(request: Request) -> Optional[Dict[str, Any]]:
    """Returns the body as a JSON object, or None if it is not one.

    Nesting too deep for the decoder counts as "not one" too.
    """
    raw = await request.body()
    try:
        data = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
        logger.info(f"Rejected request body on {request.url.path}: {type(e).__name__}: {e}")
        return None
    if data is None:
        # A JSON null body decodes to a request with every field at its zero value
        return {}
    if not isinstance(data, dict):
        logger.info(f"Rejected request body on {request.url.path}: expected a JSON object, got {type(data).__name__}")
        return None
    return data


def parse_body(model: Type[ModelT], data: Optional[Dict[str, Any]]) -> Optional[ModelT]:
    """Validates an already decoded body against `model`; None when it does not fit."""
    if data is None:
        return None
    try:
        return model.model_validate(data)
    except ValidationError as e:
        logger.info(f"Request body does not match {model.__name__}: {e.error_count()} error(s)")
        return None
