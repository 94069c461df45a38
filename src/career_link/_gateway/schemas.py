# Area: Gateway
"""
career_link._gateway.schemas — Wire schemas
===========================================

Request and response payloads exchanged with the AI service, and the JSON
schemas handed to it so it knows the exact response shape. Responses are
parsed strictly: a missing field, a wrong type or an unparsable body is a
GatewaySchemaError.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, ValidationError

from ..errors import EmptyResponseError, GatewaySchemaError


class WireModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        str_strip_whitespace=True,
        extra="ignore",
    )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


# ══════════════════════════════════════════════════════════════
# REQUESTS
# ══════════════════════════════════════════════════════════════

class ChallengeRequest(WireModel):
    level: int = Field(ge=1, le=10)
    avoid: List[str] = Field(default_factory=list)


class ValidationRequest(WireModel):
    subject_a: str = Field(alias="subjectA")
    subject_b: str = Field(alias="subjectB")
    answer: str


# ══════════════════════════════════════════════════════════════
# RESPONSES
# ══════════════════════════════════════════════════════════════

class ChallengeResponse(WireModel):
    subject_a: StrictStr = Field(alias="subjectA", min_length=1)
    subject_b: StrictStr = Field(alias="subjectB", min_length=1)


class ValidationResponse(WireModel):
    is_correct: StrictBool = Field(alias="isCorrect")
    message: StrictStr
    alternative_answer: Optional[StrictStr] = Field(default=None, alias="alternativeAnswer")


CHALLENGE_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "subjectA": {"type": "string", "description": "Name of the first football club"},
        "subjectB": {"type": "string", "description": "Name of the second football club"},
    },
    "required": ["subjectA", "subjectB"],
}

VALIDATION_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "isCorrect": {"type": "boolean"},
        "message": {"type": "string", "description": "Feedback message to the user"},
        "alternativeAnswer": {
            "type": ["string", "null"],
            "description": "A correct player name if the user was wrong",
        },
    },
    "required": ["isCorrect", "message"],
}


# ══════════════════════════════════════════════════════════════
# PARSING
# ══════════════════════════════════════════════════════════════

M = TypeVar("M", bound=WireModel)


def parse_response(
    model: Type[M],
    raw: Any,
    operation: str,
    request_payload: Dict[str, Any],
) -> M:
    """
    Parse a raw service response into ``model``.

    Args:
        model: The response model class
        raw: A dict, or a JSON document as text
        operation: Gateway operation name (for error context)
        request_payload: The request that produced ``raw``

    Raises:
        EmptyResponseError: If ``raw`` is None or blank
        GatewaySchemaError: If ``raw`` is not valid JSON or does not match
    """
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        raise EmptyResponseError(operation, request_payload)

    data = raw
    if isinstance(raw, str):
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise GatewaySchemaError(
                operation, request_payload, raw, [f"Invalid JSON: {e.msg}"]
            ) from e

    if not isinstance(data, dict):
        raise GatewaySchemaError(
            operation, request_payload, raw,
            [f"Expected object, got {type(data).__name__}"],
        )

    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise GatewaySchemaError(
            operation, request_payload, data, _format_errors(e)
        ) from e


def _format_errors(error: ValidationError) -> List[str]:
    messages = []
    for err in error.errors():
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        messages.append(f"{location}: {err['msg']}")
    return messages
