# Area: Gateway
"""
career_link._gateway.gateway — Challenge/Validation Gateway
===========================================================

The boundary to the AI service. Two operations:

    request_challenge(level, avoid_subjects) -> Challenge
    validate_answer(subject_a, subject_b, answer) -> ValidationResult

Failure policy is chosen at construction:

- demo-fallback (``strict=False``): any GatewayError is logged and turned
  into a fixed fallback Challenge or a negative verdict, so a round always
  resolves.
- strict (``strict=True``): the GatewayError is logged and re-raised for
  the caller to handle.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..errors import GatewayError
from .._game.session import Challenge, ValidationResult
from .._shared.logging_config import log_gateway_error
from .llm_client import BaseLLMClient
from .prompts import (
    CHALLENGE_SYSTEM_INSTRUCTION,
    VALIDATION_SYSTEM_INSTRUCTION,
    build_challenge_prompt,
    build_validation_prompt,
)
from .schemas import (
    CHALLENGE_RESPONSE_SCHEMA,
    VALIDATION_RESPONSE_SCHEMA,
    ChallengeRequest,
    ChallengeResponse,
    ValidationRequest,
    ValidationResponse,
    parse_response,
)

logger = logging.getLogger("career_link.gateway")

FALLBACK_CHALLENGE = Challenge(subject_a="Real Madrid", subject_b="Manchester United")
FALLBACK_VALIDATION = ValidationResult(
    is_correct=False,
    message="There was an error verifying your answer. Please try again.",
)

DEFAULT_CHALLENGE_TEMPERATURE = 0.7


class Gateway:
    """
    Issues challenge and validation requests through an LLM client.

    Stateless apart from its configuration: calling either operation again
    with the same inputs is safe.
    """

    def __init__(
        self,
        client: BaseLLMClient,
        strict: bool = False,
        challenge_temperature: Optional[float] = DEFAULT_CHALLENGE_TEMPERATURE,
    ):
        self.client = client
        self.strict = strict
        self.challenge_temperature = challenge_temperature

    def request_challenge(self, level: int, avoid_subjects: Iterable[str] = ()) -> Challenge:
        """
        Ask for two clubs linked by at least one player, at a difficulty.

        Args:
            level: Difficulty level 1-10
            avoid_subjects: Subjects to deprioritise (advisory only)

        Returns:
            The new Challenge, or FALLBACK_CHALLENGE in demo-fallback mode

        Raises:
            GatewayError: In strict mode, on any transport or schema failure
        """
        request = ChallengeRequest(level=level, avoid=list(avoid_subjects))
        payload = request.to_payload()
        logger.info("Requesting challenge for level %d (avoid %d)", level, len(request.avoid))

        try:
            raw = self.client.generate_json(
                operation="request_challenge",
                system=CHALLENGE_SYSTEM_INSTRUCTION,
                prompt=build_challenge_prompt(request),
                schema=CHALLENGE_RESPONSE_SCHEMA,
                request_payload=payload,
                temperature=self.challenge_temperature,
            )
            response = parse_response(ChallengeResponse, raw, "request_challenge", payload)
        except GatewayError as e:
            log_gateway_error(e)
            if self.strict:
                raise
            logger.warning("Using fallback challenge for level %d", level)
            return FALLBACK_CHALLENGE

        challenge = Challenge(subject_a=response.subject_a, subject_b=response.subject_b)
        logger.info("Challenge for level %d: %s / %s",
                    level, challenge.subject_a, challenge.subject_b)
        return challenge

    def validate_answer(self, subject_a: str, subject_b: str, answer: str) -> ValidationResult:
        """
        Judge whether ``answer`` played for both clubs.

        Args:
            subject_a: First club of the challenge
            subject_b: Second club of the challenge
            answer: The player's free-text answer

        Returns:
            The verdict, or FALLBACK_VALIDATION in demo-fallback mode

        Raises:
            GatewayError: In strict mode, on any transport or schema failure
        """
        request = ValidationRequest(subject_a=subject_a, subject_b=subject_b, answer=answer)
        payload = request.to_payload()
        logger.info("Validating %r for %s / %s", answer, subject_a, subject_b)

        try:
            raw = self.client.generate_json(
                operation="validate_answer",
                system=VALIDATION_SYSTEM_INSTRUCTION,
                prompt=build_validation_prompt(request),
                schema=VALIDATION_RESPONSE_SCHEMA,
                request_payload=payload,
            )
            response = parse_response(ValidationResponse, raw, "validate_answer", payload)
        except GatewayError as e:
            log_gateway_error(e)
            if self.strict:
                raise
            logger.warning("Using fallback verdict for %r", answer)
            return FALLBACK_VALIDATION

        alternative = None
        if not response.is_correct and response.alternative_answer:
            alternative = response.alternative_answer
        result = ValidationResult(
            is_correct=response.is_correct,
            message=response.message,
            alternative_answer=alternative,
        )
        logger.info("Verdict for %r: %s", answer, "correct" if result.is_correct else "incorrect")
        return result
