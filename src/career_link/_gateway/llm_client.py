# Area: Gateway
"""
career_link._gateway.llm_client — LLM client abstraction
========================================================

The gateway talks to the AI service through ``BaseLLMClient``. Every call
asks for a structured JSON object matching a given schema and returns the
raw object; parsing and validation happen in the gateway.

``AnthropicClient`` forces a single tool call whose ``input_schema`` is the
response schema, so the service is told the exact shape to produce. SDK
failures surface as GatewayTransportError; a reply without the tool call as
EmptyResponseError.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import anthropic

from ..errors import EmptyResponseError, GatewayTransportError

logger = logging.getLogger("career_link.gateway.llm_client")

DEFAULT_MODEL = "claude-3-haiku-20240307"
DEFAULT_MAX_TOKENS = 1000
DEFAULT_TIMEOUT_SECONDS = 30.0


class BaseLLMClient(ABC):
    """Abstract base for LLM clients."""

    @abstractmethod
    def generate_json(
        self,
        operation: str,
        system: str,
        prompt: str,
        schema: Dict[str, Any],
        request_payload: Dict[str, Any],
        temperature: Optional[float] = None,
    ) -> Any:
        """
        Ask the service for one JSON object matching ``schema``.

        Args:
            operation: Name of the gateway operation (also the tool name)
            system: System instruction
            prompt: User prompt
            schema: JSON schema of the expected object
            request_payload: The structured request, for error context
            temperature: Optional sampling temperature

        Returns:
            The raw object produced by the service (normally a dict)

        Raises:
            GatewayTransportError: On network, timeout or API failures
            EmptyResponseError: If the service produced nothing usable
        """
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """Check if client is properly configured."""
        ...


class AnthropicClient(BaseLLMClient):
    """Anthropic Claude API client."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.model = model
        self.max_tokens = max_tokens
        self._api_key = api_key
        self._client = anthropic.Anthropic(api_key=api_key, timeout=timeout)

    def is_available(self) -> bool:
        return bool(self._api_key or self._client.api_key)

    def generate_json(
        self,
        operation: str,
        system: str,
        prompt: str,
        schema: Dict[str, Any],
        request_payload: Dict[str, Any],
        temperature: Optional[float] = None,
    ) -> Any:
        kwargs: Dict[str, Any] = {}
        if temperature is not None:
            kwargs["temperature"] = temperature

        logger.debug("[%s] model=%s payload=%s", operation, self.model, request_payload)
        try:
            response = self._client.messages.create(
                model=self.model,
                max_tokens=self.max_tokens,
                system=system,
                messages=[{"role": "user", "content": prompt}],
                tools=[{
                    "name": operation,
                    "description": f"Report the result of {operation}.",
                    "input_schema": schema,
                }],
                tool_choice={"type": "tool", "name": operation},
                **kwargs,
            )
        except anthropic.APIError as e:
            raise GatewayTransportError(operation, request_payload, str(e)) from e

        for block in response.content or []:
            if getattr(block, "type", None) == "tool_use":
                return block.input
        raise EmptyResponseError(operation, request_payload)
