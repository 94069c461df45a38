# Area: Gateway
"""
Gateway to the generative AI service.

This package handles:
- Wire schemas and strict response parsing
- Prompt text and the difficulty curve
- LLM clients (Anthropic and the offline demo client)
- The fallback / strict error policy
"""

from .gateway import Gateway, FALLBACK_CHALLENGE, FALLBACK_VALIDATION
from .llm_client import BaseLLMClient, AnthropicClient
from .demo_client import DemoLLMClient
from .prompts import DIFFICULTY_BANDS, DifficultyBand, band_for_level

__all__ = [
    "Gateway",
    "FALLBACK_CHALLENGE",
    "FALLBACK_VALIDATION",
    "BaseLLMClient",
    "AnthropicClient",
    "DemoLLMClient",
    "DIFFICULTY_BANDS",
    "DifficultyBand",
    "band_for_level",
]
