"""
career_link — Football Career Link trivia game
==============================================

Each level shows two football clubs; name a player who played for both.
Ten levels of rising difficulty, ten points per correct link, and the
first wrong answer ends the run.

Quick Start (offline, no API key):
    from career_link import ConsoleUI, GameRunner, load_config
    config = load_config()
    config["demo_mode"] = True
    GameRunner(config=config, ui=ConsoleUI()).run()

Against the AI service:
    ANTHROPIC_API_KEY=... career-link

Driving the game without a terminal:
    runner = GameRunner(config=config, gateway=my_gateway)
    runner.dispatch(StartGame())
    runner.settle()
    runner.dispatch(SubmitAnswer(answer="Cristiano Ronaldo"))
    runner.settle()
"""

from .runner import GameRunner, build_gateway
from .config import DEFAULT_CONFIG, load_config, validate_config
from .errors import (
    CareerLinkError,
    GatewayError,
    GatewayTransportError,
    GatewaySchemaError,
    EmptyResponseError,
)
from ._game import (
    GameStatus,
    Session,
    Challenge,
    ValidationResult,
    HistoryEntry,
    StartGame,
    Restart,
    SubmitAnswer,
    RetryLoad,
    DismissError,
    apply_event,
    render_chart,
)
from ._gateway import Gateway, BaseLLMClient, AnthropicClient, DemoLLMClient
from ._ui import ConsoleUI

__version__ = "1.0.0"

__all__ = [
    # Runner
    "GameRunner",
    "build_gateway",
    # Config
    "DEFAULT_CONFIG",
    "load_config",
    "validate_config",
    # Errors
    "CareerLinkError",
    "GatewayError",
    "GatewayTransportError",
    "GatewaySchemaError",
    "EmptyResponseError",
    # Game
    "GameStatus",
    "Session",
    "Challenge",
    "ValidationResult",
    "HistoryEntry",
    "StartGame",
    "Restart",
    "SubmitAnswer",
    "RetryLoad",
    "DismissError",
    "apply_event",
    "render_chart",
    # Gateway
    "Gateway",
    "BaseLLMClient",
    "AnthropicClient",
    "DemoLLMClient",
    # UI
    "ConsoleUI",
]
