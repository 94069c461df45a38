# Area: Game
"""
Game core: session data model, events, and the session state machine.

This package handles:
- The immutable Session value and its parts
- User intents and tagged result events
- The pure transition function and its gating table
- The post-round pause timer
- The score history series
"""

from .enums import GameStatus
from .session import (
    MAX_LEVEL,
    POINTS_PER_CORRECT,
    Challenge,
    HistoryEntry,
    Session,
    ValidationResult,
)
from .events import (
    AnswerValidated,
    ChallengeFailed,
    ChallengeLoaded,
    DismissError,
    GameEvent,
    PauseElapsed,
    Quit,
    Restart,
    RetryLoad,
    StartGame,
    SubmitAnswer,
    TaggedEvent,
    ValidationFailed,
)
from .state_machine import SessionStateMachine, apply_event, can_apply
from .pause_timer import PauseTimer
from .history_chart import ChartPoint, render_chart, score_series

__all__ = [
    "GameStatus",
    "MAX_LEVEL",
    "POINTS_PER_CORRECT",
    "Challenge",
    "HistoryEntry",
    "Session",
    "ValidationResult",
    "AnswerValidated",
    "ChallengeFailed",
    "ChallengeLoaded",
    "DismissError",
    "GameEvent",
    "PauseElapsed",
    "Quit",
    "Restart",
    "RetryLoad",
    "StartGame",
    "SubmitAnswer",
    "TaggedEvent",
    "ValidationFailed",
    "SessionStateMachine",
    "apply_event",
    "can_apply",
    "PauseTimer",
    "ChartPoint",
    "render_chart",
    "score_series",
]
