# Area: Game
"""
career_link._game.events — State machine events
===============================================

User intents (StartGame, SubmitAnswer, Restart, RetryLoad, DismissError)
come from the presentation layer. Quit is an intent too, but it never
reaches the state machine: the runner stops its loop when it sees one.

Result events come from the runner and carry the ``session_id`` and
``level`` of the request they answer, so a result that arrives for an
abandoned session or an earlier level is recognised as stale.
"""

from __future__ import annotations
from dataclasses import dataclass

from .session import Challenge, ValidationResult


class GameEvent:
    """Marker base class for all events."""


# ── User intents ──────────────────────────────────────────────

@dataclass(frozen=True)
class StartGame(GameEvent):
    pass


@dataclass(frozen=True)
class Restart(GameEvent):
    pass


@dataclass(frozen=True)
class SubmitAnswer(GameEvent):
    answer: str


@dataclass(frozen=True)
class RetryLoad(GameEvent):
    pass


@dataclass(frozen=True)
class DismissError(GameEvent):
    pass


@dataclass(frozen=True)
class Quit(GameEvent):
    pass


# ── Results (tagged) ──────────────────────────────────────────

@dataclass(frozen=True)
class TaggedEvent(GameEvent):
    session_id: str
    level: int


@dataclass(frozen=True)
class ChallengeLoaded(TaggedEvent):
    challenge: Challenge


@dataclass(frozen=True)
class ChallengeFailed(TaggedEvent):
    message: str


@dataclass(frozen=True)
class AnswerValidated(TaggedEvent):
    result: ValidationResult


@dataclass(frozen=True)
class ValidationFailed(TaggedEvent):
    message: str


@dataclass(frozen=True)
class PauseElapsed(TaggedEvent):
    pass
