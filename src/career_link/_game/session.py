# Area: Game
"""
career_link._game.session — Game data model
===========================================

Immutable value types shared by the gateway, the state machine and the UI.
A Session is never mutated: every transition builds a new one with
``dataclasses.replace``.
"""

from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from typing import Optional, Tuple

from .enums import GameStatus

MAX_LEVEL = 10
POINTS_PER_CORRECT = 10


@dataclass(frozen=True)
class Challenge:
    """Two subjects (football clubs) the player must link with one answer."""
    subject_a: str
    subject_b: str


@dataclass(frozen=True)
class ValidationResult:
    """Verdict on a player's answer.

    ``alternative_answer`` is only set when ``is_correct`` is False.
    """
    is_correct: bool
    message: str
    alternative_answer: Optional[str] = None


@dataclass(frozen=True)
class HistoryEntry:
    """One completed round, correct or not."""
    level: int
    score_after: int
    subject_a: str
    subject_b: str
    player_answer: str
    is_correct: bool


def _new_session_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class Session:
    """
    Full state of one playthrough.

    Owned by the runner. ``session_id`` changes on every start/restart so
    results that belong to an abandoned run can be recognised and dropped.
    """
    session_id: str = field(default_factory=_new_session_id)
    status: GameStatus = GameStatus.START
    level: int = 1
    score: int = 0
    current_challenge: Optional[Challenge] = None
    history: Tuple[HistoryEntry, ...] = ()
    last_feedback: Optional[ValidationResult] = None
    error: Optional[str] = None
    pending_answer: Optional[str] = None  # answer under validation

    @property
    def is_finished(self) -> bool:
        return self.status in (GameStatus.GAME_OVER, GameStatus.VICTORY)

    @property
    def accepts_answers(self) -> bool:
        return self.status == GameStatus.PLAYING

    def used_subjects(self) -> list:
        """Both subjects of every completed round, de-duplicated, first-seen order."""
        seen = []
        for entry in self.history:
            for subject in (entry.subject_a, entry.subject_b):
                if subject not in seen:
                    seen.append(subject)
        return seen
