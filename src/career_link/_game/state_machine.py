# Area: Game
"""
career_link._game.state_machine — Session state machine
=======================================================

``apply_event(session, event)`` is a pure transition function: it returns a
new Session, or the very same Session object when the event is not accepted
in the current status (or is a stale result). No I/O happens here; the
runner performs gateway calls and timers and feeds their outcome back in as
events.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, Dict, Type

from .enums import GameStatus
from .events import (
    AnswerValidated,
    ChallengeFailed,
    ChallengeLoaded,
    DismissError,
    GameEvent,
    PauseElapsed,
    Restart,
    RetryLoad,
    StartGame,
    SubmitAnswer,
    TaggedEvent,
    ValidationFailed,
)
from .session import (
    MAX_LEVEL,
    POINTS_PER_CORRECT,
    HistoryEntry,
    Session,
)

logger = logging.getLogger("career_link.game.state_machine")


# Accepted events per status: {current_status: {event_type: possible next statuses}}
# DismissError is accepted everywhere and never changes the status.
TRANSITIONS: Dict[GameStatus, Dict[Type[GameEvent], tuple]] = {
    GameStatus.START: {
        StartGame: (GameStatus.LOADING_CHALLENGE,),
    },
    GameStatus.LOADING_CHALLENGE: {
        ChallengeLoaded: (GameStatus.PLAYING,),
        ChallengeFailed: (GameStatus.LOADING_CHALLENGE,),
        RetryLoad: (GameStatus.LOADING_CHALLENGE,),
        Restart: (GameStatus.LOADING_CHALLENGE,),
    },
    GameStatus.PLAYING: {
        SubmitAnswer: (GameStatus.VALIDATING, GameStatus.PLAYING),
        Restart: (GameStatus.LOADING_CHALLENGE,),
    },
    GameStatus.VALIDATING: {
        AnswerValidated: (GameStatus.ROUND_FEEDBACK, GameStatus.GAME_OVER),
        ValidationFailed: (GameStatus.PLAYING,),
        Restart: (GameStatus.LOADING_CHALLENGE,),
    },
    GameStatus.ROUND_FEEDBACK: {
        PauseElapsed: (GameStatus.LOADING_CHALLENGE, GameStatus.VICTORY),
        Restart: (GameStatus.LOADING_CHALLENGE,),
    },
    GameStatus.GAME_OVER: {
        StartGame: (GameStatus.LOADING_CHALLENGE,),
        Restart: (GameStatus.LOADING_CHALLENGE,),
    },
    GameStatus.VICTORY: {
        StartGame: (GameStatus.LOADING_CHALLENGE,),
        Restart: (GameStatus.LOADING_CHALLENGE,),
    },
}


def can_apply(session: Session, event: GameEvent) -> bool:
    """Check whether the current status accepts this kind of event."""
    if isinstance(event, DismissError):
        return True
    return type(event) in TRANSITIONS.get(session.status, {})


def is_stale(session: Session, event: GameEvent) -> bool:
    """A result is stale when it was requested for another session or level."""
    if not isinstance(event, TaggedEvent):
        return False
    return event.session_id != session.session_id or event.level != session.level


def apply_event(session: Session, event: GameEvent) -> Session:
    """
    Apply one event to a session.

    Args:
        session: The current session
        event: The event to apply

    Returns:
        The next session, or ``session`` itself if the event has no effect
    """
    if not can_apply(session, event):
        logger.debug(
            "Ignored %s in %s", type(event).__name__, session.status.value
        )
        return session
    if is_stale(session, event):
        logger.info(
            "Discarded stale %s (session=%s level=%s)",
            type(event).__name__, event.session_id[:8], event.level,
            extra={"session_id": event.session_id},
        )
        return session

    new_session = _HANDLERS[type(event)](session, event)
    if new_session.status != session.status:
        logger.info(
            "[%s] %s → %s (level %d, score %d)",
            new_session.session_id[:8], session.status.value,
            new_session.status.value, new_session.level, new_session.score,
            extra={"session_id": new_session.session_id},
        )
    return new_session


# ── Handlers ──────────────────────────────────────────────────

def _new_run(session: Session, event: GameEvent) -> Session:
    return Session(status=GameStatus.LOADING_CHALLENGE)


def _challenge_loaded(session: Session, event: ChallengeLoaded) -> Session:
    return replace(
        session,
        status=GameStatus.PLAYING,
        current_challenge=event.challenge,
        last_feedback=None,
        error=None,
    )


def _challenge_failed(session: Session, event: ChallengeFailed) -> Session:
    return replace(session, error=event.message)


def _retry_load(session: Session, event: RetryLoad) -> Session:
    # Only meaningful after a failed fetch; otherwise a fetch is already due.
    if session.error is None:
        return session
    return replace(session, error=None)


def _submit_answer(session: Session, event: SubmitAnswer) -> Session:
    answer = (event.answer or "").strip()
    if not answer:
        return session
    return replace(
        session,
        status=GameStatus.VALIDATING,
        pending_answer=answer,
        error=None,
    )


def _answer_validated(session: Session, event: AnswerValidated) -> Session:
    challenge = session.current_challenge
    result = event.result
    score = session.score + (POINTS_PER_CORRECT if result.is_correct else 0)
    entry = HistoryEntry(
        level=session.level,
        score_after=score,
        subject_a=challenge.subject_a,
        subject_b=challenge.subject_b,
        player_answer=session.pending_answer or "",
        is_correct=result.is_correct,
    )
    if result.is_correct:
        return replace(
            session,
            status=GameStatus.ROUND_FEEDBACK,
            score=score,
            history=session.history + (entry,),
            last_feedback=result,
            pending_answer=None,
        )
    return replace(
        session,
        status=GameStatus.GAME_OVER,
        current_challenge=None,
        history=session.history + (entry,),
        last_feedback=result,
        pending_answer=None,
    )


def _validation_failed(session: Session, event: ValidationFailed) -> Session:
    return replace(
        session,
        status=GameStatus.PLAYING,
        error=event.message,
        pending_answer=None,
    )


def _pause_elapsed(session: Session, event: PauseElapsed) -> Session:
    if session.level >= MAX_LEVEL:
        return replace(
            session,
            status=GameStatus.VICTORY,
            current_challenge=None,
            last_feedback=None,
        )
    return replace(
        session,
        status=GameStatus.LOADING_CHALLENGE,
        level=session.level + 1,
        current_challenge=None,
        last_feedback=None,
    )


def _dismiss_error(session: Session, event: DismissError) -> Session:
    if session.error is None:
        return session
    return replace(session, error=None)


_HANDLERS: Dict[Type[GameEvent], Callable[[Session, GameEvent], Session]] = {
    StartGame: _new_run,
    Restart: _new_run,
    ChallengeLoaded: _challenge_loaded,
    ChallengeFailed: _challenge_failed,
    RetryLoad: _retry_load,
    SubmitAnswer: _submit_answer,
    AnswerValidated: _answer_validated,
    ValidationFailed: _validation_failed,
    PauseElapsed: _pause_elapsed,
    DismissError: _dismiss_error,
}


class SessionStateMachine:
    """
    Holder for the one active Session.

    Wraps the pure ``apply_event`` so the runner and the UI share a single
    owner of the current session.

    Attributes:
        session: The current session
    """

    def __init__(self, session: Session = None):
        """Initialize in START with a fresh session."""
        self.session = session or Session()

    @property
    def status(self) -> GameStatus:
        return self.session.status

    def can_apply(self, event: GameEvent) -> bool:
        return can_apply(self.session, event)

    def apply(self, event: GameEvent) -> Session:
        """Apply an event and keep the resulting session."""
        self.session = apply_event(self.session, event)
        return self.session
