# Area: Runner
"""
career_link.runner — Game runner
================================

Owns the one active session and performs the side effects its status
calls for:

    LOADING_CHALLENGE (no error)  → gateway.request_challenge → ChallengeLoaded
    VALIDATING                    → gateway.validate_answer   → AnswerValidated
    entering ROUND_FEEDBACK       → arm the pause; on expiry  → PauseElapsed

During the pause the UI is polled without blocking, so Restart and Quit
still work while answers are held back.

Every result is tagged with the session id and level it was requested for,
so results belonging to a restarted session are discarded by the state
machine. In strict mode gateway failures become ChallengeFailed or
ValidationFailed events instead of fallback values.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Dict, List, Optional

from .errors import GatewayError
from ._game import (
    AnswerValidated,
    ChallengeFailed,
    ChallengeLoaded,
    GameEvent,
    GameStatus,
    PauseElapsed,
    PauseTimer,
    Quit,
    Restart,
    Session,
    SessionStateMachine,
    StartGame,
    ValidationFailed,
)
from ._gateway import AnthropicClient, DemoLLMClient, Gateway
from ._shared import disable_ui_mode, enable_ui_mode, setup_logging
from ._shared.display import LOAD_ERROR_MESSAGE, VALIDATION_ERROR_MESSAGE
from .config import validate_config

logger = logging.getLogger("career_link.runner")

SessionListener = Callable[[Session], None]


def build_gateway(config: Dict[str, Any]) -> Gateway:
    """Build the gateway for a config: demo client offline, Anthropic otherwise."""
    if config.get("demo_mode"):
        client = DemoLLMClient()
    else:
        client = AnthropicClient(
            api_key=config.get("anthropic_api_key"),
            model=config["model"],
            max_tokens=config["max_tokens"],
            timeout=config["request_timeout_seconds"],
        )
    return Gateway(
        client,
        strict=bool(config.get("strict_gateway")),
        challenge_temperature=config.get("challenge_temperature"),
    )


class GameRunner:
    """
    Drives a session through the gateway and the pause timer.

    ``dispatch`` applies one event; ``settle`` performs pending gateway
    calls until the session waits on the player or the pause;
    ``poll_timers`` turns expired pauses into PauseElapsed events.
    ``run`` ties these to a UI in a blocking loop; the UI supplies
    ``render``, ``read_intent`` and the non-blocking ``poll_intent``.
    """

    def __init__(
        self,
        config: Dict[str, Any],
        gateway: Optional[Gateway] = None,
        ui: Any = None,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.config = config
        self.ui = ui
        self._running = False
        self._sleep = sleep

        # Setup logging
        setup_logging(log_file_path=config.get("log_file", "career_link.log"))

        # Validate config
        validate_config(config)

        self.gateway = gateway or build_gateway(config)
        self.machine = SessionStateMachine()
        self.pause_timer = PauseTimer(clock=clock)
        self.pause_seconds = config["feedback_pause_seconds"]
        self.poll_interval = config["poll_interval_seconds"]

        self._listeners: List[SessionListener] = []
        if ui is not None:
            self._listeners.append(ui.render)

    @property
    def session(self) -> Session:
        return self.machine.session

    def add_listener(self, listener: SessionListener) -> None:
        """Call ``listener(session)`` after every session change."""
        self._listeners.append(listener)

    # ── Events ────────────────────────────────────────────────

    def dispatch(self, event: GameEvent) -> Session:
        """
        Apply one event and react to the resulting status change.

        Returns:
            The current session after the event
        """
        previous = self.session
        current = self.machine.apply(event)
        if current is previous:
            return current

        if isinstance(event, (StartGame, Restart)):
            # Pending pauses belong to the abandoned session
            self.pause_timer.clear()

        if (current.status == GameStatus.ROUND_FEEDBACK
                and previous.status != GameStatus.ROUND_FEEDBACK):
            self.pause_timer.arm(current.session_id, current.level, self.pause_seconds)

        for listener in self._listeners:
            listener(current)
        return current

    def poll_timers(self) -> None:
        """Dispatch PauseElapsed for every expired pause."""
        for expired in self.pause_timer.check_expired():
            self.dispatch(PauseElapsed(
                session_id=expired["session_id"], level=expired["level"],
            ))

    # ── Effects ───────────────────────────────────────────────

    def has_pending_effect(self) -> bool:
        session = self.session
        if session.status == GameStatus.LOADING_CHALLENGE:
            return session.error is None
        return session.status == GameStatus.VALIDATING

    def run_pending_effect(self) -> bool:
        """
        Perform the gateway call the current status asks for, if any.

        Returns:
            True if a call was made
        """
        session = self.session
        if not self.has_pending_effect():
            return False
        if session.status == GameStatus.LOADING_CHALLENGE:
            self._fetch_challenge(session)
        else:
            self._validate_answer(session)
        return True

    def settle(self) -> Session:
        """Run gateway calls until the session waits on the player or a pause."""
        while self.has_pending_effect():
            before = self.session
            self.run_pending_effect()
            if self.session is before:
                logger.warning("Effect for %s produced no change", before.status.value)
                break
        return self.session

    def _fetch_challenge(self, session: Session) -> None:
        try:
            challenge = self.gateway.request_challenge(
                session.level, session.used_subjects(),
            )
        except GatewayError:
            self.dispatch(ChallengeFailed(
                session_id=session.session_id,
                level=session.level,
                message=LOAD_ERROR_MESSAGE,
            ))
            return
        self.dispatch(ChallengeLoaded(
            session_id=session.session_id, level=session.level, challenge=challenge,
        ))

    def _validate_answer(self, session: Session) -> None:
        challenge = session.current_challenge
        try:
            result = self.gateway.validate_answer(
                challenge.subject_a, challenge.subject_b, session.pending_answer,
            )
        except GatewayError:
            self.dispatch(ValidationFailed(
                session_id=session.session_id,
                level=session.level,
                message=VALIDATION_ERROR_MESSAGE,
            ))
            return
        self.dispatch(AnswerValidated(
            session_id=session.session_id, level=session.level, result=result,
        ))

    def wait_for_pause(self) -> bool:
        """
        Block until the current session's pause has expired and been applied.

        The UI is polled while waiting, so a Restart typed during the pause
        is applied at once and ends the wait.

        Returns:
            False if the player quit during the pause, True otherwise
        """
        while self._running and self.pause_timer.is_armed(self.session.session_id):
            intent = self.ui.poll_intent(self.session) if self.ui is not None else None
            if isinstance(intent, Quit):
                return False
            if intent is not None:
                self.dispatch(intent)
                continue
            remaining = self.pause_timer.remaining(self.session.session_id)
            self._sleep(min(self.poll_interval, remaining) if remaining > 0 else 0)
            self.poll_timers()
        return True

    # ── Loop ──────────────────────────────────────────────────

    def run(self) -> None:
        """Start the interactive loop. Blocks until the player quits."""
        if self.ui is None:
            raise ValueError("GameRunner.run() needs a ui")

        self._running = True
        enable_ui_mode()
        self._log_startup()

        try:
            self.ui.render(self.session)
            while self._running:
                self.settle()
                if self.session.status == GameStatus.ROUND_FEEDBACK:
                    if not self.wait_for_pause():
                        break
                    continue
                intent = self.ui.read_intent(self.session)
                if isinstance(intent, Quit):
                    break
                self.dispatch(intent)
        except KeyboardInterrupt:
            pass
        finally:
            self._running = False
            disable_ui_mode()
            logger.info("Runner stopped (level %d, score %d).",
                        self.session.level, self.session.score)

    def _log_startup(self) -> None:
        """Log startup information."""
        logger.info("=" * 60)
        logger.info("  Career Link — Starting")
        logger.info(f"  Mode:   {'demo' if self.config.get('demo_mode') else self.config.get('model')}")
        logger.info(f"  Strict: {bool(self.config.get('strict_gateway'))}")
        logger.info(f"  Pause:  {self.pause_seconds}s")
        logger.info("=" * 60)
