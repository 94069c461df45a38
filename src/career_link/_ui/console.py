# Area: UI
"""
career_link._ui.console — Terminal front end
============================================

Prints the current screen whenever the session changes and turns typed
lines into user intents. What a line means depends on the status:

    START / GAME_OVER / VICTORY     Enter → StartGame / Restart, q → Quit
    LOADING_CHALLENGE (failed)      r → RetryLoad, q → Quit
    PLAYING                         text → SubmitAnswer, :restart, :ok, :quit
    ROUND_FEEDBACK (pause)          :restart, :quit; anything else is dropped

At the answer prompt every line is an answer, so only ``:quit`` leaves.
Lines typed while no prompt is shown are never carried over as an answer
to the next challenge.
"""

from __future__ import annotations

import os
import select
import sys
from typing import Callable, List, Optional, TextIO

from .._game.enums import GameStatus
from .._game.events import (
    DismissError,
    GameEvent,
    Quit,
    Restart,
    RetryLoad,
    StartGame,
    SubmitAnswer,
)
from .._game.session import Session
from .._shared.display import (
    ANSWER_PROMPT,
    DISMISS_COMMAND,
    QUIT_COMMAND,
    RESTART_COMMAND,
)
from .views import render_session

QUIT_WORDS = ("q", "quit", QUIT_COMMAND)
SEPARATOR = "─" * 50


class ConsoleUI:
    """
    Line-based console UI.

    Args:
        input_fn: Reads one line given a prompt (``input`` by default)
        output: Stream the screens are written to
        color: Force ANSI colors on or off; defaults to ``output.isatty()``
        input_stream: Stream checked for lines typed while no prompt is
            shown; ``sys.stdin`` when ``input_fn`` is ``input``, else none
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        output: Optional[TextIO] = None,
        color: Optional[bool] = None,
        input_stream: Optional[TextIO] = None,
    ):
        self.input_fn = input_fn
        self.output = output or sys.stdout
        if color is None:
            isatty = getattr(self.output, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color
        if input_stream is None and input_fn is input:
            input_stream = sys.stdin
        self.input_stream = input_stream

    def render(self, session: Session) -> None:
        print(SEPARATOR, file=self.output)
        print(render_session(session, color=self.color), file=self.output)
        self.output.flush()

    def read_intent(self, session: Session) -> GameEvent:
        """
        Read one line and map it to an intent.

        Lines typed before the answer prompt appeared are dropped first.

        Returns:
            The intent; Quit when the player wants to leave or input ends
        """
        if session.accepts_answers:
            self.pending_lines()
        try:
            line = self.input_fn(self._prompt_for(session))
        except EOFError:
            return Quit()
        text = line.strip()
        command = text.lower()

        if command == QUIT_COMMAND:
            return Quit()
        if command == RESTART_COMMAND:
            return Restart()
        if command == DISMISS_COMMAND:
            return DismissError()
        if session.accepts_answers:
            return SubmitAnswer(answer=text)
        if command in QUIT_WORDS:
            return Quit()

        if session.status == GameStatus.START:
            return StartGame()
        if session.is_finished:
            return Restart()
        if session.status == GameStatus.LOADING_CHALLENGE:
            return RetryLoad()
        return DismissError()

    def poll_intent(self, session: Session) -> Optional[GameEvent]:
        """
        Check, without blocking, for a command typed during the pause.

        Only Restart and Quit are honoured; every other pending line is
        consumed and dropped.

        Returns:
            Restart or Quit, or None when nothing actionable was typed
        """
        for line in self.pending_lines():
            command = line.strip().lower()
            if command == RESTART_COMMAND:
                return Restart()
            if command in QUIT_WORDS:
                return Quit()
        return None

    def pending_lines(self) -> List[str]:
        """Consume every line already waiting on ``input_stream``."""
        if self.input_stream is None:
            return []
        # Unbuffered reads: select only sees what is still on the descriptor.
        fd = self.input_stream.fileno()
        chunks = []
        while select.select([fd], [], [], 0)[0]:
            chunk = os.read(fd, 4096)
            if not chunk:
                break
            chunks.append(chunk)
        return b"".join(chunks).decode("utf-8", errors="replace").splitlines()

    @staticmethod
    def _prompt_for(session: Session) -> str:
        if session.accepts_answers:
            return ANSWER_PROMPT
        return "> "
