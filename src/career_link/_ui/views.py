# Area: UI
"""
career_link._ui.views — Session → text views
============================================

Pure functions that render a Session to the text shown on the terminal.
One view per status group; ``render_session`` picks the right one.
"""

from __future__ import annotations

from typing import List

from .._game.enums import GameStatus
from .._game.history_chart import render_chart
from .._game.session import MAX_LEVEL, Session
from .._gateway.prompts import band_for_level
from .._shared.display import (
    APP_TITLE,
    BOLD,
    CYAN,
    DIM,
    DISMISS_COMMAND,
    GREEN,
    LEVELS_BLURB,
    QUIT_COMMAND,
    RED,
    RESTART_COMMAND,
    TAGLINE,
    YELLOW,
    paint,
)


def render_header(session: Session, color: bool = True) -> str:
    title = paint(APP_TITLE, BOLD + CYAN, color)
    if session.status == GameStatus.START:
        return title
    return f"{title}    {paint(f'{session.score} pts', GREEN, color)}"


def render_error_banner(session: Session, color: bool = True) -> str:
    if not session.error:
        return ""
    return paint(f"! {session.error}", RED, color) + paint(
        f"  (type {DISMISS_COMMAND} to dismiss)", DIM, color
    )


def render_start(session: Session, color: bool = True) -> str:
    return "\n".join([
        paint(APP_TITLE, BOLD + CYAN, color),
        TAGLINE,
        paint(LEVELS_BLURB, GREEN, color),
        "",
        "Press Enter to start the campaign.",
    ])


def render_loading(session: Session, color: bool = True) -> str:
    if session.error:
        return f"Level {session.level} could not be loaded. [r]etry or [q]uit."
    return f"Scouting clubs for Level {session.level}..."


def render_round(session: Session, color: bool = True) -> str:
    challenge = session.current_challenge
    band = band_for_level(session.level)
    lines: List[str] = [
        f"LEVEL {session.level}/{MAX_LEVEL} ({band.label})    "
        + paint(f"Current Score: {session.score}", GREEN, color),
        "",
        f"  {paint(challenge.subject_a, BOLD, color)}   VS   {paint(challenge.subject_b, BOLD, color)}",
        "",
    ]
    if session.status == GameStatus.PLAYING:
        lines.append(paint(
            f"Name a player who played for both. ({RESTART_COMMAND} / {QUIT_COMMAND})",
            DIM, color,
        ))
    elif session.status == GameStatus.VALIDATING:
        lines.append(f"Checking {session.pending_answer}...")
    elif session.status == GameStatus.ROUND_FEEDBACK and session.last_feedback:
        lines.append(paint("Excellent!", BOLD + GREEN, color))
        lines.append(session.last_feedback.message)
        lines.append(paint(f"Next level loading... ({RESTART_COMMAND} / {QUIT_COMMAND})", DIM, color))
    return "\n".join(lines)


def render_finished(session: Session, color: bool = True) -> str:
    victory = session.status == GameStatus.VICTORY
    lines: List[str] = [
        paint("Legendary Status!", BOLD + YELLOW, color) if victory
        else paint("Game Over", BOLD + RED, color),
        f"Final Score: {paint(str(session.score), GREEN, color)}",
        "",
    ]
    feedback = session.last_feedback
    if not victory and feedback is not None:
        lines.append(paint("Incorrect Link", RED, color))
        lines.append(feedback.message)
        if feedback.alternative_answer:
            lines.append(f"Correct Link: {paint(feedback.alternative_answer, BOLD, color)}")
        lines.append("")
    lines.append(render_chart(session.history))
    lines.append("")
    lines.append("Press Enter to try again, or q to quit.")
    return "\n".join(lines)


_VIEWS = {
    GameStatus.START: render_start,
    GameStatus.LOADING_CHALLENGE: render_loading,
    GameStatus.PLAYING: render_round,
    GameStatus.VALIDATING: render_round,
    GameStatus.ROUND_FEEDBACK: render_round,
    GameStatus.GAME_OVER: render_finished,
    GameStatus.VICTORY: render_finished,
}


def render_session(session: Session, color: bool = True) -> str:
    """Render the full screen for a session: header, error banner, body."""
    parts = [render_header(session, color)]
    banner = render_error_banner(session, color)
    if banner:
        parts.append(banner)
    parts.append("")
    parts.append(_VIEWS[session.status](session, color))
    return "\n".join(parts)
