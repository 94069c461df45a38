# Area: Game
"""
career_link._game.pause_timer — Post-round pause tracking
=========================================================

Tracks the pacing pause that follows a correct answer. The runner arms a
pause when a session enters ROUND_FEEDBACK and polls ``check_expired()``
from its loop; an expired pause becomes a PauseElapsed event tagged with
the session and level it was armed for.

Pauses are cancelled when the session is reset, so a level advance can
never be applied to a restarted session.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Dict, List

logger = logging.getLogger("career_link.game.pause_timer")


class PauseTimer:
    """
    Tracks pause deadlines keyed by session id.

    Each entry stores the session id, the level the pause was armed for,
    and the monotonic timestamp at which it expires.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._pauses: Dict[str, dict] = {}

    def arm(self, session_id: str, level: int, seconds: float) -> None:
        """Set (or overwrite) the pause for a session."""
        expires_at = self._clock() + seconds
        self._pauses[session_id] = {
            "session_id": session_id,
            "level": level,
            "expires_at": expires_at,
        }
        logger.debug(
            "Pause armed: level %d for %s (%.1fs)",
            level, session_id[:8], seconds,
        )

    def is_armed(self, session_id: str) -> bool:
        return session_id in self._pauses

    def remaining(self, session_id: str) -> float:
        """Seconds left before the session's pause expires (0 if none)."""
        entry = self._pauses.get(session_id)
        if entry is None:
            return 0.0
        return max(0.0, entry["expires_at"] - self._clock())

    def check_expired(self) -> List[dict]:
        """
        Return list of expired pauses and remove them from tracking.

        Each returned dict contains 'session_id' and 'level'.
        """
        now = self._clock()
        expired: List[dict] = []

        for session_id, entry in list(self._pauses.items()):
            if now >= entry["expires_at"]:
                expired.append({
                    "session_id": entry["session_id"],
                    "level": entry["level"],
                })
                del self._pauses[session_id]

        if expired:
            logger.debug("Expired pauses: %s", expired)

        return expired

    def cancel(self, session_id: str) -> None:
        """Cancel a session's pause. No-op if not found."""
        if session_id in self._pauses:
            logger.debug("Pause cancelled for %s", session_id[:8])
            del self._pauses[session_id]

    def clear(self) -> None:
        """Remove all tracked pauses."""
        self._pauses.clear()
        logger.debug("All pauses cleared")
