# Area: Game
"""
career_link._game.history_chart — Score-over-level series
=========================================================

Maps the round history into the points of a score chart and renders them
as a small text chart for the terminal. The series always starts with an
origin point ``(level 0, score 0)``.
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Optional

from .session import HistoryEntry, MAX_LEVEL, POINTS_PER_CORRECT

COLUMN_WIDTH = 3  # fits the two-digit label of level 10


class ChartPoint(NamedTuple):
    level: int
    score: int
    result: Optional[str]  # "Correct", "Incorrect", or None for the origin


def score_series(history: Iterable[HistoryEntry]) -> List[ChartPoint]:
    """Build the plotted series: the origin, then one point per round."""
    points = [ChartPoint(level=0, score=0, result=None)]
    for entry in history:
        points.append(ChartPoint(
            level=entry.level,
            score=entry.score_after,
            result="Correct" if entry.is_correct else "Incorrect",
        ))
    return points


def render_chart(history: Iterable[HistoryEntry], width: int = MAX_LEVEL) -> str:
    """
    Render the series as a text column chart.

    One column per level from 0 to ``width``, labelled with the level
    number; rows are score steps of POINTS_PER_CORRECT down to a 0 baseline.
    Correct rounds are drawn with ``█``, the losing round with ``▒``. Every
    round is marked on the baseline, so a round lost at score 0 still shows.
    """
    points = score_series(history)
    top = max(POINTS_PER_CORRECT, max(p.score for p in points))
    by_level = {p.level: p for p in points}
    rows = top // POINTS_PER_CORRECT

    lines = ["Performance History"]
    for row in range(rows, -1, -1):
        threshold = row * POINTS_PER_CORRECT
        cells = []
        for level in range(0, width + 1):
            point = by_level.get(level)
            if point is None or point.result is None or point.score < threshold:
                cells.append(" " * COLUMN_WIDTH)
            elif point.result == "Incorrect":
                cells.append("▒".ljust(COLUMN_WIDTH))
            else:
                cells.append("█".ljust(COLUMN_WIDTH))
        lines.append(f"{threshold:>4} │ " + "".join(cells).rstrip())
    lines.append("     └─" + "─" * COLUMN_WIDTH * (width + 1))
    labels = "".join(str(level).ljust(COLUMN_WIDTH) for level in range(0, width + 1))
    lines.append("       " + labels.rstrip())
    lines.append("       level")
    return "\n".join(lines)
