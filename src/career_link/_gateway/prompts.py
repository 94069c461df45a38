# Area: Gateway
"""
career_link._gateway.prompts — Prompt text for the AI service
=============================================================

System instructions and per-request prompts. The difficulty curve lives
here because both the live prompt and the offline demo client follow it.
"""

from __future__ import annotations

from typing import List, NamedTuple

from .schemas import ChallengeRequest, ValidationRequest


class DifficultyBand(NamedTuple):
    first_level: int
    last_level: int
    label: str
    description: str


DIFFICULTY_BANDS: List[DifficultyBand] = [
    DifficultyBand(1, 2, "Easiest", "Global giants (Real Madrid, Barcelona, Man Utd, Bayern, etc.)"),
    DifficultyBand(3, 4, "Easy-Mid", "Top-tier Big 5 clubs (Arsenal, Dortmund, Roma, etc.)"),
    DifficultyBand(5, 6, "Middle", "Major non-Big 5 or mid-table Big 5 (Benfica, Ajax, Everton, etc.)"),
    DifficultyBand(7, 8, "Hard", "Lower-table Big 5 or top-tier smaller leagues (Getafe, Celtic, etc.)"),
    DifficultyBand(9, 10, "Hardest", "Lower divisions or obscure clubs (Hull City, Luton Town, etc.)"),
]


def band_for_level(level: int) -> DifficultyBand:
    for band in DIFFICULTY_BANDS:
        if band.first_level <= level <= band.last_level:
            return band
    raise ValueError(f"Level out of range: {level}")


def _difficulty_lines() -> str:
    return "\n".join(
        f"Levels {b.first_level}-{b.last_level} ({b.label}): {b.description}"
        for b in DIFFICULTY_BANDS
    )


CHALLENGE_SYSTEM_INSTRUCTION = f"""
Role: You are the "Football Career Link" Game Engine.
Your goal is to test the player's knowledge of football transfers and player histories.
The game has 10 levels of difficulty.

Difficulty Scaling:
{_difficulty_lines()}

Constraints:
- Provide two different teams.
- Ensure there is at least one well-documented player who played for both.
- Do not repeat teams if possible (context provided in prompt).
""".strip()

VALIDATION_SYSTEM_INSTRUCTION = (
    "You are a football statistician verifying career paths. "
    "Be strict but fair about spelling."
)


def build_challenge_prompt(request: ChallengeRequest) -> str:
    avoid = ", ".join(request.avoid) if request.avoid else "none"
    return (
        f"Generate a football challenge for Level {request.level}.\n"
        f"Previously used or currently active teams to avoid repetition if possible: {avoid}.\n"
        "Return 'subjectA' and 'subjectB'."
    )


def build_validation_prompt(request: ValidationRequest) -> str:
    a, b, answer = request.subject_a, request.subject_b, request.answer
    return (
        f"Team A: {a}\n"
        f"Team B: {b}\n"
        f"User Answer: {answer}\n\n"
        f"Did the player '{answer}' play for both {a} and {b} at a senior professional level?\n"
        "If yes, return isCorrect: true and a short message confirming years played.\n"
        "If no, return isCorrect: false and a message explaining why "
        "(e.g., played for Team A but not B) and provide an 'alternativeAnswer' "
        "(a player who DID play for both)."
    )
