# Area: Game
"""
career_link._game.enums — Game status enum
==========================================

Defines the states of the session state machine.
"""

from enum import Enum


class GameStatus(Enum):
    """
    States of the session state machine.

    State transitions:
    START -> LOADING_CHALLENGE (on StartGame)
    LOADING_CHALLENGE -> PLAYING (on ChallengeLoaded)
    LOADING_CHALLENGE -> LOADING_CHALLENGE (on ChallengeFailed / RetryLoad)
    PLAYING -> VALIDATING (on SubmitAnswer)
    VALIDATING -> ROUND_FEEDBACK (on AnswerValidated, correct)
    VALIDATING -> GAME_OVER (on AnswerValidated, incorrect)
    VALIDATING -> PLAYING (on ValidationFailed, strict gateway only)
    ROUND_FEEDBACK -> LOADING_CHALLENGE (on PauseElapsed, level < 10)
    ROUND_FEEDBACK -> VICTORY (on PauseElapsed, level == 10)
    Any state but START -> LOADING_CHALLENGE (on Restart)
    """
    START = "START"
    LOADING_CHALLENGE = "LOADING_CHALLENGE"
    PLAYING = "PLAYING"
    VALIDATING = "VALIDATING"
    ROUND_FEEDBACK = "ROUND_FEEDBACK"
    GAME_OVER = "GAME_OVER"
    VICTORY = "VICTORY"
