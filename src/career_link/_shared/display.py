# Area: Shared
"""
career_link._shared.display — Display constants for the console UI
==================================================================

ANSI color codes and fixed screen text.
"""

# ══════════════════════════════════════════════════════════════
# ANSI COLOR CODES
# ══════════════════════════════════════════════════════════════

GREEN = "\033[32m"       # Success, score
CYAN = "\033[36m"        # Titles
YELLOW = "\033[33m"      # Victory
RED = "\033[31m"         # Errors, game over
DIM = "\033[2m"          # Hints
BOLD = "\033[1m"
RESET = "\033[0m"


def paint(text: str, code: str, color: bool = True) -> str:
    """Wrap text in an ANSI code when color is enabled."""
    if not color:
        return text
    return f"{code}{text}{RESET}"


# ══════════════════════════════════════════════════════════════
# SCREEN TEXT
# ══════════════════════════════════════════════════════════════

APP_TITLE = "Career Link"
TAGLINE = "Test your football knowledge. Link two clubs with one player."
LEVELS_BLURB = "10 Levels of increasing difficulty."
ANSWER_PROMPT = "Who played for both? "

LOAD_ERROR_MESSAGE = "Failed to load level. Please try again."
VALIDATION_ERROR_MESSAGE = "Could not verify your answer. Please answer again."

# Console commands accepted at the answer prompt
RESTART_COMMAND = ":restart"
QUIT_COMMAND = ":quit"
DISMISS_COMMAND = ":ok"
