# Area: UI
"""
Presentation layer: text views of a Session and the console front end.
"""

from .views import render_session
from .console import ConsoleUI

__all__ = [
    "render_session",
    "ConsoleUI",
]
