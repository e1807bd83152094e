"""User interface components"""

from .progress import ProgressTracker, ConsoleProgress, NullProgress
from .prompts import UserPrompt, ConsolePrompt
from .viewport import ViewportController, AUTO

__all__ = [
    "ProgressTracker",
    "ConsoleProgress",
    "NullProgress",
    "UserPrompt",
    "ConsolePrompt",
    "ViewportController",
    "AUTO",
]
