from .state import GameState
from .core import submit, play_session, NEW_ROUND_COMMAND
from .io import write_csv, write_manifest
from .messages import describe, format_score

__all__ = [
    "GameState", "submit", "play_session", "NEW_ROUND_COMMAND",
    "write_csv", "write_manifest", "describe", "format_score",
]
