"""States of a play session."""
from enum import Enum


class PlayState(str, Enum):
    """Lifecycle of one play session. Everything except RUNNING is terminal."""

    RUNNING = "running"     # Asking questions
    WON = "won"             # Pool exhausted, every answer correct
    LOST = "lost"           # Wrong answer given
    ABORTED = "aborted"     # A drawn quiz vanished from the store mid-session

    @property
    def is_terminal(self) -> bool:
        return self is not PlayState.RUNNING
