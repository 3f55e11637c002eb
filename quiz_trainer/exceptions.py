"""Custom exceptions for quiz trainer errors."""
from typing import List, Optional


class QuizTrainerError(Exception):
    """Base exception for quiz trainer errors."""
    pass


class MissingIdentifierError(QuizTrainerError):
    """A command that needs an <id> was called without one."""

    def __init__(self, message: str = "Missing parameter <id>."):
        super().__init__(message)


class InvalidIdentifierError(QuizTrainerError):
    """The supplied <id> is not an integer."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(f"Parameter <id> is not a number: {raw!r}.")


class RecordNotFoundError(QuizTrainerError):
    """No quiz is stored under the requested id."""

    def __init__(self, quiz_id: int):
        self.quiz_id = quiz_id
        super().__init__(f"There is no quiz with id = {quiz_id}.")


class EmptyPoolError(QuizTrainerError):
    """Drawing from a session pool that has nothing left."""

    def __init__(self, message: str = "Session pool is empty."):
        super().__init__(message)


class ValidationError(QuizTrainerError):
    """The store rejected a create/update. One message per bad field."""

    def __init__(self, errors: Optional[List[str]] = None):
        self.errors = list(errors or [])
        super().__init__("; ".join(self.errors) or "Invalid quiz.")
