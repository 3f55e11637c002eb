"""Data models for stored quizzes."""
from dataclasses import dataclass


@dataclass
class QuizRecord:
    """Single question/answer pair. The id is assigned by the store."""
    id: int
    question: str
    answer: str


def quiz_from_row(row) -> QuizRecord:
    """Convert a row of the quizzes table to a QuizRecord."""
    return QuizRecord(
        id=row["id"],
        question=row["question"],
        answer=row["answer"],
    )
