"""CRUD operations for stored quizzes."""
import logging
from typing import List, Optional, Tuple

from quiz_trainer.core.database import get_db
from quiz_trainer.database.models import QuizRecord, quiz_from_row
from quiz_trainer.exceptions import RecordNotFoundError, ValidationError

logger = logging.getLogger(__name__)


# ============================================================================
# VALIDATION
# ============================================================================

def _validate_quiz(question: str, answer: str) -> Tuple[str, str]:
    """
    Trim and check the text fields of a quiz before writing it.

    Returns:
        (question, answer) trimmed

    Raises:
        ValidationError: with one message per empty field
    """
    question = (question or "").strip()
    answer = (answer or "").strip()

    errors = []
    if not question:
        errors.append("Question must not be empty.")
    if not answer:
        errors.append("Answer must not be empty.")

    if errors:
        raise ValidationError(errors)

    return question, answer


# ============================================================================
# QUIZ OPERATIONS
# ============================================================================

async def list_quizzes() -> List[QuizRecord]:
    """Get all quizzes ordered by id."""
    db = get_db()

    query = "SELECT id, question, answer FROM quizzes ORDER BY id"
    rows = await db.fetchall(query)

    return [quiz_from_row(row) for row in rows]


async def get_quiz(quiz_id: int) -> Optional[QuizRecord]:
    """
    Get quiz by id.

    Args:
        quiz_id: Quiz identifier

    Returns:
        QuizRecord or None
    """
    db = get_db()

    query = "SELECT id, question, answer FROM quizzes WHERE id = ?"
    row = await db.fetchone(query, (quiz_id,))

    if not row:
        return None

    return quiz_from_row(row)


async def create_quiz(question: str, answer: str) -> QuizRecord:
    """
    Create a new quiz.

    Returns:
        The stored QuizRecord with its new id

    Raises:
        ValidationError: question or answer is empty
    """
    question, answer = _validate_quiz(question, answer)
    db = get_db()

    query = "INSERT INTO quizzes (question, answer) VALUES (?, ?)"
    cursor = await db.execute(query, (question, answer))

    logger.info("Created quiz %s", cursor.lastrowid)

    return QuizRecord(id=cursor.lastrowid, question=question, answer=answer)


async def update_quiz(quiz_id: int, question: str, answer: str) -> QuizRecord:
    """
    Replace question and answer of an existing quiz.

    Raises:
        ValidationError: question or answer is empty
        RecordNotFoundError: no quiz with this id
    """
    question, answer = _validate_quiz(question, answer)
    db = get_db()

    query = """
        UPDATE quizzes
        SET question = ?, answer = ?, updated_at = CURRENT_TIMESTAMP
        WHERE id = ?
    """
    cursor = await db.execute(query, (question, answer, quiz_id))

    if cursor.rowcount == 0:
        raise RecordNotFoundError(quiz_id)

    logger.info("Updated quiz %s", quiz_id)

    return QuizRecord(id=quiz_id, question=question, answer=answer)


async def delete_quiz(quiz_id: int) -> None:
    """
    Delete quiz by id.

    Raises:
        RecordNotFoundError: no quiz with this id
    """
    db = get_db()

    cursor = await db.execute("DELETE FROM quizzes WHERE id = ?", (quiz_id,))

    if cursor.rowcount == 0:
        raise RecordNotFoundError(quiz_id)

    logger.info("Deleted quiz %s", quiz_id)
