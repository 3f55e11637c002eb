"""Quiz commands available at the prompt."""
import logging
import random
from typing import Optional

import aiosqlite

from quiz_trainer.database.crud import (
    create_quiz,
    delete_quiz,
    get_quiz,
    list_quizzes,
    update_quiz,
)
from quiz_trainer.exceptions import QuizTrainerError, RecordNotFoundError, ValidationError
from quiz_trainer.handlers.router import Router
from quiz_trainer.services.answer_checker import matches
from quiz_trainer.services.play_session import PlayResult, PlaySession, question_prompt
from quiz_trainer.utils.validators import validate_id

logger = logging.getLogger(__name__)

router = Router()

CREDITS = ("Quiz Trainer", "Quiz Trainer contributors")


def _report_failure(console, error: Exception):
    """Print one error line (one per field for validation errors)."""
    if isinstance(error, ValidationError):
        console.report_error("The quiz is invalid:")
        for message in error.errors:
            console.report_error(message)
    elif isinstance(error, QuizTrainerError):
        console.report_error(str(error))
    else:
        logger.exception("Storage error")
        console.report_error(f"Storage error: {error}")


def _format_quiz(console, quiz) -> str:
    arrow = console.colorize("=>", "magenta")
    return f"{quiz.question} {arrow} {quiz.answer}"


async def _load_quiz(raw_id: Optional[str]):
    quiz_id = validate_id(raw_id)
    quiz = await get_quiz(quiz_id)
    if quiz is None:
        raise RecordNotFoundError(quiz_id)
    return quiz


# ============================================================================
# ENTRY POINTS
# ============================================================================

async def run_single_test(console, raw_id: Optional[str]) -> Optional[bool]:
    """
    Ask one quiz and say whether the answer was right.

    Returns:
        True/False for a correct/incorrect answer, None if the quiz
        could not be asked (error already reported)
    """
    try:
        quiz = await _load_quiz(raw_id)
        answer = await console.prompt_line(question_prompt(quiz))
    except (QuizTrainerError, aiosqlite.Error) as e:
        _report_failure(console, e)
        return None

    if matches(answer, quiz.answer):
        console.report_line("Your answer is correct.")
        console.report_emphasized("Correct", "green")
        return True

    console.report_line("Your answer is incorrect.")
    console.report_emphasized("Incorrect", "red")
    return False


async def run_play_session(console, rng: Optional[random.Random] = None) -> Optional[PlayResult]:
    """Run one play session. Returns its result, or None if storage failed."""
    try:
        return await PlaySession(console, rng=rng).run()
    except (QuizTrainerError, aiosqlite.Error) as e:
        _report_failure(console, e)
        return None


# ============================================================================
# COMMANDS
# ============================================================================

@router.command("help", "h", description="Show this help.")
async def help_cmd(console, *args) -> bool:
    console.report_line("Commands:")
    for cmd in router.commands:
        words = "|".join((*cmd.aliases, cmd.name))
        usage = cmd.usage.replace(cmd.name, words, 1)
        console.report_line(f"  {usage} - {cmd.description}")
    return True


@router.command("list", description="List the stored quizzes.")
async def list_cmd(console, *args) -> bool:
    try:
        quizzes = await list_quizzes()
    except aiosqlite.Error as e:
        _report_failure(console, e)
        return True

    if not quizzes:
        console.report_line("No quizzes stored.")
    for quiz in quizzes:
        console.report_line(f" [{console.colorize(quiz.id, 'magenta')}]: {quiz.question}")
    return True


@router.command("show", usage="show <id>", description="Show question and answer of a quiz.")
async def show_cmd(console, raw_id: Optional[str] = None, *args) -> bool:
    try:
        quiz = await _load_quiz(raw_id)
    except (QuizTrainerError, aiosqlite.Error) as e:
        _report_failure(console, e)
        return True

    console.report_line(f"[{console.colorize(quiz.id, 'magenta')}]: {_format_quiz(console, quiz)}")
    return True


@router.command("add", description="Add a new quiz interactively.")
async def add_cmd(console, *args) -> bool:
    try:
        question = await console.prompt_line(" Enter a question: ")
        answer = await console.prompt_line(" Enter the answer: ")
        quiz = await create_quiz(question, answer)
    except (QuizTrainerError, aiosqlite.Error) as e:
        _report_failure(console, e)
        return True

    console.report_line(f"{console.colorize('Added', 'magenta')}: {_format_quiz(console, quiz)}")
    return True


@router.command("delete", usage="delete <id>", description="Delete a quiz.")
async def delete_cmd(console, raw_id: Optional[str] = None, *args) -> bool:
    try:
        quiz_id = validate_id(raw_id)
        await delete_quiz(quiz_id)
    except (QuizTrainerError, aiosqlite.Error) as e:
        _report_failure(console, e)
        return True

    console.report_line(f"Deleted quiz {console.colorize(quiz_id, 'magenta')}.")
    return True


@router.command("edit", usage="edit <id>", description="Edit a quiz.")
async def edit_cmd(console, raw_id: Optional[str] = None, *args) -> bool:
    try:
        quiz = await _load_quiz(raw_id)
        console.report_line(f" Current question: {quiz.question}")
        question = await console.prompt_line(" Enter a question: ")
        console.report_line(f" Current answer: {quiz.answer}")
        answer = await console.prompt_line(" Enter the answer: ")
        quiz = await update_quiz(quiz.id, question, answer)
    except (QuizTrainerError, aiosqlite.Error) as e:
        _report_failure(console, e)
        return True

    console.report_line(
        f" Quiz {console.colorize(quiz.id, 'magenta')} changed to: {_format_quiz(console, quiz)}"
    )
    return True


@router.command("test", usage="test <id>", description="Try to answer one quiz.")
async def test_cmd(console, raw_id: Optional[str] = None, *args) -> bool:
    await run_single_test(console, raw_id)
    return True


@router.command("play", "p", description="Answer all quizzes in random order.")
async def play_cmd(console, *args) -> bool:
    await run_play_session(console)
    return True


@router.command("credits", description="Credits.")
async def credits_cmd(console, *args) -> bool:
    title, author = CREDITS
    console.report_line(f"{title} - authors:")
    console.report_line(author, "green")
    return True


@router.command("quit", "q", "exit", description="Quit the program.")
async def quit_cmd(console, *args) -> bool:
    return False
