"""Shared fixtures for quiz trainer tests."""
import pytest
from unittest.mock import AsyncMock, MagicMock

from quiz_trainer.core import database
from quiz_trainer.database.models import QuizRecord


@pytest.fixture
def sample_quizzes():
    """The two quizzes of the arithmetic/capital example."""
    return [
        QuizRecord(id=1, question="2+2?", answer="4"),
        QuizRecord(id=2, question="capital of France?", answer="Paris"),
    ]


@pytest.fixture
def console():
    """Console mock. Answers are scripted through console.prompt_line.side_effect."""
    console = MagicMock()
    console.prompt_line = AsyncMock()
    console.colorize = MagicMock(side_effect=lambda text, color=None: str(text))
    return console


@pytest.fixture
async def db(tmp_path):
    """Real temporary SQLite database installed as the global instance."""
    instance = await database.init_database(str(tmp_path / "quizzes.db"), seed=False)
    database.db = instance
    yield instance
    await instance.close()
    database.db = None


def reported_lines(console) -> list:
    """Everything printed through report_line."""
    return [call.args[0] if call.args else "" for call in console.report_line.call_args_list]


def reported_errors(console) -> list:
    """Everything printed through report_error."""
    return [call.args[0] for call in console.report_error.call_args_list]
