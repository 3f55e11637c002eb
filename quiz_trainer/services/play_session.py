"""Play mode: ask every stored quiz once, in random order, until the first miss."""
import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional

import aiosqlite

from quiz_trainer.database.crud import get_quiz, list_quizzes
from quiz_trainer.database.models import QuizRecord
from quiz_trainer.exceptions import RecordNotFoundError
from quiz_trainer.services.answer_checker import matches
from quiz_trainer.services.session_pool import SessionPool
from quiz_trainer.states.play import PlayState

logger = logging.getLogger(__name__)


@dataclass
class PlayResult:
    """Outcome of a finished play session."""
    state: PlayState
    score: int
    total: int
    asked: List[int] = field(default_factory=list)
    error: Optional[str] = None


def question_prompt(quiz: QuizRecord) -> str:
    """Prompt text for a quiz: the question followed by '? '."""
    question = quiz.question.strip()
    if not question.endswith("?"):
        question += "?"
    return f"{question} "


class PlaySession:
    """
    One run of the play mode.

    The pool and the score live only as long as this object; a new
    session is created for every `play` command.
    """

    def __init__(self, console, rng: Optional[random.Random] = None):
        self.console = console
        self.rng = rng
        self.state = PlayState.RUNNING
        self.score = 0
        self.total = 0
        self.asked: List[int] = []
        self.pool: Optional[SessionPool] = None

    async def run(self) -> PlayResult:
        """Drive draw-ask-check cycles until the session reaches a terminal state."""
        quizzes = await list_quizzes()
        self.pool = SessionPool((quiz.id for quiz in quizzes), rng=self.rng)
        self.total = len(self.pool)

        logger.info("Play session started with %d quizzes", self.total)

        if self.pool.is_empty():
            self.console.report_line("There are no quizzes to ask.")
            return self._finish(PlayState.WON)

        error = None
        while not self.state.is_terminal:
            try:
                await self._play_one()
            except RecordNotFoundError as e:
                # Skipping would hide that the pool no longer matches the store
                error = str(e)
                self.console.report_error(error)
                self.state = PlayState.ABORTED
            except aiosqlite.Error as e:
                logger.exception("Storage error during play session")
                error = f"Storage error: {e}"
                self.console.report_error(error)
                self.state = PlayState.ABORTED

        return self._finish(self.state, error)

    async def _play_one(self):
        """One cycle: draw, fetch, ask, check. Updates self.state."""
        if self.pool.is_empty():
            self.console.report_line("Nothing more to ask.")
            self.state = PlayState.WON
            return

        quiz_id = self.pool.draw_random()
        self.asked.append(quiz_id)

        quiz = await get_quiz(quiz_id)
        if quiz is None:
            raise RecordNotFoundError(quiz_id)

        answer = await self.console.prompt_line(question_prompt(quiz))

        if matches(answer, quiz.answer):
            self.score += 1
            self.console.report_line(f"CORRECT - Score: {self.score}", "green")
        else:
            self.console.report_line(f"INCORRECT - Game over. Score: {self.score}", "red")
            self.state = PlayState.LOST

    def _finish(self, state: PlayState, error: Optional[str] = None) -> PlayResult:
        self.state = state
        if state is not PlayState.LOST:
            self.console.report_line(f"Game over. Score: {self.score}")
        self.console.report_emphasized(str(self.score), "magenta")

        logger.info(
            "Play session ended: state=%s score=%d/%d",
            state.value, self.score, self.total,
        )

        return PlayResult(
            state=state,
            score=self.score,
            total=self.total,
            asked=list(self.asked),
            error=error,
        )
