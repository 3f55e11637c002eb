"""Tests for prompt commands and the command router."""
from unittest.mock import AsyncMock, MagicMock, patch

import aiosqlite
import pytest

from conftest import reported_errors, reported_lines
from quiz_trainer.database.models import QuizRecord
from quiz_trainer.exceptions import RecordNotFoundError, ValidationError
from quiz_trainer.handlers.commands import (
    add_cmd,
    delete_cmd,
    edit_cmd,
    help_cmd,
    list_cmd,
    play_cmd,
    quit_cmd,
    router,
    run_play_session,
    run_single_test,
    show_cmd,
)
from quiz_trainer.handlers.router import Router
from quiz_trainer.main import prompt_loop
from quiz_trainer.states.play import PlayState


# ============================================================================
# ROUTER
# ============================================================================


class TestRouter:

    async def test_dispatch_passes_arguments(self, console):
        local = Router()
        handler = AsyncMock(return_value=True)
        local.command("show", usage="show <id>")(handler)

        assert await local.dispatch(console, "show 3") is True
        handler.assert_awaited_once_with(console, "3")

    async def test_alias_and_case(self, console):
        local = Router()
        handler = AsyncMock(return_value=False)
        local.command("quit", "q")(handler)

        assert await local.dispatch(console, "Q") is False
        handler.assert_awaited_once_with(console)

    async def test_empty_line(self, console):
        assert await router.dispatch(console, "   ") is True
        console.report_error.assert_not_called()

    async def test_unknown_command(self, console):
        assert await router.dispatch(console, "frobnicate") is True
        assert reported_errors(console) == [
            "Unknown command: 'frobnicate'. Type 'help' for the list."
        ]

    def test_duplicate_word_rejected(self):
        local = Router()
        local.command("play", "p")(AsyncMock())
        with pytest.raises(ValueError):
            local.command("print", "p")(AsyncMock())

    def test_all_commands_registered(self):
        words = {word for cmd in router.commands for word in cmd.words}
        assert {
            "h", "help", "list", "show", "add", "delete", "edit",
            "test", "p", "play", "credits", "q", "quit",
        } <= words


# ============================================================================
# SINGLE TEST
# ============================================================================


class TestRunSingleTest:

    @patch("quiz_trainer.handlers.commands.get_quiz", new_callable=AsyncMock)
    async def test_correct(self, mock_get, console):
        mock_get.return_value = QuizRecord(2, "capital of France?", "Paris")
        console.prompt_line.return_value = "  paris "

        assert await run_single_test(console, "2") is True

        mock_get.assert_awaited_once_with(2)
        console.prompt_line.assert_awaited_once_with("capital of France? ")
        assert "Your answer is correct." in reported_lines(console)
        console.report_emphasized.assert_called_once_with("Correct", "green")

    @patch("quiz_trainer.handlers.commands.get_quiz", new_callable=AsyncMock)
    async def test_incorrect(self, mock_get, console):
        mock_get.return_value = QuizRecord(2, "capital of France?", "Paris")
        console.prompt_line.return_value = "Berlin"

        assert await run_single_test(console, "2") is False

        assert "Your answer is incorrect." in reported_lines(console)
        console.report_emphasized.assert_called_once_with("Incorrect", "red")

    @patch("quiz_trainer.handlers.commands.get_quiz", new_callable=AsyncMock)
    async def test_missing_id(self, mock_get, console):
        assert await run_single_test(console, None) is None

        mock_get.assert_not_awaited()
        console.prompt_line.assert_not_awaited()
        assert reported_errors(console) == ["Missing parameter <id>."]

    @patch("quiz_trainer.handlers.commands.get_quiz", new_callable=AsyncMock)
    async def test_invalid_id(self, mock_get, console):
        assert await run_single_test(console, "abc") is None

        mock_get.assert_not_awaited()
        assert "not a number" in reported_errors(console)[0]

    @patch("quiz_trainer.handlers.commands.get_quiz", new_callable=AsyncMock)
    async def test_not_found(self, mock_get, console):
        mock_get.return_value = None

        assert await run_single_test(console, "7") is None

        console.prompt_line.assert_not_awaited()
        assert reported_errors(console) == ["There is no quiz with id = 7."]


# ============================================================================
# PLAY
# ============================================================================


class TestRunPlaySession:

    @patch("quiz_trainer.services.play_session.get_quiz", new_callable=AsyncMock)
    @patch("quiz_trainer.services.play_session.list_quizzes", new_callable=AsyncMock)
    async def test_returns_result(self, mock_list, mock_get, console):
        quiz = QuizRecord(1, "2+2?", "4")
        mock_list.return_value = [quiz]
        mock_get.return_value = quiz
        console.prompt_line.return_value = "4"

        result = await run_play_session(console)

        assert result.state is PlayState.WON
        assert result.score == 1

    @patch("quiz_trainer.services.play_session.list_quizzes", new_callable=AsyncMock)
    async def test_storage_error_reported(self, mock_list, console):
        mock_list.side_effect = aiosqlite.OperationalError("database is locked")

        assert await run_play_session(console) is None
        assert reported_errors(console) == ["Storage error: database is locked"]

    @patch("quiz_trainer.handlers.commands.run_play_session", new_callable=AsyncMock)
    async def test_play_command_keeps_loop(self, mock_run, console):
        assert await play_cmd(console) is True
        mock_run.assert_awaited_once_with(console)


# ============================================================================
# CRUD COMMANDS
# ============================================================================


class TestCrudCommands:

    @patch("quiz_trainer.handlers.commands.list_quizzes", new_callable=AsyncMock)
    async def test_list(self, mock_list, console, sample_quizzes):
        mock_list.return_value = sample_quizzes

        assert await list_cmd(console) is True

        assert reported_lines(console) == [" [1]: 2+2?", " [2]: capital of France?"]

    @patch("quiz_trainer.handlers.commands.list_quizzes", new_callable=AsyncMock)
    async def test_list_empty(self, mock_list, console):
        mock_list.return_value = []

        await list_cmd(console)

        assert reported_lines(console) == ["No quizzes stored."]

    @patch("quiz_trainer.handlers.commands.get_quiz", new_callable=AsyncMock)
    async def test_show(self, mock_get, console):
        mock_get.return_value = QuizRecord(1, "2+2?", "4")

        await show_cmd(console, "1")

        assert reported_lines(console) == ["[1]: 2+2? => 4"]

    @patch("quiz_trainer.handlers.commands.create_quiz", new_callable=AsyncMock)
    async def test_add(self, mock_create, console):
        console.prompt_line.side_effect = ["Capital of Italy", "Rome"]
        mock_create.return_value = QuizRecord(5, "Capital of Italy", "Rome")

        assert await add_cmd(console) is True

        mock_create.assert_awaited_once_with("Capital of Italy", "Rome")
        assert reported_lines(console) == ["Added: Capital of Italy => Rome"]

    @patch("quiz_trainer.handlers.commands.create_quiz", new_callable=AsyncMock)
    async def test_add_validation_error(self, mock_create, console):
        console.prompt_line.side_effect = ["", ""]
        mock_create.side_effect = ValidationError(
            ["Question must not be empty.", "Answer must not be empty."]
        )

        assert await add_cmd(console) is True

        assert reported_errors(console) == [
            "The quiz is invalid:",
            "Question must not be empty.",
            "Answer must not be empty.",
        ]

    @patch("quiz_trainer.handlers.commands.delete_quiz", new_callable=AsyncMock)
    async def test_delete(self, mock_delete, console):
        await delete_cmd(console, "3")

        mock_delete.assert_awaited_once_with(3)
        assert reported_lines(console) == ["Deleted quiz 3."]

    @patch("quiz_trainer.handlers.commands.delete_quiz", new_callable=AsyncMock)
    async def test_delete_missing(self, mock_delete, console):
        mock_delete.side_effect = RecordNotFoundError(3)

        assert await delete_cmd(console, "3") is True

        assert reported_errors(console) == ["There is no quiz with id = 3."]

    @patch("quiz_trainer.handlers.commands.update_quiz", new_callable=AsyncMock)
    @patch("quiz_trainer.handlers.commands.get_quiz", new_callable=AsyncMock)
    async def test_edit_reports_new_answer(self, mock_get, mock_update, console):
        mock_get.return_value = QuizRecord(4, "Capital of Spain", "Madird")
        mock_update.return_value = QuizRecord(4, "Capital of Spain", "Madrid")
        console.prompt_line.side_effect = ["Capital of Spain", "Madrid"]

        await edit_cmd(console, "4")

        mock_update.assert_awaited_once_with(4, "Capital of Spain", "Madrid")
        lines = reported_lines(console)
        assert " Current answer: Madird" in lines
        assert lines[-1] == " Quiz 4 changed to: Capital of Spain => Madrid"

    @patch("quiz_trainer.handlers.commands.update_quiz", new_callable=AsyncMock)
    @patch("quiz_trainer.handlers.commands.get_quiz", new_callable=AsyncMock)
    async def test_edit_missing(self, mock_get, mock_update, console):
        mock_get.return_value = None

        await edit_cmd(console, "4")

        console.prompt_line.assert_not_awaited()
        mock_update.assert_not_awaited()
        assert reported_errors(console) == ["There is no quiz with id = 4."]

    async def test_help_lists_commands(self, console):
        await help_cmd(console)

        lines = reported_lines(console)
        assert lines[0] == "Commands:"
        assert any(line.startswith("  p|play") for line in lines)
        assert any(line.startswith("  test <id>") for line in lines)

    async def test_quit(self, console):
        assert await quit_cmd(console) is False


# ============================================================================
# PROMPT LOOP (real database)
# ============================================================================


class TestPromptLoop:

    async def test_add_then_play_then_quit(self, db, console):
        console.prompt_line.side_effect = [
            "add", "2+2?", "4",
            "play", " 4 ",
            "quit",
        ]

        await prompt_loop(console)

        lines = reported_lines(console)
        assert "CORRECT - Score: 1" in lines
        assert "Game over. Score: 1" in lines
        assert console.prompt_line.await_count == 6

    async def test_end_of_input_leaves_loop(self, db, console):
        console.prompt_line.side_effect = EOFError()

        await prompt_loop(console)

        console.prompt_line.assert_awaited_once()

    async def test_errors_do_not_stop_loop(self, db, console):
        console.prompt_line.side_effect = ["show", "test 99", "delete x", "q"]

        await prompt_loop(console)

        assert reported_errors(console) == [
            "Missing parameter <id>.",
            "There is no quiz with id = 99.",
            "Parameter <id> is not a number: 'x'.",
        ]
        assert console.prompt_line.await_count == 4
