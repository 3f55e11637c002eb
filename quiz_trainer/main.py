"""Main entry point for Quiz Trainer."""
import asyncio
import logging
import sys
from pathlib import Path

from quiz_trainer.config import settings
from quiz_trainer.core import database
from quiz_trainer.handlers.commands import router
from quiz_trainer.utils.console import Console

logger = logging.getLogger(__name__)


def setup_logging():
    """Send log records to LOG_FILE so they do not mix with quiz output."""
    log_file = Path(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding="utf-8")
        ]
    )


async def prompt_loop(console: Console):
    """Read commands until quit or end of input."""
    while True:
        try:
            line = await console.prompt_line(settings.QUIZ_PROMPT)
        except EOFError:
            console.report_line()
            break

        try:
            keep_going = await router.dispatch(console, line)
        except EOFError:
            console.report_line()
            break

        if not keep_going:
            break


async def main():
    """Main function to start the trainer."""
    logger.info("Starting Quiz Trainer...")

    logger.info(f"Initializing database at {settings.DATABASE_PATH}")
    db = await database.init_database(
        settings.DATABASE_PATH, seed=settings.SEED_SAMPLE_QUIZZES
    )
    database.db = db  # Set global instance

    console = Console(use_color=settings.USE_COLOR)
    console.report_line("Type 'help' to see the commands.", "cyan")

    try:
        await prompt_loop(console)
    finally:
        await db.close()
        database.db = None
        console.report_line("Bye!", "cyan")
        logger.info("Quiz Trainer stopped")


def run():
    setup_logging()
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print()
        logger.info("Quiz Trainer stopped by user")
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        print(f"Fatal error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    run()
