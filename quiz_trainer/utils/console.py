"""Console input/output used by every command."""
import asyncio
import sys
from typing import Optional, TextIO

from colorama import Fore, Style, init as colorama_init

COLORS = {
    "red": Fore.RED,
    "green": Fore.GREEN,
    "yellow": Fore.YELLOW,
    "blue": Fore.BLUE,
    "magenta": Fore.MAGENTA,
    "cyan": Fore.CYAN,
    "white": Fore.WHITE,
}


class Console:
    """Line-based terminal I/O with optional colors."""

    def __init__(self, use_color: bool = True, stream: Optional[TextIO] = None):
        self.use_color = use_color
        self._stream = stream or sys.stdout
        if use_color:
            colorama_init()

    def colorize(self, text, color: Optional[str] = None) -> str:
        """Wrap text in the ANSI codes of a named color."""
        text = str(text)
        if not self.use_color or color not in COLORS:
            return text
        return f"{COLORS[color]}{text}{Style.RESET_ALL}"

    async def prompt_line(self, text: str) -> str:
        """
        Show a prompt and wait for one line of input.

        input() runs in the default executor so the event loop is not blocked.

        Returns:
            The entered line, stripped

        Raises:
            EOFError: stdin was closed (Ctrl-D)
        """
        loop = asyncio.get_running_loop()
        answer = await loop.run_in_executor(None, input, self.colorize(text, "red"))
        return answer.strip()

    def report_line(self, text: str = "", color: Optional[str] = None):
        print(self.colorize(text, color), file=self._stream, flush=True)

    def report_emphasized(self, text: str, style: str = "green"):
        """Big bold banner, used for scores and verdicts."""
        banner = f"  {text}  "
        rule = "=" * len(banner)
        for line in (rule, banner, rule):
            if self.use_color and style in COLORS:
                line = f"{Style.BRIGHT}{COLORS[style]}{line}{Style.RESET_ALL}"
            print(line, file=self._stream, flush=True)

    def report_error(self, text: str):
        if self.use_color:
            text = f"{Style.BRIGHT}{Fore.RED}Error: {text}{Style.RESET_ALL}"
        else:
            text = f"Error: {text}"
        print(text, file=self._stream, flush=True)
