"""Maps command words typed at the prompt to handler coroutines."""
import logging
import shlex
from dataclasses import dataclass, field
from typing import Awaitable, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

Handler = Callable[..., Awaitable[bool]]


@dataclass
class Command:
    """Registered command: canonical name, aliases, help line."""
    name: str
    handler: Handler
    aliases: Tuple[str, ...] = ()
    usage: str = ""
    description: str = ""
    words: Tuple[str, ...] = field(init=False)

    def __post_init__(self):
        self.words = (self.name, *self.aliases)


class Router:
    """
    Command registry.

    Handlers are registered with the `command` decorator and receive the
    console plus the remaining words of the line. A handler returns False
    to leave the prompt loop.
    """

    def __init__(self):
        self._commands: List[Command] = []
        self._by_word: Dict[str, Command] = {}

    def command(self, name: str, *aliases: str, usage: str = "", description: str = ""):
        def decorator(handler: Handler) -> Handler:
            cmd = Command(name, handler, aliases, usage or name, description)
            for word in cmd.words:
                if word in self._by_word:
                    raise ValueError(f"Command word already registered: {word}")
                self._by_word[word] = cmd
            self._commands.append(cmd)
            return handler
        return decorator

    @property
    def commands(self) -> List[Command]:
        return list(self._commands)

    def resolve(self, word: str) -> Optional[Command]:
        return self._by_word.get(word.lower())

    async def dispatch(self, console, line: str) -> bool:
        """
        Run the command typed on one line.

        Returns:
            False when the prompt loop should stop, True otherwise
        """
        try:
            words = shlex.split(line)
        except ValueError:
            words = line.split()

        if not words:
            return True

        word, args = words[0], words[1:]
        cmd = self.resolve(word)
        if cmd is None:
            console.report_error(f"Unknown command: '{word}'. Type 'help' for the list.")
            return True

        logger.debug("Dispatching %s %s", cmd.name, args)
        return await cmd.handler(console, *args)
