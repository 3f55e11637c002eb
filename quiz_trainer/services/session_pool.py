"""Working set of quiz ids not yet asked in the current play session."""
import logging
import random
from typing import Iterable, List, Optional

from quiz_trainer.exceptions import EmptyPoolError

logger = logging.getLogger(__name__)


class SessionPool:
    """
    Snapshot of quiz ids taken at session start.

    Every id is handed out at most once and the pool shrinks by exactly
    one per draw. Nothing is ever added back.
    """

    def __init__(self, quiz_ids: Iterable[int], rng: Optional[random.Random] = None):
        """
        Args:
            quiz_ids: Ids known to the store at session start
            rng: Random source. Defaults to SystemRandom, which cannot be replayed.
        """
        # dict.fromkeys keeps the first occurrence and drops duplicates
        self._ids: List[int] = list(dict.fromkeys(quiz_ids))
        self._rng = rng or random.SystemRandom()

    def __len__(self) -> int:
        return len(self._ids)

    def is_empty(self) -> bool:
        return not self._ids

    def draw_random(self) -> int:
        """
        Remove and return one id chosen uniformly from what is left.

        Raises:
            EmptyPoolError: nothing left to draw
        """
        if not self._ids:
            raise EmptyPoolError()

        index = self._rng.randrange(len(self._ids))
        # Swap with the last element so removal is O(1)
        last = len(self._ids) - 1
        self._ids[index], self._ids[last] = self._ids[last], self._ids[index]
        quiz_id = self._ids.pop()

        logger.debug("Drew quiz %s, %d left", quiz_id, len(self._ids))
        return quiz_id
