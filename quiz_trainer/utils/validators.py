"""Parsing of user-supplied quiz ids."""
import re
from typing import Optional

from quiz_trainer.exceptions import InvalidIdentifierError, MissingIdentifierError

# ASCII digits only: int() alone would also take "1_0" and non-Latin digits
_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def validate_id(raw: Optional[str]) -> int:
    """
    Turn the <id> argument of a command into an integer.

    Raises:
        MissingIdentifierError: no argument given
        InvalidIdentifierError: argument is not an integer literal
    """
    if raw is None or not str(raw).strip():
        raise MissingIdentifierError()

    text = str(raw).strip()
    if not _ID_PATTERN.fullmatch(text):
        raise InvalidIdentifierError(str(raw))

    return int(text)
