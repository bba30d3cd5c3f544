"""Severity levels and level parsing."""

from enum import IntEnum


class InvalidLevel(ValueError):
    """Raised when a value cannot be turned into a logging threshold."""

    def __init__(self, value: object) -> None:
        super().__init__(f"invalid level: {value!r}")
        self.value = value


class Level(IntEnum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


DEBUG = Level.DEBUG
INFO = Level.INFO
WARNING = Level.WARNING
ERROR = Level.ERROR

_NAMES = {level.name.lower(): level for level in Level}


def parse_level(name: str) -> Level:
    """
    Parse a level name, ignoring case.

    Args:
        name: One of "debug", "info", "warning" or "error"

    Returns:
        The matching Level

    Raises:
        InvalidLevel: If the name matches none of the four levels
    """
    try:
        return _NAMES[name.lower()]
    except (AttributeError, KeyError):
        raise InvalidLevel(name) from None


def resolve_level(value: int | str) -> int:
    """
    Turn a threshold given as a number or a name into its numeric form.

    Integers pass through without a range check, so a threshold of 99
    silences every level and -1 lets every level through.
    """
    if isinstance(value, str):
        return int(parse_level(value))
    if isinstance(value, int):
        return int(value)
    raise InvalidLevel(value)
