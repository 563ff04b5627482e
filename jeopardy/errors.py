"""
Exception types raised while building and playing a board.
"""

from typing import Optional


class JeopardyError(Exception):
    """Base class for all board and session errors."""


class ConfigError(JeopardyError):
    """Settings file could not be read or holds invalid values."""


class SourceUnavailable(JeopardyError):
    """The trivia service could not be reached or sent an unusable response."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class EmptyCategory(JeopardyError):
    """A category name yielded zero clues."""

    def __init__(self, name: str):
        super().__init__(f"Category with name {name!r} does not have any clues")
        self.name = name


class InvalidCoordinate(JeopardyError):
    """A selection addressed a cell outside the current board."""

    def __init__(self, category_index: int, clue_index: int):
        super().__init__(f"No clue at coordinate ({category_index}, {clue_index})")
        self.category_index = category_index
        self.clue_index = clue_index
