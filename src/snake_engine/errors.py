"""Exception types raised by the snake engine."""

from __future__ import annotations


class SnakeEngineError(Exception):
    """Base class for all engine errors."""


class LevelError(SnakeEngineError, ValueError):
    """Raised when level text cannot be turned into a game."""


class EmptyLevelError(LevelError):
    def __init__(self) -> None:
        super().__init__("Level text is empty.")


class InvalidCharacterError(LevelError):
    """An unrecognized character was found in the level text."""

    def __init__(self, char: str, index: int) -> None:
        self.char = char
        self.index = index
        super().__init__(f"Invalid char {char!r} at {index}.")


class InconsistentRowWidthError(LevelError):
    """A level row does not match the width of the first row."""

    def __init__(self, line: int, expected: int, actual: int) -> None:
        self.line = line
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Inconsistent row width on line {line}: "
            f"expected {expected}, got {actual}."
        )


class MissingHeadError(LevelError):
    def __init__(self) -> None:
        super().__init__("Level has no snake head marker 'h'.")


class MissingFoodError(LevelError):
    def __init__(self) -> None:
        super().__init__("Level has no food marker 'f'.")


class MissingBodyError(LevelError):
    def __init__(self) -> None:
        super().__init__("Level has no snake body marker 'b'.")


class DuplicateMarkerError(LevelError):
    """A marker that must be unique appears more than once."""

    def __init__(self, marker: str, index: int) -> None:
        self.marker = marker
        self.index = index
        super().__init__(f"Duplicate marker {marker!r} at {index}.")


class NoFreeCellError(SnakeEngineError, RuntimeError):
    """No cell is left where food could be placed."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"No free cell for food on the {width}x{height} board."
        )
