"""Exceptions raised by the 2048 game engine."""


class OutOfRangeError(IndexError):
    """Raised when a cell is addressed outside the board."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f'Invalid index {index}, expected a value in [0, {size})')


class InvalidBoardError(ValueError):
    """Raised when a board does not describe a legal 2048 grid."""
