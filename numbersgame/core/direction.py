"""
Move directions for the 2048 game.
"""

from enum import IntEnum


class Direction(IntEnum):
    """
    Direction in which the tiles are pushed.

    The value of each member is the number of counter-clockwise quarter turns that brings the
    near edge of the direction onto the left edge of the board. This lets every direction reuse
    the same left-sliding logic through ``numpy.rot90``.
    """

    LEFT = 0
    UP = 1
    RIGHT = 2
    DOWN = 3

    @classmethod
    def from_key(cls, key: str) -> 'Direction':
        """
        Map a key name (``"left"``, ``"up"``, ``"right"``, ``"down"``) to a direction.

        Parameters
        ----------
        key : str
            Name of the key, case-insensitive.

        Returns
        -------
        Direction
            The matching direction.

        Raises
        ------
        KeyError
            If the key is not an arrow key name.
        """
        return cls[key.upper()]
