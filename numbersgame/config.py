# -*- coding: utf-8 -*-
"""
Window specific configuration.
"""
from dataclasses import dataclass

from numbersgame.core.gameboard import BOARD_SIZE


@dataclass(frozen=True)
class WindowConfiguration:
    """Geometry and title of the board window, in pixels."""

    title: str = "2048 Clone"
    board_size: int = 500
    border_width: int = 10

    @property
    def cell_size(self) -> int:
        """Side of a cell: the board minus one border between cells and one on each side."""
        return (self.board_size - self.border_width * (BOARD_SIZE + 1)) // BOARD_SIZE

    @property
    def corner_radius(self) -> int:
        """Radius of the rounded corners."""
        return self.cell_size // 4

    def cell_origin(self, index: int) -> tuple[int, int]:
        """
        Top-left corner of a cell.

        Parameters
        ----------
        index : int
            Row-major index of the cell.

        Returns
        -------
        tuple[int, int]
            The ``(x, y)`` position of the cell, y growing downward.
        """
        row, col = divmod(index, BOARD_SIZE)
        step = self.cell_size + self.border_width
        return self.border_width + col * step, self.border_width + row * step
