# -*- coding: utf-8 -*-
"""
Display the game in a window.
"""
from typing import Callable

from matplotlib import pyplot as plt
from matplotlib.patches import FancyBboxPatch

from numbersgame.config import WindowConfiguration
from numbersgame.core.gameboard import BOARD_SIZE
from numbersgame.envs import NumbersGame
from numbersgame.utils.palette import (
    BOARD_BACKGROUND,
    EMPTY_CELL,
    WINDOW_BACKGROUND,
    font_size,
    text_color,
    tile_background,
    to_unit,
)


class WindowBoard:
    """
    Window to draw the 2048 board using Matplotlib.
    Inspired by @Farama-Foundation (Minigrid).
    """

    def __init__(self, config: WindowConfiguration | None = None):
        self.config = config if config is not None else WindowConfiguration()
        side = self.config.board_size

        # ## ----> Create support.
        self.fig, self.axe = plt.subplots(figsize=(side / 100, side / 100), dpi=100)
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1)
        self.fig.patch.set_facecolor(to_unit(WINDOW_BACKGROUND))
        self.fig.canvas.manager.set_window_title(self.config.title)

        self.axe.set_xlim(0, side)
        self.axe.set_ylim(side, 0)
        self.axe.set_aspect("equal")
        self.axe.axis("off")

        # ## ----> Board background and one rounded tile per cell.
        self._rounded(0, 0, side, BOARD_BACKGROUND)
        self.tiles = []
        self.textes = []
        cell = self.config.cell_size
        for index in range(BOARD_SIZE * BOARD_SIZE):
            x, y = self.config.cell_origin(index)
            self.tiles.append(self._rounded(x, y, cell, EMPTY_CELL))
            text = self.axe.text(
                x + cell / 2,
                y + cell / 2,
                "",
                horizontalalignment="center",
                verticalalignment="center",
                fontweight="bold",
            )
            self.textes.append(text)

        self.message = self.axe.text(
            side / 2,
            side / 2,
            "",
            horizontalalignment="center",
            verticalalignment="center",
            fontsize="xx-large",
            fontweight="bold",
            color=to_unit(BOARD_BACKGROUND),
            bbox={"facecolor": to_unit(WINDOW_BACKGROUND), "alpha": 0.9, "boxstyle": "round"},
            visible=False,
        )

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        self.fig.canvas.mpl_connect("close_event", close_handler)

    def _rounded(self, x: float, y: float, side: float, color) -> FancyBboxPatch:
        """Draw a rounded square and return its patch."""
        radius = self.config.corner_radius
        patch = FancyBboxPatch(
            (x + radius, y + radius),
            side - 2 * radius,
            side - 2 * radius,
            boxstyle=f"round,pad={radius}",
            facecolor=to_unit(color),
            edgecolor="none",
        )
        self.axe.add_patch(patch)
        return patch

    def show_board(self, game: NumbersGame):
        """
        Show the board or update the board being shown.

        Parameters
        ----------
        game: NumbersGame
            Game to draw
        """
        # ## ----> Update the tiles.
        for index, (tile, text) in enumerate(zip(self.tiles, self.textes)):
            value = game.get_value_at(index)
            if value == 0:
                tile.set_facecolor(to_unit(EMPTY_CELL))
                text.set_text("")
                continue

            tile.set_facecolor(to_unit(tile_background(value)))
            text.set_text(str(value))
            text.set_color(to_unit(text_color(value)))
            text.set_fontsize(font_size(value))

        self.fig.canvas.manager.set_window_title(self.config.title)
        self.message.set_visible(False)
        self._redraw()

    def show_message(self, title: str, message: str):
        """
        Show a notification above the board.

        Parameters
        ----------
        title: str
            Title of the notification, also used as window title
        message: str
            Text of the notification
        """
        self.fig.canvas.manager.set_window_title(f"{self.config.title} - {title}")
        self.message.set_text(message)
        self.message.set_visible(True)
        self._redraw()

    def _redraw(self):
        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

        # ## ----> Let Matplotlib process UI events
        plt.pause(0.001)

    def register_key_handler(self, key_handler: Callable):
        """
        Register a keyboard event handler.

        Parameters
        ----------
        key_handler: Callable
            Key handler
        """
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def show(self, block: bool = True):
        """
        Show the window, and start an event loop.

        Parameters
        ----------
        block: bool
            Activate or not the interactive mode
        """
        # ## ----> If not blocking, trigger interactive mode.
        if not block:
            plt.ion()

        # ## ----> Show the plot.
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
