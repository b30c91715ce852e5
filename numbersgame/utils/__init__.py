# -*- coding: utf-8 -*-
"""
This module provides the presentation utilities of the game.

It includes the colour and text rules of the tiles, and a `WindowBoard` class drawing the board
in a Matplotlib window.
"""

from .palette import TILE_BACKGROUND, font_size, text_color, tile_background
from .windows import WindowBoard

__all__ = ["TILE_BACKGROUND", "font_size", "text_color", "tile_background", "WindowBoard"]
