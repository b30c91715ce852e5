"""Colours and text rules used to draw the 2048 board."""

from numbersgame.core.gameboard import WIN_TILE

RGB = tuple[int, int, int]

WINDOW_BACKGROUND: RGB = (247, 244, 234)
BOARD_BACKGROUND: RGB = (155, 136, 120)
EMPTY_CELL: RGB = (189, 172, 151)

DARK_TEXT: RGB = (119, 110, 101)
LIGHT_TEXT: RGB = (249, 246, 242)

# ##: Tile backgrounds, any value above the win tile reuses its colour.
TILE_BACKGROUND: dict[int, RGB] = {
    2: (238, 228, 218),
    4: (237, 224, 200),
    8: (242, 177, 121),
    16: (245, 149, 99),
    32: (246, 124, 95),
    64: (246, 94, 59),
    128: (237, 207, 114),
    256: (237, 204, 97),
    512: (237, 200, 80),
    1024: (237, 197, 63),
    2048: (237, 194, 46),
}

LARGE_FONT = 36
SMALL_FONT = 28


def tile_background(value: int) -> RGB:
    """
    Background colour of a tile.

    Parameters
    ----------
    value : int
        Tile value, a positive power of two.

    Returns
    -------
    RGB
        The colour of the tile.
    """
    return TILE_BACKGROUND[min(value, WIN_TILE)]


def text_color(value: int) -> RGB:
    """Dark text on the two lightest tiles, light text everywhere else."""
    return DARK_TEXT if value <= 4 else LIGHT_TEXT


def font_size(value: int) -> int:
    """Shrink the font once the tile label has three digits or more."""
    return SMALL_FONT if value > 64 else LARGE_FONT


def to_unit(color: RGB) -> tuple[float, float, float]:
    """Convert a 0-255 RGB triple into the 0-1 floats expected by Matplotlib."""
    return tuple(channel / 255 for channel in color)
