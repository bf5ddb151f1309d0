"""
Grid Rendering

Draws a grid as a PNG image: thin cell lines, thick box lines, givens in
black and solver-filled values in blue.
"""

from pathlib import Path
from typing import Union

from PIL import Image, ImageDraw, ImageFont

from sodo.solver import Grid
from sodo.solver.grid import value_to_char


# Layout settings
DEFAULT_CELL_SIZE = 48
MARGIN = 8
THIN_LINE = 1
THICK_LINE = 3

# Colors
BACKGROUND = "white"
LINE_COLOR = "black"
GIVEN_COLOR = "#000000"
FILLED_COLOR = "#1565C0"


def _load_font(cell_size: int):
    """Load a TrueType font sized to the cell, falling back to the default."""
    try:
        return ImageFont.truetype("DejaVuSans.ttf", int(cell_size * 0.6))
    except OSError:
        return ImageFont.load_default()


def render_grid(grid: Grid, cell_size: int = DEFAULT_CELL_SIZE) -> Image.Image:
    """
    Render a grid to an image.

    Args:
        grid: Grid to draw
        cell_size: Cell edge length in pixels

    Returns:
        RGB PIL Image
    """
    n, b = grid.size, grid.box_size
    side = n * cell_size + 2 * MARGIN

    image = Image.new("RGB", (side, side), BACKGROUND)
    draw = ImageDraw.Draw(image)
    font = _load_font(cell_size)

    # Grid lines, thicker on box boundaries
    for i in range(n + 1):
        offset = MARGIN + i * cell_size
        width = THICK_LINE if i % b == 0 else THIN_LINE
        draw.line([(offset, MARGIN), (offset, side - MARGIN)], fill=LINE_COLOR, width=width)
        draw.line([(MARGIN, offset), (side - MARGIN, offset)], fill=LINE_COLOR, width=width)

    for r in range(n):
        for c in range(n):
            cell = grid.get(r, c)
            if cell.is_empty:
                continue

            text = value_to_char(cell.value)
            left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
            x = MARGIN + c * cell_size + (cell_size - (right - left)) / 2 - left
            y = MARGIN + r * cell_size + (cell_size - (bottom - top)) / 2 - top
            color = GIVEN_COLOR if cell.is_given else FILLED_COLOR
            draw.text((x, y), text, fill=color, font=font)

    return image


def save_grid_image(grid: Grid, path: Union[str, Path],
                    cell_size: int = DEFAULT_CELL_SIZE) -> Path:
    """
    Render a grid and save it as PNG.

    Args:
        grid: Grid to draw
        path: Output file path (parent directories are created)
        cell_size: Cell edge length in pixels

    Returns:
        Path of the written file
    """
    output = Path(path)
    output.parent.mkdir(parents=True, exist_ok=True)
    render_grid(grid, cell_size).save(output, "PNG")
    return output
