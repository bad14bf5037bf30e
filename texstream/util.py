"""File reading and texture dump helpers."""

from __future__ import annotations

from collections.abc import Sequence
from os import PathLike


def get_file_contents(filename: str | PathLike[str]) -> str:
    """Return the whole text of a file, line endings untouched."""
    with open(filename, encoding="utf-8", newline="") as file:
        return file.read()


def format_tex(width: int, height: int, image: Sequence[int]) -> str:
    """Render an RGBA byte image as rows of halved channel values."""
    lines = []
    for y in range(height):
        row_start = 4 * y * width
        pixels = (
            image[row_start + 4 * x : row_start + 4 * x + 4] for x in range(width)
        )
        lines.append(
            "".join(" ".join(str(c // 2) for c in pixel) + "    " for pixel in pixels)
        )
    return "".join(line + "\n" for line in lines)


def print_tex(width: int, height: int, image: Sequence[int]) -> None:
    """Print the rendering of format_tex followed by a blank line."""
    print(format_tex(width, height, image))