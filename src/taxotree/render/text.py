"""Label wrapping for the category grid."""

from __future__ import annotations

from typing import Callable

# Rough advance width of one glyph at the default 16px label size
AVERAGE_GLYPH_WIDTH = 8.0


def estimate_width(text: str) -> float:
    """Approximate rendered width of ``text`` in surface units."""
    return len(text) * AVERAGE_GLYPH_WIDTH


def wrap_label(
    text: str,
    width: float,
    measure: Callable[[str], float] | None = None,
) -> list[str]:
    """Greedy word wrap so each line measures within ``width``.

    A single word wider than ``width`` gets a line of its own rather
    than being split.

    Args:
        text: Label text; runs of whitespace separate words.
        width: Maximum line width in surface units.
        measure: Width function; defaults to estimate_width().

    Returns:
        Lines in reading order (empty for blank text).
    """
    measure = measure or estimate_width
    lines: list[str] = []
    line: list[str] = []
    for word in text.split():
        candidate = " ".join(line + [word])
        if line and measure(candidate) > width:
            lines.append(" ".join(line))
            line = [word]
        else:
            line.append(word)
    if line:
        lines.append(" ".join(line))
    return lines
