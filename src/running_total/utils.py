"""Utility functions for screen layout."""

from rich.cells import cell_len, set_cell_size


def truncate_to_width(text: str, width: int) -> str:
    """
    Cut text so it occupies at most `width` terminal cells.

    Wide characters count as two cells. When a wide character straddles the
    limit it is dropped and the remaining cell is filled with a space.

    Args:
        text: Text to truncate
        width: Maximum number of cells; zero or less yields ''

    Returns:
        The truncated text, never longer than `width` cells
    """
    if width <= 0:
        return ""
    if cell_len(text) <= width:
        return text
    return set_cell_size(text, width)


def saturating_sub(value: int, amount: int) -> int:
    """Subtract without going below zero."""
    return max(0, value - amount)
