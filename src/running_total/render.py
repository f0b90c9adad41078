"""Screen layout: turns the current state into a list of draw instructions."""

from typing import Sequence

from .models import DEFAULT_SETTINGS, DrawInstruction, DrawOp, ScreenPlan, Settings, TranscriptLine
from .utils import saturating_sub, truncate_to_width


def render(
    buffer_text: str,
    transcript: Sequence[TranscriptLine],
    cols: int,
    rows: int,
    settings: Settings = DEFAULT_SETTINGS,
) -> ScreenPlan:
    """
    Build the full-screen layout for one frame.

    The last `rows - 2` transcript lines fill the screen from the top, followed
    by a separator row and the prompt row. Every line is cut to `cols` cells.
    Nothing is retained between calls.

    Args:
        buffer_text: Text of the entry being typed
        transcript: History lines, oldest first
        cols: Terminal width in cells
        rows: Terminal height in rows
        settings: Prompt, separator and styles to draw with

    Returns:
        The ordered draw instructions for the frame
    """
    cols = max(0, cols)
    rows = max(0, rows)
    theme = settings.theme

    plan: ScreenPlan = [
        DrawInstruction(op=DrawOp.MOVE, col=0, row=0),
        DrawInstruction(op=DrawOp.CLEAR_SCREEN),
    ]

    window = saturating_sub(rows, 2)
    # Older lines scroll off the top
    visible = list(transcript)[-window:] if window else []

    for row, line in enumerate(visible):
        plan.append(DrawInstruction(op=DrawOp.MOVE, col=0, row=row))
        text = truncate_to_width(line.text, cols)
        if text:
            plan.append(DrawInstruction(op=DrawOp.WRITE, text=text, style=theme.style_for(line.kind)))

    separator = settings.separator_glyph * settings.separator_length
    plan.extend(_status_row(saturating_sub(rows, 2), separator, cols, theme.separator))
    plan.extend(_status_row(saturating_sub(rows, 1), f"{settings.prompt}{buffer_text}", cols, theme.prompt))
    return plan


def _status_row(row: int, text: str, cols: int, style: str) -> ScreenPlan:
    return [
        DrawInstruction(op=DrawOp.MOVE, col=0, row=row),
        DrawInstruction(op=DrawOp.CLEAR_LINE),
        DrawInstruction(op=DrawOp.WRITE, text=truncate_to_width(text, cols), style=style),
    ]
