"""Terminal driver: screen modes, size, keyboard input and drawing."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from blessed import Terminal
from blessed.keyboard import Keystroke

from ..models import DrawOp, ScreenPlan


class TerminalUnavailableError(RuntimeError):
    """Raised when stdout is not attached to an interactive terminal."""


class BlessedTerminal:
    """Executes screen plans and reads keys on a real terminal via blessed."""

    def __init__(self, term: Optional[Terminal] = None):
        """
        Initialize the driver.

        Args:
            term: Terminal to drive; a new one on stdout is created if omitted
        """
        self.term = term or Terminal()

    @contextmanager
    def session(self) -> Iterator["BlessedTerminal"]:
        """
        Enter the alternate screen and raw keyboard mode for the block.

        Both modes are restored when the block exits, including on error.

        Raises:
            TerminalUnavailableError: If there is no terminal to take over
        """
        if not self.term.is_a_tty:
            raise TerminalUnavailableError("stdout is not a terminal")

        logging.info("Entering full-screen raw mode.")
        with self.term.fullscreen(), self.term.raw():
            try:
                yield self
            finally:
                logging.info("Restoring terminal mode.")

    def size(self) -> tuple[int, int]:
        """Return the current (columns, rows); queried fresh on every call."""
        return self.term.width, self.term.height

    def read_key(self) -> Keystroke:
        """Block until the next keystroke arrives."""
        return self.term.inkey(timeout=None)

    def draw(self, plan: ScreenPlan) -> None:
        """Write a screen plan to the terminal and flush it."""
        out = []
        for step in plan:
            if step.op is DrawOp.MOVE:
                out.append(self.term.move_xy(step.col, step.row))
            elif step.op is DrawOp.CLEAR_SCREEN:
                out.append(self.term.clear)
            elif step.op is DrawOp.CLEAR_LINE:
                out.append(self.term.clear_eol)
            elif step.op is DrawOp.WRITE:
                out.append(self._styled(step.text, step.style))

        self.term.stream.write("".join(out))
        self.term.stream.flush()

    def _styled(self, text: str, style: str) -> str:
        if not style or not text:
            return text
        # Compound names such as 'bold_red' resolve to a formatter
        try:
            return getattr(self.term, style)(text)
        except TypeError:
            logging.warning(f"Unknown terminal style '{style}', drawing plain text.")
            return text
