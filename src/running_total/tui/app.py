"""Main interactive loop of the running-total calculator."""

import logging
from enum import Enum
from typing import Any, ContextManager, Protocol

from blessed.keyboard import Keystroke

from ..buffer import InputBuffer
from ..ledger import Ledger
from ..models import DEFAULT_SETTINGS, ScreenPlan, Settings
from ..render import render
from .keys import KeyAction, classify_key


class LoopState(Enum):
    RUNNING = "running"
    TERMINATED = "terminated"


class TerminalDriver(Protocol):
    def session(self) -> ContextManager[Any]: ...

    def size(self) -> tuple[int, int]: ...

    def read_key(self) -> Keystroke: ...

    def draw(self, plan: ScreenPlan) -> None: ...


class RunningTotalApp:
    """
    Reads one key at a time, updates the entry and ledger, and redraws.

    The app owns all mutable state, so it can be driven without a real
    terminal by passing any object with the TerminalDriver methods.
    """

    def __init__(self, terminal: TerminalDriver, settings: Settings = DEFAULT_SETTINGS):
        """
        Initialize the application.

        Args:
            terminal: Driver used for screen modes, input and drawing
            settings: Presentation settings
        """
        self.terminal = terminal
        self.settings = settings
        self.buffer = InputBuffer()
        self.ledger = Ledger()
        self.state = LoopState.RUNNING

    def run(self) -> None:
        """
        Run until Escape or Ctrl+C.

        Terminal errors are not handled here; they propagate after the
        session has restored the terminal.
        """
        with self.terminal.session():
            while self.state is LoopState.RUNNING:
                self.redraw()
                self.handle_key(self.terminal.read_key())
        logging.info("Calculator terminated.")

    def redraw(self) -> None:
        cols, rows = self.terminal.size()
        plan = render(
            self.buffer.as_text(),
            self.ledger.transcript_view(),
            cols,
            rows,
            self.settings,
        )
        self.terminal.draw(plan)

    def handle_key(self, key: Keystroke) -> LoopState:
        """
        Apply one keystroke to the calculator state.

        Args:
            key: The keystroke read from the terminal

        Returns:
            The state after the key was handled
        """
        action = classify_key(key)

        if action in (KeyAction.INTERRUPT, KeyAction.ESCAPE):
            self.state = LoopState.TERMINATED
        elif action is KeyAction.CHARACTER:
            self.buffer.append(str(key))
        elif action is KeyAction.BACKSPACE:
            self.buffer.delete_last()
        elif action is KeyAction.ENTER:
            self.ledger.record_attempt(self.buffer.as_text())
            self.buffer.clear()
        elif action is KeyAction.RESET:
            self.buffer.clear()
            self.ledger.reset()

        return self.state
