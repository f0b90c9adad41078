"""
Pytest configuration and shared fixtures for running-total tests.
"""

from contextlib import contextmanager

import pytest
from blessed.keyboard import Keystroke

from running_total.ledger import Ledger


class FakeTerminal:
    """Scripted terminal driver: replays keys and records what was drawn."""

    def __init__(self, keys, size=(40, 10)):
        self.keys = list(keys)
        self.sizes = [size]
        self.frames = []
        self.entered = False
        self.exited = False

    @contextmanager
    def session(self):
        self.entered = True
        try:
            yield self
        finally:
            self.exited = True

    def size(self):
        # The last size sticks once the scripted ones are used up
        return self.sizes.pop(0) if len(self.sizes) > 1 else self.sizes[0]

    def read_key(self):
        return self.keys.pop(0)

    def draw(self, plan):
        self.frames.append(plan)


def keys_for(text: str) -> list[Keystroke]:
    """Keystrokes for typing `text` character by character."""
    return [Keystroke(ch) for ch in text]


ENTER = Keystroke("\r")
TAB = Keystroke("\t")
ESCAPE = Keystroke("\x1b")
BACKSPACE = Keystroke("\x7f")
CTRL_C = Keystroke("\x03")


@pytest.fixture
def ledger() -> Ledger:
    """A fresh USD ledger."""
    return Ledger()


@pytest.fixture
def fake_terminal_factory():
    """Build a FakeTerminal from a list of keystrokes."""
    return FakeTerminal
