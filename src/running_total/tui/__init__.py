"""TUI (Terminal User Interface) components."""

from .app import LoopState, RunningTotalApp
from .keys import KeyAction, classify_key
from .terminal import BlessedTerminal, TerminalUnavailableError

__all__ = [
    "BlessedTerminal",
    "KeyAction",
    "LoopState",
    "RunningTotalApp",
    "TerminalUnavailableError",
    "classify_key",
]
