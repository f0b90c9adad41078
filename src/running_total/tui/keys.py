"""Mapping of terminal keystrokes to calculator actions."""

from enum import Enum

from blessed.keyboard import Keystroke


class KeyAction(Enum):
    INTERRUPT = "interrupt"
    ESCAPE = "escape"
    CHARACTER = "character"
    BACKSPACE = "backspace"
    ENTER = "enter"
    RESET = "reset"
    IGNORED = "ignored"


# In raw mode Ctrl+C arrives as ETX instead of raising SIGINT
INTERRUPT_CHAR = "\x03"

_BY_NAME = {
    "KEY_CTRL_C": KeyAction.INTERRUPT,
    "KEY_ESCAPE": KeyAction.ESCAPE,
    "KEY_BACKSPACE": KeyAction.BACKSPACE,
    "KEY_ENTER": KeyAction.ENTER,
    "KEY_TAB": KeyAction.RESET,
}

_BY_CHAR = {
    INTERRUPT_CHAR: KeyAction.INTERRUPT,
    "\x1b": KeyAction.ESCAPE,
    "\x7f": KeyAction.BACKSPACE,
    "\x08": KeyAction.BACKSPACE,
    "\r": KeyAction.ENTER,
    "\n": KeyAction.ENTER,
    "\t": KeyAction.RESET,
}


def classify_key(key: Keystroke) -> KeyAction:
    """
    Decide what a keystroke means to the calculator.

    Known sequences are matched by name first, then control characters by
    value, so the result does not depend on how the terminal encodes them.
    Any other single printable character is input; everything else is ignored.

    Args:
        key: Keystroke as returned by blessed's inkey()

    Returns:
        The action to take
    """
    if key.name in _BY_NAME:
        return _BY_NAME[key.name]

    text = str(key)
    if text in _BY_CHAR:
        return _BY_CHAR[text]

    if not key.is_sequence and len(text) == 1 and text.isprintable():
        return KeyAction.CHARACTER
    return KeyAction.IGNORED
