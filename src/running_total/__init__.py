"""Running Total - an interactive terminal running-total calculator."""

__version__ = "0.1.0"
__author__ = "Running Total Team"

from .buffer import InputBuffer
from .ledger import Ledger
from .models import LineKind, Recorded, Rejected, Settings, TranscriptLine
from .money import USD, AmountParseError, Currency, Money, format_amount, is_positive, parse_amount
from .render import render

__all__ = [
    "AmountParseError",
    "Currency",
    "InputBuffer",
    "Ledger",
    "LineKind",
    "Money",
    "Recorded",
    "Rejected",
    "Settings",
    "TranscriptLine",
    "USD",
    "format_amount",
    "is_positive",
    "parse_amount",
    "render",
]
