"""Data models for the transcript, draw instructions and settings."""

from enum import Enum
from typing import Union

from blessed.formatters import COLORS, COMPOUNDABLES, split_compound
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .money import Money


class LineKind(str, Enum):
    """Variant tag of a transcript line; the renderer maps it to a style."""

    ENTRY = "entry"
    TOTAL = "total"
    BLANK = "blank"
    ERROR = "error"


class TranscriptLine(BaseModel):
    """One line of history shown above the prompt."""

    model_config = ConfigDict(frozen=True)

    kind: LineKind = Field(..., description="What produced the line.")
    text: str = Field("", description="Unstyled display text.")


class Recorded(BaseModel):
    """Outcome of a confirmed entry that parsed successfully."""

    model_config = ConfigDict(frozen=True)

    total: Money = Field(..., description="The running total after adding the entry.")


class Rejected(BaseModel):
    """Outcome of a confirmed entry that could not be parsed."""

    model_config = ConfigDict(frozen=True)

    reason: str = Field(..., description="Human-readable parse failure reason.")


Outcome = Union[Recorded, Rejected]


class DrawOp(str, Enum):
    CLEAR_SCREEN = "clear_screen"
    MOVE = "move"
    CLEAR_LINE = "clear_line"
    WRITE = "write"


class DrawInstruction(BaseModel):
    """A single step of a screen plan. Coordinates are zero-based."""

    model_config = ConfigDict(frozen=True)

    op: DrawOp
    col: int = 0
    row: int = 0
    text: str = ""
    style: str = ""


ScreenPlan = list[DrawInstruction]


class Theme(BaseModel):
    """
    Style names per screen element.

    Names are terminal formatting attributes such as 'bold', 'red' or
    'bold_red'; an empty name means plain text.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    entry: str = ""
    total: str = "bold"
    blank: str = ""
    error: str = "red"
    separator: str = ""
    prompt: str = ""

    def style_for(self, kind: LineKind) -> str:
        return getattr(self, kind.value)

    @field_validator("*")
    @classmethod
    def check_style_name(cls, value: str) -> str:
        """Accept '' or attributes and colors joined by '_', e.g. 'bold_on_blue'."""
        if value and not all(
            part in COMPOUNDABLES or part in COLORS for part in split_compound(value)
        ):
            raise ValueError(f"Unknown style name '{value}'")
        return value


class Settings(BaseModel):
    """Presentation settings. The currency is fixed and not part of them."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    prompt: str = Field("> ", description="Marker drawn before the input text.")
    separator_glyph: str = Field("─", min_length=1, description="Glyph repeated to draw the separator.")
    separator_length: int = Field(28, ge=0, description="Number of separator glyphs.")
    theme: Theme = Field(default_factory=Theme)


DEFAULT_SETTINGS = Settings()
