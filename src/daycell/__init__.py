"""Calendar day-cell state resolution."""

from daycell.models import (
    AnchorDuration,
    CustomDateStyle,
    DateBounds,
    DayCell,
    DayContext,
    DayState,
    DayTokens,
    MarkedDate,
    PerAnchorDuration,
    RangeReason,
    SelectionContext,
    StyleOverrides,
    Theme,
    UniformDuration,
)
from daycell.services.composer import DayResolver, resolve_day
from daycell.styles import DayStyles, flatten_style, make_styles

__all__ = [
    "AnchorDuration",
    "CustomDateStyle",
    "DateBounds",
    "DayCell",
    "DayContext",
    "DayResolver",
    "DayState",
    "DayStyles",
    "DayTokens",
    "MarkedDate",
    "PerAnchorDuration",
    "RangeReason",
    "SelectionContext",
    "StyleOverrides",
    "Theme",
    "UniformDuration",
    "flatten_style",
    "make_styles",
    "resolve_day",
]
