"""Marked-date overlay."""

from collections.abc import Mapping
from datetime import date

from daycell.models import MarkedDate, MarkedOverlay, Theme
from daycell.services.date_utils import format_day


def apply_marked_overlay(
    day: date,
    marked_dates: Mapping[str, MarkedDate],
    date_format: str,
    theme: Theme,
) -> MarkedOverlay:
    """date_format으로 만든 키가 marked_dates에 있으면 테마 토큰 오버레이 반환.

    selected면 selected_day 토큰, 아니면 active_day 토큰.
    """
    if not marked_dates:
        return MarkedOverlay()
    entry = marked_dates.get(format_day(day, date_format))
    if entry is None:
        return MarkedOverlay()
    tokens = theme.selected_day if entry.selected else theme.active_day
    return MarkedOverlay(
        marked=True,
        selected=entry.selected,
        container_style=tokens.container,
        text_style=tokens.text,
    )
