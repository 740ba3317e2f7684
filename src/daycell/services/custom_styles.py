"""Custom style matcher."""

from collections.abc import Iterable
from datetime import date

from daycell.models import CustomDateStyle, CustomStyle


def match_custom_style(day: date, custom_styles: Iterable[CustomDateStyle] = ()) -> CustomStyle:
    """호출자 순서대로 훑어 day와 같은 날짜의 첫 항목 스타일 반환. 이후 매칭은 무시."""
    for entry in custom_styles:
        if entry.date == day:
            return CustomStyle(
                container_style=entry.container_style,
                date_style=entry.date_style,
                text_style=entry.text_style,
            )
    return CustomStyle()
