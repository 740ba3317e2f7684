"""날짜 생성/정규화 유틸리티 함수."""

import calendar
from datetime import date, datetime, timedelta

from daycell.exceptions import InvalidDateError


def to_calendar_date(year: int, month: int, day: int, month_base: int = 0) -> date:
    """year/month/day → date.

    month_base=0이면 month는 0~11 (그리드 컴포넌트 기본 규약), 1이면 1~12.
    """
    if month_base not in (0, 1):
        raise ValueError(f"month_base must be 0 or 1, got {month_base}")
    try:
        return date(year, month + 1 - month_base, day)
    except (TypeError, ValueError) as e:
        raise InvalidDateError(year, month, day, str(e)) from e


def coerce_date(value) -> date:
    """date / datetime / ISO 문자열 / epoch ms 타임스탬프 → date (day 단위 정규화).

    epoch ms는 로컬 자정 기준 타임스탬프로 해석한다.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a date")
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000).date()
        except (OverflowError, OSError, ValueError) as e:
            # 플랫폼 time_t 범위를 벗어난 타임스탬프
            raise ValueError(f"timestamp {value!r} is out of range") from e
    if isinstance(value, str):
        text = value.strip()
        if len(text) > 10:
            return datetime.fromisoformat(text).date()
        return date.fromisoformat(text)
    raise TypeError(f"Cannot interpret {value!r} as a date")


def format_day(day: date, date_format: str) -> str:
    """marked_dates 조회 키 생성."""
    return day.strftime(date_format)


def date_range(since: date, until: date) -> list[date]:
    """Inclusive 날짜 리스트 반환."""
    result: list[date] = []
    current = since
    while current <= until:
        result.append(current)
        current += timedelta(days=1)
    return result


def monthly_range(year: int, month: int) -> tuple[date, date]:
    """월 → (1일, 말일) 날짜. month는 1~12."""
    first = date(year, month, 1)
    last_day = calendar.monthrange(year, month)[1]
    return first, date(year, month, last_day)
