"""daycell 예외 계층.

계층 구조:
    DayCellError
    ├── InvalidDateError        (year/month/day 조합이 실제 날짜가 아님)
    ├── InconsistentRangeError  (strict 모드: end가 start보다 앞섬)
    └── ContextLoadError        (컨텍스트 번들 로드/스키마 검증 실패)
"""


class DayCellError(Exception):
    """daycell의 모든 예외의 기반 클래스."""


class InvalidDateError(DayCellError):
    """day/month/year 조합으로 날짜를 만들 수 없음."""

    def __init__(self, year: int, month: int, day: int, reason: str = ""):
        self.year = year
        self.month = month
        self.day = day
        msg = f"Invalid calendar date: year={year} month={month} day={day}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class InconsistentRangeError(DayCellError):
    """range 모드에서 selected end가 selected start보다 앞선 경우 (strict 모드 전용)."""


class ContextLoadError(DayCellError):
    """컨텍스트 번들 파일을 읽거나 검증하지 못함."""
