"""day 셀 해석 입력/출력 데이터 모델 및 직렬화 유틸리티."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from datetime import date
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Union

from daycell.styles import DayStyles, flatten_style


# ── 상태/사유 ──


class DayState(str, Enum):
    """day 셀의 상호 배타적 시각 상태."""

    OUT_OF_RANGE = "out_of_range"
    PLAIN = "plain"
    SINGLE_SELECTED = "single_selected"
    RANGE_START = "range_start"
    RANGE_END = "range_end"
    RANGE_SINGLE_DAY = "range_single_day"
    RANGE_MIDDLE = "range_middle"
    RANGE_PENDING_START = "range_pending_start"


class RangeReason(str, Enum):
    """day가 선택 불가능한 이유."""

    AFTER_MAX = "after_max"
    BEFORE_MIN = "before_min"
    DISABLED = "disabled"
    BEFORE_MIN_DURATION = "before_min_duration"
    AFTER_MAX_DURATION = "after_max_duration"
    INVALID_DATE = "invalid_date"


# ── 입력 모델 ──


@dataclass(frozen=True)
class DateBounds:
    """선택 가능 날짜의 하한/상한. None이면 해당 방향 제한 없음."""

    min_date: date | None = None
    max_date: date | None = None


@dataclass(frozen=True)
class UniformDuration:
    """모든 range start에 동일하게 적용되는 일수 제약."""

    days: float

    def resolve_days(self, start: date) -> float | None:
        return self.days


@dataclass(frozen=True)
class AnchorDuration:
    """특정 start 날짜에만 적용되는 일수."""

    anchor: date
    days: float


@dataclass(frozen=True)
class PerAnchorDuration:
    """start 날짜별 일수 제약. 선택된 start와 정확히 같은 anchor의 첫 항목만 사용."""

    entries: tuple[AnchorDuration, ...] = ()

    def resolve_days(self, start: date) -> float | None:
        for entry in self.entries:
            if entry.anchor == start:
                return entry.days
        return None


DurationConstraint = Union[UniformDuration, PerAnchorDuration]


@dataclass(frozen=True)
class SelectionContext:
    """현재 선택 상태. end는 allow_range일 때만 의미가 있다."""

    start: date | None = None
    end: date | None = None
    allow_range: bool = False

    @property
    def is_reversed(self) -> bool:
        return (
            self.allow_range
            and self.start is not None
            and self.end is not None
            and self.end < self.start
        )

    def normalized(self) -> SelectionContext:
        """해석용 선택 상태.

        single 모드에서는 end를 버리고, range 모드에서 end < start이면 두 날짜를 교환한다.
        """
        if not self.allow_range:
            if self.end is None:
                return self
            return replace(self, end=None)
        if self.is_reversed:
            return replace(self, start=self.end, end=self.start)
        return self


@dataclass(frozen=True)
class CustomDateStyle:
    """특정 날짜에 대한 사용자 스타일 오버라이드."""

    date: date
    container_style: dict | None = None
    date_style: dict | None = None
    text_style: dict | None = None


@dataclass(frozen=True)
class MarkedDate:
    """marked_dates 맵의 값. selected가 아니면 active 오버레이."""

    selected: bool = False


@dataclass(frozen=True)
class DayTokens:
    """테마의 container/text 스타일 토큰 쌍."""

    container: dict = field(default_factory=dict)
    text: dict = field(default_factory=dict)


@dataclass(frozen=True)
class Theme:
    """테마 토큰. 내용은 해석하지 않고 그대로 스타일 레이어에 넣는다."""

    selected_day: DayTokens = field(default_factory=DayTokens)
    active_day: DayTokens = field(default_factory=DayTokens)
    text_day_color: str | None = None
    text_day_font_family: str | None = None
    text_day_font_weight: str | int | None = None
    text_day_font_size: float | None = None
    text_disabled_color: str | None = None

    def _text_attrs(self, color: str | None) -> dict[str, Any]:
        attrs = {
            "color": color,
            "fontFamily": self.text_day_font_family,
            "fontWeight": self.text_day_font_weight,
            "fontSize": self.text_day_font_size,
        }
        return {k: v for k, v in attrs.items() if v is not None}

    def day_text_attrs(self) -> dict[str, Any]:
        """선택 가능한 day 라벨의 인라인 텍스트 속성. 값이 없는 토큰은 생략."""
        return self._text_attrs(self.text_day_color)

    def disabled_text_attrs(self) -> dict[str, Any]:
        """선택 불가 day 라벨의 인라인 텍스트 속성."""
        return self._text_attrs(self.text_disabled_color)


@dataclass(frozen=True)
class StyleOverrides:
    """호출자가 넘기는 선택 상태별 스타일 prop."""

    selected_day_style: dict | None = None
    selected_range_style: dict | None = None
    selected_range_start_style: dict | None = None
    selected_range_end_style: dict | None = None


@dataclass(frozen=True)
class DayContext:
    """한 번의 렌더 패스에서 모든 day 셀이 공유하는 입력 번들 (읽기 전용)."""

    bounds: DateBounds = field(default_factory=DateBounds)
    disabled_dates: frozenset[date] = frozenset()
    min_duration: DurationConstraint | None = None
    max_duration: DurationConstraint | None = None
    selection: SelectionContext = field(default_factory=SelectionContext)
    custom_styles: tuple[CustomDateStyle, ...] = ()
    overrides: StyleOverrides = field(default_factory=StyleOverrides)
    theme: Theme = field(default_factory=Theme)
    styles: DayStyles | None = None  # None이면 resolver 기본 스타일 사용
    date_format: str = "%Y-%m-%d"
    marked_dates: Mapping[str, MarkedDate] = field(default_factory=lambda: MappingProxyType({}))


# ── 파이프라인 단계별 출력 모델 ──


@dataclass(frozen=True)
class RangeCheck:
    """Classifier 결과."""

    reasons: frozenset[RangeReason] = frozenset()

    @property
    def out_of_range(self) -> bool:
        return bool(self.reasons)


@dataclass(frozen=True)
class CustomStyle:
    """Custom style matcher 결과. 매칭 실패 시 모두 None."""

    container_style: dict | None = None
    date_style: dict | None = None
    text_style: dict | None = None


@dataclass(frozen=True)
class SelectionResult:
    """Selection resolver 결과."""

    state: DayState
    container_layers: tuple = ()
    label_style: dict | None = None
    selected_day_style: dict | None = None  # single 모드 selected_day_style prop 레이어


@dataclass(frozen=True)
class MarkedOverlay:
    """marked_dates 오버레이."""

    marked: bool = False
    selected: bool = False
    container_style: dict = field(default_factory=dict)
    text_style: dict = field(default_factory=dict)


@dataclass(frozen=True)
class DayCell:
    """렌더링 측에 넘기는 day 셀 기술. on_press는 비교에서 제외."""

    day: int
    date: date | None
    state: DayState
    reasons: frozenset[RangeReason] = frozenset()
    container_layers: tuple = ()
    pressable_layers: tuple = ()
    label_layers: tuple = ()
    marked: bool = False
    marked_selected: bool = False
    on_press: Callable[[int], None] | None = field(default=None, compare=False, repr=False)

    # 레이어가 dict를 담으므로 해시 불가 (동등 비교만 지원)
    __hash__ = None

    @property
    def pressable(self) -> bool:
        return self.state is not DayState.OUT_OF_RANGE

    @property
    def label(self) -> str:
        return str(self.day)

    @property
    def container_style(self) -> dict[str, Any]:
        return flatten_style(self.container_layers)

    @property
    def pressable_style(self) -> dict[str, Any]:
        return flatten_style(self.pressable_layers)

    @property
    def label_style(self) -> dict[str, Any]:
        return flatten_style(self.label_layers)

    def press(self) -> bool:
        """탭 처리. 선택 가능한 셀이면 on_press(day)를 한 번 호출하고 True 반환."""
        if not self.pressable:
            return False
        if self.on_press is not None:
            self.on_press(self.day)
        return True

    def to_dict(self) -> dict[str, Any]:
        """JSON 직렬화 가능한 dict (레이어는 병합된 결과로)."""
        return {
            "day": self.day,
            "date": self.date.isoformat() if self.date else None,
            "state": self.state.value,
            "reasons": sorted(r.value for r in self.reasons),
            "pressable": self.pressable,
            "marked": self.marked,
            "marked_selected": self.marked_selected,
            "container_style": self.container_style,
            "pressable_style": self.pressable_style,
            "label_style": self.label_style,
        }


# ── 직렬화 유틸리티 ──


def _serialize(obj):
    """date/enum JSON 직렬화 헬퍼."""
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, date):
        return obj.isoformat()
    raise TypeError(f"Object of type {type(obj)} is not JSON serializable")


def dump_cells(cells: DayCell | list[DayCell]) -> str:
    """DayCell 또는 list[DayCell]을 JSON 문자열로."""
    payload = cells.to_dict() if isinstance(cells, DayCell) else [c.to_dict() for c in cells]
    return json.dumps(payload, ensure_ascii=False, indent=2, default=_serialize)


def save_json(cells: DayCell | list[DayCell], path: Path) -> None:
    """DayCell 또는 list[DayCell]을 JSON 파일로 저장."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(dump_cells(cells))
        f.write("\n")


def load_json(path: Path) -> dict | list:
    """JSON 파일 로드."""
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
