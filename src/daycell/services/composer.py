"""Day 셀 해석 파이프라인: classify → custom style → selection → marked → compose.

한 번에 한 day씩, 입력 번들은 읽기 전용으로만 다룬다. 내부 캐시나 공유 상태 없음.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date

from daycell.config import AppConfig
from daycell.exceptions import InconsistentRangeError, InvalidDateError
from daycell.models import (
    CustomStyle,
    DayCell,
    DayContext,
    DayState,
    MarkedOverlay,
    RangeReason,
    SelectionResult,
)
from daycell.services.classifier import classify
from daycell.services.custom_styles import match_custom_style
from daycell.services.date_utils import date_range, to_calendar_date
from daycell.services.marked import apply_marked_overlay
from daycell.services.selection import resolve_selection
from daycell.styles import DayStyles

logger = logging.getLogger(__name__)

PressCallback = Callable[[int], None]


def compose_out_of_range(
    day_number: int,
    day: date | None,
    reasons: frozenset[RangeReason],
    styles: DayStyles,
    context: DayContext,
) -> DayCell:
    """선택 불가 셀. custom/selection/marked 레이어는 적용하지 않고 탭도 받지 않는다."""
    return DayCell(
        day=day_number,
        date=day,
        state=DayState.OUT_OF_RANGE,
        reasons=reasons,
        container_layers=(styles.day_wrapper,),
        pressable_layers=(),
        label_layers=(styles.disabled_text, context.theme.disabled_text_attrs()),
    )


def compose_in_range(
    day_number: int,
    day: date,
    styles: DayStyles,
    context: DayContext,
    custom: CustomStyle,
    selection: SelectionResult,
    marked: MarkedOverlay,
    on_press: PressCallback | None = None,
) -> DayCell:
    """선택 가능한 셀의 container / pressable / label 레이어 구성 (뒤쪽 레이어 우선)."""
    return DayCell(
        day=day_number,
        date=day,
        state=selection.state,
        container_layers=(styles.day_wrapper, custom.container_style),
        pressable_layers=(
            custom.date_style,
            selection.container_layers,
            selection.selected_day_style,
            marked.container_style,
        ),
        label_layers=(
            styles.day_label,
            selection.label_style,
            custom.text_style,
            context.theme.day_text_attrs(),
            marked.text_style,
        ),
        marked=marked.marked,
        marked_selected=marked.selected,
        on_press=on_press,
    )


class DayResolver:
    """설정(month 규약, 기본 스타일, strict 모드)을 묶어 day 셀을 해석."""

    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config or AppConfig()
        self._styles = self._config.make_styles()

    @property
    def config(self) -> AppConfig:
        return self._config

    def resolve(
        self,
        year: int,
        month: int,
        day: int,
        context: DayContext,
        on_press: PressCallback | None = None,
    ) -> DayCell:
        """그리드 컴포넌트가 넘기는 year/month/day로 셀 해석.

        날짜가 유효하지 않으면 예외 대신 INVALID_DATE 사유의 out-of-range 셀을 반환한다.
        """
        try:
            target = to_calendar_date(year, month, day, self._config.month_base)
        except InvalidDateError as e:
            logger.warning("%s; rendering as out of range", e)
            return compose_out_of_range(
                day,
                None,
                frozenset({RangeReason.INVALID_DATE}),
                self._styles_for(context),
                context,
            )
        return self.resolve_date(target, context, on_press=on_press)

    def resolve_date(
        self,
        target: date,
        context: DayContext,
        on_press: PressCallback | None = None,
    ) -> DayCell:
        """이미 만들어진 date로 셀 해석."""
        styles = self._styles_for(context)
        raw_selection = context.selection

        if raw_selection.is_reversed:
            if self._config.strict_range:
                raise InconsistentRangeError(
                    f"Selected end {raw_selection.end} is before start {raw_selection.start}"
                )
            logger.debug(
                "Reversed range %s..%s treated as swapped", raw_selection.start, raw_selection.end
            )

        # duration 제약은 호출자가 선택한 start 기준
        check = classify(
            target,
            context.bounds,
            context.disabled_dates,
            raw_selection,
            context.min_duration,
            context.max_duration,
        )
        if check.out_of_range:
            return compose_out_of_range(target.day, target, check.reasons, styles, context)

        custom = match_custom_style(target, context.custom_styles)
        selection = resolve_selection(
            target, raw_selection.normalized(), styles, context.overrides
        )
        marked = apply_marked_overlay(
            target, context.marked_dates, context.date_format, context.theme
        )
        return compose_in_range(
            target.day, target, styles, context, custom, selection, marked, on_press
        )

    def resolve_range(self, since: date, until: date, context: DayContext) -> list[DayCell]:
        """since~until (inclusive) 각 날짜를 독립적으로 해석."""
        return [self.resolve_date(d, context) for d in date_range(since, until)]

    def _styles_for(self, context: DayContext) -> DayStyles:
        return context.styles if context.styles is not None else self._styles


def resolve_day(
    year: int,
    month: int,
    day: int,
    context: DayContext | None = None,
    on_press: PressCallback | None = None,
    config: AppConfig | None = None,
) -> DayCell:
    """단일 day 셀 해석 진입점. context를 생략하면 빈 컨텍스트 (custom styles 없음)."""
    return DayResolver(config).resolve(year, month, day, context or DayContext(), on_press)
