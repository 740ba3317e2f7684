"""Selection state resolver.

규칙 테이블을 위에서 아래로 모두 평가하고, 마지막으로 매칭된 규칙의 상태를 쓴다
(last-write-wins). 중간에 멈추지 않는다. 예를 들어 start == end인 range에서
그 날은 RANGE_START, RANGE_END에 차례로 매칭된 뒤 RANGE_SINGLE_DAY로 덮인다.

    순서  상태                  조건
    1     SINGLE_SELECTED       single 모드, start 선택됨, day == start
    2a    RANGE_START           range 모드, start/end 선택됨, day == start
    2b    RANGE_END             range 모드, start/end 선택됨, day == end
    2c    RANGE_SINGLE_DAY      range 모드, start/end 선택됨, day == start == end
    2d    RANGE_MIDDLE          range 모드, start/end 선택됨, start < day < end
    3     RANGE_PENDING_START   range 모드, end 미선택, day == start
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from daycell.models import DayState, SelectionContext, SelectionResult, StyleOverrides
from daycell.styles import DayStyles

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SelectionRule:
    state: DayState
    matches: Callable[[date, SelectionContext], bool]


def _range_complete(sel: SelectionContext) -> bool:
    return sel.allow_range and sel.start is not None and sel.end is not None


RULES: tuple[SelectionRule, ...] = (
    SelectionRule(
        DayState.SINGLE_SELECTED,
        lambda day, sel: not sel.allow_range and sel.start is not None and day == sel.start,
    ),
    SelectionRule(
        DayState.RANGE_START,
        lambda day, sel: _range_complete(sel) and day == sel.start,
    ),
    SelectionRule(
        DayState.RANGE_END,
        lambda day, sel: _range_complete(sel) and day == sel.end,
    ),
    SelectionRule(
        DayState.RANGE_SINGLE_DAY,
        lambda day, sel: _range_complete(sel) and day == sel.start and day == sel.end,
    ),
    SelectionRule(
        DayState.RANGE_MIDDLE,
        lambda day, sel: _range_complete(sel) and sel.start < day < sel.end,
    ),
    SelectionRule(
        DayState.RANGE_PENDING_START,
        lambda day, sel: (
            sel.allow_range and sel.start is not None and sel.end is None and day == sel.start
        ),
    ),
)


def resolve_state(day: date, selection: SelectionContext) -> DayState:
    """규칙 테이블 전체를 평가해 마지막 매칭 상태 반환. 매칭 없으면 PLAIN."""
    state = DayState.PLAIN
    for rule in RULES:
        if rule.matches(day, selection):
            state = rule.state
    return state


def _container_layers(state: DayState, styles: DayStyles, overrides: StyleOverrides) -> tuple:
    range_style = overrides.selected_range_style
    if state is DayState.SINGLE_SELECTED:
        return (styles.selected_day,)
    if state is DayState.RANGE_START:
        return (styles.start_day_wrapper, range_style, overrides.selected_range_start_style)
    if state is DayState.RANGE_END:
        return (styles.end_day_wrapper, range_style, overrides.selected_range_end_style)
    if state is DayState.RANGE_SINGLE_DAY:
        return (styles.selected_day, styles.selected_day_background, range_style)
    if state is DayState.RANGE_MIDDLE:
        return (styles.in_range_day, range_style)
    if state is DayState.RANGE_PENDING_START:
        return (
            styles.selected_day,
            range_style,
            overrides.selected_range_start_style or styles.selected_day_background,
        )
    return (styles.day_button,)


def resolve_selection(
    day: date,
    selection: SelectionContext,
    styles: DayStyles,
    overrides: StyleOverrides | None = None,
) -> SelectionResult:
    """선택 상태와 그에 맞는 container/label 스타일 결정.

    selection은 이미 normalized()된 상태여야 한다.
    """
    overrides = overrides or StyleOverrides()
    state = resolve_state(day, selection)
    if state is not DayState.PLAIN:
        logger.debug("%s resolved as %s", day, state.value)

    selected_day_style = None
    if state is DayState.SINGLE_SELECTED:
        selected_day_style = overrides.selected_day_style or styles.selected_day_background

    return SelectionResult(
        state=state,
        container_layers=_container_layers(state, styles, overrides),
        label_style=styles.selected_day_label if state is not DayState.PLAIN else None,
        selected_day_style=selected_day_style,
    )
