"""Range/validity classifier: day가 선택 가능한 범위 밖인지 판정."""

import logging
from collections.abc import Collection
from datetime import date

from daycell.models import (
    DateBounds,
    DurationConstraint,
    RangeCheck,
    RangeReason,
    SelectionContext,
)

logger = logging.getLogger(__name__)


def resolve_duration_days(constraint: DurationConstraint | None, start: date) -> float | None:
    """선택된 start에 적용할 일수. 제약이 없거나 anchor가 매칭되지 않으면 None."""
    if constraint is None:
        return None
    return constraint.resolve_days(start)


def _duration_applies(
    day: date, selection: SelectionContext, constraint: DurationConstraint | None
) -> bool:
    return (
        selection.allow_range
        and constraint is not None
        and selection.start is not None
        and day > selection.start
    )


def classify(
    day: date,
    bounds: DateBounds,
    disabled: Collection[date],
    selection: SelectionContext,
    min_duration: DurationConstraint | None = None,
    max_duration: DurationConstraint | None = None,
) -> RangeCheck:
    """day의 out-of-range 사유를 모두 수집.

    duration 제약은 range 모드에서 start가 이미 선택되었고 day가 start 이후일 때만
    평가한다. 경계 계산은 start.toordinal() + days 와 day.toordinal() 비교.
    """
    reasons: set[RangeReason] = set()

    if bounds.max_date is not None and day > bounds.max_date:
        reasons.add(RangeReason.AFTER_MAX)
    if bounds.min_date is not None and day < bounds.min_date:
        reasons.add(RangeReason.BEFORE_MIN)
    if day in disabled:
        reasons.add(RangeReason.DISABLED)

    if _duration_applies(day, selection, min_duration):
        days = resolve_duration_days(min_duration, selection.start)
        if days is not None and selection.start.toordinal() + days > day.toordinal():
            reasons.add(RangeReason.BEFORE_MIN_DURATION)

    if _duration_applies(day, selection, max_duration):
        days = resolve_duration_days(max_duration, selection.start)
        if days is not None and selection.start.toordinal() + days < day.toordinal():
            reasons.add(RangeReason.AFTER_MAX_DURATION)

    if reasons:
        logger.debug("%s out of range: %s", day, sorted(r.value for r in reasons))
    return RangeCheck(reasons=frozenset(reasons))
