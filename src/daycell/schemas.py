"""입력 번들 경계 검증: JSON/dict → DayContext.

camelCase 키(컴포넌트 prop 이름)와 snake_case 키를 모두 받는다.
날짜 값은 ISO 문자열, epoch ms 타임스탬프, date/datetime 모두 허용.
"""

import json
import logging
from datetime import date
from types import MappingProxyType
from pathlib import Path
from typing import Annotated, Any

from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, ValidationError

from daycell.config import AppConfig
from daycell.exceptions import ContextLoadError
from daycell.models import (
    AnchorDuration,
    CustomDateStyle,
    DateBounds,
    DayContext,
    DayTokens,
    DurationConstraint,
    MarkedDate,
    PerAnchorDuration,
    SelectionContext,
    StyleOverrides,
    Theme,
    UniformDuration,
)
from daycell.services.date_utils import coerce_date

logger = logging.getLogger(__name__)


def _to_date(value: Any) -> date:
    try:
        return coerce_date(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid date {value!r}: {e}") from e


DateValue = Annotated[date, BeforeValidator(_to_date)]


def _aliases(*names: str) -> AliasChoices:
    return AliasChoices(*names)


class _Schema(BaseModel):
    model_config = ConfigDict(extra="ignore", frozen=True)


class AnchorDurationSchema(_Schema):
    anchor: DateValue = Field(validation_alias=_aliases("anchor", "date"))
    days: float = Field(validation_alias=_aliases("days", "minDuration", "maxDuration"))


class SelectionSchema(_Schema):
    start: DateValue | None = Field(
        default=None, validation_alias=_aliases("start", "selectedStartDate")
    )
    end: DateValue | None = Field(default=None, validation_alias=_aliases("end", "selectedEndDate"))
    allow_range: bool = Field(
        default=False, validation_alias=_aliases("allow_range", "allowRange", "allowRangeSelection")
    )


class CustomDateStyleSchema(_Schema):
    date: DateValue
    container_style: dict | None = Field(
        default=None, validation_alias=_aliases("container_style", "containerStyle")
    )
    date_style: dict | None = Field(
        default=None, validation_alias=_aliases("date_style", "dateStyle", "style")
    )
    text_style: dict | None = Field(
        default=None, validation_alias=_aliases("text_style", "textStyle")
    )


class StyleOverridesSchema(_Schema):
    selected_day_style: dict | None = Field(
        default=None, validation_alias=_aliases("selected_day_style", "selectedDayStyle")
    )
    selected_range_style: dict | None = Field(
        default=None, validation_alias=_aliases("selected_range_style", "selectedRangeStyle")
    )
    selected_range_start_style: dict | None = Field(
        default=None,
        validation_alias=_aliases("selected_range_start_style", "selectedRangeStartStyle"),
    )
    selected_range_end_style: dict | None = Field(
        default=None,
        validation_alias=_aliases("selected_range_end_style", "selectedRangeEndStyle"),
    )


class DayTokensSchema(_Schema):
    container: dict = Field(default_factory=dict)
    text: dict = Field(default_factory=dict)


class ThemeSchema(_Schema):
    selected_day: DayTokensSchema = Field(
        default_factory=DayTokensSchema, validation_alias=_aliases("selected_day", "selectedDay")
    )
    active_day: DayTokensSchema = Field(
        default_factory=DayTokensSchema, validation_alias=_aliases("active_day", "activeDay")
    )
    text_day_color: str | None = Field(
        default=None, validation_alias=_aliases("text_day_color", "textDayColor")
    )
    text_day_font_family: str | None = Field(
        default=None, validation_alias=_aliases("text_day_font_family", "textDayFontFamily")
    )
    text_day_font_weight: str | int | None = Field(
        default=None, validation_alias=_aliases("text_day_font_weight", "textDayFontWeight")
    )
    text_day_font_size: float | None = Field(
        default=None, validation_alias=_aliases("text_day_font_size", "textDayFontSize")
    )
    text_disabled_color: str | None = Field(
        default=None, validation_alias=_aliases("text_disabled_color", "textDisabledColor")
    )

    def to_theme(self) -> Theme:
        return Theme(
            selected_day=DayTokens(self.selected_day.container, self.selected_day.text),
            active_day=DayTokens(self.active_day.container, self.active_day.text),
            text_day_color=self.text_day_color,
            text_day_font_family=self.text_day_font_family,
            text_day_font_weight=self.text_day_font_weight,
            text_day_font_size=self.text_day_font_size,
            text_disabled_color=self.text_disabled_color,
        )


class MarkedDateSchema(_Schema):
    selected: bool = False


DurationValue = float | list[AnchorDurationSchema] | None


def _to_constraint(value: DurationValue) -> DurationConstraint | None:
    """숫자 → UniformDuration (0은 제약 없음), 리스트 → PerAnchorDuration."""
    if value is None:
        return None
    if isinstance(value, list):
        return PerAnchorDuration(tuple(AnchorDuration(e.anchor, e.days) for e in value))
    if not value:
        return None
    return UniformDuration(value)


class DayContextSchema(_Schema):
    """day 셀 입력 번들 전체."""

    min_date: DateValue | None = Field(default=None, validation_alias=_aliases("min_date", "minDate"))
    max_date: DateValue | None = Field(default=None, validation_alias=_aliases("max_date", "maxDate"))
    disabled_dates: list[DateValue] = Field(
        default_factory=list, validation_alias=_aliases("disabled_dates", "disabledDates")
    )
    min_duration: DurationValue = Field(
        default=None,
        validation_alias=_aliases("min_duration", "minDuration", "minRangeDuration"),
    )
    max_duration: DurationValue = Field(
        default=None,
        validation_alias=_aliases("max_duration", "maxDuration", "maxRangeDuration"),
    )
    selection: SelectionSchema = Field(default_factory=SelectionSchema)
    custom_styles: list[CustomDateStyleSchema] = Field(
        default_factory=list,
        validation_alias=_aliases("custom_styles", "customDateStyles", "customDatesStyles"),
    )
    overrides: StyleOverridesSchema = Field(
        default_factory=StyleOverridesSchema,
        validation_alias=_aliases("overrides", "styleOverrides"),
    )
    theme: ThemeSchema = Field(default_factory=ThemeSchema)
    date_format: str | None = Field(
        default=None, validation_alias=_aliases("date_format", "dateFormat")
    )
    marked_dates: dict[str, MarkedDateSchema] = Field(
        default_factory=dict, validation_alias=_aliases("marked_dates", "markedDates")
    )

    def to_context(self, config: AppConfig | None = None) -> DayContext:
        """검증된 번들 → DayContext. date_format 미지정 시 config 기본값."""
        config = config or AppConfig()
        selection = SelectionContext(
            start=self.selection.start,
            end=self.selection.end,
            allow_range=self.selection.allow_range,
        )
        if selection.end is not None and not selection.allow_range:
            logger.info("selected end %s ignored: range selection is disabled", selection.end)

        return DayContext(
            bounds=DateBounds(min_date=self.min_date, max_date=self.max_date),
            disabled_dates=frozenset(self.disabled_dates),
            min_duration=_to_constraint(self.min_duration),
            max_duration=_to_constraint(self.max_duration),
            selection=selection,
            custom_styles=tuple(
                CustomDateStyle(
                    date=c.date,
                    container_style=c.container_style,
                    date_style=c.date_style,
                    text_style=c.text_style,
                )
                for c in self.custom_styles
            ),
            overrides=StyleOverrides(
                selected_day_style=self.overrides.selected_day_style,
                selected_range_style=self.overrides.selected_range_style,
                selected_range_start_style=self.overrides.selected_range_start_style,
                selected_range_end_style=self.overrides.selected_range_end_style,
            ),
            theme=self.theme.to_theme(),
            date_format=self.date_format or config.date_format,
            marked_dates=MappingProxyType(
                {k: MarkedDate(selected=v.selected) for k, v in self.marked_dates.items()}
            ),
        )


def parse_context(data: dict, config: AppConfig | None = None) -> DayContext:
    """dict → DayContext. 검증 실패는 ContextLoadError."""
    try:
        schema = DayContextSchema.model_validate(data)
    except ValidationError as e:
        raise ContextLoadError(f"Invalid day context: {e}") from e
    return schema.to_context(config)


def load_context(path: Path, config: AppConfig | None = None) -> DayContext:
    """JSON 파일 → DayContext."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ContextLoadError(f"Cannot read day context {path}: {e}") from e
    if not isinstance(data, dict):
        raise ContextLoadError(f"Day context {path} must be a JSON object")
    logger.debug("Loaded day context from %s", path)
    return parse_context(data, config)
