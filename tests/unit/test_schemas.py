import json
from datetime import date, datetime

import pytest

from daycell.config import AppConfig
from daycell.exceptions import ContextLoadError
from daycell.models import AnchorDuration, PerAnchorDuration, UniformDuration
from daycell.schemas import DayContextSchema, load_context, parse_context


def _bundle(**overrides):
    """컴포넌트 prop 이름(camelCase) 기반 번들."""
    base = {
        "minDate": "2024-01-01",
        "maxDate": "2024-12-31",
        "disabledDates": ["2024-03-07", int(datetime(2024, 3, 8).timestamp() * 1000)],
        "selection": {
            "selectedStartDate": "2024-03-01",
            "selectedEndDate": "2024-03-05",
            "allowRangeSelection": True,
        },
        "customDatesStyles": [
            {"date": "2024-03-03", "style": {"backgroundColor": "pink"}, "textStyle": {"color": "red"}}
        ],
        "styleOverrides": {"selectedRangeStyle": {"opacity": 0.5}},
        "theme": {
            "selectedDay": {"container": {"backgroundColor": "#00f"}, "text": {"color": "#fff"}},
            "activeDay": {"container": {"borderColor": "#f00"}},
            "textDayColor": "#111",
            "textDisabledColor": "#ccc",
        },
        "markedDates": {"2024-03-04": {"selected": True}, "2024-03-09": {}},
    }
    base.update(overrides)
    return base


class TestDayContextSchema:
    def test_camel_case_bundle(self):
        ctx = parse_context(_bundle())
        assert ctx.bounds.min_date == date(2024, 1, 1)
        assert ctx.bounds.max_date == date(2024, 12, 31)
        assert ctx.disabled_dates == {date(2024, 3, 7), date(2024, 3, 8)}
        assert ctx.selection.start == date(2024, 3, 1)
        assert ctx.selection.end == date(2024, 3, 5)
        assert ctx.selection.allow_range is True
        assert ctx.custom_styles[0].date_style == {"backgroundColor": "pink"}
        assert ctx.overrides.selected_range_style == {"opacity": 0.5}
        assert ctx.theme.selected_day.text == {"color": "#fff"}
        assert ctx.theme.active_day.text == {}
        assert ctx.marked_dates["2024-03-04"].selected is True
        assert ctx.marked_dates["2024-03-09"].selected is False

    def test_snake_case_bundle(self):
        ctx = parse_context(
            {
                "min_date": "2024-01-01",
                "selection": {"start": "2024-03-01", "allow_range": True},
                "custom_styles": [{"date": "2024-03-03", "date_style": {"x": 1}}],
            }
        )
        assert ctx.bounds.min_date == date(2024, 1, 1)
        assert ctx.selection.allow_range is True
        assert ctx.custom_styles[0].date_style == {"x": 1}

    def test_empty_bundle_defaults(self):
        ctx = parse_context({}, AppConfig(date_format="%d.%m.%Y"))
        assert ctx.custom_styles == ()
        assert ctx.disabled_dates == frozenset()
        assert ctx.min_duration is None
        assert ctx.date_format == "%d.%m.%Y"

    def test_bundle_date_format_wins(self):
        ctx = parse_context({"dateFormat": "%Y/%m/%d"}, AppConfig(date_format="%d.%m.%Y"))
        assert ctx.date_format == "%Y/%m/%d"

    def test_scalar_duration(self):
        ctx = parse_context({"minRangeDuration": 3, "maxRangeDuration": 10})
        assert ctx.min_duration == UniformDuration(3)
        assert ctx.max_duration == UniformDuration(10)

    def test_zero_scalar_duration_is_absent(self):
        assert parse_context({"minRangeDuration": 0}).min_duration is None

    def test_per_anchor_duration(self):
        ctx = parse_context(
            {"minRangeDuration": [{"date": "2024-03-01", "minDuration": 2}, {"anchor": "2024-04-01", "days": 4}]}
        )
        assert ctx.min_duration == PerAnchorDuration(
            (AnchorDuration(date(2024, 3, 1), 2), AnchorDuration(date(2024, 4, 1), 4))
        )

    def test_invalid_date_rejected(self):
        with pytest.raises(ContextLoadError):
            parse_context({"minDate": "2024-02-30"})

    def test_invalid_duration_rejected(self):
        with pytest.raises(ContextLoadError):
            parse_context({"maxRangeDuration": "lots"})

    def test_schema_is_reusable(self):
        schema = DayContextSchema.model_validate(_bundle())
        assert schema.to_context() == schema.to_context()


class TestLoadContext:
    def test_loads_json_file(self, tmp_path):
        path = tmp_path / "ctx.json"
        path.write_text(json.dumps(_bundle()), encoding="utf-8")
        ctx = load_context(path)
        assert ctx.selection.start == date(2024, 3, 1)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ContextLoadError):
            load_context(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "ctx.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ContextLoadError):
            load_context(path)

    def test_non_object_json(self, tmp_path):
        path = tmp_path / "ctx.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(ContextLoadError):
            load_context(path)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "ctx.json"
        path.write_bytes(b'{"dateFormat": "\xff\xfe"}')
        with pytest.raises(ContextLoadError, match="Cannot read day context"):
            load_context(path)


class TestBoundaryErrors:
    def test_out_of_range_timestamp(self):
        with pytest.raises(ContextLoadError, match="out of range"):
            parse_context({"disabledDates": [1e300]})

    def test_marked_dates_are_read_only(self):
        ctx = parse_context(_bundle())
        with pytest.raises(TypeError):
            ctx.marked_dates["2024-03-10"] = ctx.marked_dates["2024-03-04"]
        assert "2024-03-10" not in ctx.marked_dates
