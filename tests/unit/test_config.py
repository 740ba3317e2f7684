import pytest
from pydantic import ValidationError

from daycell.config import AppConfig


class TestAppConfig:
    def test_defaults(self):
        """환경변수 없이 기본값으로 생성 가능."""
        config = AppConfig()
        assert config.date_format == "%Y-%m-%d"
        assert config.month_base == 0
        assert config.strict_range is False

    def test_loads_from_kwargs(self):
        config = AppConfig(date_format="%d/%m/%Y", month_base=1, strict_range=True)
        assert config.date_format == "%d/%m/%Y"
        assert config.month_base == 1
        assert config.strict_range is True

    def test_loads_from_env(self, monkeypatch):
        """DAYCELL_ prefix 환경변수에서 로드."""
        monkeypatch.setenv("DAYCELL_MONTH_BASE", "1")
        monkeypatch.setenv("DAYCELL_SELECTED_DAY_COLOR", "#123456")
        config = AppConfig()
        assert config.month_base == 1
        assert config.selected_day_color == "#123456"

    def test_month_base_out_of_bounds(self):
        """month_base는 0 또는 1만 허용."""
        with pytest.raises(ValidationError):
            AppConfig(month_base=2)

    def test_style_scale_must_be_positive(self):
        with pytest.raises(ValidationError):
            AppConfig(style_scale=0)

    def test_make_styles_uses_colors(self):
        config = AppConfig(selected_day_color="#abcdef", selected_day_text_color="#010101")
        styles = config.make_styles()
        assert styles.selected_day_background == {"backgroundColor": "#abcdef"}
        assert styles.selected_day_label == {"color": "#010101"}
        assert styles.in_range_day["backgroundColor"] == "#abcdef"

    def test_make_styles_range_color(self):
        config = AppConfig(selected_range_color="#eeeeee")
        styles = config.make_styles()
        assert styles.start_day_wrapper["backgroundColor"] == "#eeeeee"
        assert styles.selected_day_background == {"backgroundColor": "#5ce600"}
