from datetime import date

import pytest

from daycell.config import AppConfig
from daycell.models import DayContext, DayTokens, SelectionContext, Theme
from daycell.services.composer import DayResolver


@pytest.fixture(autouse=True)
def _use_test_env(monkeypatch):
    """모든 테스트에서 .env 대신 .env.test를 사용하도록 강제."""
    monkeypatch.setattr(
        AppConfig, "model_config", {**AppConfig.model_config, "env_file": ".env.test"}
    )


@pytest.fixture
def config() -> AppConfig:
    """테스트용 AppConfig (month 1~12 규약)."""
    return AppConfig(month_base=1)


@pytest.fixture
def resolver(config: AppConfig) -> DayResolver:
    return DayResolver(config)


@pytest.fixture
def theme() -> Theme:
    return Theme(
        selected_day=DayTokens(container={"backgroundColor": "#00f"}, text={"color": "#fff"}),
        active_day=DayTokens(container={"borderColor": "#f00"}, text={"color": "#f00"}),
        text_day_color="#111",
        text_day_font_family="Inter",
        text_day_font_weight="400",
        text_day_font_size=15,
        text_disabled_color="#ccc",
    )


@pytest.fixture
def range_context(theme: Theme) -> DayContext:
    """2024-03-01 ~ 2024-03-05 range가 선택된 컨텍스트."""
    return DayContext(
        selection=SelectionContext(
            start=date(2024, 3, 1), end=date(2024, 3, 5), allow_range=True
        ),
        theme=theme,
    )
