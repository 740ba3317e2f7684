from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from daycell.styles import DayStyles, make_styles


class AppConfig(BaseSettings):
    """애플리케이션 전체 설정. .env 파일 또는 DAYCELL_ 환경변수에서 로드."""

    model_config = SettingsConfigDict(
        env_prefix="DAYCELL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # marked_dates 조회 키 포맷 (strftime)
    date_format: str = "%Y-%m-%d"

    # 그리드 컴포넌트의 month 규약: 0이면 0~11, 1이면 1~12
    month_base: int = Field(default=0, ge=0, le=1)

    # True면 end < start인 range를 교환하지 않고 InconsistentRangeError
    strict_range: bool = False

    # ── 기본 스타일 시트 ──
    style_scale: float = Field(default=1.0, gt=0)
    selected_day_color: str = "#5ce600"
    selected_day_text_color: str = "#FFFFFF"
    selected_range_color: str | None = None
    day_text_color: str = "#000000"
    disabled_text_color: str = "#BBBBBB"

    def make_styles(self) -> DayStyles:
        return make_styles(
            scale=self.style_scale,
            selected_day_color=self.selected_day_color,
            selected_day_text_color=self.selected_day_text_color,
            selected_range_color=self.selected_range_color,
            day_text_color=self.day_text_color,
            disabled_text_color=self.disabled_text_color,
        )
