from datetime import date

from daycell.models import DayTokens, MarkedDate, MarkedOverlay, Theme
from daycell.services.marked import apply_marked_overlay

THEME = Theme(
    selected_day=DayTokens(container={"backgroundColor": "#00f"}, text={"color": "#fff"}),
    active_day=DayTokens(container={"borderColor": "#f00"}, text={"color": "#f00"}),
)


class TestApplyMarkedOverlay:
    def test_empty_map(self):
        assert apply_marked_overlay(date(2024, 3, 3), {}, "%Y-%m-%d", THEME) == MarkedOverlay()

    def test_absent_key(self):
        marked = {"2024-03-04": MarkedDate(selected=True)}
        assert apply_marked_overlay(date(2024, 3, 3), marked, "%Y-%m-%d", THEME) == MarkedOverlay()

    def test_selected_uses_selected_day_tokens(self):
        marked = {"2024-03-03": MarkedDate(selected=True)}
        overlay = apply_marked_overlay(date(2024, 3, 3), marked, "%Y-%m-%d", THEME)
        assert overlay.marked and overlay.selected
        assert overlay.container_style == {"backgroundColor": "#00f"}
        assert overlay.text_style == {"color": "#fff"}

    def test_not_selected_uses_active_day_tokens(self):
        marked = {"2024-03-03": MarkedDate()}
        overlay = apply_marked_overlay(date(2024, 3, 3), marked, "%Y-%m-%d", THEME)
        assert overlay.marked and not overlay.selected
        assert overlay.container_style == {"borderColor": "#f00"}
        assert overlay.text_style == {"color": "#f00"}

    def test_key_uses_date_format(self):
        marked = {"03/03/2024": MarkedDate()}
        assert apply_marked_overlay(date(2024, 3, 3), marked, "%d/%m/%Y", THEME).marked
        assert not apply_marked_overlay(date(2024, 3, 3), marked, "%Y-%m-%d", THEME).marked
