"""기본 day 스타일 시트와 스타일 레이어 병합 유틸리티.

스타일 프래그먼트는 렌더링 측에 그대로 넘기는 불투명한 dict이다.
레이어는 순서가 있는 리스트이며, 뒤쪽 프래그먼트의 키가 앞쪽 키를 덮어쓴다.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, Union

StyleFragment = Mapping[str, Any]
StyleLayer = Union[StyleFragment, Iterable["StyleLayer"], None]


@dataclass(frozen=True)
class DayStyles:
    """day 셀이 참조하는 기본 스타일 시트."""

    day_wrapper: dict = field(default_factory=dict)
    day_button: dict = field(default_factory=dict)
    day_label: dict = field(default_factory=dict)
    disabled_text: dict = field(default_factory=dict)
    selected_day: dict = field(default_factory=dict)
    selected_day_background: dict = field(default_factory=dict)
    selected_day_label: dict = field(default_factory=dict)
    start_day_wrapper: dict = field(default_factory=dict)
    end_day_wrapper: dict = field(default_factory=dict)
    in_range_day: dict = field(default_factory=dict)


def make_styles(
    scale: float = 1.0,
    selected_day_color: str = "#5ce600",
    selected_day_text_color: str = "#FFFFFF",
    selected_range_color: str | None = None,
    day_text_color: str = "#000000",
    disabled_text_color: str = "#BBBBBB",
) -> DayStyles:
    """색상/배율로 기본 스타일 시트 생성.

    selected_range_color를 생략하면 range 배경에도 selected_day_color를 쓴다.
    """
    range_color = selected_range_color or selected_day_color
    cap_radius = 20 * scale
    return DayStyles(
        day_wrapper={
            "alignItems": "center",
            "justifyContent": "center",
            "width": 50 * scale,
            "height": 40 * scale,
            "backgroundColor": "rgba(0,0,0,0.0)",
        },
        day_button={
            "width": 30 * scale,
            "height": 30 * scale,
            "borderRadius": 30 * scale,
            "alignSelf": "center",
            "justifyContent": "center",
        },
        day_label={
            "fontSize": 14 * scale,
            "color": day_text_color,
            "alignSelf": "center",
        },
        disabled_text={
            "fontSize": 14 * scale,
            "color": disabled_text_color,
            "alignSelf": "center",
            "justifyContent": "center",
        },
        selected_day={
            "width": 30 * scale,
            "height": 30 * scale,
            "borderRadius": 30 * scale,
            "justifyContent": "center",
        },
        selected_day_background={"backgroundColor": selected_day_color},
        selected_day_label={"color": selected_day_text_color},
        start_day_wrapper={
            "width": 50 * scale,
            "height": 30 * scale,
            "borderTopLeftRadius": cap_radius,
            "borderBottomLeftRadius": cap_radius,
            "backgroundColor": range_color,
            "justifyContent": "center",
        },
        end_day_wrapper={
            "width": 50 * scale,
            "height": 30 * scale,
            "borderTopRightRadius": cap_radius,
            "borderBottomRightRadius": cap_radius,
            "backgroundColor": range_color,
            "justifyContent": "center",
        },
        in_range_day={
            "width": 50 * scale,
            "height": 30 * scale,
            "backgroundColor": range_color,
            "justifyContent": "center",
        },
    )


def flatten_style(layers: StyleLayer) -> dict[str, Any]:
    """중첩 가능한 레이어 리스트를 하나의 dict로 병합.

    None/빈 레이어는 건너뛰고, 뒤쪽 레이어가 같은 키를 덮어쓴다.
    입력 레이어는 변경하지 않는다.
    """
    merged: dict[str, Any] = {}
    if layers is None:
        return merged
    if isinstance(layers, Mapping):
        merged.update(layers)
        return merged
    for layer in layers:
        merged.update(flatten_style(layer))
    return merged
