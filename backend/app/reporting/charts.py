"""Backend-agnostic draw primitives for the dashboard charts.

The dashboard draws three kinds of charts on a canvas. Instead of drawing, we
compute the shapes a renderer has to paint so the scaling can be checked
without a browser:

* ``line``: a polyline through every point plus a dot on each point.
* ``bar``: one rectangle per item, 80% bar and 20% spacing per slot.
* ``doughnut``: one annular slice per item, clockwise from twelve o'clock.

Each data item is a mapping carrying either ``revenue`` or ``value``.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Sequence, Tuple, Union

PALETTE = ("#6366f1", "#8b5cf6", "#06b6d4", "#10b981", "#f59e0b", "#ef4444")
LINE_COLOR = PALETTE[0]
LINE_WIDTH = 3
POINT_RADIUS = 4
DEFAULT_PADDING = 40
DOUGHNUT_MARGIN = 20
DOUGHNUT_INNER_RATIO = 0.6


class ChartType(str, enum.Enum):
    LINE = "line"
    BAR = "bar"
    DOUGHNUT = "doughnut"


@dataclass(frozen=True)
class Line:
    points: Tuple[Tuple[float, float], ...]
    stroke: str = LINE_COLOR
    width: float = LINE_WIDTH
    kind: str = "line"


@dataclass(frozen=True)
class Circle:
    x: float
    y: float
    radius: float
    fill: str
    kind: str = "circle"


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    fill: str
    kind: str = "rect"


@dataclass(frozen=True)
class Arc:
    """Annular sector between ``inner_radius`` and ``radius``; angles in radians."""

    cx: float
    cy: float
    radius: float
    inner_radius: float
    start_angle: float
    end_angle: float
    fill: str
    kind: str = "arc"


Primitive = Union[Line, Circle, Rect, Arc]


def _value(item: Mapping[str, Any]) -> float:
    raw = item.get("revenue") or item.get("value") or 0
    return float(raw)


def _line_chart(
    data: Sequence[Mapping[str, Any]], width: float, height: float, padding: float
) -> List[Primitive]:
    chart_width = width - padding * 2
    chart_height = height - padding * 2
    values = [_value(item) for item in data]
    max_value = max(values)
    last_index = len(values) - 1

    points = []
    for index, value in enumerate(values):
        if last_index == 0:
            x = padding + chart_width / 2
        else:
            x = padding + (index / last_index) * chart_width
        ratio = value / max_value if max_value else 0.0
        y = padding + chart_height - ratio * chart_height
        points.append((x, y))

    primitives: List[Primitive] = [Line(points=tuple(points))]
    primitives.extend(Circle(x=x, y=y, radius=POINT_RADIUS, fill=LINE_COLOR) for x, y in points)
    return primitives


def _bar_chart(
    data: Sequence[Mapping[str, Any]], width: float, height: float, padding: float
) -> List[Primitive]:
    chart_width = width - padding * 2
    chart_height = height - padding * 2
    values = [_value(item) for item in data]
    max_value = max(values)
    slot = chart_width / len(values)
    bar_width = slot * 0.8
    bar_spacing = slot * 0.2

    primitives: List[Primitive] = []
    for index, value in enumerate(values):
        bar_height = (value / max_value) * chart_height if max_value else 0.0
        primitives.append(
            Rect(
                x=padding + index * (bar_width + bar_spacing) + bar_spacing / 2,
                y=padding + chart_height - bar_height,
                width=bar_width,
                height=bar_height,
                fill=PALETTE[index % len(PALETTE)],
            )
        )
    return primitives


def _doughnut_chart(
    data: Sequence[Mapping[str, Any]], width: float, height: float
) -> List[Primitive]:
    values = [_value(item) for item in data]
    total = sum(values)
    if total <= 0:
        return []

    cx = width / 2
    cy = height / 2
    radius = max(min(width, height) / 2 - DOUGHNUT_MARGIN, 0.0)
    inner_radius = radius * DOUGHNUT_INNER_RATIO

    primitives: List[Primitive] = []
    current = -math.pi / 2
    for index, value in enumerate(values):
        sweep = (value / total) * math.pi * 2
        primitives.append(
            Arc(
                cx=cx,
                cy=cy,
                radius=radius,
                inner_radius=inner_radius,
                start_angle=current,
                end_angle=current + sweep,
                fill=PALETTE[index % len(PALETTE)],
            )
        )
        current += sweep
    return primitives


def render_chart(
    chart_type: ChartType | str,
    data: Sequence[Mapping[str, Any]],
    width: float,
    height: float,
    *,
    padding: float = DEFAULT_PADDING,
) -> List[Primitive]:
    """Return the primitives to paint ``data`` as ``chart_type`` on a ``width`` x ``height`` surface."""

    kind = ChartType(chart_type)
    if not data:
        return []
    if kind is ChartType.LINE:
        return _line_chart(data, width, height, padding)
    if kind is ChartType.BAR:
        return _bar_chart(data, width, height, padding)
    return _doughnut_chart(data, width, height)
