"""
Chart renderers - the drawing side of the chart pipeline.

A renderer receives a finished Chart.js configuration together with the name
of the canvas it belongs to.
"""

from typing import Any


class ChartRenderer:
    """Interface for anything that can draw a chart config on a canvas."""

    def draw(self, canvas_id: str, config: dict[str, Any]) -> None:
        raise NotImplementedError


class CollectingChartRenderer(ChartRenderer):
    """Keeps every drawn config, in draw order, so it can be shipped as JSON."""

    def __init__(self):
        self.charts: dict[str, dict[str, Any]] = {}

    def draw(self, canvas_id: str, config: dict[str, Any]) -> None:
        self.charts[canvas_id] = config
