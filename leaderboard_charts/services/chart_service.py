"""
ChartService - turns a leaderboard into Chart.js configurations.

Each load_* method projects the leaderboard into datasets, hands the finished
config to the renderer and returns the leaderboard untouched, so the four
steps can be chained in any order.
"""

import logging
import math
from datetime import datetime, timezone
from typing import Any, Optional

from leaderboard_charts.core.config import Settings, get_settings
from leaderboard_charts.models.leaderboard import Leaderboard, Member
from leaderboard_charts.services.chart_renderer import ChartRenderer

logger = logging.getLogger(__name__)

STARS_OVER_TIME = "starsOverTime"
DAY_VS_TIME = "dayVsTime"
POINTS_OVER_TIME = "pointsOverTime"
TIME_PER_STAR = "timePerStar"

CANVAS_IDS = (STARS_OVER_TIME, DAY_VS_TIME, POINTS_OVER_TIME, TIME_PER_STAR)


def hex_to_rgb(hex_color: str, alpha: Optional[float] = None) -> str:
    """'#rrggbb' -> 'rgb(r, g, b)', or 'rgba(r, g, b, alpha)' when alpha is given"""
    r = int(hex_color[1:3], 16)
    g = int(hex_color[3:5], 16)
    b = int(hex_color[5:7], 16)

    if alpha:
        return f"rgba({r}, {g}, {b}, {alpha})"
    return f"rgb({r}, {g}, {b})"


def log10_or_none(value: Optional[float]) -> Optional[float]:
    """log10 of a duration; absent or non-positive durations have no point on a log axis"""
    if value is None or value <= 0:
        return None
    return math.log10(value)


def top_members(members: list[Member], limit: Optional[int] = None) -> list[Member]:
    """Members by descending score, ties keep payload order. Never reorders ``members``."""
    ranked = sorted(members, key=lambda m: m.score, reverse=True)
    return ranked if limit is None else ranked[:limit]


def _base_options(title: str) -> dict[str, Any]:
    return {
        "responsive": True,
        "legend": {
            "position": "left",
        },
        "title": {
            "display": True,
            "text": title,
            "fontSize": 24,
        },
    }


def _scale_label(text: str) -> dict[str, Any]:
    return {"display": True, "labelString": text}


class ChartService:
    def __init__(self, renderer: ChartRenderer, settings: Optional[Settings] = None):
        self.renderer = renderer
        self.settings = settings or get_settings()

    @property
    def event_start(self) -> datetime:
        """05:00 UTC on November 30th: the eve of day 1 (puzzles unlock at midnight EST)"""
        return datetime(self.settings.event_year, 11, 30, 5, 0, 0, tzinfo=timezone.utc)

    def _time_axis(self, leaderboard: Leaderboard) -> dict[str, Any]:
        return {
            "type": "time",
            "time": {
                "min": self.event_start,
                "max": leaderboard.latest_moment(),
                "unit": "day",
                "stepSize": 1,
                "displayFormats": {"day": "D"},
            },
            "scaleLabel": _scale_label("Day of Advent"),
        }

    def _cumulative_datasets(self, leaderboard: Leaderboard, field: str) -> list[dict[str, Any]]:
        return [
            {
                "label": member.display_name,
                "cubicInterpolationMode": "monotone",
                "fill": False,
                "borderWidth": 1.5,
                "borderColor": member.color,
                "backgroundColor": member.color,
                "data": [
                    {"x": star.get_star_moment, "y": getattr(star, field)}
                    for star in member.stars
                ],
            }
            for member in leaderboard.members
        ]

    def load_stars_over_time(self, leaderboard: Leaderboard) -> Leaderboard:
        datasets = self._cumulative_datasets(leaderboard, "nr_of_stars_after_this_one")

        options = _base_options("Leaderboard (stars)")
        options["scales"] = {
            "xAxes": [self._time_axis(leaderboard)],
            "yAxes": [{
                "ticks": {
                    "stepSize": 1,
                    "min": 0,
                },
                "scaleLabel": _scale_label("nr of stars"),
            }],
        }

        self.renderer.draw(STARS_OVER_TIME, {
            "type": "line",
            "data": {"datasets": datasets},
            "options": options,
        })
        return leaderboard

    def load_points_over_time(self, leaderboard: Leaderboard) -> Leaderboard:
        datasets = self._cumulative_datasets(leaderboard, "nr_of_points_after_this_one")

        options = _base_options("Leaderboard (points)")
        options["scales"] = {
            "xAxes": [self._time_axis(leaderboard)],
            "yAxes": [{
                "ticks": {
                    "min": 0,
                },
                "scaleLabel": _scale_label("cumulative points"),
            }],
        }

        self.renderer.draw(POINTS_OVER_TIME, {
            "type": "line",
            "data": {"datasets": datasets},
            "options": options,
        })
        return leaderboard

    def load_day_vs_time(self, leaderboard: Leaderboard) -> Leaderboard:
        datasets = [
            {
                "label": member.display_name,
                "backgroundColor": member.color,
                "borderWidth": 1,
                "borderColor": "#000",
                "pointRadius": 6,
                "data": [
                    {
                        # Star 1 of day 5 sits at 4.5, star 2 at 5.0
                        "x": star.day_nr + star.star_nr / 2 - 1,
                        "y": log10_or_none(star.time_taken),
                    }
                    for star in member.stars
                ],
            }
            for member in leaderboard.members
        ]

        options = _base_options("Stars vs Log10(minutes taken per star)")
        options["scales"] = {
            "xAxes": [{
                "ticks": {
                    "min": 0,
                    "max": self.settings.days_in_event,
                    "stepSize": 1,
                },
                "scaleLabel": _scale_label("star progress"),
            }],
            "yAxes": [{
                "scaleLabel": _scale_label("minutes taken per star (log scale)"),
            }],
        }

        self.renderer.draw(DAY_VS_TIME, {
            "type": "scatter",
            "data": {"datasets": datasets},
            "options": options,
        })
        return leaderboard

    def load_time_per_star(self, leaderboard: Leaderboard) -> Leaderboard:
        n = min(self.settings.top_members, len(leaderboard.members))
        days = range(1, self.settings.days_in_event + 1)

        datasets = []
        for member in top_members(leaderboard.members, n):
            name = member.display_name
            star1_values = []
            star2_values = []

            for day in days:
                star1 = leaderboard.find_star(member.id, day, 1)
                star2 = leaderboard.find_star(member.id, day, 2)
                star1_time = (star1.time_taken or 0) if star1 else 0

                star1_values.append(star1_time)

                if star2 is None:
                    star2_values.append(0)
                    continue
                if star1 is None:
                    # No first star to measure against: leave the bar out
                    logger.warning(f"Member {member.id} has star 2 without star 1 on day {day}")
                    star2_values.append(0)
                    continue
                star2_values.append((star2.time_taken or 0) - star1_time)

            # Log values on a linear axis: Chart.js logarithmic axes break on stacked bars
            datasets.append({
                "label": f"{name} (★)",
                "stack": f"Stack {name}",
                "backgroundColor": member.color,
                "data": [log10_or_none(value) for value in star1_values],
            })
            datasets.append({
                "label": f"{name} (★★)",
                "stack": f"Stack {name}",
                "backgroundColor": hex_to_rgb(member.color, 0.7),
                "data": [log10_or_none(value) for value in star2_values],
            })

        options = _base_options(f"Log10(minutes taken per star) of top {n} players")
        options["scales"] = {
            "xAxes": [{
                "stacked": True,
                "scaleLabel": _scale_label("Day of Advent"),
            }],
            "yAxes": [{
                "stacked": True,
                "scaleLabel": _scale_label("minutes taken per star (log scale)"),
            }],
        }

        self.renderer.draw(TIME_PER_STAR, {
            "type": "bar",
            "data": {
                "labels": list(days),
                "datasets": datasets,
            },
            "options": options,
        })
        return leaderboard

    def load_all(self, leaderboard: Leaderboard) -> Leaderboard:
        """Run the four steps in page order."""
        leaderboard = self.load_stars_over_time(leaderboard)
        leaderboard = self.load_day_vs_time(leaderboard)
        leaderboard = self.load_points_over_time(leaderboard)
        return self.load_time_per_star(leaderboard)
