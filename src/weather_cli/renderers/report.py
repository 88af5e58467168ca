"""Console weather report for a single ``WeatherRecord``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from weather_cli.renderers import render_template

if TYPE_CHECKING:
    from datetime import tzinfo

    from weather_cli.schemas import WeatherRecord

TIME_FORMAT = "%Y-%m-%d %H:%M %Z"

COMPASS_POINTS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]


def compass_point(degrees: float) -> str:
    """Nearest of the eight compass points for a wind heading."""
    return COMPASS_POINTS[round((degrees % 360) / 45) % 8]


def build_report_text(record: WeatherRecord, tz: tzinfo | None = None) -> str:
    """
    Render ``record`` as a multi-line text report.

    Args:
        record: Reading to render.
        tz: Display timezone for the observation time (default: local time).
    """
    observed = record.observed_at.astimezone(tz)
    return render_template(
        "report.txt.j2",
        record=record,
        observed=observed.strftime(TIME_FORMAT),
        wind_compass=compass_point(record.wind_direction_deg),
    )
