"""
Tests for the chart and page renderers.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from weather_viewer.analysis.schedule import WeatherSample
from weather_viewer.datasources.openweather import CurrentConditions
from weather_viewer.renderers import NO_DATA_HTML
from weather_viewer.renderers.bar_chart import BAR_CHART_TITLE, build_temperature_bar_svg
from weather_viewer.renderers.current import build_current_html, current_summary
from weather_viewer.renderers.line_chart import build_line_chart_svg
from weather_viewer.renderers.page import (
    Chart,
    build_current_tab_html,
    build_metric_charts,
    build_page_html,
    build_statistics_tab_html,
)
from weather_viewer.renderers.weather_utils import (
    DAILY_TICK_FORMAT,
    HOURLY_TICK_FORMAT,
    format_value,
    tick_format_for,
)


def make_samples(temps: list[float], step_hours: int = 3) -> list[WeatherSample]:
    start = datetime(2026, 2, 4, 12, 0)
    return [
        WeatherSample(
            timestamp=start + timedelta(hours=i * step_hours),
            temperature=t,
            pressure=1010 + i,
            humidity=60,
            wind_speed=2.0 + i,
        )
        for i, t in enumerate(temps)
    ]


def make_points(values: list[float], step: timedelta = timedelta(days=1)) -> list[tuple[datetime, float]]:
    start = datetime(2024, 6, 1)
    return [(start + step * i, v) for i, v in enumerate(values)]


class TestTickFormat:
    """Test time-axis label layout per frequency."""

    @pytest.mark.parametrize("frequency", ["1h", "3h", "6h", "12h"])
    def test_sub_daily(self, frequency: str) -> None:
        assert tick_format_for(frequency) == HOURLY_TICK_FORMAT

    @pytest.mark.parametrize("frequency", ["1d", "weekly", ""])
    def test_daily_and_unknown(self, frequency: str) -> None:
        assert tick_format_for(frequency) == DAILY_TICK_FORMAT


class TestFormatValue:
    """Test axis value labels."""

    @pytest.mark.parametrize(("value", "label"), [(3.0, "3"), (-5, "-5"), (2.26, "2.3"), (0.5, "0.5")])
    def test_format_value(self, value: float, label: str) -> None:
        assert format_value(value) == label


class TestBuildTemperatureBarSvg:
    """Test the forecast bar chart."""

    def test_bars_colored_by_temperature(self) -> None:
        svg = build_temperature_bar_svg(make_samples([-25.0, 5.0, 30.0]))
        assert svg.startswith("<svg")
        assert BAR_CHART_TITLE in svg
        assert svg.count('class="bar"') == 3
        assert 'fill="#191970"' in svg
        assert 'fill="#FFE4B5"' in svg
        assert 'fill="#B22222"' in svg

    def test_time_labels(self) -> None:
        svg = build_temperature_bar_svg(make_samples([1.0, 2.0]))
        assert ">12:00<" in svg
        assert ">15:00<" in svg

    def test_axis_padded_by_five_degrees(self) -> None:
        svg = build_temperature_bar_svg(make_samples([5.0, 10.0]))
        # Range 0..15 split into 5 steps
        for label in ("0", "3", "6", "9", "12", "15"):
            assert f">{label}</text>" in svg

    def test_missing_timestamp_label(self) -> None:
        sample = WeatherSample(None, 1.0, 1000.0, 50.0, 1.0)
        assert "--:--" in build_temperature_bar_svg([sample])

    def test_empty(self) -> None:
        assert build_temperature_bar_svg([]) == NO_DATA_HTML


class TestBuildLineChartSvg:
    """Test the line chart with mean and ±σ lines."""

    def test_series_and_mean(self) -> None:
        svg = build_line_chart_svg(
            make_points([1, 2, 3]), "Temperature", "#0000ff", show_deviation=False, frequency="1d"
        )
        assert svg.startswith("<svg")
        assert 'data-name="Temperature"' in svg
        assert 'data-name="Mean"' in svg
        assert 'stroke="#0000ff"' in svg
        assert "+σ" not in svg

    def test_deviation_lines(self) -> None:
        svg = build_line_chart_svg(
            make_points([1, 2, 3]), "Temperature", "#0000ff", show_deviation=True, frequency="1d"
        )
        assert 'data-name="+σ"' in svg
        assert 'data-name="-σ"' in svg
        assert "σ 0.82" in svg

    def test_flat_series_suppresses_band(self) -> None:
        svg = build_line_chart_svg(
            make_points([4, 4, 4]), "Humidity", "#808000", show_deviation=True, frequency="1d"
        )
        assert 'data-name="Mean"' in svg
        assert "+σ" not in svg

    def test_single_point(self) -> None:
        svg = build_line_chart_svg(
            make_points([10]), "Pressure", "#008000", show_deviation=True, frequency="1h"
        )
        assert svg.startswith("<svg")
        assert "+σ" not in svg

    def test_daily_tick_labels(self) -> None:
        svg = build_line_chart_svg(
            make_points([1, 2, 3]), "T", "#000", show_deviation=False, frequency="1d"
        )
        assert ">01.06.2024<" in svg
        assert ">03.06.2024<" in svg

    def test_hourly_tick_labels_two_lines(self) -> None:
        svg = build_line_chart_svg(
            make_points([1, 2], step=timedelta(hours=3)),
            "T",
            "#000",
            show_deviation=False,
            frequency="3h",
        )
        assert ">00:00<" in svg
        assert ">03:00<" in svg
        assert ">01.06<" in svg

    def test_tick_format_override(self) -> None:
        svg = build_line_chart_svg(
            make_points([1, 2], step=timedelta(hours=3)),
            "T",
            "#000",
            show_deviation=False,
            frequency="3h",
            tick_format="%H:%M",
        )
        assert ">03:00<" in svg
        assert ">01.06<" not in svg

    def test_at_most_ten_ticks(self) -> None:
        svg = build_line_chart_svg(
            make_points(list(range(30)), step=timedelta(hours=1)),
            "T",
            "#000",
            show_deviation=False,
            frequency="1h",
        )
        assert svg.count('dy="0"') == 10

    def test_tick_per_point_when_few(self) -> None:
        svg = build_line_chart_svg(
            make_points([1, 2, 3, 4]), "T", "#000", show_deviation=False, frequency="1d"
        )
        assert svg.count('dy="0"') == 4

    def test_empty(self) -> None:
        assert (
            build_line_chart_svg([], "T", "#000", show_deviation=True, frequency="1h")
            == NO_DATA_HTML
        )


class TestCurrent:
    """Test the current conditions card."""

    def test_summary_truncates_temperatures(self) -> None:
        conditions = CurrentConditions(
            temperature=-3.7, feels_like=-8.2, humidity=80, pressure=1012, wind_speed=3.5
        )
        assert current_summary(conditions) == (
            "-3°C, feels like -8°C  |  Humidity: 80%  |  Pressure: 1012 hPa  |  Wind: 3.5 m/s"
        )

    def test_card_background(self) -> None:
        conditions = CurrentConditions(
            temperature=22.4, feels_like=22.0, humidity=40, pressure=1020, wind_speed=1.0
        )
        html = build_current_html(conditions, "Sochi")
        assert "Sochi" in html
        assert "background-color: #FF8C00" in html
        assert "22°C" in html


class TestPage:
    """Test chart collection and tab assembly."""

    def test_metric_charts(self) -> None:
        charts = build_metric_charts(
            make_samples([1.0, 2.0, 3.0]), prefix="mean", show_deviation=False, frequency="3h"
        )
        assert [c.slug for c in charts] == [
            "mean_temperature",
            "mean_pressure",
            "mean_humidity",
            "mean_wind",
        ]
        assert [c.title for c in charts] == ["Temperature", "Pressure", "Humidity", "Wind speed"]
        assert all(c.has_svg for c in charts)
        assert charts[0].filename == "mean_temperature.svg"

    def test_metric_charts_empty(self) -> None:
        charts = build_metric_charts([], prefix="mean", show_deviation=False, frequency="3h")
        assert len(charts) == 4
        assert not any(c.has_svg for c in charts)

    def test_current_tab(self) -> None:
        bar = Chart(slug="current_temperature_bars", title="Temperature", svg="<svg>bars</svg>")
        html = build_current_tab_html("<div>card</div>", bar, [])
        assert "<div>card</div>" in html
        assert "<svg>bars</svg>" in html
        assert "charts/current_temperature_bars.svg" in html

    def test_current_tab_without_forecast(self) -> None:
        html = build_current_tab_html("<div>card</div>", None, [])
        assert NO_DATA_HTML in html

    def test_statistics_tab(self) -> None:
        charts = build_metric_charts(
            make_samples([1.0, 5.0]), prefix="deviation", show_deviation=True, frequency="3h"
        )
        html = build_statistics_tab_html(
            charts,
            city="Moscow",
            start=datetime(2024, 6, 1).date(),
            end=datetime(2024, 6, 7).date(),
            frequency="3h",
            show_deviation=True,
        )
        assert "2024-06-01" in html
        assert "(with ±σ)" in html
        assert "charts/deviation_wind.svg" in html

    def test_page_has_three_tabs(self) -> None:
        html = build_page_html(city="Moscow", updated="2026-02-04 12:00", current_tab="<p>now</p>")
        assert "Current weather" in html
        assert "Statistics (σ)" in html
        assert "Statistics (mean)" in html
        assert "<p>now</p>" in html
        assert html.count(NO_DATA_HTML) == 2
