"""Tests for forecast rendering."""

from datetime import UTC

import pytest
from rich.text import Text

from forecastview.components.forecast_render import (
    EMPTY_MESSAGE,
    NAME_COLUMN,
    TEMP_COLUMN,
    render,
    temperature_color,
)
from forecastview.errors import ConfigurationError
from forecastview.models.forecast import ForecastRecord, Period
from forecastview.models.style import Style
from forecastview.services.model_builder import build_model


def _record(name: str, day: int | None, temp: int = 40, short: str = "Sunny", detail: str = ""):
    return ForecastRecord(
        name=name,
        day_number=day,
        temperature=temp,
        temperature_unit="F",
        short_forecast=short,
        detailed_forecast=detail,
    )


@pytest.fixture
def two_day_model():
    return [
        _record("Monday", 1, 40, "Sunny", "Sunny, with a high near 40."),
        _record("Monday Night", 1, 30, "Clear", "Clear, with a low around 30."),
        _record("Tuesday", 2, 45, "Partly Cloudy", "Partly cloudy, with a high near 45."),
    ]


class TestStandardStyle:
    """Tests for the standard layout."""

    def test_example_same_day_has_no_separator(self):
        """Test the Monday/Monday Night example built from raw periods."""
        periods = [
            Period.model_validate(
                {
                    "startTime": "2024-01-01T06:00:00Z",
                    "name": "Monday",
                    "temperature": 40,
                    "shortForecast": "Sunny",
                }
            ),
            Period.model_validate(
                {
                    "startTime": "2024-01-01T18:00:00Z",
                    "name": "Monday Night",
                    "temperature": 30,
                    "shortForecast": "Clear",
                }
            ),
        ]
        model = build_model(periods, UTC)
        assert model[0].day_number == model[1].day_number

        lines = render(model, Style.STANDARD).plain.splitlines()
        assert lines[0].startswith("Monday ")
        assert lines[0].endswith("Sunny")
        assert lines[1].startswith("Monday Night")
        assert lines[1].endswith("Clear")

    def test_new_day_gets_blank_line(self, two_day_model):
        """Test that a day change inserts exactly one blank line."""
        lines = render(two_day_model, Style.STANDARD).plain.splitlines()
        assert lines[0].startswith("Monday ")
        assert lines[1].startswith("Monday Night")
        assert lines[2] == ""
        assert lines[3].startswith("Tuesday")
        assert len(lines) == 4

    def test_no_blank_line_before_first_group(self, two_day_model):
        """Test that output does not start with a separator."""
        assert render(two_day_model, Style.STANDARD).plain.startswith("Monday")

    def test_column_layout(self):
        """Test that name and temperature are padded to fixed columns."""
        line = render([_record("Today", 1, 72)], Style.STANDARD).plain.splitlines()[0]
        assert line[:NAME_COLUMN].rstrip() == "Today"
        assert line[NAME_COLUMN:TEMP_COLUMN].rstrip() == "72°F"
        assert line[TEMP_COLUMN:] == "Sunny"

    def test_long_name_keeps_a_space(self):
        """Test that names wider than the column still separate from temperature."""
        name = "Washington's Birthday Night"
        line = render([_record(name, 1)], Style.STANDARD).plain.splitlines()[0]
        assert line.startswith(name + " 40°F")

    def test_unknown_days_are_grouped(self):
        """Test that consecutive records with unset day numbers stay together."""
        model = [_record("A", None), _record("B", None)]
        assert "" not in render(model, Style.STANDARD).plain.splitlines()


class TestExtendedStyle:
    """Tests for the extended layout."""

    def test_block_per_record(self, two_day_model):
        """Test heading, blank, detail, blank for every record."""
        lines = render(two_day_model, Style.EXTENDED).plain.splitlines()
        assert lines[0].startswith("Monday ")
        assert lines[1] == ""
        assert lines[2] == "Sunny, with a high near 40."
        assert lines[3] == ""
        assert lines[4].startswith("Monday Night")
        assert lines[6] == "Clear, with a low around 30."
        assert lines[8].startswith("Tuesday")
        assert len(lines) == 12

    def test_includes_wind(self):
        """Test that wind follows the temperature column."""
        record = ForecastRecord(
            name="Today", temperature=50, temperature_unit="F", wind_direction="NW", wind_speed="5 mph"
        )
        heading = render([record], Style.EXTENDED).plain.splitlines()[0]
        assert heading[TEMP_COLUMN:] == "NW 5 mph"


class TestTerseStyle:
    """Tests for the terse layout."""

    def test_single_line(self, two_day_model):
        """Test that all pairs share one line and continuations show only temperature."""
        plain = render(two_day_model, Style.TERSE).plain
        assert plain == "Monday 40°F  30°F  |  Tuesday 45°F\n"
        assert len(plain.splitlines()) == 1

    def test_first_of_day_always_named(self):
        """Test that every day change shows a name again after a day separator."""
        model = [_record("Mon", 1), _record("Tue", 2), _record("Wed", 3)]
        assert render(model, Style.TERSE).plain.splitlines() == [
            "Mon 40°F  |  Tue 40°F  |  Wed 40°F",
        ]

    def test_many_periods_stay_on_one_line(self):
        model = [_record(f"Period {i}", i // 2) for i in range(14)]
        assert len(render(model, Style.TERSE).plain.splitlines()) == 1


class TestRender:
    """Tests for render dispatch and properties shared by all styles."""

    @pytest.mark.parametrize("style", list(Style))
    def test_idempotent(self, two_day_model, style):
        """Test that rendering twice gives identical output."""
        first = render(two_day_model, style)
        second = render(two_day_model, style)
        assert first.plain == second.plain
        assert first.spans == second.spans

    @pytest.mark.parametrize("style", list(Style))
    def test_empty_model(self, style):
        """Test the placeholder for an empty forecast."""
        assert render([], style).plain == EMPTY_MESSAGE

    def test_style_name_accepted(self, two_day_model):
        """Test that a style given by name renders like the enum."""
        assert render(two_day_model, "terse").plain == render(two_day_model, Style.TERSE).plain

    def test_unknown_style(self, two_day_model):
        """Test that an unknown style is a configuration error."""
        with pytest.raises(ConfigurationError):
            render(two_day_model, "fancy")

    def test_returns_rich_text(self, two_day_model):
        assert isinstance(render(two_day_model, Style.STANDARD), Text)

    def test_names_are_bold(self, two_day_model):
        text = render(two_day_model, Style.STANDARD)
        assert any(span.style == "bold" and span.start == 0 for span in text.spans)


class TestTemperatureColor:
    """Tests for temperature_color."""

    @pytest.mark.parametrize(
        "temp,unit,color",
        [
            (-5, "C", "blue"),
            (5, "C", "cyan"),
            (15, "C", "green"),
            (25, "C", "yellow"),
            (35, "C", "red"),
            (20, "F", "blue"),
            (45, "F", "cyan"),
            (65, "F", "green"),
            (80, "F", "yellow"),
            (100, "F", "red"),
        ],
    )
    def test_bands(self, temp, unit, color):
        assert temperature_color(temp, unit) == color

    def test_unknown_temperature(self):
        assert temperature_color(None) == "dim"
