"""Render forecast records as styled text in one of the display styles."""

from collections.abc import Callable, Sequence

from rich.text import Text

from ..errors import ConfigurationError
from ..models.forecast import ForecastRecord
from ..models.style import Style

NAME_COLUMN = 18
TEMP_COLUMN = 26
EMPTY_MESSAGE = "No forecast periods"
TERSE_SEPARATOR = "  "
TERSE_DAY_SEPARATOR = "  |  "


def _pad(value: str, width: int) -> str:
    """Left-align to width, keeping at least one space after long values."""
    if len(value) < width:
        return value.ljust(width)
    return value + " "


def _to_celsius(temp: float, unit: str | None) -> float:
    if unit and unit.upper().startswith("F"):
        return (temp - 32) * 5 / 9
    return temp


def temperature_color(temp: float | None, unit: str | None = None) -> str:
    """Get color for a temperature value."""
    if temp is None:
        return "dim"
    temp = _to_celsius(temp, unit)
    if temp <= 0:
        return "blue"
    elif temp <= 10:
        return "cyan"
    elif temp <= 20:
        return "green"
    elif temp <= 30:
        return "yellow"
    return "red"


def _starts_new_day(model: Sequence[ForecastRecord], index: int) -> bool:
    return index == 0 or model[index].day_number != model[index - 1].day_number


def _append_temperature(text: Text, record: ForecastRecord, width: int = 0) -> None:
    value = record.temperature_display
    if width:
        value = _pad(value, width)
    text.append(value, style=temperature_color(record.temperature, record.temperature_unit))


def _append_heading(text: Text, record: ForecastRecord) -> None:
    """Append the label and temperature columns shared by standard and extended."""
    text.append(_pad(record.label, NAME_COLUMN), style="bold")
    _append_temperature(text, record, TEMP_COLUMN - NAME_COLUMN)


def _render_standard(model: Sequence[ForecastRecord]) -> Text:
    text = Text()
    for index, record in enumerate(model):
        if index > 0 and _starts_new_day(model, index):
            text.append("\n")
        _append_heading(text, record)
        text.append(record.short_forecast)
        text.append("\n")
    return text


def _render_extended(model: Sequence[ForecastRecord]) -> Text:
    text = Text()
    for record in model:
        _append_heading(text, record)
        if record.wind_display:
            text.append(record.wind_display, style="dim")
        text.append("\n\n")
        text.append(record.detailed_forecast)
        text.append("\n\n")
    return text


def _render_terse(model: Sequence[ForecastRecord]) -> Text:
    text = Text()
    for index, record in enumerate(model):
        if _starts_new_day(model, index):
            if index > 0:
                text.append(TERSE_DAY_SEPARATOR, style="dim")
            text.append(record.label, style="bold")
            text.append(" ")
        else:
            text.append(TERSE_SEPARATOR)
        _append_temperature(text, record)
    if model:
        text.append("\n")
    return text


_RENDERERS: dict[Style, Callable[[Sequence[ForecastRecord]], Text]] = {
    Style.STANDARD: _render_standard,
    Style.EXTENDED: _render_extended,
    Style.TERSE: _render_terse,
}


def render(model: Sequence[ForecastRecord], style: Style) -> Text:
    """Render the model in the given style.

    The result depends only on the model and the style, so repainting the same
    data gives identical text.

    Raises:
        ConfigurationError: If ``style`` is not a known style.
    """
    try:
        renderer = _RENDERERS[Style(style)]
    except ValueError as e:
        raise ConfigurationError(f"Unknown style: {style!r}") from e

    if not model:
        return Text(EMPTY_MESSAGE, style="dim")
    return renderer(model)
