"""Display styles and the rotating style cycle."""

from enum import Enum

from ..errors import ConfigurationError


class Style(str, Enum):
    """Rendering layout for the forecast view."""

    STANDARD = "standard"
    EXTENDED = "extended"
    TERSE = "terse"


DEFAULT_ORDER = (Style.STANDARD, Style.EXTENDED, Style.TERSE)


class StyleCycle:
    """Ordered cycle of styles; the head is the active one."""

    def __init__(self, start: Style = Style.STANDARD):
        self._styles = list(DEFAULT_ORDER)
        if start not in self._styles:
            raise ConfigurationError(f"Unknown style: {start!r}")
        # Rotate until the requested style is active
        while self._styles[0] != start:
            self.rotate()

    def active(self) -> Style:
        """Return the active style."""
        return self._styles[0]

    def rotate(self) -> Style:
        """Move the active style to the tail and return the new active style."""
        self._styles.append(self._styles.pop(0))
        return self._styles[0]

    @property
    def order(self) -> tuple[Style, ...]:
        return tuple(self._styles)
