"""Where: src/sizeof/config/display.py
What: Explicit display settings (theme) handed to the CLI display layer.
Why: Replace ambient theme state with an object passed at construction.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Final

from sizeof.config.config import THEMES, Config, ConfigError

ThemeListener = Callable[["DisplaySettings"], None]


@dataclass(frozen=True, slots=True)
class ThemePalette:
    """Rich style names used by the display layer for one theme."""

    folder: str
    leaf: str
    accent: str
    muted: str
    header: str


PALETTES: Final[dict[str, ThemePalette]] = {
    "light": ThemePalette(
        folder="bold blue",
        leaf="black",
        accent="dark_orange3",
        muted="grey50",
        header="bold white on blue",
    ),
    "dark": ThemePalette(
        folder="bold cyan",
        leaf="white",
        accent="yellow",
        muted="grey62",
        header="bold black on cyan",
    ),
}


@dataclass
class DisplaySettings:
    """Theme selection with a narrow change-notification channel."""

    theme: str = "light"
    _listeners: list[ThemeListener] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.theme not in THEMES:
            raise ConfigError(f"theme must be one of {', '.join(THEMES)}; got {self.theme!r}")

    @classmethod
    def from_config(cls, config: Config) -> "DisplaySettings":
        return cls(theme=config.theme)

    @property
    def palette(self) -> ThemePalette:
        return PALETTES[self.theme]

    def subscribe(self, listener: ThemeListener) -> Callable[[], None]:
        """Register ``listener`` for theme changes; returns an unsubscribe callable."""

        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def set_theme(self, theme: str) -> None:
        """Switch theme and notify listeners when the value actually changes."""

        if theme not in THEMES:
            raise ConfigError(f"theme must be one of {', '.join(THEMES)}; got {theme!r}")
        if theme == self.theme:
            return
        self.theme = theme
        for listener in list(self._listeners):
            listener(self)

    def toggle(self) -> None:
        self.set_theme("dark" if self.theme == "light" else "light")


__all__ = ["PALETTES", "DisplaySettings", "ThemeListener", "ThemePalette"]
