"""Color palette for the quiz board supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the board."""

    TEXT_PRIMARY = ThemeColors(light="#000000", dark="#F5F5F5")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFFFF", dark="#1E1E1E")
    BORDER_PRIMARY = ThemeColors(light="#D1D1D1", dark="#555555")

    # Options
    OPTION_BG = ThemeColors(light="#F5F5F5", dark="#3A3A3A")
    OPTION_SELECTED = ThemeColors(light="#0078D4", dark="#4A9EFF")
    OPTION_CORRECT = ThemeColors(light="#107C10", dark="#6FCF6F")
    OPTION_INCORRECT = ThemeColors(light="#D13438", dark="#FF6B6B")

    # Countdown
    TIMER_SAFE = ThemeColors(light="#107C10", dark="#6FCF6F")
    TIMER_WARNING = ThemeColors(light="#FFB900", dark="#FFC83D")
    TIMER_DANGER = ThemeColors(light="#D13438", dark="#FF6B6B")

    # Lives
    HEART_FULL = ThemeColors(light="#D13438", dark="#FF6B6B")
    HEART_EMPTY = ThemeColors(light="#CCCCCC", dark="#555555")
