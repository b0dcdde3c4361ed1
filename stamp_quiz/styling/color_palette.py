"""Color palette for StampQuiz supporting light and dark themes."""

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
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#1B1B1B", dark="#F5F5F5")

    BACKGROUND_PRIMARY = ThemeColors(light="#FFFDF7", dark="#1E1E1E")
    BACKGROUND_SECONDARY = ThemeColors(light="#F3EEE2", dark="#2D2D2D")

    BORDER_PRIMARY = ThemeColors(light="#D1C7B7", dark="#555555")
    BORDER_FOCUS = ThemeColors(light="#B3261E", dark="#FF8A80")

    BUTTON_SECONDARY_BG = ThemeColors(light="#F3EEE2", dark="#3A3A3A")
    BUTTON_HOVER_BG = ThemeColors(light="#E6DECB", dark="#505050")

    # Countdown and timer
    COUNTDOWN_TEXT = ThemeColors(light="#B3261E", dark="#FF8A80")
    TIMER_WARNING_BG = ThemeColors(light="#EF4444", dark="#B91C1C")
    TIMER_WARNING_BLINK_BG = ThemeColors(light="#B91C1C", dark="#7F1D1D")

    # Result
    PERFECT_BANNER = ThemeColors(light="#D6336C", dark="#F783AC")
    SCORE_TEXT = ThemeColors(light="#1B1B1B", dark="#F5F5F5")
