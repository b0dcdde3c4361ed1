"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        background = ColorPalette.BACKGROUND_PRIMARY.get(theme)
        panel = ColorPalette.BACKGROUND_SECONDARY.get(theme)
        text = ColorPalette.TEXT_PRIMARY.get(theme)
        border = ColorPalette.BORDER_PRIMARY.get(theme)
        return f"""
            QMainWindow, QWidget {{
                background-color: {background};
                color: {text};
                font-family: 'Segoe UI', 'Noto Sans CJK JP', sans-serif;
                font-size: 14px;
            }}
            QStackedWidget {{ border-top: 1px solid {border}; }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                border: 1px solid {border};
                border-radius: 4px;
                padding: 6px 14px;
            }}
            QPushButton:hover {{ background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)}; }}
            QLineEdit {{
                background-color: {panel};
                border: 1px solid {border};
                border-radius: 6px;
                padding: 8px;
            }}
            QLineEdit:focus {{ border: 2px solid {ColorPalette.BORDER_FOCUS.get(theme)}; }}
            QSpinBox, QDoubleSpinBox, QComboBox {{
                background-color: {panel};
                border: 1px solid {border};
                padding: 3px;
            }}
            QProgressBar {{
                background-color: {panel};
                border: 1px solid {border};
                border-radius: 3px;
                max-height: 10px;
            }}
            QProgressBar::chunk {{ background-color: {ColorPalette.COUNTDOWN_TEXT.get(theme)}; }}
        """

    @staticmethod
    def get_countdown_style(theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: 72pt; font-weight: bold; color: {ColorPalette.COUNTDOWN_TEXT.get(theme)};"

    @staticmethod
    def get_timer_style(font_size: int, warning: bool = False, blink_state: bool = False,
                        theme: Theme = Theme.LIGHT) -> str:
        base_style = f"padding: 2px 6px; border-radius: 4px; font-size: {font_size}pt;"
        if not warning:
            return base_style
        color = ColorPalette.TIMER_WARNING_BLINK_BG if blink_state else ColorPalette.TIMER_WARNING_BG
        return base_style + f" color: #fff; background-color: {color.get(theme)};"

    @staticmethod
    def get_score_style(font_size: int, theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: {font_size * 2}pt; font-weight: bold; color: {ColorPalette.SCORE_TEXT.get(theme)};"

    @staticmethod
    def get_perfect_banner_style(font_size: int, theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: {font_size * 2}pt; font-weight: bold; color: {ColorPalette.PERFECT_BANNER.get(theme)};"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
