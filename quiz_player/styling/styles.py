"""Stylesheet helpers for the quiz board."""

from quiz_player.core.session_state import OptionMark, TimerLevel

from .color_palette import ColorPalette, Theme

_OPTION_COLORS = {
    OptionMark.NONE: ColorPalette.OPTION_BG,
    OptionMark.SELECTED: ColorPalette.OPTION_SELECTED,
    OptionMark.CORRECT: ColorPalette.OPTION_CORRECT,
    OptionMark.INCORRECT: ColorPalette.OPTION_INCORRECT,
}

_TIMER_COLORS = {
    TimerLevel.SAFE: ColorPalette.TIMER_SAFE,
    TimerLevel.WARNING: ColorPalette.TIMER_WARNING,
    TimerLevel.DANGER: ColorPalette.TIMER_DANGER,
}


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_board_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QProgressBar {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                text-align: center;
            }}
        """

    @staticmethod
    def get_option_style(mark: OptionMark, theme: Theme = Theme.LIGHT) -> str:
        background = _OPTION_COLORS[mark].get(theme)
        text = ColorPalette.TEXT_PRIMARY.get(theme) if mark is OptionMark.NONE else "#FFFFFF"
        return (
            f"QPushButton {{ background-color: {background}; color: {text}; "
            "text-align: left; padding: 10px 14px; border-radius: 6px; }}"
        )

    @staticmethod
    def get_timer_style(level: TimerLevel, theme: Theme = Theme.LIGHT) -> str:
        return f"font-size: 16pt; font-weight: bold; color: {_TIMER_COLORS[level].get(theme)};"

    @staticmethod
    def get_heart_style(full: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.HEART_FULL if full else ColorPalette.HEART_EMPTY
        return f"font-size: 18pt; color: {color.get(theme)};"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
