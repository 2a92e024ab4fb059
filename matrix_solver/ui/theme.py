import logging
from enum import Enum
from typing import Dict, Optional

from PySide6.QtCore import QSettings, Qt
from PySide6.QtGui import QGuiApplication

from matrix_solver.config import Config

logger = logging.getLogger(__name__)


class Theme(Enum):
    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT

    @property
    def palette(self) -> Dict[str, str]:
        return Config.DARK if self is Theme.DARK else Config.LIGHT

    @property
    def toggle_text(self) -> str:
        """Caption for the button that switches away from this theme."""
        return "🌙 Dark Mode" if self is Theme.LIGHT else "☀️ Light Mode"


def system_theme() -> Theme:
    app = QGuiApplication.instance()
    if app is None:
        return Theme.LIGHT
    if app.styleHints().colorScheme() == Qt.ColorScheme.Dark:
        return Theme.DARK
    return Theme.LIGHT


class ThemeStore:
    """Persists the light/dark choice between sessions."""

    def __init__(self, settings: Optional[QSettings] = None):
        self.settings = settings if settings is not None else QSettings()

    def load(self) -> Theme:
        saved = self.settings.value(Config.THEME_KEY)
        if saved:
            try:
                return Theme(str(saved))
            except ValueError:
                logger.warning("Ignoring unknown saved theme %r", saved)
        return system_theme()

    def save(self, theme: Theme) -> None:
        self.settings.setValue(Config.THEME_KEY, theme.value)
        self.settings.sync()
        logger.info("Theme set to %s", theme.value)


# ===== STYLESHEET =====
def build_stylesheet(theme: Theme) -> str:
    c = theme.palette
    return f"""
/* Main Theme */
QWidget {{
    background-color: {c['bg']};
    color: {c['text']};
    font-family: 'Segoe UI', sans-serif;
    font-size: 13px;
}}

#AppTitle {{
    font-size: 28px;
    font-weight: 800;
    color: {c['accent']};
}}

/* Cards */
QGroupBox {{
    background-color: {c['card']};
    border: 1px solid {c['border']};
    border-radius: 8px;
    margin-top: 14px;
    padding-top: 14px;
    font-weight: 600;
}}

QGroupBox::title {{
    subcontrol-origin: margin;
    left: 10px;
    padding: 0 5px;
}}

#Instructions {{
    color: {c['subtext']};
}}

/* Matrix Cells */
#MatrixCell {{
    background: {c['cell']};
    border: 1px solid {c['border']};
    border-radius: 6px;
    padding: 4px;
    font-family: 'Consolas', monospace;
}}

#MatrixCell:focus {{
    border: 2px solid {c['accent']};
    background: {c['cell_focus']};
}}

#MatrixCell:read-only {{
    border-color: {c['success']};
    color: {c['success']};
}}

/* Buttons */
QPushButton {{
    background-color: {c['accent']};
    color: #FFFFFF;
    border: none;
    border-radius: 8px;
    padding: 8px 20px;
    font-weight: 600;
    min-width: 100px;
}}

QPushButton:hover {{
    background-color: {c['accent_hover']};
}}

QPushButton:pressed {{
    background-color: {c['accent_pressed']};
}}

#OutlineButton {{
    background-color: transparent;
    color: {c['text']};
    border: 1px solid {c['border']};
}}

#OutlineButton:hover {{
    background-color: {c['cell_focus']};
}}

/* Inputs */
QSpinBox, QComboBox {{
    background: {c['cell']};
    border: 1px solid {c['border']};
    border-radius: 6px;
    padding: 5px;
    min-width: 60px;
}}

#MathSymbol {{
    font-size: 32px;
    color: {c['accent']};
    padding: 0 10px;
}}

#ErrorLabel {{
    color: {c['error']};
    font-weight: 600;
}}
"""
