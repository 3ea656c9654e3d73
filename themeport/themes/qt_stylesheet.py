"""Qt stylesheet rendering for a resolved palette."""

from __future__ import annotations

from typing import Mapping

FONTS = {
    "body": '"Noto Sans", "Segoe UI Variable Text", "Segoe UI", sans-serif',
    "display": '"Bahnschrift", "Segoe UI Semibold", "Segoe UI", sans-serif',
}

# Placeholders use palette slot names with "-" replaced by "_".
BASE_STYLES = """
QWidget {{
    background-color: {background};
    color: {foreground};
    font-family: {font_body};
    font-size: 10pt;
}}

QMainWindow {{
    background-color: {background};
}}

QLabel {{
    color: {foreground};
    background-color: transparent;
}}

QLabel[role="muted"] {{
    color: {muted_foreground};
}}

QToolTip {{
    background-color: {popover};
    color: {popover_foreground};
    border: 1px solid {border};
    padding: 4px;
}}
"""

MENU_STYLES = """
QMenuBar {{
    background-color: {background};
    color: {muted_foreground};
    border-bottom: 1px solid {border};
}}

QMenuBar::item:selected {{
    background-color: {accent};
    color: {accent_foreground};
}}

QMenu {{
    background-color: {popover};
    color: {popover_foreground};
    border: 1px solid {border};
    padding: 4px;
}}

QMenu::item:selected {{
    background-color: {accent};
    color: {accent_foreground};
}}
"""

SIDEBAR_STYLES = """
#Sidebar {{
    background-color: {sidebar};
    color: {sidebar_foreground};
    border-right: 1px solid {sidebar_border};
}}

#Sidebar QPushButton {{
    background-color: transparent;
    border: none;
    border-left: 3px solid transparent;
    color: {sidebar_foreground};
}}

#Sidebar QPushButton:hover {{
    background-color: {sidebar_accent};
    color: {sidebar_accent_foreground};
}}

#Sidebar QPushButton[selected="true"] {{
    background-color: {sidebar_accent};
    border-left: 3px solid {sidebar_primary};
    color: {sidebar_accent_foreground};
}}

#Sidebar QPushButton:focus {{
    border-left: 3px solid {sidebar_ring};
}}
"""

FORM_STYLES = """
QLineEdit, QSpinBox, QComboBox, QPlainTextEdit {{
    background-color: {input};
    border: 1px solid {border};
    border-radius: 6px;
    padding: 5px 8px;
    selection-background-color: {accent};
    selection-color: {accent_foreground};
    color: {foreground};
}}

QLineEdit:focus, QSpinBox:focus, QComboBox:focus, QPlainTextEdit:focus {{
    border: 1px solid {ring};
}}

QComboBox QAbstractItemView {{
    background-color: {popover};
    border: 1px solid {border};
    selection-background-color: {accent};
}}

QCheckBox::indicator:checked {{
    background-color: {primary};
    border-color: {primary};
}}
"""

BUTTON_STYLES = """
QPushButton {{
    background-color: {secondary};
    color: {secondary_foreground};
    border: 1px solid {border};
    border-radius: 6px;
    padding: 5px 11px;
    font-family: {font_display};
}}

QPushButton:hover {{
    background-color: {muted};
}}

QPushButton:focus {{
    border: 1px solid {ring};
}}

QPushButton[role="primary"] {{
    background-color: {primary};
    color: {primary_foreground};
    border-color: {primary};
}}

QPushButton[role="destructive"] {{
    background-color: {destructive};
    color: {primary_foreground};
    border-color: {destructive};
}}
"""

DATA_VIEW_STYLES = """
QHeaderView::section {{
    background-color: {muted};
    color: {muted_foreground};
    border: none;
    border-bottom: 1px solid {border};
    padding: 4px 8px;
}}

QTableView, QTreeView, QListView {{
    background-color: {card};
    color: {card_foreground};
    border: 1px solid {border};
    gridline-color: {border};
    selection-background-color: {accent};
    selection-color: {accent_foreground};
}}
"""

STATUS_STYLES = """
QStatusBar {{
    background-color: {sidebar};
    color: {muted_foreground};
    border-top: 1px solid {border};
}}

QLabel[status="success"] {{
    color: {status_success};
}}

QLabel[status="warning"] {{
    color: {status_warning};
}}

QLabel[status="error"] {{
    color: {status_error};
}}

QLabel[status="info"] {{
    color: {status_info};
}}

QLabel[status="neutral"] {{
    color: {status_neutral};
}}

QProgressBar {{
    background-color: {muted};
    border: 1px solid {border};
    border-radius: 4px;
}}

QProgressBar::chunk {{
    background-color: {primary};
}}
"""

SCROLLBAR_STYLES = """
QScrollBar:vertical, QScrollBar:horizontal {{
    background: transparent;
    border: none;
}}

QScrollBar::handle:vertical, QScrollBar::handle:horizontal {{
    background: {border};
    border-radius: 4px;
}}

QScrollBar::handle:vertical:hover, QScrollBar::handle:horizontal:hover {{
    background: {muted_foreground};
}}
"""

APP_STYLESHEET = "\n".join(
    [
        BASE_STYLES,
        MENU_STYLES,
        SIDEBAR_STYLES,
        FORM_STYLES,
        BUTTON_STYLES,
        DATA_VIEW_STYLES,
        STATUS_STYLES,
        SCROLLBAR_STYLES,
    ]
)


def build_qt_stylesheet(
    palette: Mapping[str, str],
    *,
    fonts: Mapping[str, str] | None = None,
    extra_stylesheet: str = "",
) -> str:
    """Fill the application stylesheet from a complete palette."""
    resolved_fonts = dict(FONTS)
    for key, value in (fonts or {}).items():
        if key in resolved_fonts and isinstance(value, str) and value:
            resolved_fonts[key] = value

    tokens = {slot.replace("-", "_"): color for slot, color in palette.items()}
    tokens.update({f"font_{key}": value for key, value in resolved_fonts.items()})
    stylesheet = APP_STYLESHEET.format_map(tokens)

    extra = extra_stylesheet.strip()
    if extra:
        stylesheet = f"{stylesheet}\n\n{extra}\n"
    return stylesheet
