"""QSS stylesheets and phase colours for StudyHub."""

from __future__ import annotations

from ..timer.session import Phase

PHASE_COLORS: dict[Phase, str] = {
    Phase.WORK:  "#FF6B6B",   # warm coral
    Phase.BREAK: "#4ECDC4",   # cool teal
}

LIGHT_PALETTE: dict[str, str] = {
    "bg":           "#F7F7FB",
    "bg_secondary": "#ECECF4",
    "accent":       "#7C5CDB",
    "text":         "#22223A",
    "text_muted":   "#6E6E88",
    "danger":       "#D2416E",
    "border":       "#D6D6E4",
}

DARK_PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "accent":       "#CBA6F7",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


def get_palette(dark_mode: bool) -> dict[str, str]:
    return dict(DARK_PALETTE if dark_mode else LIGHT_PALETTE)


def build_stylesheet(palette: dict[str, str]) -> str:
    p = palette
    return f"""
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QPushButton {{
        background-color: {p['bg_secondary']};
        color: {p['text']};
        border: 1px solid {p['border']};
        border-radius: 10px;
        padding: 10px 24px;
        font-weight: 600;
    }}

    QPushButton:hover {{
        border-color: {p['accent']};
    }}

    QPushButton:disabled {{
        color: {p['text_muted']};
    }}

    QPushButton#primaryButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
        font-size: 17px;
        padding: 14px 40px;
        border-radius: 12px;
        font-weight: 700;
    }}

    QPushButton#dangerButton {{
        background-color: transparent;
        color: {p['danger']};
    }}

    QLabel#timeLabel {{
        font-size: 72px;
        font-weight: 700;
        background: transparent;
    }}

    QLabel#mutedLabel {{
        color: {p['text_muted']};
        font-size: 13px;
        background: transparent;
    }}

    QSpinBox, QComboBox, QDateEdit, QLineEdit, QPlainTextEdit, QListWidget {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 6px;
        padding: 4px 8px;
    }}

    QLabel#cardLabel {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 12px;
        padding: 24px;
        font-size: 18px;
    }}

    QProgressBar {{
        background-color: {p['bg_secondary']};
        border: none;
        border-radius: 4px;
        max-height: 8px;
    }}

    QProgressBar::chunk {{
        background-color: {p['accent']};
        border-radius: 4px;
    }}
    """
