"""Dark theme configuration for ruin simulation charts."""

from __future__ import annotations

from typing import Dict


PATH_SILVER = "#BDBDBD"
TARGET_GREEN = "#8BC34A"
RUIN_RED = "#FF5252"
RATE_AMBER = "#FFB74D"
THEORY_CYAN = "#00D9FF"
BACKGROUND = "#1E1E1E"
CARD_BACKGROUND = "#2C2C2C"
TEXT_COLOR = "#FFFFFF"
SUBTEXT_COLOR = "#BDBDBD"


DARK_THEME: Dict[str, object] = {
    "name": "dark",
    "background_color": BACKGROUND,
    "card_background": CARD_BACKGROUND,
    "text_color": TEXT_COLOR,
    "subtext_color": SUBTEXT_COLOR,
    "palette": {
        "path": PATH_SILVER,
        "target": TARGET_GREEN,
        "ruin": RUIN_RED,
        "win_rate": RATE_AMBER,
        "theoretical": THEORY_CYAN,
    },
    "plotly_template": {
        "layout": {
            "font": {"family": "Roboto, Open Sans, sans-serif", "color": TEXT_COLOR},
            "paper_bgcolor": BACKGROUND,
            "plot_bgcolor": CARD_BACKGROUND,
            "title": {"font": {"size": 20, "color": TEXT_COLOR}},
            "legend": {"bgcolor": CARD_BACKGROUND, "bordercolor": "#424242"},
            "xaxis": {
                "gridcolor": "#424242",
                "linecolor": "#616161",
                "zerolinecolor": "#424242",
            },
            "yaxis": {
                "gridcolor": "#424242",
                "linecolor": "#616161",
                "zerolinecolor": "#424242",
            },
        }
    },
}
