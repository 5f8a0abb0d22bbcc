"""Light theme configuration for ruin simulation charts."""

from __future__ import annotations

from typing import Dict


PATH_GRAPHITE = "#3E3F3A"
TARGET_GREEN = "#98C46C"
RUIN_RED = "#D9534F"
RATE_AMBER = "#F0AD4E"
THEORY_NAVY = "#000080"
BACKGROUND = "#FAFAFA"
CARD_BACKGROUND = "#FFFFFF"
TEXT_COLOR = "#1E1E1E"
SUBTEXT_COLOR = "#424242"


LIGHT_THEME: Dict[str, object] = {
    "name": "light",
    "background_color": BACKGROUND,
    "card_background": CARD_BACKGROUND,
    "text_color": TEXT_COLOR,
    "subtext_color": SUBTEXT_COLOR,
    "palette": {
        "path": PATH_GRAPHITE,
        "target": TARGET_GREEN,
        "ruin": RUIN_RED,
        "win_rate": RATE_AMBER,
        "theoretical": THEORY_NAVY,
    },
    "plotly_template": {
        "layout": {
            "font": {"family": "Roboto, Open Sans, sans-serif", "color": TEXT_COLOR},
            "paper_bgcolor": BACKGROUND,
            "plot_bgcolor": CARD_BACKGROUND,
            "title": {"font": {"size": 20, "color": TEXT_COLOR}},
            "legend": {"bgcolor": CARD_BACKGROUND, "bordercolor": "#E0E0E0"},
            "xaxis": {
                "gridcolor": "#E0E0E0",
                "linecolor": "#BDBDBD",
                "zerolinecolor": "#E0E0E0",
            },
            "yaxis": {
                "gridcolor": "#E0E0E0",
                "linecolor": "#BDBDBD",
                "zerolinecolor": "#E0E0E0",
            },
        }
    },
}
