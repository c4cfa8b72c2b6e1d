"""
Default plot theme for meme insets.

Insets sit on top of a photo, so the theme drops every background fill and
draws text, ticks and axis lines in a single light color. `meme_theme`
returns plain matplotlib rcParams; `theme_context` applies them for the
duration of a `with` block, and `place_legend` puts a legend under the panel.
"""

from typing import Any, Optional

import matplotlib

from common import global_config

# ggplot-style sizes are given in mm and cm; matplotlib wants points
MM_TO_PT = 72.27 / 25.4
CM_TO_PT = 72.27 / 2.54

TEXT_SIZE = 18
TITLE_SIZE = 20
AXIS_TEXT_SCALE = 0.8

# Axes fraction below the x axis, clear of tick labels
LEGEND_OFFSET = -0.15
LEGEND_COLUMNS = 4


def meme_theme(
    base_size: Optional[float] = None,
    base_family: Optional[str] = None,
    base_col: Optional[str] = None,
) -> dict[str, Any]:
    """
    Build the rcParams of the meme plot theme.

    Args:
        base_size: Font size of legend entries.
        base_family: Font family; an empty string keeps matplotlib's default.
        base_col: Color of all titles, labels, ticks and axis lines.

    Omitted arguments are read from the `theme` section of the global config.
    """
    theme_config = global_config.theme
    base_size = theme_config.base_size if base_size is None else base_size
    base_family = theme_config.base_family if base_family is None else base_family
    base_col = theme_config.base_col if base_col is None else base_col

    tick_length = 0.35 * CM_TO_PT
    params: dict[str, Any] = {
        "font.size": TEXT_SIZE,
        "text.color": base_col,
        # Transparent panel and figure so the meme image shows through
        "figure.facecolor": "none",
        "figure.edgecolor": "none",
        "axes.facecolor": "none",
        "savefig.facecolor": "none",
        "savefig.transparent": True,
        # Titles
        "axes.titlesize": TITLE_SIZE,
        "axes.titlelocation": "left",
        "axes.titlecolor": base_col,
        "axes.labelcolor": base_col,
        # Axis lines on the left and bottom only
        "axes.edgecolor": base_col,
        "axes.linewidth": 1 * MM_TO_PT,
        "axes.spines.top": False,
        "axes.spines.right": False,
        "axes.axisbelow": True,
        # Major grid
        "axes.grid": True,
        "axes.grid.which": "major",
        # R's "gray", not matplotlib's #808080
        "grid.color": "#BEBEBE",
        "grid.linewidth": 0.5 * MM_TO_PT,
        # Ticks
        "xtick.color": base_col,
        "ytick.color": base_col,
        "xtick.labelcolor": base_col,
        "ytick.labelcolor": base_col,
        "xtick.labelsize": TEXT_SIZE * AXIS_TEXT_SCALE,
        "ytick.labelsize": TEXT_SIZE * AXIS_TEXT_SCALE,
        "xtick.major.size": tick_length,
        "ytick.major.size": tick_length,
        # rcParams can only place the legend inside the axes and cannot drop
        # its title; `place_legend` moves it below the panel without a title
        "legend.loc": "lower right",
        "legend.fontsize": base_size,
        "legend.frameon": False,
        "legend.labelcolor": base_col,
    }
    if base_family:
        params["font.family"] = base_family
    return params


def theme_context(
    base_size: Optional[float] = None,
    base_family: Optional[str] = None,
    base_col: Optional[str] = None,
):
    """Context manager that applies `meme_theme` to matplotlib rcParams."""
    return matplotlib.rc_context(
        rc=meme_theme(base_size=base_size, base_family=base_family, base_col=base_col)
    )


def place_legend(ax, **kwargs):
    """
    Draw the legend of `ax` below the panel, right-justified and without a title.

    Extra keyword arguments are passed on to `Axes.legend`.
    """
    options = {
        "loc": "upper right",
        "bbox_to_anchor": (1.0, LEGEND_OFFSET),
        "ncol": LEGEND_COLUMNS,
        "title": None,
    }
    options.update(kwargs)
    return ax.legend(**options)
