"""
Comparison plot for the drill view.

Draws the exercise origin (dashed) and the learner's current text on the
same axes so an equivalent rewrite visibly lands on top of the original.
Points where an expression is undefined are left as gaps.
"""

import logging

import numpy as np
from sympy import lambdify

from drill.evaluator import EvaluationError, X, compile_expression, normalize

logger = logging.getLogger(__name__)

X_RANGE = (-10.0, 10.0)
SAMPLES = 801

_DARK_GRAPH = dict(
    C_BG="#0f0f0f",
    C_AX="#181818",
    C_GRID="#252525",
    C_TICK="#666666",
    C_SPINE="#333333",
    C_ORIGIN="#1a8cff",
    C_CANDIDATE="#ff5555",
    C_TEXT="#cccccc",
    C_LEGEND="#1e1e1e",
)

_LIGHT_GRAPH = dict(
    C_BG="#ffffff",
    C_AX="#f7f9fc",
    C_GRID="#dde2ea",
    C_TICK="#555555",
    C_SPINE="#9baabb",
    C_ORIGIN="#3b82f6",
    C_CANDIDATE="#ef4444",
    C_TEXT="#222222",
    C_LEGEND="#ffffff",
)

# ── palette (mutable, see set_theme) ───────────────────────────────────────
C_BG = _DARK_GRAPH["C_BG"]
C_AX = _DARK_GRAPH["C_AX"]
C_GRID = _DARK_GRAPH["C_GRID"]
C_TICK = _DARK_GRAPH["C_TICK"]
C_SPINE = _DARK_GRAPH["C_SPINE"]
C_ORIGIN = _DARK_GRAPH["C_ORIGIN"]
C_CANDIDATE = _DARK_GRAPH["C_CANDIDATE"]
C_TEXT = _DARK_GRAPH["C_TEXT"]
C_LEGEND = _DARK_GRAPH["C_LEGEND"]


def set_theme(theme: str) -> None:
    """Switch the module palette to ``"dark"`` or ``"light"``."""
    palette = _DARK_GRAPH if theme == "dark" else _LIGHT_GRAPH
    globals().update(palette)


def _style_axes(ax, fig):
    fig.patch.set_facecolor(C_BG)
    ax.set_facecolor(C_AX)
    ax.tick_params(colors=C_TICK, labelsize=9)
    ax.xaxis.label.set_color(C_TEXT)
    ax.yaxis.label.set_color(C_TEXT)
    ax.title.set_color(C_TEXT)
    for spine in ax.spines.values():
        spine.set_edgecolor(C_SPINE)
    ax.grid(True, color=C_GRID, linewidth=0.8, linestyle="--", alpha=0.7)
    ax.axhline(0, color=C_SPINE, linewidth=0.8)
    ax.axvline(0, color=C_SPINE, linewidth=0.8)


def sample_curve(text: str, xs: np.ndarray) -> np.ndarray | None:
    """Evaluate *text* over *xs*; undefined points become NaN.

    Returns None when the text does not parse.
    """
    try:
        expr = compile_expression(normalize(text))
    except EvaluationError as e:
        logger.debug("Not plotting %r: %s", text, e)
        return None

    f = lambdify(X, expr, modules="numpy")
    with np.errstate(all="ignore"):
        raw = f(xs)
        if np.ndim(raw) == 0:
            raw = np.full_like(xs, raw, dtype=complex)
        values = np.asarray(raw, dtype=complex)
    ys = np.where(np.abs(values.imag) < 1e-12, values.real, np.nan)
    ys[~np.isfinite(ys)] = np.nan
    return ys.astype(float)


def _clip_ylim(ax, *curves):
    ys = np.concatenate([c for c in curves if c is not None])
    finite = ys[np.isfinite(ys)]
    if len(finite):
        lo, hi = np.percentile(finite, 2), np.percentile(finite, 98)
        pad = max((hi - lo) * 0.2, 1.0)
        ax.set_ylim(lo - pad, hi + pad)


def build_comparison_figure(origin: str, candidate: str | None = None,
                            title: str | None = None):
    """Return a Figure plotting *origin* against *candidate*.

    Equations are plotted as ``LHS - RHS``.  Returns None when the origin
    itself cannot be plotted.
    """
    from matplotlib.figure import Figure

    xs = np.linspace(X_RANGE[0], X_RANGE[1], SAMPLES)
    y_origin = sample_curve(origin, xs)
    if y_origin is None:
        return None
    y_candidate = sample_curve(candidate, xs) if candidate else None

    fig = Figure(figsize=(6, 3.4), dpi=100)
    ax = fig.add_subplot(111)
    _style_axes(ax, fig)

    ax.plot(xs, y_origin, color=C_ORIGIN, linewidth=3, linestyle="--",
            label="Original problem")
    if y_candidate is not None:
        ax.plot(xs, y_candidate, color=C_CANDIDATE, linewidth=2,
                label="Your answer")

    _clip_ylim(ax, y_origin, y_candidate)
    ax.set_xlim(*X_RANGE)
    ax.set_xlabel("x", color=C_TEXT)
    if title:
        ax.set_title(title, color=C_TEXT, fontsize=10)
    ax.legend(fontsize=8, facecolor=C_LEGEND, edgecolor=C_SPINE,
              labelcolor=C_TEXT)
    fig.tight_layout(pad=1.2)
    return fig

