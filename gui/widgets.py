"""
Algebra Drill — widget helpers & graph mixin

Reusable rendering primitives (cards, step rows) and the live comparison
graph shown next to an exercise.
"""

import logging
import tkinter as tk

from drill.graph import build_comparison_figure
from drill.models import Step
from gui import themes

logger = logging.getLogger(__name__)


class WidgetMixin:
    """Mixed into DrillApp — UI building blocks and graph panel."""

    _GRAPH_DELAY_MS = 300

    # ── Card wrapper ───────────────────────────────────────────────────

    def _make_card(self, parent: tk.Frame, bg: str) -> tk.Frame:
        wrapper = tk.Frame(parent, bg=themes.CARD_BORDER, padx=1, pady=1)
        wrapper.pack(fill=tk.X, pady=4)
        card = tk.Frame(wrapper, bg=bg, padx=14, pady=10)
        card.pack(fill=tk.X)
        return card

    # ── Step rows ──────────────────────────────────────────────────────

    def _render_step(self, parent: tk.Frame, index: int, step: Step) -> tk.Frame:
        bg = themes.VALID_BG if step.valid else themes.INVALID_BG
        fg = themes.SUCCESS if step.valid else themes.ERROR
        card = self._make_card(parent, bg)

        row = tk.Frame(card, bg=bg)
        row.pack(fill=tk.X)
        tk.Label(row, text=step.display, font=self._mono, bg=bg,
                 fg=themes.TEXT_BRIGHT, anchor="w").pack(side=tk.LEFT)
        tk.Button(
            row, text="🗑", font=self._small, bg=bg, fg=themes.TEXT_DIM,
            activebackground=bg, activeforeground=themes.ERROR,
            bd=0, relief=tk.FLAT, cursor="hand2",
            command=lambda i=index: self._on_delete(i),
        ).pack(side=tk.RIGHT)
        tk.Label(row, text="✓" if step.valid else "✗", font=self._bold,
                 bg=bg, fg=fg).pack(side=tk.RIGHT, padx=8)

        if step.message:
            tk.Label(card, text=step.message, font=self._small, bg=bg, fg=fg,
                     anchor="w", justify=tk.LEFT, wraplength=560
                     ).pack(fill=tk.X, pady=(6, 0))
        return card

    # ── Graph panel ────────────────────────────────────────────────────

    def _render_graph_panel(self, parent: tk.Frame) -> None:
        self._graph_holder = self._make_card(parent, themes.CARD_BG)
        self._graph_widget = None
        self._graph_job = None
        self._draw_graph()

    def _graph_candidate(self) -> str:
        """Text plotted against the origin: live input, else last valid step."""
        typed = self._entry_var.get().strip() if self._entry_var else ""
        if typed:
            return typed
        last = self._attempt.last_valid_step
        return last.raw if last else self._attempt.exercise.expression

    def _schedule_graph(self, *_args) -> None:
        if not self._show_graph or self._graph_holder is None:
            return
        if self._graph_job is not None:
            self.after_cancel(self._graph_job)
        self._graph_job = self.after(self._GRAPH_DELAY_MS, self._draw_graph)

    def _draw_graph(self) -> None:
        self._graph_job = None
        if self._graph_widget is not None:
            self._graph_widget.destroy()
            self._graph_widget = None
        if not self._show_graph or self._attempt is None:
            return

        fig = build_comparison_figure(self._attempt.exercise.expression,
                                      self._graph_candidate())
        if fig is None:
            logger.debug("No graph for %r", self._attempt.exercise.expression)
            self._graph_widget = tk.Label(
                self._graph_holder, text="This expression cannot be plotted.",
                font=self._small, bg=themes.CARD_BG, fg=themes.TEXT_DIM)
            self._graph_widget.pack(fill=tk.X)
            return

        from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
        canvas = FigureCanvasTkAgg(fig, master=self._graph_holder)
        canvas.draw()
        self._graph_widget = canvas.get_tk_widget()
        self._graph_widget.configure(bg=themes.CARD_BG)
        self._graph_widget.pack(fill=tk.BOTH, expand=True)
