"""
Algebra Drill — Tkinter GUI

Menu of exercise categories and a step-by-step workspace: the learner
types one rewrite at a time and each step is checked by
``drill.validator`` against the exercise origin and target.
"""

import logging
import tkinter as tk
from tkinter import font as tkfont

from drill import graph
from drill.exercises import exercises_in, pick_random_exercise
from drill.formatting import to_display_form
from drill.models import Attempt, Category, Exercise
from drill.validator import delete_step, submit_step
from gui import storage, themes
from gui.widgets import WidgetMixin

logger = logging.getLogger(__name__)

CATEGORY_DESCRIPTIONS = {
    Category.COMMON_FACTOR: "Simple and repeated common factors.",
    Category.IDENTITY:      "Perfect squares and sums of cubes.",
    Category.DIFF_SQUARES:  "The classic a² - b².",
    Category.TRINOMIAL:     "Sum and product, monic and non-monic trinomials.",
    Category.RATIONAL_EQ:   "Equations with fractions.",
    Category.MIX:           "A bit of everything to test yourself.",
}

CATEGORY_EXAMPLES = {
    Category.COMMON_FACTOR: "3x(x+2) - 5(x+2)",
    Category.IDENTITY:      "4x^2 - 12x + 9",
    Category.DIFF_SQUARES:  "25x^2 - 64",
    Category.TRINOMIAL:     "x^2 - 7x + 12",
    Category.RATIONAL_EQ:   "3/(x-1) - 2/x = 0",
    Category.MIX:           "x^2 - 4 + 3(x-2)",
}

REMINDERS = (
    "a² - b² = (a - b)(a + b)",
    "a² + 2ab + b² = (a + b)²",
    "k(a + b) = ka + kb",
)


class DrillApp(WidgetMixin, tk.Tk):
    """Main application window."""

    def __init__(self) -> None:
        super().__init__()
        self.title("Algebra Drill — Factorization & Equations")
        self.geometry("1100x800")
        self.minsize(800, 600)

        settings = storage.get_settings()
        self._theme: str = settings["theme"]
        self._show_graph: bool = settings["show_graph"]
        self._auto_hint: bool = settings["show_hint"]
        themes.apply_theme(self._theme)
        graph.set_theme(self._theme)
        self.configure(bg=themes.BG)

        # ── Fonts ────────────────────────────────────────────────────
        self._default = tkfont.Font(family="Segoe UI", size=13)
        self._bold    = tkfont.Font(family="Segoe UI", size=13, weight="bold")
        self._title   = tkfont.Font(family="Segoe UI", size=20, weight="bold")
        self._mono    = tkfont.Font(family="Consolas", size=15)
        self._small   = tkfont.Font(family="Segoe UI", size=11)

        self._category: Category | None = None
        self._attempt: Attempt | None = None
        self._hint_visible: bool = False
        self._entry_var: tk.StringVar | None = None
        self._graph_holder = None
        self._graph_widget = None
        self._graph_job = None

        self._build_ui()
        self._show_menu()

        self.bind("<Return>", lambda _: self._on_validate())
        self.bind("<Escape>", lambda _: self._show_menu())

    # ── UI construction ─────────────────────────────────────────────────

    def _build_ui(self) -> None:
        self._header = tk.Frame(self, bg=themes.HEADER_BG, height=64)
        self._header.pack(fill=tk.X)
        self._header.pack_propagate(False)

        tk.Button(
            self._header, text="Algebra Drill", font=self._title,
            bg=themes.HEADER_BG, fg=themes.ACCENT,
            activebackground=themes.HEADER_BG, activeforeground=themes.ACCENT_HOVER,
            bd=0, relief=tk.FLAT, cursor="hand2", command=self._show_menu,
        ).pack(side=tk.LEFT, padx=20)

        tk.Button(
            self._header, text="☀ Light" if self._theme == "dark" else "🌙 Dark",
            font=self._small, bg=themes.HEADER_BG, fg=themes.TEXT_DIM,
            activebackground=themes.HEADER_BG, activeforeground=themes.TEXT_BRIGHT,
            bd=0, padx=12, pady=6, relief=tk.FLAT, cursor="hand2",
            command=self._toggle_theme,
        ).pack(side=tk.RIGHT, padx=20)

        self._body = tk.Frame(self, bg=themes.BG)
        self._body.pack(fill=tk.BOTH, expand=True, padx=20, pady=16)

    def _clear_body(self) -> None:
        if self._graph_job is not None:
            self.after_cancel(self._graph_job)
            self._graph_job = None
        self._graph_holder = None
        self._graph_widget = None
        self._entry_var = None
        for child in self._body.winfo_children():
            child.destroy()

    # ── Theme ────────────────────────────────────────────────────────────

    def _toggle_theme(self) -> None:
        self._theme = "light" if self._theme == "dark" else "dark"
        themes.apply_theme(self._theme)
        graph.set_theme(self._theme)
        settings = storage.get_settings()
        settings["theme"] = self._theme
        storage.save_settings(settings)

        draft = self._entry_var.get() if self._entry_var else None
        self._clear_body()
        for child in self.winfo_children():
            child.destroy()
        self.configure(bg=themes.BG)
        self._build_ui()
        if self._attempt is None:
            self._show_menu()
        else:
            if draft is not None:
                self._attempt = self._attempt.model_copy(update={"draft": draft})
            self._render_exercise()

    # ── Menu ─────────────────────────────────────────────────────────────

    def _show_menu(self) -> None:
        self._clear_body()
        self._category = None
        self._attempt = None
        solved = storage.solved_ids()

        tk.Label(self._body, text="Choose a topic", font=self._title,
                 bg=themes.BG, fg=themes.TEXT_BRIGHT).pack(pady=(20, 4))
        tk.Label(self._body, text="Rewrite the expression one step at a time. "
                 "Every step is checked.", font=self._default,
                 bg=themes.BG, fg=themes.TEXT_DIM).pack(pady=(0, 16))

        grid = tk.Frame(self._body, bg=themes.BG)
        grid.pack()
        for i, category in enumerate(Category):
            pool = exercises_in(category)
            done = sum(1 for ex in pool if ex.id in solved)
            card = tk.Frame(grid, bg=themes.CARD_BG, padx=18, pady=14,
                            highlightbackground=themes.CARD_BORDER,
                            highlightthickness=1, cursor="hand2")
            card.grid(row=i // 3, column=i % 3, padx=8, pady=8, sticky="nsew")
            widgets = (
                card,
                tk.Label(card, text=category.value, font=self._bold,
                         bg=themes.CARD_BG, fg=themes.TEXT_BRIGHT, anchor="w"),
                tk.Label(card, text=CATEGORY_DESCRIPTIONS[category], font=self._small,
                         bg=themes.CARD_BG, fg=themes.TEXT_DIM, anchor="w",
                         wraplength=240, justify=tk.LEFT),
                tk.Label(card, text=to_display_form(CATEGORY_EXAMPLES[category]),
                         font=self._mono, bg=themes.ORIGIN_BG, fg=themes.TEXT_BRIGHT,
                         pady=4),
                tk.Label(card, text=f"{done}/{len(pool)} solved", font=self._small,
                         bg=themes.CARD_BG, fg=themes.SUCCESS, anchor="w"),
            )
            for w in widgets[1:]:
                w.pack(fill=tk.X)
            for w in widgets:
                w.bind("<Button-1>", lambda _e, c=category: self._select_category(c))

    def _select_category(self, category: Category) -> None:
        self._category = category
        self._start(pick_random_exercise(category))

    def _next_exercise(self) -> None:
        current = self._attempt.exercise if self._attempt else None
        self._start(pick_random_exercise(self._category or Category.MIX, current))

    def _start(self, exercise: Exercise) -> None:
        logger.info("Starting exercise %s", exercise.id)
        self._attempt = Attempt.start(exercise)
        self._hint_visible = self._auto_hint
        self._render_exercise()

    # ── Exercise workspace ──────────────────────────────────────────────

    def _render_exercise(self) -> None:
        self._clear_body()
        attempt = self._attempt
        exercise = attempt.exercise

        left = tk.Frame(self._body, bg=themes.BG)
        left.pack(side=tk.LEFT, fill=tk.BOTH, expand=True, padx=(0, 12))
        right = tk.Frame(self._body, bg=themes.BG, width=420)
        right.pack(side=tk.RIGHT, fill=tk.Y)

        # Instruction card
        card = self._make_card(left, themes.CARD_BG)
        tk.Label(card, text=f"{exercise.category.value}  •  {exercise.difficulty.value}",
                 font=self._small, bg=themes.CARD_BG, fg=themes.ACCENT,
                 anchor="w").pack(fill=tk.X)
        tk.Label(card, text=exercise.title, font=self._bold, bg=themes.CARD_BG,
                 fg=themes.TEXT_BRIGHT, anchor="w").pack(fill=tk.X)
        tk.Label(card, text=exercise.instruction, font=self._default,
                 bg=themes.CARD_BG, fg=themes.TEXT, anchor="w").pack(fill=tk.X, pady=(2, 8))
        tk.Label(card, text=to_display_form(exercise.expression), font=self._mono,
                 bg=themes.ORIGIN_BG, fg=themes.TEXT_BRIGHT, pady=10).pack(fill=tk.X)

        steps_frame = tk.Frame(left, bg=themes.BG)
        steps_frame.pack(fill=tk.X, pady=(8, 0))
        for index, step in enumerate(attempt.steps):
            self._render_step(steps_frame, index, step)

        if attempt.solved:
            self._render_success(left)
        else:
            self._render_input(left, attempt.draft)

        # Right column
        graph_bar = tk.Frame(right, bg=themes.BG)
        graph_bar.pack(fill=tk.X)
        tk.Label(graph_bar, text="Visualisation", font=self._bold,
                 bg=themes.BG, fg=themes.TEXT_BRIGHT).pack(side=tk.LEFT)
        tk.Button(graph_bar, text="Hide graph" if self._show_graph else "Show graph",
                  font=self._small, bg=themes.BG, fg=themes.ACCENT,
                  activebackground=themes.BG, bd=0, relief=tk.FLAT,
                  cursor="hand2", command=self._toggle_graph).pack(side=tk.RIGHT)
        if self._show_graph:
            self._render_graph_panel(right)

        self._render_hint(right, exercise)

        reminders = self._make_card(right, themes.CARD_BG)
        tk.Label(reminders, text="Reminders", font=self._bold, bg=themes.CARD_BG,
                 fg=themes.TEXT_BRIGHT, anchor="w").pack(fill=tk.X)
        for line in REMINDERS:
            tk.Label(reminders, text=f"•  {line}", font=self._small,
                     bg=themes.CARD_BG, fg=themes.TEXT, anchor="w").pack(fill=tk.X)

    def _render_input(self, parent: tk.Frame, draft: str) -> None:
        bar = tk.Frame(parent, bg=themes.INPUT_BG, padx=14, pady=12,
                       highlightbackground=themes.INPUT_BORDER, highlightthickness=1)
        bar.pack(fill=tk.X, side=tk.BOTTOM, pady=(12, 0))
        tk.Label(bar, text="Your next step:", font=self._small, bg=themes.INPUT_BG,
                 fg=themes.TEXT, anchor="w").pack(fill=tk.X)

        row = tk.Frame(bar, bg=themes.INPUT_BG)
        row.pack(fill=tk.X, pady=(4, 0))
        self._entry_var = tk.StringVar(value=draft)
        self._entry = tk.Entry(
            row, font=self._mono, bg=themes.INPUT_BG, fg=themes.TEXT_BRIGHT,
            insertbackground=themes.TEXT_BRIGHT, bd=0, relief=tk.FLAT,
            textvariable=self._entry_var,
        )
        self._entry.pack(side=tk.LEFT, fill=tk.X, expand=True, padx=(0, 8))
        self._entry.focus_set()
        self._entry.icursor(tk.END)
        self._entry_var.trace_add("write", self._schedule_graph)

        tk.Button(
            row, text="Check ✓", font=self._bold, bg=themes.ACCENT, fg="#ffffff",
            activebackground=themes.ACCENT_HOVER, activeforeground="#ffffff",
            bd=0, padx=18, pady=6, cursor="hand2", command=self._on_validate,
        ).pack(side=tk.RIGHT)
        tk.Label(bar, text="Tip: use ^ for powers (x^2) and / for fractions.",
                 font=self._small, bg=themes.INPUT_BG, fg=themes.TEXT_DIM,
                 anchor="w").pack(fill=tk.X, pady=(6, 0))

    def _render_success(self, parent: tk.Frame) -> None:
        card = self._make_card(parent, themes.CARD_BG)
        tk.Label(card, text="✓  Exercise solved!", font=self._title,
                 bg=themes.CARD_BG, fg=themes.SUCCESS).pack(pady=(6, 2))
        tk.Label(card, text="You reached the final form.", font=self._default,
                 bg=themes.CARD_BG, fg=themes.TEXT).pack(pady=(0, 10))
        buttons = tk.Frame(card, bg=themes.CARD_BG)
        buttons.pack()
        tk.Button(buttons, text="Main menu", font=self._default,
                  bg=themes.CARD_BG, fg=themes.TEXT_BRIGHT, bd=1, padx=14, pady=4,
                  cursor="hand2", command=self._show_menu).pack(side=tk.LEFT, padx=6)
        tk.Button(buttons, text="Next exercise ➤", font=self._bold,
                  bg=themes.SUCCESS, fg="#ffffff", bd=0, padx=14, pady=4,
                  cursor="hand2", command=self._next_exercise).pack(side=tk.LEFT, padx=6)

    def _render_hint(self, parent: tk.Frame, exercise: Exercise) -> None:
        card = self._make_card(parent, themes.HINT_BG)
        tk.Label(card, text="Need help?", font=self._bold, bg=themes.HINT_BG,
                 fg=themes.HINT_FG, anchor="w").pack(fill=tk.X)
        if self._hint_visible:
            tk.Label(card, text=exercise.hint, font=self._small, bg=themes.HINT_BG,
                     fg=themes.HINT_FG, anchor="w", justify=tk.LEFT,
                     wraplength=360).pack(fill=tk.X)
        else:
            tk.Button(card, text="Reveal the hint", font=self._small,
                      bg=themes.HINT_BG, fg=themes.HINT_FG, bd=0, relief=tk.FLAT,
                      activebackground=themes.HINT_BG, cursor="hand2",
                      command=self._reveal_hint).pack(anchor="w")

    # ── Actions ──────────────────────────────────────────────────────────

    def _keep_draft(self) -> None:
        if self._entry_var is not None and self._attempt is not None:
            self._attempt = self._attempt.model_copy(
                update={"draft": self._entry_var.get()})

    def _reveal_hint(self) -> None:
        self._hint_visible = True
        self._keep_draft()
        self._render_exercise()

    def _toggle_graph(self) -> None:
        self._show_graph = not self._show_graph
        settings = storage.get_settings()
        settings["show_graph"] = self._show_graph
        storage.save_settings(settings)
        self._keep_draft()
        self._render_exercise()

    def _on_validate(self) -> None:
        if self._attempt is None or self._entry_var is None:
            return
        self._apply(submit_step(self._attempt, self._entry_var.get()))

    def _on_delete(self, index: int) -> None:
        self._keep_draft()
        self._apply(delete_step(self._attempt, index))

    def _apply(self, attempt: Attempt) -> None:
        previous = self._attempt
        if attempt is previous:
            return
        self._attempt = attempt
        if attempt.solved and not previous.solved:
            storage.add_history(attempt.exercise.id, attempt.steps[-1].raw,
                                len(attempt.steps))
        self._render_exercise()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = DrillApp()
    app.mainloop()


if __name__ == "__main__":
    main()
