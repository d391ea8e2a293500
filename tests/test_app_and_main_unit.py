import gui.app as app_module
from drill.evaluator import evaluate
from drill.exercises import get_exercise
from drill.formatting import to_display_form
from drill.models import Attempt, Category
from drill.validator import submit_step
from gui.app import DrillApp


class _FakeApp:
    def __init__(self, attempt: Attempt):
        self._attempt = attempt
        self.renders = 0

    def _render_exercise(self) -> None:
        self.renders += 1


def _record_history(monkeypatch) -> list:
    calls = []
    monkeypatch.setattr(app_module.storage, "add_history",
                        lambda *args: calls.append(args))
    return calls


def test_apply_records_history_on_first_solve(monkeypatch) -> None:
    calls = _record_history(monkeypatch)
    start = Attempt.start(get_exercise("tr1"))
    fake = _FakeApp(start)

    solved = submit_step(start, "(x-3)(x-4)")
    DrillApp._apply(fake, solved)

    assert fake._attempt is solved
    assert fake.renders == 1
    assert calls == [("tr1", "(x-3)(x-4)", 1)]


def test_apply_ignores_unchanged_attempt(monkeypatch) -> None:
    calls = _record_history(monkeypatch)
    start = Attempt.start(get_exercise("tr1"))
    fake = _FakeApp(start)

    DrillApp._apply(fake, start)

    assert fake.renders == 0
    assert calls == []


def test_apply_failed_step_does_not_record(monkeypatch) -> None:
    calls = _record_history(monkeypatch)
    start = Attempt.start(get_exercise("tr1"))
    fake = _FakeApp(start)

    DrillApp._apply(fake, submit_step(start, "(x-3)(x-5)"))

    assert fake.renders == 1
    assert calls == []


def test_every_category_card_has_a_sample_expression() -> None:
    assert set(app_module.CATEGORY_EXAMPLES) == set(Category)
    assert set(app_module.CATEGORY_DESCRIPTIONS) == set(Category)
    for text in app_module.CATEGORY_EXAMPLES.values():
        assert evaluate(text, 2) is not None
    assert to_display_form(app_module.CATEGORY_EXAMPLES[Category.DIFF_SQUARES]) == "25x² - 64"


def test_main_entry_runs_app(monkeypatch) -> None:
    called = {"mainloop": False}

    class DummyApp:
        def mainloop(self):
            called["mainloop"] = True

    monkeypatch.setattr(app_module, "DrillApp", DummyApp)
    app_module.main()
    assert called["mainloop"] is True
