import json
from pathlib import Path

from gui import storage


def _configure_tmp_db(monkeypatch, tmp_path: Path) -> Path:
    data_dir = tmp_path / "data"
    data_file = data_dir / "drill.json"
    monkeypatch.setattr(storage, "_DATA_DIR", str(data_dir))
    monkeypatch.setattr(storage, "_DATA_FILE", str(data_file))
    return data_file


def test_settings_defaults_get_and_save(monkeypatch, tmp_path: Path) -> None:
    _configure_tmp_db(monkeypatch, tmp_path)

    settings = storage.get_settings()
    assert settings == storage.DEFAULT_SETTINGS

    storage.save_settings({"theme": "light"})
    loaded = storage.get_settings()
    assert loaded["theme"] == "light"
    # missing keys fall back to defaults
    assert loaded["show_graph"] is True


def test_history_add_get_clear_and_limit(monkeypatch, tmp_path: Path) -> None:
    _configure_tmp_db(monkeypatch, tmp_path)

    for i in range(storage.HISTORY_LIMIT + 5):
        storage.add_history(f"ex{i}", "(x-3)(x-4)", i + 1)

    history = storage.get_history()
    assert len(history) == storage.HISTORY_LIMIT
    newest = history[0]
    assert newest["exercise_id"] == f"ex{storage.HISTORY_LIMIT + 4}"
    assert newest["answer"] == "(x-3)(x-4)"
    assert newest["steps"] == storage.HISTORY_LIMIT + 5
    assert "timestamp" in newest

    storage.clear_history()
    assert storage.get_history() == []


def test_solved_ids(monkeypatch, tmp_path: Path) -> None:
    _configure_tmp_db(monkeypatch, tmp_path)

    storage.add_history("tr1", "(x-3)(x-4)", 1)
    storage.add_history("re2", "x=-0.5", 3)
    storage.add_history("tr1", "(x-4)(x-3)", 2)
    assert storage.solved_ids() == {"tr1", "re2"}


def test_load_db_handles_invalid_json(monkeypatch, tmp_path: Path, caplog) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)
    data_file.parent.mkdir(parents=True, exist_ok=True)
    data_file.write_text("{not-json", encoding="utf-8")

    db = storage._load_db()
    assert db["settings"] == storage.DEFAULT_SETTINGS
    assert db["history"] == []
    assert "unreadable" in caplog.text


def test_load_db_fills_missing_sections(monkeypatch, tmp_path: Path) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)
    data_file.parent.mkdir(parents=True, exist_ok=True)
    data_file.write_text(json.dumps({"settings": {"theme": "light"}}), encoding="utf-8")

    db = storage._load_db()
    assert db["history"] == []
    assert db["settings"]["theme"] == "light"

    data_file.write_text(json.dumps({"settings": None, "history": None}), encoding="utf-8")
    assert storage.get_settings() == storage.DEFAULT_SETTINGS
    assert storage.get_history() == []
    assert storage.solved_ids() == set()

    data_file.write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    assert storage.get_settings() == storage.DEFAULT_SETTINGS


def test_save_db_persists_content(monkeypatch, tmp_path: Path) -> None:
    data_file = _configure_tmp_db(monkeypatch, tmp_path)
    storage._save_db({"settings": {"theme": "dark"}, "history": []})
    content = json.loads(data_file.read_text(encoding="utf-8"))
    assert content["settings"]["theme"] == "dark"
