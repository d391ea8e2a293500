"""
Algebra Drill — local JSON storage for settings and solved-exercise history.

Data is persisted in ``<project>/data/drill.json``.
"""

import json
import logging
import os
import time
from datetime import datetime

logger = logging.getLogger(__name__)

_DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "..", "data")
_DATA_FILE = os.path.join(_DATA_DIR, "drill.json")

HISTORY_LIMIT = 100

DEFAULT_SETTINGS = {
    "theme": "dark",
    "show_graph": True,     # graph panel open when an exercise starts
    "show_hint": False,     # reveal the hint without a click
}


def _empty_db() -> dict:
    return {"settings": dict(DEFAULT_SETTINGS), "history": []}


def _ensure_dir() -> None:
    os.makedirs(_DATA_DIR, exist_ok=True)


def _load_db() -> dict:
    _ensure_dir()
    if os.path.exists(_DATA_FILE):
        try:
            with open(_DATA_FILE, "r", encoding="utf-8") as f:
                db = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", _DATA_FILE, e)
            return _empty_db()
        if not isinstance(db, dict):
            logger.warning("Ignoring malformed settings file %s", _DATA_FILE)
            return _empty_db()
        if not isinstance(db.get("settings"), dict):
            db["settings"] = dict(DEFAULT_SETTINGS)
        if not isinstance(db.get("history"), list):
            db["history"] = []
        return db
    return _empty_db()


def _save_db(db: dict) -> None:
    _ensure_dir()
    with open(_DATA_FILE, "w", encoding="utf-8") as f:
        json.dump(db, f, indent=2, ensure_ascii=False)


# ── Settings ─────────────────────────────────────────────────────────────

def get_settings() -> dict:
    """Return the stored settings merged over the defaults."""
    merged = dict(DEFAULT_SETTINGS)
    merged.update(_load_db()["settings"])
    return merged


def save_settings(settings: dict) -> None:
    db = _load_db()
    db["settings"] = settings
    _save_db(db)


# ── History ──────────────────────────────────────────────────────────────

def add_history(exercise_id: str, answer: str, step_count: int) -> None:
    """Record a solved exercise (newest first)."""
    db = _load_db()
    db["history"].insert(0, {
        "exercise_id": exercise_id,
        "answer": answer,
        "steps": step_count,
        "timestamp": datetime.now().strftime("%Y-%m-%d %H:%M:%S"),
        "epoch": time.time(),
    })
    db["history"] = db["history"][:HISTORY_LIMIT]
    _save_db(db)


def get_history() -> list[dict]:
    return _load_db()["history"]


def solved_ids() -> set[str]:
    """Ids of every exercise solved at least once."""
    return {record["exercise_id"] for record in get_history()}


def clear_history() -> None:
    db = _load_db()
    db["history"] = []
    _save_db(db)
