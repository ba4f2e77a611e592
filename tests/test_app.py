"""Tests for the Streamlit dashboard, driven through streamlit's AppTest."""

from __future__ import annotations

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import helpers

APP_PATH = Path(__file__).resolve().parents[1] / "streamlit_app" / "app.py"


@pytest.fixture
def app(tmp_path, monkeypatch):
    monkeypatch.setattr(helpers, "_PLANS_DIR", tmp_path / "plans")
    return AppTest.from_file(str(APP_PATH), default_timeout=30).run()


def _add(at: AppTest, name: str) -> AppTest:
    at.text_input(key="new_task").set_value(name).run()
    return at


def _click(at: AppTest, label: str) -> AppTest:
    next(b for b in at.button if b.label == label).click().run()
    return at


class TestTaskInput:
    def test_added_task_clears_input(self, app) -> None:
        _add(app, "Email")
        assert app.session_state["task_list"].names == ("Email",)
        assert app.text_input(key="new_task").value == ""

    def test_duplicate_keeps_input_text(self, app) -> None:
        _add(app, "Email")
        _add(app, "email")
        assert app.session_state["task_list"].names == ("Email",)
        assert app.text_input(key="new_task").value == "email"
        assert any(w.value == "Task already exists!" for w in app.warning)


class TestCompletionCheckboxes:
    def test_regenerated_plan_starts_unchecked(self, app) -> None:
        for name in ("A", "B", "C"):
            _add(app, name)
        _click(app, "Generate Plan")
        app.checkbox[0].check().run()
        assert app.session_state["schedule"].blocks[0].completed is True

        _click(app, "Generate Plan")
        schedule = app.session_state["schedule"]
        assert not any(b.completed for b in schedule.blocks)
        assert app.checkbox
        assert all(cb.value is False for cb in app.checkbox)
