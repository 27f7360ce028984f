"""Tests for the Streamlit front end, driven through streamlit's AppTest."""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

pytestmark = pytest.mark.integration

APP_PATH = Path(__file__).resolve().parents[2] / "ui" / "app.py"


@pytest.fixture
def app_test(fittrack_env: Path) -> AppTest:
    at = AppTest.from_file(str(APP_PATH), default_timeout=30)
    at.run()
    assert not at.exception
    return at


def test_initial_render(app_test: AppTest) -> None:
    assert len(app_test.tabs) == 4
    subheaders = [s.value for s in app_test.subheader]
    assert "No workouts yet" in subheaders
    assert "Last 7 Days" in subheaders
    assert [h.value for h in app_test.header] == ["0 workouts"]
    assert [b.label for b in app_test.button if b.key and b.key.startswith("habit_")] == ["Mark", "Mark", "Mark"]


def test_save_workout(app_test: AppTest, fittrack_env: Path) -> None:
    app_test.selectbox(key="log_type").select("Yoga")
    app_test.number_input(key="log_duration").set_value(45)
    app_test.text_input(key="log_notes").input("stretch")
    app_test.button(key="save_workout").click().run()

    assert not app_test.exception
    (record,) = json.loads((fittrack_env / "workouts.json").read_text())
    assert record["type"] == "Yoga"
    assert record["durationMinutes"] == 45
    assert record["notes"] == "stretch"

    assert app_test.session_state["log_notes"] == ""
    assert app_test.session_state["log_duration"] == 30
    assert "**Yoga**" in [m.value for m in app_test.markdown]
    assert [h.value for h in app_test.header] == ["1 workout"]


def test_mark_habit(app_test: AppTest, fittrack_env: Path) -> None:
    water_button = next(b for b in app_test.button if b.key and b.key.startswith("habit_"))
    water_button.click().run()

    assert not app_test.exception
    habits = {h["name"]: h for h in json.loads((fittrack_env / "habits.json").read_text())}
    assert habits["Water"]["dates"] == [datetime.now(timezone.utc).strftime("%Y-%m-%d")]
    labels = [b.label for b in app_test.button if b.key and b.key.startswith("habit_")]
    assert labels == ["Done", "Mark", "Mark"]
