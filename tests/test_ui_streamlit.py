"""Smoke tests for the Streamlit page."""

from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parent.parent / "ui_streamlit.py")


def _app() -> AppTest:
    at = AppTest.from_file(APP_PATH)
    at.run()
    assert not at.exception
    return at


def test_page_renders_with_new_workout_disabled():
    at = _app()
    assert at.title[0].value == "Do Today"
    assert at.button(key="btn_new").disabled
    assert at.session_state["current_workout"] is None


def test_generate_shows_plan_and_summary():
    at = _app()
    at.button(key="btn_generate").click().run()
    assert not at.exception
    workout = at.session_state["current_workout"]
    assert workout.startswith("Today's Focus: Balanced Full Body")
    assert "Workout (20 min):" in workout
    assert at.text[0].value == workout
    assert not at.button(key="btn_new").disabled
    captions = [c.value for c in at.caption]
    assert "20 min · home · none · beginner · medium energy · no limitations · style: balanced · free" in captions


def test_free_tier_notice_follows_form():
    at = _app()
    at.radio(key="opt_equipment").set_value("dumbbells").run()
    assert "Free uses bodyweight only." in [c.value for c in at.caption]
    at.radio(key="opt_plan").set_value("Pro").run()
    assert "Free uses bodyweight only." not in [c.value for c in at.caption]


def test_pro_powerlifting_and_change_inputs():
    at = _app()
    at.radio(key="opt_plan").set_value("Pro").run()
    at.radio(key="opt_location").set_value("gym").run()
    at.radio(key="opt_equipment").set_value("barbell").run()
    at.radio(key="opt_workout_style").set_value("powerlifting").run()
    at.button(key="btn_generate").click().run()
    assert not at.exception
    assert "(rest 2-3 min)" in at.session_state["current_workout"]

    at.button(key="btn_change").click().run()
    assert at.session_state["current_workout"] is None
