# ui_streamlit.py
import logging
import os
import sys

import streamlit as st

# Cloud-safe: ensure the folder containing ui_streamlit.py is importable
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

import dotoday_generate as ENGINE  # noqa: E402

logger = logging.getLogger(__name__)

TIME_LABELS = {t: f"{t} min" for t in ENGINE.TIME_OPTIONS}


# -----------------------------
# Session state
# -----------------------------
def _init_state() -> None:
    defaults = ENGINE.DEFAULT_INPUTS
    if "form" not in st.session_state:
        st.session_state.form = {k: v for k, v in defaults.items() if k != "variation_seed"}
    if "current_workout" not in st.session_state:
        st.session_state.current_workout = None
    if "current_summary" not in st.session_state:
        st.session_state.current_summary = None


def clear_last_output():
    st.session_state.current_workout = None
    st.session_state.current_summary = None


def _generate(form: dict) -> None:
    payload = {**form, "variation_seed": ENGINE.new_variation_seed()}
    try:
        st.session_state.current_workout = ENGINE.generate_workout(payload)
        st.session_state.current_summary = ENGINE.summarize_inputs(form)
    except ValueError as e:
        logger.warning("Workout generation rejected inputs: %s", e)
        st.error(str(e))


def _choice(label: str, options, key: str, format_func=str):
    current = st.session_state.form[key]
    return st.radio(
        label,
        options,
        index=list(options).index(current),
        format_func=format_func,
        horizontal=True,
        key=f"opt_{key}",
    )


# -----------------------------
# Page
# -----------------------------
st.set_page_config(page_title="Do Today", layout="centered")
_init_state()

st.title("Do Today")
st.caption("One focused workout. Clear and doable.")

form = st.session_state.form

with st.container(border=True):
    col_plan, col_notice = st.columns([1, 2])
    with col_plan:
        plan_label = st.radio(
            "Plan",
            ["Free", "Pro"],
            index=0 if form["is_free_user"] else 1,
            horizontal=True,
            key="opt_plan",
        )
        form["is_free_user"] = plan_label == "Free"

    form["time_minutes"] = _choice("Time", ENGINE.TIME_OPTIONS, "time_minutes", format_func=TIME_LABELS.get)
    form["location"] = _choice("Location", ENGINE.LOCATIONS, "location")
    form["equipment"] = _choice("Equipment", ENGINE.EQUIPMENT_LEVELS, "equipment")
    form["experience"] = _choice("Experience", ENGINE.EXPERIENCE_LEVELS, "experience")
    form["energy"] = _choice("Energy", ENGINE.ENERGY_LEVELS, "energy")
    form["workout_style"] = _choice("Style", ENGINE.WORKOUT_STYLES, "workout_style")
    form["limitations"] = st.text_input(
        "Limitations (optional)",
        value=form.get("limitations") or "",
        placeholder="e.g., knee pain",
        key="opt_limitations",
    )

    with col_notice:
        cap_notice = ENGINE.free_tier_notice(form)
        if cap_notice:
            st.caption(cap_notice)

    col_gen, col_new = st.columns(2)
    with col_gen:
        if st.button("Generate workout", type="primary", use_container_width=True, key="btn_generate"):
            _generate(form)
    with col_new:
        if st.button(
            "New workout",
            use_container_width=True,
            disabled=st.session_state.current_workout is None,
            key="btn_new",
        ):
            _generate(form)

if st.session_state.current_workout is None:
    st.info("Generate a workout to start the chat.")
else:
    if st.session_state.current_summary:
        st.caption(st.session_state.current_summary)
    with st.container(border=True):
        # plan text is shown verbatim, line breaks kept
        st.text(st.session_state.current_workout)

    col_change, col_copy = st.columns(2)
    with col_change:
        if st.button("Change inputs", use_container_width=True, key="btn_change"):
            clear_last_output()
            st.rerun()
    with col_copy:
        show_copy = st.toggle("Copy workout", key="opt_copy")
    if show_copy:
        st.code(st.session_state.current_workout, language=None)
        st.caption("Use the copy icon on the block above (or select and Ctrl+C / Cmd+C).")
