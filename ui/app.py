from __future__ import annotations

from pathlib import Path
from uuid import UUID

import streamlit as st

from fittrack.config.settings import Settings
from fittrack.core.logger import setup_logger
from fittrack.persistence.store import TrackerStore
from fittrack.screens import HabitsScreen, HistoryScreen, LogScreen, StatsScreen
from fittrack.screens.log import (
    DEFAULT_ACTIVITY_TYPE,
    DEFAULT_DURATION_MINUTES,
    DURATION_STEP_MINUTES,
    MAX_DURATION_MINUTES,
    MIN_DURATION_MINUTES,
)


st.set_page_config(page_title="FitTrack", layout="centered")

settings = Settings()


# -------------------------------------------------
# Store (one per data location, shared across reruns)
# -------------------------------------------------
@st.cache_resource
def configure_logging(level: str, log_file: str | None) -> None:
    # arguments only key the cache; sinks come from settings
    setup_logger(settings)


@st.cache_resource
def get_store(workouts_path: str, habits_path: str, timezone: str) -> TrackerStore:
    # timezone only keys the cache; the zone itself is resolved by settings
    store = TrackerStore(Path(workouts_path), Path(habits_path), tz=settings.local_tz())
    store.load()
    return store


configure_logging(settings.log_level, settings.log_file)
store = get_store(str(settings.workouts_path), str(settings.habits_path), settings.timezone)


# -------------------------------------------------
# Session State (Log form)
# -------------------------------------------------
def reset_log_form() -> None:
    st.session_state.log_type = DEFAULT_ACTIVITY_TYPE
    st.session_state.log_duration = DEFAULT_DURATION_MINUTES
    st.session_state.log_notes = ""


if "log_type" not in st.session_state:
    reset_log_form()
if "last_saved" not in st.session_state:
    st.session_state.last_saved = None


# -------------------------------------------------
# Helpers
# -------------------------------------------------
def save_workout(screen: LogScreen) -> None:
    screen.set_activity_type(st.session_state.log_type)
    screen.set_duration(int(st.session_state.log_duration))
    screen.set_notes(st.session_state.log_notes)
    entry = screen.submit()
    st.session_state.last_saved = f"Saved {entry.activity_type} - {entry.duration_minutes} min"
    reset_log_form()


def delete_checked(screen: HistoryScreen) -> None:
    positions = [
        i for i, workout in enumerate(screen.store.workouts) if st.session_state.get(f"delete_{workout.id}")
    ]
    if positions:
        screen.remove(positions)


def toggle_habit(screen: HabitsScreen, habit_id: UUID) -> None:
    screen.toggle(habit_id)


# -------------------------------------------------
# Screens
# -------------------------------------------------
log_tab, history_tab, habits_tab, stats_tab = st.tabs(["Log", "History", "Habits", "Stats"])

# =========================
# Log
# =========================
with log_tab:
    st.subheader("Quick Log")
    log_screen = LogScreen(store)
    st.selectbox("Type", log_screen.suggestions, key="log_type")
    st.number_input(
        "Duration (min)",
        min_value=MIN_DURATION_MINUTES,
        max_value=MAX_DURATION_MINUTES,
        step=DURATION_STEP_MINUTES,
        key="log_duration",
    )
    st.text_input("Notes (optional)", key="log_notes")
    st.button("Save Workout", key="save_workout", type="primary", on_click=save_workout, args=(log_screen,))
    if st.session_state.last_saved:
        st.success(st.session_state.last_saved)

# =========================
# History
# =========================
with history_tab:
    history_screen = HistoryScreen(store)
    history_view = history_screen.view()
    if history_view.is_empty:
        st.subheader(history_view.empty_title)
        st.caption(history_view.empty_message)
    else:
        st.subheader("History")
        for row in history_view.rows:
            text_col, delete_col = st.columns([5, 1])
            with text_col:
                st.markdown(f"**{row.activity_type}**")
                st.caption(row.when)
                if row.duration:
                    st.text(row.duration)
                if row.notes:
                    st.text(row.notes)
            with delete_col:
                st.checkbox("Remove", key=f"delete_{row.workout_id}")
        st.button("Delete selected", on_click=delete_checked, args=(history_screen,))

# =========================
# Habits
# =========================
with habits_tab:
    habits_screen = HabitsScreen(store)
    habits_view = habits_screen.view()
    st.subheader("Habits")
    for row in habits_view.rows:
        name_col, button_col = st.columns([4, 1])
        name_col.markdown(f"{row.name}  \n:gray[streak: {row.streak}d]")
        button_col.button(
            row.action_label,
            key=f"habit_{row.habit_id}",
            type="primary",
            on_click=toggle_habit,
            args=(habits_screen, row.habit_id),
        )

# =========================
# Stats
# =========================
with stats_tab:
    stats_view = StatsScreen(store, weekly_goal=settings.weekly_goal).view()
    st.subheader(stats_view.title)
    st.header(stats_view.count_label)
    st.caption(stats_view.goal_label)
