"""Screen adapters over TrackerStore.

Each screen reads the store's current lists, shapes them into a plain view
object for a front end to draw, and forwards user actions to the store.
Screens keep no durable state of their own.
"""

from fittrack.screens.habits import HabitRow, HabitsScreen, HabitsView
from fittrack.screens.history import HistoryRow, HistoryScreen, HistoryView
from fittrack.screens.log import LogForm, LogScreen
from fittrack.screens.stats import StatsScreen, StatsView

__all__ = [
    "HabitRow",
    "HabitsScreen",
    "HabitsView",
    "HistoryRow",
    "HistoryScreen",
    "HistoryView",
    "LogForm",
    "LogScreen",
    "StatsScreen",
    "StatsView",
]
