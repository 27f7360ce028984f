"""FitTrack command-line interface.

Terminal front end for the four screens (Log, History, Habits, Stats) plus a
launcher for the Streamlit app. Every command loads the store from the
configured data directory, runs one screen action and renders the result.
"""

import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from uuid import UUID

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from fittrack.config.settings import Settings
from fittrack.core.logger import setup_logger
from fittrack.persistence.store import TrackerStore
from fittrack.screens import HabitsScreen, HistoryScreen, LogScreen, StatsScreen
from fittrack.screens.log import DURATION_STEP_MINUTES, MAX_DURATION_MINUTES, MIN_DURATION_MINUTES

console = Console()

app = typer.Typer(
    name="fittrack",
    help="FitTrack - log workouts, check off daily habits, see your week",
    add_completion=False,
)

UI_SCRIPT = Path(__file__).resolve().parent.parent / "ui" / "app.py"


@dataclass
class CliState:
    settings: Settings
    debug: bool = False

    def open_store(self) -> TrackerStore:
        store = TrackerStore.from_settings(self.settings)
        store.load()
        return store


@app.callback()
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    settings = Settings()
    setup_logger(settings, debug=debug)
    ctx.obj = CliState(settings=settings, debug=debug)


@app.command()
def log(
    ctx: typer.Context,
    activity_type: str = typer.Option("Workout", "--type", "-t", help="Activity type, e.g. Run, Walk, Yoga, Cycling"),
    duration: int = typer.Option(
        30,
        "--duration",
        "-d",
        help=f"Duration in minutes ({MIN_DURATION_MINUTES}-{MAX_DURATION_MINUTES}, step {DURATION_STEP_MINUTES})",
    ),
    notes: str = typer.Option("", "--notes", "-n", help="Optional notes"),
) -> None:
    """Log a workout."""
    screen = LogScreen(ctx.obj.open_store())
    screen.set_activity_type(activity_type)
    screen.set_duration(duration)
    screen.set_notes(notes)
    if screen.form.duration_minutes != duration:
        console.print(f"[yellow]Duration adjusted to {screen.form.duration_minutes} min[/yellow]")
    entry = screen.submit()
    console.print(f"[green]Saved[/green] {entry.activity_type} - {entry.duration_minutes} min")


@app.command()
def history(ctx: typer.Context) -> None:
    """List logged workouts, newest first."""
    view = HistoryScreen(ctx.obj.open_store()).view()
    if view.is_empty:
        console.print(
            Panel(
                Text(view.empty_title, style="bold"),
                subtitle=view.empty_message,
                border_style="dim",
            )
        )
        return

    table = Table(title="History")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Type", style="bold")
    table.add_column("When")
    table.add_column("Duration", justify="right")
    table.add_column("Notes")
    for row in view.rows:
        table.add_row(str(row.position + 1), row.activity_type, row.when, row.duration or "", row.notes or "")
    console.print(table)


@app.command()
def delete(
    ctx: typer.Context,
    positions: list[int] = typer.Argument(..., help="Positions as shown by `history` (1 = newest)"),
) -> None:
    """Delete workouts by their position in the history list."""
    screen = HistoryScreen(ctx.obj.open_store())
    count = len(screen.store.workouts)
    invalid = sorted({p for p in positions if not 1 <= p <= count})
    if invalid:
        console.print(f"[red]Error:[/red] no workout at position(s) {', '.join(map(str, invalid))} (history has {count})")
        raise typer.Exit(1)
    screen.remove(p - 1 for p in positions)
    console.print(f"[green]Deleted[/green] {len(set(positions))} workout(s)")


@app.command()
def habits(ctx: typer.Context) -> None:
    """Show today's habit check-ins."""
    view = HabitsScreen(ctx.obj.open_store()).view()
    table = Table(title=f"Habits - {view.today}")
    table.add_column("Habit", style="bold")
    table.add_column("Today")
    table.add_column("Streak", justify="right")
    for row in view.rows:
        status = "[green]Done[/green]" if row.done else "[dim]-[/dim]"
        table.add_row(row.name, status, f"{row.streak}d")
    console.print(table)


@app.command()
def toggle(
    ctx: typer.Context,
    habit: str = typer.Argument(..., help="Habit name (case-insensitive) or id"),
) -> None:
    """Mark a habit done for today, or unmark it if already done."""
    screen = HabitsScreen(ctx.obj.open_store())
    habit_id = _resolve_habit(screen, habit)
    if habit_id is None:
        names = ", ".join(h.name for h in screen.store.habits)
        console.print(f"[red]Error:[/red] unknown habit '{habit}'. Known habits: {names}")
        raise typer.Exit(1)

    screen.toggle(habit_id)
    row = next(r for r in screen.view().rows if r.habit_id == habit_id)
    state = "[green]done[/green]" if row.done else "not done"
    console.print(f"{row.name}: {state} today")


def _resolve_habit(screen: HabitsScreen, value: str) -> UUID | None:
    try:
        habit_id = UUID(value)
    except ValueError:
        wanted = value.strip().casefold()
        return next((h.id for h in screen.store.habits if h.name.casefold() == wanted), None)
    return habit_id if screen.store.get_habit(habit_id) is not None else None


@app.command()
def stats(ctx: typer.Context) -> None:
    """Show the number of workouts in the last seven days."""
    state: CliState = ctx.obj
    view = StatsScreen(state.open_store(), weekly_goal=state.settings.weekly_goal).view()
    style = "green" if view.goal_met else "yellow"
    console.print(
        Panel(
            Text(view.count_label, style=f"bold {style}", justify="center"),
            title=view.title,
            subtitle=view.goal_label,
            border_style=style,
        )
    )


@app.command()
def ui(
    port: int = typer.Option(8501, "--port", "-p", help="Port for the Streamlit server"),
) -> None:
    """Launch the Streamlit app."""
    logger.info(f"Starting Streamlit UI on port {port}")
    result = subprocess.run(
        [sys.executable, "-m", "streamlit", "run", str(UI_SCRIPT), "--server.port", str(port)],
        check=False,
    )
    raise typer.Exit(result.returncode)


if __name__ == "__main__":
    app()
