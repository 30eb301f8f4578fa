"""Terminal rendering and console collaborators for the vocalnav CLI.

Render functions are pure: they take a SessionTurn and return Rich
renderables. The console collaborators print what a mobile shell would
do (open a screen, speak, vibrate).
"""

from __future__ import annotations

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from vocalnav.apps.session import SessionTurn
from vocalnav.core.types import (
    Action,
    Navigate,
    NavigateBack,
    PersistPreference,
    Route,
    SetMode,
    Unhandled,
)


def describe_action(action: Action) -> str:
    """One-line description of an action."""
    match action:
        case Navigate(target=route):
            return f"Navigate({route})"
        case NavigateBack():
            return "NavigateBack()"
        case SetMode(active=active):
            return f"SetMode({str(active).lower()})"
        case PersistPreference(key=key, value=value, changed=changed):
            suffix = "" if changed else ", unchanged"
            return f"PersistPreference({key}={value}{suffix})"
        case Unhandled(reason=reason):
            return f"Unhandled({reason})"
    return repr(action)


def render_turn(turn: SessionTurn) -> Panel:
    """Render one handled utterance."""
    grid = Table.grid(padding=(0, 1))
    grid.add_column(justify="right", style="cyan")
    grid.add_column()
    if turn.result is not None:
        grid.add_row("Intent", str(turn.result.intent))
        grid.add_row("Confidence", f"{turn.result.confidence:.2f}")
        grid.add_row("Source", turn.result.source)
        slots = turn.result.slots.as_dict()
        if slots:
            grid.add_row("Slots", ", ".join(f"{k}={v}" for k, v in slots.items()))
    action_style = "red" if isinstance(turn.action, Unhandled) else "green"
    grid.add_row("Action", Text(describe_action(turn.action), style=action_style))
    grid.add_row("Via", turn.via)
    grid.add_row("Voice nav", "active" if turn.voice_nav_active else "idle")
    if turn.message:
        grid.add_row("Says", Text(turn.message, style="italic"))
    return Panel(grid, title=Text(turn.text or "(empty)", style="bold"), padding=(0, 1))


class ConsoleNavigator:
    """Prints navigation requests."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def open(self, route: Route) -> None:
        self.console.print(f"[dim]→ open /{route}[/dim]")

    def back(self) -> None:
        self.console.print("[dim]← back[/dim]")


class ConsoleAnnouncer:
    """Prints what would be spoken, and haptic pulses."""

    def __init__(self, console: Console) -> None:
        self.console = console

    def say(self, message: str, *, language: str, rate: float) -> None:
        self.console.print(f"[dim]speak ({language}, x{rate:g}):[/dim] {message}")

    def haptic(self) -> None:
        self.console.print("[dim]~ vibrate ~[/dim]")
