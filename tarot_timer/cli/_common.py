"""Shared helpers for the Tarot Timer CLI commands."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel

console = Console()


def _get_config() -> dict:
    """Lazily load configuration."""
    from tarot_timer.config import load_config

    return load_config()


def _get_clock(config: dict):
    """Get the wall clock for the configured timezone."""
    from tarot_timer.clock import SystemClock

    return SystemClock(config.get("clock", {}).get("timezone", "Asia/Seoul"))


def _get_store(config: dict):
    """Get the journal store instance."""
    from tarot_timer.config import get_db_path
    from tarot_timer.db.store import JournalStore

    return JournalStore(get_db_path(config))


def get_controller(config: Optional[dict] = None):
    """Build a started timeline controller from configuration."""
    from tarot_timer.controller import TimelineController

    config = config or _get_config()
    controller = TimelineController(_get_store(config), _get_clock(config))
    controller.start()
    return controller


def get_language(config: dict) -> str:
    return config.get("display", {}).get("language", "ko")


def fail(message: str, error: Exception) -> None:
    """Print an error panel and exit with status 1."""
    console.print(Panel(
        f"[red]{message}[/red]\n\n{error}",
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))
    raise SystemExit(1)
