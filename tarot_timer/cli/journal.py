"""Journal commands for Tarot Timer CLI.

Handles listing, viewing and deleting saved days, and browsing saved memos.
"""

import click
from rich.panel import Panel
from rich.table import Table

from tarot_timer.cli._common import console, fail, get_controller, get_language, _get_config, _get_store
from tarot_timer.errors import TarotTimerError


def summarize_entry(entry, catalog, language: str = "ko", width: int = 30) -> str:
    """One-line summary of an entry's memos, or its first cards when it has none."""
    memos = [f"{slot.hour:02d}h {slot.memo}" for slot in entry.slots if slot.memo]
    if memos:
        text = " / ".join(memos)
    else:
        names = [
            catalog.get_card(slot.card_id).name.resolve(language)
            for slot in entry.slots
            if slot.is_drawn
        ]
        text = ", ".join(names[:3])
    return (text[: width - 3] + "...") if len(text) > width else text


@click.group()
def journal() -> None:
    """Browse saved days.
    
    \b
    Examples:
      tarot-timer journal list
      tarot-timer journal show 2025-01-15
      tarot-timer journal memos 2025-01-01 2025-01-31
      tarot-timer journal delete <ID>
    """
    pass


@journal.command("list")
def list_entries() -> None:
    """List saved days, newest first."""
    config = _get_config()

    try:
        controller = get_controller(config)
        entries = controller.list_entries()
    except TarotTimerError as e:
        fail("Failed to list journal:", e)
        return

    if not entries:
        console.print(Panel(
            "[dim]No journal entries found. Use 'tarot-timer save' to save a day.[/dim]",
            title="[bold]Journal[/bold]",
            border_style="dim",
        ))
        return

    table = Table(
        title="Journal",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Date", style="bold")
    table.add_column("ID", style="dim")
    table.add_column("Cards", justify="right")
    table.add_column("Memos", justify="right")
    table.add_column("Summary", max_width=30)

    language = get_language(config)
    for entry in entries:
        table.add_row(
            entry.date.isoformat(),
            entry.id,
            str(entry.drawn_count),
            str(entry.memo_count),
            summarize_entry(entry, controller.catalog, language),
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(entries)} entries[/dim]")


@journal.command("show")
@click.argument("entry_date")
def show_entry(entry_date: str) -> None:
    """Show the saved timeline for a date.
    
    ENTRY_DATE is an ISO date (YYYY-MM-DD).
    """
    from tarot_timer.catalog import get_catalog
    from tarot_timer.cli.timeline import build_timeline_table

    config = _get_config()

    try:
        entry = _get_store(config).get_entry_by_date(entry_date)
    except TarotTimerError as e:
        fail("Failed to load journal entry:", e)
        return

    if entry is None:
        console.print(f"[yellow]No journal entry saved for {entry_date}[/yellow]")
        raise SystemExit(1)

    console.print(build_timeline_table(
        entry.to_timeline(),
        get_catalog(),
        language=get_language(config),
        format_24h=config.get("display", {}).get("format_24h", False),
    ))
    console.print(f"\n[dim]Saved at {entry.created_at:%Y-%m-%d %H:%M}  ID: {entry.id}[/dim]")


@journal.command("memos")
@click.argument("start_date")
@click.argument("end_date", required=False)
def list_memos(start_date: str, end_date: str | None) -> None:
    """List memos saved between two dates.
    
    START_DATE and END_DATE are ISO dates (YYYY-MM-DD). END_DATE
    defaults to START_DATE.
    """
    config = _get_config()

    try:
        controller = get_controller(config)
        records = controller.list_memos(start_date, end_date)
    except TarotTimerError as e:
        fail("Failed to list memos:", e)
        return

    if not records:
        console.print("[yellow]No memos saved in this range[/yellow]")
        return

    table = Table(
        title="Memos",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Date", style="bold")
    table.add_column("Hour", justify="right")
    table.add_column("Card")
    table.add_column("Memo", max_width=40)

    language = get_language(config)
    for record in records:
        table.add_row(
            record.date.isoformat(),
            f"{record.hour:02d}:00",
            controller.catalog.get_card(record.card_id).name.resolve(language),
            record.memo,
        )

    console.print(table)
    console.print(f"\n[dim]Total: {len(records)} memos[/dim]")


@journal.command("delete")
@click.argument("entry_id")
@click.option("--yes", "-y", is_flag=True, help="Delete without asking.")
def delete_entry(entry_id: str, yes: bool) -> None:
    """Permanently delete a saved day.
    
    ENTRY_ID is the ID shown by 'tarot-timer journal list'.
    """
    if not yes:
        click.confirm(f"Delete journal entry {entry_id}? This cannot be undone", abort=True)

    try:
        controller = get_controller()
        controller.delete_entry(entry_id)
    except TarotTimerError as e:
        fail("Failed to delete journal entry:", e)
        return

    console.print(f"[green]✓ Deleted journal entry {entry_id}[/green]")
