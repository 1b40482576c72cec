"""Today's timeline commands for Tarot Timer CLI.

Handles drawing the 24 hourly cards, memos, saving the day to the journal
and the live "current hour" view.
"""

from typing import Optional

import click
from rich.panel import Panel
from rich.table import Table

from tarot_timer.cli._common import console, fail, get_controller, get_language, _get_config
from tarot_timer.errors import TarotTimerError

PHASE_LABELS = {
    "empty": "[dim]Not drawn[/dim]",
    "drawn": "[yellow]Drawn, not saved[/yellow]",
    "saved": "[green]Saved to journal[/green]",
}


def build_timeline_table(
    state,
    catalog,
    language: str = "ko",
    current_hour: Optional[int] = None,
    format_24h: bool = False,
) -> Table:
    """Render a timeline snapshot as a rich table.

    Args:
        state: TimelineState to render.
        catalog: CardCatalog used to resolve card ids.
        language: Display language for card names.
        current_hour: Hour to highlight, if any.
        format_24h: Use 24-hour clock labels.

    Returns:
        Table with one row per hour.
    """
    from tarot_timer.clock import format_hour

    table = Table(
        title=f"Tarot Timeline: {state.date.isoformat()}",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Hour", style="bold", width=9)
    table.add_column("Card")
    table.add_column("Memo", max_width=40)

    for slot in state.slots:
        label = format_hour(slot.hour, format_24h)
        if slot.hour == current_hour:
            label = f"[magenta]▶ {label}[/magenta]"

        if slot.is_drawn:
            card_name = catalog.get_card(slot.card_id).name.resolve(language)
        else:
            card_name = "[dim]-[/dim]"

        table.add_row(label, card_name, slot.memo or "")

    return table


def build_card_panel(card, language: str = "ko", title: Optional[str] = None) -> Panel:
    """Render a single card as a panel."""
    keywords = ", ".join(keyword.resolve(language) for keyword in card.keywords)
    element = f"\n[dim]Element:[/dim] {card.element}" if card.element else ""
    return Panel(
        f"[bold]{card.name.resolve(language)}[/bold]\n\n"
        f"{card.description.resolve(language)}\n\n"
        f"[dim]Keywords:[/dim] {keywords}"
        f"{element}",
        title=title or f"[bold]{card.name.resolve('en')}[/bold]",
        border_style="magenta",
    )


@click.command()
def today() -> None:
    """Show today's 24-hour timeline.
    
    \b
    Examples:
      tarot-timer today
    """
    config = _get_config()

    try:
        controller = get_controller(config)
        state = controller.snapshot()
        table = build_timeline_table(
            state,
            controller.catalog,
            language=get_language(config),
            current_hour=controller.current_hour,
            format_24h=config.get("display", {}).get("format_24h", False),
        )
        console.print(table)

        stats = controller.session_stats()
        console.print(
            f"\n{PHASE_LABELS.get(controller.phase.value, '')}  "
            f"[dim]Drawn: {stats.drawn_cards}/24  "
            f"Memos: {stats.cards_with_memos} ({stats.completion_percentage}%)[/dim]"
        )
    except TarotTimerError as e:
        fail("Failed to show timeline:", e)


@click.command()
def now() -> None:
    """Show the card for the current hour.
    
    \b
    Examples:
      tarot-timer now
    """
    from tarot_timer.clock import (
        day_progress,
        format_hour,
        greeting_for_hour,
        hour_progress,
        hour_theme,
        minutes_until_next_hour,
    )

    config = _get_config()

    try:
        controller = get_controller(config)
        card = controller.get_current_card()
        hour = controller.current_hour
        moment = controller.clock.now()
    except TarotTimerError as e:
        fail("Failed to get current card:", e)
        return

    console.print(f"[bold]{greeting_for_hour(hour)}[/bold] [dim]{hour_theme(hour)}[/dim]")
    console.print(
        f"[dim]Hour progress: {hour_progress(moment):.0%}  "
        f"Day progress: {day_progress(moment)}%[/dim]"
    )

    if card is None:
        console.print(Panel(
            "[dim]No card drawn for this hour yet.[/dim]\n\n"
            "Run [cyan]tarot-timer draw[/cyan] to draw today's cards.",
            title=f"[bold]{format_hour(hour)}[/bold]",
            border_style="dim",
        ))
        return

    console.print(build_card_panel(card, get_language(config), title=f"[bold]{format_hour(hour)}[/bold]"))
    memo = controller.snapshot().slot(hour).memo
    if memo:
        console.print(f"[dim]Memo:[/dim] {memo}")
    console.print(f"[dim]Next card in {minutes_until_next_hour(moment)} minutes[/dim]")


@click.command()
def draw() -> None:
    """Draw cards for all 24 hours of today.
    
    Drawing again on the same day shows the same cards.
    
    \b
    Examples:
      tarot-timer draw
    """
    config = _get_config()

    try:
        controller = get_controller(config)
        state = controller.draw_all()
    except TarotTimerError as e:
        fail("Failed to draw cards:", e)
        return

    console.print(f"[green]✓ Drew 24 cards for {state.date.isoformat()}[/green]")
    card = controller.get_current_card()
    if card is not None:
        console.print(build_card_panel(card, get_language(config), title="[bold]Current hour[/bold]"))


@click.command()
@click.argument("hour", type=click.IntRange(0, 23))
@click.argument("text", required=False)
@click.option("--clear", is_flag=True, help="Remove the memo for this hour.")
@click.option(
    "--saved", is_flag=True,
    help="Also edit today's saved journal entry.",
)
def memo(hour: int, text: Optional[str], clear: bool, saved: bool) -> None:
    """Write a memo for an hour of today's timeline.
    
    HOUR is the clock hour (0-23). TEXT is the memo.
    
    \b
    Examples:
      tarot-timer memo 9 "new job"
      tarot-timer memo 9 --clear
      tarot-timer memo 9 "first day went well" --saved
    """
    if not clear and not (text and text.strip()):
        raise click.UsageError("Provide TEXT or use --clear.")

    value = None if clear else text

    try:
        controller = get_controller()
        if saved:
            controller.update_saved_entry_memo(hour, value)
        else:
            controller.set_memo(hour, value)
    except TarotTimerError as e:
        fail("Failed to update memo:", e)
        return

    action = "Cleared" if value is None else "Saved"
    target = " (journal entry updated)" if saved else ""
    console.print(f"[green]✓ {action} memo for {hour:02d}:00{target}[/green]")


@click.command()
def save() -> None:
    """Save today's timeline to the journal.
    
    Each day can be saved once.
    
    \b
    Examples:
      tarot-timer save
    """
    try:
        controller = get_controller()
        entry = controller.save_today()
    except TarotTimerError as e:
        fail("Failed to save today's diary:", e)
        return

    console.print(Panel(
        f"[bold green]Saved[/bold green]\n\n"
        f"Date:  {entry.date.isoformat()}\n"
        f"Cards: {entry.drawn_count}/24\n"
        f"Memos: {entry.memo_count}",
        title="[bold]Journal[/bold]",
        border_style="green",
    ))


@click.command()
@click.option(
    "--refresh", "-r",
    type=float,
    default=None,
    help="Seconds between clock checks (max 60). Defaults to the config value.",
)
def watch(refresh: Optional[float]) -> None:
    """Follow the current hour's card live.
    
    Press Ctrl+C to stop watching.
    
    \b
    Examples:
      tarot-timer watch
      tarot-timer watch --refresh 5
    """
    import time
    from rich.live import Live
    from tarot_timer.clock import clamp_poll_seconds, day_progress, hour_progress, minutes_until_next_hour

    config = _get_config()
    interval = clamp_poll_seconds(
        refresh if refresh is not None else config.get("clock", {}).get("poll_seconds")
    )

    try:
        controller = get_controller(config)

        def render() -> Table:
            controller.tick()
            moment = controller.clock.now()
            table = build_timeline_table(
                controller.snapshot(),
                controller.catalog,
                language=get_language(config),
                current_hour=moment.hour,
                format_24h=config.get("display", {}).get("format_24h", False),
            )
            table.caption = (
                f"Hour {hour_progress(moment):.0%}  Day {day_progress(moment)}%  "
                f"Next card in {minutes_until_next_hour(moment)} min"
            )
            return table

        console.print(f"[dim]Checking the clock every {interval:g}s (Ctrl+C to stop)...[/dim]\n")

        with Live(render(), refresh_per_second=1, console=console) as live_display:
            while True:
                time.sleep(interval)
                live_display.update(render())

    except KeyboardInterrupt:
        console.print("\n[dim]Stopped watching.[/dim]")
    except TarotTimerError as e:
        fail("Failed to watch timeline:", e)
