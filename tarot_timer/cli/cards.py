"""Card catalog commands for Tarot Timer CLI."""

from typing import Optional

import click
from rich.table import Table

from tarot_timer.cli._common import console, fail, get_language, _get_config
from tarot_timer.errors import CardNotFoundError
from tarot_timer.models import SUITS


@click.command()
@click.option(
    "--suit",
    type=click.Choice(SUITS),
    default=None,
    help="Only show cards of one suit.",
)
def cards(suit: Optional[str]) -> None:
    """List the 78 cards of the deck.
    
    \b
    Examples:
      tarot-timer cards
      tarot-timer cards --suit cups
    """
    from tarot_timer.catalog import get_catalog

    catalog = get_catalog()
    language = get_language(_get_config())
    selected = catalog.cards_by_suit(suit) if suit else catalog.all_cards()

    table = Table(
        title=f"Cards: {suit}" if suit else "Cards",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Element", style="dim")

    for card in selected:
        table.add_row(str(card.number), card.id, card.name.resolve(language), card.element or "-")

    console.print(table)
    console.print(f"\n[dim]Total: {len(selected)} cards[/dim]")


@click.command()
@click.argument("card_id")
def card(card_id: str) -> None:
    """Show one card.
    
    CARD_ID is a card identifier such as 'the-fool' or 'ace-of-cups'.
    """
    from tarot_timer.catalog import get_catalog
    from tarot_timer.cli.timeline import build_card_panel

    catalog = get_catalog()
    try:
        found = catalog.get_card(card_id.lower())
    except CardNotFoundError as e:
        fail("Unknown card:", e)
        return

    console.print(build_card_panel(found, get_language(_get_config())))
    console.print(f"[dim]Card {catalog.index_of(found.id) + 1} of {len(catalog)}[/dim]")
