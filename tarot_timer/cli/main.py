"""Main CLI entry point for Tarot Timer.

This module provides the main click group and lazy loading
for command modules to keep startup fast.
"""

import logging

import click


class LazyGroup(click.Group):
    """A click Group that lazily loads commands.
    
    Command modules are only imported when they are actually invoked.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        """Initialize the lazy group.
        
        Args:
            lazy_subcommands: Mapping of command names to module paths.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, lazily loading if needed."""
        if cmd_name in self.commands:
            return self.commands[cmd_name]
        
        if cmd_name in self._lazy_subcommands:
            return self._lazy_load(cmd_name)
        
        return None

    def _lazy_load(self, cmd_name: str) -> click.Command:
        """Lazily load a command from its module path."""
        import importlib
        
        module_path = self._lazy_subcommands[cmd_name]
        module = importlib.import_module(module_path)
        
        attr = getattr(module, cmd_name, None)
        if not isinstance(attr, click.Command):
            raise click.ClickException(f"Could not find command '{cmd_name}' in {module_path}")
        
        self.add_command(attr)
        return attr


LAZY_SUBCOMMANDS = {
    "init": "tarot_timer.cli.settings",
    # Today's timeline
    "today": "tarot_timer.cli.timeline",
    "now": "tarot_timer.cli.timeline",
    "draw": "tarot_timer.cli.timeline",
    "memo": "tarot_timer.cli.timeline",
    "save": "tarot_timer.cli.timeline",
    "watch": "tarot_timer.cli.timeline",
    # Journal
    "journal": "tarot_timer.cli.journal",
    # Catalog
    "cards": "tarot_timer.cli.cards",
    "card": "tarot_timer.cli.cards",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def configure_logging(verbose: bool) -> None:
    """Send log records through rich when --verbose is given."""
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="tarot-timer")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Tarot Timer - a tarot card for every hour of the day.
    
    Draw 24 cards for today, write a memo for any hour,
    and keep finished days in your journal.
    
    \b
    Quick Start:
      tarot-timer draw          # Draw today's 24 cards
      tarot-timer now           # Card for the current hour
      tarot-timer memo 9 "..."  # Memo for 09:00
      tarot-timer save          # Save today to the journal
    """
    ctx.ensure_object(dict)
    configure_logging(verbose)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
