"""Settings command for Tarot Timer CLI."""

import click

from tarot_timer.cli._common import console


@click.command()
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
def init(force: bool) -> None:
    """Create a template config file.
    
    \b
    Examples:
      tarot-timer init
    """
    from tarot_timer.config import create_template_config, get_config_path

    config_path = get_config_path()
    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        return

    path = create_template_config(config_path)
    console.print(f"[green]✓ Created config at {path}[/green]")
