"""Main entry point for Imposter."""

import random
import sys
from typing import Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, IntPrompt, Prompt
from rich.table import Table

from .communication.markdown_logger import MarkdownLogger
from .config import GameConfig, load_config, resolve_config_path
from .dataset import CategoryMap, default_category, load_category_map
from .engine import ConfigurationError, GameError, GamePhase, Session
from .engine.roles import MAX_PLAYERS, MIN_PLAYERS, clamp_player_count


# Load environment variables
load_dotenv()

console = Console()


def display_welcome():
    """Display welcome message."""
    console.print(Panel.fit(
        "[bold blue]IMPOSTER[/bold blue]\n"
        "[dim]Identify the liar[/dim]",
        border_style="blue",
    ))
    console.print()


def choose_category(category_map: CategoryMap, preferred: Optional[str]) -> str:
    """Show the categories and let the table pick one."""
    names = list(category_map)
    current = preferred if preferred in category_map else default_category(category_map)

    table = Table(title="Categories", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Category", style="cyan")
    table.add_column("Words", style="green", justify="right")
    for i, name in enumerate(names, start=1):
        marker = " [bold blue]*[/bold blue]" if name == current else ""
        table.add_row(str(i), f"{name}{marker}", str(len(category_map[name])))
    console.print(table)

    choice = Prompt.ask(
        "Select category",
        choices=[str(i) for i in range(1, len(names) + 1)],
        default=str(names.index(current) + 1),
        show_choices=False,
        console=console,
    )
    return names[int(choice) - 1]


def choose_player_count(default: int) -> int:
    """Ask for the player count, clamped to the playable range."""
    requested = IntPrompt.ask(
        f"Player count ({MIN_PLAYERS}-{MAX_PLAYERS})",
        default=default,
        console=console,
    )
    player_count = clamp_player_count(requested)
    if player_count != requested:
        console.print(f"[yellow]Using {player_count} players.[/yellow]")
    return player_count


def display_role_card(session: Session):
    """Show the current player their secret identity."""
    role = session.role_for_current_player()
    if role.team == "imposter":
        body = f"[bold red]{session.current_role}[/bold red]\n\n[red]{role.description}[/red]"
        style = "red"
    else:
        body = f"[bold green]{session.current_role}[/bold green]"
        style = "green"

    console.print(Panel(
        body,
        title="Secret Identity",
        border_style=style,
        padding=(1, 4),
    ))


def run_pass_and_reveal(session: Session):
    """Hand the device round until every player has seen their role."""
    while session.phase == GamePhase.PASS_AND_REVEAL:
        console.clear()
        console.print(
            f"[dim]{session.current_player_number} / {session.player_count}[/dim]  "
            f"[bold]Player {session.current_player_number}[/bold]"
        )
        console.print()
        console.print(
            f"Pass the device to [bold]Player {session.current_player_number}[/bold]"
        )
        console.input("[dim]Press Enter to reveal your role...[/dim]")

        session.reveal_to_current_player()
        display_role_card(session)

        label = "Start The Game" if session.is_last_player else "Hide & Pass Device"
        console.input(f"[bold]{label}[/bold] [dim](press Enter)[/dim]")
        session.advance_player()

    console.clear()


def run_discussion(session: Session) -> bool:
    """Wait for the table to finish discussing.

    Returns:
        True if the word was revealed, False if the game was aborted.
    """
    console.print(Panel(
        "[bold]Who is the Imposter?[/bold]\n\n"
        "Discuss, ask subtle questions, and vote.\n"
        "[blue]Civilians[/blue] know the word.\n"
        "[red]The Imposter[/red] is lying.",
        border_style="yellow",
    ))
    action = Prompt.ask(
        "Reveal the word or abort the game",
        choices=["reveal", "abort"],
        default="reveal",
        console=console,
    )
    if action == "abort":
        session.reset()
        return False

    session.reveal()
    return True


def display_final_reveal(session: Session):
    """Display the category and secret word."""
    table = Table(title="Mission Report", show_header=False, box=None)
    table.add_column("Field", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("The Category", session.category)
    table.add_row("The Secret Word", f"[bold magenta]{session.secret_word}[/bold magenta]")
    table.add_row("The Imposter", f"[red]Player {session.imposter_index + 1}[/red]")

    console.print()
    console.print(table)
    console.print()


def play(config: GameConfig, category_map: CategoryMap):
    """Run games until the players stop."""
    rng = random.Random(config.game.seed)
    logger = MarkdownLogger(base_dir=config.logging.dir) if config.logging.dir else None

    category = config.game.default_category
    player_count = config.game.player_count

    while True:
        category = choose_category(category_map, category)
        player_count = choose_player_count(player_count)

        # A fresh session per game; the rng carries over so deals differ
        session = Session(category_map, rng=rng, logger=logger)
        try:
            session.check_start(category, player_count)
        except ConfigurationError as e:
            console.print(f"[red]{e}[/red]")
            continue
        session.start_game(category, player_count)

        run_pass_and_reveal(session)
        revealed = run_discussion(session)
        if revealed:
            display_final_reveal(session)
            session.reset()
        else:
            console.print("[yellow]Game aborted.[/yellow]")

        if session.log_error:
            console.print(f"[yellow]Game log is incomplete: {escape(str(session.log_error))}[/yellow]")

        if revealed and not Confirm.ask("Play again?", default=True, console=console):
            break

    if logger and logger.game_dir:
        console.print(f"[dim]Game logs saved to: {logger.base_dir}[/dim]")


def main():
    """Main entry point."""
    display_welcome()

    config_path = resolve_config_path(sys.argv)
    console.print(f"[dim]Loading config from: {config_path}[/dim]")
    try:
        config = load_config(config_path)
        category_map = load_category_map(config.dataset.path, config.dataset.delimiter)
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    if not category_map:
        console.print(f"[red]Error: no categories found in {config.dataset.path}[/red]")
        sys.exit(1)

    try:
        play(config, category_map)
    except KeyboardInterrupt:
        console.print("\n[yellow]Game interrupted by user.[/yellow]")
        sys.exit(0)
    except GameError as e:
        console.print(f"\n[red]Error during game: {e}[/red]")
        raise


def run():
    """Entry point for the CLI."""
    main()


if __name__ == "__main__":
    run()
