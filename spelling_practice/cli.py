"""Command-line interface for weekly spelling practice."""

from pathlib import Path

import click
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from spelling_practice import __version__, configure_logging, install_exception_hook
from spelling_practice.config import Settings, get_settings
from spelling_practice.session import Notice, PracticeSession
from spelling_practice.storage import SlotStorage
from spelling_practice.word_list import read_word_file
from spelling_practice.word_store import WordStore

console = Console()

NO_WEEKS_MESSAGE = "No words added yet. Start by adding some words!"


def configure_verbose_logging() -> None:
    """Send debug logging to the console."""
    logger.add(
        lambda msg: console.print(msg, end="", markup=False, highlight=False),
        level="DEBUG",
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {message}",
    )
    console.print("[dim]Debug logging enabled[/dim]")


def configure_quiet_logging() -> None:
    """Only show warnings and errors on the console."""
    logger.add(
        lambda msg: console.print(msg, end="", markup=False, highlight=False),
        level="WARNING",
        format="<level>{level}</level>: {message}",
    )


def load_settings_or_abort() -> Settings:
    """Load settings from the environment or abort with a helpful error message."""
    try:
        return get_settings()
    except ValidationError as e:
        console.print("[bold red]Error:[/bold red] Invalid configuration")
        console.print("\nCheck the SPELLING_* variables in your environment or .env file.")
        console.print(f"Details: {e}", markup=False)
        raise click.Abort from e


def print_notice(notice: Notice) -> None:
    """Render a notice on the console."""
    if notice.is_error:
        console.print(f"[bold red]Error:[/bold red] {notice.title} {notice.message}")
    else:
        console.print(f"[bold green]✓ {notice.title}[/bold green] {notice.message}")


def read_stdin_words() -> str:
    """Read words piped on stdin, or return an empty string for a terminal."""
    stdin = click.get_text_stream("stdin")
    if stdin.isatty():
        return ""
    return stdin.read()


def open_session(ctx: click.Context) -> PracticeSession:
    """Load settings, configure logging and load the saved words for a command.

    Runs once per invocation, after the subcommand's arguments are parsed,
    so ``--help`` never touches configuration or the data directory.
    """
    options = ctx.ensure_object(dict)
    if "session" in options:
        return options["session"]

    settings = load_settings_or_abort()

    configure_logging(log_file=settings.log_file, level=settings.log_level, console=False)
    if options.get("verbose"):
        configure_verbose_logging()
    else:
        configure_quiet_logging()
    install_exception_hook()

    storage = SlotStorage(options.get("data_dir") or settings.data_dir)
    logger.debug(f"Using data directory {storage.data_dir}")

    store = WordStore.load(storage, settings.store_slot)
    options["session"] = PracticeSession(store, test_size=settings.test_size)
    return options["session"]


@click.group()
@click.option(
    "--data-dir",
    "data_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding saved words (default: from SPELLING_DATA_DIR)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.version_option(__version__, prog_name="spelling-practice")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, verbose: bool) -> None:
    """Track weekly spelling words and practice with random tests."""
    ctx.obj = {"data_dir": data_dir, "verbose": verbose}


@cli.command()
@click.option(
    "--week",
    "-w",
    "week_text",
    default=None,
    help="Week number the words belong to",
)
@click.option(
    "--file",
    "-f",
    "words_file",
    type=click.Path(path_type=Path),
    default=None,
    help="Read words from a file (one word per line)",
)
@click.argument("words", nargs=-1)
@click.pass_context
def add(
    ctx: click.Context, week_text: str | None, words_file: Path | None, words: tuple[str, ...]
) -> None:
    """Add spelling words to a week.

    Words are taken from the arguments, from --file, or from stdin, one
    word per line.
    """
    session = open_session(ctx)

    if words:
        raw_text = "\n".join(words)
    elif words_file is not None:
        try:
            raw_text = read_word_file(words_file)
        except (FileNotFoundError, ValueError) as e:
            console.print(f"[bold red]Error:[/bold red] Failed to load word list: {escape(str(e))}")
            ctx.exit(1)
    else:
        raw_text = read_stdin_words()

    notice = session.add_words(week_text, raw_text)
    print_notice(notice)
    if notice.is_error:
        ctx.exit(1)


@cli.command(context_settings={"ignore_unknown_options": True})
@click.argument("week", type=int, required=False)
@click.pass_context
def view(ctx: click.Context, week: int | None) -> None:
    """List the weeks, or show the words of WEEK.

    WEEK may be zero or negative, for example: view -2
    """
    session = open_session(ctx)
    if week is None:
        weeks = session.weeks()
        if not weeks:
            console.print(f"[dim]{NO_WEEKS_MESSAGE}[/dim]")
            return

        console.print("[bold]Weeks:[/bold] " + "  ".join(f"Week {w}" for w in weeks))
        console.print("[dim]Run 'view WEEK' to see the words of a week.[/dim]")
        return

    words = session.select_week(week)
    console.print(f"[bold]Week {week} Words[/bold]")
    if not words:
        console.print(f"[dim]No words for week {week}.[/dim]")
        return

    table = Table(show_header=False, box=None, padding=(0, 4, 0, 0))
    table.add_column()
    table.add_column()
    for i in range(0, len(words), 2):
        table.add_row(*(Text(word) for word in words[i : i + 2]))
    console.print(table)


@cli.command("test")
@click.option(
    "--count",
    "-n",
    type=click.IntRange(min=1),
    default=None,
    help="Number of words in the test (default: from SPELLING_TEST_SIZE)",
)
@click.pass_context
def practice_test(ctx: click.Context, count: int | None) -> None:
    """Generate a random practice test from all weeks."""
    session = open_session(ctx)
    if count is not None:
        session.test_size = count

    notice = session.generate_test()
    print_notice(notice)
    if notice.is_error:
        ctx.exit(1)

    console.print("\n[bold]Your Test Words[/bold]")
    for idx, word in enumerate(session.test_words, start=1):
        console.print(f"{idx}. {word}", markup=False, highlight=False)


if __name__ == "__main__":
    cli()
