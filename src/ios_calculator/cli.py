"""
ios-calculator CLI - a terminal keypad.

Run `ios-calculator 1 + 2 = ` to press buttons and print the display, or
`ios-calculator` alone for an interactive prompt.
"""

from __future__ import annotations

import logging
import os

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.text import Text

from ios_calculator import __version__
from ios_calculator.keypad import Keypad
from ios_calculator.number import SIGNIFICANT_FIGURES
from ios_calculator.validators import MAX_SIGNIFICANT_FIGURES, MIN_SIGNIFICANT_FIGURES

LOG_LEVEL_ENV = "IOS_CALCULATOR_LOG_LEVEL"
QUIT_WORDS = frozenset({"q", "quit", "exit"})

console = Console()


def setup_logging(verbose: bool = False) -> None:
    """Route package logging through rich; level from --verbose or the environment."""
    level_name = "DEBUG" if verbose else os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def render(keypad: Keypad) -> Text:
    """Display line: the number, then the clear label and highlighted operator."""
    line = Text(keypad.output, style="bold")
    line.append("    ")
    line.append("AC" if keypad.show_all_clear else "C", style="dim")
    if keypad.active_operator is not None:
        line.append(f"  [{keypad.active_operator}]", style="bold yellow")
    return line


def interactive(keypad: Keypad) -> None:
    console.print("[dim]Buttons: 0-9 . + - * / = % ± c  (q to quit)[/dim]")
    console.print(render(keypad))
    while True:
        try:
            line = console.input("> ")
        except (EOFError, KeyboardInterrupt):
            console.print()
            return
        if line.strip().lower() in QUIT_WORDS:
            return
        for button in line.split():
            if not keypad.press(button):
                console.print(f"[red]Unknown button:[/red] {escape(button)}")
        console.print(render(keypad))


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("buttons", nargs=-1)
@click.option(
    "--significant-figures",
    "-s",
    type=click.IntRange(MIN_SIGNIFICANT_FIGURES, MAX_SIGNIFICANT_FIGURES),
    default=SIGNIFICANT_FIGURES,
    show_default=True,
    help="Digits kept on entry and display.",
)
@click.option("--verbose", "-v", is_flag=True, help="Log every button press.")
@click.version_option(__version__, prog_name="ios-calculator")
def main(buttons: tuple[str, ...], significant_figures: int, verbose: bool) -> None:
    """Press BUTTONS on a calculator and print the display."""
    setup_logging(verbose)
    keypad = Keypad(significant_figures)

    if not buttons:
        interactive(keypad)
        return

    for button in buttons:
        if not keypad.press(button):
            raise click.BadParameter(f"unknown button {button!r}", param_hint="BUTTONS")
    click.echo(keypad.output)


if __name__ == "__main__":
    main()
