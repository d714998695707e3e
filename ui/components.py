"""Reusable UI components: console, menu_navigate(), loading()

This module consolidates the terminal building blocks shared by views:
- console / make_console() - Rich consoles carrying the app theme
- menu_navigate() - Navigation menu with InquirerPy
- loading() - Rich spinner for blocking waits
"""

from contextlib import contextmanager

from InquirerPy import inquirer
from rich.console import Console
from rich.live import Live
from rich.spinner import Spinner
from rich.theme import Theme

# Catppuccin Mocha Theme
CATPPUCCIN_MOCHA = Theme(
    {
        "menu.title": "bold #cba6f7",  # Purple header
        "menu.text": "#cdd6f4",  # Light text
        "menu.highlight": "reverse #cba6f7",  # Inverted purple
        "menu.muted": "#6c7086",  # Muted gray
        "info": "#89dceb",  # Sky blue for info
        "success": "#a6e3a1",  # Green for success
        "warning": "#f9e2af",  # Yellow for warnings
        "error": "#f38ba8",  # Red for errors
    }
)

QUIT_OPTION = "Quit"


def make_console(**kwargs) -> Console:
    """Console with the app theme; kwargs go to rich.console.Console."""
    return Console(theme=CATPPUCCIN_MOCHA, **kwargs)


# Global console with theme
console = make_console()


def menu_navigate(opts: list[str], msg: str = "") -> str | None:
    """Display navigation menu with an automatic "Quit" option.

    Args:
        opts: Menu options (link labels)
        msg: Title message

    Returns:
        Selected option, or None if user quits

    Behavior:
        - Adds "Quit" automatically to the end
        - "Quit" or the Q key returns None
    """
    choices = [*opts, QUIT_OPTION]

    answer = inquirer.select(
        message=msg or "Menu",
        choices=choices,
        default=None,
        qmark="",
        amark="►",
        pointer="►",
        instruction="(Use arrow keys, Q to quit)",
        mandatory=False,
        keybindings={
            "skip": [
                {"key": "q"},
                {"key": "Q"},
            ],
        },
        raise_keyboard_interrupt=False,
    ).execute()

    if answer == QUIT_OPTION or answer is None:
        return None
    return answer


@contextmanager
def loading(msg: str = "Loading...", console_instance: Console | None = None):
    """Context manager for displaying loading indicators during operations.

    Args:
        msg: The message to display alongside the spinner
        console_instance: Console to draw on (defaults to the app console)

    Usage:
        with loading("Fetching schedule..."):
            records = client.fetch_schedules()

    """
    with Live(
        Spinner("dots", text=msg),
        console=console_instance or console,
        refresh_per_second=12.5,
        transient=True,  # Spinner disappears after completion
    ):
        yield
