"""Rich theme and styled output helpers for the toast CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.theme import Theme

# Windows accent palette
_PALETTE = {
    "accent": "#4cc2ff",
    "text": "#e6e6e6",
    "ok": "#6ccb5f",
    "warn": "#fce100",
    "err": "#ff99a4",
    "dim": "#8a8a8a",
}


def _build_theme() -> Theme:
    return Theme(
        {
            "title": f"bold {_PALETTE['accent']}",
            "label": _PALETTE["dim"],
            "value": _PALETTE["text"],
            "success": f"bold {_PALETTE['ok']}",
            "warning": f"bold {_PALETTE['warn']}",
            "error": f"bold {_PALETTE['err']}",
            "muted": _PALETTE["dim"],
            "info": _PALETTE["accent"],
            "str": _PALETTE["text"],
            "num": _PALETTE["warn"],
            "bool_on": f"bold {_PALETTE['ok']}",
            "bool_off": _PALETTE["dim"],
        }
    )


THEME = _build_theme()
console = Console(theme=THEME)


def print_header(text: str | None) -> None:
    """Print a styled header."""
    if text is not None:
        console.print(f"\n[title]{text}[/title]")


def print_kv(label: str, value: str, label_width: int = 14) -> None:
    """Print a key-value pair with aligned label."""
    console.print(f"  [label]{label:<{label_width}}[/label] [value]{value}[/value]")


def fmt(value: str | int | float | bool) -> str:
    """Format a value with type-appropriate styling.

    Bools render as ON/OFF, numbers in the num style, everything else as a
    plain string.
    """
    if isinstance(value, bool):
        if value:
            return "[bool_on]ON[/bool_on]"
        return "[bool_off]OFF[/bool_off]"

    if isinstance(value, (int, float)):
        return f"[num]{value}[/num]"

    return f"[str]{value}[/str]"


def print_success(text: str) -> None:
    console.print(f"[success]✓[/success] {text}")


def print_error(text: str) -> None:
    console.print(f"[error]✗[/error] {text}")


def print_warning(text: str) -> None:
    console.print(f"[warning]![/warning] {text}")


def print_info(text: str) -> None:
    console.print(f"[info]∟[/info] {text}")


def create_table(*columns: str, title: str | None = None) -> Table:
    """Create a styled table with consistent formatting."""
    table = Table(
        title=title,
        title_style="title",
        header_style="label",
        border_style="muted",
        show_header=True,
        show_edge=True,
        pad_edge=True,
    )
    for col in columns:
        table.add_column(col)
    return table


def setup_logging(level: int = logging.WARNING) -> None:
    """Route toastwrap log records through the themed console."""
    handler = RichHandler(console=console, show_path=False, markup=False)
    logger = logging.getLogger("toastwrap")
    logger.handlers[:] = [handler]
    logger.setLevel(level)
