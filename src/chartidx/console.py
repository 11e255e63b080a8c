"""Rich console output utilities for the chartidx CLI."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.syntax import Syntax
from rich.theme import Theme

CHARTIDX_THEME = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "bold red",
        "heading": "bold magenta",
        "muted": "dim",
        "chart": "bold blue",
        "version": "cyan",
        "path": "dim cyan",
        "command": "bold yellow",
    }
)


console = Console(theme=CHARTIDX_THEME)
err_console = Console(theme=CHARTIDX_THEME, stderr=True)


def print_success(message: str, prefix: str = "✓") -> None:
    """Print a success message."""
    console.print(f"[success]{prefix}[/success] {message}", soft_wrap=True)


def print_error(message: str, prefix: str = "✗") -> None:
    """Print an error message to stderr."""
    err_console.print(f"[error]{prefix}[/error] {message}", highlight=False, soft_wrap=True)


def print_warning(message: str, prefix: str = "⚠") -> None:
    console.print(f"[warning]{prefix}[/warning] {message}", soft_wrap=True)


def print_info(message: str, prefix: str = "•") -> None:
    console.print(f"[info]{prefix}[/info] {message}", soft_wrap=True)


def print_step(message: str) -> None:
    """Print a step in a process."""
    console.print(f"[muted]→[/muted] {message}", soft_wrap=True)


def print_header(title: str) -> None:
    """Print a section header."""
    console.print(f"\n[heading]{title}[/heading]")
    console.print(f"[muted]{'─' * len(title)}[/muted]")


def print_key_value(key: str, value: str, indent: int = 0) -> None:
    spaces = "  " * indent
    console.print(f"{spaces}[muted]{key}:[/muted] {value}")


def print_hint(message: str) -> None:
    console.print(f"  [muted]Hint:[/muted] [dim]{message}[/dim]")


def format_chart(name: str) -> str:
    return f"[chart]{escape(name)}[/chart]"


def format_version(version: str) -> str:
    return f"[version]{escape(version)}[/version]"


def format_path(path: str) -> str:
    return f"[path]{escape(path)}[/path]"


def format_command(cmd: str) -> str:
    return f"[command]{cmd}[/command]"


def print_yaml(content: str) -> None:
    """Print YAML content with syntax highlighting."""
    console.print(Syntax(content, "yaml", theme="monokai", line_numbers=False))


def print_plain(content: str) -> None:
    """Print text verbatim, without markup or highlighting."""
    console.print(
        content, end="", markup=False, highlight=False, emoji=False, soft_wrap=True
    )
