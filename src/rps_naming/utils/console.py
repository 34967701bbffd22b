"""Rich console output helpers for the rps-name CLI."""

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

console = Console()
error_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message to stderr.

    The message is printed literally; brackets are not treated as markup.
    """
    error_console.print(f"[bold red]✗[/bold red] {escape(message)}")


def print_panel(content: str, title: str | None = None, style: str = "cyan") -> None:
    """Print content inside a bordered panel.

    Args:
        content: Rich markup to render inside the panel
        title: Optional panel title
        style: Border style
    """
    console.print(Panel(content, title=title, border_style=style))
