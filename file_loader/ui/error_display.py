"""Clean error display for resolution failures."""

import sys

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from ..errors import FileReadError
from ..errors import NotFoundError
from ..errors import OpenFailureError
from ..errors import ResolutionError
from ..errors import TransportError


def display_resolution_error(console: Console, error: Exception, verbose: bool = False) -> bool:
    """Display a ResolutionError with clean Rich formatting.

    Args:
        console: Rich console for output.
        error: The error to display.
        verbose: If True, also print traceback.

    Returns:
        True if error was handled as a ResolutionError, False if not (caller should handle).
    """
    if not isinstance(error, ResolutionError):
        return False

    if isinstance(error, TransportError):
        title = "Remote Fetch Failed"
    elif isinstance(error, OpenFailureError):
        title = "Project File Not Opened"
    elif isinstance(error, NotFoundError):
        title = "File Not Found"
    elif isinstance(error, FileReadError):
        title = "File Not Readable"
    else:
        title = "File Not Loaded"

    content = Text()
    content.append(error.file_name, style="bold cyan")
    content.append("\n\n")
    content.append(str(error), style="white")

    if error.cause is not None:
        content.append("\n\n")
        content.append("── Cause ──", style="dim")
        content.append("\n")
        content.append(f"{type(error.cause).__name__}: {error.cause}", style="dim")

    console.print()
    console.print(
        Panel(
            content,
            title=f"[bold red]{title}[/bold red]",
            border_style="red",
            padding=(1, 2),
        )
    )
    console.print(f"[dim]Tip: {_get_resolution_tip(error)}[/dim]")
    console.print()

    if verbose and sys.exc_info()[0] is not None:
        console.print("[dim]——— Traceback ———[/dim]")
        console.print_exception()

    return True


def _get_resolution_tip(error: ResolutionError) -> str:
    """Return an actionable tip based on the error type."""
    if isinstance(error, TransportError):
        return "Check the URL and your network connection."
    if isinstance(error, OpenFailureError):
        return "The name was not found next to the root file or in the project. Check --root and --project."
    if isinstance(error, FileReadError):
        return "The file exists but could not be read as UTF-8 text. Check its permissions and encoding."
    return "Check the file name and the root file's directory."
