from rich.console import Console
from rich.logging import RichHandler
import logging

_console = Console()
_configured = False

def get_logger(name: str = "genesynth"):
    global _configured
    if not _configured:
        logging.basicConfig(
            level=logging.INFO,
            format="%(message)s",
            datefmt="[%X]",
            handlers=[RichHandler(console=_console, markup=True, rich_tracebacks=True, show_path=False)],
        )
        _configured = True
    return logging.getLogger(name)

def set_verbosity(verbose: bool) -> None:
    """Toggle DEBUG output for every genesynth.* logger."""
    get_logger().setLevel(logging.DEBUG if verbose else logging.INFO)

def console():
    return _console
