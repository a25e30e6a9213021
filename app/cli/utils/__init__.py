"""CLI utility modules."""

from app.cli.utils.async_runner import run_async
from app.cli.utils.console import console, error_console
from app.cli.utils.progress import create_simple_progress

__all__ = ["run_async", "console", "error_console", "create_simple_progress"]
