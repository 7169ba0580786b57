from rich.console import Console
from rich.table import Table
from rich.logging import RichHandler
from typing import Any
import logging
import os

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# Singleton Console instance
def get_console() -> Console:
    if not hasattr(get_console, "_console"):
        get_console._console = Console()
    return get_console._console


def resolve_log_level(value: str | None) -> str:
    """Normalize a log level name, falling back to INFO for unknown values."""
    level = (value or "INFO").upper()
    if level not in LOG_LEVELS:
        get_console().print(f"Invalid log level: {level}. Using INFO.", style="bold yellow")
        return "INFO"
    return level


def is_truthy(value: str | None) -> bool:
    return (value or "").lower() in ["true", "1", "yes"]


def print_table(headers: list[str], rows: list[list[Any]], title: str | None = None):
    """Print a formatted table using Rich library.

    Args:
        headers (list[str]): Column headers for the table.
        rows (list[list[Any]]): Data rows to display in the table.
        title (str | None, optional): Title of the table. Defaults to None.
    """
    console = get_console()
    table = Table(title=title)
    for header in headers:
        table.add_column(header, overflow="fold")
    for row in rows:
        table.add_row(*[str(cell) for cell in row])
    console.print(table)


class RichConsoleLogger(logging.Logger):
    """Logger that renders through rich and optionally mirrors to a log file.

    Environment variables:
        BUMPMONITORING_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR or CRITICAL
        BUMPMONITORING_DEBUG: Also log to a file (true, 1, yes)
        BUMPMONITORING_LOG_FILE: Log file path (default: bumpmonitoring.log)
    """

    def __init__(self, name: str):
        super().__init__(name)

        self.log_level_str = resolve_log_level(os.getenv("BUMPMONITORING_LOG_LEVEL"))
        self.log_level = logging.getLevelName(self.log_level_str)
        self.setLevel(self.log_level)

        handler = RichHandler(rich_tracebacks=True, level=self.log_level)
        self.addHandler(handler)

        if is_truthy(os.getenv("BUMPMONITORING_DEBUG")):
            log_file = os.getenv("BUMPMONITORING_LOG_FILE", "bumpmonitoring.log")
            try:
                file_handler = logging.FileHandler(log_file)
            except OSError as e:
                self.error(f"Failed to set up file logging: {e}")
            else:
                file_handler.setLevel(self.log_level)
                file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
                self.addHandler(file_handler)

    def success(self, message: str, *args, **kwargs):
        """Log a success message at INFO level with a check mark.

        Args:
            message (str): Success message to display.
        """
        if args:
            message = message % args
        super().info(f"✔ {message}", **kwargs)


# Singleton logger instance
_console_logger = None

def get_console_logger() -> RichConsoleLogger:
    """Get the singleton RichConsoleLogger configured from environment variables.

    Returns:
        RichConsoleLogger: Configured logger instance
    """
    global _console_logger
    if _console_logger is None:
        _console_logger = RichConsoleLogger("bumpmonitoring")
    return _console_logger
