# This file is part of the search-mcp project for logging and console management.
# Author: shiboli
# date: 2026-10-17
# Version: 0.1.0

import logging
from rich.logging import RichHandler
from rich.console import Console
from rich.panel import Panel
from rich.theme import Theme

# Define a custom logging level for success messages
SUCCESS_LEVEL_NUM = 25

logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")


def success_log(self, message, *args, **kwargs):
    if self.isEnabledFor(SUCCESS_LEVEL_NUM):
        self._log(SUCCESS_LEVEL_NUM, message, args, **kwargs)


# Register the custom success method to the logging.Logger class
if not hasattr(logging.Logger, 'success'):
    setattr(logging.Logger, 'success', success_log)


class ConsoleManager:
    """
    A singleton class that manages the console output for search-mcp.
    Everything is written to stderr: stdout carries the MCP stdio protocol
    and must never receive log lines.
    """
    def __init__(self, name: str = "search-mcp"):
        custom_theme = Theme({
            "logging.level.success": "bold green"
        })
        self._console = Console(theme=custom_theme, stderr=True)
        self._logger = self._setup_logger(name)

    def _setup_logger(self, name: str) -> logging.Logger:
        logger = logging.getLogger(name)
        if logger.hasHandlers():
            # If logger is already configured, don't add handlers again
            return logger

        logger.setLevel(logging.INFO)
        logger.propagate = False
        handler = RichHandler(
            console=self._console,
            rich_tracebacks=True,
            tracebacks_show_locals=False,
            keywords=["INFO", "SUCCESS", "WARNING", "ERROR", "DEBUG", "CRITICAL"],
            show_path=False
        )
        handler.setFormatter(logging.Formatter(fmt="%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
        return logger

    @property
    def logger(self) -> logging.Logger:
        return self._logger

    def set_level(self, level: str):
        """Sets the level by name, e.g. 'DEBUG'. Unknown names fall back to INFO."""
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            self._logger.warning(f"Unknown log level '{level}', using INFO.")
            resolved = logging.INFO
        self._logger.setLevel(resolved)

    # Define logging methods
    def debug(self, message: str):
        self._logger.debug(message)

    def info(self, message: str):
        self._logger.info(message)

    def success(self, message: str):
        self._logger.success(message)

    def warning(self, message: str):
        self._logger.warning(message)

    def error(self, message: str):
        self._logger.error(message)

    def exception(self, message: str):
        # The 'exc_info=True' is what makes .exception() special
        self._logger.exception(message)

    # Define higher-level console methods
    def rule(self, title: str, style: str = "cyan"):
        self._console.rule(f"[bold {style}]{title}[/bold {style}]", style=style)

    def display_error_panel(self, title: str, error_message: str):
        panel = Panel(error_message, title=f"[bold red]{title}[/bold red]", border_style="red")
        self._console.print(panel)


# Create a singleton instance for global use
console = ConsoleManager()
