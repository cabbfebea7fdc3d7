"""Error handling for the xdirs CLI."""

from __future__ import annotations

import sys

import click

from .logging import XdirsError, get_logger

logger = get_logger(__name__)


class ErrorHandlingGroup(click.Group):
    """Click group that turns XdirsError into a clean message and exit 1."""

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except XdirsError as e:
            self._handle_error(str(e))

    def _handle_error(self, message: str) -> None:
        """Log error and exit cleanly."""
        logger.error(message)
        click.echo(f"Error: {message}", err=True)
        sys.exit(1)
