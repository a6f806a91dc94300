"""
Standardized exit codes for clusterconf CLI commands.

Keeping exit codes consistent makes the commands easy to script and test.
"""

from typing import Optional

import typer


# Exit code constants
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 2


class CliExit(typer.Exit):
    """
    Standardized CLI exit exception that extends typer.Exit with consistent codes.

    Usage:
        raise CliExit.config_error()  # Unknown field or invalid value
    """

    def __init__(self, code: int, message: Optional[str] = None):
        """
        Initialize CLI exit.

        Args:
            code: Exit code (use constants: EXIT_SUCCESS, EXIT_CONFIG_ERROR)
            message: Optional message to display before exiting
        """
        self.message = message
        super().__init__(code)
        if message:
            typer.echo(message, err=code != EXIT_SUCCESS)

    @classmethod
    def config_error(cls, message: Optional[str] = None) -> "CliExit":
        """Create a configuration error exit."""
        return cls(EXIT_CONFIG_ERROR, message)
