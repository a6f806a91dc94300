"""
Typer-based CLI for clusterconf.

Usage Patterns:
    clusterconf config list
    clusterconf config --kind slave show slave.master_url
    clusterconf config set master.http_port 8080
    clusterconf config set master.http_port          # sets it to null
"""

from typing import Optional

import typer

from clusterconf.core.utils.logger import setup_logging

from .config_commands import config_app

app = typer.Typer(
    name="clusterconf",
    help="Cluster configuration management",
    add_completion=False,
    no_args_is_help=True,
)

app.add_typer(config_app, name="config")


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR); defaults to CLUSTERCONF_LOG_LEVEL or WARNING",
        envvar="CLUSTERCONF_LOG_LEVEL",
    ),
):
    """Cluster configuration management."""
    setup_logging(level=log_level or "WARNING")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
