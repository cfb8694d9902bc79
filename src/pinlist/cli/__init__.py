"""pinlist CLI -- inspect and demo pinned/unpinned partitions from the terminal.

This module is NEVER imported from pinlist/__init__.py.
It is only loaded via the ``pinlist`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import TYPE_CHECKING

try:
    import click
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install pinlist[cli]"
    ) from None

from pinlist.cli.formatting import format_error, get_console

if TYPE_CHECKING:
    from collections.abc import Iterator

    from rich.console import Console

LOG_LEVELS = ("debug", "info", "warning", "error")


def configure_logging(level: str = "warning") -> None:
    """Configure the root logger for CLI runs.

    Logs go to stderr in plain text so they never mix with command output.
    Existing handlers are replaced to avoid duplicate lines when the group
    runs more than once in one process (e.g. under CliRunner).
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper()))

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    )

    root.handlers.clear()
    root.addHandler(handler)


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="warning",
    envvar="PINLIST_LOG_LEVEL",
    help="Logging verbosity (stderr).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """pinlist: pinned/unpinned partitions of ordered collections."""
    ctx.ensure_object(dict)
    ctx.obj["log_level"] = log_level.lower()
    configure_logging(ctx.obj["log_level"])


@contextmanager
def _cli_session() -> Iterator[Console]:
    """Yield a console and format any exception as a CLI error (exit 1).

    Click's own usage errors pass through so click reports them (exit 2).
    """
    console = get_console()
    try:
        yield console
    except (SystemExit, click.ClickException):
        raise
    except Exception as e:
        format_error(str(e), console)
        raise SystemExit(1) from None


# Register subcommands after cli group is defined
from pinlist.cli.commands.demo import demo  # noqa: E402
from pinlist.cli.commands.partition import partition  # noqa: E402

cli.add_command(demo)
cli.add_command(partition)
