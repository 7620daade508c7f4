"""
Subsorter Typer CLI Application

Single-command application: ``subsorter LIBRARY_ROOT [options]``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from subsorter import __version__
from subsorter.cli.common.error_handler import handle_cli_error
from subsorter.cli.sort_handler import handle_sort_command
from subsorter.config.settings import Settings, load_settings
from subsorter.shared.constants import CLIDefaults, CLIHelp, LogLevel
from subsorter.shared.errors import SubSorterError
from subsorter.shared.logging import setup_logging


def version_callback(value: bool) -> None:
    """Print version information and exit."""
    if value:
        typer.echo(CLIHelp.VERSION_TEXT.format(version=__version__))
        raise typer.Exit


def resolve_log_level(
    settings: Settings,
    verbose: int,
    log_level: LogLevel | None,
) -> LogLevel:
    """Pick the console log level: -v, then --log-level, then the settings."""
    if verbose:
        return LogLevel.DEBUG
    if log_level is not None:
        return log_level
    return settings.logging.level


app = typer.Typer(
    name=CLIHelp.APP_NAME,
    help=CLIHelp.APP_DESCRIPTION,
    add_completion=False,
    rich_markup_mode=CLIHelp.APP_STYLE,
)


@app.command()
def sort(
    root: Annotated[
        Path,
        typer.Argument(
            help=CLIHelp.ROOT_HELP,
            exists=True,
            file_okay=False,
            dir_okay=True,
        ),
    ],
    config: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help=CLIHelp.CONFIG_HELP,
            exists=True,
            dir_okay=False,
        ),
    ] = None,
    log_file: Annotated[
        Optional[Path],
        typer.Option("--log-file", help=CLIHelp.LOG_FILE_HELP, dir_okay=False),
    ] = None,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help=CLIHelp.VERBOSE_HELP),
    ] = 0,
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option(
            "--log-level",
            case_sensitive=False,
            help=CLIHelp.LOG_LEVEL_HELP,
        ),
    ] = None,
    json_output: Annotated[
        bool,
        typer.Option("--json", help=CLIHelp.JSON_HELP),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help=CLIHelp.VERSION_HELP,
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """
    Copy the English subtitle of every movie and episode next to its video.

    Each directory inside ROOT is one title. A title with one video is a
    movie, one with several videos is a show, and one with only folders is a
    show with season folders. Subtitles are read from the "subs" folder and
    written as "<video name>.srt".
    """
    try:
        settings = load_settings(config)
        setup_logging(
            resolve_log_level(settings, verbose, log_level).value,
            log_file or (Path(settings.logging.file) if settings.logging.file else None),
        )
        exit_code = handle_sort_command(root, settings, json_output=json_output)
    except (SubSorterError, OSError) as e:
        exit_code = handle_cli_error(e, CLIDefaults.COMMAND, json_output=json_output)

    if exit_code != CLIDefaults.EXIT_SUCCESS:
        raise typer.Exit(exit_code)
