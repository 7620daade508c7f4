"""
Subsorter Package Main Entry Point

Runs the CLI when the package is executed with ``python -m subsorter``.
"""

import logging
import sys

from subsorter.cli.common.error_handler import handle_cli_error
from subsorter.cli.typer_app import app
from subsorter.shared.constants import CLIDefaults

logger = logging.getLogger(__name__)


def main() -> None:
    """Run the Typer application with interrupt and crash handling."""
    try:
        app()
    except KeyboardInterrupt:
        logger.info("Command interrupted by user")
        sys.exit(CLIDefaults.EXIT_ERROR)
    except SystemExit:  # pylint: disable=try-except-raise
        raise
    except Exception as e:  # noqa: BLE001
        sys.exit(handle_cli_error(e, "subsorter-main"))


if __name__ == "__main__":
    main()
