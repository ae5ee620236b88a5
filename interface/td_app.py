#!/usr/bin/env python3
"""
td: Todoist command-line client.

Thin facade wiring the parser to command handlers and turning domain errors
into ``Error: CODE`` messages on stderr.
"""

import argparse
import logging
import sys
from importlib.metadata import version as pkg_version, PackageNotFoundError
from typing import List, Optional

from config import get_spinner_enabled
from core import TdError, format_error
from infrastructure.todoist import TodoistApiError

from . import cli_api
from .cli_parser import build_parser as build_cli_parser
from .spinner import spinner_disabled

# Import all command functions
from .cli_tasks import (
    cmd_task_list,
    cmd_task_view,
    cmd_task_complete,
    cmd_task_reopen,
    cmd_task_delete,
    cmd_task_add,
    cmd_task_update,
    cmd_today,
)
from .cli_projects import cmd_project_list, cmd_project_view, cmd_project_create, cmd_project_delete
from .cli_sections import cmd_section_list, cmd_section_create, cmd_section_delete, cmd_section_update
from .cli_labels import cmd_label_list, cmd_label_create, cmd_label_delete
from .cli_comments import cmd_comment_list, cmd_comment_add, cmd_comment_delete
from .cli_auth import cmd_auth_token, cmd_auth_logout, cmd_auth_status

logger = logging.getLogger("td")


def build_parser() -> argparse.ArgumentParser:
    """Build CLI argument parser."""
    parser = build_cli_parser(commands=sys.modules[__name__])
    parser.add_argument("--version", action="store_true", help="Show version and exit")
    return parser


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(asctime)s %(name)s %(levelname)s %(message)s",
        )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if getattr(args, "version", False):
        try:
            print(pkg_version("td-cli"))
        except PackageNotFoundError:
            print("0.0.0")
        return 0
    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    _configure_logging(args.verbose)
    machine_output = getattr(args, "json", False) or getattr(args, "ndjson", False)
    cli_api.configure(spinner_enabled=get_spinner_enabled() and not spinner_disabled(args.no_spinner or machine_output))

    try:
        return args.func(args)
    except TdError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except TodoistApiError as exc:
        logger.debug("API failure", exc_info=True)
        print(format_error("API_ERROR", str(exc)), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
