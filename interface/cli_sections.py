#!/usr/bin/env python3
"""Section commands."""

import argparse
from typing import List

from application.pagination import LIMITS, paginate
from application.resolvers import resolve_project_id
from core import CommandError, Section, require_explicit_ref

from . import cli_api
from .cli_common import require_confirmation, target_limit
from .cli_io import emit_page
from .cli_style import dim, echo, plain


def cmd_section_list(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    project_id = resolve_project_id(api, args.project)
    page = paginate(
        lambda cursor, limit: api.get_sections(project_id=project_id, cursor=cursor, limit=limit),
        target_limit(args, "sections"),
        start_cursor=args.cursor,
    )

    def render(sections: List[Section]) -> None:
        if not sections:
            echo("No sections.")
            return
        for section in sections:
            echo([dim(section.id), plain(f"  {section.name}")])

    return emit_page(args, page, "section", render)


def cmd_section_create(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    project_id = resolve_project_id(api, args.project)
    section = api.add_section(args.name, project_id)
    echo(f"Created: {section.name}")
    echo([dim(f"ID: {section.id}")])
    return 0


def cmd_section_delete(args: argparse.Namespace) -> int:
    section_id = require_explicit_ref(args.ref, "section")
    require_confirmation(args)
    api = cli_api.get_api()
    remaining = paginate(
        lambda cursor, limit: api.get_tasks(section_id=section_id, cursor=cursor, limit=limit), LIMITS["tasks"]
    ).results
    if remaining:
        count = len(remaining)
        raise CommandError(
            "HAS_TASKS",
            f"Cannot delete section: {count} uncompleted task{'' if count == 1 else 's'} remain.",
        )
    api.delete_section(section_id)
    echo(f"Deleted section {section_id}")
    return 0


def cmd_section_update(args: argparse.Namespace) -> int:
    section_id = require_explicit_ref(args.ref, "section")
    api = cli_api.get_api()
    section = api.get_section(section_id)
    updated = api.update_section(section_id, args.name)
    echo(f"Updated: {section.name} → {updated.name}")
    return 0


__all__ = ["cmd_section_list", "cmd_section_create", "cmd_section_delete", "cmd_section_update"]
