#!/usr/bin/env python3
"""Task commands."""

import argparse
import logging
from typing import Any, Callable, Dict, List, Optional

from application.pagination import paginate
from application.resolvers import (
    resolve_parent_task_id,
    resolve_project_id,
    resolve_section_id,
    resolve_task_ref,
)
from core import CommandError, Page, Task, require_explicit_ref
from infrastructure.todoist import get_current_user_id

from . import cli_api
from .cli_common import parse_priority, project_names, require_confirmation, split_labels, target_limit, today_iso
from .cli_io import emit_page, format_due, task_row
from .cli_style import bold, dim, echo, plain

logger = logging.getLogger("td.cli")


def _due_matches(task: Task, due: str, today: str) -> bool:
    if not task.due:
        return False
    if due == "today":
        return task.due.date == today
    if due == "overdue":
        return task.due.date < today
    return task.due.date == due


def _task_filter(api, args: argparse.Namespace) -> Optional[Callable[[Task], bool]]:
    """Client-side predicate for --priority, --due and --assigned-to-me, or None."""
    checks: List[Callable[[Task], bool]] = []
    if args.priority:
        priority = parse_priority(args.priority)
        checks.append(lambda t: t.priority == priority)
    if args.due:
        today = today_iso()
        checks.append(lambda t: _due_matches(t, args.due, today))
    if args.assigned_to_me:
        user_id = get_current_user_id(api)
        checks.append(lambda t: t.raw.get("responsible_uid") == user_id)
    if not checks:
        return None
    return lambda t: all(check(t) for check in checks)


def cmd_task_list(args: argparse.Namespace) -> int:
    if args.project and args.filter:
        raise CommandError(
            "CONFLICTING_OPTIONS",
            "--project cannot be combined with --filter.",
            ["Put the project in the query instead, e.g. --filter '#Work & today'"],
        )
    api = cli_api.get_api()
    project_id = resolve_project_id(api, args.project) if args.project else None
    keep = _task_filter(api, args)

    # Filtering each page keeps --limit counting matches and the cursor on the last page read.
    def fetch(cursor, limit):
        if args.filter:
            page = api.filter_tasks(args.filter, cursor=cursor, limit=limit)
        else:
            page = api.get_tasks(project_id=project_id, cursor=cursor, limit=limit)
        if keep is not None:
            page = Page(results=[t for t in page.results if keep(t)], next_cursor=page.next_cursor)
        return page

    page = paginate(fetch, target_limit(args, "tasks"), start_cursor=args.cursor)
    logger.debug("task list: %s tasks after filters", len(page.results))

    def render(items: List[Task]) -> None:
        if not items:
            echo("No tasks found.")
            return
        names = project_names(api)
        for task in items:
            echo(task_row(task, names.get(task.project_id)))

    return emit_page(args, page, "task", render)


def cmd_task_view(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    task = resolve_task_ref(api, args.ref)
    project = api.get_project(task.project_id) if task.project_id else None

    echo([bold(task.content)])
    echo()
    rows = [
        ("ID", task.id),
        ("Project", project.name if project else ""),
        ("Priority", task.priority_label),
        ("Due", format_due(task.due)),
        ("Labels", ", ".join(f"@{label}" for label in task.labels)),
        ("URL", task.url),
    ]
    if args.full:
        rows += [
            ("Section", task.section_id or ""),
            ("Parent", task.parent_id or ""),
            ("Created", str(task.raw.get("added_at") or "")),
            ("Completed", "Yes" if task.checked else "No"),
        ]
    for name, value in rows:
        if value:
            echo([dim(f"{name + ':':<10}"), plain(value)])
    if task.description:
        echo()
        echo(task.description)
    return 0


def cmd_task_complete(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    task = resolve_task_ref(api, args.ref)
    if task.checked:
        echo("Task already completed.")
        return 0
    if args.forever:
        cli_api.get_sync_client().complete_forever(task.id)
    else:
        api.close_task(task.id)
    echo(f"Completed: {task.content}")
    return 0


def cmd_task_reopen(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    task = resolve_task_ref(api, args.ref)
    api.reopen_task(task.id)
    echo(f"Reopened: {task.content}")
    return 0


def cmd_task_delete(args: argparse.Namespace) -> int:
    require_confirmation(args)
    api = cli_api.get_api()
    task = resolve_task_ref(api, args.ref)
    api.delete_task(task.id)
    echo(f"Deleted: {task.content}")
    return 0


def _common_fields(args: argparse.Namespace) -> Dict[str, Any]:
    fields: Dict[str, Any] = {}
    if args.due:
        fields["due_string"] = args.due
    if args.priority:
        fields["priority"] = parse_priority(args.priority)
    if args.labels:
        fields["labels"] = split_labels(args.labels)
    if args.description:
        fields["description"] = args.description
    return fields


def cmd_task_add(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    fields = _common_fields(args)

    project_id = resolve_project_id(api, args.project) if args.project else None
    section_id = None
    if project_id:
        fields["project_id"] = project_id
    if args.section:
        if project_id:
            section_id = resolve_section_id(api, args.section, project_id)
        else:
            section_id = require_explicit_ref(args.section, "section")
        fields["section_id"] = section_id
    if args.parent:
        if project_id:
            fields["parent_id"] = resolve_parent_task_id(api, args.parent, project_id, section_id)
        else:
            fields["parent_id"] = require_explicit_ref(args.parent, "parent task")

    task = api.add_task(args.content, **fields)
    echo(f"Created: {task.content}")
    if task.due:
        echo(f"Due: {format_due(task.due)}")
    echo(f"ID: {task.id}")
    return 0


def cmd_task_update(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    fields = _common_fields(args)
    if args.content:
        fields["content"] = args.content
    if not fields:
        raise CommandError("NO_CHANGES", "Nothing to update.", ["Pass at least one of --content, --due, --priority, --labels, --description"])
    task = resolve_task_ref(api, args.ref)
    updated = api.update_task(task.id, **fields)
    echo(f"Updated: {updated.content}")
    return 0


def cmd_today(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    page = paginate(lambda cursor, limit: api.get_tasks(cursor=cursor, limit=limit), target_limit(args, "tasks"))
    today = today_iso()
    overdue = [t for t in page.results if t.due and t.due.date < today]
    due_today = [t for t in page.results if t.due and t.due.date == today]

    if not overdue and not due_today:
        echo("No tasks due today.")
        return 0

    names = project_names(api)
    if overdue:
        echo([("class:overdue", f"Overdue ({len(overdue)})")])
        for task in overdue:
            echo(task_row(task, names.get(task.project_id)))
        echo()
    echo([bold(f"Today ({len(due_today)})")])
    for task in due_today:
        echo(task_row(task, names.get(task.project_id)))
    return 0


__all__ = [
    "cmd_task_list",
    "cmd_task_view",
    "cmd_task_complete",
    "cmd_task_reopen",
    "cmd_task_delete",
    "cmd_task_add",
    "cmd_task_update",
    "cmd_today",
]
