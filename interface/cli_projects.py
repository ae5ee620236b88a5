#!/usr/bin/env python3
"""Project commands."""

import argparse
from typing import List

from application.pagination import LIMITS, paginate
from application.resolvers import resolve_project_ref
from core import Project, require_explicit_ref

from . import cli_api
from .cli_common import require_confirmation, target_limit
from .cli_io import emit_page
from .cli_style import bold, dim, echo, plain


def cmd_project_list(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    page = paginate(
        lambda cursor, limit: api.get_projects(cursor=cursor, limit=limit),
        target_limit(args, "projects"),
        start_cursor=args.cursor,
    )

    def render(projects: List[Project]) -> None:
        if not projects:
            echo("No projects found.")
            return
        for project in projects:
            name_style = "class:favorite" if project.is_favorite else "class:text"
            echo([dim(project.id), plain("  "), (name_style, project.name)])

    return emit_page(args, page, "project", render)


def cmd_project_view(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    project = resolve_project_ref(api, args.ref)

    echo([bold(project.name)])
    echo()
    echo(f"ID:       {project.id}")
    echo(f"Color:    {project.color}")
    echo(f"Favorite: {'Yes' if project.is_favorite else 'No'}")
    if project.is_workspace:
        echo(f"Workspace: {project.workspace_id}")
    echo(f"URL:      {project.url}")

    tasks = paginate(
        lambda cursor, limit: api.get_tasks(project_id=project.id, cursor=cursor, limit=limit), LIMITS["tasks"]
    ).results
    if tasks:
        echo()
        echo([dim(f"--- Tasks ({len(tasks)}) ---")])
        for task in tasks:
            echo([plain("  "), dim(task.priority_label), plain(f"  {task.content}")])
    return 0


def cmd_project_create(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    fields = {}
    if args.color:
        fields["color"] = args.color
    if args.favorite:
        fields["is_favorite"] = True
    project = api.add_project(args.name, **fields)
    echo(f"Created: {project.name}")
    echo([dim(f"ID: {project.id}")])
    return 0


def cmd_project_delete(args: argparse.Namespace) -> int:
    project_id = require_explicit_ref(args.ref, "project")
    require_confirmation(args)
    api = cli_api.get_api()
    project = api.get_project(project_id)
    api.delete_project(project.id)
    echo(f"Deleted project: {project.name}")
    return 0


__all__ = ["cmd_project_list", "cmd_project_view", "cmd_project_create", "cmd_project_delete"]
