#!/usr/bin/env python3
"""Comment commands."""

import argparse
from typing import List

from application.pagination import paginate
from application.resolvers import resolve_comment_id, resolve_task_ref
from core import Comment

from . import cli_api
from .cli_common import require_confirmation, target_limit
from .cli_io import emit_page
from .cli_style import dim, echo, plain


def cmd_comment_list(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    task = resolve_task_ref(api, args.task)
    page = paginate(
        lambda cursor, limit: api.get_comments(task_id=task.id, cursor=cursor, limit=limit),
        target_limit(args, "comments"),
        start_cursor=args.cursor,
    )

    def render(comments: List[Comment]) -> None:
        if not comments:
            echo("No comments.")
            return
        for comment in comments:
            echo([dim(comment.posted_at[:16].replace("T", " ")), plain(f"  {comment.content}  "), dim(f"id:{comment.id}")])

    return emit_page(args, page, "comment", render)


def cmd_comment_add(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    task = resolve_task_ref(api, args.task)
    comment = api.add_comment(args.content, task_id=task.id)
    echo(f'Added comment to "{task.content}"')
    echo([dim(f"ID: {comment.id}")])
    return 0


def cmd_comment_delete(args: argparse.Namespace) -> int:
    comment_id = resolve_comment_id(args.ref)
    require_confirmation(args)
    api = cli_api.get_api()
    api.delete_comment(comment_id)
    echo(f"Deleted comment {comment_id}")
    return 0


__all__ = ["cmd_comment_list", "cmd_comment_add", "cmd_comment_delete"]
