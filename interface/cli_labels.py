#!/usr/bin/env python3
"""Label commands."""

import argparse
from typing import List

from application.pagination import paginate
from application.resolvers import resolve_label_ref
from core import Label

from . import cli_api
from .cli_common import require_confirmation, target_limit
from .cli_io import emit_page
from .cli_style import dim, echo, plain


def cmd_label_list(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    page = paginate(
        lambda cursor, limit: api.get_labels(cursor=cursor, limit=limit),
        target_limit(args, "labels"),
        start_cursor=args.cursor,
    )

    def render(labels: List[Label]) -> None:
        if not labels:
            echo("No labels found.")
            return
        for label in labels:
            name_style = "class:favorite" if label.is_favorite else "class:label"
            echo([dim(label.id), plain("  "), (name_style, f"@{label.name}")])

    return emit_page(args, page, "label", render)


def cmd_label_create(args: argparse.Namespace) -> int:
    api = cli_api.get_api()
    fields = {}
    if args.color:
        fields["color"] = args.color
    if args.favorite:
        fields["is_favorite"] = True
    label = api.add_label(args.name, **fields)
    echo(f"Created: @{label.name}")
    echo([dim(f"ID: {label.id}")])
    return 0


def cmd_label_delete(args: argparse.Namespace) -> int:
    require_confirmation(args)
    api = cli_api.get_api()
    label = resolve_label_ref(api, args.ref)
    api.delete_label(label.id)
    echo(f"Deleted: @{label.name}")
    return 0


__all__ = ["cmd_label_list", "cmd_label_create", "cmd_label_delete"]
