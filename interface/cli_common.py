"""Helpers shared by command handlers."""

import re
import sys
from datetime import date
from typing import Any, Dict, List

from application.pagination import LIMITS, paginate
from application.ports import TodoistApi
from core import CommandError

# Limit used when a command needs the whole collection.
ALL = sys.maxsize


def today_iso() -> str:
    return date.today().isoformat()


def parse_priority(value: str) -> int:
    """``p1``..``p4`` to the API scale, where 4 is the most urgent."""
    match = re.match(r"^p([1-4])$", value.strip().lower())
    if not match:
        raise CommandError("INVALID_PRIORITY", f'Invalid priority "{value}". Use p1, p2, p3, or p4.')
    return 5 - int(match.group(1))


def split_labels(raw: str) -> List[str]:
    return [label.strip() for label in raw.split(",") if label.strip()]


def target_limit(args: Any, kind: str) -> int:
    if getattr(args, "all", False):
        return ALL
    limit = getattr(args, "limit", None)
    if limit is not None:
        if limit <= 0:
            raise CommandError("INVALID_LIMIT", f"Invalid limit {limit}. Use a positive number.")
        return limit
    return LIMITS[kind]


def require_confirmation(args: Any, action: str = "deletion") -> None:
    if not getattr(args, "yes", False):
        raise CommandError("CONFIRMATION_REQUIRED", f"Use --yes to confirm {action}.")


def project_names(api: TodoistApi) -> Dict[str, str]:
    page = paginate(lambda cursor, limit: api.get_projects(cursor=cursor, limit=limit), ALL)
    return {project.id: project.name for project in page.results}


__all__ = [
    "ALL",
    "today_iso",
    "parse_priority",
    "split_labels",
    "target_limit",
    "require_confirmation",
    "project_names",
]
