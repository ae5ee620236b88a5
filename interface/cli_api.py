"""Process-wide backend handles for command handlers."""

from typing import Optional

from application.ports import TodoistApi
from config import get_api_token
from core import CommandError
from infrastructure.todoist import SyncClient, TodoistRestClient

from .progress_api import ProgressApi

_api: Optional[TodoistApi] = None
_spinner_enabled = True


def configure(spinner_enabled: bool) -> None:
    global _api, _spinner_enabled
    _spinner_enabled = spinner_enabled
    _api = None


def _require_token() -> str:
    token = get_api_token()
    if not token:
        raise CommandError(
            "NO_TOKEN",
            "No Todoist API token configured.",
            ["Run `td auth token <token>` or set TODOIST_API_TOKEN"],
        )
    return token


def get_api() -> TodoistApi:
    global _api
    if _api is None:
        token = _require_token()
        _api = ProgressApi(TodoistRestClient(lambda: token), enabled=_spinner_enabled)
    return _api


def get_sync_client() -> SyncClient:
    token = _require_token()
    return SyncClient(lambda: token)


__all__ = ["configure", "get_api", "get_sync_client"]
