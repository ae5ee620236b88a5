from .rate_limiter import RateLimiter
from .rest_client import (
    REST_BASE,
    TodoistApiError,
    TodoistNotFoundError,
    TodoistPermissionError,
    TodoistRateLimitError,
    TodoistRestClient,
    clear_current_user_cache,
    get_current_user_id,
)
from .sync_client import SyncApiError, SyncClient, sync_command

__all__ = [
    "RateLimiter",
    "REST_BASE",
    "TodoistApiError",
    "TodoistNotFoundError",
    "TodoistPermissionError",
    "TodoistRateLimitError",
    "TodoistRestClient",
    "clear_current_user_cache",
    "get_current_user_id",
    "SyncApiError",
    "SyncClient",
    "sync_command",
]
