#!/usr/bin/env python3
"""Token management commands."""

import argparse

from config import config_path, get_api_token, get_config_token, set_api_token
from core import CommandError
from infrastructure.todoist import clear_current_user_cache

from . import cli_api
from .cli_style import dim, echo


def _mask(token: str) -> str:
    if len(token) <= 8:
        return "*" * len(token)
    return f"{token[:4]}…{token[-4:]}"


def cmd_auth_token(args: argparse.Namespace) -> int:
    token = (args.token or "").strip()
    if not token:
        raise CommandError("INVALID_TOKEN", "Token must not be empty.")
    set_api_token(token)
    clear_current_user_cache()
    echo(f"Token saved to {config_path()}")
    return 0


def cmd_auth_logout(args: argparse.Namespace) -> int:
    if not get_config_token():
        echo("No stored token.")
        return 0
    set_api_token("")
    clear_current_user_cache()
    echo("Logged out.")
    return 0


def cmd_auth_status(args: argparse.Namespace) -> int:
    token = get_api_token()
    if not token:
        echo("Not authenticated.")
        return 1
    user = cli_api.get_api().get_user()
    echo(f"Authenticated as {user.full_name or user.id}")
    if user.email:
        echo([dim(user.email)])
    echo([dim(f"Token: {_mask(token)}")])
    return 0


__all__ = ["cmd_auth_token", "cmd_auth_logout", "cmd_auth_status"]
