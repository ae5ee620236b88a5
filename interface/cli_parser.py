"""CLI parser construction for td."""

import argparse
from typing import Any


def build_parser(commands: Any) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="td",
        description="td: Todoist from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="debug logging to stderr")
    parser.add_argument("--no-spinner", action="store_true", help="disable the loading spinner")

    # Global flags are accepted after the subcommand too.
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--verbose", "-v", action="store_true", default=argparse.SUPPRESS, help="debug logging to stderr")
    common.add_argument("--no-spinner", action="store_true", default=argparse.SUPPRESS, help="disable the loading spinner")

    def add_output_args(sp):
        out = sp.add_mutually_exclusive_group()
        out.add_argument("--json", action="store_true", help="print JSON")
        out.add_argument("--ndjson", action="store_true", help="print one JSON object per line")
        sp.add_argument("--full", action="store_true", help="include every field the API returns")
        return sp

    def add_page_args(sp):
        sp.add_argument("--limit", type=int, help="maximum number of items")
        sp.add_argument("--all", action="store_true", help="fetch every item")
        sp.add_argument("--cursor", help="continue from a previous page")
        return add_output_args(sp)

    sub = parser.add_subparsers(dest="command", help="Commands")

    # task
    task_p = sub.add_parser("task", help="Manage tasks")
    task_sub = task_p.add_subparsers(dest="task_command")

    lp = task_sub.add_parser("list", help="List tasks", parents=[common])
    lp.add_argument("--project", help="project name or id:xxx")
    lp.add_argument("--filter", help="Todoist filter query")
    lp.add_argument("--priority", help="p1..p4")
    lp.add_argument("--due", help="today, overdue or YYYY-MM-DD")
    lp.add_argument("--assigned-to-me", action="store_true", help="only tasks assigned to you")
    add_page_args(lp)
    lp.set_defaults(func=commands.cmd_task_list)

    vp = task_sub.add_parser("view", help="Show a task", parents=[common])
    vp.add_argument("ref", help="task name or id:xxx")
    vp.add_argument("--full", action="store_true", help="show every field")
    vp.set_defaults(func=commands.cmd_task_view)

    cp = task_sub.add_parser("complete", help="Complete a task", parents=[common])
    cp.add_argument("ref")
    cp.add_argument("--forever", action="store_true", help="stop a recurring task from recurring")
    cp.set_defaults(func=commands.cmd_task_complete)

    rp = task_sub.add_parser("reopen", help="Reopen a completed task", parents=[common])
    rp.add_argument("ref")
    rp.set_defaults(func=commands.cmd_task_reopen)

    dp = task_sub.add_parser("delete", help="Delete a task", parents=[common])
    dp.add_argument("ref")
    dp.add_argument("--yes", action="store_true", help="confirm deletion")
    dp.set_defaults(func=commands.cmd_task_delete)

    ap = task_sub.add_parser("add", help="Create a task", parents=[common])
    ap.add_argument("content")
    ap.add_argument("--project", help="project name or id:xxx")
    ap.add_argument("--section", help="section name or id:xxx")
    ap.add_argument("--parent", help="parent task name or id:xxx")
    ap.add_argument("--due", help="natural language due date")
    ap.add_argument("--priority", help="p1..p4")
    ap.add_argument("--labels", help="comma-separated label names")
    ap.add_argument("--description", "-d")
    ap.set_defaults(func=commands.cmd_task_add)

    up = task_sub.add_parser("update", help="Update a task", parents=[common])
    up.add_argument("ref")
    up.add_argument("--content")
    up.add_argument("--due")
    up.add_argument("--priority")
    up.add_argument("--labels")
    up.add_argument("--description", "-d")
    up.set_defaults(func=commands.cmd_task_update)

    # project
    project_p = sub.add_parser("project", help="Manage projects")
    project_sub = project_p.add_subparsers(dest="project_command")

    plp = project_sub.add_parser("list", help="List projects", parents=[common])
    add_page_args(plp)
    plp.set_defaults(func=commands.cmd_project_list)

    pvp = project_sub.add_parser("view", help="Show a project and its tasks", parents=[common])
    pvp.add_argument("ref", help="project name or id:xxx")
    pvp.set_defaults(func=commands.cmd_project_view)

    pcp = project_sub.add_parser("create", help="Create a project", parents=[common])
    pcp.add_argument("--name", required=True)
    pcp.add_argument("--color")
    pcp.add_argument("--favorite", action="store_true")
    pcp.set_defaults(func=commands.cmd_project_create)

    pdp = project_sub.add_parser("delete", help="Delete a project", parents=[common])
    pdp.add_argument("ref", help="id:xxx")
    pdp.add_argument("--yes", action="store_true")
    pdp.set_defaults(func=commands.cmd_project_delete)

    # section
    section_p = sub.add_parser("section", help="Manage sections")
    section_sub = section_p.add_subparsers(dest="section_command")

    slp = section_sub.add_parser("list", help="List sections of a project", parents=[common])
    slp.add_argument("project", help="project name or id:xxx")
    add_page_args(slp)
    slp.set_defaults(func=commands.cmd_section_list)

    scp = section_sub.add_parser("create", help="Create a section", parents=[common])
    scp.add_argument("--name", required=True)
    scp.add_argument("--project", required=True)
    scp.set_defaults(func=commands.cmd_section_create)

    sdp = section_sub.add_parser("delete", help="Delete an empty section", parents=[common])
    sdp.add_argument("ref", help="id:xxx")
    sdp.add_argument("--yes", action="store_true")
    sdp.set_defaults(func=commands.cmd_section_delete)

    sup = section_sub.add_parser("update", help="Rename a section", parents=[common])
    sup.add_argument("ref", help="id:xxx")
    sup.add_argument("--name", required=True)
    sup.set_defaults(func=commands.cmd_section_update)

    # label
    label_p = sub.add_parser("label", help="Manage labels")
    label_sub = label_p.add_subparsers(dest="label_command")

    llp = label_sub.add_parser("list", help="List labels", parents=[common])
    add_page_args(llp)
    llp.set_defaults(func=commands.cmd_label_list)

    lcp = label_sub.add_parser("create", help="Create a label", parents=[common])
    lcp.add_argument("--name", required=True)
    lcp.add_argument("--color")
    lcp.add_argument("--favorite", action="store_true")
    lcp.set_defaults(func=commands.cmd_label_create)

    ldp = label_sub.add_parser("delete", help="Delete a label", parents=[common])
    ldp.add_argument("ref", help="label name, @name or id:xxx")
    ldp.add_argument("--yes", action="store_true")
    ldp.set_defaults(func=commands.cmd_label_delete)

    # comment
    comment_p = sub.add_parser("comment", help="Manage task comments")
    comment_sub = comment_p.add_subparsers(dest="comment_command")

    clp = comment_sub.add_parser("list", help="List comments on a task", parents=[common])
    clp.add_argument("task", help="task name or id:xxx")
    add_page_args(clp)
    clp.set_defaults(func=commands.cmd_comment_list)

    cap = comment_sub.add_parser("add", help="Comment on a task", parents=[common])
    cap.add_argument("task")
    cap.add_argument("--content", required=True)
    cap.set_defaults(func=commands.cmd_comment_add)

    cdp = comment_sub.add_parser("delete", help="Delete a comment", parents=[common])
    cdp.add_argument("ref", help="id:xxx")
    cdp.add_argument("--yes", action="store_true")
    cdp.set_defaults(func=commands.cmd_comment_delete)

    # today
    today_p = sub.add_parser("today", help="Overdue tasks and tasks due today", parents=[common])
    today_p.set_defaults(func=commands.cmd_today)

    # auth
    auth_p = sub.add_parser("auth", help="Manage the API token")
    auth_sub = auth_p.add_subparsers(dest="auth_command")

    atp = auth_sub.add_parser("token", help="Store an API token", parents=[common])
    atp.add_argument("token")
    atp.set_defaults(func=commands.cmd_auth_token)

    alp = auth_sub.add_parser("logout", help="Remove the stored token", parents=[common])
    alp.set_defaults(func=commands.cmd_auth_logout)

    asp = auth_sub.add_parser("status", help="Show who the token belongs to", parents=[common])
    asp.set_defaults(func=commands.cmd_auth_status)

    return parser


__all__ = ["build_parser"]
