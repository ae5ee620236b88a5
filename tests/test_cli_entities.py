import json

import pytest

import config
from interface.td_app import build_parser, main

from conftest import FakeApi, comment, label, project, section, task


@pytest.fixture
def api(install_api):
    return install_api(
        FakeApi(
            projects=[project("p1", "Work", is_favorite=True, color="red"), project("p2", "Home")],
            sections=[section("s1", "Backlog", "p1"), section("s2", "Done", "p1")],
            tasks=[task("t1", "Write report", project_id="p1", section_id="s1")],
            labels=[label("l1", "urgent"), label("l2", "waiting")],
            comments=[
                comment("c1", "First note", "t1", posted_at="2026-10-01T09:30:00Z"),
                comment("c2", "Second note", "t1", posted_at="2026-10-02T10:00:00Z"),
            ],
        )
    )


def test_parser_has_entity_commands():
    help_text = build_parser().format_help()
    for command in ("task", "project", "section", "label", "comment", "today", "auth"):
        assert command in help_text


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage: td" in capsys.readouterr().out


def test_version_flag(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip()


# Projects
def test_project_list(api, capsys):
    assert main(["project", "list"]) == 0
    out = capsys.readouterr().out
    assert "p1  Work" in out
    assert "p2  Home" in out


def test_project_list_json_essentials(api, capsys):
    assert main(["project", "list", "--json"]) == 0
    body = json.loads(capsys.readouterr().out)
    assert body["results"][0] == {
        "id": "p1",
        "name": "Work",
        "color": "red",
        "is_favorite": True,
        "parent_id": None,
        "url": "https://app.todoist.com/app/project/p1",
    }


def test_project_view(api, capsys):
    assert main(["project", "view", "work"]) == 0
    out = capsys.readouterr().out
    assert "Favorite: Yes" in out
    assert "--- Tasks (1) ---" in out
    assert "Write report" in out


def test_project_create(api, capsys):
    assert main(["project", "create", "--name", "Garden", "--favorite"]) == 0
    assert api.called("add_project")[0][1:] == (("Garden",), {"is_favorite": True})
    assert "Created: Garden" in capsys.readouterr().out


def test_project_delete_needs_id_and_yes(api, capsys):
    assert main(["project", "delete", "Work", "--yes"]) == 1
    assert "Error: INVALID_REF" in capsys.readouterr().err
    assert main(["project", "delete", "id:p2"]) == 1
    assert "Error: CONFIRMATION_REQUIRED" in capsys.readouterr().err
    assert main(["project", "delete", "id:p2", "--yes"]) == 0
    assert "Deleted project: Home" in capsys.readouterr().out


# Sections
def test_section_list(api, capsys):
    assert main(["section", "list", "Work"]) == 0
    out = capsys.readouterr().out
    assert "s1  Backlog" in out
    assert main(["section", "list", "Home"]) == 0
    assert "No sections." in capsys.readouterr().out


def test_section_create(api, capsys):
    assert main(["section", "create", "--name", "Ideas", "--project", "home"]) == 0
    assert api.called("add_section")[0][1] == ("Ideas", "p2")
    out = capsys.readouterr().out
    assert "Created: Ideas" in out
    assert "ID: s-new" in out


def test_section_delete_refuses_non_empty(api, capsys):
    assert main(["section", "delete", "id:s1", "--yes"]) == 1
    assert "Error: HAS_TASKS" in capsys.readouterr().err
    assert not api.called("delete_section")

    assert main(["section", "delete", "id:s2", "--yes"]) == 0
    assert "Deleted section s2" in capsys.readouterr().out


def test_section_delete_rejects_names(api, capsys):
    assert main(["section", "delete", "Backlog", "--yes"]) == 1
    err = capsys.readouterr().err
    assert 'Invalid section reference "Backlog".' in err
    assert "Use id:xxx format (e.g., id:Backlog)" in err


def test_section_update(api, capsys):
    assert main(["section", "update", "id:s1", "--name", "Later"]) == 0
    assert "Updated: Backlog → Later" in capsys.readouterr().out


# Labels
def test_label_list(api, capsys):
    assert main(["label", "list"]) == 0
    out = capsys.readouterr().out
    assert "@urgent" in out
    assert "@waiting" in out


def test_label_list_empty(install_api, capsys):
    install_api(FakeApi())
    assert main(["label", "list"]) == 0
    assert "No labels found." in capsys.readouterr().out


def test_label_create_and_delete(api, capsys):
    assert main(["label", "create", "--name", "focus", "--color", "blue"]) == 0
    assert api.called("add_label")[0][2] == {"color": "blue"}
    assert "Created: @focus" in capsys.readouterr().out

    assert main(["label", "delete", "@wait", "--yes"]) == 0
    assert api.called("delete_label")[0][1] == ("l2",)
    assert "Deleted: @waiting" in capsys.readouterr().out


# Comments
def test_comment_list(api, capsys):
    assert main(["comment", "list", "report"]) == 0
    out = capsys.readouterr().out
    assert "2026-10-01 09:30  First note" in out
    assert "id:c2" in out


def test_comment_list_limit_and_ndjson(api, capsys):
    assert main(["comment", "list", "id:t1", "--limit", "1", "--ndjson"]) == 0
    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    assert lines[0]["id"] == "c1"
    assert lines[1] == {"_meta": True, "nextCursor": "1"}


def test_comment_add(api, capsys):
    assert main(["comment", "add", "report", "--content", "Looks good"]) == 0
    assert api.called("add_comment")[0][2] == {"task_id": "t1"}
    out = capsys.readouterr().out
    assert 'Added comment to "Write report"' in out


def test_comment_delete(api, capsys):
    assert main(["comment", "delete", "First note", "--yes"]) == 1
    assert "Error: INVALID_REF" in capsys.readouterr().err
    assert main(["comment", "delete", "id:c1", "--yes"]) == 0
    assert "Deleted comment c1" in capsys.readouterr().out


# Auth
def test_auth_token_and_logout(capsys):
    assert main(["auth", "token", "abc123"]) == 0
    assert config.get_config_token() == "abc123"
    assert "Token saved" in capsys.readouterr().out

    assert main(["auth", "logout"]) == 0
    assert config.get_config_token() == ""
    assert "Logged out." in capsys.readouterr().out

    assert main(["auth", "logout"]) == 0
    assert "No stored token." in capsys.readouterr().out


def test_auth_status(install_api, capsys, monkeypatch):
    assert main(["auth", "status"]) == 1
    assert "Not authenticated." in capsys.readouterr().out

    monkeypatch.setenv("TODOIST_API_TOKEN", "0123456789abcdef")
    install_api(FakeApi())
    assert main(["auth", "status"]) == 0
    out = capsys.readouterr().out
    assert "Authenticated as Ada Lovelace" in out
    assert "0123…cdef" in out
