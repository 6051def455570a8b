"""Tests for the Accountkit CLI."""

import json

from typer.testing import CliRunner

from accountkit import __version__
from accountkit.cli import app

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert __version__ in result.output


def test_plan_json(write_main):
    main_file = write_main(
        """
        from accountkit import AccountSpec

        user = AccountSpec(
            title="user",
            ssh_keys={"laptop": {"key": "AAAA", "type": "ssh-ed25519"}},
        )
        """
    )

    result = runner.invoke(app, ["plan", str(main_file), "--json"])

    assert result.exit_code == 0
    handoff = json.loads(result.output)
    assert [entry["ref"] for entry in handoff] == [
        "group[user]",
        "user[user]",
        "directory[/home/user]",
        "directory[/home/user/.ssh]",
        "authorized_key[user_laptop]",
    ]
    assert handoff[3]["before"] == ["authorized_key[user_laptop]"]


def test_plan_table(write_main):
    main_file = write_main(
        """
        from accountkit import AccountSpec

        deploy = AccountSpec(title="deploy", password="$6$secret")
        """
    )

    result = runner.invoke(app, ["plan", str(main_file)])

    assert result.exit_code == 0
    assert "+ group[deploy]" in result.output
    assert "before: user[deploy]" in result.output
    assert "$6$secret" not in result.output
    assert "Plan: 4 resources, 3 ordering edges." in result.output


def test_plan_invalid_account(write_main):
    main_file = write_main("accounts = [{'title': 'user', 'ssh_keys': {'bad': {'key': 'A'}}}]\n")

    result = runner.invoke(app, ["plan", str(main_file)])

    assert result.exit_code == 1
    assert "Plan failed" in result.output


def test_plan_missing_file(temp_dir):
    result = runner.invoke(app, ["plan", str(temp_dir / "main.py")])

    assert result.exit_code == 1
    assert "No main.py found" in result.output


def test_plan_non_ascii_gid_is_reported(write_main):
    main_file = write_main("accounts = [{'title': 'user', 'gid': '\\u00b2'}]\n")

    result = runner.invoke(app, ["plan", str(main_file)])

    assert result.exit_code == 1
    assert "Plan failed" in result.output
    assert "gid" in result.output
