"""Tests for SSH key fan-out."""

import pytest

from accountkit.assembly import fan_out
from accountkit.errors import ValidationError
from accountkit.intake import resolve


def _keys(**entries):
    return {name: {"key": f"AAAA{name}", "type": "ssh-ed25519"} for name in entries}


def test_fan_out_empty(settings):
    """Test an account without keys fans out to nothing."""
    account = resolve({"title": "user"}, settings=settings)

    assert fan_out(account) == ()


def test_fan_out_titles_and_order(settings):
    """Test titles are {username}_{key_name} in declaration order."""
    account = resolve(
        {
            "title": "user",
            "ssh_keys": {
                "first_key": {"key": "AAAA1", "type": "ssh-rsa"},
                "second_key": {"key": "AAAA2", "type": "ssh-ed25519"},
            },
        },
        settings=settings,
    )

    keys = fan_out(account)

    assert [key.title for key in keys] == ["user_first_key", "user_second_key"]
    assert [key.key_material for key in keys] == ["AAAA1", "AAAA2"]
    assert [key.key_type for key in keys] == ["ssh-rsa", "ssh-ed25519"]


def test_fan_out_order_is_not_sorted(settings):
    """Test declaration order wins over alphabetical order."""
    account = resolve(
        {"title": "user", "ssh_keys": {"zulu": {"key": "A", "type": "ssh-rsa"},
                                       "alpha": {"key": "B", "type": "ssh-rsa"}}},
        settings=settings,
    )

    assert [key.title for key in fan_out(account)] == ["user_zulu", "user_alpha"]


def test_fan_out_uses_username_not_title(settings):
    account = resolve(
        {"title": "admin", "username": "sysadmin", "ssh_keys": _keys(laptop=1)},
        settings=settings,
    )

    key = fan_out(account)[0]

    assert key.title == "sysadmin_laptop"
    assert key.owner == "sysadmin"


def test_fan_out_default_comment_is_title(settings):
    account = resolve({"title": "user", "ssh_keys": _keys(laptop=1)}, settings=settings)

    assert fan_out(account)[0].comment == "user_laptop"


def test_fan_out_explicit_comment(settings):
    account = resolve(
        {
            "title": "user",
            "ssh_keys": {"laptop": {"key": "AAAA", "type": "ssh-rsa", "comment": "me@laptop"}},
        },
        settings=settings,
    )

    assert fan_out(account)[0].comment == "me@laptop"


def test_fan_out_legacy_key_line(settings):
    """Test the legacy key renders as '<type> <key> <username> SSH Key'."""
    account = resolve(
        {"title": "ssh_key_user", "ssh_key": "abcdefghijklmnopqrstuvwxyz"},
        settings=settings,
    )

    key = fan_out(account)[0]

    assert key.title == "ssh_key_user_ssh_key"
    assert key.to_line() == "ssh-rsa abcdefghijklmnopqrstuvwxyz ssh_key_user SSH Key"


def test_fan_out_carries_ensure(settings):
    account = resolve(
        {"title": "user", "ensure": "absent", "ssh_keys": _keys(laptop=1)},
        settings=settings,
    )

    assert fan_out(account)[0].ensure == "absent"


def test_fan_out_duplicate_with_legacy_key(settings):
    """Test a key named like the legacy key collides with it."""
    account = resolve(
        {"title": "user", "ssh_key": "AAAA", "ssh_keys": _keys(ssh_key=1)},
        settings=settings,
    )

    with pytest.raises(ValidationError, match="duplicate"):
        fan_out(account)


def test_fan_out_duplicate_after_normalisation(settings):
    """Test names differing only by surrounding whitespace collide."""
    account = resolve(
        {"title": "user", "ssh_keys": {
            "laptop": {"key": "A", "type": "ssh-rsa"},
            " laptop ": {"key": "B", "type": "ssh-rsa"},
        }},
        settings=settings,
    )

    with pytest.raises(ValidationError) as exc_info:
        fan_out(account)

    assert exc_info.value.field_path == "ssh_keys. laptop "


@pytest.mark.parametrize("name", ["", "   "])
def test_fan_out_blank_key_name(settings, name):
    account = resolve(
        {"title": "user", "ssh_keys": {name: {"key": "A", "type": "ssh-rsa"}}},
        settings=settings,
    )

    with pytest.raises(ValidationError, match="empty"):
        fan_out(account)


def test_fan_out_is_deterministic(settings):
    account = resolve({"title": "user", "ssh_keys": _keys(a=1, b=2, c=3)}, settings=settings)

    assert fan_out(account) == fan_out(account)
