"""
Parameter resolver - turns a raw AccountSpec into a ResolvedAccount.

Applies the defaulting rules, settles the group policy (including the dual
meaning of ``gid``) and validates the shape of every parameter. Nothing here
inspects the host: conflicts such as a duplicate uid are left to the
convergence engine.
"""

import logging
import re
from collections.abc import Mapping
from typing import Any

import pydantic

from ..errors import PolicyConflictError, ValidationError
from ..models import (
    DEFAULT_HOME_BASE,
    DEFAULT_HOME_PERMS,
    DEFAULT_SHELL,
    SSH_DIR_PERMS,
    AccountSpec,
    NamedSshKey,
    ResolvedAccount,
    SshKeySpec,
)
from ..settings import AccountkitSettings, get_settings

logger = logging.getLogger(__name__)

# Name under which the legacy single ssh_key parameter is fanned out
LEGACY_KEY_NAME = "ssh_key"

_MODE_PATTERN = re.compile(r"^[0-7]{3,4}$")
_INVALID_NAME_CHARS = re.compile(r"[\s:]")
_GROUP_ID_PATTERN = re.compile(r"[0-9]+")
_WHITESPACE = re.compile(r"\s")


def resolve(
    spec: AccountSpec | Mapping[str, Any],
    *,
    settings: AccountkitSettings | None = None,
) -> ResolvedAccount:
    """Resolve an account declaration into a fully-defaulted parameter set.

    Args:
        spec: AccountSpec instance, or a plain mapping of its fields
        settings: Settings providing the group fallback policy (defaults to the
            global settings)

    Returns:
        ResolvedAccount with every default applied

    Raises:
        ValidationError: If a parameter is missing, malformed or contradictory
        PolicyConflictError: If no primary group can be resolved under the
            strict group policy

    Example:
        >>> account = resolve({"title": "deploy", "create_group": False})
        >>> account.primary_group
        'users'
    """
    spec = _coerce_spec(spec)
    settings = settings or get_settings()

    title = spec.title
    if not title or not title.strip():
        raise ValidationError("must not be empty", "title")
    username = _require_name(
        spec.username if spec.username is not None else title, "username"
    )

    home_dir = spec.home_dir if spec.home_dir is not None else f"{DEFAULT_HOME_BASE}/{username}"
    if not home_dir.startswith("/"):
        raise ValidationError(f"must be an absolute path, got '{home_dir}'", "home_dir")

    home_dir_perms = spec.home_dir_perms if spec.home_dir_perms is not None else DEFAULT_HOME_PERMS
    if not _MODE_PATTERN.match(home_dir_perms):
        raise ValidationError(
            f"must be an octal mode string such as '0750', got '{home_dir_perms}'",
            "home_dir_perms",
        )

    shell = spec.shell if spec.shell is not None else DEFAULT_SHELL
    if not shell:
        raise ValidationError("must not be empty", "shell")

    primary_group, group_id = _resolve_group_policy(spec, username, settings)

    account = ResolvedAccount(
        title=title,
        ensure=spec.ensure,
        username=username,
        uid=spec.uid,
        primary_group=primary_group,
        group_id=group_id,
        create_group=spec.create_group,
        shell=shell,
        groups=_resolve_groups(spec.groups),
        comment=spec.comment,
        password=spec.password,
        home_dir=home_dir,
        home_dir_perms=home_dir_perms,
        ssh_dir=f"{home_dir.rstrip('/')}/.ssh",
        ssh_dir_perms=SSH_DIR_PERMS,
        # Explicit False means "leave the directive out", not "managehome => false"
        manage_home=None if spec.manage_home is False else True,
        allowdupe=spec.allowdupe,
        purge=spec.purge,
        system=spec.system,
        ssh_keys=_resolve_ssh_keys(spec, username),
    )

    logger.debug(
        f"Resolved account '{title}': user={username} group={primary_group} "
        f"home={home_dir} keys={len(account.ssh_keys)}"
    )
    return account


def _coerce_spec(spec: AccountSpec | Mapping[str, Any]) -> AccountSpec:
    """Validate a mapping into an AccountSpec, translating pydantic errors."""
    if isinstance(spec, AccountSpec):
        return spec
    if not isinstance(spec, Mapping):
        raise ValidationError(
            f"account parameters must be a mapping, got {type(spec).__name__}"
        )

    try:
        return AccountSpec.model_validate(dict(spec))
    except pydantic.ValidationError as e:
        first = e.errors()[0]
        field_path = ".".join(str(part) for part in first["loc"]) or None
        raise ValidationError(first["msg"], field_path) from e


def _require_name(value: str, field: str) -> str:
    if not value or not value.strip():
        raise ValidationError("must not be empty", field)
    if _INVALID_NAME_CHARS.search(value):
        raise ValidationError(
            f"must not contain whitespace or ':', got '{value}'", field
        )
    return value


def _resolve_group_policy(
    spec: AccountSpec, username: str, settings: AccountkitSettings
) -> tuple[str, int | None]:
    """Return (primary group name, numeric ID for the dedicated group)."""
    if spec.create_group:
        if spec.gid is None:
            # The dedicated group shares the user's number when none is given
            return username, spec.uid
        if isinstance(spec.gid, int):
            if spec.gid < 0:
                raise ValidationError("must be a non-negative group ID", "gid")
            return username, spec.gid
        if _GROUP_ID_PATTERN.fullmatch(spec.gid):
            return username, int(spec.gid)
        raise ValidationError(
            f"must be a numeric group ID when create_group is true, got '{spec.gid}'",
            "gid",
        )

    if spec.gid is not None:
        group_name = str(spec.gid)
        if not group_name.strip():
            raise ValidationError("must not be empty", "gid")
        return group_name, None

    if settings.missing_group_policy == "strict":
        raise PolicyConflictError(
            f"Account '{spec.title}' sets create_group=false without a gid "
            f"and the group policy is strict"
        )

    logger.debug(
        f"Account '{spec.title}' has no dedicated group, falling back to "
        f"'{settings.fallback_group}'"
    )
    return settings.fallback_group, None


def _resolve_groups(groups: list[str]) -> tuple[str, ...]:
    """Validate supplementary groups, dropping repeats but keeping order."""
    resolved: list[str] = []
    for index, group in enumerate(groups):
        if not group or not group.strip():
            raise ValidationError("must not be empty", f"groups.{index}")
        if group not in resolved:
            resolved.append(group)
    return tuple(resolved)


def _resolve_ssh_keys(spec: AccountSpec, username: str) -> tuple[NamedSshKey, ...]:
    """Validate the legacy ssh_key and the ssh_keys mapping, in fan-out order."""
    keys: list[NamedSshKey] = []

    if spec.ssh_key is not None:
        _check_key_field(spec.ssh_key, "ssh_key")
        _check_key_field(spec.ssh_key_type, "ssh_key_type")
        keys.append(
            NamedSshKey(
                name=LEGACY_KEY_NAME,
                key=spec.ssh_key,
                type=spec.ssh_key_type,
                comment=f"{username} SSH Key",
            )
        )

    for name, entry in spec.ssh_keys.items():
        path = f"ssh_keys.{name}"
        if isinstance(entry, SshKeySpec):
            entry = entry.model_dump(exclude_none=True)
        if not isinstance(entry, Mapping):
            raise ValidationError(
                f"must be a mapping with 'key' and 'type', got {type(entry).__name__}",
                path,
            )

        for required in ("key", "type"):
            value = entry.get(required)
            if not isinstance(value, str) or not value:
                raise ValidationError(f"missing or empty '{required}'", path)
            if _WHITESPACE.search(value):
                raise ValidationError(f"'{required}' must not contain whitespace", path)

        unknown = set(entry) - {"key", "type", "comment"}
        if unknown:
            raise ValidationError(
                f"unknown fields {sorted(unknown)}", path
            )

        comment = entry.get("comment")
        if comment is not None and not isinstance(comment, str):
            raise ValidationError("'comment' must be a string", path)
        if comment is not None and ("\n" in comment or "\r" in comment):
            raise ValidationError("'comment' must be a single line", path)

        keys.append(
            NamedSshKey(
                name=name, key=entry["key"], type=entry["type"], comment=comment
            )
        )

    return tuple(keys)


def _check_key_field(value: str, field: str) -> None:
    """A key body or type is one whitespace-free token of an authorized_keys line."""
    if not value:
        raise ValidationError("must not be empty", field)
    if _WHITESPACE.search(value):
        raise ValidationError("must not contain whitespace", field)
