"""
Pydantic models for Accountkit account declarations.

This module contains the input side of the pipeline:
- AccountSpec: a raw, partially specified account declaration
- SshKeySpec: one entry of the ssh_keys mapping
- ResolvedAccount: the fully-defaulted parameter set produced by the resolver
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

# Defaults applied by the resolver
DEFAULT_SHELL = "/bin/bash"
DEFAULT_HOME_BASE = "/home"
DEFAULT_HOME_PERMS = "0750"
DEFAULT_SSH_KEY_TYPE = "ssh-rsa"

# The SSH directory mode is fixed, never configurable
SSH_DIR_PERMS = "0700"

Ensure = Literal["present", "absent"]


class SshKeySpec(BaseModel):
    """A single named public key as declared in AccountSpec.ssh_keys."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    key: str
    type: str
    comment: str | None = None


class AccountSpec(BaseModel):
    """Desired state of one account, before defaults are applied.

    Only ``title`` is required; every other parameter is optional and filled in
    by ``accountkit.intake.resolver.resolve``. Values left as ``None`` mean
    "unset" and are distinct from an explicit value.

    ``gid`` deliberately carries two meanings: with ``create_group`` it is the
    numeric ID for the dedicated group, without it it is the name of an
    existing primary group.

    ``ssh_keys`` is kept loosely typed here so that malformed entries are
    reported by the resolver with the offending key name.

    Examples:
        >>> AccountSpec(title="deploy")
        >>> AccountSpec(
        ...     title="admin",
        ...     username="sysadmin",
        ...     shell="/bin/zsh",
        ...     groups=["sudo"],
        ...     ssh_keys={"laptop": {"key": "AAAAB3Nza...", "type": "ssh-ed25519"}},
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    title: str
    ensure: Ensure = "present"
    username: str | None = None
    uid: int | None = Field(default=None, ge=0)
    gid: int | str | None = None
    shell: str | None = None
    groups: list[str] = Field(default_factory=list)
    comment: str | None = None
    password: str | None = Field(default=None, repr=False)
    home_dir: str | None = None
    home_dir_perms: str | None = None
    create_group: bool = True
    manage_home: bool | None = None
    allowdupe: bool = False
    purge: bool = False
    system: bool = False
    ssh_key: str | None = None
    ssh_key_type: str = DEFAULT_SSH_KEY_TYPE
    ssh_keys: dict[str, Any] = Field(default_factory=dict)


class NamedSshKey(BaseModel):
    """An SSH key entry after validation, still carrying its declared name."""

    model_config = ConfigDict(frozen=True)

    name: str
    key: str
    type: str
    comment: str | None = None


class ResolvedAccount(BaseModel):
    """Fully-defaulted, internally consistent account parameters.

    Attributes:
        primary_group: Group *name* the user belongs to (username, explicit gid
            or the fallback group)
        group_id: Numeric ID for the dedicated group; only meaningful when
            create_group is true
        manage_home: True to let the engine manage the home directory, None when
            management was explicitly turned off
        ssh_keys: Validated keys in declaration order, legacy ssh_key first
    """

    model_config = ConfigDict(frozen=True)

    title: str
    ensure: Ensure
    username: str
    uid: int | None
    primary_group: str
    group_id: int | None
    create_group: bool
    shell: str
    groups: tuple[str, ...]
    comment: str | None
    password: str | None = Field(repr=False)
    home_dir: str
    home_dir_perms: str
    ssh_dir: str
    ssh_dir_perms: str = SSH_DIR_PERMS
    manage_home: bool | None
    allowdupe: bool
    purge: bool
    system: bool
    ssh_keys: tuple[NamedSshKey, ...] = ()
