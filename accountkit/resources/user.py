"""User resource for the account's login entry."""

from typing import Any, ClassVar

from pydantic import Field

from .base import Resource


class UserResource(Resource):
    """User resource - the passwd entry of an account.

    Unlike the group, ``gid`` here is always a group *name*: the dedicated
    group, an explicit existing group, or the fallback group.

    ``manage_home`` is three-valued on purpose. ``True`` asks the engine to
    create and manage the home directory; ``None`` leaves the directive out
    entirely, which is what an explicit ``manage_home=False`` on the account
    resolves to.

    Attributes:
        name: Login name
        uid: Numeric user ID (optional - engine allocates if unset)
        gid: Primary group name
        shell: Login shell
        groups: Supplementary group names, in declaration order
        home: Home directory path
        manage_home: True, or None when the directive is absent
        system: Whether this is a system user (default: False)
        allowdupe: Whether a duplicate uid is acceptable (default: False)
        comment: GECOS field (optional)
        password: Password hash (optional, hidden from repr)

    Examples:
        >>> UserResource(
        ...     title="deploy",
        ...     name="deploy",
        ...     gid="deploy",
        ...     shell="/bin/bash",
        ...     home="/home/deploy",
        ...     manage_home=True,
        ... )
    """

    kind: ClassVar[str] = "user"

    name: str
    uid: int | None = None
    gid: str
    shell: str
    groups: tuple[str, ...] = ()
    home: str
    manage_home: bool | None = True
    system: bool = False
    allowdupe: bool = False
    comment: str | None = None
    password: str | None = Field(default=None, repr=False)

    def get_connection_context(self) -> dict[str, Any]:
        """Summary including the login name and primary group.

        The password is never part of the context.
        """
        context = super().get_connection_context()
        context.update({"name": self.name, "gid": self.gid, "home": self.home})
        return context
