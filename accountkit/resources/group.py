"""Group resource for the dedicated primary group of an account."""

from typing import ClassVar

from .base import Resource


class GroupResource(Resource):
    """Group resource - the account's dedicated primary group.

    Only derived when the account sets ``create_group``. Its ``gid`` is a group
    ID number; leaving it unset lets the engine allocate one.

    Attributes:
        name: Group name (always the account's username)
        system: Whether to allocate from the system range (default: False)
        gid: Numeric group ID (optional)

    Examples:
        >>> GroupResource(title="deploy", name="deploy")
        >>> GroupResource(title="admin", name="sysadmin", system=True, gid=777)
    """

    kind: ClassVar[str] = "group"

    name: str
    system: bool = False
    gid: int | None = None
