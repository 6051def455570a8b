"""Directory resource for home and SSH directories."""

from typing import Any, ClassVar

from .base import Resource


class DirectoryResource(Resource):
    """Directory resource - a directory owned by the account.

    Titled by its path. ``force`` mirrors the account's ``purge`` flag and tells
    the engine it may remove unmanaged contents; it carries no other meaning.

    Attributes:
        path: Absolute directory path
        owner: Owner user name
        group: Owner group name
        mode: Permissions as an octal string, e.g. "0750"
        force: Whether unmanaged contents may be removed (default: False)

    Example:
        >>> DirectoryResource(
        ...     title="/home/deploy/.ssh",
        ...     path="/home/deploy/.ssh",
        ...     owner="deploy",
        ...     group="deploy",
        ...     mode="0700",
        ... )
    """

    kind: ClassVar[str] = "directory"

    path: str
    owner: str
    group: str
    mode: str
    force: bool = False

    def get_connection_context(self) -> dict[str, Any]:
        context = super().get_connection_context()
        context.update({"path": self.path, "mode": self.mode})
        return context
