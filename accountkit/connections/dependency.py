"""Dependency connection - a "must apply before" ordering edge."""

from .base import Connection


class DependencyConnection(Connection):
    """Ordering edge: ``to_resource`` must be applied before ``from_resource``.

    DependencyConnection only establishes ordering. It is advisory metadata for
    the convergence engine; nothing in Accountkit applies or retries it.

    Example:
        group = GroupResource(title="deploy", name="deploy")
        user = UserResource(title="deploy", name="deploy", gid="deploy", ...)
        edge = DependencyConnection(from_resource=user, to_resource=group)
        # group[deploy] is applied before user[deploy]
    """

    @property
    def before(self) -> str:
        """Reference of the resource applied first."""
        return self.to_resource.ref

    @property
    def after(self) -> str:
        """Reference of the resource applied second."""
        return self.from_resource.ref

    def __str__(self) -> str:
        return f"{self.before} → {self.after}"
