"""Base resource class for Accountkit."""

from typing import Any, ClassVar, Literal

from pydantic import BaseModel, ConfigDict


class Resource(BaseModel):
    """Base resource class - all derived descriptors inherit from this.

    A resource is an immutable statement of desired OS-level state. It knows
    nothing about how it is applied: the external convergence engine selects a
    provider from ``kind``, applies ``attributes()`` idempotently and honours
    the ordering edges attached by the planner.

    Identity:
    Titles only need to be unique per kind, so a group and a user may both be
    titled ``deploy``. The ``ref`` property (``kind[title]``) is the identity
    used everywhere edges are expressed.

    Attributes:
        kind: Tag the convergence engine uses to pick a provider
        title: Identity of the resource within its kind
        ensure: Whether the resource should be present or absent

    Example:
        >>> group = GroupResource(title="deploy", name="deploy")
        >>> group.ref
        'group[deploy]'
        >>> group.attributes()
        {'ensure': 'present', 'name': 'deploy', 'system': False}
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: ClassVar[str] = "resource"

    title: str
    ensure: Literal["present", "absent"] = "present"

    @property
    def ref(self) -> str:
        """Reference used by ordering edges, e.g. ``user[deploy]``."""
        return f"{self.kind}[{self.title}]"

    def attributes(self) -> dict[str, Any]:
        """Attribute mapping handed to the convergence engine.

        Unset values are left out so the engine applies its own defaults for
        them, which is different from passing an explicit value.

        Returns:
            Dict of attribute name to JSON-compatible value, without the title
        """
        return self.model_dump(mode="json", exclude={"title"}, exclude_none=True)

    def get_connection_context(self) -> dict[str, Any]:
        """Get a short summary of this resource for logs and error messages.

        Returns:
            Dict with kind, title and ref
        """
        return {
            "kind": self.kind,
            "title": self.title,
            "ref": self.ref,
        }
