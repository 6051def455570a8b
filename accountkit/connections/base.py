"""Base connection class for Accountkit."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from accountkit.resources.base import Resource


class Connection(BaseModel):
    """Base connection class - a directed relationship between two resources.

    Connections are kept apart from the resources they join: descriptors stay
    immutable value objects and the engine can schedule work from the edges
    alone, without inspecting domain attributes.

    Attributes:
        from_resource: Source resource (the dependent side)
        to_resource: Target resource (the dependency)
        description: Optional human-readable reason for the connection
    """

    model_config = ConfigDict(frozen=True)

    from_resource: Resource = Field(
        ..., description="Resource that depends on to_resource"
    )
    to_resource: Resource = Field(
        ..., description="Resource this connection points to"
    )
    description: str | None = Field(
        default=None,
        description="Human-readable reason for the connection",
    )

    def get_connection_context(self) -> dict[str, Any]:
        """Get a summary of this connection.

        Returns:
            Dict with the connection type and both endpoint references
        """
        return {
            "type": self.__class__.__name__,
            "from_resource": self.from_resource.ref,
            "to_resource": self.to_resource.ref,
            "description": self.description,
        }
