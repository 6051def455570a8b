"""
Dependency graph builder - attaches ordering edges and packages the handoff.

The graph for one account is a fixed chain::

    group → user → home directory → SSH directory → each authorized key

Edges touching a missing node (no group without ``create_group``) are simply
omitted. When the account is absent the chain runs the other way round, since a
group cannot be removed while it is still a user's primary group.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Any

import networkx as nx
from pydantic import BaseModel, ConfigDict, model_validator

from ..connections import DependencyConnection
from ..errors import ValidationError
from ..resources import (
    AuthorizedKeyResource,
    DirectoryResource,
    GroupResource,
    Resource,
    UserResource,
)

logger = logging.getLogger(__name__)


class ResourcePlan(BaseModel):
    """Ordered resources plus the edges between them.

    This is the whole contract with the convergence engine. Resources keep the
    order they were derived in; ``topological_order()`` gives an apply order
    that honours every edge and breaks ties by that declaration order.

    Attributes:
        resources: Descriptors in declaration order
        edges: Ordering edges between those descriptors

    Example:
        >>> plan = build_plan(derive(account, fan_out(account)))
        >>> plan.edges_from("directory[/home/deploy]")
        ('directory[/home/deploy/.ssh]',)
        >>> plan.to_handoff()[0]["kind"]
        'group'
    """

    model_config = ConfigDict(frozen=True)

    resources: tuple[Resource, ...] = ()
    edges: tuple[DependencyConnection, ...] = ()

    @model_validator(mode="after")
    def _check_references(self) -> "ResourcePlan":
        refs = [resource.ref for resource in self.resources]
        if len(refs) != len(set(refs)):
            raise ValueError("resource references must be unique")
        known = set(refs)
        for edge in self.edges:
            if edge.before not in known or edge.after not in known:
                raise ValueError(f"edge {edge} references an unknown resource")
        return self

    def __len__(self) -> int:
        return len(self.resources)

    @property
    def refs(self) -> tuple[str, ...]:
        return tuple(resource.ref for resource in self.resources)

    def get(self, ref: str) -> Resource:
        """Look up a resource by reference.

        Raises:
            KeyError: If no resource has that reference
        """
        for resource in self.resources:
            if resource.ref == ref:
                return resource
        raise KeyError(f"No resource with reference '{ref}'")

    def edges_from(self, ref: str) -> tuple[str, ...]:
        """References that must be applied after ``ref``."""
        return tuple(edge.after for edge in self.edges if edge.before == ref)

    def edges_to(self, ref: str) -> tuple[str, ...]:
        """References that must be applied before ``ref``."""
        return tuple(edge.before for edge in self.edges if edge.after == ref)

    def to_graph(self) -> nx.DiGraph:
        """Build a directed graph with an arc from each resource to its successors."""
        graph = nx.DiGraph()
        for index, resource in enumerate(self.resources):
            graph.add_node(resource.ref, index=index, kind=resource.kind)
        for edge in self.edges:
            graph.add_edge(edge.before, edge.after)
        return graph

    def topological_order(self) -> list[Resource]:
        """Resources in an order that honours every edge.

        Returns:
            List of resources; ties are broken by declaration order

        Raises:
            ValueError: If the edges contain a cycle
        """
        graph = self.to_graph()
        if not nx.is_directed_acyclic_graph(graph):
            cycle = [source for source, _ in nx.find_cycle(graph)]
            cycle.append(cycle[0])
            raise ValueError(f"Dependency cycle detected: {' → '.join(cycle)}")

        order = nx.lexicographical_topological_sort(
            graph, key=lambda ref: graph.nodes[ref]["index"]
        )
        by_ref = {resource.ref: resource for resource in self.resources}
        return [by_ref[ref] for ref in order]

    def to_handoff(self) -> list[dict[str, Any]]:
        """Render the plan in the shape the convergence engine consumes.

        Returns:
            One mapping per resource, in declaration order, with ``kind``,
            ``title``, ``ref``, ``attributes`` and ``before`` (references of the
            resources that must be applied after this one)
        """
        return [
            {
                "kind": resource.kind,
                "title": resource.title,
                "ref": resource.ref,
                "attributes": resource.attributes(),
                "before": list(self.edges_from(resource.ref)),
            }
            for resource in self.resources
        ]


def build_plan(resources: Sequence[Resource]) -> ResourcePlan:
    """Attach the fixed ordering chain to one account's resources.

    Args:
        resources: Output of ``derive`` for a single account

    Returns:
        ResourcePlan with the resources in the given order and their edges
    """
    groups = [r for r in resources if isinstance(r, GroupResource)]
    users = [r for r in resources if isinstance(r, UserResource)]
    # derive() emits the home directory before the SSH directory nested in it
    directories = [r for r in resources if isinstance(r, DirectoryResource)]
    keys = [r for r in resources if isinstance(r, AuthorizedKeyResource)]

    stages: list[list[Resource]] = [groups, users]
    stages.extend([directory] for directory in directories)
    stages.append(keys)
    stages = [stage for stage in stages if stage]

    removing = any(resource.ensure == "absent" for resource in users)

    edges: list[DependencyConnection] = []
    for earlier, later in zip(stages, stages[1:]):
        for first in earlier:
            for second in later:
                if removing:
                    edge = DependencyConnection(from_resource=first, to_resource=second)
                else:
                    edge = DependencyConnection(from_resource=second, to_resource=first)
                edges.append(edge)

    plan = ResourcePlan(resources=tuple(resources), edges=tuple(edges))
    logger.debug(
        f"Built plan with {len(plan.resources)} resources and edges "
        f"{[str(edge) for edge in plan.edges]}"
    )
    return plan


def merge_plans(plans: Iterable[ResourcePlan]) -> ResourcePlan:
    """Combine independent account plans into one.

    No edges are added between accounts; they stay unordered relative to each
    other.

    Raises:
        ValidationError: If two plans contain a resource with the same reference
    """
    resources: list[Resource] = []
    edges: list[DependencyConnection] = []
    seen: set[str] = set()

    for plan in plans:
        for resource in plan.resources:
            if resource.ref in seen:
                raise ValidationError(
                    f"resource {resource.ref} is declared by more than one account"
                )
            seen.add(resource.ref)
            resources.append(resource)
        edges.extend(plan.edges)

    return ResourcePlan(resources=tuple(resources), edges=tuple(edges))
