"""
Terraform-style output formatting for Accountkit plans.

Renders a ResourcePlan the way `terraform plan` lists resources: a symbol per
resource, its attributes, and the resources it must be applied before.
"""

from typing import Any, Optional

from rich.console import Console
from rich.text import Text

from .assembly import ResourcePlan

# Attributes whose values are never printed
SENSITIVE_ATTRIBUTES = {"password"}


class PlanFormatter:
    """
    Terraform-style formatter for Accountkit plans.

    Uses `+` for resources that should be present and `-` for resources that
    should be absent.
    """

    def __init__(self, console: Optional[Console] = None):
        """Initialize formatter with Rich console."""
        self.console = console or Console()

        self.colors = {
            'present': 'green',
            'absent': 'red',
            'header': 'bold blue',
            'attribute': 'cyan',
            'comment': 'dim',
        }

        self.symbols = {
            'present': '+',
            'absent': '-',
        }

    def format_plan(self, plan: ResourcePlan) -> Text:
        """
        Format a plan showing every resource and its ordering edges.

        Args:
            plan: Plan to render

        Returns:
            Rich Text ready to print
        """
        output = Text()
        output.append(
            "Accountkit derived the following resources:\n\n",
            style=self.colors['header'],
        )

        for resource in plan.topological_order():
            attributes = resource.attributes()
            ensure = attributes.pop('ensure', 'present')
            color = self.colors[ensure]

            output.append(f"  {self.symbols[ensure]} {resource.ref}", style=color)
            output.append(" {\n")
            for name, value in attributes.items():
                output.append(f"      {name}", style=self.colors['attribute'])
                output.append(f" = {self._format_value(name, value)}\n")

            before = plan.edges_from(resource.ref)
            if before:
                output.append(
                    f"      # before: {', '.join(before)}\n",
                    style=self.colors['comment'],
                )
            output.append("    }\n\n")

        output.append(
            f"Plan: {len(plan.resources)} resources, {len(plan.edges)} ordering edges.\n",
            style="bold",
        )
        return output

    def print_plan(self, plan: ResourcePlan) -> None:
        self.console.print(self.format_plan(plan))

    def _format_value(self, name: str, value: Any) -> str:
        if name in SENSITIVE_ATTRIBUTES:
            return "(sensitive value)"
        if isinstance(value, str):
            return f'"{value}"'
        if isinstance(value, bool):
            return str(value).lower()
        if isinstance(value, list):
            return "[" + ", ".join(f'"{item}"' for item in value) + "]"
        return str(value)
