"""
Assembly - derivation of resources and the ordering graph between them.
"""

from .deriver import derive
from .fanout import fan_out
from .planner import ResourcePlan, build_plan, merge_plans

__all__ = [
    "ResourcePlan",
    "build_plan",
    "derive",
    "fan_out",
    "merge_plans",
]
