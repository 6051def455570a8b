"""
Accountkit Connections - ordering edges between derived resources.
"""

from .base import Connection
from .dependency import DependencyConnection

__all__ = [
    "Connection",
    "DependencyConnection",
]
