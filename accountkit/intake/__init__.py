"""
Intake - validation and defaulting of raw account declarations.
"""

from .resolver import LEGACY_KEY_NAME, resolve

__all__ = ["LEGACY_KEY_NAME", "resolve"]
