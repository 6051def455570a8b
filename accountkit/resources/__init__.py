"""
Accountkit Resources - immutable descriptors derived from an account.
"""

from .authorized_key import AuthorizedKeyResource, KeyIdentity
from .base import Resource
from .directory import DirectoryResource
from .group import GroupResource
from .user import UserResource

__all__ = [
    "AuthorizedKeyResource",
    "DirectoryResource",
    "GroupResource",
    "KeyIdentity",
    "Resource",
    "UserResource",
]
