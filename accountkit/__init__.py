"""
Accountkit - Declarative account provisioning primitives.

Describe an account once (username, identity numbers, shell, home directory
policy, group policy, SSH keys) and Accountkit derives the ordered set of
primitive resources a convergence engine needs to realise it:

- a dedicated group (optional)
- the user
- the home directory and its .ssh directory
- one authorized key per declared public key

Accountkit never touches the host; it only produces descriptors and the
ordering edges between them.
"""

from .core import AccountkitCore
from .errors import (
    AccountkitError,
    ConfigurationError,
    PolicyConflictError,
    ValidationError,
)
from .models import AccountSpec, ResolvedAccount, SshKeySpec
from .settings import AccountkitSettings, get_settings, reload_settings

__version__ = "0.1.0"
__all__ = [
    "AccountSpec",
    "AccountkitCore",
    "AccountkitError",
    "AccountkitSettings",
    "ConfigurationError",
    "PolicyConflictError",
    "ResolvedAccount",
    "SshKeySpec",
    "ValidationError",
    "get_settings",
    "reload_settings",
]
