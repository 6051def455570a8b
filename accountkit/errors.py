"""
Accountkit errors.
"""


class AccountkitError(Exception):
    """Base exception for all Accountkit errors."""
    pass


class ValidationError(AccountkitError):
    """Malformed or contradictory account parameters.

    Args:
        message: Human-readable description of the problem
        field_path: Dotted path of the offending parameter, if known
    """

    def __init__(self, message: str, field_path: str | None = None):
        self.message = message
        self.field_path = field_path
        if field_path:
            message = f"{field_path}: {message}"
        super().__init__(message)


class PolicyConflictError(AccountkitError):
    """Parameters are well-formed but the active policy refuses them."""
    pass


class ConfigurationError(AccountkitError):
    """Errors in configuration or in loading account declarations."""
    pass
