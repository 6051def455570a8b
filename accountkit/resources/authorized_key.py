"""Authorized key resource for entries in ~/.ssh/authorized_keys."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator

from .base import Resource


class KeyIdentity(BaseModel):
    """Structured identity of one authorized key.

    The resource title is computed as ``{username}_{key_name}`` instead of being
    interpolated ad hoc, so every key title is built and validated the same way.
    Surrounding whitespace is stripped from the key name; two names that only
    differ by it therefore collide.

    Example:
        >>> KeyIdentity(username="deploy", key_name="laptop").title
        'deploy_laptop'
    """

    model_config = ConfigDict(frozen=True)

    username: str
    key_name: str

    @field_validator("key_name")
    @classmethod
    def _check_key_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("key name must not be empty")
        return value

    @property
    def title(self) -> str:
        return f"{self.username}_{self.key_name}"


class AuthorizedKeyResource(Resource):
    """Authorized key resource - one public key line for the account.

    Attributes:
        key_material: Base64 public key body, without type or comment
        key_type: Key algorithm, e.g. "ssh-ed25519"
        owner: User whose authorized_keys file holds the key
        comment: Trailing comment of the key line (optional)

    Example:
        >>> AuthorizedKeyResource(
        ...     title="deploy_laptop",
        ...     key_material="AAAAC3NzaC1lZDI1NTE5AAAA...",
        ...     key_type="ssh-ed25519",
        ...     owner="deploy",
        ...     comment="deploy_laptop",
        ... )
    """

    kind: ClassVar[str] = "authorized_key"

    key_material: str
    key_type: str
    owner: str
    comment: str | None = None

    def to_line(self) -> str:
        """Render the key as an authorized_keys line."""
        parts = [self.key_type, self.key_material]
        if self.comment:
            parts.append(self.comment)
        return " ".join(parts)
