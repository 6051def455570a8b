"""
SSH key fan-out - one AuthorizedKeyResource per declared key.
"""

import logging

import pydantic

from ..errors import ValidationError
from ..models import ResolvedAccount
from ..resources import AuthorizedKeyResource, KeyIdentity

logger = logging.getLogger(__name__)


def fan_out(account: ResolvedAccount) -> tuple[AuthorizedKeyResource, ...]:
    """Expand the account's keys into individually titled key resources.

    Keys come out in declaration order (the legacy ``ssh_key`` first) so the
    engine can diff them deterministically. A key without an explicit comment
    uses its own title as the comment.

    Args:
        account: Resolved account parameters

    Returns:
        Tuple of AuthorizedKeyResource, empty when the account has no keys

    Raises:
        ValidationError: If a key name is blank or two keys share a title
    """
    resources: list[AuthorizedKeyResource] = []
    seen: dict[str, str] = {}

    for entry in account.ssh_keys:
        try:
            identity = KeyIdentity(username=account.username, key_name=entry.name)
        except pydantic.ValidationError as e:
            raise ValidationError(
                "key name must not be empty", f"ssh_keys.{entry.name}"
            ) from e

        if identity.title in seen:
            raise ValidationError(
                f"duplicate key title '{identity.title}' "
                f"(also declared as '{seen[identity.title]}')",
                f"ssh_keys.{entry.name}",
            )
        seen[identity.title] = entry.name

        resources.append(
            AuthorizedKeyResource(
                title=identity.title,
                ensure=account.ensure,
                key_material=entry.key,
                key_type=entry.type,
                owner=account.username,
                comment=entry.comment if entry.comment is not None else identity.title,
            )
        )
        logger.debug(f"Fanned out key {identity.title} ({entry.type})")

    return tuple(resources)
