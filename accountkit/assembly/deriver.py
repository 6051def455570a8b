"""
Resource derivation - turns resolved account parameters into descriptors.
"""

import logging
from collections.abc import Sequence

from ..models import ResolvedAccount
from ..resources import (
    AuthorizedKeyResource,
    DirectoryResource,
    GroupResource,
    Resource,
    UserResource,
)

logger = logging.getLogger(__name__)


def derive(
    account: ResolvedAccount, keys: Sequence[AuthorizedKeyResource] = ()
) -> tuple[Resource, ...]:
    """Derive the complete resource set for one account.

    Emits, in this order: the dedicated group (only with ``create_group``), the
    user, the home directory, the SSH directory and the fanned-out keys. The
    SSH directory is emitted even without keys so that ``.ssh`` exists for
    keys added later.

    Args:
        account: Resolved account parameters
        keys: Key resources produced by ``fan_out``

    Returns:
        Tuple of resources in declaration order
    """
    resources: list[Resource] = []

    if account.create_group:
        resources.append(
            GroupResource(
                title=account.title,
                ensure=account.ensure,
                name=account.username,
                system=account.system,
                gid=account.group_id,
            )
        )

    resources.append(
        UserResource(
            title=account.title,
            ensure=account.ensure,
            name=account.username,
            uid=account.uid,
            gid=account.primary_group,
            shell=account.shell,
            groups=account.groups,
            home=account.home_dir,
            manage_home=account.manage_home,
            system=account.system,
            allowdupe=account.allowdupe,
            comment=account.comment,
            password=account.password,
        )
    )

    resources.append(
        _directory(account, account.home_dir, account.home_dir_perms)
    )
    resources.append(
        _directory(account, account.ssh_dir, account.ssh_dir_perms)
    )

    resources.extend(keys)

    logger.debug(
        f"Derived {len(resources)} resources for account '{account.title}': "
        f"{[r.ref for r in resources]}"
    )
    return tuple(resources)


def _directory(account: ResolvedAccount, path: str, mode: str) -> DirectoryResource:
    return DirectoryResource(
        title=path,
        ensure=account.ensure,
        path=path,
        owner=account.username,
        group=account.primary_group,
        mode=mode,
        force=account.purge,
    )
