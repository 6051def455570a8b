"""
Accountkit Core - declarative account provisioning.

Plan Pipeline: Resolve parameters → Fan out SSH keys → Derive resources → Attach edges
File Pipeline: Load declarations from main.py → Plan each account → Merge plans
"""

import importlib.util
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from .assembly import ResourcePlan, build_plan, derive, fan_out, merge_plans
from .errors import ConfigurationError
from .intake import resolve
from .models import AccountSpec
from .settings import AccountkitSettings, get_settings

logger = logging.getLogger(__name__)

AccountInput = AccountSpec | Mapping[str, Any]


class AccountkitCore:
    """Main coordinator for the Accountkit pipeline."""

    def __init__(self, settings: AccountkitSettings | None = None):
        """
        Initialize AccountkitCore.

        Args:
            settings: Settings to use (defaults to the global settings)
        """
        self.settings = settings or get_settings()
        logger.debug(
            f"AccountkitCore initialized (group policy: "
            f"{self.settings.missing_group_policy})"
        )

    def plan(self, spec: AccountInput) -> ResourcePlan:
        """
        Full pipeline for one account: resolve → fan out → derive → edges.

        Either returns a complete plan or raises before anything is produced.

        Args:
            spec: AccountSpec or a mapping of its fields

        Returns:
            ResourcePlan for the account

        Raises:
            ValidationError: If the parameters are malformed
            PolicyConflictError: If the group policy rejects the account
        """
        account = resolve(spec, settings=self.settings)
        keys = fan_out(account)
        resources = derive(account, keys)
        plan = build_plan(resources)
        logger.info(
            f"Planned account '{account.title}': {len(plan.resources)} resources, "
            f"{len(plan.edges)} edges"
        )
        return plan

    def plan_many(self, specs: Iterable[AccountInput]) -> ResourcePlan:
        """
        Plan several independent accounts and merge the results.

        Args:
            specs: Account declarations, in the order they should appear

        Returns:
            Merged ResourcePlan without cross-account edges

        Raises:
            ValidationError: If any account is malformed or two accounts derive
                the same resource
        """
        plans = [self.plan(spec) for spec in specs]
        merged = merge_plans(plans)
        logger.info(f"Planned {len(plans)} accounts ({len(merged.resources)} resources)")
        return merged

    def plan_file(self, main_file: Path) -> ResourcePlan:
        """
        Load account declarations from a Python file and plan all of them.

        Args:
            main_file: Path to main.py with account declarations

        Returns:
            Merged ResourcePlan
        """
        logger.info(f"Starting Accountkit plan for: {main_file}")
        accounts = self._load_accounts(main_file)
        logger.info(f"Loaded {len(accounts)} accounts")
        return self.plan_many(accounts)

    def _load_accounts(self, main_file: Path) -> list[AccountInput]:
        """
        Load account declarations from main.py by executing it.

        Every module-level AccountSpec is collected, followed by the entries of
        an optional module-level ``accounts`` list (AccountSpec or mappings).

        Args:
            main_file: Path to main.py

        Returns:
            List of account declarations

        Raises:
            ConfigurationError: If the file is missing, fails to load or
                declares nothing
        """
        if not main_file.exists():
            raise ConfigurationError(f"File not found: {main_file}")

        # Load the module dynamically
        spec = importlib.util.spec_from_file_location("accounts_main", main_file)
        if spec is None or spec.loader is None:
            raise ConfigurationError(f"Could not load {main_file}")

        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            raise ConfigurationError(f"Failed to load {main_file}: {e}") from e

        accounts: list[AccountInput] = []
        for name, obj in vars(module).items():
            if isinstance(obj, AccountSpec):
                accounts.append(obj)
                logger.debug(f"Found account: {name} ({obj.title})")

        declared = getattr(module, "accounts", None)
        if declared is not None:
            if not isinstance(declared, (list, tuple)):
                raise ConfigurationError(
                    f"'accounts' in {main_file} must be a list, got {type(declared).__name__}"
                )
            for obj in declared:
                # Skip specs already collected from module globals
                if any(obj is seen for seen in accounts):
                    continue
                accounts.append(obj)

        if not accounts:
            raise ConfigurationError(f"No accounts found in {main_file}")

        return accounts
