"""
Account Provisioning Example - declare accounts and preview their resources.

Run from this directory:
    accountkit plan
    accountkit plan --json

Accountkit only derives resource descriptors; applying them to a host is the
job of the convergence engine that consumes the plan.
"""

from accountkit import AccountSpec

# Everything defaulted: group 'deploy', home /home/deploy, shell /bin/bash
deploy = AccountSpec(title="deploy")

# Administrator with a custom name, shell, home and two SSH keys
admin = AccountSpec(
    title="admin",
    username="sysadmin",
    uid=777,
    shell="/bin/zsh",
    system=True,
    manage_home=False,
    home_dir="/opt/admin",
    groups=["sudo", "users"],
    ssh_keys={
        "laptop": {"key": "AAAAC3NzaC1lZDI1NTE5AAAAIExampleLaptopKey", "type": "ssh-ed25519"},
        "yubikey": {"key": "AAAAB3NzaC1yc2EAAAADAQABAAABExampleYubiKey", "type": "ssh-rsa"},
    },
)

# Accounts can also be listed as plain mappings
accounts = [
    {
        "title": "backup",
        "create_group": False,
        "gid": "staff",
        "purge": True,
        "ssh_key": "AAAAB3NzaC1yc2EAAAADAQABAAABExampleBackupKey",
    },
]
