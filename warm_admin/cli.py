# warm_admin/cli.py
"""
Create (or re-key) the admin panel account.

Reads the database and admin settings from the environment / .env and
prints the credentials once to the operator's terminal.

    create-admin            # create if missing
    create-admin --force    # also reset the password of an existing admin
"""
import argparse
import logging
import sys

from pydantic import ValidationError as SchemaError

from warm_admin.core.config import load_provision_config
from warm_admin.core.exceptions import AdminError
from warm_admin.core.logging_config import setup_logging
from warm_admin.schemas.admin import ProvisionAction, ProvisionResult
from warm_admin.services.provisioner import provision

log = logging.getLogger("warm_admin.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="create-admin",
        description="Create the admin panel account, or reset its password with --force.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="update the password of an existing admin",
    )
    return parser


def report(result: ProvisionResult):
    """Operator-facing summary on stdout. The only place the password is shown."""
    if result.action == ProvisionAction.EXISTS:
        print("\n[WARN] Admin already exists!")
        print("Do you want to update the password? (Run with --force to update)")
        return

    if result.action == ProvisionAction.UPDATED:
        print("\n[OK] Password updated!")
    else:
        print("\n" + "=" * 32)
        print("[OK] Admin created successfully!")
        print("=" * 32)

    print(f"Email: {result.email}")
    print(f"Username: {result.username}")
    print(f"Password: {result.password}")
    print("=" * 32 + "\n")


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging("create-admin")

    try:
        config = load_provision_config(force_update=args.force)
    except SchemaError as e:
        for err in e.errors(include_input=False):
            field = ".".join(str(part) for part in err["loc"])
            log.error(f"❌ Invalid setting {field}: {err['msg']}")
        return 1

    try:
        result = provision(config)
    except AdminError as e:
        log.error(f"❌ Error: {e}")
        return 1

    report(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
