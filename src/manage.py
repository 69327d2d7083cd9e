"""Backoffice database and account management CLI.

Usage:
    python src/manage.py setup-db                  # Create all tables
    python src/manage.py drop-db                   # Drop all tables
    python src/manage.py create-admin NAME EMAIL   # Bootstrap an admin (prompts for password)
"""

import argparse
import getpass
import sys


def _domain():
    from backoffice.domain import backoffice

    backoffice.init()
    return backoffice


def setup_databases():
    """Create database schemas for every SQL provider."""
    from backoffice.utils.db import setup_db

    domain = _domain()
    print("Creating backoffice database schema...")
    created = setup_db(domain)
    if not created:
        print("  No SQL provider configured (in-memory stores need no schema).")
    for name in created:
        print(f"  {name} schema ready.")
    print("Done.")


def drop_databases():
    """Drop database schemas for every SQL provider."""
    from backoffice.utils.db import drop_db

    domain = _domain()
    print("Dropping backoffice database schema...")
    for name in drop_db(domain):
        print(f"  {name} schema dropped.")
    print("Done.")


def create_admin(name, email, password=None, role=None):
    """Create the first admin so somebody can sign in to the dashboard."""
    from backoffice.admin.management import AddAdmin

    domain = _domain()
    password = password or getpass.getpass("Password: ")

    with domain.domain_context():
        admin_id = domain.process(
            AddAdmin(name=name, email=email, password=password, role=role),
            asynchronous=False,
        )
    print(f"Admin {email} created with id {admin_id}.")
    return admin_id


def main():
    parser = argparse.ArgumentParser(description="Backoffice management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    admin_parser = subparsers.add_parser("create-admin", help="Create an admin account")
    admin_parser.add_argument("name")
    admin_parser.add_argument("email")
    admin_parser.add_argument("--password", help="Password (prompted for when omitted)")
    admin_parser.add_argument("--role", choices=["Admin", "Owner"], default="Owner")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases()
    elif args.command == "drop-db":
        drop_databases()
    elif args.command == "create-admin":
        create_admin(args.name, args.email, password=args.password, role=args.role)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
