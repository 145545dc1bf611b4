"""Smart Inventory database management CLI.

Provides commands to create, drop and seed the database schema of the
inventory domain. The provider comes from INVENTORY_DATABASE_URL (or the
INVENTORY_ENV default).

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Create tables and load the sample catalogue
"""

import argparse
import sys

from shared.utils.logging import configure_logging


def setup_database():
    """Create every table that does not exist yet."""
    from shared.domain import init_domain
    from shared.utils.db import setup_db

    print("Initializing inventory domain...")
    domain = init_domain()
    print("Creating inventory database schema...")
    setup_db(domain)
    print("Done.")
    return domain


def drop_database():
    """Drop every table."""
    from shared.domain import init_domain
    from shared.utils.db import drop_db

    print("Initializing inventory domain...")
    domain = init_domain()
    print("Dropping inventory database schema...")
    drop_db(domain)
    print("Done.")


def seed_database():
    """Create the schema and load the sample catalogue into an empty database."""
    from catalogue.utils.seed import seed_catalogue

    domain = setup_database()
    with domain.domain_context():
        seeded = seed_catalogue()
    print("Sample catalogue loaded." if seeded else "Catalogue already has data; nothing seeded.")
    return seeded


def main(argv=None):
    parser = argparse.ArgumentParser(description="Smart Inventory database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Create tables and load sample categories and products")

    args = parser.parse_args(argv)
    configure_logging(log_dir=None)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
