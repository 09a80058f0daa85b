"""Shipping database management CLI.

Creates and drops the database schema, and stores the sample ports and
voyages.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Store sample locations and voyages
"""

import argparse
import sys


def setup_database():
    from shipping.domain import shipping
    from shipping.utils.db import setup_db

    print("Initializing shipping domain...")
    shipping.init()
    print("Creating shipping database schema...")
    setup_db(shipping)
    print("Done.")


def drop_database():
    from shipping.domain import shipping
    from shipping.utils.db import drop_db

    print("Initializing shipping domain...")
    shipping.init()
    print("Dropping shipping database schema...")
    drop_db(shipping)
    print("Done.")


def seed():
    from shipping.domain import shipping
    from shipping.reference.samples import seed_reference_data

    print("Initializing shipping domain...")
    shipping.init()
    with shipping.domain_context():
        seed_reference_data()
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Shipping database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Store the sample locations and voyages")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
