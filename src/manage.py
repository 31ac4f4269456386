"""Products database management CLI.

Usage:
    python src/manage.py setup-db   # Create tables (SQL overlays only)
    python src/manage.py drop-db    # Drop tables
    python src/manage.py seed-db    # Insert sample products into an empty collection
"""

import argparse
import sys


def _domain():
    from products.domain import products

    print("Initializing products domain...")
    products.init()
    return products


def setup_database():
    from products.utils.db import setup_db

    domain = _domain()
    print("Creating products database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from products.utils.db import drop_db

    domain = _domain()
    print("Dropping products database schema...")
    drop_db(domain)
    print("Done.")


def seed_database():
    from products.product.seed import seed_db

    domain = _domain()
    inserted = seed_db(domain)
    print(f"Seeded {inserted} products." if inserted else "Collection not empty, nothing seeded.")


def main():
    parser = argparse.ArgumentParser(description="Products database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed-db", help="Insert sample products if the collection is empty")

    args = parser.parse_args()

    commands = {
        "setup-db": setup_database,
        "drop-db": drop_database,
        "seed-db": seed_database,
    }
    command = commands.get(args.command)
    if command is None:
        parser.print_help()
        sys.exit(1)
    command()


if __name__ == "__main__":
    main()
