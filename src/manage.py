"""BlueSpring database management CLI.

Creates and drops the database schemas of every domain backed by a SQL
provider, and seeds the starter catalogue.

Usage:
    python src/manage.py setup-db       # Create all tables
    python src/manage.py drop-db        # Drop all tables
    python src/manage.py seed-products  # Add the starter catalogue
"""

import argparse
import sys

from domains import DOMAIN_NAMES, get_domain
from shared.db import drop_db, setup_db

STARTER_CATALOGUE = [
    {"name": "Premium", "size": "8 oz", "price": 3.99},
    {"name": "Classic", "size": "16 oz", "price": 6.99},
    {"name": "Grande", "size": "32 oz", "price": 12.99},
    {"name": "Family", "size": "50 oz", "price": 19.99},
    {"name": "Office", "size": "5 Gallon", "price": 24.99},
]


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    for name in domains or DOMAIN_NAMES:
        print(f"Creating {name} database schema...")
        touched = setup_db(get_domain(name))
        print(f"  {name} schema ready ({', '.join(touched) or 'no SQL providers'}).")
    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    for name in domains or DOMAIN_NAMES:
        print(f"Dropping {name} database schema...")
        drop_db(get_domain(name))
        print(f"  {name} schema dropped.")
    print("Done.")


def seed_products():
    from ordering.product.management import AddProduct

    ordering = get_domain("ordering")
    with ordering.domain_context():
        for product in STARTER_CATALOGUE:
            ordering.process(AddProduct(stock=100, **product), asynchronous=False)
            print(f"  added {product['name']} ({product['size']})")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="BlueSpring database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    subparsers.add_parser("seed-products", help="Add the starter product catalogue")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    elif args.command == "seed-products":
        seed_products()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
