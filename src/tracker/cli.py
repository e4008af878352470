#!/usr/bin/env python3

import argparse
import json
import logging
import sqlite3
import sys
from dataclasses import asdict
from typing import List, Optional

import yaml

from .config import load_config
from .db import connect, create_schema
from .errors import NotFoundError, ParcelStoreError
from .service import ParcelService
from .store import ParcelStore


def setup_logging(debug: bool = False, log_file: str = "tracker_debug.log") -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if debug else logging.WARNING

    filename = log_file if debug else None

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        filename=filename,
        filemode='w'
    )

    if debug:
        print(f"Debug logging enabled. Writing to {filename}...", file=sys.stderr)


def open_service(args):
    """Load config, open the database and wrap it in a ParcelService."""
    config = load_config(args.config)
    if args.db:
        config.database.path = args.db
    setup_logging(args.debug or config.logging.debug, config.logging.log_file)

    conn = connect(
        config.database.path,
        journal_mode=config.database.journal_mode,
        synchronous=config.database.synchronous,
    )
    try:
        create_schema(conn)
    except sqlite3.Error:
        conn.close()
        raise
    return conn, ParcelService(ParcelStore(conn))


# ---------------------------------------------------------------------------

def cmd_register(service: ParcelService, args) -> int:
    """Handle register command."""
    parcel = service.register(args.client, args.address)
    print(service.describe(parcel))
    return 0


def cmd_show(service: ParcelService, args) -> int:
    """Handle show command."""
    try:
        parcel = service.store.get(args.number)
    except NotFoundError as e:
        if not e.no_rows:
            raise
        print(f"Error: {e}")
        return 1

    print(service.describe(parcel))
    return 0


def cmd_list(service: ParcelService, args) -> int:
    """Handle list command."""
    parcels = service.client_parcels(args.client)

    if args.json:
        print(json.dumps([asdict(p) for p in parcels], indent=2))
        return 0

    if not parcels:
        print(f"No parcels found for client {args.client}")
        return 0

    print(f"Found {len(parcels)} parcel(s) for client {args.client}:\n")
    for parcel in parcels:
        print(service.describe(parcel))
    return 0


def cmd_status(service: ParcelService, args) -> int:
    """Handle status command."""
    service.store.set_status(args.number, args.value)
    print(f"Status of parcel {args.number} set to {args.value}")
    return 0


def cmd_advance(service: ParcelService, args) -> int:
    """Handle advance command."""
    new_status = service.next_status(args.number)
    if new_status is None:
        print(f"Parcel {args.number} has no next status")
    else:
        print(f"Parcel {args.number} is now {new_status}")
    return 0


def cmd_address(service: ParcelService, args) -> int:
    """Handle address command."""
    service.change_address(args.number, args.address)
    print(f"Address change requested for parcel {args.number} (registered parcels only)")
    return 0


def cmd_delete(service: ParcelService, args) -> int:
    """Handle delete command."""
    service.delete(args.number)
    print(f"Delete requested for parcel {args.number} (registered parcels only)")
    return 0


COMMANDS = {
    "register": cmd_register,
    "show": cmd_show,
    "list": cmd_list,
    "status": cmd_status,
    "advance": cmd_advance,
    "address": cmd_address,
    "delete": cmd_delete,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Parcel tracker: register and follow parcels in a SQLite database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Register a parcel
  parcel-tracker register --client 1000 --address "Baker St 221b"

  # List a client's parcels as JSON
  parcel-tracker list --client 1000 --json

  # Move a parcel to its next status
  parcel-tracker --db /tmp/tracker.db advance 1
""",
    )

    parser.add_argument(
        "--db",
        type=str,
        help="SQLite database path (default: tracker.db or the config value)",
    )
    parser.add_argument(
        "--config",
        type=str,
        help="Configuration file path",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    register_parser = subparsers.add_parser("register", help="Register a new parcel")
    register_parser.add_argument("--client", type=int, required=True, help="Client id")
    register_parser.add_argument("--address", required=True, help="Delivery address")

    show_parser = subparsers.add_parser("show", help="Show one parcel")
    show_parser.add_argument("number", type=int, help="Parcel number")

    list_parser = subparsers.add_parser("list", help="List parcels of a client")
    list_parser.add_argument("--client", type=int, required=True, help="Client id")
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Output parcels in JSON format",
    )

    status_parser = subparsers.add_parser("status", help="Overwrite the status of a parcel")
    status_parser.add_argument("number", type=int, help="Parcel number")
    status_parser.add_argument("value", help="New status")

    advance_parser = subparsers.add_parser(
        "advance", help="Move a parcel to its next status"
    )
    advance_parser.add_argument("number", type=int, help="Parcel number")

    address_parser = subparsers.add_parser(
        "address", help="Change the address of a registered parcel"
    )
    address_parser.add_argument("number", type=int, help="Parcel number")
    address_parser.add_argument("address", help="New delivery address")

    delete_parser = subparsers.add_parser("delete", help="Delete a registered parcel")
    delete_parser.add_argument("number", type=int, help="Parcel number")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    handler = COMMANDS.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        conn, service = open_service(args)
    except (sqlite3.Error, OSError, yaml.YAMLError) as e:
        print(f"Error: {e}")
        return 1

    try:
        return handler(service, args)
    except ParcelStoreError as e:
        print(f"Error: {e}")
        return 1
    finally:
        conn.close()


if __name__ == "__main__":
    sys.exit(main())
