#!/usr/bin/env python3

import argparse
import asyncio
import logging
import os
import sys
from datetime import timedelta, timezone
from typing import Optional

from clipsort.database import MemoryStore
from clipsort.services import HistoryService, StoreConfig

logger = logging.getLogger(__name__)


def _parse_tz(value: Optional[str]):
    """`None` means local time; otherwise "UTC" or an offset like "+05:30"."""
    if not value:
        return None
    if value.upper() == "UTC":
        return timezone.utc
    sign = -1 if value.startswith("-") else 1
    hours, _, minutes = value.lstrip("+-").partition(":")
    try:
        offset = timedelta(hours=int(hours), minutes=int(minutes or 0))
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid UTC offset: {value!r}")
    return timezone(sign * offset)


def _build_service(args, notify=None) -> HistoryService:
    notify = notify or print_notice
    if args.no_redis:
        return HistoryService(store=MemoryStore(), config=StoreConfig(), tz=args.tz, notify=notify)
    return HistoryService(tz=args.tz, notify=notify)


def print_notice(message: str) -> None:
    print(message, file=sys.stderr)


def _print_grouped(grouped) -> None:
    if not grouped:
        print("(no items)")
        return
    for key, items in grouped.items():
        print(f"{key} ({len(items)})")
        for item in items:
            preview = item.content.replace("\n", " ")
            if len(preview) > 60:
                preview = preview[:57] + "..."
            print(f"  {item.id}  {preview}")


async def _run(args) -> int:
    async with _build_service(args) as service:
        if args.command == "show":
            _print_grouped(service.by_date() if args.by == "date" else service.by_category())
            return 0

        if args.command == "categories":
            for category in service.categories:
                print(f"{category.id}  {category.name}")
            return 0

        if args.command == "create-category":
            category = await service.create_category(args.name)
            if category is None:
                return 1
            print(f"Created {category.name} ({category.id})")
            return 0

        if args.command == "assign":
            items = await service.assign_category(args.item_id, args.category)
            if items is None:
                print("Assignment failed, see log", file=sys.stderr)
                return 1
            print(f"Assigned {args.item_id} to {args.category.strip()}")
            return 0

        if args.command == "add":
            item = await service.add_item(args.content)
            if item is None:
                return 1
            print(item.id)
            return 0

    return 2


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="ClipSort - Clipboard history grouped by date and category"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose debug logging"
    )

    parser.add_argument(
        "--no-redis",
        action="store_true",
        help="Use a throwaway in-memory store instead of Redis"
    )

    parser.add_argument(
        "--tz",
        type=_parse_tz,
        default=os.getenv("CLIPSORT_TZ"),
        help="Timezone for date grouping: UTC or +HH:MM (default: local time)"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print grouped clipboard history")
    show.add_argument("--by", choices=["date", "category"], default="date")

    sub.add_parser("categories", help="List categories")

    create = sub.add_parser("create-category", help="Create a new category")
    create.add_argument("name")

    assign = sub.add_parser("assign", help="Assign an item to a category, creating it if needed")
    assign.add_argument("item_id")
    assign.add_argument("category")

    add = sub.add_parser("add", help="Append a clipboard entry to the history")
    add.add_argument("content")

    serve = sub.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=os.getenv("CLIPSORT_HOST", "127.0.0.1"))
    serve.add_argument(
        "-p", "--port",
        type=int,
        default=int(os.getenv("CLIPSORT_PORT", "3001")),
        help="HTTP port (default: 3001)"
    )

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    if args.command == "serve":
        import uvicorn
        from clipsort.api import create_app
        from clipsort.api.main import collect_notice

        uvicorn.run(create_app(_build_service(args, collect_notice)), host=args.host, port=args.port)
        return

    try:
        sys.exit(asyncio.run(_run(args)))
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
