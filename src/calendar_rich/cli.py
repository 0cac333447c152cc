from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone

import orjson

from .api import EnrichmentPayload, OutcomePayload
from .config import get_settings
from .domain import CalendarTrigger
from .enrichment import enrich_title, known_tags, lookup
from .logging import configure_logging, reset_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Enrich Google Calendar events from tags in their titles.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Start the HTTP server receiving calendar triggers.")
    serve_parser.add_argument("--host", default=None)
    serve_parser.add_argument("--port", type=int, default=None)

    run_parser = subparsers.add_parser("run", help="Enrich the last changed event of a calendar once.")
    run_parser.add_argument("calendar_id")

    enrich_parser = subparsers.add_parser("enrich", help="Show how a title would be enriched, without touching any calendar.")
    enrich_parser.add_argument("title")

    subparsers.add_parser("tags", help="List the known tags.")

    return parser


def _dump(payload) -> None:
    sys.stdout.write(orjson.dumps(payload, option=orjson.OPT_INDENT_2).decode() + "\n")


def _dispatch(args: argparse.Namespace) -> None:
    if args.command == "serve":
        from .services.http import run_local_server

        server = get_settings().server
        run_local_server(host=args.host or server.host, port=args.port or server.port)
    elif args.command == "run":
        from .services import ServiceContext, UpdateHandler

        trigger = CalendarTrigger(calendar_id=args.calendar_id, fired_at=datetime.now(timezone.utc))
        outcome = UpdateHandler(ServiceContext()).handle(trigger)
        _dump(OutcomePayload.from_domain(outcome).model_dump())


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "enrich":
        _dump(EnrichmentPayload.from_domain(enrich_title(args.title)).model_dump())
        return
    if args.command == "tags":
        for tag in known_tags():
            entry = lookup(tag)
            sys.stdout.write(f"{tag}\t{entry.emoji}\t{entry.category.value}\n")
        return

    configure_logging()
    logging.getLogger(__name__).info("calendar-rich CLI starting")
    try:
        _dispatch(args)
    finally:
        reset_logging()


if __name__ == "__main__":
    main()
