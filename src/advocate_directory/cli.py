"""CLI entrypoint for the advocate directory."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict

from advocate_directory.api.advocates_api import build_coordinator, build_store, handle_list_request
from advocate_directory.config.loader import get_cache_max_age, load_config
from advocate_directory.database.advocate_repo import seed_advocates
from advocate_directory.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

SEED_ERROR_MESSAGE = "Failed to seed database"

# CLI flag dest -> request parameter wire name
LIST_PARAM_FLAGS = {
    "search": "search",
    "page": "page",
    "limit": "limit",
    "sort_by": "sortBy",
    "sort_order": "sortOrder",
    "city": "city",
    "degree": "degree",
    "min_experience": "minExperience",
    "max_experience": "maxExperience",
}


def _load(args: argparse.Namespace) -> Dict[str, Any]:
    config = load_config(getattr(args, "config", None))
    configure_logging(config["logging"]["level"])
    return config


def _print_json(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2))


def cmd_list(args: argparse.Namespace) -> int:
    """List advocates the way the read endpoint would."""
    config = _load(args)
    raw_params = {
        wire: getattr(args, dest)
        for dest, wire in LIST_PARAM_FLAGS.items()
        if getattr(args, dest, None) is not None
    }
    store = build_store(config)
    try:
        response = handle_list_request(
            raw_params,
            build_coordinator(config, store=store),
            cache_max_age=get_cache_max_age(config),
        )
    finally:
        store.dispose()
    _print_json(response.body)
    return 0 if response.status == 200 else 1


def cmd_seed(args: argparse.Namespace) -> int:
    """Insert the bundled dataset into the store."""
    config = _load(args)
    store = build_store(config)
    try:
        records = seed_advocates(store)
    except Exception as e:
        logger.error(f"Error seeding database: {e}", exc_info=True)
        _print_json({"error": SEED_ERROR_MESSAGE})
        return 1
    finally:
        store.dispose()
    _print_json({"advocates": [record.to_payload() for record in records]})
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advocate-directory",
        description="Paginated advocate listings with a static fallback dataset",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to YAML config (default: advocate_directory.config.yaml if present)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # list command
    list_parser = subparsers.add_parser("list", help="List advocates as JSON")
    list_parser.add_argument("--search", type=str, default=None, help="Free-text search")
    list_parser.add_argument("--page", type=str, default=None, help="Page number (default 1)")
    list_parser.add_argument("--limit", type=str, default=None, help="Page size (default 50)")
    list_parser.add_argument(
        "--sort-by",
        type=str,
        default=None,
        help="firstName, lastName, city, degree or yearsOfExperience",
    )
    list_parser.add_argument("--sort-order", type=str, default=None, help="asc or desc")
    list_parser.add_argument("--city", type=str, default=None, help="City substring")
    list_parser.add_argument("--degree", type=str, default=None, help="Degree substring")
    list_parser.add_argument("--min-experience", type=str, default=None, help="Minimum years of experience")
    list_parser.add_argument("--max-experience", type=str, default=None, help="Maximum years of experience")
    list_parser.set_defaults(func=cmd_list)

    # seed command
    seed_parser = subparsers.add_parser("seed", help="Insert the bundled advocates into the store")
    seed_parser.set_defaults(func=cmd_seed)

    return parser


def main(argv=None) -> int:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except Exception as e:
        logger.error(f"Error running command '{args.command}': {e}", exc_info=True)
        raise


if __name__ == "__main__":
    sys.exit(main())
