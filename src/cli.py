"""Command-line entry point: database demo and roster generation."""

import argparse
import logging
import sqlite3
import sys
from pathlib import Path
from typing import List, Optional

from src.storage import DatabaseError, DatabaseManager, seed_demo_crew
from src.synthetic import build_crew_request, generate_crew, generate_starships
from src.synthetic.catalogs import DEFAULT_CREW_COUNT, DEFAULT_SHIPS_PER_FACTION
from src.utils.config import ConfigError, CosmosConfig, load_config
from src.utils.rng import make_rng

logger = logging.getLogger(__name__)


def _run_db(config: CosmosConfig, args: argparse.Namespace) -> None:
    with DatabaseManager(config.database_path) as db:
        seed_demo_crew(db)


def _run_crew(config: CosmosConfig, args: argparse.Namespace) -> None:
    request = build_crew_request(config, count=args.count, output_path=args.output)
    generate_crew(request, make_rng(args.seed))


def _run_starships(config: CosmosConfig, args: argparse.Namespace) -> None:
    output_path = args.output or config.starship_path
    generate_starships(output_path, make_rng(args.seed), per_faction=args.per_faction)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Cosmos: crew database demo and synthetic roster generation."
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to config.json (default: $COSMOS_CONFIG, cosmos/config.json, config.json)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: INFO)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    db_parser = subparsers.add_parser("db", help="Seed and query the crew table")
    db_parser.set_defaults(handler=_run_db)

    crew_parser = subparsers.add_parser("crew", help="Generate the crew XML roster")
    crew_parser.add_argument(
        "--count", "-n",
        type=int,
        default=DEFAULT_CREW_COUNT,
        help=f"Number of crew members (default: {DEFAULT_CREW_COUNT})",
    )
    crew_parser.add_argument("--seed", "-s", type=int, default=None, help="Random seed")
    crew_parser.add_argument("--output", "-o", type=Path, default=None, help="Override output path")
    crew_parser.set_defaults(handler=_run_crew)

    ship_parser = subparsers.add_parser("starships", help="Generate the starship XML roster")
    ship_parser.add_argument(
        "--per-faction", "-n",
        type=int,
        default=DEFAULT_SHIPS_PER_FACTION,
        help=f"Ships per faction (default: {DEFAULT_SHIPS_PER_FACTION})",
    )
    ship_parser.add_argument("--seed", "-s", type=int, default=None, help="Random seed")
    ship_parser.add_argument("--output", "-o", type=Path, default=None, help="Override output path")
    ship_parser.set_defaults(handler=_run_starships)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s: %(message)s")

    try:
        config = load_config(args.config)
        args.handler(config, args)
    except ConfigError:
        logger.exception("Configuration error")
        return 1
    except (sqlite3.Error, DatabaseError):
        logger.exception("Database error")
        return 1
    except OSError:
        logger.exception("Could not write output")
        return 1
    except ValueError:
        logger.exception("Invalid arguments")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
