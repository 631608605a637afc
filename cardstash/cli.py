"""Command line helpers for CardStash."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, NoReturn

from rich.logging import RichHandler

from .app import CardStashApp
from .config import CardStashConfig, _parse_log_level
from .domain.exceptions import CardStashError
from .loaders import load_seed_from_json, validate_seed_file
from .terminal import run_terminal
from .validators import validate_inventory

logger = logging.getLogger(__name__)

SEED_ERRORS = (OSError, ValueError, CardStashError)


def run_app() -> None:
    parser = argparse.ArgumentParser(description="CardStash trading card inventory")
    parser.add_argument("--seed", help="Path to seed JSON file with a starter collection")
    parser.add_argument("--log-level", help="Logging level (overrides CARDSTASH_LOG_LEVEL)")
    args = parser.parse_args()

    config = _load_config()
    if args.log_level:
        try:
            config.log_level = _parse_log_level(args.log_level)
        except ValueError as exc:
            parser.error(str(exc))
    if args.seed:
        config.seed_path = Path(args.seed)
    configure_logging(config.log_level)

    app = CardStashApp(config)
    if config.seed_path:
        try:
            load_seed_from_json(app.inventory, config.seed_path)
        except SEED_ERRORS as exc:
            _fail("Seed errors:", [str(exc)])
        logger.info("Seed %s loaded", config.seed_path)
    run_terminal(app)


def run_validate() -> None:
    parser = argparse.ArgumentParser(description="CardStash seed validator")
    parser.add_argument("--seed", required=True, help="Path to seed JSON file for validation")
    args = parser.parse_args()

    config = _load_config()
    configure_logging(config.log_level)

    path = Path(args.seed)
    try:
        errors = validate_seed_file(path)
    except (OSError, json.JSONDecodeError) as exc:
        _fail("Seed errors:", [str(exc)])
    if errors:
        _fail("Seed errors:", errors)

    app = CardStashApp(config)
    try:
        load_seed_from_json(app.inventory, path)
    except SEED_ERRORS as exc:
        _fail("Seed errors:", [str(exc)])
    issues = validate_inventory(app.inventory, config)
    if issues:
        _fail("Inventory invariant violations:", issues)
    print("Seed is valid ✅")


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
    )


def _load_config() -> CardStashConfig:
    try:
        return CardStashConfig.from_env()
    except ValueError as exc:
        _fail("Configuration errors:", [str(exc)])


def _fail(title: str, errors: Iterable[str]) -> NoReturn:
    print(title)
    for err in errors:
        print(f"- {err}")
    sys.exit(1)
