"""Loaders for declarative seed data."""

from .json_loader import (
    apply_seed,
    load_seed_from_json,
    parse_seed_dict,
    validate_seed_dict,
    validate_seed_file,
)

__all__ = [
    "apply_seed",
    "load_seed_from_json",
    "parse_seed_dict",
    "validate_seed_dict",
    "validate_seed_file",
]
