"""Configuration models for CardStash."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path


@dataclass(slots=True)
class TradeConfig:
    """Rules controlling binder trades."""

    # Value differences at or above this amount need explicit approval.
    confirmation_threshold: Decimal = Decimal("1.00")


@dataclass(slots=True)
class CardStashConfig:
    """Top-level configuration container."""

    trade: TradeConfig = field(default_factory=TradeConfig)
    log_level: str = "WARNING"
    seed_path: Path | None = None

    @classmethod
    def from_env(cls) -> "CardStashConfig":
        """Create config from environment variables prefixed with CARDSTASH_."""
        prefix = "CARDSTASH_"
        seed = os.getenv(f"{prefix}SEED_PATH")
        return cls(
            trade=TradeConfig(
                confirmation_threshold=_parse_threshold(
                    os.getenv(f"{prefix}TRADE_THRESHOLD", "1.00")
                )
            ),
            log_level=_parse_log_level(os.getenv(f"{prefix}LOG_LEVEL", "WARNING")),
            seed_path=Path(seed).expanduser() if seed else None,
        )


def _parse_threshold(raw: str) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ValueError("Invalid decimal for CARDSTASH_TRADE_THRESHOLD") from exc
    if not value.is_finite() or value < 0:
        raise ValueError("CARDSTASH_TRADE_THRESHOLD must be a non-negative number")
    return value


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"Unknown log level '{raw}' for CARDSTASH_LOG_LEVEL")
    return level
