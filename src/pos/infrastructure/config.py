"""Runtime settings, read from the environment.

Every setting has a default so the CLI runs with no configuration at all.
CLI options take precedence over these values.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from pos.domain.exceptions import ValidationError
from pos.domain.model.cart import MAX_CART_ITEMS
from pos.domain.model.order import MAX_ORDERS


@dataclass(frozen=True)
class PosSettings:

    audit_log_path: Path = Path("orders.log")
    catalog_path: Path | None = None
    cart_capacity: int = MAX_CART_ITEMS
    history_capacity: int = MAX_ORDERS
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.cart_capacity <= 0:
            raise ValidationError("Cart capacity must be positive")
        if self.history_capacity <= 0:
            raise ValidationError("Order history capacity must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValidationError(f"Unknown log level: {self.log_level!r}")

    @staticmethod
    def from_env(environ: Mapping[str, str] | None = None) -> PosSettings:
        env = os.environ if environ is None else environ
        catalog = env.get("POS_CATALOG")
        return PosSettings(
            audit_log_path=Path(env.get("POS_AUDIT_LOG", "orders.log")),
            catalog_path=Path(catalog) if catalog else None,
            cart_capacity=_int_setting(env, "POS_CART_CAPACITY", MAX_CART_ITEMS),
            history_capacity=_int_setting(env, "POS_HISTORY_CAPACITY", MAX_ORDERS),
            log_level=env.get("POS_LOG_LEVEL", "WARNING"),
        )


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be an integer, got {raw!r}") from None
