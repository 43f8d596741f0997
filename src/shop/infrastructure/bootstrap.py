"""Composition root: the one module that wires adapters to domain ports.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from shop.infrastructure.notification.log_notifier import LoggingPurchaseNotifier
from shop.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DATA_DIR_ENV_VAR = "SHOP_DATA_DIR"

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)


def product_repository(data_dir: Path | None = None) -> JsonProductRepository:
    return JsonProductRepository((data_dir or DEFAULT_DATA_DIR) / "products.json")


def purchase_notifier() -> LoggingPurchaseNotifier:
    return LoggingPurchaseNotifier()
