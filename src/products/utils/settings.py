"""Environment-driven settings for the products service."""

import os

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


PAGE_SIZE = int(os.getenv("PRODUCTS_PAGE_SIZE", 10))
MAX_PAGE_SIZE = int(os.getenv("PRODUCTS_MAX_PAGE_SIZE", 100))
SEED_ON_STARTUP = _as_bool(os.getenv("PRODUCTS_SEED_ON_STARTUP", "true"))
