"""Parametros globales del proyecto."""

from __future__ import annotations

import logging

APP_TITLE = "ShopHub"
APP_SUBTITLE = "Your favorite store"

CATALOG_BASE_URL = "https://dummyjson.com"
CATALOG_PRODUCTS_PATH = "/products"
CATALOG_PAGE_LIMIT = 20
CATALOG_TIMEOUT_SECONDS = 10.0

CURRENCY_SYMBOL = "₹"
LOAD_ERROR_MESSAGE = "Failed to fetch products"

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
)
