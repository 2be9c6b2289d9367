"""Normalizacion de registros crudos del catalogo."""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from shared.errors import LoadError
from shared.models import Product

PRODUCT_FIELDS: tuple[str, ...] = ("id", "title", "price", "category", "stock", "thumbnail")


def normalize_product(raw: Mapping[str, Any]) -> Product:
    """Construye un Product usando solo los campos permitidos del registro."""
    if not isinstance(raw, Mapping):
        raise LoadError(f"Registro de producto invalido: {raw!r}")

    fields = {name: raw.get(name) for name in PRODUCT_FIELDS}
    product_id = _require_id(fields["id"])
    return Product(
        id=product_id,
        title=_require_title(fields["title"], product_id),
        price=_require_price(fields["price"], product_id),
        category=_require_category(fields["category"], product_id),
        stock=_require_stock(fields["stock"], product_id),
        thumbnail=_optional_thumbnail(fields["thumbnail"], product_id),
    )


def normalize_products(records: Iterable[Mapping[str, Any]]) -> list[Product]:
    """Normaliza todos los registros o falla sin resultados parciales."""
    products: list[Product] = []
    seen_ids: set[Any] = set()

    for raw in records:
        product = normalize_product(raw)
        if product.id in seen_ids:
            raise LoadError(f"ID de producto duplicado en el catalogo: {product.id!r}")
        seen_ids.add(product.id)
        products.append(product)

    return products


def _require_id(value: Any) -> int | str:
    if isinstance(value, bool):
        raise LoadError(f"ID de producto invalido: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.strip():
        return value
    raise LoadError(f"ID de producto invalido: {value!r}")


def _require_title(value: Any, product_id: int | str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise LoadError(f"Producto {product_id!r} sin titulo.")
    return value.strip()


def _require_price(value: Any, product_id: int | str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise LoadError(f"Precio invalido para producto {product_id!r}: {value!r}")
    if not math.isfinite(value) or value < 0:
        raise LoadError(f"Precio invalido para producto {product_id!r}: {value!r}")
    return value


def _require_category(value: Any, product_id: int | str) -> str:
    if not isinstance(value, str):
        raise LoadError(f"Categoria invalida para producto {product_id!r}: {value!r}")
    return value


def _require_stock(value: Any, product_id: int | str) -> int:
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise LoadError(f"Stock invalido para producto {product_id!r}: {value!r}")
    return value


def _optional_thumbnail(value: Any, product_id: int | str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise LoadError(f"Miniatura invalida para producto {product_id!r}: {value!r}")
    return value.strip() or None
