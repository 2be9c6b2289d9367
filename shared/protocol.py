"""DTOs entre cliente, gateway de catalogo y vista."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from shared.models import Cart, CartTotals, FilterState, Product


@dataclass(slots=True)
class FetchProductsRequest:
    """Solicitud de una pagina acotada del catalogo remoto."""

    limit: int


@dataclass(slots=True)
class FetchProductsResponse:
    """Registros crudos tal como llegan bajo la clave ``products``."""

    records: list[dict[str, Any]]


@dataclass(frozen=True, slots=True)
class StorefrontView:
    """Estado derivado que consume la capa de presentacion."""

    loading: bool
    error: str | None
    categories: list[str]
    filtered_products: list[Product]
    cart: Cart
    totals: CartTotals
    filters: FilterState = field(default_factory=FilterState)
    product_count: int = 0

    @property
    def is_empty(self) -> bool:
        """Indica que ningun producto coincide con los filtros."""
        return not self.filtered_products

    @property
    def cart_badge_count(self) -> int:
        return self.totals.total_items
