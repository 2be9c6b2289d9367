"""Filtrado y orden del catalogo visible."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from shared.models import FilterState, Product, SortOrder


def apply_filters(products: Sequence[Product], filters: FilterState) -> list[Product]:
    """Aplica busqueda, categoria y orden de precio, en ese orden.

    La funcion es pura: no modifica ``products`` y para entradas iguales
    retorna resultados iguales. Un resultado vacio es valido.
    """
    filtered = list(products)

    if filters.search_term:
        needle = filters.search_term.casefold()
        filtered = [product for product in filtered if needle in product.title.casefold()]

    if filters.selected_category:
        filtered = [
            product for product in filtered if product.category == filters.selected_category
        ]

    # sorted() es estable tambien con reverse=True: precios iguales conservan el orden del catalogo.
    if filters.sort_order == SortOrder.PRICE_ASC:
        filtered = sorted(filtered, key=_price_key)
    elif filters.sort_order == SortOrder.PRICE_DESC:
        filtered = sorted(filtered, key=_price_key, reverse=True)

    return filtered


def list_categories(products: Iterable[Product]) -> list[str]:
    """Categorias distintas del catalogo completo, en orden de primera aparicion."""
    categories: list[str] = []
    seen: set[str] = set()

    for product in products:
        if product.category in seen:
            continue
        seen.add(product.category)
        categories.append(product.category)

    return categories


def _price_key(product: Product) -> float:
    return product.price
