"""Tests para filtrado y orden del catalogo."""

from __future__ import annotations

import unittest

from cliente.backend.catalog_filters import apply_filters, list_categories
from shared.models import FilterState, Product, SortOrder


class ApplyFiltersTests(unittest.TestCase):
    """Valida busqueda, categoria y orden por precio."""

    def setUp(self) -> None:
        self.products = [
            Product(id=1, title="Red Shirt", price=20, category="apparel", stock=2),
            Product(id=2, title="Blue Mug", price=8, category="home", stock=0),
            Product(id=3, title="Green SHIRT", price=8, category="apparel", stock=4),
            Product(id=4, title="Lamp", price=35, category="home", stock=1),
            Product(id=5, title="Socks", price=20, category="apparel", stock=9),
        ]

    def test_default_filters_keep_catalog_order(self) -> None:
        """Sin filtros debe retornar todos los productos en orden original."""
        result = apply_filters(self.products, FilterState())
        self.assertEqual(result, self.products)
        self.assertIsNot(result, self.products)

    def test_search_is_case_insensitive_substring(self) -> None:
        """La busqueda debe ignorar mayusculas y buscar por subcadena."""
        result = apply_filters(self.products, FilterState(search_term="shirt"))
        self.assertEqual([product.id for product in result], [1, 3])

    def test_category_requires_exact_match(self) -> None:
        """La categoria se compara de forma exacta."""
        result = apply_filters(self.products, FilterState(selected_category="home"))
        self.assertEqual([product.id for product in result], [2, 4])
        self.assertEqual(apply_filters(self.products, FilterState(selected_category="Home")), [])

    def test_search_and_category_combine(self) -> None:
        """Busqueda y categoria se aplican en secuencia."""
        filters = FilterState(search_term="s", selected_category="apparel")
        self.assertEqual([product.id for product in apply_filters(self.products, filters)], [1, 3, 5])

    def test_ascending_sort_is_stable(self) -> None:
        """Precios iguales conservan el orden del catalogo al ordenar ascendente."""
        result = apply_filters(self.products, FilterState(sort_order=SortOrder.PRICE_ASC))
        self.assertEqual([product.id for product in result], [2, 3, 1, 5, 4])

    def test_descending_sort_is_stable(self) -> None:
        """Precios iguales conservan el orden del catalogo al ordenar descendente."""
        result = apply_filters(self.products, FilterState(sort_order=SortOrder.PRICE_DESC))
        self.assertEqual([product.id for product in result], [4, 1, 5, 2, 3])

    def test_sort_accepts_raw_selector_value(self) -> None:
        """El valor crudo del selector equivale al miembro del enum."""
        result = apply_filters(self.products, FilterState(sort_order="low-to-high"))
        self.assertEqual([product.id for product in result], [2, 3, 1, 5, 4])

    def test_filters_are_idempotent(self) -> None:
        """Aplicar el mismo filtro dos veces no cambia el resultado."""
        filters = FilterState(search_term="o", sort_order=SortOrder.PRICE_DESC)
        once = apply_filters(self.products, filters)
        self.assertEqual(apply_filters(once, filters), once)

    def test_no_matches_returns_empty_list(self) -> None:
        """Sin coincidencias el resultado es una lista vacia, no un error."""
        self.assertEqual(apply_filters(self.products, FilterState(search_term="zzz")), [])

    def test_empty_catalog_returns_empty_for_any_filter(self) -> None:
        """Un catalogo vacio siempre produce lista vacia."""
        for filters in (
            FilterState(),
            FilterState(search_term="shirt"),
            FilterState(selected_category="home", sort_order=SortOrder.PRICE_ASC),
        ):
            with self.subTest(filters=filters):
                self.assertEqual(apply_filters([], filters), [])

    def test_input_is_not_modified(self) -> None:
        """Ordenar no debe alterar la secuencia recibida."""
        original = list(self.products)
        apply_filters(self.products, FilterState(sort_order=SortOrder.PRICE_DESC))
        self.assertEqual(self.products, original)


class ListCategoriesTests(unittest.TestCase):
    """Valida enumeracion de categorias del catalogo completo."""

    def test_distinct_categories_in_first_occurrence_order(self) -> None:
        """Debe retornar categorias sin duplicados en orden de aparicion."""
        products = [
            Product(id=1, title="A", price=1, category="beauty", stock=1),
            Product(id=2, title="B", price=1, category="fragrances", stock=1),
            Product(id=3, title="C", price=1, category="beauty", stock=1),
            Product(id=4, title="D", price=1, category="furniture", stock=1),
        ]
        self.assertEqual(list_categories(products), ["beauty", "fragrances", "furniture"])

    def test_empty_catalog_has_no_categories(self) -> None:
        """Un catalogo vacio no tiene categorias."""
        self.assertEqual(list_categories([]), [])


if __name__ == "__main__":
    unittest.main()
