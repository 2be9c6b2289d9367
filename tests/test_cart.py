"""Tests para operaciones del carrito."""

from __future__ import annotations

import unittest

from cliente.backend.cart import (
    add_item,
    compute_totals,
    decrement_item,
    increment_item,
    remove_item,
    set_quantity,
)
from shared.models import Cart, CartLine, CartTotals, Product


class AddItemTests(unittest.TestCase):
    """Valida agregado de productos respetando el stock."""

    def test_add_out_of_stock_product_is_noop(self) -> None:
        """Un producto con stock 0 no debe modificar el carrito."""
        cart = Cart()
        product = _build_product(2, price=8, stock=0)

        self.assertIs(add_item(cart, product), cart)

        with_line = add_item(Cart(), _build_product(1, stock=3))
        self.assertEqual(add_item(with_line, product), with_line)

    def test_add_new_product_appends_line_with_quantity_one(self) -> None:
        """Debe agregar una linea nueva al final con cantidad 1."""
        first = _build_product(1, stock=5)
        second = _build_product(2, stock=5)

        cart = add_item(add_item(Cart(), first), second)

        self.assertEqual([line.product.id for line in cart], [1, 2])
        self.assertEqual([line.quantity for line in cart], [1, 1])

    def test_add_existing_product_increments_only_that_line(self) -> None:
        """Con cantidad bajo el stock debe sumar exactamente una unidad."""
        first = _build_product(1, stock=5)
        second = _build_product(2, stock=5)
        cart = Cart(lines=(CartLine(first, 2), CartLine(second, 1)))

        updated = add_item(cart, first)

        self.assertEqual(updated.find_line(1).quantity, 3)
        self.assertEqual(updated.find_line(2), CartLine(second, 1))
        self.assertEqual(len(updated), 2)

    def test_add_at_stock_ceiling_is_noop(self) -> None:
        """Con cantidad igual al stock el carrito no debe cambiar."""
        product = _build_product(1, stock=2)
        cart = Cart(lines=(CartLine(product, 2),))

        self.assertIs(add_item(cart, product), cart)

    def test_add_rebinds_line_to_reloaded_product(self) -> None:
        """Tras recargar con mas stock la linea debe usar el producto nuevo."""
        original = _build_product(1, price=10, stock=2)
        reloaded = _build_product(1, price=12, stock=5)
        cart = Cart(lines=(CartLine(original, 2),))

        line = add_item(cart, reloaded).find_line(1)

        self.assertEqual(line.quantity, 3)
        self.assertIs(line.product, reloaded)
        self.assertLessEqual(line.quantity, line.product.stock)
        self.assertTrue(line.can_increment)
        self.assertEqual(line.subtotal, 36)

    def test_add_does_not_mutate_input_cart(self) -> None:
        """El carrito original debe quedar intacto."""
        product = _build_product(1, stock=4)
        cart = Cart(lines=(CartLine(product, 1),))

        add_item(cart, product)

        self.assertEqual(cart.find_line(1).quantity, 1)


class SetQuantityTests(unittest.TestCase):
    """Valida cambios directos de cantidad."""

    def setUp(self) -> None:
        self.shirt = _build_product(1, price=20, stock=3)
        self.mug = _build_product(2, price=8, stock=4)
        self.cart = Cart(lines=(CartLine(self.shirt, 1), CartLine(self.mug, 2)))

    def test_zero_or_negative_quantity_removes_line(self) -> None:
        """Cantidades <= 0 deben eliminar la linea completa."""
        for quantity in (0, -1, -10):
            with self.subTest(quantity=quantity):
                updated = set_quantity(self.cart, 1, quantity)
                self.assertIsNone(updated.find_line(1))
                self.assertEqual([line.product.id for line in updated], [2])

    def test_quantity_within_stock_replaces_quantity(self) -> None:
        """Debe reemplazar la cantidad conservando el orden de las lineas."""
        updated = set_quantity(self.cart, 2, 4)

        self.assertEqual(updated.find_line(2).quantity, 4)
        self.assertEqual([line.product.id for line in updated], [1, 2])

    def test_quantity_above_stock_is_noop(self) -> None:
        """Una cantidad mayor al stock no debe cambiar el carrito."""
        self.assertIs(set_quantity(self.cart, 1, 4), self.cart)

    def test_unknown_product_is_noop(self) -> None:
        """Sin linea para el id el carrito queda igual."""
        self.assertIs(set_quantity(self.cart, 99, 1), self.cart)
        self.assertIs(set_quantity(self.cart, 99, 0), self.cart)


class IncrementDecrementTests(unittest.TestCase):
    """Valida los controles +/- del panel del carrito."""

    def test_decrement_to_zero_removes_line(self) -> None:
        """Restar desde 1 debe eliminar la linea, no dejarla en cero."""
        product = _build_product(1, stock=2)
        cart = Cart(lines=(CartLine(product, 1),))

        self.assertTrue(decrement_item(cart, 1).is_empty)

    def test_increment_stops_at_stock(self) -> None:
        """Sumar debe detenerse en el stock disponible."""
        product = _build_product(1, stock=2)
        cart = Cart(lines=(CartLine(product, 1),))

        cart = increment_item(cart, 1)
        self.assertEqual(cart.find_line(1).quantity, 2)
        self.assertFalse(cart.find_line(1).can_increment)
        self.assertIs(increment_item(cart, 1), cart)

    def test_increment_unknown_line_is_noop(self) -> None:
        """Sumar sobre un id sin linea no debe agregar nada."""
        cart = Cart()
        self.assertIs(increment_item(cart, 1), cart)


class RemoveItemTests(unittest.TestCase):
    """Valida eliminacion de lineas."""

    def test_remove_existing_line(self) -> None:
        """Debe eliminar solo la linea indicada."""
        first = _build_product(1)
        second = _build_product(2)
        cart = Cart(lines=(CartLine(first, 1), CartLine(second, 1)))

        updated = remove_item(cart, 1)

        self.assertEqual([line.product.id for line in updated], [2])

    def test_remove_missing_line_is_noop(self) -> None:
        """Eliminar un id ausente retorna el mismo carrito."""
        cart = Cart(lines=(CartLine(_build_product(1), 1),))
        self.assertIs(remove_item(cart, 7), cart)


class ComputeTotalsTests(unittest.TestCase):
    """Valida agregados del carrito."""

    def test_totals_sum_quantities_and_prices(self) -> None:
        """Debe sumar cantidades y cantidad por precio."""
        cart = Cart(
            lines=(
                CartLine(_build_product(1, price=10, stock=5), 2),
                CartLine(_build_product(2, price=5, stock=5), 3),
            )
        )

        self.assertEqual(compute_totals(cart), CartTotals(total_items=5, total_price=35))

    def test_empty_cart_totals(self) -> None:
        """Un carrito vacio reporta cero."""
        totals = compute_totals(Cart())
        self.assertEqual(totals.total_items, 0)
        self.assertEqual(totals.total_price, 0)

    def test_line_subtotal(self) -> None:
        """El subtotal de linea es precio por cantidad."""
        line = CartLine(_build_product(1, price=12.5, stock=5), 2)
        self.assertEqual(line.subtotal, 25.0)


def _build_product(
    product_id: int,
    price: float = 10,
    stock: int = 5,
    category: str = "general",
) -> Product:
    return Product(
        id=product_id,
        title=f"Producto {product_id}",
        price=price,
        category=category,
        stock=stock,
    )


if __name__ == "__main__":
    unittest.main()
