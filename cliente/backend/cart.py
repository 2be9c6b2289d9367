"""Operaciones puras sobre el carrito.

Cada operacion recibe un carrito y retorna uno nuevo; cuando la solicitud no
es aplicable (sin stock, tope alcanzado, linea inexistente) se retorna el
mismo carrito sin error. Esos casos solo quedan registrados en DEBUG.
"""

from __future__ import annotations

import logging

from shared.models import Cart, CartLine, CartTotals, Product, ProductId

LOGGER = logging.getLogger(__name__)


def add_item(cart: Cart, product: Product) -> Cart:
    """Agrega una unidad del producto respetando el stock disponible."""
    line = cart.find_line(product.id)

    if line is None:
        if product.stock <= 0:
            LOGGER.debug("Producto sin stock, no se agrega: id=%s", product.id)
            return cart
        return Cart(lines=cart.lines + (CartLine(product=product, quantity=1),))

    if line.quantity >= product.stock:
        LOGGER.debug(
            "Tope de stock alcanzado: id=%s, cantidad=%s, stock=%s",
            product.id,
            line.quantity,
            product.stock,
        )
        return cart

    return _replace_quantity(cart, product.id, line.quantity + 1, product=product)


def set_quantity(cart: Cart, product_id: ProductId, quantity: int) -> Cart:
    """Fija la cantidad de una linea; cantidades <= 0 eliminan la linea."""
    if quantity <= 0:
        return remove_item(cart, product_id)

    line = cart.find_line(product_id)
    if line is None:
        LOGGER.debug("Linea inexistente, no se actualiza: id=%s", product_id)
        return cart

    if quantity > line.product.stock:
        LOGGER.debug(
            "Cantidad excede stock: id=%s, solicitada=%s, stock=%s",
            product_id,
            quantity,
            line.product.stock,
        )
        return cart

    if quantity == line.quantity:
        return cart

    return _replace_quantity(cart, product_id, quantity)


def increment_item(cart: Cart, product_id: ProductId) -> Cart:
    """Suma una unidad a una linea existente."""
    line = cart.find_line(product_id)
    if line is None:
        return cart
    return set_quantity(cart, product_id, line.quantity + 1)


def decrement_item(cart: Cart, product_id: ProductId) -> Cart:
    """Resta una unidad; al llegar a cero la linea se elimina."""
    line = cart.find_line(product_id)
    if line is None:
        return cart
    return set_quantity(cart, product_id, line.quantity - 1)


def remove_item(cart: Cart, product_id: ProductId) -> Cart:
    """Elimina la linea del producto si existe."""
    if cart.find_line(product_id) is None:
        return cart
    return Cart(lines=tuple(line for line in cart.lines if line.product.id != product_id))


def compute_totals(cart: Cart) -> CartTotals:
    """Calcula cantidad total de unidades y monto total del carrito."""
    return CartTotals(
        total_items=sum(line.quantity for line in cart.lines),
        total_price=sum(line.subtotal for line in cart.lines),
    )


def _replace_quantity(
    cart: Cart,
    product_id: ProductId,
    quantity: int,
    product: Product | None = None,
) -> Cart:
    return Cart(
        lines=tuple(
            CartLine(
                product=product if product is not None else line.product,
                quantity=quantity,
            )
            if line.product.id == product_id
            else line
            for line in cart.lines
        )
    )
