"""Formato de montos para la interfaz."""

from __future__ import annotations

from parametros import CURRENCY_SYMBOL


def format_price(amount: float, symbol: str = CURRENCY_SYMBOL) -> str:
    """Formatea un monto con dos decimales y separador de miles."""
    return f"{symbol}{amount:,.2f}"


def format_line_price(unit_price: float, quantity: int, symbol: str = CURRENCY_SYMBOL) -> str:
    """Construye el texto ``precio x cantidad`` de una linea del carrito."""
    return f"{format_price(unit_price, symbol)} × {quantity}"
