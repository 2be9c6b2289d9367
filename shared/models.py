"""Modelos de dominio de la tienda."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ProductId = int | str


@dataclass(frozen=True, slots=True)
class Product:
    """Producto del catalogo, inmutable tras la carga."""

    id: ProductId
    title: str
    price: float
    category: str
    stock: int
    thumbnail: str | None = None


@dataclass(frozen=True, slots=True)
class CartLine:
    """Presencia de un producto en el carrito con su cantidad."""

    product: Product
    quantity: int

    @property
    def product_id(self) -> ProductId:
        return self.product.id

    @property
    def subtotal(self) -> float:
        """Precio de la linea: cantidad por precio unitario."""
        return self.quantity * self.product.price

    @property
    def can_increment(self) -> bool:
        """Indica si queda stock para sumar una unidad mas."""
        return self.quantity < self.product.stock


@dataclass(frozen=True, slots=True)
class Cart:
    """Lineas del carrito en orden de insercion."""

    lines: tuple[CartLine, ...] = ()

    def find_line(self, product_id: ProductId) -> CartLine | None:
        """Retorna la linea del producto indicado, si existe."""
        for line in self.lines:
            if line.product.id == product_id:
                return line
        return None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self):
        return iter(self.lines)


@dataclass(frozen=True, slots=True)
class CartTotals:
    """Agregados del carrito."""

    total_items: int = 0
    total_price: float = 0


class SortOrder(str, Enum):
    """Orden de precio disponible en el selector."""

    NONE = ""
    PRICE_ASC = "low-to-high"
    PRICE_DESC = "high-to-low"


@dataclass(frozen=True, slots=True)
class FilterState:
    """Parametros de busqueda, categoria y orden."""

    search_term: str = ""
    selected_category: str = ""
    sort_order: SortOrder = SortOrder.NONE

    @property
    def is_default(self) -> bool:
        return self == FilterState()
