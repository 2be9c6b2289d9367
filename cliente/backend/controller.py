"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field, replace

from parametros import LOAD_ERROR_MESSAGE
from shared.errors import LoadError
from shared.models import Cart, FilterState, Product, ProductId, SortOrder
from shared.protocol import StorefrontView

from . import cart as cart_engine
from .catalog_filters import apply_filters, list_categories
from .catalog_loader import CatalogLoader

LOGGER = logging.getLogger(__name__)

StateListener = Callable[[], None]


@dataclass(frozen=True, slots=True)
class StorefrontState:
    """Estado completo de la sesion; se reemplaza entero en cada evento."""

    products: tuple[Product, ...] = ()
    loading: bool = False
    error: str | None = None
    filters: FilterState = field(default_factory=FilterState)
    cart: Cart = field(default_factory=Cart)
    load_generation: int = 0


class StorefrontController:
    """Coordina acciones de UI, carga de catalogo, filtros y carrito."""

    def __init__(self, loader: CatalogLoader) -> None:
        self._loader = loader
        self._state = StorefrontState()
        self._listeners: list[StateListener] = []

    @property
    def state(self) -> StorefrontState:
        return self._state

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Registra un listener de cambios de estado y retorna su desuscripcion."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def view(self) -> StorefrontView:
        """Recalcula la vista derivada desde el estado actual."""
        state = self._state
        return StorefrontView(
            loading=state.loading,
            error=state.error,
            categories=list_categories(state.products),
            filtered_products=apply_filters(state.products, state.filters),
            cart=state.cart,
            totals=cart_engine.compute_totals(state.cart),
            filters=state.filters,
            product_count=len(state.products),
        )

    # Carga de catalogo

    def load_catalog(self) -> None:
        """Carga el catalogo de forma sincronica."""
        generation = self.begin_load()
        try:
            products = self._loader.load()
        except LoadError as exc:
            self.fail_load(generation, str(exc))
            return
        self.complete_load(generation, products)

    def begin_load(self) -> int:
        """Marca el inicio de una carga y retorna su numero de generacion."""
        generation = self._state.load_generation + 1
        self._commit(replace(self._state, loading=True, load_generation=generation))
        LOGGER.info("Carga de catalogo iniciada (generacion %s).", generation)
        return generation

    def run_load(self) -> list[Product]:
        """Ejecuta el loader; pensado para correr fuera del hilo de la UI."""
        return self._loader.load()

    def complete_load(self, generation: int, products: Sequence[Product]) -> None:
        """Reemplaza el catalogo completo si la carga sigue vigente."""
        if self._is_stale(generation):
            return
        self._commit(
            replace(self._state, products=tuple(products), loading=False, error=None)
        )

    def fail_load(self, generation: int, detail: str) -> None:
        """Registra la falla de carga sin tocar catalogo ni carrito."""
        if self._is_stale(generation):
            return
        LOGGER.error("Fallo la carga del catalogo: %s", detail)
        self._commit(replace(self._state, loading=False, error=LOAD_ERROR_MESSAGE))

    # Filtros

    def set_search_term(self, search_term: str) -> None:
        self._update_filters(search_term=search_term)

    def set_category(self, category: str) -> None:
        self._update_filters(selected_category=category)

    def set_sort_order(self, sort_order: SortOrder | str) -> None:
        """Cambia el orden de precio; valores desconocidos vuelven a sin orden."""
        try:
            order = SortOrder(sort_order)
        except ValueError:
            LOGGER.warning("Orden desconocido, se usa orden por defecto: %r", sort_order)
            order = SortOrder.NONE
        self._update_filters(sort_order=order)

    def clear_filters(self) -> None:
        """Restablece busqueda, categoria y orden a sus valores por defecto."""
        LOGGER.info("Accion ejecutada: limpiar filtros")
        if self._state.filters.is_default:
            return
        self._commit(replace(self._state, filters=FilterState()))

    # Carrito

    def add_to_cart(self, product_id: ProductId) -> None:
        """Agrega una unidad del producto indicado del catalogo."""
        product = self._find_product(product_id)
        if product is None:
            LOGGER.warning("Producto no encontrado en catalogo: id=%s", product_id)
            return
        self._update_cart(cart_engine.add_item(self._state.cart, product))

    def update_quantity(self, product_id: ProductId, quantity: int) -> None:
        self._update_cart(cart_engine.set_quantity(self._state.cart, product_id, quantity))

    def increment(self, product_id: ProductId) -> None:
        self._update_cart(cart_engine.increment_item(self._state.cart, product_id))

    def decrement(self, product_id: ProductId) -> None:
        self._update_cart(cart_engine.decrement_item(self._state.cart, product_id))

    def remove_from_cart(self, product_id: ProductId) -> None:
        self._update_cart(cart_engine.remove_item(self._state.cart, product_id))

    def on_checkout(self) -> None:
        """Placeholder para el pago; no hay procesamiento de compra."""
        LOGGER.info(
            "Accion ejecutada: checkout (placeholder). Items=%s",
            cart_engine.compute_totals(self._state.cart).total_items,
        )

    def on_exit(self, quit_app: Callable[[], None]) -> None:
        """Cierra la aplicacion; el carrito en memoria se descarta."""
        totals = cart_engine.compute_totals(self._state.cart)
        LOGGER.info(
            "Accion ejecutada: salir. Se descartan %s items del carrito.",
            totals.total_items,
        )
        quit_app()

    def _find_product(self, product_id: ProductId) -> Product | None:
        for product in self._state.products:
            if product.id == product_id:
                return product
        return None

    def _update_filters(self, **changes: object) -> None:
        filters = replace(self._state.filters, **changes)
        if filters == self._state.filters:
            return
        self._commit(replace(self._state, filters=filters))

    def _update_cart(self, cart: Cart) -> None:
        if cart is self._state.cart:
            return
        self._commit(replace(self._state, cart=cart))

    def _is_stale(self, generation: int) -> bool:
        if generation == self._state.load_generation:
            return False
        LOGGER.info(
            "Resultado de carga descartado: generacion %s, vigente %s.",
            generation,
            self._state.load_generation,
        )
        return True

    def _commit(self, state: StorefrontState) -> None:
        self._state = state
        for listener in list(self._listeners):
            listener()
