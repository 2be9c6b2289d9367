"""Carga del catalogo de productos desde el gateway."""

from __future__ import annotations

import logging

from parametros import CATALOG_PAGE_LIMIT
from shared.models import Product
from shared.protocol import FetchProductsRequest

from .gateway import CatalogGateway
from .validators import normalize_products

LOGGER = logging.getLogger(__name__)


class CatalogLoader:
    """Obtiene una pagina acotada del catalogo y la normaliza a Product.

    La carga es todo o nada: cualquier falla de transporte, payload o
    registro se propaga como ``LoadError`` sin retornar productos parciales.
    """

    def __init__(self, gateway: CatalogGateway, limit: int = CATALOG_PAGE_LIMIT) -> None:
        self._gateway = gateway
        self._limit = limit

    @property
    def limit(self) -> int:
        return self._limit

    def load(self) -> list[Product]:
        """Retorna el catalogo normalizado o lanza ``LoadError``."""
        response = self._gateway.fetch_products(FetchProductsRequest(limit=self._limit))
        products = normalize_products(response.records)
        LOGGER.info("Catalogo cargado: %s productos.", len(products))
        return products
