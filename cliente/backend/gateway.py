"""Gateway de comunicacion con la fuente remota del catalogo."""

from __future__ import annotations

import logging
from typing import Any, Protocol

import requests

from parametros import CATALOG_BASE_URL, CATALOG_PRODUCTS_PATH, CATALOG_TIMEOUT_SECONDS
from shared.errors import LoadError
from shared.protocol import FetchProductsRequest, FetchProductsResponse

LOGGER = logging.getLogger(__name__)


class CatalogGateway(Protocol):
    """Interfaz de acceso del cliente a la fuente de productos."""

    def fetch_products(self, request: FetchProductsRequest) -> FetchProductsResponse:
        """Solicita una pagina de registros crudos de productos."""


class HttpCatalogGateway:
    """Implementacion HTTP del gateway usando ``requests``."""

    def __init__(
        self,
        base_url: str = CATALOG_BASE_URL,
        timeout_seconds: float = CATALOG_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._session = session or requests.Session()

    def fetch_products(self, request: FetchProductsRequest) -> FetchProductsResponse:
        """Ejecuta GET sobre el endpoint de productos y valida el payload."""
        url = f"{self._base_url}{CATALOG_PRODUCTS_PATH}"
        LOGGER.info("Solicitando catalogo: %s (limit=%s)", url, request.limit)

        try:
            response = self._session.get(
                url,
                params={"limit": request.limit},
                timeout=self._timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            raise LoadError(f"Respuesta no exitosa del catalogo: {exc}") from exc
        except requests.RequestException as exc:
            raise LoadError(f"No fue posible contactar el catalogo: {exc}") from exc
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al solicitar el catalogo.")
            raise LoadError("No fue posible obtener el catalogo.") from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise LoadError("El catalogo no retorno JSON valido.") from exc

        return FetchProductsResponse(records=extract_product_records(payload))


class StaticCatalogGateway:
    """Gateway en memoria que sirve un payload fijo."""

    def __init__(self, payload: Any) -> None:
        self._payload = payload

    def fetch_products(self, request: FetchProductsRequest) -> FetchProductsResponse:
        """Retorna hasta ``limit`` registros del payload configurado."""
        records = extract_product_records(self._payload)
        return FetchProductsResponse(records=records[: request.limit])


def extract_product_records(payload: Any) -> list[dict[str, Any]]:
    """Valida la forma ``{"products": [...]}`` y retorna la lista cruda."""
    if not isinstance(payload, dict):
        raise LoadError("Payload de catalogo invalido: se esperaba un objeto JSON.")

    records = payload.get("products")
    if not isinstance(records, list):
        raise LoadError("Payload de catalogo invalido: falta el arreglo 'products'.")

    return records
