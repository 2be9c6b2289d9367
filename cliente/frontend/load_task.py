"""Tarea en segundo plano para cargar el catalogo."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QObject, QRunnable, pyqtSignal

from shared.errors import LoadError
from shared.models import Product

LOGGER = logging.getLogger(__name__)


class CatalogLoadSignals(QObject):
    """Senales que llevan el resultado de la carga al hilo de la UI."""

    succeeded = pyqtSignal(int, list)
    failed = pyqtSignal(int, str)


class CatalogLoadTask(QRunnable):
    """Ejecuta la carga en el pool de hilos y emite el resultado con su generacion."""

    def __init__(self, generation: int, load: Callable[[], list[Product]]) -> None:
        super().__init__()
        self.signals = CatalogLoadSignals()
        self._generation = generation
        self._load = load

    def run(self) -> None:
        try:
            products = self._load()
        except LoadError as exc:
            self.signals.failed.emit(self._generation, str(exc))
            return
        except Exception as exc:
            LOGGER.exception("Fallo inesperado durante la carga del catalogo.")
            self.signals.failed.emit(self._generation, str(exc))
            return

        self.signals.succeeded.emit(self._generation, products)
