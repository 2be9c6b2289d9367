"""Inicializacion de la aplicacion de cliente."""

from __future__ import annotations

import logging
import sys

from PyQt6.QtWidgets import QApplication

from cliente.backend.catalog_loader import CatalogLoader
from cliente.backend.controller import StorefrontController
from cliente.backend.gateway import HttpCatalogGateway
from cliente.frontend.main_window import MainWindow

LOGGER = logging.getLogger(__name__)


def main() -> int:
    """Ejecuta la aplicacion grafica."""
    app = QApplication(sys.argv)

    gateway = HttpCatalogGateway()
    controller = StorefrontController(loader=CatalogLoader(gateway))
    window = MainWindow(controller=controller)
    window.showMaximized()
    window.start_load()

    LOGGER.info("Aplicacion iniciada.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
