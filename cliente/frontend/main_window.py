"""Ventana principal de ShopHub."""

from __future__ import annotations

from PyQt6.QtCore import Qt, QThreadPool
from PyQt6.QtGui import QFont, QGuiApplication
from PyQt6.QtWidgets import (
    QApplication,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QScrollArea,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from cliente.backend.controller import StorefrontController
from cliente.frontend.dialogs import show_info
from cliente.frontend.load_task import CatalogLoadTask
from cliente.frontend.layouts import clear_layout
from cliente.frontend.widgets.cart_panel import CartPanel
from cliente.frontend.widgets.filters_bar import FiltersBar
from cliente.frontend.widgets.product_card import ProductCard
from parametros import APP_SUBTITLE, APP_TITLE
from shared.models import ProductId
from shared.protocol import StorefrontView

_GRID_COLUMNS = 3


class MainWindow(QMainWindow):
    """Ventana con encabezado, filtros, grilla de productos y carrito.

    No guarda estado propio: cada notificacion del controller vuelve a pintar
    la vista completa desde ``controller.view()``.
    """

    def __init__(self, controller: StorefrontController) -> None:
        super().__init__()
        self._controller = controller
        self._thread_pool = QThreadPool.globalInstance()
        self._pending_tasks: set[CatalogLoadTask] = set()

        self._product_count_label: QLabel
        self._badge_label: QLabel
        self._exit_button: QPushButton
        self._pages: QStackedWidget
        self._loading_page: QWidget
        self._error_page: QWidget
        self._error_label: QLabel
        self._content_page: QWidget
        self._filters_bar: FiltersBar
        self._results_stack: QStackedWidget
        self._grid_layout: QGridLayout
        self._grid_page: QScrollArea
        self._empty_page: QWidget
        self._cart_panel: CartPanel

        self.setWindowTitle(APP_TITLE)
        screen = QGuiApplication.primaryScreen()
        if screen is not None:
            geo = screen.availableGeometry()
            self.resize(int(geo.width() * 0.75), int(geo.height() * 0.85))
        self._build_ui()
        self._apply_styles()
        self._connect_signals()
        self._controller.subscribe(self._refresh)
        self._refresh()

    def _build_ui(self) -> None:
        """Construye encabezado y paginas de carga, error y contenido."""
        central = QWidget(self)
        root_layout = QVBoxLayout(central)
        root_layout.setContentsMargins(0, 0, 0, 0)
        root_layout.setSpacing(0)

        root_layout.addWidget(self._build_header(central))

        self._pages = QStackedWidget(central)
        self._loading_page = self._build_message_page("Loading products...")
        self._error_page = self._build_error_page()
        self._content_page = self._build_content_page()
        self._pages.addWidget(self._loading_page)
        self._pages.addWidget(self._error_page)
        self._pages.addWidget(self._content_page)
        root_layout.addWidget(self._pages, 1)

        self.setCentralWidget(central)

    def _build_header(self, parent: QWidget) -> QWidget:
        header = QFrame(parent)
        header.setObjectName("header")
        layout = QHBoxLayout(header)
        layout.setContentsMargins(28, 14, 28, 14)

        title_label = QLabel(APP_TITLE, header)
        title_label.setFont(QFont("Segoe UI", 18, QFont.Weight.Bold))
        subtitle_label = QLabel(APP_SUBTITLE, header)
        subtitle_label.setObjectName("subtitleLabel")

        title_layout = QVBoxLayout()
        title_layout.setSpacing(0)
        title_layout.addWidget(title_label)
        title_layout.addWidget(subtitle_label)

        self._product_count_label = QLabel(header)
        self._product_count_label.setObjectName("countLabel")
        self._product_count_label.setToolTip("Productos en catalogo")

        cart_label = QLabel("Cart", header)
        cart_label.setObjectName("cartLabel")
        self._badge_label = QLabel(header)
        self._badge_label.setObjectName("badgeLabel")
        self._exit_button = QPushButton("Salir", header)
        self._exit_button.setObjectName("exitButton")
        self._exit_button.setCursor(Qt.CursorShape.PointingHandCursor)

        layout.addLayout(title_layout)
        layout.addStretch(1)
        layout.addWidget(self._product_count_label)
        layout.addSpacing(18)
        layout.addWidget(cart_label)
        layout.addWidget(self._badge_label)
        layout.addSpacing(18)
        layout.addWidget(self._exit_button)
        return header

    def _build_message_page(self, message: str) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout(page)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)
        label = QLabel(message, page)
        label.setObjectName("messageLabel")
        layout.addWidget(label)
        return page

    def _build_error_page(self) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout(page)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        card = QFrame(page)
        card.setObjectName("errorCard")
        card_layout = QVBoxLayout(card)
        card_layout.setContentsMargins(24, 20, 24, 20)

        title_label = QLabel("Error loading products", card)
        title_label.setObjectName("errorTitle")
        self._error_label = QLabel(card)
        self._error_label.setObjectName("errorMessage")
        retry_button = QPushButton("Reintentar", card)
        retry_button.setCursor(Qt.CursorShape.PointingHandCursor)
        retry_button.clicked.connect(self._on_retry_clicked)

        card_layout.addWidget(title_label)
        card_layout.addWidget(self._error_label)
        card_layout.addWidget(retry_button)
        layout.addWidget(card)
        return page

    def _build_content_page(self) -> QWidget:
        page = QWidget(self)
        layout = QHBoxLayout(page)
        layout.setContentsMargins(28, 24, 28, 24)
        layout.setSpacing(24)

        left_layout = QVBoxLayout()
        left_layout.setSpacing(16)
        self._filters_bar = FiltersBar(page)

        self._results_stack = QStackedWidget(page)
        self._grid_page = QScrollArea(page)
        self._grid_page.setWidgetResizable(True)
        grid_container = QWidget(self._grid_page)
        self._grid_layout = QGridLayout(grid_container)
        self._grid_layout.setSpacing(16)
        self._grid_layout.setAlignment(Qt.AlignmentFlag.AlignTop)
        self._grid_page.setWidget(grid_container)
        self._empty_page = self._build_empty_page()
        self._results_stack.addWidget(self._grid_page)
        self._results_stack.addWidget(self._empty_page)

        left_layout.addWidget(self._filters_bar)
        left_layout.addWidget(self._results_stack, 1)

        self._cart_panel = CartPanel(page)

        layout.addLayout(left_layout, 2)
        layout.addWidget(self._cart_panel, 1)
        return page

    def _build_empty_page(self) -> QWidget:
        page = QWidget(self)
        layout = QVBoxLayout(page)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        title_label = QLabel("No products found", page)
        title_label.setObjectName("emptyTitle")
        hint_label = QLabel("Try adjusting your filters or search terms", page)
        clear_button = QPushButton("Clear Filters", page)
        clear_button.clicked.connect(self._on_clear_filters_clicked)

        layout.addWidget(title_label, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(hint_label, alignment=Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(clear_button, alignment=Qt.AlignmentFlag.AlignCenter)
        return page

    def _apply_styles(self) -> None:
        """Aplica estilos QSS de la interfaz."""
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #f9fafb;
            }
            QFrame#header {
                background-color: #ffffff;
                border-bottom: 1px solid #e5e7eb;
            }
            QLabel#subtitleLabel, QLabel#productCategory, QLabel#productStock {
                color: #6b7280;
                font-size: 12px;
            }
            QLabel#badgeLabel {
                background-color: #ef4444;
                border-radius: 9px;
                color: #ffffff;
                font-weight: 600;
                padding: 2px 8px;
            }
            QFrame#filtersBar, QFrame#productCard, QFrame#cartPanel {
                background-color: #ffffff;
                border: 1px solid #e5e7eb;
                border-radius: 10px;
            }
            QFrame#errorCard {
                background-color: #fef2f2;
                border: 1px solid #fecaca;
                border-radius: 10px;
            }
            QLabel#errorTitle {
                color: #7f1d1d;
                font-weight: 600;
            }
            QLabel#productTitle, QLabel#cartTitle, QLabel#emptyTitle {
                color: #111827;
                font-size: 15px;
                font-weight: 600;
            }
            QLabel#productPrice, QLabel#cartTotal {
                color: #111827;
                font-size: 16px;
                font-weight: 700;
            }
            QLabel#previewLabel {
                background-color: #f3f4f6;
                border-radius: 8px;
                color: #9ca3af;
            }
            QPushButton {
                background-color: #2563eb;
                border: none;
                border-radius: 8px;
                color: #ffffff;
                font-weight: 600;
                min-height: 32px;
                padding: 4px 12px;
            }
            QPushButton:hover {
                background-color: #1d4ed8;
            }
            QPushButton:disabled {
                background-color: #e5e7eb;
                color: #9ca3af;
            }
            QPushButton#removeButton, QPushButton#clearFiltersButton, QPushButton#exitButton {
                background-color: #e5e7eb;
                color: #1f2937;
            }
            """
        )

    def _connect_signals(self) -> None:
        """Conecta widgets con acciones del controller."""
        self._filters_bar.search_changed.connect(self._controller.set_search_term)
        self._filters_bar.category_changed.connect(self._controller.set_category)
        self._filters_bar.sort_changed.connect(self._controller.set_sort_order)
        self._filters_bar.clear_requested.connect(self._controller.clear_filters)
        self._cart_panel.increment_requested.connect(self._controller.increment)
        self._cart_panel.decrement_requested.connect(self._controller.decrement)
        self._cart_panel.remove_requested.connect(self._controller.remove_from_cart)
        self._cart_panel.checkout_requested.connect(self._on_checkout_clicked)
        self._exit_button.clicked.connect(self._on_exit_clicked)

    def start_load(self) -> None:
        """Lanza la carga del catalogo en el pool de hilos."""
        generation = self._controller.begin_load()
        task = CatalogLoadTask(generation, self._controller.run_load)
        task.signals.succeeded.connect(self._controller.complete_load)
        task.signals.failed.connect(self._controller.fail_load)
        task.signals.succeeded.connect(lambda *_args: self._pending_tasks.discard(task))
        task.signals.failed.connect(lambda *_args: self._pending_tasks.discard(task))
        self._pending_tasks.add(task)
        self._thread_pool.start(task)

    def _refresh(self) -> None:
        """Pinta la vista derivada mas reciente."""
        view = self._controller.view()

        self._product_count_label.setText(f"{view.product_count} products")
        self._badge_label.setText(str(view.cart_badge_count))
        self._badge_label.setVisible(view.cart_badge_count > 0)

        if view.loading:
            self._pages.setCurrentWidget(self._loading_page)
            return

        if view.error:
            self._error_label.setText(view.error)
            self._pages.setCurrentWidget(self._error_page)
            return

        self._filters_bar.sync(view.filters, view.categories)
        self._render_products(view)
        self._cart_panel.show_cart(view.cart, view.totals)
        self._pages.setCurrentWidget(self._content_page)

    def _render_products(self, view: StorefrontView) -> None:
        clear_layout(self._grid_layout)

        if view.is_empty:
            self._results_stack.setCurrentWidget(self._empty_page)
            return

        for index, product in enumerate(view.filtered_products):
            line = view.cart.find_line(product.id)
            can_add = product.stock > 0 and (line is None or line.can_increment)
            card = ProductCard(product, can_add=can_add)
            card.add_requested.connect(self._on_add_requested)
            row, column = divmod(index, _GRID_COLUMNS)
            self._grid_layout.addWidget(card, row, column)

        self._results_stack.setCurrentWidget(self._grid_page)

    def _on_add_requested(self, product_id: ProductId) -> None:
        self._controller.add_to_cart(product_id)

    def _on_retry_clicked(self, _checked: bool = False) -> None:
        self.start_load()

    def _on_clear_filters_clicked(self, _checked: bool = False) -> None:
        self._controller.clear_filters()

    def _on_checkout_clicked(self) -> None:
        self._controller.on_checkout()
        show_info(self, "Checkout", "El pago no esta disponible en esta version.")

    def _on_exit_clicked(self, _checked: bool = False) -> None:
        """Solicita al controller el cierre de la app."""
        self._controller.on_exit(QApplication.instance().quit)
