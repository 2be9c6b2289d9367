"""Panel lateral del carrito."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from cliente.frontend.layouts import clear_layout
from shared.formatting import format_line_price, format_price
from shared.models import Cart, CartLine, CartTotals


class CartPanel(QFrame):
    """Lista lineas del carrito con controles de cantidad y totales."""

    increment_requested = pyqtSignal(object)
    decrement_requested = pyqtSignal(object)
    remove_requested = pyqtSignal(object)
    checkout_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("cartPanel")
        self.setMinimumWidth(320)

        self._count_label: QLabel
        self._lines_layout: QVBoxLayout
        self._items_label: QLabel
        self._total_label: QLabel
        self._checkout_button: QPushButton

        self._build_ui()

    def _build_ui(self) -> None:
        """Construye encabezado, lista de lineas y bloque de totales."""
        root_layout = QVBoxLayout(self)
        root_layout.setContentsMargins(18, 18, 18, 18)
        root_layout.setSpacing(12)

        header_layout = QHBoxLayout()
        title_label = QLabel("Shopping Cart", self)
        title_label.setObjectName("cartTitle")
        self._count_label = QLabel(self)
        self._count_label.setObjectName("badgeLabel")
        header_layout.addWidget(title_label)
        header_layout.addStretch(1)
        header_layout.addWidget(self._count_label)

        self._lines_layout = QVBoxLayout()
        self._lines_layout.setSpacing(10)

        self._items_label = QLabel(self)
        self._total_label = QLabel(self)
        self._total_label.setObjectName("cartTotal")

        self._checkout_button = QPushButton("Proceed to Checkout", self)
        self._checkout_button.setCursor(Qt.CursorShape.PointingHandCursor)
        self._checkout_button.clicked.connect(self.checkout_requested)

        root_layout.addLayout(header_layout)
        root_layout.addLayout(self._lines_layout)
        root_layout.addStretch(1)
        root_layout.addWidget(self._items_label)
        root_layout.addWidget(self._total_label)
        root_layout.addWidget(self._checkout_button)

    def show_cart(self, cart: Cart, totals: CartTotals) -> None:
        """Reconstruye las lineas a partir del carrito actual."""
        clear_layout(self._lines_layout)

        if cart.is_empty:
            empty_label = QLabel("Your cart is empty", self)
            empty_label.setObjectName("emptyCartLabel")
            empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self._lines_layout.addWidget(empty_label)
        else:
            for line in cart:
                self._lines_layout.addWidget(self._build_line_row(line))

        self._count_label.setVisible(not cart.is_empty)
        self._count_label.setText(str(totals.total_items))
        self._items_label.setText(f"Items: {totals.total_items}")
        self._total_label.setText(f"Total: {format_price(totals.total_price)}")
        self._items_label.setVisible(not cart.is_empty)
        self._total_label.setVisible(not cart.is_empty)
        self._checkout_button.setVisible(not cart.is_empty)

    def _build_line_row(self, line: CartLine) -> QWidget:
        """Construye la fila de una linea con botones -, + y eliminar."""
        row = QFrame(self)
        row.setObjectName("cartLine")
        layout = QVBoxLayout(row)
        layout.setContentsMargins(10, 8, 10, 8)
        layout.setSpacing(4)

        title_label = QLabel(line.product.title, row)
        title_label.setWordWrap(True)
        price_label = QLabel(format_line_price(line.product.price, line.quantity), row)
        subtotal_label = QLabel(format_price(line.subtotal), row)
        subtotal_label.setObjectName("lineSubtotal")

        controls_layout = QHBoxLayout()
        decrement_button = QPushButton("−", row)
        quantity_label = QLabel(str(line.quantity), row)
        quantity_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        increment_button = QPushButton("+", row)
        increment_button.setEnabled(line.can_increment)
        remove_button = QPushButton("Remove", row)
        remove_button.setObjectName("removeButton")

        product_id = line.product.id
        decrement_button.clicked.connect(
            lambda _checked=False, pid=product_id: self.decrement_requested.emit(pid)
        )
        increment_button.clicked.connect(
            lambda _checked=False, pid=product_id: self.increment_requested.emit(pid)
        )
        remove_button.clicked.connect(
            lambda _checked=False, pid=product_id: self.remove_requested.emit(pid)
        )

        controls_layout.addWidget(decrement_button)
        controls_layout.addWidget(quantity_label)
        controls_layout.addWidget(increment_button)
        controls_layout.addStretch(1)
        controls_layout.addWidget(remove_button)

        layout.addWidget(title_label)
        layout.addWidget(price_label)
        layout.addWidget(subtotal_label)
        layout.addLayout(controls_layout)
        return row
