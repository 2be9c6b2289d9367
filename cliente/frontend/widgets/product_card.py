"""Tarjeta de producto para la grilla del catalogo."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from shared.formatting import format_price
from shared.models import Product


class ProductCard(QFrame):
    """Muestra un producto y emite ``add_requested`` con su id."""

    add_requested = pyqtSignal(object)

    def __init__(
        self,
        product: Product,
        can_add: bool,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.setObjectName("productCard")
        self._product = product
        self._build_ui(can_add)

    def _build_ui(self, can_add: bool) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(14, 14, 14, 14)
        layout.setSpacing(6)

        preview_label = QLabel(self)
        preview_label.setObjectName("previewLabel")
        preview_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        preview_label.setMinimumHeight(90)
        if self._product.thumbnail:
            preview_label.setText("Vista previa")
            preview_label.setToolTip(self._product.thumbnail)
        else:
            preview_label.setText("Sin vista previa")

        title_label = QLabel(self._product.title, self)
        title_label.setObjectName("productTitle")
        title_label.setWordWrap(True)

        category_label = QLabel(self._product.category, self)
        category_label.setObjectName("productCategory")

        price_label = QLabel(format_price(self._product.price), self)
        price_label.setObjectName("productPrice")

        stock_text = (
            f"{self._product.stock} in stock" if self._product.stock > 0 else "Out of stock"
        )
        stock_label = QLabel(stock_text, self)
        stock_label.setObjectName("productStock")

        add_button = QPushButton("Add to Cart", self)
        add_button.setCursor(Qt.CursorShape.PointingHandCursor)
        add_button.setEnabled(can_add)
        if self._product.stock <= 0:
            add_button.setToolTip("Producto sin stock")
        elif not can_add:
            add_button.setToolTip("Cantidad maxima en el carrito")
        add_button.clicked.connect(self._on_add_clicked)

        layout.addWidget(preview_label)
        layout.addWidget(title_label)
        layout.addWidget(category_label)
        layout.addWidget(price_label)
        layout.addWidget(stock_label)
        layout.addStretch(1)
        layout.addWidget(add_button)

    def _on_add_clicked(self, _checked: bool = False) -> None:
        self.add_requested.emit(self._product.id)
