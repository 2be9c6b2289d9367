"""Barra de busqueda, categoria y orden de precio."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtWidgets import (
    QComboBox,
    QFrame,
    QGridLayout,
    QLabel,
    QLineEdit,
    QPushButton,
    QWidget,
)

from shared.models import FilterState, SortOrder

_ALL_CATEGORIES = "All Categories"
_SORT_OPTIONS: tuple[tuple[str, SortOrder], ...] = (
    ("Default", SortOrder.NONE),
    ("Low to High", SortOrder.PRICE_ASC),
    ("High to Low", SortOrder.PRICE_DESC),
)


class FiltersBar(QFrame):
    """Controles de filtro; solo emite senales, no guarda estado propio."""

    search_changed = pyqtSignal(str)
    category_changed = pyqtSignal(str)
    sort_changed = pyqtSignal(str)
    clear_requested = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setObjectName("filtersBar")
        self._categories: list[str] = []

        self._search_input: QLineEdit
        self._category_combo: QComboBox
        self._sort_combo: QComboBox
        self._clear_button: QPushButton

        self._build_ui()
        self._connect_signals()

    def _build_ui(self) -> None:
        """Construye los controles en una grilla de dos filas."""
        layout = QGridLayout(self)
        layout.setContentsMargins(18, 16, 18, 16)
        layout.setHorizontalSpacing(14)
        layout.setVerticalSpacing(6)

        self._search_input = QLineEdit(self)
        self._search_input.setPlaceholderText("Search...")
        self._search_input.setClearButtonEnabled(True)

        self._category_combo = QComboBox(self)
        self._category_combo.addItem(_ALL_CATEGORIES, "")

        self._sort_combo = QComboBox(self)
        for label, order in _SORT_OPTIONS:
            self._sort_combo.addItem(label, order.value)

        self._clear_button = QPushButton("Clear Filters", self)
        self._clear_button.setObjectName("clearFiltersButton")

        layout.addWidget(QLabel("Search Products", self), 0, 0)
        layout.addWidget(QLabel("Category", self), 0, 1)
        layout.addWidget(QLabel("Sort by Price", self), 0, 2)
        layout.addWidget(self._search_input, 1, 0)
        layout.addWidget(self._category_combo, 1, 1)
        layout.addWidget(self._sort_combo, 1, 2)
        layout.addWidget(self._clear_button, 1, 3)
        layout.setColumnStretch(0, 2)
        layout.setColumnStretch(1, 1)
        layout.setColumnStretch(2, 1)

    def _connect_signals(self) -> None:
        self._search_input.textChanged.connect(self.search_changed)
        self._category_combo.currentIndexChanged.connect(self._on_category_index_changed)
        self._sort_combo.currentIndexChanged.connect(self._on_sort_index_changed)
        self._clear_button.clicked.connect(self.clear_requested)

    def sync(self, filters: FilterState, categories: list[str]) -> None:
        """Refleja el estado del controller sin re-emitir senales."""
        widgets = (self._search_input, self._category_combo, self._sort_combo)
        for widget in widgets:
            widget.blockSignals(True)
        try:
            if self._search_input.text() != filters.search_term:
                self._search_input.setText(filters.search_term)

            if categories != self._categories:
                self._categories = list(categories)
                self._category_combo.clear()
                self._category_combo.addItem(_ALL_CATEGORIES, "")
                for category in categories:
                    self._category_combo.addItem(category, category)

            category_index = self._category_combo.findData(filters.selected_category)
            self._category_combo.setCurrentIndex(max(category_index, 0))

            sort_index = self._sort_combo.findData(SortOrder(filters.sort_order).value)
            self._sort_combo.setCurrentIndex(max(sort_index, 0))
        finally:
            for widget in widgets:
                widget.blockSignals(False)

    def _on_category_index_changed(self, index: int) -> None:
        self.category_changed.emit(self._category_combo.itemData(index) or "")

    def _on_sort_index_changed(self, index: int) -> None:
        self.sort_changed.emit(self._sort_combo.itemData(index) or "")
