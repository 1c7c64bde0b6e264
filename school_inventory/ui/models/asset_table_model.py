from __future__ import annotations
from typing import Any, List, Optional

from PySide6 import QtCore

from ... import config
from ..presenters.inventory_presenter import AssetRow


class AssetTableModel(QtCore.QAbstractTableModel):
    """Read-only table model over presenter rows."""

    def __init__(self, parent: Optional[QtCore.QObject] = None) -> None:
        super().__init__(parent)
        self._rows: List[AssetRow] = []

    def set_rows(self, rows: List[AssetRow]) -> None:
        self.beginResetModel()
        self._rows = list(rows)
        self.endResetModel()

    def row_at(self, row: int) -> Optional[AssetRow]:
        if 0 <= row < len(self._rows):
            return self._rows[row]
        return None

    def source_index(self, row: int) -> Optional[int]:
        """Repository index of the record shown at a table row."""
        item = self.row_at(row)
        return item.index if item is not None else None

    def rowCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return len(self._rows)

    def columnCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:  # noqa: N802
        if parent.isValid():
            return 0
        return len(config.TABLE_COLUMNS)

    def data(self, index: QtCore.QModelIndex, role: int = QtCore.Qt.DisplayRole) -> Any:
        if not index.isValid():
            return None
        item = self.row_at(index.row())
        if item is None:
            return None
        if role == QtCore.Qt.DisplayRole:
            return item.as_tuple()[index.column()]
        if role == QtCore.Qt.UserRole:
            return item.index
        return None

    def headerData(self, section: int, orientation: QtCore.Qt.Orientation, role: int = QtCore.Qt.DisplayRole) -> Any:  # noqa: N802
        if role != QtCore.Qt.DisplayRole:
            return None
        if orientation == QtCore.Qt.Horizontal and 0 <= section < len(config.TABLE_COLUMNS):
            return config.TABLE_COLUMNS[section]
        return None

    def flags(self, index: QtCore.QModelIndex) -> QtCore.Qt.ItemFlags:
        if not index.isValid():
            return QtCore.Qt.NoItemFlags
        return QtCore.Qt.ItemIsEnabled | QtCore.Qt.ItemIsSelectable
