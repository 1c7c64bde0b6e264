from __future__ import annotations
from typing import Optional

from PySide6 import QtCore, QtWidgets

from .. import config
from .controllers.main_controller import MainController
from .dialogs.asset_editor import AssetEditorDialog
from .models.asset_table_model import AssetTableModel
from .presenters.inventory_presenter import InventoryPresenter
from .state import ViewState


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, controller: Optional[MainController] = None) -> None:
        super().__init__()
        self.setWindowTitle(config.WINDOW_TITLE)

        self.controller = controller if controller is not None else MainController()
        self.state = ViewState()
        self.presenter = InventoryPresenter()
        self.table_model = AssetTableModel(self)

        self._setup_ui()
        self._connect_signals()

        # Initial load (seeding also emits inventory_changed)
        self.controller.start()
        self._refresh_table()

    def _setup_ui(self):
        central = QtWidgets.QWidget()
        layout = QtWidgets.QVBoxLayout(central)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(6)

        # Search row
        search_row = QtWidgets.QHBoxLayout()
        search_row.addStretch(1)
        search_row.addWidget(QtWidgets.QLabel("Search:"))
        self.edit_search = QtWidgets.QLineEdit()
        self.edit_search.setMinimumWidth(config.SEARCH_FIELD_CHARS * self.edit_search.fontMetrics().averageCharWidth())
        self.btn_search = QtWidgets.QPushButton("Search")
        self.btn_show_all = QtWidgets.QPushButton("Show All")
        search_row.addWidget(self.edit_search)
        search_row.addWidget(self.btn_search)
        search_row.addWidget(self.btn_show_all)
        search_row.addStretch(1)

        # Table
        self.table = QtWidgets.QTableView()
        self.table.setModel(self.table_model)
        self.table.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        self.table.setMinimumSize(config.TABLE_MIN_WIDTH_PX, config.TABLE_MIN_HEIGHT_PX)

        # CRUD buttons
        btn_row = QtWidgets.QHBoxLayout()
        btn_row.addStretch(1)
        self.btn_add = QtWidgets.QPushButton("Add Asset")
        self.btn_edit = QtWidgets.QPushButton("Edit Selected Asset")
        self.btn_delete = QtWidgets.QPushButton("Delete Selected Asset")
        btn_row.addWidget(self.btn_add)
        btn_row.addWidget(self.btn_edit)
        btn_row.addWidget(self.btn_delete)
        btn_row.addStretch(1)

        layout.addLayout(search_row)
        layout.addWidget(self.table, 1)
        layout.addLayout(btn_row)
        self.setCentralWidget(central)

        self.status_label = QtWidgets.QLabel("")
        self.statusBar().addPermanentWidget(self.status_label)

    def _connect_signals(self):
        self.controller.inventory.inventory_changed.connect(self._refresh_table)

        self.btn_search.clicked.connect(self._on_search)
        self.edit_search.returnPressed.connect(self._on_search)
        self.btn_show_all.clicked.connect(self._on_show_all)

        self.btn_add.clicked.connect(self._on_add)
        self.btn_edit.clicked.connect(self._on_edit)
        self.btn_delete.clicked.connect(self._on_delete)

    # --- Table ---

    def _refresh_table(self) -> None:
        indexed = self.controller.inventory.visible_assets(self.state.search_term)
        self.table_model.set_rows(self.presenter.build_rows(indexed))
        self.table.resizeColumnsToContents()
        self.status_label.setText(
            self.presenter.count_text(len(indexed), len(self.controller.repository))
        )

    def _selected_source_index(self) -> Optional[int]:
        selection = self.table.selectionModel().selectedRows()
        if not selection:
            return None
        return self.table_model.source_index(selection[0].row())

    # --- Search ---

    @QtCore.Slot()
    def _on_search(self) -> None:
        term = self.edit_search.text().strip()
        self.state.search_term = term
        self._refresh_table()
        if term and self.table_model.rowCount() == 0:
            QtWidgets.QMessageBox.information(self, "Search Results", self.presenter.no_results_message(term))

    @QtCore.Slot()
    def _on_show_all(self) -> None:
        self.state.search_term = ""
        self._refresh_table()

    # --- CRUD ---

    @QtCore.Slot()
    def _on_add(self) -> None:
        dlg = AssetEditorDialog(self.controller.inventory.add_asset, parent=self)
        if dlg.exec() == QtWidgets.QDialog.Accepted:
            self._on_show_all()
            QtWidgets.QMessageBox.information(self, "Success", "Asset added successfully!")

    @QtCore.Slot()
    def _on_edit(self) -> None:
        index = self._selected_source_index()
        asset = self.controller.inventory.get(index) if index is not None else None
        if asset is None:
            QtWidgets.QMessageBox.warning(self, "No Selection", "Please select an asset to edit.")
            return

        def submit(values):
            return self.controller.inventory.update_asset(index, values)

        dlg = AssetEditorDialog(submit, asset=asset, parent=self)
        if dlg.exec() == QtWidgets.QDialog.Accepted:
            self._on_show_all()
            QtWidgets.QMessageBox.information(self, "Success", "Asset updated successfully!")

    @QtCore.Slot()
    def _on_delete(self) -> None:
        index = self._selected_source_index()
        if index is None:
            QtWidgets.QMessageBox.warning(self, "No Selection", "Please select an asset to delete.")
            return

        confirm = QtWidgets.QMessageBox.question(
            self,
            "Confirm Deletion",
            "Are you sure you want to delete this asset?",
            QtWidgets.QMessageBox.Yes | QtWidgets.QMessageBox.No,
        )
        if confirm != QtWidgets.QMessageBox.Yes:
            return
        if self.controller.inventory.delete_asset(index):
            self._on_show_all()
            QtWidgets.QMessageBox.information(self, "Success", "Asset deleted successfully!")
