from __future__ import annotations

import logging
from typing import Callable, Optional

from PySide6 import QtWidgets

from ...domain.models import Asset, VARIANT_TYPES, specific_label
from ...domain.validation import AssetFormValues, AssetValidationError

logger = logging.getLogger(__name__)


class AssetEditorDialog(QtWidgets.QDialog):
    """Add/edit form for a single asset.

    ``on_submit`` receives the form values and either applies them or raises
    AssetValidationError; on error the dialog stays open.
    """

    def __init__(
        self,
        on_submit: Callable[[AssetFormValues], Asset],
        asset: Optional[Asset] = None,
        parent: Optional[QtWidgets.QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self._on_submit = on_submit
        self._is_edit = asset is not None
        self.saved_asset: Optional[Asset] = None

        self.setWindowTitle("Edit Asset" if self._is_edit else "Add Asset")
        self.setModal(True)

        root = QtWidgets.QVBoxLayout(self)
        form = QtWidgets.QFormLayout()

        self.edit_id = QtWidgets.QLineEdit()
        self.edit_name = QtWidgets.QLineEdit()
        self.combo_type = QtWidgets.QComboBox()
        self.combo_type.addItems(list(VARIANT_TYPES))
        self.edit_location = QtWidgets.QLineEdit()
        self.edit_specific = QtWidgets.QLineEdit()
        self.lbl_specific = QtWidgets.QLabel(specific_label(VARIANT_TYPES[0]))

        form.addRow("Asset ID:", self.edit_id)
        form.addRow("Name:", self.edit_name)
        form.addRow("Type:", self.combo_type)
        form.addRow("Location:", self.edit_location)
        form.addRow(self.lbl_specific, self.edit_specific)

        if asset is not None:
            self._populate(asset)

        self.combo_type.currentTextChanged.connect(self._on_type_changed)

        btns = QtWidgets.QDialogButtonBox()
        self.btn_save = btns.addButton("Update" if self._is_edit else "Add", QtWidgets.QDialogButtonBox.AcceptRole)
        btns.addButton(QtWidgets.QDialogButtonBox.Cancel)
        btns.accepted.connect(self._on_save)
        btns.rejected.connect(self.reject)

        root.addLayout(form)
        root.addWidget(btns)

    def _populate(self, asset: Asset) -> None:
        self.edit_id.setText(asset.asset_id)
        self.edit_name.setText(asset.name)
        self.edit_location.setText(asset.location)
        self.combo_type.setCurrentText(asset.type_name())
        self.lbl_specific.setText(specific_label(asset.type_name()))
        self.edit_specific.setText(asset.specific_value())

    def _on_type_changed(self, type_name: str) -> None:
        self.lbl_specific.setText(specific_label(type_name))
        # Editing keeps whatever was typed; a fresh form starts blank for the new type
        if not self._is_edit:
            self.edit_specific.clear()

    def get_values(self) -> AssetFormValues:
        return AssetFormValues(
            asset_id=self.edit_id.text(),
            name=self.edit_name.text(),
            asset_type=self.combo_type.currentText(),
            location=self.edit_location.text(),
            specific_value=self.edit_specific.text(),
        )

    def _on_save(self) -> None:
        try:
            self.saved_asset = self._on_submit(self.get_values())
        except AssetValidationError as exc:
            QtWidgets.QMessageBox.critical(self, exc.title, str(exc))
            return
        except Exception as exc:
            logger.exception("Saving asset failed")
            QtWidgets.QMessageBox.critical(self, "Error", f"An error occurred: {exc}")
            return
        self.accept()
