from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from PySide6 import QtCore

from ..domain.models import Asset
from ..domain.validation import (
    AssetFormValues,
    AssetValidationError,
    build_asset,
    check_unique_id,
    require_fields,
)
from ..repositories.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class InventoryService(QtCore.QObject):
    """
    Application-facing entry point for the inventory.
    Validates form input, applies it to the repository and notifies views.
    """
    inventory_changed = QtCore.Signal()

    def __init__(self, repository: InventoryRepository):
        super().__init__()
        self._repo = repository

    @property
    def repository(self) -> InventoryRepository:
        return self._repo

    def get(self, index: int) -> Optional[Asset]:
        return self._repo.get(index)

    def visible_assets(self, term: str = "") -> List[Tuple[int, Asset]]:
        """Records for the current view; a blank term means show everything."""
        term = (term or "").strip()
        if not term:
            return list(enumerate(self._repo.all()))
        return self._repo.search_indexed(term)

    def add_asset(self, values: AssetFormValues) -> Asset:
        values = require_fields(values)
        check_unique_id(self._repo, values.asset_id)
        asset = build_asset(values)
        self._repo.add(asset)
        logger.info(f"Added {asset.type_name()} {asset.asset_id} ({asset.name})")
        self.inventory_changed.emit()
        return asset

    def update_asset(self, index: int, values: AssetFormValues) -> Asset:
        current = self._repo.get(index)
        if current is None:
            raise AssetValidationError("Please select an asset to edit.", title="No Selection")
        values = require_fields(values)
        check_unique_id(self._repo, values.asset_id, current_id=current.asset_id)
        asset = build_asset(values)
        self._repo.update(index, asset)
        logger.info(f"Updated asset at index {index}: {current.asset_id} -> {asset.asset_id}")
        self.inventory_changed.emit()
        return asset

    def delete_asset(self, index: int) -> bool:
        current = self._repo.get(index)
        if current is None:
            logger.warning(f"Ignoring delete for index {index}; no asset there")
            return False
        self._repo.delete(index)
        logger.info(f"Deleted asset {current.asset_id} ({current.name})")
        self.inventory_changed.emit()
        return True

    def log_details(self) -> None:
        for line in self._repo.details_report().splitlines():
            logger.info(line)
