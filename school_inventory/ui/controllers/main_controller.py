from __future__ import annotations
import logging
from typing import Optional

from PySide6 import QtCore

from ... import config
from ...repositories.inventory_repository import InventoryRepository
from ...services.inventory_service import InventoryService

logger = logging.getLogger(__name__)


class MainController(QtCore.QObject):
    """
    Main controller for the application.
    Owns the inventory for the lifetime of the window and exposes the service to the UI.
    """
    def __init__(self, repository: Optional[InventoryRepository] = None, seed_samples: Optional[bool] = None):
        super().__init__()
        self._seed_samples = config.SEED_SAMPLE_DATA if seed_samples is None else bool(seed_samples)
        self.repository = repository if repository is not None else InventoryRepository()
        self.inventory = InventoryService(self.repository)

    def start(self):
        """Load the starting catalog."""
        if self._seed_samples and len(self.repository) == 0:
            self.repository.load_sample_data()
            self.inventory.inventory_changed.emit()
        logger.info(f"=== {config.WINDOW_TITLE} Started ({len(self.repository)} assets) ===")
        if config.LOG_DETAILS_ON_START:
            self.inventory.log_details()

    def shutdown(self):
        """Discard the in-memory catalog."""
        logger.info(f"Shutting down; discarding {len(self.repository)} assets")
