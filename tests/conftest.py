"""
Shared fixtures for the inventory test suite.
"""

import pytest

from school_inventory.domain.models import Electronics, Furniture
from school_inventory.domain.validation import AssetFormValues
from school_inventory.repositories.inventory_repository import InventoryRepository


@pytest.fixture(scope="session")
def qt_core_app():
    """QCoreApplication for tests that touch QObject signals (no display needed)."""
    from PySide6 import QtCore

    app = QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])
    yield app


@pytest.fixture
def seeded_repo():
    """Fresh repository holding the six sample records."""
    return InventoryRepository.with_sample_data()


@pytest.fixture
def monitor():
    return Electronics("E004", "Monitor", "Lab", 30.0)


@pytest.fixture
def stool():
    return Furniture("F004", "Stool", "Art Room", "Oak")


@pytest.fixture
def electronics_form():
    return AssetFormValues(
        asset_id="E004",
        name="Monitor",
        asset_type="Electronics",
        location="Lab",
        specific_value="30",
    )


@pytest.fixture
def service(qt_core_app, seeded_repo):
    from school_inventory.services.inventory_service import InventoryService

    return InventoryService(seeded_repo)
