"""Repository layer for the in-memory inventory.

These modules are intentionally UI-free; they own the ordered record
collection and answer lookups against it.
"""

from .inventory_repository import InventoryRepository, AssetRowTuple, asset_row

__all__ = ["InventoryRepository", "AssetRowTuple", "asset_row"]
