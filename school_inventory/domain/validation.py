"""Form input validation.

Turns the raw strings typed into the add/edit dialog into a record, or raises
AssetValidationError with a message and caption suitable for a message box.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, replace
from typing import Optional, TYPE_CHECKING

from .models import Asset, Electronics, Furniture, ELECTRONICS, FURNITURE

if TYPE_CHECKING:
    from ..repositories.inventory_repository import InventoryRepository


MSG_REQUIRED = "All fields are required!"
MSG_WATTAGE = "Please enter a valid positive number for wattage!"
MSG_DUPLICATE_ID = "Asset ID already exists! Please use a different ID."


class AssetValidationError(ValueError):
    """Raised when form input cannot be turned into a valid record."""

    def __init__(self, message: str, title: str = "Validation Error") -> None:
        super().__init__(message)
        self.title = title


@dataclass(frozen=True)
class AssetFormValues:
    asset_id: str
    name: str
    asset_type: str
    location: str
    specific_value: str

    def stripped(self) -> "AssetFormValues":
        return replace(
            self,
            asset_id=(self.asset_id or "").strip(),
            name=(self.name or "").strip(),
            asset_type=(self.asset_type or "").strip(),
            location=(self.location or "").strip(),
            specific_value=(self.specific_value or "").strip(),
        )


def parse_wattage(text: str) -> float:
    try:
        wattage = float(text)
    except (TypeError, ValueError) as exc:
        raise AssetValidationError(MSG_WATTAGE, title="Invalid Input") from exc
    if not math.isfinite(wattage) or wattage < 0:
        raise AssetValidationError(MSG_WATTAGE, title="Invalid Input")
    return wattage


def require_fields(values: AssetFormValues) -> AssetFormValues:
    """Trim the form values and reject any blank field."""
    v = values.stripped()
    if not (v.asset_id and v.name and v.location and v.specific_value):
        raise AssetValidationError(MSG_REQUIRED)
    return v


def build_asset(values: AssetFormValues) -> Asset:
    """Validate form values and construct the matching record variant.

    Callers that also check id uniqueness run it between require_fields and
    this call, so a duplicate id is reported before a bad wattage.
    """
    v = require_fields(values)
    if v.asset_type == ELECTRONICS:
        return Electronics(v.asset_id, v.name, v.location, parse_wattage(v.specific_value))
    if v.asset_type == FURNITURE:
        return Furniture(v.asset_id, v.name, v.location, v.specific_value)
    raise AssetValidationError(f"Unknown asset type: {v.asset_type or '(none)'}")


def check_unique_id(
    repository: "InventoryRepository",
    asset_id: str,
    current_id: Optional[str] = None,
) -> None:
    """Reject ids already in the repository.

    When editing, the check only runs if the id was changed from ``current_id``.
    """
    asset_id = (asset_id or "").strip()
    if current_id is not None and asset_id == current_id:
        return
    if repository.asset_id_exists(asset_id):
        raise AssetValidationError(MSG_DUPLICATE_ID, title="Duplicate ID")
