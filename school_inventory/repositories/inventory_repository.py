from __future__ import annotations
from typing import Iterable, Iterator, List, Optional, Tuple

from ..domain.catalog import sample_assets
from ..domain.models import Asset

# (asset_id, name, type_name, location, specific_property)
AssetRowTuple = Tuple[str, str, str, str, str]

DETAILS_HEADER = "=== All Asset Details ==="


def asset_row(asset: Asset) -> AssetRowTuple:
    """Display strings for one record, in table column order."""
    return (asset.asset_id, asset.name, asset.type_name(), asset.location, asset.specific_property())


class InventoryRepository:
    """
    Ordered, list-backed collection of inventory records.

    Insertion order is the display and addressing order. Index-based
    operations ignore out-of-range indices instead of raising; callers are
    expected to check a selection exists before editing or deleting.
    """

    def __init__(self, assets: Optional[Iterable[Asset]] = None) -> None:
        self._assets: List[Asset] = list(assets or [])

    @classmethod
    def with_sample_data(cls) -> "InventoryRepository":
        repo = cls()
        repo.load_sample_data()
        return repo

    def load_sample_data(self) -> None:
        """Append the demonstration catalog."""
        self._assets.extend(sample_assets())

    def __len__(self) -> int:
        return len(self._assets)

    def __iter__(self) -> Iterator[Asset]:
        return iter(self.all())

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._assets)

    # --- Mutations ---

    def add(self, asset: Asset) -> None:
        """Append a record. No uniqueness check is done here."""
        self._assets.append(asset)

    def update(self, index: int, asset: Asset) -> None:
        if self._in_range(index):
            self._assets[index] = asset

    def delete(self, index: int) -> None:
        if self._in_range(index):
            del self._assets[index]

    # --- Queries ---

    def get(self, index: int) -> Optional[Asset]:
        if self._in_range(index):
            return self._assets[index]
        return None

    def all(self) -> Tuple[Asset, ...]:
        return tuple(self._assets)

    def search(self, term: str) -> List[Asset]:
        """Case-insensitive substring match on id, name and location, in repository order."""
        return [asset for _, asset in self.search_indexed(term)]

    def search_indexed(self, term: str) -> List[Tuple[int, Asset]]:
        return [(i, asset) for i, asset in enumerate(self._assets) if asset.matches(term)]

    def asset_id_exists(self, asset_id: str) -> bool:
        return any(asset.asset_id == asset_id for asset in self._assets)

    def rows(self) -> List[AssetRowTuple]:
        return [asset_row(a) for a in self._assets]

    def details_report(self) -> str:
        lines = [DETAILS_HEADER]
        lines.extend(asset.details() for asset in self._assets)
        return "\n".join(lines)
