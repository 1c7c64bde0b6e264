from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Tuple

from ...domain.models import Asset
from ...repositories.inventory_repository import asset_row


@dataclass(frozen=True)
class AssetRow:
    """One table row: display strings plus the record's position in the repository."""
    index: int
    asset_id: str
    name: str
    type_name: str
    location: str
    specifics: str

    def as_tuple(self) -> Tuple[str, str, str, str, str]:
        return (self.asset_id, self.name, self.type_name, self.location, self.specifics)


class InventoryPresenter:
    """
    Flattens heterogeneous records into uniform table rows.
    Each variant renders its own specific column, so no type checks happen here.
    """

    def build_row(self, index: int, asset: Asset) -> AssetRow:
        return AssetRow(index, *asset_row(asset))

    def build_rows(self, indexed_assets: Iterable[Tuple[int, Asset]]) -> List[AssetRow]:
        return [self.build_row(i, a) for i, a in indexed_assets]

    def no_results_message(self, term: str) -> str:
        return f"No assets found matching: {term}"

    def count_text(self, shown: int, total: int) -> str:
        if shown == total:
            return f"{total} assets"
        return f"Showing {shown} of {total} assets"
