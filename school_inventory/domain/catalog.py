from __future__ import annotations
from typing import List

from .models import Asset, Electronics, Furniture


def sample_assets() -> List[Asset]:
    """The fixed demonstration catalog loaded at startup (3 electronics, then 3 furniture)."""
    return [
        Electronics("E001", "Laptop", "Computer Lab", 65.0),
        Electronics("E002", "Projector", "Classroom A", 250.0),
        Electronics("E003", "Printer", "Office", 45.0),
        Furniture("F001", "Desk", "Classroom A", "Wood"),
        Furniture("F002", "Chair", "Library", "Plastic"),
        Furniture("F003", "Bookshelf", "Library", "Metal"),
    ]
