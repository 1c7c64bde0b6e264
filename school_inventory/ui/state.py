from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ViewState:
    # Active filter; empty shows the whole catalog
    search_term: str = ""
