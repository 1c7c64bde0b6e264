from __future__ import annotations
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Dict, Tuple

# --- Constants ---
ELECTRONICS = "Electronics"
FURNITURE = "Furniture"

# Order matches the type combo in the editor dialog
VARIANT_TYPES: Tuple[str, ...] = (ELECTRONICS, FURNITURE)

SPECIFIC_LABELS: Dict[str, str] = {
    ELECTRONICS: "Wattage:",
    FURNITURE: "Material:",
}


def specific_label(type_name: str) -> str:
    """Form label for the variant-specific field of a type."""
    return SPECIFIC_LABELS.get(type_name, SPECIFIC_LABELS[ELECTRONICS])


# --- Number Formatting ---

# Floats reach 309 integer digits, past the default 28-digit context
_WIDE = Context(prec=400)


def format_one_decimal(value: float) -> str:
    """One decimal place with halves rounded up (0.25 -> "0.3")."""
    value = float(value)
    if not math.isfinite(value):
        return format_wattage(value)
    rounded = Decimal(repr(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP, context=_WIDE)
    return f"{rounded:.1f}"


def format_wattage(value: float) -> str:
    """Shortest round-trip digits; scientific ("1.0E7") outside [1e-3, 1e7)."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0 or 1e-3 <= abs(value) < 1e7:
        return repr(value)
    d = Decimal(repr(abs(value))).normalize()
    digits = "".join(str(n) for n in d.as_tuple().digits)
    mantissa = f"{digits[0]}.{digits[1:] or '0'}"
    sign = "-" if value < 0 else ""
    return f"{sign}{mantissa}E{d.adjusted()}"


# --- Asset Models ---

@dataclass(frozen=True)
class Asset(ABC):
    """Common fields shared by every inventory record."""
    asset_id: str
    name: str
    location: str

    @abstractmethod
    def details(self) -> str:
        """Human-readable one-line description including the variant attribute."""

    @abstractmethod
    def type_name(self) -> str:
        ...

    @abstractmethod
    def specific_property(self) -> str:
        """Display string for the variant attribute alone."""

    @abstractmethod
    def specific_value(self) -> str:
        """Raw editable value of the variant attribute (used to pre-fill forms)."""

    def matches(self, term: str) -> bool:
        needle = term.lower()
        return (
            needle in self.name.lower()
            or needle in self.asset_id.lower()
            or needle in self.location.lower()
        )


@dataclass(frozen=True)
class Electronics(Asset):
    wattage: float

    def details(self) -> str:
        return (
            f"Electronics: {self.name} (ID: {self.asset_id}) - "
            f"Location: {self.location}, Wattage: {format_one_decimal(self.wattage)}W"
        )

    def type_name(self) -> str:
        return ELECTRONICS

    def specific_property(self) -> str:
        # 65 -> "65.0W", 1e7 -> "1.0E7W"
        return f"{format_wattage(self.wattage)}W"

    def specific_value(self) -> str:
        return str(float(self.wattage))


@dataclass(frozen=True)
class Furniture(Asset):
    material: str

    def details(self) -> str:
        return (
            f"Furniture: {self.name} (ID: {self.asset_id}) - "
            f"Location: {self.location}, Material: {self.material}"
        )

    def type_name(self) -> str:
        return FURNITURE

    def specific_property(self) -> str:
        return self.material

    def specific_value(self) -> str:
        return self.material
