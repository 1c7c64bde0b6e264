import os
from typing import Tuple


def _env_flag(name: str, default: str) -> bool:
    """Any value other than "0" enables the flag."""
    return os.environ.get(name, default).strip() != "0"


# Window
WINDOW_TITLE: str = os.environ.get("INVENTORY_WINDOW_TITLE", "School Inventory Management System")
TABLE_MIN_WIDTH_PX: int = int(os.environ.get("TABLE_MIN_WIDTH_PX", "800"))
TABLE_MIN_HEIGHT_PX: int = int(os.environ.get("TABLE_MIN_HEIGHT_PX", "400"))
SEARCH_FIELD_CHARS: int = 20

# Table columns, in row-feed order
TABLE_COLUMNS: Tuple[str, str, str, str, str] = ("ID", "Name", "Type", "Location", "Specifics")

# Startup behaviour: 1=load the six demonstration records
SEED_SAMPLE_DATA: bool = _env_flag("INVENTORY_SEED_SAMPLES", "1")
# Write every record's details line to the log once the catalog is loaded
LOG_DETAILS_ON_START: bool = _env_flag("INVENTORY_LOG_DETAILS_ON_START", "1")

# Logging
LOG_LEVEL: str = os.environ.get("INVENTORY_LOG_LEVEL", "INFO").upper()
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT: str = "%H:%M:%S"
