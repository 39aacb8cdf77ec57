from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_BUNDLED_CSV = Path(__file__).resolve().parent.parent / "data" / "temples.csv"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Where the temple catalog lives and how its list columns are encoded.
    """

    data_path: Path = Path(os.getenv("TEMPLE_CATALOG_PATH") or _BUNDLED_CSV)
    list_separator: str = "|"


DEFAULT_CATALOG_CONFIG = CatalogConfig()
