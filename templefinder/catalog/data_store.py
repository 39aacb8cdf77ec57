from __future__ import annotations

import logging
from typing import List

import pandas as pd

from ..search.cache import clear_cache
from ..search.indexer import build_facet_options
from .config import DEFAULT_CATALOG_CONFIG, CatalogConfig
from .errors import CatalogError
from .models import Catalog, Temple

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS: List[str] = [
    "id",
    "name",
    "city",
    "country",
    "region",
    "tradition",
    "environment",
    "founded",
    "significance_score",
]

OPTIONAL_COLUMNS: List[str] = [
    "description",
    "website",
    "highlights",
    "features",
    "visiting_hours",
    "best_visit",
]

_catalog: Catalog | None = None


def _split_list(raw: str, separator: str) -> tuple[str, ...]:
    return tuple(part.strip() for part in raw.split(separator) if part.strip())


def _validate(df: pd.DataFrame) -> None:
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise CatalogError(f"Catalog is missing required columns: {', '.join(missing)}")

    if (df["id"].str.strip() == "").any():
        raise CatalogError("Catalog contains a temple without an id")
    if (df["name"].str.strip() == "").any():
        raise CatalogError("Catalog contains a temple without a name")

    duplicated = df.loc[df["id"].duplicated(), "id"].tolist()
    if duplicated:
        raise CatalogError(f"Duplicate temple ids: {', '.join(duplicated)}")

    founded = pd.to_numeric(df["founded"], errors="coerce")
    if founded.isna().any() or (founded % 1 != 0).any():
        raise CatalogError("founded must be a whole year")

    scores = pd.to_numeric(df["significance_score"], errors="coerce")
    if scores.isna().any() or (scores < 0).any():
        raise CatalogError("significance_score must be a non-negative number")


def _read(config: CatalogConfig) -> pd.DataFrame:
    # keep_default_na=False so blank cells stay "" instead of NaN
    df = pd.read_csv(config.data_path, dtype=str, keep_default_na=False)
    _validate(df)

    for col in OPTIONAL_COLUMNS:
        if col not in df.columns:
            df[col] = ""

    df["highlights_list"] = df["highlights"].apply(
        lambda s: _split_list(s, config.list_separator)
    )
    df["features_list"] = df["features"].apply(
        lambda s: _split_list(s, config.list_separator)
    )
    return df


def load_catalog(config: CatalogConfig = DEFAULT_CATALOG_CONFIG) -> Catalog:
    """
    Read the catalog file into an immutable Catalog.

    Temples keep file order. Facet options are derived once here.
    Raises CatalogError when the file breaks an integrity rule.
    """
    df = _read(config)

    temples: list[Temple] = []
    for _, row in df.iterrows():
        temples.append(Temple(
            id=row["id"].strip(),
            name=row["name"].strip(),
            city=row["city"].strip(),
            country=row["country"].strip(),
            description=row["description"].strip(),
            website=row["website"].strip() or None,
            region=row["region"].strip(),
            tradition=row["tradition"].strip(),
            environment=row["environment"].strip(),
            founded=int(float(row["founded"])),
            highlights=row["highlights_list"],
            features=row["features_list"],
            significance_score=float(row["significance_score"]),
            visiting_hours=row["visiting_hours"].strip(),
            best_visit=row["best_visit"].strip(),
        ))

    catalog = Catalog(temples=tuple(temples), facets=build_facet_options(temples))
    logger.info("Loaded %d temples from %s", len(catalog), config.data_path)
    return catalog


def get_catalog() -> Catalog:
    """Return the process-wide catalog, loading it on first call."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog()
    return _catalog


def reload_catalog() -> Catalog:
    """Drop the loaded catalog and any cached query results, then load again."""
    global _catalog
    _catalog = None
    clear_cache()
    return get_catalog()
