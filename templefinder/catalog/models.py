from __future__ import annotations

import hashlib

from pydantic import BaseModel, ConfigDict, Field

ALL_OPTION = "All"


class Temple(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    city: str
    country: str
    description: str = ""
    website: str | None = None
    region: str
    tradition: str
    environment: str
    founded: int = Field(..., description="Founding year, negative for BCE")
    highlights: tuple[str, ...] = ()
    features: tuple[str, ...] = ()
    significance_score: float = Field(..., ge=0.0)
    visiting_hours: str = ""
    best_visit: str = ""


class FacetOptions(BaseModel):
    """Filter options per facet, each list led by the "All" sentinel."""

    model_config = ConfigDict(frozen=True)

    regions: tuple[str, ...] = (ALL_OPTION,)
    traditions: tuple[str, ...] = (ALL_OPTION,)
    environments: tuple[str, ...] = (ALL_OPTION,)
    features: tuple[str, ...] = (ALL_OPTION,)


class Catalog(BaseModel):
    model_config = ConfigDict(frozen=True)

    temples: tuple[Temple, ...] = ()
    facets: FacetOptions = Field(default_factory=FacetOptions)

    def get(self, temple_id: str) -> Temple | None:
        for temple in self.temples:
            if temple.id == temple_id:
                return temple
        return None

    def fingerprint(self) -> str:
        """Digest of the catalog contents; equal catalogs share it."""
        return hashlib.sha256(self.model_dump_json().encode()).hexdigest()[:16]

    def __len__(self) -> int:
        return len(self.temples)
