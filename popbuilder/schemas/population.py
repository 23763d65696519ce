"""
Population Pydantic schemas for decoded store rows.
"""
from pydantic import BaseModel, Field, NonNegativeInt, model_validator
from typing import List, Dict, Any
from popbuilder.utils.constants import (
    FIVE_YEAR_BANDS,
    TEN_YEAR_BANDS,
    TEN_YEAR_BAND_LABELS,
)
from popbuilder.utils.formatting import format_thousands


class SummaryResult(BaseModel):
    """
    Population of a set of zones by ten-year band and sex.
    
    Band lists run from 0-9 up to 90+.
    """
    zones: str = Field("", description="Zone codes as posted, echoed to the download form")
    males: List[NonNegativeInt] = Field(..., min_length=len(TEN_YEAR_BANDS), max_length=len(TEN_YEAR_BANDS))
    females: List[NonNegativeInt] = Field(..., min_length=len(TEN_YEAR_BANDS), max_length=len(TEN_YEAR_BANDS))
    total: int = 0
    population: str = ""

    @model_validator(mode='after')
    def compute_total(self) -> 'SummaryResult':
        # Always derived from the bands
        self.total = sum(self.males) + sum(self.females)
        self.population = format_thousands(self.total)
        return self
    
    @property
    def bands(self) -> List[Dict[str, Any]]:
        """Band rows for the population pyramid."""
        return [
            {"band": label, "male": m, "female": f}
            for label, m, f in zip(TEN_YEAR_BAND_LABELS, self.males, self.females)
        ]


class DetailRow(BaseModel):
    """Population of a single zone by five-year band, for persons and by sex."""
    code: str
    persons: List[NonNegativeInt] = Field(..., min_length=len(FIVE_YEAR_BANDS), max_length=len(FIVE_YEAR_BANDS))
    males: List[NonNegativeInt] = Field(..., min_length=len(FIVE_YEAR_BANDS), max_length=len(FIVE_YEAR_BANDS))
    females: List[NonNegativeInt] = Field(..., min_length=len(FIVE_YEAR_BANDS), max_length=len(FIVE_YEAR_BANDS))
    
    @property
    def total(self) -> int:
        """Total population of the zone."""
        return sum(self.persons)
    
    @property
    def counts(self) -> List[int]:
        """All 57 band counts in download column order."""
        return self.persons + self.males + self.females
