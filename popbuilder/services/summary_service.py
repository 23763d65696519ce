"""
Population summary service - aggregate population of a set of zones for the results page.
"""
import logging
from typing import List, Sequence

from pydantic import ValidationError
from sqlalchemy import func, select

from popbuilder.database import PopulationDatabase
from popbuilder.exceptions import QueryError
from popbuilder.models.population import summary_population
from popbuilder.schemas.population import SummaryResult
from popbuilder.utils.constants import SUMMARY_COLUMNS, TEN_YEAR_BANDS

logger = logging.getLogger(__name__)


class PopulationSummaryService:
    """Sums ten-year band counts across zones."""
    
    def __init__(self, db: PopulationDatabase):
        self.db = db
    
    def build_query(self, zone_codes: Sequence[str]):
        """
        Build the aggregate query for the given zones.
        
        The IN clause binds one parameter per code, in input order.
        """
        table = summary_population
        return select(
            *[func.sum(table.c[name]) for name in SUMMARY_COLUMNS]
        ).where(table.c.code.in_(list(zone_codes)))
    
    def get_summary(self, zone_codes: Sequence[str], zones: str = "") -> SummaryResult:
        """
        Get the population of a set of zones by ten-year band and sex.
        
        Codes that are not in the store contribute nothing.
        
        Args:
            zone_codes: Zone codes to aggregate (at least one)
            zones: Raw zone string to echo on the results page
            
        Returns:
            SummaryResult with band sums, total and formatted total
            
        Raises:
            QueryError: If the store cannot be queried or the row cannot be decoded
        """
        if not zone_codes:
            raise ValueError("At least one zone code is required")
        
        row = self.db.fetch_one(self.build_query(zone_codes))
        
        if len(row) != len(SUMMARY_COLUMNS):
            raise QueryError(
                f"Expected {len(SUMMARY_COLUMNS)} columns from the results store, got {len(row)}"
            )
        
        # sum() over no matching rows is NULL
        values: List = [0 if v is None else v for v in row]
        half = len(TEN_YEAR_BANDS)
        
        try:
            result = SummaryResult(
                zones=zones,
                males=values[:half],
                females=values[half:],
            )
        except ValidationError as e:
            raise QueryError(f"Could not decode the results store row: {e}") from e
        
        logger.debug(f"Summary for {len(zone_codes)} zones: {result.population}")
        return result
