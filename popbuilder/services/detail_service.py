"""
Population detail service - per-zone population rows for the download.
"""
import logging
from typing import List, Sequence

from pydantic import ValidationError
from sqlalchemy import select

from popbuilder.database import PopulationDatabase
from popbuilder.exceptions import QueryError
from popbuilder.models.population import detail_population
from popbuilder.schemas.population import DetailRow
from popbuilder.utils.constants import DETAIL_COLUMNS, FIVE_YEAR_BANDS

logger = logging.getLogger(__name__)


class PopulationDetailService:
    """Reads five-year band rows for individual zones."""
    
    def __init__(self, db: PopulationDatabase):
        self.db = db
    
    def build_query(self, zone_codes: Sequence[str]):
        """Build the per-zone query; one bound parameter per code."""
        table = detail_population
        return select(
            table.c.code,
            *[table.c[name] for name in DETAIL_COLUMNS]
        ).where(table.c.code.in_(list(zone_codes)))
    
    def get_detail(self, zone_codes: Sequence[str]) -> List[DetailRow]:
        """
        Get one row per zone found in the store.
        
        Codes that are not in the store are left out. Rows come back in
        the store's order, which need not match the input order.
        
        Args:
            zone_codes: Zone codes to look up (at least one)
            
        Returns:
            List of DetailRow
            
        Raises:
            QueryError: If the store cannot be queried or any row cannot be decoded
        """
        if not zone_codes:
            raise ValueError("At least one zone code is required")
        
        rows = self.db.fetch_all(self.build_query(zone_codes))
        width = len(FIVE_YEAR_BANDS)
        
        results = []
        for row in rows:
            if len(row) != len(DETAIL_COLUMNS) + 1:
                raise QueryError(
                    f"Expected {len(DETAIL_COLUMNS) + 1} columns from the download store, got {len(row)}"
                )
            
            code, counts = row[0], list(row[1:])
            try:
                results.append(DetailRow(
                    code=code,
                    persons=counts[:width],
                    males=counts[width:2 * width],
                    females=counts[2 * width:],
                ))
            except ValidationError as e:
                raise QueryError(f"Could not decode download store row for {code!r}: {e}") from e
        
        logger.debug(f"Detail for {len(zone_codes)} zones: {len(results)} rows")
        return results
