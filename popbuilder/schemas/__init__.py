"""
Schemas package initialization.
"""
from popbuilder.schemas.population import SummaryResult, DetailRow

__all__ = ["SummaryResult", "DetailRow"]
