"""
Models package initialization.
"""
from popbuilder.models.population import (
    summary_population,
    detail_population,
    summary_metadata,
    download_metadata,
)

__all__ = [
    "summary_population",
    "detail_population",
    "summary_metadata",
    "download_metadata",
]
