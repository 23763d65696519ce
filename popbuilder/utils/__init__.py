"""
Utils package initialization.
"""
from popbuilder.utils.zones import parse_zone_codes
from popbuilder.utils.formatting import format_thousands
from popbuilder.utils.bands import (
    validate_source,
    build_detail_bands,
    build_summary_bands,
)

__all__ = [
    "parse_zone_codes",
    "format_thousands",
    "validate_source",
    "build_detail_bands",
    "build_summary_bands",
]
