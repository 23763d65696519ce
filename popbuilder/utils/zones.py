"""
Zone code parsing.
"""
from typing import List
from popbuilder.utils.constants import ZONE_SEPARATOR


def parse_zone_codes(raw: str) -> List[str]:
    """
    Split a comma-separated string of zone codes.
    
    Tokens keep their input order and are not trimmed, deduplicated or
    validated; codes missing from the stores simply produce no data.
    
    Args:
        raw: Zone codes as posted by the map page, e.g. "E01004736,E01004731"
        
    Returns:
        List of zone codes
        
    Raises:
        ValueError: If raw is empty. Callers redirect before parsing.
    """
    if not raw:
        raise ValueError("No zone codes were given")
    
    return raw.split(ZONE_SEPARATOR)
