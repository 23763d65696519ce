"""
Age band aggregation used to build the population stores.
"""
import pandas as pd
from typing import List
from popbuilder.utils.constants import (
    FIVE_YEAR_BANDS,
    TEN_YEAR_BAND_PARTS,
    SUMMARY_COLUMNS,
    DETAIL_COLUMNS,
)


def source_columns() -> List[str]:
    """Columns expected in the source CSV: code plus male and female five-year bands."""
    return (
        ["code"] +
        [f"m_{band}" for band in FIVE_YEAR_BANDS] +
        [f"f_{band}" for band in FIVE_YEAR_BANDS]
    )


def validate_source(df: pd.DataFrame) -> pd.DataFrame:
    """
    Check a source DataFrame and cast its counts to integers.
    
    Args:
        df: DataFrame read from the source CSV
        
    Returns:
        Copy of df restricted to the source columns, counts as int64
        
    Raises:
        ValueError: On missing columns, missing or duplicate codes,
            or missing, non-integer or negative counts
    """
    missing = [c for c in source_columns() if c not in df.columns]
    if missing:
        raise ValueError(f"Source data is missing columns: {', '.join(missing)}")
    
    df = df[source_columns()].copy()
    
    if df['code'].isna().any():
        raise ValueError("Source data contains rows without a zone code")
    df['code'] = df['code'].astype(str).str.strip()
    
    duplicates = df.loc[df['code'].duplicated(), 'code'].tolist()
    if duplicates:
        raise ValueError(f"Duplicate zone codes in source data: {', '.join(duplicates[:5])}")
    
    counts = df.columns.drop('code')
    if df[counts].isna().any().any():
        raise ValueError("Source data contains missing counts")
    
    numeric = df[counts].apply(pd.to_numeric, errors='coerce')
    if numeric.isna().any().any() or (numeric % 1 != 0).any().any():
        raise ValueError("Source data contains non-integer counts")
    if (numeric < 0).any().any():
        raise ValueError("Source data contains negative counts")
    
    df[counts] = numeric.astype('int64')
    return df


def build_detail_bands(df: pd.DataFrame) -> pd.DataFrame:
    """
    Build the download store rows: persons, males and females by five-year band.
    
    Args:
        df: Validated source DataFrame
        
    Returns:
        DataFrame with code followed by DETAIL_COLUMNS
    """
    detail = df[['code']].copy()
    
    for band in FIVE_YEAR_BANDS:
        detail[f"p_{band}"] = df[f"m_{band}"] + df[f"f_{band}"]
    for band in FIVE_YEAR_BANDS:
        detail[f"m_{band}"] = df[f"m_{band}"]
    for band in FIVE_YEAR_BANDS:
        detail[f"f_{band}"] = df[f"f_{band}"]
    
    return detail[['code'] + DETAIL_COLUMNS]


def build_summary_bands(df: pd.DataFrame) -> pd.DataFrame:
    """
    Build the results store rows by summing adjacent five-year bands.
    
    0_4 and 5_9 make 0_9, and so on up to 80_89; the 90+ band carries over.
    
    Args:
        df: Validated source DataFrame
        
    Returns:
        DataFrame with code followed by SUMMARY_COLUMNS
    """
    summary = df[['code']].copy()
    
    for sex in ("m", "f"):
        for band, parts in TEN_YEAR_BAND_PARTS.items():
            summary[f"{sex}_{band}"] = sum(df[f"{sex}_{part}"] for part in parts)
    
    return summary[['code'] + SUMMARY_COLUMNS]
