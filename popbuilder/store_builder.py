"""
Builds the read-only population stores from a single CSV of male and
female counts by five-year age band.

- download store: five-year bands for persons, males and females
- results store: ten-year bands for males and females
"""
import logging
import os

import pandas as pd
from sqlalchemy import MetaData, Table, create_engine
from tqdm import tqdm

from popbuilder.models.population import (
    summary_metadata,
    download_metadata,
    summary_population,
    detail_population,
)
from popbuilder.utils.bands import (
    validate_source,
    build_detail_bands,
    build_summary_bands,
)

logger = logging.getLogger(__name__)


def write_store(
    df: pd.DataFrame,
    path: str,
    metadata: MetaData,
    table: Table,
    batch_size: int = 5000
) -> int:
    """
    Write band rows to a fresh SQLite store.
    
    Args:
        df: Rows with code and the table's band columns
        path: Store file; replaced if it exists
        metadata: MetaData holding the table
        table: population Table for this store
        batch_size: Rows per insert
        
    Returns:
        Number of rows written
    """
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    if os.path.exists(path):
        os.remove(path)
    
    records = [
        {name: (value if name == 'code' else int(value)) for name, value in record.items()}
        for record in df.to_dict('records')
    ]
    
    engine = create_engine(f"sqlite:///{os.path.abspath(path)}", echo=False)
    try:
        metadata.create_all(bind=engine)
        with engine.begin() as conn:
            for start in tqdm(range(0, len(records), batch_size), desc=f"    {os.path.basename(path)}"):
                conn.execute(table.insert(), records[start:start + batch_size])
    finally:
        engine.dispose()
    
    logger.info(f"✅ Wrote {len(records)} zones to {path}")
    return len(records)


def build_stores(source: pd.DataFrame, results_path: str, download_path: str) -> int:
    """
    Build both stores from source data.
    
    Args:
        source: DataFrame with code, m_<band> and f_<band> columns
        results_path: Results (ten-year band) store file
        download_path: Download (five-year band) store file
        
    Returns:
        Number of zones in each store
        
    Raises:
        ValueError: If the source data is invalid
    """
    df = validate_source(source)
    logger.info(f"  {len(df)} zones")
    
    logger.info("Building download store (five-year bands)...")
    write_store(build_detail_bands(df), download_path, download_metadata, detail_population)
    
    logger.info("Building results store (ten-year bands)...")
    write_store(build_summary_bands(df), results_path, summary_metadata, summary_population)
    
    return len(df)


def build_stores_from_csv(source_path: str, results_path: str, download_path: str) -> int:
    """Read the source CSV and build both stores."""
    logger.info(f"Reading source data: {source_path}")
    source = pd.read_csv(source_path, dtype={'code': str}, low_memory=False)
    return build_stores(source, results_path, download_path)
