"""
Population store tables.

Each store is a separate SQLite file holding one table named
``population``, keyed by zone code. The results store holds ten-year
bands by sex; the download store holds five-year bands for persons
and by sex.
"""
from sqlalchemy import Column, MetaData, String, Table, BigInteger
from popbuilder.utils.constants import SUMMARY_COLUMNS, DETAIL_COLUMNS


def _population_table(metadata: MetaData, band_columns) -> Table:
    return Table(
        "population",
        metadata,
        Column("code", String(20), primary_key=True),
        *[Column(name, BigInteger, nullable=False, default=0) for name in band_columns],
    )


summary_metadata = MetaData()
download_metadata = MetaData()

# Results store: popzones-10.db
summary_population = _population_table(summary_metadata, SUMMARY_COLUMNS)

# Download store: popzones-5.db
detail_population = _population_table(download_metadata, DETAIL_COLUMNS)
