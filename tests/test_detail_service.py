"""Tests for the population detail service against a built download store."""
from __future__ import annotations

import pandas as pd
import pytest

from conftest import ZONES
from popbuilder.database import PopulationDatabase
from popbuilder.exceptions import QueryError
from popbuilder.models.population import detail_population, download_metadata
from popbuilder.services.detail_service import PopulationDetailService
from popbuilder.store_builder import write_store
from popbuilder.utils.constants import DETAIL_COLUMNS


@pytest.mark.parametrize("code,under_five", [(code, p0) for code, (_, p0) in ZONES.items()])
def test_single_zone_first_band(download_db, code, under_five):
    rows = PopulationDetailService(download_db).get_detail([code])
    assert len(rows) == 1
    assert rows[0].code == code
    assert rows[0].persons[0] == under_five


def test_all_zones_first_band_checksum(download_db):
    rows = PopulationDetailService(download_db).get_detail(list(ZONES))
    assert len(rows) == 10
    assert sum(row.persons[0] for row in rows) == 909


def test_rows_cover_requested_codes_in_any_order(download_db):
    codes = ["E01004747", "E01004731", "E01004736"]
    rows = PopulationDetailService(download_db).get_detail(codes)
    assert sorted(row.code for row in rows) == sorted(codes)


def test_persons_are_males_plus_females(download_db):
    (row,) = PopulationDetailService(download_db).get_detail(["E01004745"])
    assert len(row.persons) == 19
    assert row.persons == [m + f for m, f in zip(row.males, row.females)]
    assert row.total == 2341
    assert len(row.counts) == 57


def test_unknown_code_is_omitted(download_db):
    rows = PopulationDetailService(download_db).get_detail(["E01004736", "X99999999"])
    assert [row.code for row in rows] == ["E01004736"]


def test_only_unknown_codes_gives_no_rows(download_db):
    assert PopulationDetailService(download_db).get_detail(["X99999999"]) == []


def test_duplicate_codes_do_not_duplicate_rows(download_db):
    rows = PopulationDetailService(download_db).get_detail(["E01004736", "E01004736"])
    assert len(rows) == 1


def test_any_bad_row_fails_the_whole_request(tmp_path):
    good = {"code": "E01000001", **{name: 5 for name in DETAIL_COLUMNS}}
    bad = {"code": "E01000002", **{name: 5 for name in DETAIL_COLUMNS}}
    bad["f_90"] = -1
    path = str(tmp_path / "bad-5.db")
    write_store(pd.DataFrame([good, bad]), path, download_metadata, detail_population)

    db = PopulationDatabase(path, "download")
    db.open()
    try:
        service = PopulationDetailService(db)
        assert len(service.get_detail(["E01000001"])) == 1
        with pytest.raises(QueryError):
            service.get_detail(["E01000001", "E01000002"])
    finally:
        db.close()
