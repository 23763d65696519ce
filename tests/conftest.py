"""Shared fixtures: small population stores built with the store builder."""
from __future__ import annotations

import pandas as pd
import pytest
from fastapi.testclient import TestClient

from popbuilder.config import Settings
from popbuilder.database import PopulationDatabase
from popbuilder.main import create_app
from popbuilder.store_builder import build_stores
from popbuilder.utils.constants import FIVE_YEAR_BANDS

# ---------------------------------------------------------------------------
# Zone fixtures: code -> (total population, persons aged 0-4)
# ---------------------------------------------------------------------------

ZONES = {
    "E01004736": (1863, 49),
    "E01004731": (1927, 87),
    "E01004732": (1608, 78),
    "E01004733": (2456, 84),
    "E01004744": (1375, 99),
    "E01004748": (1690, 76),
    "E01004743": (1534, 103),
    "E01004745": (2341, 132),
    "E01004746": (1531, 84),
    "E01004747": (2430, 117),
}

# In the stores but never requested together with the zones above
OTHER_ZONE = ("S01006506", 812, 40)

ALL_ZONES = ",".join(ZONES)


def zone_row(code: str, total: int, under_five: int) -> dict:
    """Source row whose bands add up to total, with under_five people aged 0-4."""
    row = {
        "code": code,
        "m_0_4": under_five // 2,
        "f_0_4": under_five - under_five // 2,
    }
    slots = [f"{sex}_{band}" for band in FIVE_YEAR_BANDS[1:] for sex in ("m", "f")]
    base, extra = divmod(total - under_five, len(slots))
    for i, name in enumerate(slots):
        row[name] = base + (1 if i < extra else 0)
    return row


def source_frame() -> pd.DataFrame:
    rows = [zone_row(code, total, p0) for code, (total, p0) in ZONES.items()]
    rows.append(zone_row(*OTHER_ZONE))
    return pd.DataFrame(rows)


@pytest.fixture()
def store_paths(tmp_path):
    """Build both stores in a temporary directory."""
    results_path = str(tmp_path / "popzones-10.db")
    download_path = str(tmp_path / "popzones-5.db")
    build_stores(source_frame(), results_path, download_path)
    return {"results": results_path, "download": download_path}


@pytest.fixture()
def results_db(store_paths):
    db = PopulationDatabase(store_paths["results"], "results")
    db.open()
    yield db
    db.close()


@pytest.fixture()
def download_db(store_paths):
    db = PopulationDatabase(store_paths["download"], "download")
    db.open()
    yield db
    db.close()


@pytest.fixture()
def settings(store_paths):
    return Settings(
        RESULTS_DATABASE_PATH=store_paths["results"],
        DOWNLOAD_DATABASE_PATH=store_paths["download"],
    )


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    """TestClient with the stores and templates loaded."""
    with TestClient(app) as test_client:
        yield test_client
