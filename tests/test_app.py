"""Tests for application wiring: store lifecycle, health check and static files."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from popbuilder.config import Settings
from popbuilder.database import PopulationDatabase
from popbuilder.exceptions import RenderError, StoreUnavailableError
from popbuilder.main import create_app


def test_stores_open_on_startup_and_close_on_shutdown(app):
    with TestClient(app):
        assert app.state.results_db.is_open
        assert app.state.download_db.is_open
    assert not app.state.results_db.is_open
    assert not app.state.download_db.is_open


def test_missing_store_stops_startup(tmp_path, store_paths):
    settings = Settings(
        RESULTS_DATABASE_PATH=str(tmp_path / "missing.db"),
        DOWNLOAD_DATABASE_PATH=store_paths["download"],
    )
    with pytest.raises(StoreUnavailableError):
        with TestClient(create_app(settings)):
            pass


def test_missing_templates_stop_startup(tmp_path, store_paths):
    settings = Settings(
        RESULTS_DATABASE_PATH=store_paths["results"],
        DOWNLOAD_DATABASE_PATH=store_paths["download"],
        TEMPLATE_DIR=str(tmp_path),
    )
    with pytest.raises(RenderError):
        with TestClient(create_app(settings)):
            pass


def test_open_rejects_non_database_file(tmp_path):
    path = tmp_path / "garbage.db"
    path.write_text("this is not a database")
    with pytest.raises(StoreUnavailableError):
        PopulationDatabase(str(path), "results").open()


def test_health_reports_both_stores(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "healthy"
    assert data["stores"] == {"results": "healthy", "download": "healthy"}


def test_static_resource_is_served(client):
    resp = client.get("/resources/app/popbuilder.css")
    assert resp.status_code == 200
    assert "pyramid" in resp.text


def test_missing_static_resource_returns_404_page(client):
    resp = client.get("/resources/app/nothere.js")
    assert resp.status_code == 404
    assert "Page not found" in resp.text


def test_unsupported_method_shows_error_page(client):
    resp = client.put("/results")
    assert resp.status_code == 405
    assert "Sorry! An error has occurred." in resp.text
