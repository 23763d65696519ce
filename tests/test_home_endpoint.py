"""Tests for the home page: intro/map selection and visit cookies.

Uses FastAPI TestClient against an app built on temporary stores.
"""
from __future__ import annotations

from popbuilder.rendering import INTRO_PAGE, MAP_PAGE


def _page(app, name):
    return app.state.renderer.page(name)


def test_unknown_path_returns_404(client):
    resp = client.get("/thispathdoesnotexist")
    assert resp.status_code == 404
    assert "Page not found" in resp.text


def test_new_visitor_gets_intro(client, app):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == _page(app, INTRO_PAGE)
    assert "set-cookie" not in resp.headers


def test_visitor_who_opted_out_gets_map(client, app):
    client.cookies.set("skip", "true")
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == _page(app, MAP_PAGE)
    assert "set-cookie" not in resp.headers


def test_visitor_who_saw_intro_gets_map_and_seen_cookie_expired(client, app):
    client.cookies.set("seen", "true")
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.text == _page(app, MAP_PAGE)

    cookie = resp.headers["set-cookie"]
    assert cookie.startswith("seen=")
    assert "Max-Age=0" in cookie


def test_seen_cookie_only_lasts_one_visit(client, app):
    # Following the redirect uses the seen cookie once
    resp = client.post("/", data={"posted": "true"})
    assert resp.text == _page(app, MAP_PAGE)
    assert client.get("/").text == _page(app, INTRO_PAGE)


def test_continue_without_opting_out_sets_seen_cookie(client):
    resp = client.post("/", data={"posted": "true"}, follow_redirects=False)
    assert resp.status_code == 302
    assert resp.headers["location"] == "/"
    assert resp.headers["set-cookie"].startswith("seen=")
    assert "expires=" in resp.headers["set-cookie"]


def test_continue_and_opt_out_sets_skip_cookie(client):
    resp = client.post(
        "/", data={"posted": "true", "skipintro": "on"}, follow_redirects=False
    )
    assert resp.status_code == 302
    assert resp.headers["location"] == "/"
    assert resp.headers["set-cookie"].startswith("skip=")


def test_opt_out_then_return_gets_map(client, app):
    client.post("/", data={"posted": "true", "skipintro": "on"})
    resp = client.get("/")
    assert resp.text == _page(app, MAP_PAGE)


def test_post_without_posted_field_is_treated_as_a_visit(client, app):
    resp = client.post("/", data={"skipintro": "on"}, follow_redirects=False)
    assert resp.status_code == 200
    assert resp.text == _page(app, INTRO_PAGE)
