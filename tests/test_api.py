"""Tests for the health and click-zone HTTP endpoints."""

from datetime import datetime

from spider_rainbow.core.config import config


def test_health_reports_status_timestamp_and_uptime(client) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    body = response.json()
    assert body["status"] == "healthy"
    datetime.fromisoformat(body["timestamp"])
    assert isinstance(body["uptime"], float)
    assert body["uptime"] >= 0


def test_root_points_at_health(client) -> None:
    body = client.get("/").json()
    assert body["health"] == "/health"


def test_list_zones(client) -> None:
    response = client.get("/api/v1/zones")
    assert response.status_code == 200
    assert "spider" in response.json()["zones"]


def test_spider_click_top_and_bottom(client) -> None:
    rect = {"left": 10, "top": 20, "width": 200, "height": 400}

    top = client.post("/api/v1/zones/spider/click", json={"client_x": 110, "client_y": 60, "rect": rect})
    assert top.status_code == 200
    body = top.json()
    assert body["percent_x"] == 50
    assert body["percent_y"] == 10
    assert body["navigation"] == {
        "url": config.spider_top_url,
        "target": "_blank",
        "features": "noopener,noreferrer",
    }

    bottom = client.post("/api/v1/zones/spider/click", json={"client_x": 110, "client_y": 400, "rect": rect})
    assert bottom.json()["navigation"]["url"] == config.spider_bottom_url


def test_zero_height_click_has_no_navigation(client) -> None:
    payload = {"client_x": 5, "client_y": 5, "rect": {"left": 0, "top": 0, "width": 10, "height": 0}}
    body = client.post("/api/v1/zones/spider/click", json=payload).json()

    assert body["percent_x"] == 50
    assert body["percent_y"] is None
    assert body["navigation"] is None


def test_unknown_zone_is_404(client) -> None:
    payload = {"client_x": 0, "client_y": 0, "rect": {"left": 0, "top": 0, "width": 1, "height": 1}}
    response = client.post("/api/v1/zones/rainbow/click", json=payload)
    assert response.status_code == 404


def test_negative_size_is_rejected(client) -> None:
    payload = {"client_x": 0, "client_y": 0, "rect": {"left": 0, "top": 0, "width": -1, "height": 1}}
    response = client.post("/api/v1/zones/spider/click", json=payload)
    assert response.status_code == 422
