"""Tests for health, fileserver and admin endpoints"""
from models.user import User


def test_healthz(client):
    response = client.get("/api/healthz")
    assert response.status_code == 200
    assert response.data == b"OK"
    assert response.content_type.startswith("text/plain")


def test_fileserver_counts_visits(client):
    assert client.get("/app/").status_code == 200
    assert client.get("/app/index.html").status_code == 200

    response = client.get("/admin/metrics")
    assert response.status_code == 200
    assert response.content_type.startswith("text/html")
    assert b"Chirpy has been visited 2 times!" in response.data


def test_metrics_not_counted_outside_app(client):
    client.get("/api/healthz")
    response = client.get("/admin/metrics")
    assert b"visited 0 times" in response.data


def test_reset_deletes_users_and_counter(client, register, store):
    register("a@example.com", "pw")
    client.get("/app/")

    response = client.post("/admin/reset")
    assert response.status_code == 200
    assert store.count(User) == 0
    assert b"visited 0 times" in client.get("/admin/metrics").data


def test_reset_forbidden_outside_dev(app, client):
    app.config["PLATFORM"] = "prod"
    response = client.post("/admin/reset")
    assert response.status_code == 403


def test_unknown_route(client):
    response = client.get("/api/nope")
    assert response.status_code == 404
    assert response.get_json()["error"] == "NOT_FOUND"
