"""Tests for user endpoints"""


def test_create_user(client):
    response = client.post("/api/users", json={"email": "Walt@BreakingBad.com", "password": "123456"})
    assert response.status_code == 201

    data = response.get_json()
    assert data["email"] == "walt@breakingbad.com"
    assert data["isChirpyRed"] is False
    assert {"id", "createdAt", "updatedAt"} <= set(data)
    assert "password" not in data
    assert "hashed_password" not in data


def test_create_user_duplicate_email(client, register, user_credentials):
    register(**user_credentials)
    response = client.post("/api/users", json=user_credentials)
    assert response.status_code == 409
    assert response.get_json()["error"] == "CONFLICT"


def test_create_user_validation(client):
    response = client.post("/api/users", json={"email": "not-an-email", "password": "x"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "VALIDATION_ERROR"

    response = client.post("/api/users", json={"email": "a@b.com"})
    assert response.status_code == 400


def test_create_user_rejects_unencodable_password(client):
    response = client.post("/api/users", json={"email": "a@b.com", "password": "\ud800"})
    assert response.status_code == 400
    assert response.get_json()["error"] == "VALIDATION_ERROR"


def test_update_user_rejects_unencodable_password(client, logged_in_user, bearer):
    response = client.put(
        "/api/users",
        json={"email": "a@b.com", "password": "\ud800"},
        headers=bearer(logged_in_user["token"]),
    )
    assert response.status_code == 400
    assert response.get_json()["error"] == "VALIDATION_ERROR"


def test_update_user(client, logged_in_user, bearer, login):
    response = client.put(
        "/api/users",
        json={"email": "heisenberg@breakingbad.com", "password": "newpass"},
        headers=bearer(logged_in_user["token"]),
    )
    assert response.status_code == 200
    data = response.get_json()
    assert data["id"] == logged_in_user["id"]
    assert data["email"] == "heisenberg@breakingbad.com"

    assert login("heisenberg@breakingbad.com", "newpass")["id"] == logged_in_user["id"]
    old = client.post("/api/login", json={"email": "walt@breakingbad.com", "password": "123456"})
    assert old.status_code == 401


def test_update_user_requires_token(client):
    response = client.put("/api/users", json={"email": "a@b.com", "password": "x"})
    assert response.status_code == 401
    assert response.get_json()["error"] == "MISSING_AUTHORIZATION"


def test_update_user_rejects_refresh_token(client, logged_in_user, bearer):
    response = client.put(
        "/api/users",
        json={"email": "a@b.com", "password": "x"},
        headers=bearer(logged_in_user["refreshToken"]),
    )
    assert response.status_code == 401
    assert response.get_json()["error"] == "INVALID_TOKEN"


def test_update_user_email_taken(client, logged_in_user, register, bearer):
    register("jesse@breakingbad.com", "abc")
    response = client.put(
        "/api/users",
        json={"email": "jesse@breakingbad.com", "password": "x"},
        headers=bearer(logged_in_user["token"]),
    )
    assert response.status_code == 409
