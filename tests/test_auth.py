from conftest import PASSWORD


REGISTER = {
    "email": "Asha@Example.com",
    "password": PASSWORD,
    "firstName": "asha",
    "lastName": "rao",
    "phoneNumber": "+91 98765 43210",
    "roleName": "tailor",
}


def test_missing_token_is_401(client):
    res = client.get("/api/auth/profile")
    assert res.status_code == 401
    assert res.json() == {"success": False, "message": "Access token required"}


def test_invalid_token_is_403(client):
    res = client.get("/api/auth/profile", headers={"Authorization": "Bearer not-a-token"})
    assert res.status_code == 403
    assert res.json()["message"] == "Invalid or expired token"


def test_register_then_login(client):
    res = client.post("/api/auth/register", json=REGISTER)
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    user = body["data"]["user"]
    assert user["email"] == "asha@example.com"
    assert user["firstName"] == "Asha"
    assert "passwordHash" not in user
    assert body["data"]["roles"] == ["Tailor"]

    res = client.post("/api/auth/login", json={"email": "asha@example.com", "password": PASSWORD})
    assert res.status_code == 200
    token = res.json()["data"]["token"]

    profile = client.get("/api/auth/profile", headers={"Authorization": f"Bearer {token}"})
    assert profile.status_code == 200
    assert profile.json()["data"]["roles"] == ["Tailor"]


def test_duplicate_email_is_409(client):
    assert client.post("/api/auth/register", json=REGISTER).status_code == 201
    res = client.post("/api/auth/register", json=REGISTER)
    assert res.status_code == 409


def test_wrong_password_is_401(client):
    client.post("/api/auth/register", json=REGISTER)
    res = client.post("/api/auth/login", json={"email": "asha@example.com", "password": "Wrong#999"})
    assert res.status_code == 401


def test_weak_password_fails_validation(client):
    res = client.post("/api/auth/register", json=dict(REGISTER, password="password"))
    assert res.status_code == 400
    body = res.json()
    assert body["message"] == "Validation failed"
    assert body["errors"][0]["field"] == "password"


def test_measurement_boy_cannot_self_register(client):
    res = client.post("/api/auth/register", json=dict(REGISTER, roleName="MeasurementBoy"))
    assert res.status_code == 400


def test_profile_update_rejects_unknown_field(client, make_user):
    _, headers = make_user("Customer")
    res = client.put("/api/auth/profile", json={"email": "x@y.com"}, headers=headers)
    assert res.status_code == 400

    res = client.put("/api/auth/profile", json={"firstName": "meera"}, headers=headers)
    assert res.status_code == 200
    assert res.json()["data"]["firstName"] == "Meera"


def test_only_admin_assigns_roles(client, make_user):
    target, _ = make_user("Customer")
    _, customer = make_user("Customer")
    _, admin = make_user("Admin")

    res = client.post(f"/api/auth/users/{target}/roles", json={"roleName": "MeasurementBoy"}, headers=customer)
    assert res.status_code == 403

    res = client.post(f"/api/auth/users/{target}/roles", json={"roleName": "MeasurementBoy"}, headers=admin)
    assert res.status_code == 201
    res = client.post(f"/api/auth/users/{target}/roles", json={"roleName": "MeasurementBoy"}, headers=admin)
    assert res.status_code == 409


def test_unknown_route_envelope(client):
    res = client.get("/api/nowhere")
    assert res.status_code == 404
    assert res.json() == {"success": False, "message": "Route not found"}
