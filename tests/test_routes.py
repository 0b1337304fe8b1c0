"""Login, logout and role gating over HTTP."""


def _authenticate(client, user_id: int) -> None:
    with client.session_transaction() as session:
        session["_user_id"] = str(user_id)
        session["_fresh"] = True


def test_login_with_seed_admin(client) -> None:
    resp = client.post("/auth/login", json={"username": "admin", "password": "admin123"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["user"]["role"] == "admin"
    assert body["views"] == ["equipment", "staff", "users"]

    # the session cookie now carries the login
    assert client.get("/users/").status_code == 200


def test_login_accepts_form_posts(client, member) -> None:
    resp = client.post("/auth/login", data={"username": "alice", "password": "pw1"})
    assert resp.status_code == 200
    assert resp.get_json()["views"] == ["equipment", "membership"]


def test_bad_login_is_generic(client, member) -> None:
    wrong = client.post("/auth/login", json={"username": "alice", "password": "x"})
    unknown = client.post("/auth/login", json={"username": "nobody", "password": "x"})
    assert wrong.status_code == unknown.status_code == 401
    assert wrong.get_json() == unknown.get_json() == {"error": "Invalid username or password"}
    assert client.get("/auth/me").status_code == 401


def test_logout_ends_session(client) -> None:
    client.post("/auth/login", json={"username": "admin", "password": "admin123"})
    assert client.post("/auth/logout").status_code == 200
    assert client.get("/auth/me").status_code == 401


def test_me_shows_membership(client, member) -> None:
    _authenticate(client, member.id)
    user = client.get("/auth/me").get_json()["user"]
    assert user["username"] == "alice"
    assert user["membership"] == "Membership ends: 2025-12-31"
    assert "password" not in user


def test_me_without_membership(client, storage) -> None:
    plain = storage.users.create("bob", "pw", "user").value
    _authenticate(client, plain.id)
    assert client.get("/auth/me").get_json()["user"]["membership"] == "No active membership"


def test_members_cannot_manage_accounts_or_staff(client, member) -> None:
    _authenticate(client, member.id)
    assert client.get("/users/").status_code == 403
    assert client.post("/staff/", json={"name": "Bob", "position": "Trainer"}).status_code == 403
    assert client.get("/equipment/").status_code == 200


def test_anonymous_requests_rejected(client) -> None:
    assert client.get("/equipment/").status_code == 401
    assert client.get("/staff/").status_code == 401


def test_me_lists_permissions_per_role(client, admin_user, member) -> None:
    _authenticate(client, admin_user.id)
    assert client.get("/auth/me").get_json()["permissions"] == {
        "equipment_edit": True, "staff_manage": True, "users_manage": True,
    }

    _authenticate(client, member.id)
    assert client.get("/auth/me").get_json()["permissions"] == {
        "equipment_edit": False, "staff_manage": False, "users_manage": False,
    }


def test_non_string_login_field_is_bad_request(client) -> None:
    resp = client.post("/auth/login", json={"username": ["admin"], "password": "admin123"})
    assert resp.status_code == 400
    assert resp.get_json()["error"] == "invalid"
