from .helpers import branch_payload, student_payload


def login_branch_admin(client, email="a@b.com", password="secret1"):
    return client.post("/api/branchadmins/login", json={"email": email, "password": password})


def test_create_branch_with_admin_enables_login(client):
    response = client.post("/api/branches", json=branch_payload())
    assert response.status_code == 200
    branch = response.json()
    assert branch["name"] == "North"
    assert branch["admin"]["email"] == "a@b.com"
    assert branch["admin"].get("password") is None
    assert branch["establishedDate"] is not None

    assert login_branch_admin(client).status_code == 200
    assert login_branch_admin(client, password="wrong").status_code == 401


def test_branch_listing_exposes_current_admin_password(client):
    client.post("/api/branches", json=branch_payload())

    branches = client.get("/api/branches").json()
    assert len(branches) == 1
    assert branches[0]["admin"]["password"] == "secret1"


def test_credential_recovery_endpoint(client):
    branch = client.post("/api/branches", json=branch_payload()).json()

    response = client.get(f"/api/branches/{branch['id']}/admin/credentials")
    assert response.status_code == 200
    assert response.json() == {"branchId": branch["id"], "email": "a@b.com", "password": "secret1"}


def test_branch_without_admin_credentials_has_no_login(client):
    payload = branch_payload()
    payload["admin"] = {"name": "Nobody"}
    branch = client.post("/api/branches", json=payload).json()

    assert client.get(f"/api/branches/{branch['id']}/admin/credentials").status_code == 404
    assert branch["admin"] == {"name": "Nobody", "email": None, "phone": None, "password": None}


def test_update_without_password_keeps_existing_login(client):
    branch = client.post("/api/branches", json=branch_payload()).json()

    response = client.put(f"/api/branches/{branch['id']}", json={
        "manager": "New Manager",
        "admin": {"phone": "0411111111"},
    })
    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Branch and admin updated successfully"
    assert body["branch"]["manager"] == "New Manager"
    assert body["branch"]["admin"]["phone"] == "0411111111"

    assert login_branch_admin(client).status_code == 200


def test_update_with_new_password_replaces_both_encodings(client):
    branch = client.post("/api/branches", json=branch_payload()).json()

    client.put(f"/api/branches/{branch['id']}", json={"admin": {"password": "secret2"}})

    assert login_branch_admin(client).status_code == 401
    assert login_branch_admin(client, password="secret2").status_code == 200
    recovered = client.get(f"/api/branches/{branch['id']}/admin/credentials").json()
    assert recovered["password"] == "secret2"


def test_update_adds_admin_to_branch_created_without_one(client):
    payload = branch_payload()
    del payload["admin"]
    branch = client.post("/api/branches", json=payload).json()

    client.put(f"/api/branches/{branch['id']}", json={"admin": {"email": "late@v18tuition.com", "password": "pw123"}})

    response = login_branch_admin(client, email="late@v18tuition.com", password="pw123")
    assert response.status_code == 200
    assert response.json()["name"] == "late@v18tuition.com"


def test_rename_propagates_to_students_teachers_and_admin(client):
    branch = client.post("/api/branches", json=branch_payload()).json()
    client.post("/api/students", json=student_payload())
    client.post("/api/teachers", json={"name": "Ravi", "branches": ["North", "South"]})

    response = client.put(f"/api/branches/{branch['id']}", json={"name": "North Central"})
    assert response.status_code == 200

    assert client.get("/api/students", params={"branch": "North"}).json() == []
    assert [s["name"] for s in client.get("/api/students", params={"branch": "North Central"}).json()] == ["Asha"]
    assert client.get("/api/teachers").json()[0]["branches"] == ["North Central", "South"]
    assert login_branch_admin(client).json()["branchName"] == "North Central"


def test_duplicate_admin_email_rolls_back_branch(client):
    client.post("/api/branches", json=branch_payload())

    response = client.post("/api/branches", json=branch_payload(name="South"))
    assert response.status_code == 409
    assert response.json()["detail"]["field"] == "email"

    assert [b["name"] for b in client.get("/api/branches").json()] == ["North"]


def test_unknown_branch_is_404(client):
    missing = "00000000-0000-0000-0000-000000000000"
    assert client.get(f"/api/branches/{missing}").status_code == 404
    assert client.put(f"/api/branches/{missing}", json={"name": "X"}).status_code == 404
    assert client.get(f"/api/branches/{missing}/admin/credentials").status_code == 404


def test_failed_update_rolls_back_rename(client):
    north = client.post("/api/branches", json=branch_payload()).json()
    client.post("/api/branches", json=branch_payload(name="South", email="s@b.com"))
    client.post("/api/students", json=student_payload())
    client.post("/api/teachers", json={"name": "Ravi", "branches": ["North", "South"]})

    response = client.put(f"/api/branches/{north['id']}", json={
        "name": "North Central",
        "admin": {"email": "s@b.com"},
    })
    assert response.status_code == 409
    assert response.json()["detail"]["field"] == "email"

    assert client.get(f"/api/branches/{north['id']}").json()["name"] == "North"
    assert [s["branch"] for s in client.get("/api/students").json()] == ["North"]
    assert client.get("/api/teachers").json()[0]["branches"] == ["North", "South"]
    assert login_branch_admin(client).json()["branchName"] == "North"


def test_explicit_null_on_required_branch_fields_is_rejected(client):
    branch = client.post("/api/branches", json=branch_payload()).json()
    client.post("/api/students", json=student_payload())

    assert client.put(f"/api/branches/{branch['id']}", json={"status": None}).status_code == 422
    assert client.put(f"/api/branches/{branch['id']}", json={"name": None}).status_code == 422

    current = client.get(f"/api/branches/{branch['id']}").json()
    assert (current["name"], current["status"]) == ("North", "active")
    assert [s["branch"] for s in client.get("/api/students").json()] == ["North"]
