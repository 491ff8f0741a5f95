import asyncio

from tuition_api.services.admin_service import SuperAdminService

from .helpers import branch_payload


def seed_super_admin(session_factory, email="admin@v18tuition.com", password="admin123"):
    async def _seed():
        async with session_factory() as session:
            return await SuperAdminService(session).seed(
                [{"name": "Sarah Johnson", "email": email, "password": password}]
            )
    return asyncio.run(_seed())


def test_super_admin_login(client, session_factory):
    seed_super_admin(session_factory)

    response = client.post("/api/superadmins/login", json={"email": "admin@v18tuition.com", "password": "admin123"})
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Sarah Johnson"
    assert body["role"] == "super_admin"
    assert "password" not in body


def test_super_admin_wrong_password(client, session_factory):
    seed_super_admin(session_factory)

    response = client.post("/api/superadmins/login", json={"email": "admin@v18tuition.com", "password": "nope"})
    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid credentials"


def test_unknown_email_is_401_for_both_roles(client):
    body = {"email": "ghost@v18tuition.com", "password": "whatever"}
    assert client.post("/api/superadmins/login", json=body).status_code == 401
    assert client.post("/api/branchadmins/login", json=body).status_code == 401


def test_seed_skips_existing_emails(client, session_factory):
    assert seed_super_admin(session_factory) == ["admin@v18tuition.com"]
    assert seed_super_admin(session_factory) == []


def test_branch_admin_login_returns_branch_without_secrets(client):
    client.post("/api/branches", json=branch_payload())

    response = client.post("/api/branchadmins/login", json={"email": "a@b.com", "password": "secret1"})
    assert response.status_code == 200
    body = response.json()
    assert body["branchName"] == "North"
    assert body["role"] == "branch_admin"
    assert "passwordHash" not in body
    assert "passwordEncrypted" not in body


def test_missing_fields_are_rejected(client):
    assert client.post("/api/superadmins/login", json={"email": "admin@v18tuition.com"}).status_code == 422
