import asyncio
from datetime import datetime, timedelta

from tuition_api.models.activity_log import ActivityLog


def receipt_payload(student_id="student-1", number="V18-240305-0001", **extra):
    payload = {
        "studentId": student_id,
        "receiptNumber": number,
        "issueDate": "2024-03-05T10:00:00",
        "totalAmount": 3000,
        "paymentMethod": "Cash",
    }
    payload.update(extra)
    return payload


def test_create_and_filter_receipts(client):
    assert client.post("/api/receipts", json=receipt_payload()).status_code == 200
    client.post("/api/receipts", json=receipt_payload(student_id="student-2", number="V18-240305-0002"))

    assert len(client.get("/api/receipts").json()) == 2
    only = client.get("/api/receipts", params={"studentId": "student-2"}).json()
    assert [r["receiptNumber"] for r in only] == ["V18-240305-0002"]


def test_duplicate_receipt_number_is_conflict(client):
    client.post("/api/receipts", json=receipt_payload())

    response = client.post("/api/receipts", json=receipt_payload(student_id="student-2"))
    assert response.status_code == 409
    assert response.json()["detail"]["field"] == "receipt_number"
    assert len(client.get("/api/receipts").json()) == 1


def test_append_log_entry(client):
    response = client.post("/api/logs", json={"action": "Student Added", "adminName": "Sarah", "details": "Added Asha"})
    assert response.status_code == 200
    entry = response.json()
    assert entry["timestamp"]
    assert client.get("/api/logs").json()[0]["id"] == entry["id"]


def test_log_is_capped_at_newest_hundred(client, session_factory):
    start = datetime(2024, 1, 1)

    async def _seed():
        async with session_factory() as session:
            session.add_all([
                ActivityLog(action=f"Entry {i}", admin_name="Sarah", timestamp=start + timedelta(minutes=i))
                for i in range(100)
            ])
            await session.commit()

    asyncio.run(_seed())

    newest = client.post("/api/logs", json={"action": "Entry 100", "adminName": "Sarah"}).json()

    logs = client.get("/api/logs").json()
    actions = [entry["action"] for entry in logs]
    assert len(logs) == 100
    assert logs[0]["id"] == newest["id"]
    assert "Entry 0" not in actions
    assert "Entry 1" in actions


def test_log_limit_bounds(client):
    for i in range(3):
        client.post("/api/logs", json={"action": f"Entry {i}"})

    assert len(client.get("/api/logs", params={"limit": 2}).json()) == 2
    assert client.get("/api/logs", params={"limit": 0}).status_code == 422
    assert client.get("/api/logs", params={"limit": 101}).status_code == 422


def test_root_and_health(client):
    assert "Welcome" in client.get("/").json()["message"]
    response = client.get("/health/")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert "X-Process-Time" in response.headers
