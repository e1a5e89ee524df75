from app.api.deps import get_assistant_service
from app.core.errors import UpstreamUnavailable
from app.main import app as fastapi_app
from app.services.assistant_service import FALLBACK_MESSAGES, AssistantService


def caller(user_id):
    return {"X-User-Id": user_id}


def _new_report(client, user_id, **overrides):
    body = {"category": "pothole", "latitude": 28.6, "longitude": 77.2}
    body.update(overrides)
    return client.post("/api/v1/reports", json=body, headers=caller(user_id))


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_missing_caller_identity_is_unauthorized(client):
    assert client.get("/api/v1/reports").status_code == 401


def test_unknown_caller_is_unauthorized(client):
    assert client.get("/api/v1/auth/user", headers=caller("ghost")).status_code == 401


def test_profile_sync_creates_citizen(client):
    response = client.put(
        "/api/v1/auth/user",
        json={"email": "kiran@example.org", "first_name": "Kiran"},
        headers=caller("kiran"),
    )
    assert response.status_code == 200
    assert response.json()["user_type"] == "citizen"

    me = client.get("/api/v1/auth/user", headers=caller("kiran")).json()
    assert me["first_name"] == "Kiran"
    assert me["employee_id"] is None


def test_citizen_files_and_reads_reports(client, citizen):
    created = _new_report(client, citizen.id, description="Deep pothole", address="MG Road")
    assert created.status_code == 201
    report = created.json()
    assert report["status"] == "pending"
    assert report["report_id"].startswith("SW")
    assert report["assigned_to"] is None

    listed = client.get("/api/v1/reports", headers=caller(citizen.id)).json()
    assert [r["id"] for r in listed] == [report["id"]]

    fetched = client.get(f"/api/v1/reports/{report['id']}", headers=caller(citizen.id))
    assert fetched.json()["description"] == "Deep pothole"

    stats = client.get("/api/v1/reports/stats", headers=caller(citizen.id)).json()
    assert stats == {"total": 1, "pending": 1, "in_progress": 0, "resolved": 0}


def test_report_creation_requires_category(client, citizen):
    response = client.post(
        "/api/v1/reports",
        json={"latitude": 28.6, "longitude": 77.2},
        headers=caller(citizen.id),
    )
    assert response.status_code == 422
    body = response.json()
    assert body["kind"] == "validation_error"
    assert body["detail"][0]["loc"] == ["body", "category"]


def test_unknown_report_is_not_found(client, citizen):
    response = client.get("/api/v1/reports/missing", headers=caller(citizen.id))

    assert response.status_code == 404
    assert response.json() == {"detail": "Report not found", "kind": "not_found"}


def test_citizen_cannot_use_authority_routes(client, citizen):
    for path in ("/api/v1/authority/reports", "/api/v1/authority/stats", "/api/v1/authority/employees"):
        response = client.get(path, headers=caller(citizen.id))
        assert response.status_code == 403
        assert response.json()["kind"] == "forbidden"


def test_authority_routes_need_caller_identity(client):
    assert client.get("/api/v1/authority/reports").status_code == 401


def test_assign_and_resolve_flow(client, citizen, authority):
    report = _new_report(client, citizen.id).json()

    assigned = client.post(
        f"/api/v1/authority/reports/{report['id']}/assign",
        json={"employee_id": authority.id, "priority": "high"},
        headers=caller(authority.id),
    )
    assert assigned.status_code == 200
    assert assigned.json()["status"] == "in_progress"
    assert assigned.json()["priority"] == "high"

    performance_url = f"/api/v1/authority/employees/{authority.id}/performance"
    performance = client.get(performance_url, headers=caller(authority.id)).json()
    assert performance["active_reports"] == 1

    resolved = client.patch(
        f"/api/v1/authority/reports/{report['id']}/status",
        json={"status": "resolved"},
        headers=caller(authority.id),
    )
    assert resolved.json()["status"] == "resolved"

    performance = client.get(performance_url, headers=caller(authority.id)).json()
    assert performance == {
        "active_reports": 0,
        "resolved_reports": 1,
        "flagged_reports": 0,
        "average_rating": 4.2,
        "satisfaction_rate": 85.5,
    }


def test_status_update_rejects_unknown_status(client, citizen, authority):
    report = _new_report(client, citizen.id).json()

    response = client.patch(
        f"/api/v1/authority/reports/{report['id']}/status",
        json={"status": "closed"},
        headers=caller(authority.id),
    )
    assert response.status_code == 422


def test_assigning_unknown_report(client, authority):
    response = client.post(
        "/api/v1/authority/reports/missing/assign",
        json={"employee_id": authority.id},
        headers=caller(authority.id),
    )
    assert response.status_code == 404


def test_authority_dashboard_stats(client, citizen, other_citizen, authority):
    _new_report(client, citizen.id, category="drainage", latitude=12.9716, longitude=77.5946)
    _new_report(client, other_citizen.id, category="drainage", latitude=12.9716, longitude=77.5946)
    _new_report(client, citizen.id, category="garbage", latitude=12.97160001, longitude=77.5946)
    headers = caller(authority.id)

    all_reports = client.get("/api/v1/authority/reports", headers=headers).json()
    assert len(all_reports) == 3

    assert client.get("/api/v1/authority/stats", headers=headers).json() == {
        "total_reports": 3,
        "pending_reports": 3,
        "in_progress_reports": 0,
        "resolved_reports": 0,
    }

    categories = client.get("/api/v1/authority/stats/categories", headers=headers).json()
    assert categories["drainage"] == 2
    assert categories["garbage"] == 1
    assert categories["street_light"] == 0

    locations = client.get("/api/v1/authority/stats/locations", headers=headers).json()
    assert sorted(entry["count"] for entry in locations) == [1, 2]


def test_employee_management(client, citizen, authority):
    headers = caller(authority.id)

    promoted = client.put(
        f"/api/v1/authority/employees/{citizen.id}",
        json={"employee_id": "EMP-100", "role": "field_worker", "department": "wire"},
        headers=headers,
    )
    assert promoted.status_code == 200
    assert promoted.json()["user_type"] == "authority"

    employees = client.get("/api/v1/authority/employees", headers=headers).json()
    assert {e["id"] for e in employees} == {authority.id, citizen.id}

    removed = client.delete(f"/api/v1/authority/employees/{citizen.id}", headers=headers)
    assert removed.status_code == 200
    assert removed.json()["is_active"] is False

    employees = client.get("/api/v1/authority/employees", headers=headers).json()
    assert {e["id"] for e in employees} == {authority.id, citizen.id}


def test_deactivating_a_citizen_is_not_found(client, other_citizen, authority):
    response = client.delete(
        f"/api/v1/authority/employees/{other_citizen.id}", headers=caller(authority.id)
    )
    assert response.status_code == 404


def test_chat_requires_message(client, citizen):
    response = client.post("/api/v1/chat", json={"message": "  "}, headers=caller(citizen.id))

    assert response.status_code == 400


def test_chat_degrades_to_fallback_reply(client, citizen):
    class FailingClient:
        def complete(self, system_prompt, message):
            raise UpstreamUnavailable("down")

    fastapi_app.dependency_overrides[get_assistant_service] = lambda: AssistantService(FailingClient())

    response = client.post(
        "/api/v1/chat",
        json={"message": "How do I report garbage?", "language": "hi"},
        headers=caller(citizen.id),
    )

    assert response.status_code == 200
    assert response.json() == {"response": FALLBACK_MESSAGES["hi"]["unavailable"]}


def test_chat_without_api_key_still_answers(client, citizen):
    response = client.post(
        "/api/v1/chat",
        json={"message": "hello", "language": "xx"},
        headers=caller(citizen.id),
    )

    assert response.status_code == 200
    assert response.json() == {"response": FALLBACK_MESSAGES["en"]["unavailable"]}


def test_chat_accepts_long_language_tags(client, citizen):
    response = client.post(
        "/api/v1/chat",
        json={"message": "hello", "language": "en-GB-oxendict"},
        headers=caller(citizen.id),
    )

    assert response.status_code == 200
    assert response.json() == {"response": FALLBACK_MESSAGES["en"]["unavailable"]}


def test_profile_sync_with_taken_email_is_a_storage_failure(client, citizen, other_citizen):
    response = client.put(
        "/api/v1/auth/user",
        json={"email": other_citizen.email},
        headers=caller(citizen.id),
    )

    assert response.status_code == 500
    body = response.json()
    assert body["kind"] == "persistence_error"
    assert body["detail"].startswith("Storage failure")

    me = client.get("/api/v1/auth/user", headers=caller(citizen.id)).json()
    assert me["email"] == "asha@example.org"
