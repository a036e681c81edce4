from datetime import datetime, timezone

from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from app.core.repositories.base import SqlAlchemyRepository
from app.core.services.submission_service import SubmissionService
from tests.conftest import ADMIN_PASSWORD, ADMIN_USERNAME, VALID_SUBMISSION


def parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class TestListSubmissions:

    def test_requires_login(self, client):
        client.post("/api/submit", json=VALID_SUBMISSION)

        response = client.get("/api/admin/submissions")

        assert response.status_code == 401
        assert response.json() == {"success": False, "message": "Unauthorized"}
        assert "data" not in response.json()

    def test_empty_list(self, admin_client):
        response = admin_client.get("/api/admin/submissions")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}

    def test_submitted_record_is_listed(self, admin_client):
        started = datetime.now(timezone.utc)
        admin_client.post("/api/submit", json=VALID_SUBMISSION)

        response = admin_client.get("/api/admin/submissions")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert len(body["data"]) == 1

        record = body["data"][0]
        assert set(record) == {"full_name", "phone", "email", "message", "submitted_at"}
        assert record["full_name"] == "Jane Doe"
        assert record["phone"] == "0400000000"
        assert record["email"] == "jane@example.com"
        assert record["message"] == "Need a quote"
        assert parse_timestamp(record["submitted_at"]) >= started

    def test_newest_first(self, admin_client):
        for name in ("First Person", "Second Person", "Third Person"):
            admin_client.post("/api/submit", json={**VALID_SUBMISSION, "full_name": name})

        data = admin_client.get("/api/admin/submissions").json()["data"]

        assert [item["full_name"] for item in data] == ["Third Person", "Second Person", "First Person"]

    def test_fields_trimmed_and_email_normalized(self, admin_client):
        admin_client.post(
            "/api/submit",
            json={
                "full_name": "  Jane Doe ",
                "phone": " 0400000000",
                "email": "jane@EXAMPLE.com",
                "message": "Need a quote  ",
            },
        )

        record = admin_client.get("/api/admin/submissions").json()["data"][0]

        assert record["full_name"] == "Jane Doe"
        assert record["phone"] == "0400000000"
        assert record["email"] == "jane@example.com"
        assert record["message"] == "Need a quote"

    def test_storage_failure_returns_generic_error(self, admin_client, monkeypatch):
        async def broken_get_all_items(self, *order_by):
            raise OperationalError("SELECT * FROM submissions", {}, Exception("database disk image is malformed"))

        monkeypatch.setattr(SqlAlchemyRepository, "get_all_items", broken_get_all_items)

        response = admin_client.get("/api/admin/submissions")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Server error"}
        assert "malformed" not in response.text
        assert "SELECT" not in response.text

    def test_unexpected_error_is_hidden(self, app, monkeypatch):
        async def explode(self):
            raise RuntimeError("database exploded")

        monkeypatch.setattr(SubmissionService, "get_submissions", explode)

        with TestClient(app, raise_server_exceptions=False) as client:
            client.post("/api/admin/login", json={"username": ADMIN_USERNAME, "password": ADMIN_PASSWORD})
            response = client.get("/api/admin/submissions")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Server error"}
        assert "exploded" not in response.text


class TestNonApiErrors:

    def test_unknown_page_is_not_json(self, client):
        response = client.get("/no-such-page")

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/html")

    def test_unknown_api_route_is_json(self, client):
        response = client.get("/api/no-such-endpoint")

        assert response.status_code == 404
        assert response.json()["success"] is False
