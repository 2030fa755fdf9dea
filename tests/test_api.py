# tests/test_api.py
"""End-to-end tests of the HTTP procedures through TestClient."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from datetime import date
from fastapi.testclient import TestClient
from vanfleet.config import settings
from vanfleet.database import build_engine, build_session_factory
from vanfleet.main import create_app
from helpers import TEST_PASSWORD, breakdown_payload, van_payload

API = "/api/v1"


def create_van(client, **overrides):
    resp = client.post(f"{API}/vans", json=van_payload(**overrides))
    assert resp.status_code == 201, resp.text
    return resp.json()["id"]


class TestAuth:
    def test_wrong_password_is_unauthorized_and_sets_no_cookie(self, client):
        resp = client.post(f"{API}/auth/login", json={"password": "nope"})
        assert resp.status_code == 401
        assert resp.json()["error_code"] == "unauthorized"
        assert "set-cookie" not in resp.headers
        assert client.get(f"{API}/auth/me").json() is None

    def test_login_then_me(self, client):
        resp = client.post(f"{API}/auth/login", json={"password": TEST_PASSWORD})
        assert resp.status_code == 200
        body = resp.json()
        assert body["success"] is True
        assert body["token"]
        assert settings.SESSION_COOKIE_NAME in resp.cookies

        me = client.get(f"{API}/auth/me").json()
        assert me["authenticated"] is True

    def test_bearer_token_accepted(self, client):
        token = client.post(f"{API}/auth/login", json={"password": TEST_PASSWORD}).json()["token"]
        client.cookies.clear()
        resp = client.get(f"{API}/vans", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 200

    def test_logout_clears_session(self, auth_client):
        assert auth_client.post(f"{API}/auth/logout").json() == {"success": True}
        assert auth_client.get(f"{API}/auth/me").json() is None
        assert auth_client.get(f"{API}/vans").status_code == 401

    @pytest.mark.parametrize("path", ["/vans", "/averias", "/metrics/dashboard", "/vans/1"])
    def test_procedures_require_session(self, client, path):
        resp = client.get(f"{API}{path}")
        assert resp.status_code == 401
        assert resp.json()["error_code"] == "unauthorized"

    def test_forged_cookie_rejected(self, client):
        client.cookies.set(settings.SESSION_COOKIE_NAME, "eyJhdXRoZW50aWNhdGVkIjp0cnVlfQ==")
        assert client.get(f"{API}/vans").status_code == 401


class TestVans:
    def test_create_and_get(self, auth_client):
        van_id = create_van(auth_client, vin="wdb90661313a12345", matricula="aaa-0001", itv_date="2027-02-01")

        van = auth_client.get(f"{API}/vans/{van_id}").json()
        assert van["vin"] == "WDB90661313A12345"
        assert van["matricula"] == "AAA-0001"
        assert van["itv_date"] == "2027-02-01"
        assert van["active"] is True
        assert van["has_breakdown"] is False

    def test_get_missing_is_404(self, auth_client):
        resp = auth_client.get(f"{API}/vans/999")
        assert resp.status_code == 404
        assert resp.json()["error_code"] == "not_found"

    def test_duplicate_vin_is_409(self, auth_client):
        create_van(auth_client)
        resp = auth_client.post(f"{API}/vans", json=van_payload(matricula="BBB-0002"))
        assert resp.status_code == 409
        assert resp.json()["error_code"] == "conflict"

    def test_duplicate_plate_on_update_is_409(self, auth_client):
        create_van(auth_client)
        other = create_van(auth_client, vin="22222222222222222", matricula="BBB-0002")
        resp = auth_client.patch(f"{API}/vans/{other}", json={"matricula": "aaa-0001"})
        assert resp.status_code == 409

    def test_invalid_vin_is_validation_failure(self, auth_client):
        resp = auth_client.post(f"{API}/vans", json=van_payload(vin="SHORT"))
        assert resp.status_code == 422
        assert resp.json()["error_code"] == "validation_failed"
        assert auth_client.get(f"{API}/vans").json() == []

    def test_partial_update(self, auth_client):
        van_id = create_van(auth_client)
        resp = auth_client.patch(f"{API}/vans/{van_id}", json={"state": "Taller", "has_breakdown": True})
        assert resp.json() == {"success": True}

        van = auth_client.get(f"{API}/vans/{van_id}").json()
        assert van["state"] == "Taller"
        assert van["has_breakdown"] is True
        assert van["company"] == "Acme"

    def test_search(self, auth_client):
        create_van(auth_client, matricula="1234-KLM")
        create_van(auth_client, vin="22222222222222222", matricula="5678-XYZ")
        resp = auth_client.get(f"{API}/vans/search", params={"query": "klm"})
        assert [v["matricula"] for v in resp.json()] == ["1234-KLM"]

    def test_search_requires_query(self, auth_client):
        assert auth_client.get(f"{API}/vans/search").status_code == 422
        assert auth_client.get(f"{API}/vans/search", params={"query": ""}).status_code == 422

    def test_filter(self, auth_client):
        create_van(auth_client, company="Acme", active=True)
        create_van(auth_client, vin="22222222222222222", matricula="BBB-0002", company="Acme", active=False)
        create_van(auth_client, vin="33333333333333333", matricula="CCC-0003", company="Globex")

        resp = auth_client.get(f"{API}/vans/filter", params={"company": "Acme", "active": "false"})
        assert [v["matricula"] for v in resp.json()] == ["BBB-0002"]

    def test_filter_without_predicates_equals_list(self, auth_client):
        create_van(auth_client)
        create_van(auth_client, vin="22222222222222222", matricula="BBB-0002")
        listed = auth_client.get(f"{API}/vans").json()
        assert auth_client.get(f"{API}/vans/filter").json() == listed
        assert [v["matricula"] for v in listed] == ["BBB-0002", "AAA-0001"]

    def test_blank_filter_values_do_not_constrain(self, auth_client):
        create_van(auth_client, company="Acme")
        create_van(auth_client, vin="22222222222222222", matricula="BBB-0002", company="Globex")
        listed = auth_client.get(f"{API}/vans").json()
        resp = auth_client.get(f"{API}/vans/filter?company=&state=")
        assert resp.status_code == 200
        assert resp.json() == listed
        assert len(listed) == 2

    def test_delete_cascades(self, auth_client):
        van_id = create_van(auth_client)
        auth_client.post(f"{API}/averias", json=breakdown_payload(van_id))

        assert auth_client.delete(f"{API}/vans/{van_id}").json() == {"success": True}
        assert auth_client.get(f"{API}/vans/{van_id}").status_code == 404
        assert auth_client.get(f"{API}/averias/van/{van_id}").json() == []
        assert auth_client.get(f"{API}/averias").json() == []

    def test_delete_missing_is_404(self, auth_client):
        assert auth_client.delete(f"{API}/vans/999").status_code == 404


class TestAverias:
    def test_create_for_missing_van_is_404(self, auth_client):
        resp = auth_client.post(f"{API}/averias", json=breakdown_payload(4242))
        assert resp.status_code == 404
        assert auth_client.get(f"{API}/averias").json() == []

    def test_create_get_and_close(self, auth_client):
        van_id = create_van(auth_client)
        resp = auth_client.post(f"{API}/averias", json=breakdown_payload(van_id, workshop="Taller Norte"))
        assert resp.status_code == 201
        breakdown_id = resp.json()["id"]

        breakdown = auth_client.get(f"{API}/averias/{breakdown_id}").json()
        assert breakdown["van_id"] == van_id
        assert breakdown["in_workshop"] is True

        auth_client.patch(f"{API}/averias/{breakdown_id}", json={"workshop_exit_date": date.today().isoformat()})
        assert auth_client.get(f"{API}/averias/{breakdown_id}").json()["in_workshop"] is False

    def test_history_for_van(self, auth_client):
        van_id = create_van(auth_client)
        first = auth_client.post(f"{API}/averias", json=breakdown_payload(van_id, cause="Frenos")).json()["id"]
        second = auth_client.post(f"{API}/averias", json=breakdown_payload(van_id, cause="Motor")).json()["id"]
        history = auth_client.get(f"{API}/averias/van/{van_id}").json()
        assert [b["id"] for b in history] == [second, first]

    def test_invalid_date_is_validation_failure(self, auth_client):
        van_id = create_van(auth_client)
        resp = auth_client.post(f"{API}/averias", json=breakdown_payload(van_id, breakdown_date="2026-13-01"))
        assert resp.status_code == 422

    def test_delete(self, auth_client):
        van_id = create_van(auth_client)
        breakdown_id = auth_client.post(f"{API}/averias", json=breakdown_payload(van_id)).json()["id"]
        assert auth_client.delete(f"{API}/averias/{breakdown_id}").json() == {"success": True}
        assert auth_client.get(f"{API}/averias/{breakdown_id}").status_code == 404
        assert auth_client.get(f"{API}/vans/{van_id}").status_code == 200


class TestDashboard:
    def test_scenario_open_breakdown(self, auth_client):
        van_id = create_van(auth_client, vin="11111111111111111", matricula="AAA-0001", company="Acme")
        auth_client.post(f"{API}/averias", json=breakdown_payload(van_id))

        metrics = auth_client.get(f"{API}/metrics/dashboard").json()
        assert metrics["total_vans"] == 1
        assert metrics["vans_with_breakdown"] == 0
        assert metrics["vans_in_workshop"] == 1
        assert metrics["company_counts"] == {"Acme": 1}

        auth_client.patch(f"{API}/vans/{van_id}", json={"has_breakdown": True})
        metrics = auth_client.get(f"{API}/metrics/dashboard").json()
        assert metrics["vans_with_breakdown"] == 1
        assert metrics["vans_in_workshop"] == 1


class TestHealth:
    def test_health_is_public(self, client):
        body = client.get(f"{API}/health").json()
        assert body["status"] == "ok"
        assert body["database"] == "ok"

    def test_unreachable_database_at_startup_still_serves(self, tmp_path):
        # Parent directory does not exist, so SQLite cannot open the file
        url = f"sqlite:///{tmp_path / 'missing' / 'vanfleet.db'}"
        app = create_app(session_factory=build_session_factory(build_engine(url)))
        with TestClient(app) as c:
            body = c.get(f"{API}/health").json()
        assert body["status"] == "degraded"
        assert body["database"].startswith("error:")
