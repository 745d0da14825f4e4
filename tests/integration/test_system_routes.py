"""
Health, index, routing fallbacks and CORS.
"""


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "zerohour-demo-backend"
    assert body["timestamp"].endswith("Z")


def test_api_index(client):
    body = client.get("/api").json()
    assert body["endpoints"]["admin"]["reset"].startswith("POST /admin/reset")
    assert "summary" in body["endpoints"]["exposure"]


class TestFallbacks:
    def test_unknown_route(self, client):
        response = client.get("/nope")
        assert response.status_code == 404
        assert response.json() == {
            "success": False,
            "error": "Route not found: GET /nope",
            "code": "ROUTE_001",
            "type": "not_found",
            "details": {},
        }

    def test_malformed_json(self, client, admin_headers):
        response = client.post(
            "/admin/setState",
            headers={**admin_headers, "Content-Type": "application/json"},
            content=b"{not json",
        )
        assert response.status_code == 400
        assert response.json()["code"] == "REQUEST_001"


class TestCors:
    def test_preflight(self, client):
        response = client.options(
            "/admin/setScenario",
            headers={
                "Origin": "http://dashboard.test",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Authorization, Content-Type",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "POST" in response.headers["access-control-allow-methods"]

    def test_simple_request_header(self, client):
        response = client.get("/health", headers={"Origin": "http://dashboard.test"})
        assert response.headers["access-control-allow-origin"] == "*"


def test_state_scoped_per_app(config, admin_headers):
    from fastapi.testclient import TestClient
    from zerohour.server.api import create_app

    first, second = create_app(config), create_app(config)
    with TestClient(first) as client_a, TestClient(second) as client_b:
        client_a.post("/admin/setState", headers=admin_headers, json={"state": "escalation_imminent"})
        assert client_b.get("/scenario/current").json()["state"] == "normal"
