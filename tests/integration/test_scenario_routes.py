"""
Scenario endpoint tests.
"""


class TestCurrent:
    def test_default_with_progression(self, client):
        response = client.get("/scenario/current")
        assert response.status_code == 200
        body = response.json()
        assert body["scenario"] == "cyber_breach_pre_disclosure"
        assert body["state"] == "normal"
        assert body["stateIndex"] == 0
        assert body["totalStates"] == 4
        assert body["timestamp"] == "2026-03-05T14:30:00.000Z"
        assert [entry["name"] for entry in body["progression"]] == [
            "normal",
            "signal_convergence",
            "exposure_window_open",
            "escalation_imminent",
        ]
        assert [entry["isCurrent"] for entry in body["progression"]] == [True, False, False, False]

    def test_reflects_admin_change(self, client, admin_headers):
        client.post("/admin/setState", headers=admin_headers, json={"state": "exposure_window_open"})
        body = client.get("/scenario/current").json()
        assert body["stateIndex"] == 2
        assert body["progression"][2] == {"name": "exposure_window_open", "index": 2, "isCurrent": True}


class TestList:
    def test_lists_scenarios_and_states(self, client):
        body = client.get("/scenario/list").json()
        assert body["scenarios"] == [
            "cyber_breach_pre_disclosure",
            "weaponized_public_narrative",
            "legal_escalation_pre_filing",
            "third_party_exposure_event",
        ]
        assert body["states"][0] == "normal"
        assert len(body["states"]) == 4

    def test_details_carry_names(self, client):
        details = client.get("/scenario/list").json()["details"]
        assert [entry["id"] for entry in details] == client.get("/scenario/list").json()["scenarios"]
        assert all(entry["name"] and entry["description"] for entry in details)
