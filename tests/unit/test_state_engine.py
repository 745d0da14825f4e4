"""
Unit tests for the state engine.
"""
from datetime import datetime, timedelta, timezone

import pytest

from zerohour.base.config import CatalogConfig
from zerohour.engine.state_engine import StateEngine, format_timestamp

STATES = CatalogConfig().valid_states
SCENARIOS = CatalogConfig().valid_scenarios


class TickingClock:
    """Clock that advances one second per call."""

    def __init__(self):
        self.now = datetime(2026, 1, 1, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


class TestInitialState:
    def test_starts_at_defaults(self, engine):
        current = engine.get_current()
        assert current["scenario"] == "cyber_breach_pre_disclosure"
        assert current["state"] == "normal"
        assert current["stateIndex"] == 0
        assert current["totalStates"] == 4

    def test_timestamp_is_iso_utc(self, engine):
        assert engine.get_current()["timestamp"] == "2026-03-05T14:30:00.000Z"


class TestSetScenario:
    @pytest.mark.parametrize("scenario", SCENARIOS)
    @pytest.mark.parametrize("prior_state", STATES)
    def test_always_restarts_at_default_state(self, engine, scenario, prior_state):
        engine.set_state(prior_state)
        result = engine.set_scenario(scenario)
        assert result.success is True
        assert engine.get_current()["state"] == "normal"
        assert engine.get_current()["scenario"] == scenario

    def test_records_previous_snapshot(self, engine):
        engine.set_state("exposure_window_open")
        result = engine.set_scenario("weaponized_public_narrative")
        assert result.previous["scenario"] == "cyber_breach_pre_disclosure"
        assert result.previous["state"] == "exposure_window_open"
        assert result.current["scenario"] == "weaponized_public_narrative"
        assert result.current["state"] == "normal"

    def test_invalid_scenario_leaves_state_unchanged(self, engine):
        engine.set_state("signal_convergence")
        before = engine.get_current()

        result = engine.set_scenario("not_a_real_scenario")

        assert result.success is False
        assert "Invalid scenario: not_a_real_scenario" in result.error
        for scenario in SCENARIOS:
            assert scenario in result.error
        assert engine.get_current() == before

    def test_optional_state_applied_after_restart(self, engine):
        result = engine.set_scenario("third_party_exposure_event", "escalation_imminent")
        assert result.success is True
        assert result.current["state"] == "escalation_imminent"
        assert result.current["stateIndex"] == 3

    def test_invalid_optional_state_changes_nothing(self, engine):
        before = engine.get_current()
        result = engine.set_scenario("third_party_exposure_event", "bogus")
        assert result.success is False
        assert "Invalid state: bogus" in result.error
        assert engine.get_current() == before

    def test_failed_result_serializes_without_snapshots(self, engine):
        result = engine.set_scenario("nope")
        assert result.to_dict() == {"success": False, "error": result.error}


class TestSetState:
    @pytest.mark.parametrize("state", STATES)
    def test_idempotent(self, state):
        engine = StateEngine(CatalogConfig(), clock=TickingClock())
        engine.set_state(state)
        first = engine.get_current()
        engine.set_state(state)
        second = engine.get_current()

        first.pop("timestamp")
        second.pop("timestamp")
        assert first == second

    def test_free_jumps_between_states(self, engine):
        assert engine.set_state("escalation_imminent").success
        assert engine.set_state("normal").success
        assert engine.set_state("exposure_window_open").success
        assert engine.get_current()["stateIndex"] == 2

    def test_keeps_scenario(self, engine):
        engine.set_scenario("legal_escalation_pre_filing")
        engine.set_state("signal_convergence")
        assert engine.scenario == "legal_escalation_pre_filing"

    def test_invalid_state_rejected(self, engine):
        before = engine.get_current()
        result = engine.set_state("panic")
        assert result.success is False
        assert result.error.startswith("Invalid state: panic. Valid states: normal, signal_convergence")
        assert engine.get_current() == before

    def test_refreshes_timestamp(self):
        clock = TickingClock()
        engine = StateEngine(CatalogConfig(), clock=clock)
        created = engine.last_updated
        engine.set_state("signal_convergence")
        assert engine.last_updated > created


class TestRoundTrip:
    def test_legal_escalation_to_imminent(self, engine):
        engine.set_scenario("legal_escalation_pre_filing")
        engine.set_state("escalation_imminent")
        current = engine.get_current()
        assert current["scenario"] == "legal_escalation_pre_filing"
        assert current["state"] == "escalation_imminent"
        assert current["stateIndex"] == 3
        assert current["totalStates"] == 4


class TestReset:
    @pytest.mark.parametrize("scenario", SCENARIOS)
    @pytest.mark.parametrize("state", STATES)
    def test_restores_defaults(self, engine, scenario, state):
        engine.set_scenario(scenario, state)
        engine.reset()
        current = engine.get_current()
        assert current["scenario"] == "cyber_breach_pre_disclosure"
        assert current["state"] == "normal"

    def test_returns_previous_and_current(self, engine):
        engine.set_scenario("weaponized_public_narrative", "exposure_window_open")
        result = engine.reset()
        assert result.success is True
        assert result.previous["scenario"] == "weaponized_public_narrative"
        assert result.current["scenario"] == "cyber_breach_pre_disclosure"


class TestStateProgression:
    @pytest.mark.parametrize("state", STATES)
    def test_exactly_one_current(self, engine, state):
        engine.set_state(state)
        progression = engine.get_state_progression()

        assert len(progression) == 4
        current = [entry for entry in progression if entry["isCurrent"]]
        assert len(current) == 1
        assert current[0]["name"] == engine.get_current()["state"]

    def test_in_escalation_order(self, engine):
        progression = engine.get_state_progression()
        assert [entry["name"] for entry in progression] == list(STATES)
        assert [entry["index"] for entry in progression] == [0, 1, 2, 3]


class TestTransitionHistory:
    def test_successful_changes_are_recorded(self, engine):
        engine.set_scenario("legal_escalation_pre_filing")
        engine.set_state("signal_convergence")
        engine.set_state("bogus")
        engine.reset()

        transitions = engine.get_transitions()
        assert len(transitions) == 3
        assert transitions[0].to_scenario == "legal_escalation_pre_filing"
        assert transitions[1].from_state == "normal"
        assert transitions[1].to_state == "signal_convergence"
        assert transitions[2].reason == "Reset to defaults"

    def test_history_is_bounded(self, engine):
        for _ in range(StateEngine.HISTORY_LIMIT + 10):
            engine.set_state("signal_convergence")
        assert len(engine.get_transitions()) == StateEngine.HISTORY_LIMIT


def test_format_timestamp_normalizes_to_utc():
    moment = datetime(2026, 3, 5, 9, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert format_timestamp(moment) == "2026-03-05T14:00:00.000Z"
