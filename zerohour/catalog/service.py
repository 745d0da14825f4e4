# zerohour/catalog/service.py
"""
SCENARIO CATALOG: (scenario, state) → dashboard views

Read-only projections over the declarative table in
zerohour.catalog.scenarios. Nothing here mutates anything; the only input
besides the arguments is the clock (signal dates and the countdown).

Lookups for an unknown scenario degrade to None (summary, domains,
timeline) or an empty list (signals). An unknown state falls back to the
default state's view. The read endpoints rely on this to never error.
"""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional

from zerohour.base.config import CatalogConfig
from zerohour.catalog import scenarios as scenario_table
from zerohour.catalog.models import ScenarioDefinition, StateView
from zerohour.errors import ZeroHourError, ErrorCode

logger = logging.getLogger(__name__)

SIGNALS_PER_SCENARIO = 6


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ScenarioCatalog:
    """
    Static scenario table plus the projections the read endpoints serve.

    Thread Safety:
    - Built once in __init__, immutable afterwards; no locking needed
    """

    def __init__(
        self,
        config: CatalogConfig,
        table: Optional[Dict[str, Dict[str, Any]]] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._config = config
        self._clock = clock or _utc_now

        raw = scenario_table.SCENARIOS if table is None else table
        self._validate_table(raw)
        self._scenarios: Mapping[str, ScenarioDefinition] = MappingProxyType({
            scenario_id: ScenarioDefinition.from_dict(scenario_id, raw[scenario_id])
            for scenario_id in config.valid_scenarios
        })
        logger.debug(f"[Catalog] Loaded {len(self._scenarios)} scenarios")

    # ================================================================
    # Static enumerations
    # ================================================================

    def get_all_scenarios(self) -> List[str]:
        return list(self._config.valid_scenarios)

    def get_all_states(self) -> List[str]:
        return list(self._config.valid_states)

    def describe_scenarios(self) -> List[Dict[str, str]]:
        """Display name and description for every scenario, in catalog order."""
        return [self._scenarios[s].describe() for s in self._config.valid_scenarios]

    def get_scenario(self, scenario: str) -> Optional[ScenarioDefinition]:
        return self._scenarios.get(scenario)

    def get_target_entity(self) -> Dict[str, str]:
        target = self._config.target_entity
        return {"name": target.name, "id": target.id}

    # ================================================================
    # Table lookups
    # ================================================================

    def get_exposure_summary(self, scenario: str, state: str) -> Optional[Dict[str, Any]]:
        """Schema: { risk_level, confidence, domains, summary }"""
        view = self._resolve_view(scenario, state)
        if view is None:
            return None
        return view.summary.to_dict()

    def get_exposure_domains(self, scenario: str, state: str) -> Optional[Dict[str, Dict[str, str]]]:
        """Schema: { legal: {status, note}, cyber: {...}, reputational: {...}, third_party: {...} }"""
        view = self._resolve_view(scenario, state)
        if view is None:
            return None
        return {domain: view.domains[domain].to_dict() for domain in self._config.domains}

    def _resolve_view(self, scenario: str, state: str) -> Optional[StateView]:
        """
        Two-step lookup: exact (scenario, state), else the scenario's
        default-state view. None only when the scenario itself is unknown.
        """
        definition = self._scenarios.get(scenario)
        if definition is None:
            return None

        view = definition.states.get(state)
        if view is not None:
            return view

        logger.warning(
            f"[Catalog] No view for state {state!r} in {scenario}; "
            f"falling back to {self._config.default_state!r}"
        )
        return definition.states[self._config.default_state]

    # ================================================================
    # Derived views
    # ================================================================

    def get_exposure_timeline(self, scenario: str, state: str) -> Optional[Dict[str, Optional[str]]]:
        """Schema: { past, present, next } (state names only)"""
        if scenario not in self._scenarios:
            return None

        states = self._config.valid_states
        index = self._config.state_index(state)
        if index < 0:
            return {"past": None, "present": state, "next": None}

        return {
            "past": states[index - 1] if index > 0 else None,
            "present": state,
            "next": states[index + 1] if index < len(states) - 1 else None,
        }

    def get_observed_signals(self, scenario: str, state: str) -> List[Dict[str, Any]]:
        """
        Signal cards for the current escalation.

        Each template gets a trajectory label from TRAJECTORY_MAP (by state
        index) and a date a fixed number of days before today. The last card
        is highlighted once the exposure window is open.
        """
        definition = self._scenarios.get(scenario)
        if definition is None:
            return []

        index = self._config.state_index(state)
        trajectories = scenario_table.TRAJECTORY_MAP.get(index, scenario_table.TRAJECTORY_MAP[0])
        today = self._clock()
        last = len(definition.signals) - 1

        signals = []
        for position, template in enumerate(definition.signals):
            days_ago = scenario_table.SIGNAL_DAYS_AGO[min(position, len(scenario_table.SIGNAL_DAYS_AGO) - 1)]
            signals.append({
                "date": _format_day(today - timedelta(days=days_ago)),
                "category": template.category,
                "title": template.title,
                "description": template.description,
                "trajectory": trajectories[position] if position < len(trajectories) else "early",
                "highlighted": index >= 2 and position == last,
            })
        return signals

    def get_countdown_data(self, scenario: str, state: str) -> Dict[str, Any]:
        """
        Countdown panel: wall-clock times offset by the configured minutes.

        Not pure; every call reads the clock.
        """
        now = self._clock().astimezone(timezone.utc)
        offsets = self._config.countdown

        return {
            "detected": _format_time(now + timedelta(minutes=offsets.detected)),
            "window_closes": _format_time(now + timedelta(minutes=offsets.window_closes)),
            "exposure_lost": _format_time(now + timedelta(minutes=offsets.exposure_lost)),
            "minutes_remaining": self.minutes_remaining(state),
            "date": now.strftime("%Y.%m.%d") + " UTC",
        }

    def minutes_remaining(self, state: str) -> int:
        """Configured window length scaled down as the escalation advances."""
        window = self._config.countdown.window_closes
        factor = scenario_table.COUNTDOWN_SCALING.get(state, 1.0)
        minutes = math.floor(window * factor)
        floor = scenario_table.COUNTDOWN_MINIMUM_MINUTES.get(state)
        if floor is not None:
            minutes = max(floor, minutes)
        return minutes

    # ================================================================
    # Integrity
    # ================================================================

    def _validate_table(self, table: Dict[str, Dict[str, Any]]) -> None:
        """Reject a table that doesn't cover the configured vocabulary."""
        cfg = self._config
        problems: List[str] = []

        for scenario in cfg.valid_scenarios:
            entry = table.get(scenario)
            if entry is None:
                problems.append(f"{scenario}: missing from table")
                continue

            states = entry.get("states", {})
            for state in cfg.valid_states:
                view = states.get(state)
                if view is None:
                    problems.append(f"{scenario}/{state}: missing state view")
                    continue
                summary = view["summary"]
                if summary["risk_level"] not in cfg.risk_levels:
                    problems.append(f"{scenario}/{state}: bad risk_level {summary['risk_level']!r}")
                if summary["confidence"] not in cfg.confidence_levels:
                    problems.append(f"{scenario}/{state}: bad confidence {summary['confidence']!r}")
                for domain in summary["domains"]:
                    if domain not in cfg.domains:
                        problems.append(f"{scenario}/{state}: unknown summary domain {domain!r}")
                for domain in cfg.domains:
                    status = view["domains"].get(domain)
                    if status is None:
                        problems.append(f"{scenario}/{state}: missing domain {domain!r}")
                    elif status["status"] not in cfg.domain_statuses:
                        problems.append(f"{scenario}/{state}/{domain}: bad status {status['status']!r}")

            if len(entry.get("signals", [])) != SIGNALS_PER_SCENARIO:
                problems.append(f"{scenario}: expected {SIGNALS_PER_SCENARIO} signals")

        if problems:
            raise ZeroHourError(
                ErrorCode.CONFIG_INVALID,
                "Scenario table does not match catalog configuration",
                details={"problems": problems},
            )


def _format_day(moment: datetime) -> str:
    # D/MM/YYYY: day unpadded, month zero-padded
    return f"{moment.day}/{moment.month:02d}/{moment.year}"


def _format_time(moment: datetime) -> str:
    return moment.strftime("%H:%M")
