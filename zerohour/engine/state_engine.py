# zerohour/engine/state_engine.py
"""
STATE ENGINE: Single Source of Truth for the Active Scenario

Owns the one mutable record in the backend: which scenario is active, which
escalation state it is in, and when that last changed. Nothing else writes
it; routers read snapshots and ask for transitions.

RULES:
1. Only configured scenario/state names can become active.
2. Switching scenario always restarts the escalation at the default state.
3. States may be set in any order (operators jump forward and back freely).
4. Invalid requests are reported in the result, never raised, and leave
   the record untouched.

USAGE:
    from zerohour.engine.state_engine import StateEngine

    engine = StateEngine(config.catalog)
    result = engine.set_scenario("legal_escalation_pre_filing")
    if not result.success:
        print(result.error)
    engine.set_state("escalation_imminent")
    engine.get_current()["stateIndex"]  # 3
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Deque, Dict, List, Optional

from zerohour.base.config import CatalogConfig

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC with milliseconds and a Z suffix."""
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# ============================================================================
# Result and Transition Records
# ============================================================================

@dataclass(frozen=True)
class TransitionResult:
    """
    Outcome of set_scenario / set_state.

    Callers must check `success` before trusting previous/current.
    """
    success: bool
    previous: Optional[Dict[str, Any]] = None
    current: Optional[Dict[str, Any]] = None
    error: Optional[str] = None

    @classmethod
    def failed(cls, error: str) -> "TransitionResult":
        return cls(success=False, error=error)

    def to_dict(self) -> Dict[str, Any]:
        if not self.success:
            return {"success": False, "error": self.error}
        return {"success": True, "previous": self.previous, "current": self.current}


@dataclass(frozen=True)
class Transition:
    """Immutable record of one applied change."""
    from_scenario: str
    from_state: str
    to_scenario: str
    to_state: str
    reason: str
    timestamp: datetime = field(default_factory=utc_now)


# ============================================================================
# State Engine
# ============================================================================

class StateEngine:
    """
    The authoritative holder of the current (scenario, state) pair.

    Invariants:
    - scenario is always in config.valid_scenarios
    - state is always in config.valid_states
    - a failed transition changes nothing, including last_updated

    Thread Safety:
    - FastAPI runs sync endpoints in a thread pool, so every read and
      mutation goes through one RLock
    """

    HISTORY_LIMIT = 100

    def __init__(self, config: CatalogConfig, clock: Optional[Clock] = None):
        self._config = config
        self._clock = clock or utc_now
        self._lock = threading.RLock()

        self._scenario: str = config.default_scenario
        self._state: str = config.default_state
        self._last_updated: datetime = self._clock()

        self._transitions: Deque[Transition] = deque(maxlen=self.HISTORY_LIMIT)

    # ================================================================
    # Query Methods
    # ================================================================

    @property
    def scenario(self) -> str:
        with self._lock:
            return self._scenario

    @property
    def state(self) -> str:
        with self._lock:
            return self._state

    @property
    def last_updated(self) -> datetime:
        with self._lock:
            return self._last_updated

    def get_current(self) -> Dict[str, Any]:
        """Snapshot of the active pair with its position in the escalation."""
        with self._lock:
            return {
                "scenario": self._scenario,
                "state": self._state,
                "stateIndex": self._config.state_index(self._state),
                "totalStates": len(self._config.valid_states),
                "timestamp": format_timestamp(self._last_updated),
            }

    def get_state_progression(self) -> List[Dict[str, Any]]:
        """Every state in escalation order, with the active one marked."""
        with self._lock:
            current = self._state
        return [
            {"name": name, "isCurrent": name == current, "index": index}
            for index, name in enumerate(self._config.valid_states)
        ]

    def get_transitions(self) -> List[Transition]:
        """Recent transition history, oldest first."""
        with self._lock:
            return list(self._transitions)

    # ================================================================
    # Mutation Methods
    # ================================================================

    def set_scenario(self, scenario: str, state: Optional[str] = None) -> TransitionResult:
        """
        Activate a scenario, restarting its escalation at the default state.

        If `state` is given it is validated up front and applied after the
        restart, so an invalid state leaves the old scenario in place.
        """
        if scenario not in self._config.valid_scenarios:
            logger.warning(f"[StateEngine] Rejected scenario: {scenario!r}")
            return TransitionResult.failed(self._invalid_scenario_message(scenario))
        if state is not None and state not in self._config.valid_states:
            logger.warning(f"[StateEngine] Rejected state: {state!r}")
            return TransitionResult.failed(self._invalid_state_message(state))

        with self._lock:
            previous = self.get_current()
            self._scenario = scenario
            self._state = self._config.default_state
            if state is not None:
                self._state = state
            self._touch(previous, reason=f"Scenario set to {scenario}")
            current = self.get_current()

        return TransitionResult(success=True, previous=previous, current=current)

    def set_state(self, state: str) -> TransitionResult:
        """Move the active scenario to any valid escalation state."""
        if state not in self._config.valid_states:
            logger.warning(f"[StateEngine] Rejected state: {state!r}")
            return TransitionResult.failed(self._invalid_state_message(state))

        with self._lock:
            previous = self.get_current()
            self._state = state
            self._touch(previous, reason=f"State set to {state}")
            current = self.get_current()

        return TransitionResult(success=True, previous=previous, current=current)

    def reset(self) -> TransitionResult:
        """Return to the default scenario and state. Always succeeds."""
        with self._lock:
            previous = self.get_current()
            self._scenario = self._config.default_scenario
            self._state = self._config.default_state
            self._touch(previous, reason="Reset to defaults")
            current = self.get_current()

        return TransitionResult(success=True, previous=previous, current=current)

    # ================================================================
    # Internal Methods
    # ================================================================

    def _touch(self, previous: Dict[str, Any], reason: str) -> None:
        # Caller holds the lock.
        self._last_updated = self._clock()
        self._transitions.append(
            Transition(
                from_scenario=previous["scenario"],
                from_state=previous["state"],
                to_scenario=self._scenario,
                to_state=self._state,
                reason=reason,
                timestamp=self._last_updated,
            )
        )
        logger.info(
            f"[StateEngine] {previous['scenario']}/{previous['state']} → "
            f"{self._scenario}/{self._state}: {reason}"
        )

    def _invalid_scenario_message(self, scenario: str) -> str:
        return (
            f"Invalid scenario: {scenario}. "
            f"Valid scenarios: {', '.join(self._config.valid_scenarios)}"
        )

    def _invalid_state_message(self, state: str) -> str:
        return f"Invalid state: {state}. Valid states: {', '.join(self._config.valid_states)}"
