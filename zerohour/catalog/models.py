"""
Scenario catalog data model.

Frozen dataclasses built once from the declarative table in
zerohour.catalog.scenarios. Mappings are wrapped in MappingProxyType so the
catalog can be shared across request threads without locking.
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple


@dataclass(frozen=True)
class DomainStatus:
    status: str
    note: str

    def to_dict(self) -> Dict[str, str]:
        return {"status": self.status, "note": self.note}


@dataclass(frozen=True)
class ExposureSummary:
    risk_level: str
    confidence: str
    domains: Tuple[str, ...]
    summary_text: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "risk_level": self.risk_level,
            "confidence": self.confidence,
            "domains": list(self.domains),
            "summary": self.summary_text,
        }


@dataclass(frozen=True)
class StateView:
    """What the dashboard shows for one scenario in one escalation state."""
    summary: ExposureSummary
    domains: Mapping[str, DomainStatus]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StateView":
        summary = data["summary"]
        return cls(
            summary=ExposureSummary(
                risk_level=summary["risk_level"],
                confidence=summary["confidence"],
                domains=tuple(summary["domains"]),
                summary_text=summary["summary"],
            ),
            domains=MappingProxyType({
                name: DomainStatus(status=entry["status"], note=entry["note"])
                for name, entry in data["domains"].items()
            }),
        )


@dataclass(frozen=True)
class SignalTemplate:
    category: str
    title: str
    description: str


@dataclass(frozen=True)
class ScenarioDefinition:
    id: str
    name: str
    description: str
    states: Mapping[str, StateView]
    signals: Tuple[SignalTemplate, ...]

    @classmethod
    def from_dict(cls, scenario_id: str, data: Dict[str, Any]) -> "ScenarioDefinition":
        return cls(
            id=scenario_id,
            name=data["name"],
            description=data["description"],
            states=MappingProxyType({
                state: StateView.from_dict(view) for state, view in data["states"].items()
            }),
            signals=tuple(SignalTemplate(**signal) for signal in data["signals"]),
        )

    def describe(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name, "description": self.description}
