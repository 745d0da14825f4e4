from __future__ import annotations

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from zerohour.errors import ZeroHourError, ErrorCode
from zerohour.server.state import ApplicationState, get_state

router = APIRouter(prefix="/exposure", tags=["exposure"])


def _require(view: Optional[Dict[str, Any]], scenario: str) -> Dict[str, Any]:
    if view is None:
        raise ZeroHourError(
            ErrorCode.SCENARIO_DATA_NOT_FOUND,
            "Scenario data not found",
            details={"scenario": scenario},
        )
    return view


@router.get("/summary")
def exposure_summary(app_state: ApplicationState = Depends(get_state)) -> Dict[str, Any]:
    """Schema: { risk_level, confidence, domains, summary }"""
    current = app_state.engine.get_current()
    view = app_state.catalog.get_exposure_summary(current["scenario"], current["state"])
    return _require(view, current["scenario"])


@router.get("/domains")
def exposure_domains(app_state: ApplicationState = Depends(get_state)) -> Dict[str, Any]:
    """Schema: { legal, cyber, reputational, third_party }, each { status, note }"""
    current = app_state.engine.get_current()
    view = app_state.catalog.get_exposure_domains(current["scenario"], current["state"])
    return _require(view, current["scenario"])


@router.get("/timeline")
def exposure_timeline(app_state: ApplicationState = Depends(get_state)) -> Dict[str, Any]:
    """Schema: { past, present, next } (state names only)"""
    current = app_state.engine.get_current()
    view = app_state.catalog.get_exposure_timeline(current["scenario"], current["state"])
    return _require(view, current["scenario"])


@router.get("/signals")
def exposure_signals(app_state: ApplicationState = Depends(get_state)) -> List[Dict[str, Any]]:
    current = app_state.engine.get_current()
    return app_state.catalog.get_observed_signals(current["scenario"], current["state"])
