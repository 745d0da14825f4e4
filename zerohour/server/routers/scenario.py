from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from zerohour.server.state import ApplicationState, get_state

router = APIRouter(prefix="/scenario", tags=["scenario"])


@router.get("/current")
def current_scenario(app_state: ApplicationState = Depends(get_state)) -> Dict[str, Any]:
    """Active scenario and state, with the full escalation progression."""
    current = app_state.engine.get_current()
    current["progression"] = app_state.engine.get_state_progression()
    return current


@router.get("/list")
def list_scenarios(app_state: ApplicationState = Depends(get_state)) -> Dict[str, Any]:
    catalog = app_state.catalog
    return {
        "scenarios": catalog.get_all_scenarios(),
        "states": catalog.get_all_states(),
        "details": catalog.describe_scenarios(),
    }
