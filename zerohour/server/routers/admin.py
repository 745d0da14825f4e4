from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends

from zerohour.engine.state_engine import TransitionResult
from zerohour.errors import ZeroHourError, ErrorCode
from zerohour.server.routers.auth import verify_admin_token
from zerohour.server.state import ApplicationState, get_state
from zerohour.server.validators import (
    SetScenarioRequest,
    SetStateRequest,
    validate_set_scenario_request,
    validate_state,
)

logger = logging.getLogger(__name__)

# Every admin route requires the bearer token
router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(verify_admin_token)])


def _raise_if_failed(result: TransitionResult, code: ErrorCode) -> None:
    # Validators run first, so this only trips if config and validators disagree.
    if not result.success:
        raise ZeroHourError(code, result.error or "Transition rejected")


@router.post("/setScenario")
def set_scenario(
    body: Optional[SetScenarioRequest] = Body(default=None),
    app_state: ApplicationState = Depends(get_state),
) -> Dict[str, Any]:
    """Activate a scenario, optionally jumping straight to a state."""
    request = validate_set_scenario_request(body or SetScenarioRequest(), app_state.config.catalog)

    result = app_state.engine.set_scenario(request.scenario, request.state)
    _raise_if_failed(result, ErrorCode.SCENARIO_INVALID)

    state = request.state or app_state.config.catalog.default_state
    return {
        "success": True,
        "message": f"Scenario set to '{request.scenario}', state set to '{state}'",
        "previous": result.previous,
        "current": result.current,
    }


@router.post("/setState")
def set_state(
    body: Optional[SetStateRequest] = Body(default=None),
    app_state: ApplicationState = Depends(get_state),
) -> Dict[str, Any]:
    """Set only the escalation state; the scenario is kept."""
    request = body or SetStateRequest()
    state = validate_state(request.state, app_state.config.catalog, required=True)

    result = app_state.engine.set_state(state)
    _raise_if_failed(result, ErrorCode.STATE_INVALID)

    return {
        "success": True,
        "message": f"State set to '{state}'",
        "previous": result.previous,
        "current": result.current,
    }


@router.post("/reset")
def reset(app_state: ApplicationState = Depends(get_state)) -> Dict[str, Any]:
    """Back to the default scenario and state."""
    result = app_state.engine.reset()
    return {
        "success": True,
        "message": "Reset to default state",
        "previous": result.previous,
        "current": result.current,
    }
