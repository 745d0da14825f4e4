from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends

from zerohour.server.state import ApplicationState, get_state

router = APIRouter(prefix="/target", tags=["target"])


@router.get("/current")
def target_entity(app_state: ApplicationState = Depends(get_state)) -> Dict[str, str]:
    return app_state.catalog.get_target_entity()


@router.get("/countdown")
def countdown(app_state: ApplicationState = Depends(get_state)) -> Dict[str, Any]:
    """Countdown panel for the active scenario; recomputed on every call."""
    current = app_state.engine.get_current()
    return app_state.catalog.get_countdown_data(current["scenario"], current["state"])
