"""
Request body models and validation for the admin endpoints.

Bodies are parsed leniently by pydantic (every field optional) and then
checked here, so clients get the same plain-language messages whether a
field is missing or wrong.
"""
from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, Field

from zerohour.base.config import CatalogConfig
from zerohour.errors import ZeroHourError, ErrorCode

logger = logging.getLogger(__name__)


class SetScenarioRequest(BaseModel):
    scenario: Optional[str] = Field(default=None, max_length=128)
    state: Optional[str] = Field(default=None, max_length=128)


class SetStateRequest(BaseModel):
    state: Optional[str] = Field(default=None, max_length=128)


def validate_scenario(scenario: Optional[str], config: CatalogConfig) -> str:
    if not scenario:
        logger.warning("setScenario rejected: scenario missing")
        raise ZeroHourError(ErrorCode.REQUEST_INVALID, "Scenario is required.")

    if scenario not in config.valid_scenarios:
        logger.warning(f"setScenario rejected: unknown scenario {scenario!r}")
        raise ZeroHourError(
            ErrorCode.SCENARIO_INVALID,
            f"Invalid scenario: {scenario}. Valid options: {', '.join(config.valid_scenarios)}",
            details={"scenario": scenario},
        )
    return scenario


def validate_state(state: Optional[str], config: CatalogConfig, required: bool = False) -> Optional[str]:
    """An absent state is fine unless `required`; the engine then uses its default."""
    if not state:
        if required:
            logger.warning("setState rejected: state missing")
            raise ZeroHourError(ErrorCode.REQUEST_INVALID, "State is required.")
        return None

    if state not in config.valid_states:
        logger.warning(f"State rejected: unknown state {state!r}")
        raise ZeroHourError(
            ErrorCode.STATE_INVALID,
            f"Invalid state: {state}. Valid options: {', '.join(config.valid_states)}",
            details={"state": state},
        )
    return state


def validate_set_scenario_request(body: SetScenarioRequest, config: CatalogConfig) -> SetScenarioRequest:
    validate_scenario(body.scenario, config)
    validate_state(body.state, config)
    return body
