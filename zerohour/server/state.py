from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from fastapi import Request

from zerohour.base.config import ZeroHourConfig
from zerohour.catalog.service import ScenarioCatalog
from zerohour.engine.state_engine import StateEngine

logger = logging.getLogger(__name__)


@dataclass
class ApplicationState:
    """
    Everything a request handler may touch, built once per app.

    Routers receive it through the get_state dependency instead of
    importing module-level singletons, so tests can build isolated apps.
    """
    config: ZeroHourConfig
    engine: StateEngine
    catalog: ScenarioCatalog

    @classmethod
    def build(
        cls,
        config: ZeroHourConfig,
        engine: Optional[StateEngine] = None,
        catalog: Optional[ScenarioCatalog] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ) -> "ApplicationState":
        engine = engine or StateEngine(config.catalog, clock=clock)
        catalog = catalog or ScenarioCatalog(config.catalog, clock=clock)
        logger.info(
            "Application state initialized",
            extra={"scenario": engine.scenario, "state": engine.state},
        )
        return cls(config=config, engine=engine, catalog=catalog)


def get_state(request: Request) -> ApplicationState:
    return request.app.state.zerohour
