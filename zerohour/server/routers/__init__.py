"""
Router initialization module.

Exports all API routers for the ZeroHour backend.
"""
from zerohour.server.routers import admin, auth, exposure, scenario, system, target

__all__ = [
    "admin",
    "auth",
    "exposure",
    "scenario",
    "system",
    "target",
]
