# ============================================================================
# zerohour/catalog/__init__.py
# ============================================================================
#
# PURPOSE:
# Read-only scenario catalog.
#
# WHAT'S IN THIS MODULE:
# - models.py: frozen dataclasses for scenario definitions and state views
# - scenarios.py: the declarative scenario table (data only, no logic)
# - service.py: projections from (scenario, state) to dashboard views
#
