# ============================================================================
# zerohour/__init__.py
# Package Marker for the ZeroHour Demo Backend
# ============================================================================
#
# PURPOSE:
# Top-level package for the exposure-risk dashboard demo.
#
# LAYOUT:
# - base/: configuration and logging setup
# - engine/: the state engine (current scenario + escalation state)
# - catalog/: static scenario table and the projections built from it
# - server/: FastAPI app, routers, auth and request validation
#
# ============================================================================

__version__ = "1.0.0"
