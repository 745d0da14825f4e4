# ============================================================================
# zerohour/server/__init__.py
# Server Package - FastAPI Web Server
# ============================================================================
#
# PURPOSE:
# The HTTP face of the demo. The dashboard frontend polls the read
# endpoints; an operator drives the demo through the /admin endpoints.
#
# KEY MODULES:
# - api.py: app factory, exception handlers, CORS, request logging
# - state.py: ApplicationState (engine + catalog) injected into routes
# - validators.py: admin request bodies and their checks
# - routers/: one module per URL prefix
#
# ============================================================================
