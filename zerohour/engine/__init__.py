# ============================================================================
# zerohour/engine/__init__.py
# ============================================================================
#
# PURPOSE:
# The state engine: sole owner of the current (scenario, state) pair.
#
