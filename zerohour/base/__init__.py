# ============================================================================
# zerohour/base/__init__.py
# ============================================================================
#
# PURPOSE:
# Foundational pieces everything else reads from.
#
# WHAT'S IN THIS MODULE:
# - config.py: catalog vocabulary, admin token, server address, logging setup
#
