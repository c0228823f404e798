"""
API Routers
"""

from . import accounts, settings, reports

__all__ = ["accounts", "settings", "reports"]
