"""Reporting API package."""

from reporting.api.routes import dashboard_router

__all__ = ["dashboard_router"]
