"""API routers package."""

from fitassess.routers import athletes, dashboard, plans, results, sports

__all__ = ["athletes", "dashboard", "plans", "results", "sports"]
