"""API routes."""

from . import analysis, history, meal_plans, ocr, profiles, reports

__all__ = ["analysis", "history", "meal_plans", "ocr", "profiles", "reports"]
