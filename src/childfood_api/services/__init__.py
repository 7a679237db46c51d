"""Business logic services."""

from .history import HistoryService
from .meal_plans import MealPlanService
from .profiles import ProfileService
from .report import ReportRenderer, report_filename

__all__ = [
    "HistoryService",
    "MealPlanService",
    "ProfileService",
    "ReportRenderer",
    "report_filename",
]
