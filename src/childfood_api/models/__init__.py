"""Pydantic models for request/response schemas."""

from .analysis import (
    AgeGroup,
    Alternative,
    AlternativeRating,
    AnalysisOutcome,
    AnalysisRequest,
    AnalysisResult,
    AnalysisSource,
    ComparisonRow,
    ComparisonSuitability,
    IngredientAssessment,
    IngredientSafety,
    SpecialWarning,
    Suitability,
)
from .history import (
    AnalysisHistoryResponse,
    AnalysisRecord,
    SaveAnalysisRequest,
    SaveAnalysisResponse,
)
from .profile import (
    ActiveChild,
    ChildProfile,
    ChildProfileCreate,
    HealthCondition,
    Meal,
    MealPlan,
    MealPlanCreate,
    NutritionalInfo,
    UserProfile,
)

__all__ = [
    # Analysis
    "AgeGroup",
    "Alternative",
    "AlternativeRating",
    "AnalysisOutcome",
    "AnalysisRequest",
    "AnalysisResult",
    "AnalysisSource",
    "ComparisonRow",
    "ComparisonSuitability",
    "IngredientAssessment",
    "IngredientSafety",
    "SpecialWarning",
    "Suitability",
    # History
    "AnalysisHistoryResponse",
    "AnalysisRecord",
    "SaveAnalysisRequest",
    "SaveAnalysisResponse",
    # Profiles & meal plans
    "ActiveChild",
    "ChildProfile",
    "ChildProfileCreate",
    "HealthCondition",
    "Meal",
    "MealPlan",
    "MealPlanCreate",
    "NutritionalInfo",
    "UserProfile",
]
