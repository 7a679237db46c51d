"""Pydantic models for the parent profile, child profiles and meal plans."""

from pydantic import BaseModel, ConfigDict, Field

from .analysis import AgeGroup


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class HealthCondition(_CamelModel):
    """A named health condition, allergy or dietary restriction."""

    id: str
    name: str


class ChildProfile(_CamelModel):
    """A child the parent analyzes products for."""

    id: str
    name: str
    age_group: AgeGroup = Field(..., alias="ageGroup")
    health_conditions: list[HealthCondition] = Field(
        default_factory=list, alias="healthConditions"
    )
    date_of_birth: str | None = Field(None, alias="dateOfBirth")


class ChildProfileCreate(_CamelModel):
    """Request model for adding or updating a child."""

    name: str = Field(..., min_length=1, max_length=100)
    age_group: AgeGroup = Field(..., alias="ageGroup")
    health_conditions: list[str] = Field(default_factory=list, alias="healthConditions")
    date_of_birth: str | None = Field(None, alias="dateOfBirth")


class UserProfile(_CamelModel):
    """The parent account with its children."""

    name: str
    email: str | None = None
    children: list[ChildProfile] = Field(default_factory=list)


class ActiveChild(_CamelModel):
    """Currently selected child for personalized analysis."""

    child_id: str | None = Field(None, alias="childId")


class NutritionalInfo(BaseModel):
    """Per-meal nutrition figures."""

    calories: float = Field(ge=0)
    protein: float = Field(ge=0)
    carbs: float = Field(ge=0)
    fat: float = Field(ge=0)


class Meal(_CamelModel):
    """One meal slot in a plan."""

    time: str
    name: str
    description: str = ""
    ingredients: list[str] | None = None
    nutritional_info: NutritionalInfo | None = Field(None, alias="nutritionalInfo")


class MealPlanCreate(_CamelModel):
    """Request model for creating a meal plan."""

    name: str = Field(..., min_length=1, max_length=100)
    description: str = ""
    meals: list[Meal] = Field(default_factory=list)
    target_age_group: AgeGroup = Field(..., alias="targetAgeGroup")
    health_conditions: list[HealthCondition] = Field(
        default_factory=list, alias="healthConditions"
    )


class MealPlan(MealPlanCreate):
    """A stored meal plan."""

    id: str
    created_at: int = Field(..., alias="createdAt", description="Epoch milliseconds")
