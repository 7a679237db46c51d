"""Meal plan API routes."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from childfood_api.api.dependencies import MealPlanServiceDep
from childfood_api.models.analysis import AgeGroup
from childfood_api.models.profile import MealPlan, MealPlanCreate

router = APIRouter()


@router.get("", response_model=list[MealPlan])
async def list_meal_plans(
    service: MealPlanServiceDep,
    age_group: Annotated[AgeGroup | None, Query(alias="ageGroup")] = None,
):
    """
    List meal plans.

    - **ageGroup**: Only plans targeting this age group
    """
    return await service.list_plans(age_group)


@router.post("", response_model=MealPlan, status_code=status.HTTP_201_CREATED)
async def create_meal_plan(plan: MealPlanCreate, service: MealPlanServiceDep):
    """Create a meal plan. Meals missing a name or time are dropped."""
    return await service.add_plan(plan)


@router.put("/{plan_id}", response_model=MealPlan)
async def update_meal_plan(
    plan_id: str,
    plan: MealPlanCreate,
    service: MealPlanServiceDep,
):
    """Replace a meal plan's contents."""
    return await service.update_plan(plan_id, plan)


@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal_plan(plan_id: str, service: MealPlanServiceDep):
    """Delete a meal plan."""
    await service.remove_plan(plan_id)
