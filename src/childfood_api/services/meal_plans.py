"""Meal plan service."""

import time
from uuid import uuid4

from childfood_api.core.exceptions import NotFoundError
from childfood_api.db.ports import KeyValueStore
from childfood_api.models.analysis import AgeGroup
from childfood_api.models.profile import Meal, MealPlan, MealPlanCreate

MEAL_PLANS_KEY = "mealPlans"


def _complete_meals(data: MealPlanCreate) -> list[Meal]:
    return [m for m in data.meals if m.name.strip() and m.time.strip()]


class MealPlanService:
    """Stores meal plans as one list under a single key."""

    def __init__(self, store: KeyValueStore):
        self.store = store

    async def _load(self) -> list[MealPlan]:
        data = await self.store.get(MEAL_PLANS_KEY, default=[])
        return [MealPlan.model_validate(item) for item in data]

    async def _save(self, plans: list[MealPlan]) -> None:
        await self.store.set(
            MEAL_PLANS_KEY,
            [plan.model_dump(mode="json", by_alias=True) for plan in plans],
        )

    async def list_plans(self, age_group: AgeGroup | None = None) -> list[MealPlan]:
        """List plans in creation order, optionally for one age group."""
        plans = await self._load()
        if age_group is not None:
            plans = [p for p in plans if p.target_age_group == age_group]
        return plans

    async def add_plan(self, data: MealPlanCreate) -> MealPlan:
        """Create a plan. Meals without a name or time are dropped."""
        plan = MealPlan(
            id=uuid4().hex[:12],
            name=data.name.strip(),
            description=data.description.strip(),
            meals=_complete_meals(data),
            target_age_group=data.target_age_group,
            health_conditions=data.health_conditions,
            created_at=int(time.time() * 1000),
        )
        plans = await self._load()
        plans.append(plan)
        await self._save(plans)
        return plan

    async def update_plan(self, plan_id: str, data: MealPlanCreate) -> MealPlan:
        """
        Replace a plan's contents, keeping its id and creation time.

        Raises:
            NotFoundError: If the plan does not exist
        """
        plans = await self._load()
        for index, existing in enumerate(plans):
            if existing.id != plan_id:
                continue
            updated = MealPlan(
                id=existing.id,
                created_at=existing.created_at,
                **data.model_dump(exclude={"meals"}),
                meals=_complete_meals(data),
            )
            plans[index] = updated
            await self._save(plans)
            return updated
        raise NotFoundError("Meal plan", plan_id)

    async def remove_plan(self, plan_id: str) -> None:
        """
        Delete a plan.

        Raises:
            NotFoundError: If the plan does not exist
        """
        plans = await self._load()
        remaining = [p for p in plans if p.id != plan_id]
        if len(remaining) == len(plans):
            raise NotFoundError("Meal plan", plan_id)
        await self._save(remaining)
