"""Unit tests for MealPlanService."""

import pytest

from childfood_api.core.exceptions import NotFoundError
from childfood_api.models.analysis import AgeGroup
from childfood_api.models.profile import MealPlanCreate
from childfood_api.services.meal_plans import MealPlanService


@pytest.fixture
def service(memory_store) -> MealPlanService:
    return MealPlanService(memory_store)


def _plan(name="Weekday", age_group="0-2", meals=None) -> MealPlanCreate:
    return MealPlanCreate.model_validate(
        {
            "name": name,
            "description": " Simple meals ",
            "targetAgeGroup": age_group,
            "meals": meals
            if meals is not None
            else [
                {
                    "time": "08:00",
                    "name": "Oatmeal",
                    "ingredients": ["oats", "banana"],
                    "nutritionalInfo": {"calories": 150, "protein": 4, "carbs": 27, "fat": 3},
                },
                {"time": "", "name": "Snack"},
                {"time": "12:00", "name": "  "},
            ],
        }
    )


class TestMealPlanService:
    """Tests for MealPlanService."""

    @pytest.mark.asyncio
    async def test_add_plan_drops_incomplete_meals(self, service):
        plan = await service.add_plan(_plan())

        assert plan.id
        assert plan.created_at > 0
        assert plan.description == "Simple meals"
        assert [m.name for m in plan.meals] == ["Oatmeal"]
        assert plan.meals[0].nutritional_info.calories == 150

    @pytest.mark.asyncio
    async def test_list_filtered_by_age_group(self, service):
        await service.add_plan(_plan("Infant", "0-2"))
        await service.add_plan(_plan("Preschool", "3-6"))

        all_plans = await service.list_plans()
        preschool = await service.list_plans(AgeGroup.PRESCHOOLER)

        assert [p.name for p in all_plans] == ["Infant", "Preschool"]
        assert [p.name for p in preschool] == ["Preschool"]

    @pytest.mark.asyncio
    async def test_update_keeps_id_and_creation_time(self, service):
        plan = await service.add_plan(_plan())

        updated = await service.update_plan(plan.id, _plan("Weekend", meals=[]))

        assert updated.id == plan.id
        assert updated.created_at == plan.created_at
        assert updated.name == "Weekend"
        assert (await service.list_plans())[0].name == "Weekend"

    @pytest.mark.asyncio
    async def test_remove_plan(self, service):
        plan = await service.add_plan(_plan())

        await service.remove_plan(plan.id)

        assert await service.list_plans() == []

    @pytest.mark.asyncio
    async def test_unknown_plan(self, service):
        with pytest.raises(NotFoundError):
            await service.update_plan("missing", _plan())
        with pytest.raises(NotFoundError):
            await service.remove_plan("missing")
