"""Unit tests for deterministic fallback results."""

import pytest

from childfood_api.models.analysis import AnalysisRequest, IngredientSafety, Suitability
from childfood_api.services.analysis import (
    build_general_fallback_result,
    build_missing_credentials_result,
)
from childfood_api.services.analysis.fallback import classify_product, find_known_ingredients


def _request(text: str, age_group: str = "0-2", conditions=None) -> AnalysisRequest:
    return AnalysisRequest.model_validate(
        {
            "ageGroup": age_group,
            "healthConditions": conditions or [],
            "extractedText": text,
        }
    )


class TestMissingCredentialsResult:
    """Tests for build_missing_credentials_result."""

    def test_content(self):
        result = build_missing_credentials_result()

        assert result.product_name == "API Key Required"
        assert result.product_category == "Setup Required"
        assert result.suitability == Suitability.MODERATE
        assert result.suitability_rating == 50
        assert any("GOOGLE_API_KEY" in r for r in result.recommendations)

    def test_constant(self):
        assert build_missing_credentials_result() == build_missing_credentials_result()


class TestClassifyProduct:
    """Tests for classify_product."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("Apple and oat cereal", ("Fruit Puree", "Baby Food")),
            ("Carrots, peas", ("Vegetable Mix", "Baby Food")),
            ("Whole grain OATS", ("Infant Cereal", "Baby Breakfast")),
            ("Infant formula powder", ("Dairy Product", "Baby Formula")),
            ("Greek yogurt", ("Dairy Snack", "Toddler Snack")),
            ("Teething biscuit", ("Whole Grain Biscuits", "Toddler Snack")),
            ("Mystery blend", ("Nutritious Food", "Children's Food")),
        ],
    )
    def test_rules(self, text, expected):
        assert classify_product(text) == expected


class TestFindKnownIngredients:
    """Tests for find_known_ingredients."""

    def test_catalogue_order_and_safety(self):
        found = find_known_ingredients("Banana puree, SUGAR, water")

        assert [i.name for i in found] == ["Water", "Banana", "Sugar"]
        banana = found[1]
        sugar = found[2]
        assert banana.safety == IngredientSafety.SAFE
        assert banana.concerns is None
        assert banana.description == "Rich in potassium and easily digestible carbohydrates"
        assert sugar.safety == IngredientSafety.CAUTION
        assert "under 2 years" in sugar.concerns

    def test_nothing_known(self):
        assert find_known_ingredients("Mystery blend") == []


class TestGeneralFallbackResult:
    """Tests for build_general_fallback_result."""

    def test_banana_with_sugar(self):
        result = build_general_fallback_result(_request("Banana puree, sugar, water"))

        assert result.product_name == "Fruit Puree"
        assert result.product_category == "Baby Food"
        assert result.suitability == Suitability.MODERATE
        assert result.suitability_rating == 65
        assert "Sugar" in [i.name for i in result.ingredients]
        assert result.comparison_table[0].free_from == "Not fully assessed"

    def test_without_caution_ingredients(self):
        result = build_general_fallback_result(_request("Apple, water, ascorbic acid"))

        assert all(i.safety == IngredientSafety.SAFE for i in result.ingredients)
        assert result.comparison_table[0].free_from == "May contain common additives"

    def test_unknown_ingredients_get_placeholder(self):
        result = build_general_fallback_result(
            _request("Mystery blend", age_group="3-6", conditions=["Eczema"])
        )

        assert len(result.ingredients) == 1
        placeholder = result.ingredients[0]
        assert placeholder.name == "Food Components"
        assert placeholder.safety == IngredientSafety.MODERATE
        assert placeholder.concerns.startswith("For 3-6s with Eczema")

    @pytest.mark.parametrize(
        "age_group,first_alternative",
        [
            ("0-2", "Plum Organics Stage 2 Baby Food"),
            ("3-6", "Annie's Organic Bunny Snacks"),
            ("7-10", "Kind Kids Bars"),
        ],
    )
    def test_alternatives_per_age_group(self, age_group, first_alternative):
        result = build_general_fallback_result(_request("Banana", age_group=age_group))

        assert len(result.alternatives) == 3
        assert result.alternatives[0].name == first_alternative
        assert len(result.recommendations) == 5

    def test_warning_and_comparison(self):
        result = build_general_fallback_result(_request("Carrot", age_group="7-10"))

        assert result.special_warnings[0].title == "Food Safety Notice for 7-10 Year Olds"
        assert [row.product for row in result.comparison_table] == [
            "Vegetable Mix",
            "Gerber Organic",
            "Homemade Baby Food",
        ]

    def test_deterministic(self):
        request = _request("Oats, milk, salt", conditions=["Lactose Intolerance"])

        assert build_general_fallback_result(request) == build_general_fallback_result(request)
