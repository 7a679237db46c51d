"""
Deterministic fallback results.

Used whenever the model cannot be called or its answer is unusable. Nothing
here does I/O or depends on time or randomness, so the same input always
yields the same result.
"""

from dataclasses import dataclass

from childfood_api.models.analysis import (
    AgeGroup,
    Alternative,
    AnalysisRequest,
    AnalysisResult,
    ComparisonRow,
    IngredientAssessment,
    IngredientSafety,
    SpecialWarning,
    Suitability,
)

GENERAL_FAILURE_RATING = 65
MISSING_CREDENTIALS_RATING = 50


# =============================================================================
# Keyword tables
# =============================================================================


@dataclass(frozen=True)
class ProductRule:
    """Maps any of `keywords` to a product type and category."""

    keywords: tuple[str, ...]
    product_type: str
    category: str


# Evaluated in order; first match wins
PRODUCT_RULES = (
    ProductRule(("fruit", "apple", "banana"), "Fruit Puree", "Baby Food"),
    ProductRule(("veget", "carrot", "pea"), "Vegetable Mix", "Baby Food"),
    ProductRule(("cereal", "grain", "oat"), "Infant Cereal", "Baby Breakfast"),
    ProductRule(("milk", "formula"), "Dairy Product", "Baby Formula"),
    ProductRule(("yogurt", "cheese"), "Dairy Snack", "Toddler Snack"),
    ProductRule(("biscuit", "cracker"), "Whole Grain Biscuits", "Toddler Snack"),
)

DEFAULT_PRODUCT_TYPE = "Nutritious Food"
DEFAULT_CATEGORY = "Children's Food"


@dataclass(frozen=True)
class KnownIngredient:
    """Catalogue entry for a common ingredient."""

    name: str
    keywords: tuple[str, ...]
    safety: IngredientSafety
    description: str
    concerns: str | None = None


INGREDIENT_CATALOGUE = (
    KnownIngredient(
        "Water", ("water",), IngredientSafety.SAFE,
        "Base ingredient used for consistency",
    ),
    KnownIngredient(
        "Apple", ("apple",), IngredientSafety.SAFE,
        "Natural source of fiber and vitamins",
    ),
    KnownIngredient(
        "Banana", ("banana",), IngredientSafety.SAFE,
        "Rich in potassium and easily digestible carbohydrates",
    ),
    KnownIngredient(
        "Pear", ("pear",), IngredientSafety.SAFE,
        "Gentle fruit that's easily digestible for babies",
    ),
    KnownIngredient(
        "Carrot", ("carrot",), IngredientSafety.SAFE,
        "Excellent source of beta-carotene and vitamin A",
    ),
    KnownIngredient(
        "Sweet Potato", ("sweet potato", "sweetpotato"), IngredientSafety.SAFE,
        "Nutritious root vegetable with vitamin A and fiber",
    ),
    KnownIngredient(
        "Rice", ("rice",), IngredientSafety.SAFE,
        "Easily digestible grain, common in first solid foods",
    ),
    KnownIngredient(
        "Oats", ("oat",), IngredientSafety.SAFE,
        "Whole grain providing fiber and nutrients",
    ),
    KnownIngredient(
        "Wheat", ("wheat",), IngredientSafety.MODERATE,
        "Whole grain with protein and fiber, potential allergen",
        "Potential allergen, introduce gradually with pediatrician guidance",
    ),
    KnownIngredient(
        "Milk", ("milk",), IngredientSafety.MODERATE,
        "Source of calcium and protein, potential allergen",
        "Common allergen, only appropriate after 12 months unless in formula",
    ),
    KnownIngredient(
        "Sugar", ("sugar",), IngredientSafety.CAUTION,
        "Added sweetener with no nutritional benefits",
        "Not recommended for children under 2 years; can develop sweet "
        "preferences and contribute to tooth decay",
    ),
    KnownIngredient(
        "Salt", ("salt",), IngredientSafety.CAUTION,
        "Added sodium not recommended for young children",
        "Not recommended for children under 1 year; kidney function still developing",
    ),
    KnownIngredient(
        "Corn Syrup", ("corn syrup",), IngredientSafety.CAUTION,
        "Added sweetener with no nutritional benefits",
        "Added sugar with no nutritional value, may contribute to sweet preferences",
    ),
    KnownIngredient(
        "Natural Flavors", ("natural flavor",), IngredientSafety.MODERATE,
        "Undefined flavor enhancers",
        "Undefined ingredients that may mask additives",
    ),
    KnownIngredient(
        "Ascorbic Acid", ("ascorbic acid",), IngredientSafety.SAFE,
        "Vitamin C, acts as a natural preservative",
    ),
    KnownIngredient(
        "Citric Acid", ("citric acid",), IngredientSafety.SAFE,
        "Natural preservative from citrus fruits",
    ),
    KnownIngredient(
        "Lemon Juice", ("lemon juice",), IngredientSafety.SAFE,
        "Natural flavoring and preservative",
    ),
)

DEFAULT_CONCERN = "Consult your pediatrician"


# =============================================================================
# Age-specific content
# =============================================================================


@dataclass(frozen=True)
class AgeGuidance:
    """Alternatives and recommendations for one age bracket."""

    alternatives: tuple[tuple[str, str, str, tuple[str, ...]], ...]
    recommendations: tuple[str, ...]
    needs: str


AGE_GUIDANCE = {
    AgeGroup.INFANT_TODDLER: AgeGuidance(
        alternatives=(
            (
                "Plum Organics Stage 2 Baby Food",
                "Simple organic ingredients perfect for infants and young toddlers",
                "Excellent",
                ("No added sugar or salt", "USDA Organic certified", "Transparent ingredients"),
            ),
            (
                "Beech-Nut Naturals Baby Food",
                "Made with whole ingredients, minimal processing",
                "Very Good",
                ("No artificial preservatives", "Honeypot jars for easy serving",
                 "Naturally sweet from fruits"),
            ),
            (
                "Happy Baby Clearly Crafted",
                "Transparent pouches with organic ingredients",
                "Good",
                ("See-through packaging", "USDA Organic", "Baby-friendly textures"),
            ),
        ),
        recommendations=(
            "For infants and young toddlers, focus on simple, single-ingredient foods "
            "before introducing more complex combinations",
            "Avoid added salt, sugar, and artificial preservatives in foods for children under 2 years",
            "Serve appropriate textures - pureed for 4-6 months, mashed for 6-9 months, "
            "soft pieces for 9+ months",
            "Monitor for allergic reactions; wait 3-5 days between introducing new foods",
            "Consult your pediatrician before introducing potential allergens like dairy, eggs, or nuts",
        ),
        needs="Their digestive and immune systems are still developing.",
    ),
    AgeGroup.PRESCHOOLER: AgeGuidance(
        alternatives=(
            (
                "Annie's Organic Bunny Snacks",
                "Wholesome snacks made with organic wheat and minimal ingredients",
                "Excellent",
                ("No artificial flavors or preservatives", "Portion-controlled packages",
                 "Kid-friendly shapes"),
            ),
            (
                "GoGo squeeZ Organic Applesauce",
                "Portable fruit snacks with no added sugar",
                "Very Good",
                ("100% fruit", "Convenient pouches", "USDA Organic"),
            ),
            (
                "Made Good Granola Bars",
                "Allergen-free snack bars with hidden vegetable nutrients",
                "Good",
                ("Free from top allergens", "Contains vegetable nutrients",
                 "Appropriate portion size"),
            ),
        ),
        recommendations=(
            "For preschoolers (3-6 years), focus on balanced nutrition with growing "
            "independence in food choices",
            "Limit added sugars to less than 25g per day and prioritize whole food snacks",
            "Serve appropriate portions - generally 1 tablespoon of each food group per year of age",
            "Encourage self-feeding and exploration of different food textures and flavors",
            "Consider calcium-rich foods and vitamin D for developing bones and teeth",
        ),
        needs="They need nutrient-dense foods to support rapid growth and development.",
    ),
    AgeGroup.SCHOOL_AGE: AgeGuidance(
        alternatives=(
            (
                "Kind Kids Bars",
                "Whole grain bars with lower sugar content",
                "Excellent",
                ("5g or less of sugar", "Good source of fiber", "No artificial flavors"),
            ),
            (
                "Pirate's Booty Aged White Cheddar",
                "Baked corn puffs with real cheese and no artificial ingredients",
                "Very Good",
                ("Gluten-free", "No artificial flavors", "Lower fat than fried alternatives"),
            ),
            (
                "RX Kids Protein Snack Bars",
                "Protein-rich snack with simple ingredients",
                "Good",
                ("No added sugar", "5g protein per bar", "Clean ingredient list"),
            ),
        ),
        recommendations=(
            "For school-age children (7-10 years), focus on nutrient-dense foods to "
            "support growth and activity",
            "Aim for a variety of whole foods including fruits, vegetables, whole grains, "
            "lean proteins, and dairy",
            "Watch portion sizes and encourage mindful eating habits as independence grows",
            "Include sources of iron, calcium, and vitamin D to support rapid growth phases",
            "Help build healthy habits by involving children in meal planning and preparation",
        ),
        needs="They require balanced nutrition to support growth, activity, and cognitive development.",
    ),
}

GENERIC_GUIDANCE = AgeGuidance(
    alternatives=(
        (
            "Gerber Organic Baby Food",
            "Simple ingredients with organic certification",
            "Excellent",
            ("No artificial additives", "USDA Organic certified",
             "Available in various stages for different ages"),
        ),
        (
            "Happy Baby Organic",
            "Transparent ingredient sourcing with minimal processing",
            "Very Good",
            ("Organic ingredients", "No added sugars",
             "Stage-based options for developmental needs"),
        ),
        (
            "Earth's Best Organic",
            "Wholesome organic options for growing children",
            "Good",
            ("No artificial flavors or colors", "Non-GMO ingredients",
             "Age-appropriate nutritional content"),
        ),
    ),
    recommendations=(
        "Always read full ingredient labels when purchasing foods for young children",
        "For children under 2, choose foods with no added salt or sugar",
        "Introduce potential allergenic foods one at a time with pediatrician guidance",
        "Consider making simple homemade foods to control ingredients when possible",
        "Keep a food diary to track any reactions when introducing new foods to "
        "children with sensitivities",
    ),
    needs="They require balanced nutrition to support growth, activity, and cognitive development.",
)


# =============================================================================
# Heuristics
# =============================================================================


def classify_product(text: str) -> tuple[str, str]:
    """Return (product type, category) for ingredient text."""
    lowered = text.lower()
    for rule in PRODUCT_RULES:
        if any(keyword in lowered for keyword in rule.keywords):
            return rule.product_type, rule.category
    return DEFAULT_PRODUCT_TYPE, DEFAULT_CATEGORY


def find_known_ingredients(text: str) -> list[IngredientAssessment]:
    """Catalogue ingredients mentioned in the text, in catalogue order."""
    lowered = text.lower()
    found = []
    for entry in INGREDIENT_CATALOGUE:
        if not any(keyword in lowered for keyword in entry.keywords):
            continue
        concerns = None
        if entry.safety != IngredientSafety.SAFE:
            concerns = entry.concerns or DEFAULT_CONCERN
        found.append(
            IngredientAssessment(
                name=entry.name,
                description=entry.description,
                safety=entry.safety,
                concerns=concerns,
            )
        )
    return found


def _age_label(age_group: AgeGroup | str) -> str:
    return age_group.value if isinstance(age_group, AgeGroup) else str(age_group)


def _placeholder_ingredient(age_group: str, conditions: list[str]) -> IngredientAssessment:
    return IngredientAssessment(
        name="Food Components",
        description="Nutritional elements suitable for young children",
        safety=IngredientSafety.MODERATE,
        concerns=(
            f"For {age_group}s with {', '.join(conditions)}, consult with your "
            "pediatrician before introducing new foods."
        ),
    )


def _alternatives(guidance: AgeGuidance) -> list[Alternative]:
    return [
        Alternative(name=name, description=description, rating=rating, benefits=list(benefits))
        for name, description, rating, benefits in guidance.alternatives
    ]


# =============================================================================
# Results
# =============================================================================


def build_missing_credentials_result() -> AnalysisResult:
    """
    Constant result explaining that the model credential is missing.

    Returned as ordinary-looking product content so existing clients show
    the setup steps without a separate error path.
    """
    return AnalysisResult(
        product_name="API Key Required",
        product_category="Setup Required",
        suitability=Suitability.MODERATE,
        suitability_rating=MISSING_CREDENTIALS_RATING,
        ingredients=[
            IngredientAssessment(
                name="Google AI API Key Required",
                description="Missing API credentials for AI analysis",
                safety=IngredientSafety.MODERATE,
                concerns=(
                    "To analyze product ingredients, you need to add a Google Gemini "
                    "API key to the application."
                ),
            )
        ],
        special_warnings=[
            SpecialWarning(
                title="Missing API Key",
                description=(
                    "This application requires a Google Gemini API key to analyze your "
                    "product. Please add your API key to enable advanced analysis."
                ),
            )
        ],
        alternatives=[
            Alternative(
                name="Setup Instructions",
                description="Get a Gemini API key",
                rating="Good",
                benefits=[
                    "Free tier available",
                    "Powerful AI analysis",
                    "Detailed ingredient assessments",
                ],
            )
        ],
        comparison_table=[
            ComparisonRow(
                product="Current Setup",
                suitability="Poor",
                key_benefits="None - Missing API key",
                free_from="N/A",
            )
        ],
        recommendations=[
            "Get a Google AI (Gemini) API key from https://ai.google.dev/",
            "Add the API key to your environment variables as GOOGLE_API_KEY",
            "Restart the application to enable ingredient analysis",
            "You can still use the application to extract text from images",
            "Contact support if you need assistance setting up the API key",
        ],
    )


def build_general_fallback_result(request: AnalysisRequest) -> AnalysisResult:
    """
    Best-effort result derived from the request alone.

    Args:
        request: Validated analysis request

    Returns:
        Moderate/65 result with keyword-matched ingredients and
        age-specific alternatives and recommendations
    """
    age_group = _age_label(request.age_group)
    conditions = request.all_conditions
    product_type, category = classify_product(request.extracted_text)

    ingredients = find_known_ingredients(request.extracted_text)
    has_caution = any(i.safety == IngredientSafety.CAUTION for i in ingredients)
    if not ingredients:
        ingredients = [_placeholder_ingredient(age_group, conditions)]

    guidance = AGE_GUIDANCE.get(request.age_group, GENERIC_GUIDANCE)

    return AnalysisResult(
        product_name=product_type,
        product_category=category,
        suitability=Suitability.MODERATE,
        suitability_rating=GENERAL_FAILURE_RATING,
        ingredients=ingredients,
        special_warnings=[
            SpecialWarning(
                title=f"Food Safety Notice for {age_group} Year Olds",
                description=(
                    f"Children in the {age_group} age range have specific nutritional "
                    f"needs. {guidance.needs} Always introduce new foods gradually and "
                    "monitor for reactions."
                ),
            )
        ],
        alternatives=_alternatives(guidance),
        comparison_table=[
            ComparisonRow(
                product=product_type,
                suitability="Moderate",
                key_benefits="Commercial convenience, professionally formulated",
                free_from="Not fully assessed" if has_caution else "May contain common additives",
            ),
            ComparisonRow(
                product="Gerber Organic",
                suitability="Excellent",
                key_benefits="Simple, transparent ingredients",
                free_from="Artificial preservatives, colors, and flavors",
            ),
            ComparisonRow(
                product="Homemade Baby Food",
                suitability="Very Good",
                key_benefits="Complete control over ingredients",
                free_from="All unnecessary additives and processing",
            ),
        ],
        recommendations=list(guidance.recommendations),
    )
