"""
Pydantic models for product analysis.

The wire format is camelCase JSON (what the web client and the language
model both speak); attributes are snake_case with aliases.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class AgeGroup(str, Enum):
    """Developmental bracket used to tailor prompts and fallbacks."""

    INFANT_TODDLER = "0-2"
    PRESCHOOLER = "3-6"
    SCHOOL_AGE = "7-10"


class Suitability(str, Enum):
    """Overall verdict for a product."""

    GOOD = "Good"
    MODERATE = "Moderate"
    POOR = "Poor"


class IngredientSafety(str, Enum):
    """Safety classification for a single ingredient."""

    SAFE = "Safe"
    MODERATE = "Moderate"
    CAUTION = "Caution"


class AlternativeRating(str, Enum):
    """Rating for a suggested alternative product."""

    EXCELLENT = "Excellent"
    VERY_GOOD = "Very Good"
    GOOD = "Good"


class ComparisonSuitability(str, Enum):
    """Suitability scale used in the comparison table."""

    EXCELLENT = "Excellent"
    VERY_GOOD = "Very Good"
    GOOD = "Good"
    MODERATE = "Moderate"
    POOR = "Poor"


class AnalysisSource(str, Enum):
    """Which path of the engine produced a result."""

    MODEL = "model"
    FALLBACK_MISSING_CREDENTIALS = "fallback_missing_credentials"
    FALLBACK_ERROR = "fallback_error"


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class AnalysisRequest(_CamelModel):
    """Validated input for one analysis."""

    model_config = ConfigDict(populate_by_name=True, frozen=True, strict=True)

    age_group: AgeGroup = Field(..., alias="ageGroup")
    health_conditions: list[str] = Field(default_factory=list, alias="healthConditions")
    additional_conditions: str = Field("", alias="additionalConditions")
    health_notes: str = Field("", alias="healthNotes")
    extracted_text: str = Field(..., alias="extractedText")

    @field_validator("age_group", mode="before")
    @classmethod
    def _exact_age_group(cls, value):
        # Strict mode rejects plain strings for enums; match the values exactly
        if isinstance(value, str):
            return AgeGroup(value)
        return value

    @field_validator("health_conditions")
    @classmethod
    def _unique_conditions(cls, value: list[str]) -> list[str]:
        seen: set[str] = set()
        unique = []
        for condition in value:
            name = condition.strip()
            if not name or name.casefold() in seen:
                continue
            seen.add(name.casefold())
            unique.append(name)
        return unique

    @property
    def all_conditions(self) -> list[str]:
        """Selected conditions plus the free-text additional conditions."""
        conditions = list(self.health_conditions)
        if self.additional_conditions.strip():
            conditions.append(self.additional_conditions.strip())
        return conditions


class IngredientAssessment(_CamelModel):
    """Assessment of one ingredient."""

    name: str
    description: str
    safety: IngredientSafety
    concerns: str | None = None


class SpecialWarning(_CamelModel):
    """Prominent warning shown above the ingredient table."""

    title: str
    description: str


class Alternative(_CamelModel):
    """A suggested replacement product."""

    name: str
    description: str
    rating: AlternativeRating
    benefits: list[str] = Field(default_factory=list)


class ComparisonRow(_CamelModel):
    """One row of the product comparison table."""

    product: str
    suitability: ComparisonSuitability
    key_benefits: str = Field(..., alias="keyBenefits")
    free_from: str = Field(..., alias="freeFrom")


class AnalysisResult(_CamelModel):
    """Complete, schema-valid analysis of a product for a child profile."""

    product_name: str = Field(..., alias="productName")
    product_category: str = Field("", alias="productCategory")
    suitability: Suitability
    suitability_rating: int = Field(..., ge=0, le=100, alias="suitabilityRating")
    ingredients: list[IngredientAssessment]
    special_warnings: list[SpecialWarning] = Field(
        default_factory=list, alias="specialWarnings"
    )
    alternatives: list[Alternative] = Field(default_factory=list)
    comparison_table: list[ComparisonRow] = Field(
        default_factory=list, alias="comparisonTable"
    )
    recommendations: list[str] = Field(..., min_length=1)

    def to_document(self) -> dict:
        """Dump as a camelCase dict (API and MongoDB shape)."""
        return self.model_dump(mode="json", by_alias=True)


class AnalysisOutcome(BaseModel):
    """An analysis result plus the path that produced it."""

    result: AnalysisResult
    source: AnalysisSource

    @property
    def is_fallback(self) -> bool:
        return self.source != AnalysisSource.MODEL
