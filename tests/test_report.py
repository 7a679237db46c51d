"""Unit tests for the PDF report renderer."""

from datetime import date

import pytest

from childfood_api.models.analysis import AgeGroup, AnalysisResult
from childfood_api.services.report import (
    ReportRenderer,
    alternative_rows,
    comparison_rows,
    ingredient_rows,
    latin1,
    report_filename,
    summary_text,
)


@pytest.fixture
def analysis_result(model_analysis) -> AnalysisResult:
    return AnalysisResult.model_validate(model_analysis)


class TestReportRenderer:
    """Tests for ReportRenderer."""

    def test_is_pdf(self, analysis_result):
        content = ReportRenderer().render(analysis_result, AgeGroup.INFANT_TODDLER, ["Eczema"])

        assert content.startswith(b"%PDF-")
        assert content.rstrip().endswith(b"%%EOF")

    def test_sections(self, analysis_result):
        content = ReportRenderer(compress=False).render(
            analysis_result,
            AgeGroup.INFANT_TODDLER,
            ["Eczema"],
            generated_on=date(2025, 3, 5),
        )

        assert b"Product Analysis Report" in content
        assert b"Product: Banana Puree Pouch" in content
        assert b"Category: Baby Food" in content
        assert b"Date: March 5, 2025" in content
        assert b"Ingredient Analysis" in content
        assert b"Recommended Alternatives" in content
        assert b"Plum Organics Banana" in content
        assert b"Product Comparison" in content
        assert b"Recommendations" in content

    def test_without_comparison(self, analysis_result):
        result = analysis_result.model_copy(update={"comparison_table": []})

        content = ReportRenderer(compress=False).render(result, AgeGroup.SCHOOL_AGE, [])

        assert b"Product Comparison" not in content
        assert b"Recommended Alternatives" in content

    def test_non_latin1_text(self, analysis_result):
        result = analysis_result.model_copy(
            update={"product_name": "Rice Crackers — 米餅"}
        )

        content = ReportRenderer().render(result, AgeGroup.PRESCHOOLER, ["Celiac Disease"])

        assert content.startswith(b"%PDF-")


class TestReportContent:
    """Tests for the text placed in each report section."""

    def test_summary(self, analysis_result):
        summary = summary_text(analysis_result, AgeGroup.INFANT_TODDLER, ["Eczema"])

        assert summary == (
            "This product is generally good for 0-2 year olds with Eczema. "
            "Contains added sugar."
        )

    def test_summary_without_conditions(self, analysis_result):
        summary = summary_text(analysis_result, AgeGroup.SCHOOL_AGE, [])

        assert "7-10 year olds with no reported conditions." in summary

    def test_ingredient_rows(self, analysis_result):
        assert ingredient_rows(analysis_result) == [
            ["Banana", "Fruit base", "Safe", "No concerns"],
            ["Sugar", "Added sweetener", "Caution", "Not recommended under 2 years"],
        ]

    def test_alternative_and_comparison_rows(self, analysis_result):
        assert alternative_rows(analysis_result) == [
            ["Plum Organics Banana", "Single-ingredient puree", "Excellent", "No added sugar"]
        ]
        assert comparison_rows(analysis_result) == [
            ["Banana Puree Pouch", "Good", "Convenient", "Preservatives"]
        ]

    def test_latin1(self):
        assert latin1("Crème — “fresh”") == 'Crème - "fresh"'
        assert latin1("米") == "?"


@pytest.mark.parametrize(
    "name,expected",
    [
        ("Banana & Oat Puffs", "Banana___Oat_Puffs_Analysis.pdf"),
        ("API Key Required", "API_Key_Required_Analysis.pdf"),
        ("Crème Brûlée", "Cr_me_Br_l_e_Analysis.pdf"),
    ],
)
def test_report_filename(model_analysis, name, expected):
    model_analysis["productName"] = name

    assert report_filename(AnalysisResult.model_validate(model_analysis)) == expected
