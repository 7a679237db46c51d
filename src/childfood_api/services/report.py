"""PDF analysis report rendering."""

import re
from datetime import date

from fpdf import FPDF
from fpdf.enums import XPos, YPos
from fpdf.fonts import FontFace

from childfood_api.models.analysis import AgeGroup, AnalysisResult

DISCLAIMER = (
    "Disclaimer: This analysis is for informational purposes only and is not a "
    "substitute for professional medical advice. Always consult with a healthcare "
    "provider before making changes to your child's diet."
)

FONT = "Helvetica"
HEADER_STYLE = FontFace(emphasis="BOLD", color=(255, 255, 255), fill_color=(76, 70, 229))

# Core PDF fonts only cover latin-1
_TYPOGRAPHY = str.maketrans({
    "\u2018": "'",
    "\u2019": "'",
    "\u201c": '"',
    "\u201d": '"',
    "\u2013": "-",
    "\u2014": "-",
    "\u2022": "*",
    "\u2026": "...",
})


def report_filename(result: AnalysisResult) -> str:
    """File name for a result's report, e.g. ``Fruit_Puree_Analysis.pdf``."""
    return f"{re.sub(r'[^a-z0-9]', '_', result.product_name, flags=re.IGNORECASE)}_Analysis.pdf"


def latin1(text: str) -> str:
    """Map text onto the latin-1 range, replacing what cannot be shown."""
    return text.translate(_TYPOGRAPHY).encode("latin-1", "replace").decode("latin-1")


def conditions_label(health_conditions: list[str]) -> str:
    return ", ".join(health_conditions) or "no reported conditions"


def summary_text(result: AnalysisResult, age_group: AgeGroup, health_conditions: list[str]) -> str:
    summary = (
        f"This product is generally {result.suitability.value.lower()} for "
        f"{age_group.value} year olds with {conditions_label(health_conditions)}."
    )
    if result.special_warnings:
        summary += f" {result.special_warnings[0].description}"
    return summary


def ingredient_rows(result: AnalysisResult) -> list[list[str]]:
    """Ingredient table rows. Function is the first clause of the description."""
    return [
        [
            i.name,
            i.description.split(",")[0],
            i.safety.value,
            i.concerns or "No concerns",
        ]
        for i in result.ingredients
    ]


def alternative_rows(result: AnalysisResult) -> list[list[str]]:
    return [
        [a.name, a.description, a.rating.value, ", ".join(a.benefits)]
        for a in result.alternatives
    ]


def comparison_rows(result: AnalysisResult) -> list[list[str]]:
    return [
        [r.product, r.suitability.value, r.key_benefits, r.free_from]
        for r in result.comparison_table
    ]


class ReportRenderer:
    """
    Renders an AnalysisResult as a single PDF document.

    Sections follow the order a parent reads them: product header,
    verdict and summary, ingredient table, alternatives, comparison,
    numbered recommendations and a closing disclaimer.
    """

    def __init__(self, compress: bool = True):
        """
        Initialize renderer.

        Args:
            compress: Compress page streams. Off leaves page text searchable
                in the raw bytes.
        """
        self.compress = compress

    def render(
        self,
        result: AnalysisResult,
        age_group: AgeGroup,
        health_conditions: list[str],
        generated_on: date | None = None,
    ) -> bytes:
        generated_on = generated_on or date.today()

        pdf = FPDF(format="A4")
        pdf.set_compression(self.compress)
        pdf.set_title(latin1(f"{result.product_name} Analysis"))
        pdf.set_auto_page_break(auto=True, margin=15)
        pdf.add_page()

        pdf.set_font(FONT, style="B", size=18)
        self._line(pdf, "Product Analysis Report", height=10)
        pdf.ln(2)

        pdf.set_font(FONT, size=11)
        self._line(pdf, f"Product: {result.product_name}")
        self._line(pdf, f"Category: {result.product_category}")
        self._line(
            pdf,
            f"Analysis for: {age_group.value} year olds with "
            f"{conditions_label(health_conditions)}",
        )
        self._line(
            pdf,
            f"Date: {generated_on.strftime('%B')} {generated_on.day}, {generated_on.year}",
        )
        pdf.ln(3)

        pdf.set_font(FONT, style="B", size=13)
        self._line(
            pdf,
            f"Suitability Rating: {result.suitability.value} ({result.suitability_rating}%)",
        )
        pdf.ln(2)

        self._heading(pdf, "Summary")
        self._paragraph(pdf, summary_text(result, age_group, health_conditions))

        self._heading(pdf, "Ingredient Analysis")
        self._table(
            pdf,
            ["Ingredient", "Function", "Safety", "Notes"],
            ingredient_rows(result),
            col_widths=(25, 30, 15, 30),
        )

        if result.special_warnings:
            self._heading(pdf, "Special Warnings")
            for warning in result.special_warnings:
                pdf.set_font(FONT, style="B", size=10)
                self._line(pdf, warning.title)
                self._paragraph(pdf, warning.description)

        self._heading(pdf, "Recommended Alternatives")
        self._table(
            pdf,
            ["Product", "Description", "Rating", "Benefits"],
            alternative_rows(result),
            col_widths=(25, 35, 15, 25),
        )

        if result.comparison_table:
            self._heading(pdf, "Product Comparison")
            self._table(
                pdf,
                ["Product", "Suitability", "Key Benefits", "Free From"],
                comparison_rows(result),
                col_widths=(25, 15, 30, 30),
            )

        self._heading(pdf, "Recommendations")
        for index, recommendation in enumerate(result.recommendations, start=1):
            self._paragraph(pdf, f"{index}. {recommendation}")

        pdf.ln(4)
        self._paragraph(pdf, DISCLAIMER, size=8, style="I")

        return bytes(pdf.output())

    def _line(self, pdf: FPDF, text: str, height: float = 7) -> None:
        pdf.cell(0, height, text=latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def _heading(self, pdf: FPDF, text: str) -> None:
        pdf.ln(3)
        pdf.set_font(FONT, style="B", size=13)
        self._line(pdf, text, height=8)

    def _paragraph(self, pdf: FPDF, text: str, size: int = 10, style: str = "") -> None:
        pdf.set_font(FONT, style=style, size=size)
        pdf.multi_cell(0, 5, text=latin1(text), new_x=XPos.LMARGIN, new_y=YPos.NEXT)

    def _table(
        self,
        pdf: FPDF,
        headers: list[str],
        rows: list[list[str]],
        col_widths: tuple[int, ...],
    ) -> None:
        pdf.set_font(FONT, size=9)
        with pdf.table(
            col_widths=col_widths,
            headings_style=HEADER_STYLE,
            line_height=5,
            text_align="LEFT",
        ) as table:
            for data_row in [headers, *rows]:
                row = table.row()
                for datum in data_row:
                    row.cell(latin1(datum))
