"""Unit tests for the analysis prompt."""

from childfood_api.models.analysis import AnalysisRequest
from childfood_api.services.analysis import build_analysis_prompt


def test_prompt_contains_request_details(analysis_payload):
    analysis_payload["additionalConditions"] = "Egg allergy"
    request = AnalysisRequest.model_validate(analysis_payload)

    prompt = build_analysis_prompt(request)

    assert "- Age Group: 0-2" in prompt
    assert "Eczema, Egg allergy" in prompt
    assert "Sensitive skin" in prompt
    assert "Organic banana puree, water, sugar, ascorbic acid" in prompt


def test_prompt_lists_allowed_values(analysis_payload):
    prompt = build_analysis_prompt(AnalysisRequest.model_validate(analysis_payload))

    assert "suitability: Good, Moderate, Poor" in prompt
    assert "ingredients[].safety: Safe, Moderate, Caution" in prompt
    assert '"productName"' in prompt
    # Template braces are rendered literally
    assert "{{" not in prompt


def test_prompt_is_deterministic(analysis_payload):
    request = AnalysisRequest.model_validate(analysis_payload)

    assert build_analysis_prompt(request) == build_analysis_prompt(request)
