import logging
from typing import List, Optional

from pydantic import ValidationError

from ..config import settings
from ..models import CreativeContext, ParsedCreative, SuggestionResponse
from .llm import GeminiClient, LLMError
from .mock import mock_creative, mock_suggestions
from .prompts import render_image_analysis_prompt, render_suggestions_prompt
from .utils import parse_json_object

logger = logging.getLogger(__name__)


def _check_suggestions(payload: dict) -> SuggestionResponse:
    headlines, keywords = payload.get("headlines"), payload.get("keywords")
    if not isinstance(headlines, list) or not isinstance(keywords, list):
        raise ValueError("Invalid JSON structure in response")
    return SuggestionResponse(
        headlines=[str(h) for h in headlines],
        keywords=[str(k) for k in keywords],
    )


def request_suggestions(
    description: str,
    primary_keyword: str,
    related_keywords: List[str],
    context: Optional[CreativeContext] = None,
    client: Optional[GeminiClient] = None,
) -> SuggestionResponse:
    """
    Ask the model for headlines + keywords. Any upstream failure (HTTP error,
    empty reply, unparseable or mis-shaped JSON) falls back to mock data.
    """
    if client is None:
        return mock_suggestions(description, primary_keyword, related_keywords, context)

    prompt = render_suggestions_prompt(description, primary_keyword, related_keywords, context)
    try:
        text = client.generate_text(
            prompt,
            temperature=0.7,
            top_k=40,
            top_p=0.95,
            max_output_tokens=1024,
            web_search=settings.suggest_web_search,
        )
        result = _check_suggestions(parse_json_object(text))
    except LLMError as e:
        logger.warning("Gemini suggestions failed, using mock data: %s", e)
        return mock_suggestions(description, primary_keyword, related_keywords, context)
    except ValueError as e:
        logger.warning("Unusable Gemini suggestions reply, using mock data: %s", e)
        return mock_suggestions(description, primary_keyword, related_keywords, context)

    logger.info("Gemini returned %d headlines, %d keywords", len(result.headlines), len(result.keywords))
    return result


def describe_creative(data: ParsedCreative) -> str:
    description = f"{data.business_vertical} offering {data.product_details}. "
    if data.marketing_hooks:
        description += f"Key value propositions include {' and '.join(data.marketing_hooks[:2])}. "
    if data.target_audience:
        description += f"Targeting {data.target_audience}. "
    if data.key_themes:
        description += f"The content should cover {', '.join(data.key_themes)}. "
    if data.emotional_triggers:
        description += f"Appeal to {' and '.join(data.emotional_triggers)} to engage readers."
    return description.strip()


def _raw_text_creative(text: str) -> ParsedCreative:
    return ParsedCreative(description=text, extracted_text=[text], business_vertical="Unknown")


def parse_creative_image(
    base64_image: str,
    mime_type: str,
    client: Optional[GeminiClient] = None,
) -> ParsedCreative:
    """
    Analyze a marketing creative. A reply that is not the expected JSON is kept
    as raw text; an API failure falls back to the mock analysis.
    """
    if client is None:
        return mock_creative()

    try:
        text = client.generate_text(
            render_image_analysis_prompt(),
            image_b64=base64_image,
            mime_type=mime_type,
            temperature=0.3,
            top_k=32,
            top_p=0.95,
            max_output_tokens=2048,
        )
    except LLMError as e:
        logger.warning("Gemini image analysis failed, using mock data: %s", e)
        return mock_creative()

    try:
        parsed = ParsedCreative.model_validate(parse_json_object(text))
    except (ValueError, ValidationError) as e:
        logger.warning("Failed to parse structured image analysis, keeping raw text: %s", e)
        return _raw_text_creative(text)

    parsed.description = describe_creative(parsed)
    return parsed
