"""
Canned responses served when no Gemini key is configured or the live call fails.
"""
import time
from typing import List, Optional

from ..config import settings
from ..models import CreativeContext, ParsedCreative, SuggestedSection, SuggestionResponse, TargetKeywords
from .utils import unique


HEADLINE_TEMPLATES = [
    "The Ultimate {kw} Guide to Getting the Best Deal",
    "Avoid Costly {kw} Mistakes",
    "Expert {kw} Tips and Strategies",
    "Complete {kw} Buyer's Guide",
    "Everything to Know About {kw}",
]

STOP_WORDS = {"with", "from", "that", "this"}
MAX_HOOK_HEADLINES = 5
MAX_RELATED_KEYWORDS = 8
MAX_KEYWORDS = 15


def _simulate_latency() -> None:
    if settings.mock_delay_seconds > 0:
        time.sleep(settings.mock_delay_seconds)


def _section_words(title: str) -> List[str]:
    return [w for w in title.lower().split(" ") if len(w) > 3 and w not in STOP_WORDS]


def mock_suggestions(
    description: str,
    primary_keyword: str,
    related_keywords: List[str],
    context: Optional[CreativeContext] = None,
) -> SuggestionResponse:
    _simulate_latency()

    if context and context.marketing_hooks:
        headlines = [f"{primary_keyword} {hook}".strip() for hook in context.marketing_hooks[:MAX_HOOK_HEADLINES]]
    else:
        headlines = [t.format(kw=primary_keyword) for t in HEADLINE_TEMPLATES]

    keywords = list(related_keywords[:MAX_RELATED_KEYWORDS])
    if context and context.suggested_structure:
        for section in context.suggested_structure:
            keywords.extend(_section_words(section.title))
    if context and context.key_themes:
        keywords.extend(context.key_themes)

    return SuggestionResponse(headlines=headlines, keywords=unique(keywords)[:MAX_KEYWORDS])


def mock_creative() -> ParsedCreative:
    _simulate_latency()
    return ParsedCreative(
        description="Used car dealership offering flexible payment options with inventory from 2014-2024",
        extracted_text=[
            "buy car now pay later",
            "2014-2018 see price",
            "2019-2021 see price",
            "2022-2024 see price",
        ],
        business_vertical="Automotive / Used Car Sales",
        product_details="Used vehicles segmented by year ranges with deferred payment options",
        marketing_hooks=[
            "Immediate ownership without upfront payment",
            "Wide selection across 10 years of models",
            "Transparent pricing for all budgets",
        ],
        suggested_structure=[
            SuggestedSection(
                title="Understanding Buy Now Pay Later Car Financing",
                content="How deferred payment plans work, eligibility, pros and cons",
            ),
            SuggestedSection(
                title="Best Value: 2014-2018 Used Cars",
                content="Affordable older models with proven reliability",
            ),
            SuggestedSection(
                title="Nearly New: 2019-2021 Models",
                content="Low mileage options with modern features",
            ),
            SuggestedSection(
                title="Latest Models: 2022-2024 Vehicles",
                content="Current generation with warranties available",
            ),
        ],
        key_themes=[
            "Flexible financing options",
            "Vehicle depreciation curves",
            "Age-based value propositions",
        ],
        target_keywords=TargetKeywords(
            primary="buy car now pay later",
            secondary=["used car financing", "zero down payment", "deferred payment"],
            long_tail=["buy used car no money down bad credit", "2019-2021 cars with payment plans"],
        ),
        content_tone="Helpful and informative while addressing financial concerns",
        emotional_triggers=["financial freedom", "immediate gratification", "smart shopping"],
        target_audience="Budget-conscious car buyers with limited upfront capital",
        unique_selling_points=["No down payment required", "Multiple year ranges", "Flexible terms"],
    )
