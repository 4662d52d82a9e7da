from typing import List, Optional
from jinja2 import Environment, StrictUndefined

from ..models import CreativeContext
from .segments import scope_indicator

_env = Environment(undefined=StrictUndefined, trim_blocks=True, lstrip_blocks=True, autoescape=False)

SUGGESTIONS_USER = """CRITICAL: You must respond with ONLY valid JSON, no other text or explanations.

Based on this content description: "{{ description }}"
Primary keyword: "{{ primary_keyword }}"
Related keywords: {{ related_keywords | join(', ') }}
{% if ctx %}

CREATIVE CONTEXT FROM IMAGE ANALYSIS:
- Marketing Hooks: {{ (ctx.marketing_hooks or []) | join(', ') or 'None identified' }}
- Business Type: {{ ctx.business_vertical or 'General' }}
- Target Audience: {{ ctx.target_audience or 'General audience' }}
- Emotional Triggers: {{ (ctx.emotional_triggers or []) | join(', ') or 'None identified' }}
- Unique Selling Points: {{ (ctx.unique_selling_points or []) | join(', ') or 'None identified' }}
- Key Themes: {{ (ctx.key_themes or []) | join(', ') or 'None identified' }}

SUGGESTED ARTICLE SECTIONS FROM CREATIVE:
{% for s in ctx.suggested_structure or [] %}
- {{ s.title }}: {{ s.content }}
{% else %}
No specific structure identified
{% endfor %}
{% endif %}
{% if ctx and ctx.suggested_structure is not none %}

HEADLINE FORMULA:
Each headline MUST incorporate:
1. Primary keyword (within first 5 words)
2. Creative's core message: {{ (ctx.marketing_hooks or ['key benefit'])[0] }}
3. Scope indicator: {{ scope }}

Examples based on this creative:
- "{{ (ctx.marketing_hooks or ['Key benefit'])[0] }} with {{ primary_keyword }} ({{ ctx.suggested_structure | map(attribute='title') | join(' vs ') }})"
- "{{ (ctx.emotional_triggers or ['Insider'])[0] }} secrets for {{ primary_keyword }} - {{ ctx.suggested_structure | length }} Essential Sections"
{% endif %}

Generate 5 short, punchy, creative-specific headlines that:
1. Include the primary keyword naturally within the first 5 words
2. Follow the headline formula above
3. Directly reflect the content and themes from the creative
4. Match the emotional tone and marketing approach identified
5. Address the target audience's specific needs
6. Incorporate the unique selling points when relevant
{% if ctx and ctx.marketing_hooks %}

IMPORTANT: Base headlines on these specific marketing hooks from the creative:
{% for hook in ctx.marketing_hooks %}
{{ loop.index }}. {{ hook }}
{% endfor %}
{% endif %}
{% if ctx and ctx.suggested_structure is not none %}

IMPORTANT: Consider these content sections identified in the creative:
{{ ctx.suggested_structure | map(attribute='title') | join(', ') }}
{% endif %}

Search the web for current trends and insights, then provide:
1. Five compelling article headlines - CRITICAL: Each headline must include the primary keyword within the first 5 words
   - One benefit-focused headline
   - One problem-solving headline
   - One curiosity-driven headline
   - One comparison/guide headline
   - One expert tips/secrets headline
2. 10-15 SEO keyword suggestions related to the topic

HEADLINE REQUIREMENTS:
- Include the primary keyword naturally within the first 5 words
- Do not force the keyword to start the headline
- Avoid using a colon after the primary keyword
- Keep each headline concise and punchy (maximum 12 words)
- Make them compelling and click-worthy
- Ensure variety in approach and angle

Respond with ONLY this JSON structure (no markdown, no explanations, just pure JSON):
{"headlines": ["headline1", "headline2", "headline3", "headline4", "headline5"],
 "keywords": ["keyword1", "keyword2", "keyword3", "keyword4", "keyword5", "keyword6", "keyword7", "keyword8", "keyword9", "keyword10"]}
"""

IMAGE_ANALYSIS_USER = """Analyze this marketing creative image comprehensively to extract information for SEO article generation.

1. TEXT EXTRACTION: extract ALL visible text (headlines, calls to action, categories,
   prices and promotions, dates or ranges, urgency messages, button text, fine print).
2. VISUAL CONTEXT: primary product or service, its variations or categories (e.g. year
   ranges), visual hierarchy, color psychology and emotional tone, audience indicators.
3. MARKETING INTENT: value proposition, sales approach, pain points addressed, unique
   selling points, pricing strategy or payment options.
4. CONTENT SEGMENTATION: if the creative shows several segments, list each one, what
   differentiates it and any progression between them.
5. SEO ARTICLE FRAMEWORK: primary topic, target audience, natural article sections,
   search-intent keywords, emotional hooks and content angles.

The goal is to extract enough context to write a comprehensive, SEO-optimized article that
matches the creative's intent and covers all aspects shown in the image.

CRITICAL: Return your analysis as valid JSON matching this exact structure:
{
  "extractedText": ["text1", "text2"],
  "businessVertical": "industry/niche",
  "productDetails": "specific offerings",
  "marketingHooks": ["hook1", "hook2"],
  "suggestedStructure": [
    {"title": "Section 1", "content": "description"},
    {"title": "Section 2", "content": "description"}
  ],
  "keyThemes": ["theme1", "theme2"],
  "targetKeywords": {
    "primary": "main keyword",
    "secondary": ["keyword1", "keyword2"],
    "longTail": ["long tail phrase 1", "long tail phrase 2"]
  },
  "contentTone": "tone description",
  "emotionalTriggers": ["trigger1", "trigger2"],
  "targetAudience": "audience description",
  "uniqueSellingPoints": ["usp1", "usp2"]
}

IMPORTANT: Return ONLY valid JSON, no markdown formatting, no explanations.
"""

_suggestions_tpl = _env.from_string(SUGGESTIONS_USER)


def render_suggestions_prompt(
    description: str,
    primary_keyword: str,
    related_keywords: List[str],
    context: Optional[CreativeContext] = None,
) -> str:
    return _suggestions_tpl.render(
        description=description,
        primary_keyword=primary_keyword,
        related_keywords=related_keywords,
        ctx=context,
        scope=scope_indicator(context.suggested_structure if context else None),
    )


def render_image_analysis_prompt() -> str:
    return IMAGE_ANALYSIS_USER
