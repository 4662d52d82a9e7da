from typing import Optional, List
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ModelReply(CamelModel):
    """Shape filled from model output; an explicit null falls back to the field default."""

    @field_validator("*", mode="before")
    @classmethod
    def _null_to_default(cls, v, info: ValidationInfo):
        if v is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v


class SuggestedSection(ModelReply):
    title: str = ""
    content: str = ""


class TargetKeywords(ModelReply):
    primary: str = ""
    secondary: List[str] = Field(default_factory=list)
    long_tail: List[str] = Field(default_factory=list)


class CreativeContext(CamelModel):
    marketing_hooks: Optional[List[str]] = None
    suggested_structure: Optional[List[SuggestedSection]] = None
    emotional_triggers: Optional[List[str]] = None
    target_audience: Optional[str] = None
    unique_selling_points: Optional[List[str]] = None
    business_vertical: Optional[str] = None
    key_themes: Optional[List[str]] = None
    extracted_keywords: Optional[TargetKeywords] = None


class SuggestionRequest(CamelModel):
    # required fields are checked by the route so a missing one maps to 400
    description: Optional[str] = None
    primary_keyword: Optional[str] = None
    relevant_keywords: Optional[List[str]] = None
    new_keyword: Optional[str] = None
    creative_context: Optional[CreativeContext] = None


class SuggestionResponse(CamelModel):
    headlines: List[str]
    keywords: List[str]


class RefineRequest(CamelModel):
    headlines: Optional[List[str]] = None
    new_keyword: Optional[str] = None


class RefineResponse(CamelModel):
    headlines: List[str]


class ImageParseRequest(CamelModel):
    base64_image: Optional[str] = None
    mime_type: Optional[str] = None


class ParsedCreative(ModelReply):
    """Structured analysis of a marketing creative."""
    description: str = ""
    extracted_text: List[str] = Field(default_factory=list)
    business_vertical: str = ""
    product_details: str = ""
    marketing_hooks: List[str] = Field(default_factory=list)
    suggested_structure: List[SuggestedSection] = Field(default_factory=list)
    key_themes: List[str] = Field(default_factory=list)
    target_keywords: TargetKeywords = Field(default_factory=TargetKeywords)
    content_tone: str = ""
    emotional_triggers: List[str] = Field(default_factory=list)
    target_audience: str = ""
    unique_selling_points: List[str] = Field(default_factory=list)
