"""
Request models (front-end form fields with declared defaults)
"""

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from typing import Any


class GenerationRequest(BaseModel):
    """Free-text fields interpolated into a prompt"""

    @field_validator("*", mode="before")
    @classmethod
    def render_scalar(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        if isinstance(value, (int, float)):
            return str(value)
        return value


class TitleRequest(GenerationRequest):
    game: str = Field("", description="Game being streamed")
    keywords: str = Field("", description="Keywords to include")
    voice: str = Field("friendly", description="Tone of the titles")


class NameRequest(GenerationRequest):
    keywords: str = Field("", description="Keywords to build on")
    style: str = Field("short", description="Username style")


class BioRequest(GenerationRequest):
    vibe: str = Field("friendly", description="Channel vibe")
    length: str = Field("short", description="Bio length")


class SubsCalcRequest(BaseModel):
    # numeric coercion happens in the calculator
    subs: Any = Field(0, description="Subscriber count")
    tier: Any = Field(1, description="Subscription tier (1-3)")


class AdsCalcRequest(BaseModel):
    adMinutes: Any = Field(0, description="Ad minutes per stream")
    viewers: Any = Field(0, description="Concurrent viewers")
    cpm: Any = Field(3, description="Earnings per 1000 viewers per ad minute")
