"""
Response models
"""

from pydantic import BaseModel
from typing import Any, List, Optional, Union

# None stands for a non-finite result (NaN/Infinity), rendered as JSON null
Number = Optional[Union[int, float]]


class TitleResponse(BaseModel):
    titles: List[str]
    raw: str


class NameResponse(BaseModel):
    names: List[str]
    raw: str


class BioResponse(BaseModel):
    bios: List[str]
    raw: str


class SubsCalcResponse(BaseModel):
    subs: Number
    tier: Any
    earnings: Number


class AdsCalcResponse(BaseModel):
    adMinutes: Number
    viewers: Number
    cpm: Number
    earnings: Number


class ErrorResponse(BaseModel):
    error: str
