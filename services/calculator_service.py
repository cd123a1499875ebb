"""
Streamer earnings calculators (local, no AI)
"""

import math
from typing import Any, Optional, Union

from models.request_models import AdsCalcRequest, SubsCalcRequest
from models.response_models import AdsCalcResponse, SubsCalcResponse

Number = Union[int, float]

# per-subscriber payout after the typical platform split, keyed like the form values
TIER_RATES = {"1": 2.5, "2": 5, "3": 12.5}
DEFAULT_TIER = "1"
DEFAULT_CPM = 3

RADIX_PREFIXES = ("0x", "0o", "0b")


def to_number(value: Any) -> Number:
    """Loose numeric coercion: blanks count as 0, anything unparsable becomes NaN"""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0
        if "_" in text:
            return math.nan
        if text.lower().startswith(RADIX_PREFIXES):
            try:
                return int(text, 0)
            except ValueError:
                return math.nan
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return float(text)
        except ValueError:
            return math.nan
    if isinstance(value, list):
        if not value:
            return 0
        if len(value) == 1:
            return to_number(value[0])
    return math.nan


def _tier_key(tier: Any) -> str:
    if isinstance(tier, bool):
        return "true" if tier else "false"
    if isinstance(tier, float) and tier.is_integer():
        return str(int(tier))
    return str(tier)


def to_float(value: Number) -> float:
    """Ints beyond float range become +/-inf"""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def finite_or_none(value: Number) -> Optional[Number]:
    return value if math.isfinite(to_float(value)) else None


def subscription_earnings(sub_count: Any, tier: Any) -> Number:
    rate = TIER_RATES.get(_tier_key(tier), TIER_RATES[DEFAULT_TIER])
    return to_float(to_number(sub_count)) * rate


def ad_earnings(ad_minutes: Any, viewers: Any, cpm_per_thousand: Any = DEFAULT_CPM) -> Number:
    viewers_value = to_float(to_number(viewers))
    cpm_value = to_float(to_number(cpm_per_thousand))
    return (viewers_value / 1000) * cpm_value * to_float(to_number(ad_minutes))


def calculate_subs(request: SubsCalcRequest) -> SubsCalcResponse:
    return SubsCalcResponse(
        subs=finite_or_none(to_number(request.subs)),
        tier=request.tier,
        earnings=finite_or_none(subscription_earnings(request.subs, request.tier))
    )


def calculate_ads(request: AdsCalcRequest) -> AdsCalcResponse:
    return AdsCalcResponse(
        adMinutes=finite_or_none(to_number(request.adMinutes)),
        viewers=finite_or_none(to_number(request.viewers)),
        cpm=finite_or_none(to_number(request.cpm)),
        earnings=finite_or_none(ad_earnings(request.adMinutes, request.viewers, request.cpm))
    )
