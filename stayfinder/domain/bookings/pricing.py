"""
Booking price calculator

Shown to the guest before payment; the server recomputes the same figures
independently, so every step has to match its arithmetic exactly.
"""
import math
from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Optional, Union

SERVICE_FEE_RATE = 0.10
CLEANING_FEE = 50
TAX_RATE = 0.08

SECONDS_PER_DAY = 24 * 60 * 60

DateLike = Union[date, datetime]


@dataclass(frozen=True)
class PriceBreakdown:
    nights: int
    basePrice: float
    serviceFee: int
    cleaningFee: int
    taxes: int
    total: float

    @property
    def is_displayable(self) -> bool:
        """A zero-night quote (cleaning fee and its tax only) is never shown or submitted"""
        return self.nights > 0


def round_half_up(value: float) -> int:
    """Round to the nearest whole currency unit, halves going up"""
    return int(math.floor(value + 0.5))


def as_datetime(value: DateLike) -> datetime:
    """Naive datetime for comparisons; aware values are converted to UTC first"""
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    return datetime(value.year, value.month, value.day)


def calculate_nights(check_in: Optional[DateLike], check_out: Optional[DateLike]) -> int:
    """Whole nights between the two dates, partial days counting as a full night"""
    if not check_in or not check_out:
        return 0
    delta = as_datetime(check_out) - as_datetime(check_in)
    return math.ceil(abs(delta.total_seconds()) / SECONDS_PER_DAY)


def calculate_pricing(
    check_in: Optional[DateLike],
    check_out: Optional[DateLike],
    nightly_price: float,
) -> PriceBreakdown:
    nights = calculate_nights(check_in, check_out)
    base_price = nightly_price * nights
    service_fee = round_half_up(base_price * SERVICE_FEE_RATE)
    cleaning_fee = CLEANING_FEE
    taxes = round_half_up((base_price + service_fee + cleaning_fee) * TAX_RATE)
    total = base_price + service_fee + cleaning_fee + taxes

    return PriceBreakdown(
        nights=nights,
        basePrice=base_price,
        serviceFee=service_fee,
        cleaningFee=cleaning_fee,
        taxes=taxes,
        total=total,
    )
