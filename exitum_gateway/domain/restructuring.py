"""Bond restructuring comparison - NPV of original vs proposed coupon schedules"""

import math
from typing import Optional

from exitum_gateway.domain.models import BondSchedule, ComparisonResult
from exitum_gateway.domain.exceptions import InvalidDomainInputError
from exitum_gateway.utils.number_utils import is_finite

# Daily coupons for a century
MAX_PERIODS = 365 * 100


def _validate_schedule(schedule: BondSchedule) -> None:
    for name in ("face_value", "annual_coupon_rate_percent", "payments_per_year", "term_years"):
        value = getattr(schedule, name)
        if not is_finite(value):
            raise InvalidDomainInputError(f"{name} must be a finite number, got {value!r}")

    if schedule.face_value < 0:
        raise InvalidDomainInputError(f"face_value must be non-negative, got {schedule.face_value}")
    if schedule.payments_per_year < 0:
        raise InvalidDomainInputError(f"payments_per_year must be non-negative, got {schedule.payments_per_year}")
    if schedule.term_years < 0:
        raise InvalidDomainInputError(f"term_years must be non-negative, got {schedule.term_years}")
    if schedule.term_years * schedule.payments_per_year > MAX_PERIODS:
        raise InvalidDomainInputError(
            f"Schedule has {schedule.term_years * schedule.payments_per_year} periods, maximum is {MAX_PERIODS}"
        )


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves towards +infinity"""
    return math.floor(value + 0.5)


def compute_npv(schedule: BondSchedule, discount_rate_percent: float) -> int:
    """
    Present value of a bullet bond's cash flows, rounded to whole currency units.

    Requirements:
    - Flat coupon each period: face * rate / payments_per_year
    - Principal returned with the last coupon
    - Period discount rate is the annual rate divided by payments_per_year
      (simple split, not an effective-rate conversion)
    - Zero periods (term or frequency of 0) gives NPV 0
    - Negative discount rates are accepted
    - A discount factor beyond float range discounts its cash flow to 0

    Raises:
        InvalidDomainInputError: non-finite or negative schedule fields, more
            than MAX_PERIODS periods, non-finite discount rate, a discount
            factor of zero, or a sum that is not finite

    Example:
        face 1000, coupon 15%, 4/yr, 3 years, discount 15% → 1000 (par)
    """
    _validate_schedule(schedule)
    if not is_finite(discount_rate_percent):
        raise InvalidDomainInputError(f"Discount rate must be a finite number, got {discount_rate_percent!r}")

    periods = int(schedule.term_years * schedule.payments_per_year)
    if periods <= 0:
        return 0

    freq = schedule.payments_per_year
    coupon_payment = schedule.face_value * (schedule.annual_coupon_rate_percent / 100) / freq
    period_rate = discount_rate_percent / 100 / freq

    npv = 0.0
    for i in range(1, periods + 1):
        cash_flow = coupon_payment
        if i == periods:
            cash_flow += schedule.face_value  # Bullet repayment at maturity

        try:
            discount_factor = (1 + period_rate) ** i
        except OverflowError:
            if abs(1 + period_rate) > 1:
                continue  # cash_flow / inf == 0
            discount_factor = 0.0  # Underflow reported as a range error

        if discount_factor == 0:
            raise InvalidDomainInputError(
                f"Discount rate {discount_rate_percent}% makes the discount factor of period {i} zero"
            )
        npv += cash_flow / discount_factor

    if not math.isfinite(npv):
        raise InvalidDomainInputError(f"Discount rate {discount_rate_percent}% gives a non-finite NPV")

    return round_half_up(npv)


def compare_schedules(
    original: BondSchedule,
    restructured: BondSchedule,
    discount_rate_percent: float,
) -> ComparisonResult:
    """
    Main entry point: discount both schedules at the same rate and compare.

    delta_percent is None when the original NPV is zero, since the ratio
    has no finite value there.
    """
    original_npv = compute_npv(original, discount_rate_percent)
    restructured_npv = compute_npv(restructured, discount_rate_percent)

    delta = restructured_npv - original_npv
    delta_percent: Optional[float] = (delta / original_npv) * 100 if original_npv != 0 else None

    return ComparisonResult(
        original_npv=original_npv,
        restructured_npv=restructured_npv,
        delta=delta,
        delta_percent=delta_percent,
    )
