"""State court fee for property claims in arbitrazh courts (Tax Code art. 333.21)"""

from decimal import Decimal, ROUND_FLOOR
from typing import List, Tuple

from exitum_gateway.domain.exceptions import InvalidDomainInputError
from exitum_gateway.utils.number_utils import is_finite

# (upper bound inclusive, base fee, marginal rate, threshold the rate applies above)
FEE_BRACKETS: List[Tuple[Decimal, Decimal, Decimal, Decimal]] = [
    (Decimal("100000"), Decimal("10000"), Decimal("0"), Decimal("0")),
    (Decimal("1000000"), Decimal("10000"), Decimal("0.05"), Decimal("100000")),
    (Decimal("10000000"), Decimal("55000"), Decimal("0.03"), Decimal("1000000")),
    (Decimal("50000000"), Decimal("325000"), Decimal("0.01"), Decimal("10000000")),
]
TOP_BRACKET: Tuple[Decimal, Decimal, Decimal] = (Decimal("725000"), Decimal("0.005"), Decimal("50000000"))

MAX_FEE = Decimal("10000000")


def compute_fee(claim_amount: float) -> int:
    """
    Compute the court fee for a monetary claim, in whole rubles.

    Brackets are inclusive at the upper bound, so an amount exactly on a
    boundary is charged by the lower tier. The fee is capped at 10,000,000
    and then truncated (not rounded).

    Raises:
        InvalidDomainInputError: claim amount is negative, NaN, infinite or
            beyond float range

    Example:
        1,500,000 → 55,000 + 3% * 500,000 = 70,000
    """
    if not is_finite(claim_amount):
        raise InvalidDomainInputError(f"Claim amount must be a finite number, got {claim_amount!r}")
    if claim_amount < 0:
        raise InvalidDomainInputError(f"Claim amount must be non-negative, got {claim_amount}")

    amount = Decimal(str(claim_amount))

    base, rate, threshold = TOP_BRACKET
    for upper, bracket_base, bracket_rate, bracket_threshold in FEE_BRACKETS:
        if amount <= upper:
            base, rate, threshold = bracket_base, bracket_rate, bracket_threshold
            break

    fee = min(base + (amount - threshold) * rate, MAX_FEE)

    return int(fee.to_integral_value(rounding=ROUND_FLOOR))
