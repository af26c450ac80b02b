"""Unit tests for bond NPV and restructuring comparison"""

import math
import pytest
from exitum_gateway.domain.models import BondSchedule
from exitum_gateway.domain.restructuring import compare_schedules, compute_npv, round_half_up
from exitum_gateway.domain.exceptions import InvalidDomainInputError


def test_compute_npv_par_when_discount_equals_coupon(original_schedule: BondSchedule):
    """Test bond discounted at its own coupon rate is worth face value"""
    npv = compute_npv(original_schedule, 15)
    assert abs(npv - 1000) <= 1


def test_compute_npv_par_annual_payments():
    """Test formula accepts frequencies outside 2/4/12"""
    schedule = BondSchedule(face_value=1000, annual_coupon_rate_percent=10, payments_per_year=1, term_years=2)
    assert compute_npv(schedule, 10) == 1000


@pytest.mark.parametrize(
    "face_value, rate, freq, years",
    [
        (1000, 15, 4, 3),
        (2500, 12, 12, 7),
        (1000, 0, 2, 10),
        (50_000, 8.5, 2, 4),
    ],
)
def test_compute_npv_zero_discount_is_undiscounted_sum(face_value, rate, freq, years):
    """Test zero discount rate sums coupons plus principal"""
    schedule = BondSchedule(face_value, rate, freq, years)
    coupon = face_value * (rate / 100) / freq
    expected = years * freq * coupon + face_value

    assert compute_npv(schedule, 0) == round_half_up(expected)


def test_compute_npv_zero_periods():
    """Test zero term or zero frequency yields NPV 0"""
    assert compute_npv(BondSchedule(1000, 15, 4, 0), 15) == 0
    assert compute_npv(BondSchedule(1000, 15, 0, 3), 15) == 0


def test_compute_npv_negative_discount_rate(original_schedule: BondSchedule):
    """Test negative discount rate compounds cash flows upward"""
    undiscounted = compute_npv(original_schedule, 0)
    assert compute_npv(original_schedule, -5) > undiscounted


def test_compute_npv_higher_discount_lowers_value(original_schedule: BondSchedule):
    """Test NPV falls as discount rate rises"""
    assert compute_npv(original_schedule, 20) < compute_npv(original_schedule, 15) < compute_npv(original_schedule, 10)


def test_compute_npv_principal_only_at_maturity():
    """Test zero-coupon bond is a single discounted principal payment"""
    schedule = BondSchedule(face_value=1000, annual_coupon_rate_percent=0, payments_per_year=2, term_years=1)
    # 1000 / 1.05^2 = 907.03
    assert compute_npv(schedule, 10) == 907


def test_round_half_up():
    """Test halves round towards +infinity"""
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(-2.5) == -2
    assert round_half_up(1000.4999) == 1000


@pytest.mark.parametrize(
    "schedule",
    [
        BondSchedule(-1000, 15, 4, 3),
        BondSchedule(1000, math.nan, 4, 3),
        BondSchedule(math.inf, 15, 4, 3),
        BondSchedule(1000, 15, -4, 3),
        BondSchedule(1000, 15, 4, -3),
    ],
)
def test_compute_npv_rejects_invalid_schedule(schedule: BondSchedule):
    """Test negative and non-finite schedule fields are rejected"""
    with pytest.raises(InvalidDomainInputError):
        compute_npv(schedule, 15)


def test_compute_npv_rejects_invalid_discount_rate(original_schedule: BondSchedule):
    """Test non-finite rate and a zero discount factor base are rejected"""
    with pytest.raises(InvalidDomainInputError):
        compute_npv(original_schedule, math.nan)

    # -400% / 4 periods = -100% per period
    with pytest.raises(InvalidDomainInputError):
        compute_npv(original_schedule, -400)


def test_compare_schedules_identical(original_schedule: BondSchedule):
    """Test identical terms give zero delta"""
    result = compare_schedules(original_schedule, original_schedule, 15)

    assert result.original_npv == result.restructured_npv
    assert result.delta == 0
    assert result.delta_percent == 0


def test_compare_schedules_restructuring_loss(
    original_schedule: BondSchedule,
    restructured_schedule: BondSchedule,
):
    """Test lower coupon over longer term loses value at the placement rate"""
    result = compare_schedules(original_schedule, restructured_schedule, 15)

    assert result.original_npv == 1000
    assert result.restructured_npv == compute_npv(restructured_schedule, 15)
    assert result.delta == result.restructured_npv - result.original_npv
    assert result.delta < 0
    assert result.delta_percent == pytest.approx(result.delta / result.original_npv * 100)


def test_compare_schedules_uses_same_discount_rate(
    original_schedule: BondSchedule,
    restructured_schedule: BondSchedule,
):
    """Test both NPVs are computed with the shared rate"""
    result = compare_schedules(original_schedule, restructured_schedule, 12)

    assert result.original_npv == compute_npv(original_schedule, 12)
    assert result.restructured_npv == compute_npv(restructured_schedule, 12)


def test_compare_schedules_zero_original_npv(restructured_schedule: BondSchedule):
    """Test percent change is undefined, not NaN or infinity, when original NPV is 0"""
    matured = BondSchedule(face_value=1000, annual_coupon_rate_percent=15, payments_per_year=4, term_years=0)
    result = compare_schedules(matured, restructured_schedule, 15)

    assert result.original_npv == 0
    assert result.delta == result.restructured_npv
    assert result.delta_percent is None


def test_compute_npv_discount_factor_beyond_float_range():
    """Test far cash flows whose discount factor overflows contribute nothing"""
    # 1000% annual: 11^i overflows after ~296 periods, the principal at 1000 is lost
    schedule = BondSchedule(face_value=1000, annual_coupon_rate_percent=15, payments_per_year=1, term_years=1000)
    # Coupons alone: 150 / 10 = 15
    assert compute_npv(schedule, 1000) == 15


def test_compute_npv_negative_rate_beyond_float_range():
    """Test -300% (factor -2 per period) over 2000 periods is accepted"""
    schedule = BondSchedule(face_value=1000, annual_coupon_rate_percent=15, payments_per_year=1, term_years=2000)
    # 150 * (-1/2 + 1/4 - 1/8 ...) = -50
    assert compute_npv(schedule, -300) == -50


def test_compute_npv_rejects_non_finite_sum():
    """Test a discount factor shrinking to zero is rejected, not divided by"""
    schedule = BondSchedule(face_value=1000, annual_coupon_rate_percent=15, payments_per_year=1, term_years=2000)
    with pytest.raises(InvalidDomainInputError):
        compute_npv(schedule, -150)


def test_compute_npv_rejects_too_many_periods():
    """Test schedules longer than a century of daily coupons are rejected"""
    with pytest.raises(InvalidDomainInputError):
        compute_npv(BondSchedule(1000, 15, 365, 101), 15)
    with pytest.raises(InvalidDomainInputError):
        compute_npv(BondSchedule(1000, 15, 12, 100_000_000), 15)


def test_compute_npv_rejects_int_beyond_float_range():
    """Test huge integers are invalid input rather than an arithmetic crash"""
    with pytest.raises(InvalidDomainInputError):
        compute_npv(BondSchedule(10**400, 15, 4, 3), 15)
    with pytest.raises(InvalidDomainInputError):
        compute_npv(BondSchedule(1000, 15, 4, 3), 10**400)
