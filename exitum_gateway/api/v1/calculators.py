"""POST /v1/calculators/* - court fee and bond restructuring calculators"""

import logging
from dataclasses import asdict
from fastapi import APIRouter, HTTPException, Request

from exitum_gateway.api.v1.schemas import (
    BondNPVRequest,
    BondNPVResponse,
    CourtFeeRequest,
    CourtFeeResponse,
    RestructuringRequest,
    RestructuringResponse,
)
from exitum_gateway.api.dependencies import get_request_id
from exitum_gateway.domain.court_fee import compute_fee
from exitum_gateway.domain.restructuring import compare_schedules, compute_npv
from exitum_gateway.domain.exceptions import InvalidDomainInputError
from exitum_gateway.infrastructure.observability.metrics import record_calculation, record_restructuring
from exitum_gateway.infrastructure.observability.logging import log_calculation

router = APIRouter()


def _reject(calculator: str, request_id: str, error: InvalidDomainInputError) -> HTTPException:
    record_calculation(calculator, ok=False)
    logging.warning(f"Invalid calculator input: {error}", extra={"request_id": request_id, "calculator": calculator})
    return HTTPException(status_code=422, detail=str(error))


@router.post("/calculators/court-fee", response_model=CourtFeeResponse)
def calculate_court_fee(request_body: CourtFeeRequest, request: Request):
    """Court fee for a property claim (Tax Code art. 333.21)"""
    request_id = get_request_id(request)

    try:
        fee = compute_fee(request_body.claim_amount)
    except InvalidDomainInputError as e:
        raise _reject("court_fee", request_id, e)

    record_calculation("court_fee")
    log_calculation(request_id, "court_fee", request_body.model_dump(), {"fee": fee})

    return CourtFeeResponse(fee=fee)


@router.post("/calculators/bond-npv", response_model=BondNPVResponse)
def calculate_bond_npv(request_body: BondNPVRequest, request: Request):
    """Present value of a single bond schedule"""
    request_id = get_request_id(request)

    try:
        npv = compute_npv(request_body.schedule.to_domain(), request_body.discount_rate_percent)
    except InvalidDomainInputError as e:
        raise _reject("bond_npv", request_id, e)

    record_calculation("bond_npv")
    log_calculation(request_id, "bond_npv", request_body.model_dump(), {"npv": npv})

    return BondNPVResponse(npv=npv)


@router.post("/calculators/bond-restructuring", response_model=RestructuringResponse)
def calculate_bond_restructuring(request_body: RestructuringRequest, request: Request):
    """
    Compare original bond terms with proposed restructured terms.

    Both schedules are discounted at the same rate (the yield at initial
    placement). A positive delta means restructuring preserves more value.
    """
    request_id = get_request_id(request)

    try:
        comparison = compare_schedules(
            request_body.original_schedule.to_domain(),
            request_body.restructured_schedule.to_domain(),
            request_body.discount_rate_percent,
        )
    except InvalidDomainInputError as e:
        raise _reject("bond_restructuring", request_id, e)

    record_calculation("bond_restructuring")
    record_restructuring(comparison.delta, comparison.delta_percent)
    log_calculation(request_id, "bond_restructuring", request_body.model_dump(), asdict(comparison))

    return RestructuringResponse(**asdict(comparison))
