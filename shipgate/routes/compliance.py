from fastapi import APIRouter

from ..schemas import EvaluateInput, EvaluateResponse, ReleaseCheckInput, ReleaseCheckResponse
from ..services.gate import run_compliance_gate, shipment_release_allowed

router = APIRouter(prefix="/v1/compliance", tags=["compliance"])

@router.post("/evaluate", response_model=EvaluateResponse)
def evaluate_order(payload: EvaluateInput):
    result = run_compliance_gate(payload.order, order_id=payload.order_id)
    return EvaluateResponse(
        order_id=payload.order_id,
        decision=result.decision,
        reason_codes=list(result.reason_codes),
        stake_call_required=result.stake_call_required,
        release_allowed=shipment_release_allowed(result),
    )

@router.post("/release-check", response_model=ReleaseCheckResponse)
def release_check(payload: ReleaseCheckInput):
    return ReleaseCheckResponse(
        release_allowed=shipment_release_allowed(payload.result, payload.stake_call_completed)
    )
