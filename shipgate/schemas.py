
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List

from .compliance.types import ComplianceDecision, ComplianceResult, OrderSnapshot
from .compliance.reason_codes import ReasonCode

# Request/response bodies for the compliance endpoints (camelCase on the wire)
_WIRE = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class EvaluateInput(BaseModel):
    model_config = _WIRE

    order_id: Optional[str] = None
    order: OrderSnapshot

class EvaluateResponse(BaseModel):
    model_config = _WIRE

    order_id: Optional[str] = None
    decision: ComplianceDecision
    reason_codes: List[ReasonCode] = Field(default_factory=list)
    stake_call_required: bool
    release_allowed: bool

class ReleaseCheckInput(BaseModel):
    model_config = _WIRE

    result: ComplianceResult
    stake_call_completed: bool = False

class ReleaseCheckResponse(BaseModel):
    model_config = _WIRE

    release_allowed: bool
