# shipgate/compliance/types.py
from enum import Enum
from typing import Any, Dict, Iterable, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .reason_codes import ReasonCode


class FlavorType(str, Enum):
    TOBACCO = "TOBACCO"
    MENTHOL = "MENTHOL"
    FRUIT = "FRUIT"
    DESSERT = "DESSERT"
    OTHER = "OTHER"


class AgeVerificationStatus(str, Enum):
    PASS = "PASS"
    FAIL = "FAIL"
    PENDING = "PENDING"


class ComplianceDecision(str, Enum):
    ALLOW = "ALLOW"
    BLOCK = "BLOCK"


# Immutable, structurally comparable; accepts snake_case or camelCase keys.
_FROZEN = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)


# ----------------------------
# Order snapshot (input)
# ----------------------------
class ShippingAddress(BaseModel):
    model_config = _FROZEN

    state: str = Field(pattern=r"^[A-Z]{2}$")
    is_po_box: bool

    @field_validator("state", mode="before")
    @classmethod
    def _normalize_state(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v


class ProductInput(BaseModel):
    model_config = _FROZEN

    flavor_type: FlavorType
    ca_utl_approved: bool
    sensory_cooling: bool


class OrderLineInput(BaseModel):
    model_config = _FROZEN

    product: ProductInput
    quantity: int = Field(gt=0)  # not read by any rule yet


class OrderSnapshot(BaseModel):
    """Everything the engine needs, resolved by the caller before evaluation."""

    model_config = _FROZEN

    shipping_address: ShippingAddress
    items: Tuple[OrderLineInput, ...]
    is_first_time_recipient: bool
    age_verification_status: AgeVerificationStatus

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "OrderSnapshot":
        """Validate a raw order dict. Raises pydantic.ValidationError on malformed input."""
        return cls.model_validate(payload)


# ----------------------------
# Compliance result (output)
# ----------------------------
class ComplianceResult(BaseModel):
    model_config = _FROZEN

    decision: ComplianceDecision
    reason_codes: Tuple[ReasonCode, ...] = ()
    stake_call_required: bool = False

    @model_validator(mode="after")
    def _check_consistency(self) -> "ComplianceResult":
        blocked = self.decision == ComplianceDecision.BLOCK
        if blocked != bool(self.reason_codes):
            raise ValueError("BLOCK requires reason codes and ALLOW forbids them")
        if blocked and self.stake_call_required:
            raise ValueError("a blocked order cannot require a STAKE call")
        return self

    @classmethod
    def allow(cls, stake_call_required: bool = False) -> "ComplianceResult":
        return cls(decision=ComplianceDecision.ALLOW, stake_call_required=stake_call_required)

    @classmethod
    def block(cls, codes: Iterable[ReasonCode]) -> "ComplianceResult":
        return cls(decision=ComplianceDecision.BLOCK, reason_codes=tuple(codes))

    @property
    def allowed(self) -> bool:
        return self.decision == ComplianceDecision.ALLOW

    def to_wire(self) -> Dict[str, Any]:
        """{"decision": ..., "reasonCodes": [...], "stakeCallRequired": ...}"""
        return self.model_dump(mode="json", by_alias=True)

    @classmethod
    def from_wire(cls, data: Dict[str, Any]) -> "ComplianceResult":
        return cls.model_validate(data)
