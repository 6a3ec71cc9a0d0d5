# shipgate/compliance/engine.py
"""
Compliance decision engine for nicotine orders.

Pure and deterministic: no I/O, no logging, no state. Every input is
pre-resolved by the caller; the result only classifies the order.

Rules run in fixed priority:
  1. age verification   (blocks, stops)
  2. PO box / PACT Act  (blocks, stops)
  3. California flavor, sensory and UTL rules (accumulates, blocks, stops)
  4. STAKE Act call     (flags only, never blocks)
"""
from typing import List, Optional, Sequence

from .reason_codes import ReasonCode
from .types import (
    AgeVerificationStatus,
    ComplianceResult,
    FlavorType,
    OrderLineInput,
    OrderSnapshot,
)

# -----------------------------
# State tables
# -----------------------------
CALIFORNIA = "CA"
CA_PERMITTED_FLAVORS = frozenset({FlavorType.TOBACCO})
STAKE_ACT_STATES = frozenset({CALIFORNIA})


# -----------------------------
# Rules
# -----------------------------
def check_age_verification(status: AgeVerificationStatus) -> Optional[ReasonCode]:
    # PENDING is not a pass
    if status != AgeVerificationStatus.PASS:
        return ReasonCode.AGE_VERIFICATION_FAILED
    return None


def check_po_box(is_po_box: bool) -> Optional[ReasonCode]:
    if is_po_box:
        return ReasonCode.PO_BOX_NOT_ALLOWED
    return None


def check_california(state: str, items: Sequence[OrderLineInput]) -> List[ReasonCode]:
    """
    Returns every CA violation, one entry per violating line per check.
    Codes are not deduplicated across lines; order is line order, then
    flavor, sensory, UTL within a line.
    """
    violations: List[ReasonCode] = []
    if state != CALIFORNIA:
        return violations

    for item in items:
        product = item.product
        if product.flavor_type not in CA_PERMITTED_FLAVORS:
            violations.append(ReasonCode.CA_FLAVOR_BAN)
        if product.sensory_cooling:
            violations.append(ReasonCode.CA_SENSORY_BAN)
        if not product.ca_utl_approved:
            violations.append(ReasonCode.CA_UTL_REQUIRED)
    return violations


def check_stake_call_required(state: str, is_first_time_recipient: bool) -> bool:
    return state in STAKE_ACT_STATES and is_first_time_recipient


# -----------------------------
# Main entry
# -----------------------------
def evaluate(order: OrderSnapshot) -> ComplianceResult:
    address = order.shipping_address

    age = check_age_verification(order.age_verification_status)
    if age:
        return ComplianceResult.block([age])

    po_box = check_po_box(address.is_po_box)
    if po_box:
        return ComplianceResult.block([po_box])

    ca_violations = check_california(address.state, order.items)
    if ca_violations:
        return ComplianceResult.block(ca_violations)

    return ComplianceResult.allow(
        stake_call_required=check_stake_call_required(address.state, order.is_first_time_recipient)
    )
