# shipgate/services/gate.py
from __future__ import annotations
from typing import Any, Dict

from ..compliance.engine import evaluate
from ..compliance.types import ComplianceResult, OrderSnapshot
from ..utils.logging import logger

AUDIT_ACTION = "COMPLIANCE_EVALUATION"


def run_compliance_gate(order: OrderSnapshot, order_id: str | None = None) -> ComplianceResult:
    """
    Evaluate an order once and log the outcome.

    The engine itself stays silent; this is the order-workflow side that
    records what was decided.
    """
    ref = order_id or "<unsaved>"
    result = evaluate(order)

    if not result.allowed:
        logger.info(
            "Order %s blocked by compliance (state=%s, reasons=%s)",
            ref, order.shipping_address.state, ",".join(c.value for c in result.reason_codes),
        )
    elif result.stake_call_required:
        logger.info("Order %s allowed; STAKE Act call must be completed before shipment", ref)
    else:
        logger.info("Order %s allowed by compliance (state=%s)", ref, order.shipping_address.state)
    return result


def shipment_release_allowed(result: ComplianceResult, stake_call_completed: bool = False) -> bool:
    # a BLOCK never ships, whatever else the caller knows
    if not result.allowed:
        return False
    if result.stake_call_required:
        return stake_call_completed
    return True


def audit_record(order_id: str, result: ComplianceResult) -> Dict[str, Any]:
    """Payload the caller persists to its audit trail."""
    return {
        "order_id": order_id,
        "action": AUDIT_ACTION,
        "result": "SUCCESS" if result.allowed else "BLOCKED",
        "compliance": result.to_wire(),
    }
