# tests/conftest.py
import pytest

from shipgate.compliance.types import OrderSnapshot


def build_order(state="NY", is_po_box=False, items=None, first_time=False, age="PASS") -> OrderSnapshot:
    if items is None:
        items = [line()]
    return OrderSnapshot(
        shipping_address={"state": state, "is_po_box": is_po_box},
        items=items,
        is_first_time_recipient=first_time,
        age_verification_status=age,
    )


def line(flavor="TOBACCO", utl=True, cooling=False, quantity=1) -> dict:
    return {
        "product": {"flavor_type": flavor, "ca_utl_approved": utl, "sensory_cooling": cooling},
        "quantity": quantity,
    }


@pytest.fixture
def make_order():
    return build_order


@pytest.fixture
def make_line():
    return line
