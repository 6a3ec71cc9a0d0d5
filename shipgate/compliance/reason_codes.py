# shipgate/compliance/reason_codes.py
from enum import Enum


class ReasonCode(str, Enum):
    """Stable violation identifiers.

    Audit records and customer messaging key on these exact strings,
    so never rename a value; mint a new member instead.
    """

    # Age verification
    AGE_VERIFICATION_FAILED = "AGE_VERIFICATION_FAILED"

    # PACT Act
    PO_BOX_NOT_ALLOWED = "PO_BOX_NOT_ALLOWED"

    # California flavor law
    CA_FLAVOR_BAN = "CA_FLAVOR_BAN"
    CA_SENSORY_BAN = "CA_SENSORY_BAN"
    CA_UTL_REQUIRED = "CA_UTL_REQUIRED"

    def __str__(self) -> str:
        return self.value
