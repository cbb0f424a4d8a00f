from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional

# ----------------------------
# Constants
# ----------------------------

UPC_A_LENGTH = 12
PAYLOAD_LENGTH = UPC_A_LENGTH - 1

# ----------------------------
# Enums
# ----------------------------

class UPCCheckOutcome(str, enum.Enum):
    valid = "valid"                            # well formed, check digit matches
    invalid_shape = "invalid_shape"            # not 12 decimal digits after whitespace removal
    checksum_mismatch = "checksum_mismatch"    # well formed, wrong check digit


# ----------------------------
# Results
# ----------------------------

@dataclass(frozen=True)
class UPCCheckResult:
    """
    Outcome of checking one UPC-A candidate.

    Callers that only need the yes/no answer read `ok`; the outcome keeps
    malformed input apart from a bad check digit.
    """
    outcome: UPCCheckOutcome

    # Candidate after whitespace removal; None when nothing was left.
    value: Optional[str] = None

    # Only computed for well formed candidates.
    expected_check_digit: Optional[int] = None

    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is UPCCheckOutcome.valid

    @property
    def declared_check_digit(self) -> Optional[int]:
        if self.outcome is UPCCheckOutcome.invalid_shape or not self.value:
            return None
        return int(self.value[-1])
