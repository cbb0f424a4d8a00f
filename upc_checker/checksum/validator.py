from __future__ import annotations

import logging

from upc_checker.models import PAYLOAD_LENGTH, UPC_A_LENGTH, UPCCheckOutcome, UPCCheckResult

logger = logging.getLogger(__name__)


def choose_input(raw: str | None, default: str) -> str:
	"""Fall back to `default` when no candidate was supplied."""
	return raw if raw else default


def normalize_upc(raw: str | None) -> str:
	if not raw:
		return ""
	return "".join(str(raw).split())


def is_well_formed(value: str) -> bool:
	# isdigit() alone admits superscripts and non-ASCII decimal digits.
	return len(value) == UPC_A_LENGTH and value.isascii() and value.isdigit()


def compute_check_digit(payload: str) -> int:
	"""Return the UPC-A check digit for an 11-digit payload.

	Digits at odd 1-indexed positions (the first, third, ... eleventh) are
	summed and weighted by 3, the even positions are added unweighted, and
	the check digit is what brings the total up to a multiple of 10.
	"""
	if len(payload) != PAYLOAD_LENGTH or not (payload.isascii() and payload.isdigit()):
		raise ValueError(f"UPC-A payload must be {PAYLOAD_LENGTH} digits, got {payload!r}")

	odd_sum = 0
	even_sum = 0
	for index, char in enumerate(payload):
		if (index + 1) % 2 == 0:
			even_sum += int(char)
		else:
			odd_sum += int(char)

	total = odd_sum * 3 + even_sum
	return (10 - total % 10) % 10


def check_upc(raw: str | None, default: str) -> UPCCheckResult:
	value = normalize_upc(choose_input(raw, default))
	if not is_well_formed(value):
		logger.debug(f"Rejected UPC candidate {value!r}: not {UPC_A_LENGTH} digits")
		return UPCCheckResult(
			outcome=UPCCheckOutcome.invalid_shape,
			value=value or None,
			error=f"UPC-A must be exactly {UPC_A_LENGTH} digits.",
		)

	expected = compute_check_digit(value[:PAYLOAD_LENGTH])
	declared = int(value[-1])
	if declared != expected:
		logger.debug(f"UPC {value} check digit mismatch: declared {declared}, expected {expected}")
		return UPCCheckResult(
			outcome=UPCCheckOutcome.checksum_mismatch,
			value=value,
			expected_check_digit=expected,
			error=f"Check digit {declared} does not match computed {expected}.",
		)

	logger.debug(f"UPC {value} is valid")
	return UPCCheckResult(outcome=UPCCheckOutcome.valid, value=value, expected_check_digit=expected)


def is_valid_upc(raw: str | None, default: str) -> bool:
	"""True when the candidate (or `default`, if `raw` is empty) is a
	12-digit UPC-A whose last digit matches the computed check digit.

	Malformed input and a wrong check digit both give False; use
	`check_upc` to tell them apart.
	"""
	return check_upc(raw, default).ok
