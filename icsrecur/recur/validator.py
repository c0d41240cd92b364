"""Structural validation and repair of RECUR rule parts."""

import logging
from typing import Any

from .models import Diagnostic, DiagnosticLevel, Parts, RepairAction, ValidationOutcome

logger = logging.getLogger(__name__)

REQUIRED_PART = "FREQ"


def _is_empty(value: Any) -> bool:
    return value == "" or value == []


def validate_parts(
    parts: Parts, name: str = "RRULE", node: Any = None, repair: bool = False
) -> ValidationOutcome:
    """Check rule parts for empty values and a missing FREQ.

    The diagnostic level is REPAIRED when repair is off and SEVERE when it is
    on, for both rules.

    Args:
        parts: Rule parts to check; not modified
        name: Property name used in messages (RRULE, EXRULE)
        node: Object reported as the source of each diagnostic
        repair: Remove empty parts and request removal of a FREQ-less property

    Returns:
        ValidationOutcome with diagnostics, the requested action and, when
        repairing, the repaired parts
    """
    level = DiagnosticLevel.SEVERE if repair else DiagnosticLevel.REPAIRED
    outcome = ValidationOutcome()
    values = {key: list(value) if isinstance(value, list) else value for key, value in parts.items()}

    for key, value in parts.items():
        if _is_empty(value):
            outcome.diagnostics.append(
                Diagnostic(level=level, message=f"Invalid value for {key} in {name}", node=node)
            )
            if repair:
                logger.info(f"Removing empty rule part {key} from {name}")
                del values[key]

    if REQUIRED_PART not in values:
        outcome.diagnostics.append(
            Diagnostic(level=level, message=f"{REQUIRED_PART} is required in {name}", node=node)
        )
        if repair:
            logger.warning(f"{name} has no {REQUIRED_PART}, requesting removal of the property")
            outcome.action = RepairAction.REMOVE

    if repair:
        outcome.parts = values
        if outcome.action == RepairAction.NONE and outcome.diagnostics:
            outcome.action = RepairAction.REPAIRED

    return outcome
