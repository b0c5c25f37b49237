"""Payment Instruction Pipeline — parse → validate → execute with short-circuit.

Invariants:
    - Stages run strictly in order; the first failure is terminal for the call
    - Parse failures never reach the validator; validation failures never reach the executor
    - Never raises for bad input: every outcome is an ExecutionOutcome
    - The caller's account snapshot is never mutated

Design Decisions:
    - Logging lives here, not in core/ (core stays pure and silent)
    - Failure logs carry the stopping stage so dashboards can split syntax from business errors
"""

import logging
from collections.abc import Sequence
from datetime import date

from payments.core.build_response import parse_failure, validation_failure
from payments.core.domain_types import Account, ExecutionOutcome
from payments.core.execute_instruction import execute_instruction
from payments.core.parse_instruction import parse_instruction
from payments.core.validate_instruction import validate_instruction

logger = logging.getLogger(__name__)


def process_payment_instruction(
    instruction_text: str,
    accounts: Sequence[Account],
    today: date | None = None,
) -> ExecutionOutcome:
    """Run the full pipeline for one instruction against one snapshot."""
    parsed = parse_instruction(instruction_text)
    if not parsed.ok:
        logger.warning(
            "Instruction rejected by parser",
            extra={"stage": "parse", "error_code": parsed.error_code.value},
        )
        return parse_failure(parsed.error_code)

    instruction = parsed.instruction
    validation = validate_instruction(instruction, accounts)
    if not validation.valid:
        logger.warning(
            f"Instruction rejected by validator: {validation.reason}",
            extra={
                "stage": "validate",
                "error_code": validation.code.value,
                "instruction_type": instruction.type.value,
            },
        )
        return validation_failure(instruction, accounts, validation.code)

    outcome = execute_instruction(instruction, accounts, today=today)
    logger.info(
        f"Instruction {outcome.status.value}",
        extra={
            "stage": "execute",
            "status_code": outcome.status_code.value,
            "instruction_type": instruction.type.value,
        },
    )
    return outcome
