"""Response Assembly — failed outcomes for the parse and validation stages.

Invariants:
    - Parse failure: no instruction fields, accounts == ()
    - Validation failure: parsed fields + involved accounts, balance == balance_before
    - status_reason always comes from STATUS_MESSAGES, never from the validator detail
"""

from collections.abc import Sequence

from payments.core.domain_types import (
    Account, ExecutionOutcome, Instruction, StatusCode, TransactionStatus,
)
from payments.core.execute_instruction import involved_account_views
from payments.core.status_messages import message_for


def parse_failure(code: StatusCode) -> ExecutionOutcome:
    return ExecutionOutcome(
        status=TransactionStatus.FAILED,
        status_code=code,
        status_reason=message_for(code),
    )


def validation_failure(
    instruction: Instruction, accounts: Sequence[Account], code: StatusCode,
) -> ExecutionOutcome:
    return ExecutionOutcome(
        status=TransactionStatus.FAILED,
        status_code=code,
        status_reason=message_for(code),
        instruction=instruction,
        accounts=involved_account_views(accounts, instruction),
    )
