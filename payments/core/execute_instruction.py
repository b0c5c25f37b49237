"""Instruction Execution — pending decision and balance transfer as a pure update.

Invariants:
    - Preconditions: instruction already validated (no re-validation here)
    - Pending iff execute_by is strictly after today (UTC calendar date, date-only)
    - Pending: balance == balance_before for both involved accounts
    - Successful: debit -= amount and credit += amount, computed together
    - Views follow the snapshot order of the accounts, not the debit/credit role
    - Inputs are never mutated; apply_outcome builds a NEW snapshot for write-back

Design Decisions:
    - today is an argument (defaults to the UTC clock): keeps the pending boundary
      testable without patching datetime
    - Calendar comparison of date objects reproduces the ISO string comparison exactly
"""

from collections.abc import Sequence
from datetime import date, datetime, timezone

from payments.core.domain_types import (
    Account, AccountView, ExecutionOutcome, Instruction,
    StatusCode, TransactionStatus,
)
from payments.core.status_messages import message_for
from payments.core.validate_instruction import find_account


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def is_pending(execute_by: date | None, today: date) -> bool:
    return execute_by is not None and execute_by > today


def execute_instruction(
    instruction: Instruction,
    accounts: Sequence[Account],
    today: date | None = None,
) -> ExecutionOutcome:
    """Decide pending vs immediate and report the involved accounts."""
    if is_pending(instruction.execute_by, today or utc_today()):
        return ExecutionOutcome(
            status=TransactionStatus.PENDING,
            status_code=StatusCode.PENDING,
            status_reason=message_for(StatusCode.PENDING),
            instruction=instruction,
            accounts=involved_account_views(accounts, instruction),
        )
    return ExecutionOutcome(
        status=TransactionStatus.SUCCESSFUL,
        status_code=StatusCode.SUCCESSFUL,
        status_reason=message_for(StatusCode.SUCCESSFUL),
        instruction=instruction,
        accounts=involved_account_views(accounts, instruction, transfer=True),
    )


def involved_account_views(
    accounts: Sequence[Account], instruction: Instruction, transfer: bool = False,
) -> tuple[AccountView, ...]:
    """Scan the snapshot in order; one view per entry naming either side.

    Balances come from the resolved account (first entry with the id), the
    same record the validator checked, so duplicate ids report consistently.
    """
    resolved = {
        instruction.debit_account: (
            find_account(accounts, instruction.debit_account), -instruction.amount,
        ),
        instruction.credit_account: (
            find_account(accounts, instruction.credit_account), instruction.amount,
        ),
    }
    views = []
    for account in accounts:
        if account.id not in resolved:
            continue
        source, delta = resolved[account.id]
        views.append(AccountView(
            id=source.id,
            balance=source.balance + delta if transfer else source.balance,
            balance_before=source.balance,
            currency=source.currency,
        ))
    return tuple(views)


def apply_outcome(
    accounts: Sequence[Account], outcome: ExecutionOutcome,
) -> list[Account]:
    """Caller-side write-back: new snapshot with the outcome's balances applied."""
    balances = {view.id: view.balance for view in outcome.accounts}
    return [
        Account(
            id=account.id,
            balance=balances.get(account.id, account.balance),
            currency=account.currency,
        )
        for account in accounts
    ]
