"""Instruction Validation — ordered business-rule checks against the account snapshot.

Invariants:
    - validate_instruction is PURE: never mutates the instruction or the accounts
    - Checks run in a fixed order, first failure wins:
      AM01 → AC03 → AC02 → CU02 → CU01 → AC01
    - Same inputs always produce the same result

Design Decisions:
    - Each rule is an independent predicate over a shared _CheckContext; _ACCOUNT_CHECKS
      is the single place the precedence lives (order decides the code surfaced for
      multiply-invalid input)
    - reason carries request detail for logs; the API reason comes from STATUS_MESSAGES
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from payments.core.domain_types import (
    Account, Instruction, StatusCode, SUPPORTED_CURRENCIES,
)


@dataclass(frozen=True)
class ValidationResult:
    """Tagged validator output. code is None when valid."""
    code: StatusCode | None = None
    reason: str | None = None

    @property
    def valid(self) -> bool:
        return self.code is None


VALID = ValidationResult()


@dataclass(frozen=True)
class _CheckContext:
    instruction: Instruction
    debit: Account
    credit: Account


def find_account(accounts: Sequence[Account], account_id: str) -> Account | None:
    """First snapshot entry with this id."""
    return next((account for account in accounts if account.id == account_id), None)


def validate_instruction(
    instruction: Instruction, accounts: Sequence[Account],
) -> ValidationResult:
    """Run every rule in precedence order. Returns VALID or the first failure."""
    amount_failure = check_amount(instruction.amount)
    if amount_failure:
        return amount_failure

    debit = find_account(accounts, instruction.debit_account)
    if debit is None:
        return _fail(
            StatusCode.ACCOUNT_NOT_FOUND,
            f"Account not found: {instruction.debit_account}",
        )
    credit = find_account(accounts, instruction.credit_account)
    if credit is None:
        return _fail(
            StatusCode.ACCOUNT_NOT_FOUND,
            f"Account not found: {instruction.credit_account}",
        )

    ctx = _CheckContext(instruction=instruction, debit=debit, credit=credit)
    for check in _ACCOUNT_CHECKS:
        failure = check(ctx)
        if failure:
            return failure
    return VALID


# ─── Rules ───────────────────────────────────────────────────────

def check_amount(amount: object) -> ValidationResult | None:
    # bool is an int subclass; True must not pass as 1
    if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
        return _fail(StatusCode.INVALID_AMOUNT, "Amount must be a positive integer")
    return None


def _check_distinct_accounts(ctx: _CheckContext) -> ValidationResult | None:
    if ctx.debit.id == ctx.credit.id:
        return _fail(
            StatusCode.SAME_ACCOUNT,
            "Debit and credit accounts cannot be the same",
        )
    return None


def _check_currency_supported(ctx: _CheckContext) -> ValidationResult | None:
    if ctx.instruction.currency not in SUPPORTED_CURRENCIES:
        return _fail(
            StatusCode.UNSUPPORTED_CURRENCY,
            f"Unsupported currency {ctx.instruction.currency}. "
            f"Only {', '.join(SUPPORTED_CURRENCIES)} are supported",
        )
    return None


def _check_currency_match(ctx: _CheckContext) -> ValidationResult | None:
    debit, credit = ctx.debit, ctx.credit
    if debit.currency != credit.currency:
        return _fail(
            StatusCode.CURRENCY_MISMATCH,
            f"Account currency mismatch: {debit.id} has {debit.currency}, "
            f"{credit.id} has {credit.currency}",
        )
    if debit.currency != ctx.instruction.currency:
        return _fail(
            StatusCode.CURRENCY_MISMATCH,
            f"Instruction currency {ctx.instruction.currency} does not match "
            f"account currency {debit.currency}",
        )
    return None


def _check_sufficient_funds(ctx: _CheckContext) -> ValidationResult | None:
    debit, instruction = ctx.debit, ctx.instruction
    if debit.balance < instruction.amount:
        return _fail(
            StatusCode.INSUFFICIENT_FUNDS,
            f"Insufficient funds in account {debit.id}: has {debit.balance} "
            f"{debit.currency}, needs {instruction.amount} {instruction.currency}",
        )
    return None


_ACCOUNT_CHECKS: tuple[Callable[[_CheckContext], ValidationResult | None], ...] = (
    _check_distinct_accounts,
    _check_currency_supported,
    _check_currency_match,
    _check_sufficient_funds,
)


def _fail(code: StatusCode, reason: str) -> ValidationResult:
    return ValidationResult(code=code, reason=reason)
