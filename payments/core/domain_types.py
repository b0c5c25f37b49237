"""Domain Types — instruction, account and outcome records shared by every stage.

Invariants:
    - Instruction, Account and AccountView are frozen: no stage mutates them
    - amount and balances are integers in the currency's minor unit
    - All valid states encoded as Enums — no raw string matching
    - SUPPORTED_CURRENCIES is the single source of truth for CU02

Design Decisions:
    - str Enums: serialize to JSON without custom encoders (API returns the values as-is)
    - Frozen dataclasses over dicts: stages exchange typed records, the shell converts to JSON
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum


# ─── Enums ───────────────────────────────────────────────────────

class InstructionType(str, Enum):
    """Leading keyword of the instruction text."""
    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class TransactionStatus(str, Enum):
    """Terminal status of one pipeline run."""
    FAILED = "failed"
    PENDING = "pending"
    SUCCESSFUL = "successful"


class StatusCode(str, Enum):
    """Exhaustive outcome codes. Callers branch on these, never on reason text."""
    # Syntax
    MISSING_KEYWORD = "SY01"
    WRONG_KEYWORD_ORDER = "SY02"
    MALFORMED_INSTRUCTION = "SY03"
    INVALID_AMOUNT = "AM01"
    INVALID_DATE = "DT01"
    INVALID_ACCOUNT_ID = "AC04"
    # Business rules
    ACCOUNT_NOT_FOUND = "AC03"
    SAME_ACCOUNT = "AC02"
    UNSUPPORTED_CURRENCY = "CU02"
    CURRENCY_MISMATCH = "CU01"
    INSUFFICIENT_FUNDS = "AC01"
    # Accepted
    PENDING = "AP02"
    SUCCESSFUL = "AP00"


SUPPORTED_CURRENCIES: tuple[str, ...] = ("NGN", "USD", "GBP", "GHS")


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class Instruction:
    """Structured transfer command recognized from free text."""
    type: InstructionType
    amount: int
    currency: str
    debit_account: str
    credit_account: str
    execute_by: date | None = None

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "amount": self.amount,
            "currency": self.currency,
            "debit_account": self.debit_account,
            "credit_account": self.credit_account,
            "execute_by": (
                self.execute_by.isoformat() if self.execute_by else None
            ),
        }


@dataclass(frozen=True)
class Account:
    """Caller-owned account record from the snapshot."""
    id: str
    balance: int
    currency: str


@dataclass(frozen=True)
class AccountView:
    """Involved account as reported back: balance after the decision + before it."""
    id: str
    balance: int
    balance_before: int
    currency: str

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "balance": self.balance,
            "balance_before": self.balance_before,
            "currency": self.currency,
        }


@dataclass(frozen=True)
class ExecutionOutcome:
    """Terminal output of the pipeline. Never fed back in."""
    status: TransactionStatus
    status_code: StatusCode
    status_reason: str
    instruction: Instruction | None = None
    accounts: tuple[AccountView, ...] = field(default_factory=tuple)

    @property
    def is_failed(self) -> bool:
        return self.status == TransactionStatus.FAILED

    def to_dict(self) -> dict:
        """Uniform response shape, whichever stage stopped."""
        if self.instruction is not None:
            fields = self.instruction.to_dict()
        else:
            fields = {
                "type": None, "amount": None, "currency": None,
                "debit_account": None, "credit_account": None,
                "execute_by": None,
            }
        return {
            **fields,
            "status": self.status.value,
            "status_code": self.status_code.value,
            "status_reason": self.status_reason,
            "accounts": [view.to_dict() for view in self.accounts],
        }
