"""Payment Instruction Schemas — request body and uniform response shape.

Invariants:
    - AccountIn.balance is an integer in minor units (fractions rejected by pydantic)
    - Account order in the request is preserved into the core snapshot
    - PaymentInstructionResponse mirrors ExecutionOutcome.to_dict() field for field
"""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

from payments.core.domain_types import Account


class AccountIn(BaseModel):
    """One snapshot entry supplied by the caller."""
    id: str = Field(min_length=1)
    balance: int
    currency: str = Field(min_length=1)

    def to_account(self) -> Account:
        return Account(id=self.id, balance=self.balance, currency=self.currency)


class PaymentInstructionRequest(BaseModel):
    """POST /payment-instructions body."""
    instruction: str
    accounts: list[AccountIn] = Field(default_factory=list)

    def to_accounts(self) -> list[Account]:
        return [account.to_account() for account in self.accounts]


class AccountViewResponse(BaseModel):
    id: str
    balance: int
    balance_before: int
    currency: str


class PaymentInstructionResponse(BaseModel):
    """Uniform result — identical shape whichever pipeline stage stopped."""
    type: Literal["DEBIT", "CREDIT"] | None
    amount: int | None
    currency: str | None
    debit_account: str | None
    credit_account: str | None
    execute_by: date | None
    status: Literal["failed", "pending", "successful"]
    status_code: str
    status_reason: str
    accounts: list[AccountViewResponse]
