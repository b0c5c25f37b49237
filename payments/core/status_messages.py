"""Status Messages — static code-to-reason lookup used by every stage.

Invariants:
    - Every StatusCode has exactly one message (checked by tests)
    - Messages never embed request data (account ids, balances)
"""

from payments.core.domain_types import StatusCode


STATUS_MESSAGES: dict[StatusCode, str] = {
    StatusCode.MISSING_KEYWORD: "Missing or unrecognized instruction keyword",
    StatusCode.WRONG_KEYWORD_ORDER: "Instruction keywords are in the wrong order",
    StatusCode.MALFORMED_INSTRUCTION: "Malformed instruction: a required field is missing",
    StatusCode.INVALID_AMOUNT: "Amount must be a positive integer",
    StatusCode.INVALID_DATE: "Invalid execution date. Expected format YYYY-MM-DD",
    StatusCode.INVALID_ACCOUNT_ID: (
        "Account ID may only contain letters, numbers, hyphens, periods and @"
    ),
    StatusCode.ACCOUNT_NOT_FOUND: "Account not found",
    StatusCode.SAME_ACCOUNT: "Debit and credit accounts cannot be the same",
    StatusCode.UNSUPPORTED_CURRENCY: "Unsupported currency. Only NGN, USD, GBP, GHS are supported",
    StatusCode.CURRENCY_MISMATCH: "Currency mismatch between accounts and instruction",
    StatusCode.INSUFFICIENT_FUNDS: "Insufficient funds in debit account",
    StatusCode.PENDING: "Transaction scheduled for future execution",
    StatusCode.SUCCESSFUL: "Transaction executed successfully",
}


def message_for(code: StatusCode) -> str:
    return STATUS_MESSAGES[code]
