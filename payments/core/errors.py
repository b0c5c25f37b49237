"""Error Hierarchy — typed, categorized exceptions for the HTTP boundary.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Pipeline stages never raise these: they return tagged results, the API layer
      raises InstructionFailedError when an outcome is failed
    - to_response() produces the REST envelope; failed outcomes ride along under "data"
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with PaymentsError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone

from payments.core.domain_types import StatusCode


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    instruction_type: str | None = None
    data: dict[str, Any] | None = None


class PaymentsError(Exception):
    """Base exception for all payment service errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
            },
            "data": self.context.data,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

# Codes raised before any account is consulted
_SYNTAX_CODES = frozenset(code.value for code in (
    StatusCode.MISSING_KEYWORD,
    StatusCode.WRONG_KEYWORD_ORDER,
    StatusCode.MALFORMED_INSTRUCTION,
    StatusCode.INVALID_AMOUNT,
    StatusCode.INVALID_DATE,
    StatusCode.INVALID_ACCOUNT_ID,
))


class InstructionFailedError(PaymentsError):
    """Pipeline returned status=failed. Carries the full uniform response."""
    def __init__(self, outcome: dict, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.data = outcome
        ctx.instruction_type = outcome.get("type")
        code = outcome["status_code"]
        super().__init__(
            outcome["status_reason"], code,
            ErrorCategory.VALIDATION if code in _SYNTAX_CODES
            else ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )
