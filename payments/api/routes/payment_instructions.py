"""Payment Instructions — POST endpoint running the parse → validate → execute pipeline.

Invariants:
    - pending / successful → 200 with the uniform response body
    - failed (any stage) → InstructionFailedError → 400 envelope, response under "data"
    - One completion log line per request (when settings.log_requests)

Design Decisions:
    - Route is a thin shell: snapshot conversion + pipeline call + HTTP mapping
    - The pipeline returns new balances; nothing is written back (no persistence layer)
"""

import logging

from fastapi import APIRouter, status

from payments.config import get_settings
from payments.core.errors import InstructionFailedError
from payments.schemas.payment_instruction import (
    PaymentInstructionRequest, PaymentInstructionResponse,
)
from payments.services.process_instruction import process_payment_instruction

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/payment-instructions", tags=["payment-instructions"])


@router.post(
    "", response_model=PaymentInstructionResponse,
    status_code=status.HTTP_200_OK,
)
async def create_payment_instruction(body: PaymentInstructionRequest):
    """Parse, validate and execute one payment instruction."""
    outcome = process_payment_instruction(body.instruction, body.to_accounts())
    response = outcome.to_dict()

    if get_settings().log_requests:
        logger.info(
            "payment-instruction-request-completed",
            extra={
                "status_code": outcome.status_code.value,
                "instruction_type": response["type"],
                "path": router.prefix,
            },
        )

    if outcome.is_failed:
        raise InstructionFailedError(response)
    return response
