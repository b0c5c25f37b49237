"""Status Messages — every code has exactly one static reason."""

from payments.core.domain_types import StatusCode
from payments.core.status_messages import STATUS_MESSAGES, message_for


def test_every_status_code_has_a_message():
    assert set(STATUS_MESSAGES) == set(StatusCode)
    assert all(message.strip() for message in STATUS_MESSAGES.values())


def test_accepted_messages():
    assert message_for(StatusCode.SUCCESSFUL) == "Transaction executed successfully"
    assert message_for(StatusCode.PENDING) == (
        "Transaction scheduled for future execution"
    )
