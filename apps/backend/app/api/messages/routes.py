"""Message API routes."""

from fastapi import APIRouter

from app.core.dependencies import CurrentUsername, MessageLedgerDep
from app.schemas.messages import MessageCreateRequest, MessageRecord

router = APIRouter()


@router.post("", response_model=MessageRecord)
async def send_message(
    payload: MessageCreateRequest,
    current_username: CurrentUsername,
    ledger: MessageLedgerDep,
) -> MessageRecord:
    """
    Send a message from the logged-in user.

    Args:
        payload: Recipient username and message body.
        current_username: Sender, taken from the bearer token.
        ledger: Message ledger bound to the request session.

    Returns:
        The stored message.
    """
    return await ledger.create(current_username, payload.to_username, payload.body)
