from outbox_execute.actions.execute_message import execute_outgoing_message
from outbox_execute.actions.find_outgoing_message import FindMessageParams, find_outgoing_message
from outbox_execute.actions.wait_for_confirmation import WaitParams, wait_for_confirmation

__all__ = [
    "execute_outgoing_message",
    "FindMessageParams",
    "find_outgoing_message",
    "WaitParams",
    "wait_for_confirmation",
]
