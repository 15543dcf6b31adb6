import logging
import time
from dataclasses import dataclass

from outbox_execute.bridge import ArbitrumBridge
from outbox_execute.consts import DEFAULT_POLL_INTERVAL_SECONDS
from outbox_execute.exceptions import MessageAlreadyExecutedError, MessageNotFoundError
from outbox_execute.types import OutgoingMessage, OutgoingMessageState

logger = logging.getLogger("outbox_execute.actions")


@dataclass
class WaitParams:
    """Data class to store confirmation polling parameters."""

    poll_interval: float = DEFAULT_POLL_INTERVAL_SECONDS  # Seconds between two state queries


def wait_for_confirmation(bridge: ArbitrumBridge, message: OutgoingMessage, params: WaitParams) -> int:
    """
    Blocks until an outgoing message is confirmed and can be executed.

    A message only becomes confirmed after the rollup's dispute period, so this
    may poll for days. There is no timeout; stop the process to give up.

    Args:
        bridge (ArbitrumBridge): Bridge client connected to L1 and L2.
        message (OutgoingMessage): Message to wait for.
        params (WaitParams): Polling parameters.

    Returns:
        int: Number of state queries performed.
    """

    logger.info(
        f"Waiting for message to be confirmed: Batchnumber: {message.batch_number}, "
        f"IndexInBatch {message.index_in_batch}"
    )

    polls = 0
    while True:
        state = bridge.get_outgoing_message_state(message.batch_number, message.index_in_batch)
        polls += 1

        if state == OutgoingMessageState.CONFIRMED:
            logger.info("Transaction confirmed! Trying to execute now")
            return polls

        if state == OutgoingMessageState.NOT_FOUND:
            raise MessageNotFoundError("Message not found; something strange and bad happened")

        if state == OutgoingMessageState.EXECUTED:
            raise MessageAlreadyExecutedError("Message already executed! Nothing else to do here")

        logger.info(f"Message not yet confirmed; we'll wait {params.poll_interval}s and try again")
        time.sleep(params.poll_interval)
