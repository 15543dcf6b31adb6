import logging
from dataclasses import dataclass

from outbox_execute.bridge import ArbitrumBridge
from outbox_execute.exceptions import NoOutgoingMessagesError, TransactionNotFoundError
from outbox_execute.types import OutgoingMessage

logger = logging.getLogger("outbox_execute.actions")


@dataclass
class FindMessageParams:
    """Data class to store outgoing message lookup parameters."""

    tx_hash: str  # Hash of the L2 transaction that sent the message (e.g. via ArbSys.sendTxToL1)
    message_index: int = 0  # Which outgoing message of the transaction to use


def find_outgoing_message(bridge: ArbitrumBridge, params: FindMessageParams) -> OutgoingMessage:
    """
    Finds an outgoing message emitted by an L2 transaction.

    Args:
        bridge (ArbitrumBridge): Bridge client connected to L1 and L2.
        params (FindMessageParams): Transaction hash and index of the message within the transaction.

    Returns:
        OutgoingMessage: The selected message; batch number and index in batch identify it in the outbox.
    """

    # Find the Arbitrum transaction from the hash provided
    tx_receipt = bridge.get_transaction_receipt(params.tx_hash)
    if not tx_receipt:
        raise TransactionNotFoundError(f"No Arbitrum transaction found with provided txn hash: {params.tx_hash}")

    # Retrieve the outgoing messages from the L2 event logs
    messages = bridge.get_withdrawals_in_l2_transaction(tx_receipt)
    if not messages:
        raise NoOutgoingMessagesError(f"Txn {params.tx_hash} did not initiate an outgoing message")

    if not 0 <= params.message_index < len(messages):
        raise NoOutgoingMessagesError(
            f"Txn {params.tx_hash} initiated {len(messages)} outgoing message(s), "
            f"index {params.message_index} is out of range"
        )

    if len(messages) > 1:
        logger.info(f"Txn {params.tx_hash} initiated {len(messages)} outgoing messages, using #{params.message_index}")

    return messages[params.message_index]
