import logging

from web3 import Web3
from web3.types import TxReceipt

from outbox_execute.bridge import ArbitrumBridge
from outbox_execute.exceptions import ExecutionFailedError
from outbox_execute.types import OutgoingMessage

logger = logging.getLogger("outbox_execute.actions")


def execute_outgoing_message(bridge: ArbitrumBridge, message: OutgoingMessage) -> dict[str, TxReceipt]:
    """
    Executes a confirmed outgoing message in its L1 outbox entry.

    The bridge retrieves the Merkle proof from the L2 node and submits the
    outbox execution transaction signed by the L1 wallet.

    Args:
        bridge (ArbitrumBridge): Bridge client connected to L1 and L2.
        message (OutgoingMessage): A message whose state is CONFIRMED.

    Returns:
        dict: Contains transaction receipt of the execution transaction.
    """

    tx_hash = bridge.trigger_l2_to_l1_transaction(message.batch_number, message.index_in_batch)
    tx_receipt = bridge.wait_for_receipt(tx_hash)

    if tx_receipt["status"] != 1:
        raise ExecutionFailedError(f"Outbox execution reverted: {Web3.to_hex(tx_receipt['transactionHash'])}")

    logger.info(f"Done! Your transaction is executed: {Web3.to_hex(tx_receipt['transactionHash'])}")

    # Return transaction receipt
    return {
        "transaction_receipt": tx_receipt,
    }
