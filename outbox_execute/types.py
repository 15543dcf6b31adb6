"""Types describing Arbitrum outgoing (L2-to-L1) messages."""

from dataclasses import dataclass
from enum import IntEnum


class OutgoingMessageState(IntEnum):
    """Enum representing the lifecycle of an outgoing message in the outbox"""

    NOT_FOUND = 0
    UNCONFIRMED = 1
    CONFIRMED = 2
    EXECUTED = 3


@dataclass(frozen=True)
class OutgoingMessage:
    """An outgoing message as emitted by the ArbSys L2ToL1Transaction event."""

    batch_number: int
    index_in_batch: int
    caller: str
    destination: str
    unique_id: int
    arb_block_num: int
    eth_block_num: int
    timestamp: int
    callvalue: int
    data: bytes


@dataclass(frozen=True)
class MessageBatchProof:
    """Outbox proof data returned by NodeInterface.lookupMessageBatchProof."""

    proof: list[bytes]
    path: int
    l2_sender: str
    l1_dest: str
    l2_block: int
    l1_block: int
    timestamp: int
    amount: int
    calldata_for_l1: bytes
