"""Client for the Arbitrum outbox: outgoing message lookup, state and execution."""

from typing import Any, Optional

import logging
import time

from eth_account.signers.local import LocalAccount
from hexbytes import HexBytes
from web3 import Web3
from web3.exceptions import TransactionNotFound, Web3Exception
from web3.types import TxReceipt

from outbox_execute.consts import (
    ARB_SYS_ADDRESS,
    NODE_INTERFACE_ADDRESS,
    PROOF_MAX_ATTEMPTS,
    PROOF_RETRY_DELAY_SECONDS,
)
from outbox_execute.exceptions import ProofNotAvailableError
from outbox_execute.types import MessageBatchProof, OutgoingMessage, OutgoingMessageState
from outbox_execute.utils.transaction_utils import sign_and_send_transaction

logger = logging.getLogger("outbox_execute.bridge")

L2_TO_L1_TRANSACTION_EVENT_SIG = Web3.keccak(
    text="L2ToL1Transaction(address,address,uint256,uint256,uint256,uint256,uint256,uint256,uint256,bytes)"
)

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class ArbitrumBridge:
    """
    Bridge between an L1 chain and an Arbitrum (classic) rollup.

    Reads outgoing messages from L2 receipts, computes their outbox state from
    on-chain data and executes confirmed messages on L1. Proofs come from the
    L2 node's NodeInterface precompile.
    """

    def __init__(
        self,
        l1_w3: Web3,
        l2_w3: Web3,
        l1_account: LocalAccount,
        outbox_addresses: list[str],
        abis: dict,
    ):
        self.l1_w3 = l1_w3
        self.l2_w3 = l2_w3
        self.l1_account = l1_account
        # Oldest first, as listed in the configuration
        self.outbox_addresses = [Web3.to_checksum_address(address) for address in outbox_addresses]
        self.abis = abis

        self.arb_sys = l2_w3.eth.contract(
            address=Web3.to_checksum_address(ARB_SYS_ADDRESS), abi=abis["arb_sys_abi"]
        )
        self.node_interface = l2_w3.eth.contract(
            address=Web3.to_checksum_address(NODE_INTERFACE_ADDRESS), abi=abis["node_interface_abi"]
        )

    def _outbox(self, outbox_address: str) -> Any:
        return self.l1_w3.eth.contract(address=outbox_address, abi=self.abis["outbox_abi"])

    def get_transaction_receipt(self, tx_hash: str) -> Optional[TxReceipt]:
        """Return the L2 receipt of ``tx_hash``, or None if the node does not know it."""
        try:
            return self.l2_w3.eth.get_transaction_receipt(tx_hash)  # type: ignore[arg-type]
        except TransactionNotFound:
            return None

    def get_withdrawals_in_l2_transaction(self, tx_receipt: TxReceipt) -> list[OutgoingMessage]:
        """
        Decode the outgoing messages emitted by an L2 transaction.

        Args:
            tx_receipt: L2 transaction receipt containing logs

        Returns:
            list[OutgoingMessage]: One entry per ArbSys L2ToL1Transaction log, in log order
        """
        arb_sys_address = self.arb_sys.address.lower()

        # Filter logs for the ArbSys event; other contracts may reuse the signature
        filtered_logs = [
            log
            for log in tx_receipt["logs"]
            if log["address"].lower() == arb_sys_address
            and log["topics"]
            and HexBytes(log["topics"][0]) == L2_TO_L1_TRANSACTION_EVENT_SIG
        ]

        messages = []
        for log in filtered_logs:
            args = self.arb_sys.events.L2ToL1Transaction().process_log(log)["args"]
            messages.append(
                OutgoingMessage(
                    batch_number=int(args["batchNumber"]),
                    index_in_batch=int(args["indexInBatch"]),
                    caller=args["caller"],
                    destination=args["destination"],
                    unique_id=int(args["uniqueId"]),
                    arb_block_num=int(args["arbBlockNum"]),
                    eth_block_num=int(args["ethBlockNum"]),
                    timestamp=int(args["timestamp"]),
                    callvalue=int(args["callvalue"]),
                    data=bytes(args["data"]),
                )
            )

        return messages

    def outbox_entry_exists(self, batch_number: int, outbox_address: str) -> bool:
        return bool(self._outbox(outbox_address).functions.outboxEntryExists(batch_number).call())

    def get_outbox_address_by_batch_num(self, batch_number: int) -> Optional[str]:
        """Find the outbox holding ``batch_number``; defaults to the newest outbox."""
        if not self.outbox_addresses:
            return None

        for outbox_address in reversed(self.outbox_addresses):
            if self.outbox_entry_exists(batch_number, outbox_address):
                return outbox_address

        # Not created yet: new batches land in the newest outbox
        return self.outbox_addresses[-1]

    def try_get_proof_once(self, batch_number: int, index_in_batch: int) -> Optional[MessageBatchProof]:
        """Ask the L2 node for the message proof; None if it cannot build one yet."""
        try:
            result = self.node_interface.functions.lookupMessageBatchProof(batch_number, index_in_batch).call()
        except (Web3Exception, ValueError) as e:
            logger.debug(f"Proof lookup failed for batch {batch_number} index {index_in_batch}: {e}")
            return None

        proof, path, l2_sender, l1_dest, l2_block, l1_block, timestamp, amount, calldata_for_l1 = result
        return MessageBatchProof(
            proof=[bytes(node) for node in proof],
            path=int(path),
            l2_sender=l2_sender,
            l1_dest=l1_dest,
            l2_block=int(l2_block),
            l1_block=int(l1_block),
            timestamp=int(timestamp),
            amount=int(amount),
            calldata_for_l1=bytes(calldata_for_l1),
        )

    def try_get_proof(
        self,
        batch_number: int,
        index_in_batch: int,
        retry_delay: float = PROOF_RETRY_DELAY_SECONDS,
        max_attempts: int = PROOF_MAX_ATTEMPTS,
    ) -> MessageBatchProof:
        """
        Retry ``try_get_proof_once`` until the node returns a proof.

        Raises:
            ProofNotAvailableError: If no proof was returned after ``max_attempts`` attempts
        """
        for attempt in range(1, max_attempts + 1):
            proof = self.try_get_proof_once(batch_number, index_in_batch)
            if proof is not None:
                return proof

            if attempt < max_attempts:
                logger.info(f"Proof not available yet (attempt {attempt}/{max_attempts}), retrying in {retry_delay}s")
                time.sleep(retry_delay)

        raise ProofNotAvailableError(
            f"No proof for batch {batch_number} index {index_in_batch} after {max_attempts} attempts"
        )

    def message_has_executed(self, batch_number: int, path: int, outbox_address: str) -> bool:
        outbox_entry_address = self._outbox(outbox_address).functions.outboxEntries(batch_number).call()
        if int(outbox_entry_address, 16) == 0:
            return False

        outbox_entry = self.l1_w3.eth.contract(
            address=Web3.to_checksum_address(outbox_entry_address), abi=self.abis["outbox_entry_abi"]
        )
        return bool(outbox_entry.functions.spentOutput(path.to_bytes(32, "big")).call())

    def get_outgoing_message_state(self, batch_number: int, index_in_batch: int) -> OutgoingMessageState:
        """
        Compute the outbox state of an outgoing message.

        Args:
            batch_number: Batch containing the message
            index_in_batch: Position of the message within the batch

        Returns:
            OutgoingMessageState: NOT_FOUND if the message cannot be located or an RPC call
            fails, UNCONFIRMED until its outbox entry exists, CONFIRMED once executable and
            EXECUTED once spent
        """
        try:
            outbox_address = self.get_outbox_address_by_batch_num(batch_number)
            if outbox_address is None:
                return OutgoingMessageState.NOT_FOUND

            proof = self.try_get_proof_once(batch_number, index_in_batch)
            if proof is None:
                return OutgoingMessageState.UNCONFIRMED

            if self.message_has_executed(batch_number, proof.path, outbox_address):
                return OutgoingMessageState.EXECUTED

            if self.outbox_entry_exists(batch_number, outbox_address):
                return OutgoingMessageState.CONFIRMED
            return OutgoingMessageState.UNCONFIRMED
        except (Web3Exception, ValueError) as e:
            logger.warning(f"Could not read state of batch {batch_number} index {index_in_batch}: {e}")
            return OutgoingMessageState.NOT_FOUND

    def trigger_l2_to_l1_transaction(
        self, batch_number: int, index_in_batch: int, single_attempt: bool = False
    ) -> HexBytes:
        """
        Execute an outgoing message on the L1 outbox.

        Args:
            batch_number: Batch containing the message
            index_in_batch: Position of the message within the batch
            single_attempt: Fail at once instead of retrying when the proof is not available

        Returns:
            HexBytes: Hash of the L1 execution transaction

        Raises:
            ProofNotAvailableError: If the L2 node cannot produce the proof
        """
        if single_attempt:
            proof = self.try_get_proof_once(batch_number, index_in_batch)
            if proof is None:
                raise ProofNotAvailableError(f"No proof for batch {batch_number} index {index_in_batch}")
        else:
            proof = self.try_get_proof(batch_number, index_in_batch)

        outbox_address = self.get_outbox_address_by_batch_num(batch_number)
        if outbox_address is None:
            raise ProofNotAvailableError("No outbox configured to execute the message on")

        outbox = self._outbox(outbox_address)
        execute_call = outbox.functions.executeTransaction(
            batch_number,
            proof.proof,
            proof.path,
            proof.l2_sender,
            proof.l1_dest,
            proof.l2_block,
            proof.l1_block,
            proof.timestamp,
            proof.amount,
            proof.calldata_for_l1,
        )

        tx_hash = sign_and_send_transaction(self.l1_w3, self.l1_account, execute_call)
        logger.info(f"Submitted outbox execution on {outbox_address}: {Web3.to_hex(tx_hash)}")
        return tx_hash

    def wait_for_receipt(self, tx_hash: HexBytes) -> TxReceipt:
        return self.l1_w3.eth.wait_for_transaction_receipt(tx_hash)
