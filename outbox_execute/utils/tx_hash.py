"""Validation of user supplied transaction hashes."""

from outbox_execute.exceptions import InvalidTransactionHashError

TX_HASH_LENGTH = 66  # "0x" followed by 32 bytes in hex
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def validate_transaction_hash(tx_hash: str) -> str:
    """Check that ``tx_hash`` looks like a transaction hash and return it lower-cased.

    Raises:
        InvalidTransactionHashError: If the hash is empty, lacks the 0x prefix,
            has the wrong length or contains non-hex characters
    """
    if not tx_hash:
        raise InvalidTransactionHashError(
            "Provide a transaction hash of an L2 transaction that sends an L2 to L1 message"
        )

    tx_hash = tx_hash.strip()
    if not tx_hash.startswith("0x") or len(tx_hash) != TX_HASH_LENGTH:
        raise InvalidTransactionHashError(f"Hmm, {tx_hash} doesn't look like a txn hash...")

    if not set(tx_hash[2:]) <= HEX_DIGITS:
        raise InvalidTransactionHashError(f"Transaction hash {tx_hash} contains non-hex characters")

    return tx_hash.lower()
