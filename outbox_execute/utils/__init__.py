from outbox_execute.utils.transaction_utils import sign_and_send_transaction
from outbox_execute.utils.tx_hash import validate_transaction_hash

__all__ = [
    "sign_and_send_transaction",
    "validate_transaction_hash",
]
